from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .board import Board, Mark, calculate_winner, cell_to_row_col


@dataclass(frozen=True)
class HistoryStep:
    """One board snapshot and the move that produced it (None fields for the start)."""
    board: Board
    row: Optional[int] = None  # 1-based
    col: Optional[int] = None  # 1-based
    player: Optional[Mark] = None


@dataclass(frozen=True)
class GameState:
    """Append-only history of snapshots plus the cursor currently shown."""
    history: Tuple[HistoryStep, ...]
    step_number: int = 0
    sorted_asc: bool = True

    @classmethod
    def new(cls) -> 'GameState':
        return cls(history=(HistoryStep(board=Board.empty()),))

    @property
    def current(self) -> HistoryStep:
        return self.history[self.step_number]

    @property
    def x_is_next(self) -> bool:
        return self.step_number % 2 == 0

    @property
    def next_player(self) -> Mark:
        return 'X' if self.x_is_next else 'O'

    def with_cursor(self, step: int) -> 'GameState':
        return GameState(self.history, step, self.sorted_asc)


def verify_state(state: GameState) -> GameState:
    """
    Checks the history invariants of a state built from outside input.

    The first step must be an empty board, and every later step must add
    exactly one mark, alternating X then O, to the board before it, with
    row/col naming that cell. The cursor must point into the history.
    Raises ValueError on the first violation and returns the state otherwise.
    """
    if not state.history:
        raise ValueError('history is empty')
    first = state.history[0]
    if any(cell is not None for cell in first.board.cells):
        raise ValueError('history must start from an empty board')
    if (first.row, first.col, first.player) != (None, None, None):
        raise ValueError('the first step must not carry a move')
    for i in range(1, len(state.history)):
        prev, step = state.history[i - 1].board, state.history[i]
        if calculate_winner(prev) is not None:
            raise ValueError(f'step {i} follows a finished game')
        changed = [j for j in range(len(prev.cells)) if prev.cells[j] != step.board.cells[j]]
        expected = 'X' if i % 2 == 1 else 'O'
        if len(changed) != 1:
            raise ValueError(f'step {i} must change exactly one cell, changed {len(changed)}')
        j = changed[0]
        if prev.cells[j] is not None or step.board.cells[j] != expected or step.player != expected:
            raise ValueError(f'step {i} must place {expected} on an empty cell')
        if (step.row, step.col) != cell_to_row_col(j):
            raise ValueError(f'step {i} row/col do not match cell {j}')
    if not 0 <= state.step_number < len(state.history):
        raise ValueError(f'step_number out of range: {state.step_number}')
    return state
