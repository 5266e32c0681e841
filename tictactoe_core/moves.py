from __future__ import annotations

import os
from typing import List

from .board import calculate_winner, cell_to_row_col, check_index
from .state import GameState, HistoryStep


def _debug_enabled() -> bool:
    return os.getenv('TICTACTOE_DEBUG', '0').lower() in ('1', 'true', 'yes', 'on')


def is_legal(state: GameState, index: int) -> bool:
    """True if apply_move would accept a mark at `index` from the current cursor."""
    check_index(index)
    board = state.current.board
    if calculate_winner(board) is not None:
        return False
    return board.cells[index] is None


def legal_moves(state: GameState) -> List[int]:
    """Lists the cells the next player may take."""
    if calculate_winner(state.current.board) is not None:
        return []
    return state.current.board.empty_cells()


def apply_move(state: GameState, index: int) -> GameState:
    """
    Places the next player's mark at `index` and returns the new state.

    Any history after the cursor is discarded before the new step is appended.
    An occupied cell or a board that already has a winner leaves the state
    unchanged (the same object is returned).
    """
    if not is_legal(state, index):
        if _debug_enabled():
            print(f"[move] ignored cell {index} at step {state.step_number}")
        return state
    history = state.history[:state.step_number + 1]
    mark = state.next_player
    row, col = cell_to_row_col(index)
    step = HistoryStep(board=history[-1].board.with_mark(index, mark), row=row, col=col, player=mark)
    if _debug_enabled():
        dropped = len(state.history) - len(history)
        print(f"[move] {mark} -> cell {index} (row {row}, col {col}); dropped {dropped} future step(s)")
    return GameState(history + (step,), len(history), state.sorted_asc)


def jump_to(state: GameState, step: int) -> GameState:
    """Moves the cursor to a past (or future) step without touching history."""
    if isinstance(step, bool) or not isinstance(step, int) or not 0 <= step < len(state.history):
        raise ValueError(f'step out of range: {step!r} (history has {len(state.history)} steps)')
    if _debug_enabled():
        print(f"[jump] {state.step_number} -> {step}")
    return state.with_cursor(step)


def toggle_moves(state: GameState) -> GameState:
    """Flips the move list between ascending and descending order."""
    return GameState(state.history, state.step_number, not state.sorted_asc)
