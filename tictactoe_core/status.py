from __future__ import annotations

from typing import Any, Dict, List, Optional

from .board import Board, Line, calculate_winner
from .state import GameState, HistoryStep

IN_PROGRESS = 'in-progress'
WON = 'won'
DRAWN = 'drawn'


def game_status(board: Board, x_is_next: bool) -> str:
    """Status line for a board: winner first, then draw, then whose turn it is."""
    result = calculate_winner(board)
    if result is not None:
        return f"Winner: {result[0]}"
    if board.is_full():
        return "It's a draw!"
    return "Next player: " + ('X' if x_is_next else 'O')


def outcome(state: GameState) -> str:
    board = state.current.board
    if calculate_winner(board) is not None:
        return WON
    if board.is_full():
        return DRAWN
    return IN_PROGRESS


def winning_line(state: GameState) -> Optional[Line]:
    result = calculate_winner(state.current.board)
    return result[1] if result is not None else None


def step_label(step: HistoryStep) -> str:
    if step.player is None:
        return ''
    return f"{step.player} : [{step.row}, {step.col}]"


def move_list(state: GameState) -> List[Dict[str, Any]]:
    """One entry per history step, in the display order chosen by `sorted_asc`."""
    entries: List[Dict[str, Any]] = []
    for move, step in enumerate(state.history):
        entries.append({
            "move": move,
            "description": f"Go to move #{move}" if move else "Go to game start",
            "label": step_label(step),
            "current": move == state.step_number,
        })
    if not state.sorted_asc:
        entries.reverse()
    return entries


def render_view(state: GameState) -> Dict[str, Any]:
    """Everything the view layer displays for the step at the cursor."""
    board = state.current.board
    line = winning_line(state)
    return {
        "squares": list(board.cells),
        "status": game_status(board, state.x_is_next),
        "outcome": outcome(state),
        "winningLine": list(line) if line is not None else None,
        "moves": move_list(state),
        "stepNumber": state.step_number,
        "xIsNext": state.x_is_next,
        "sortedAsc": state.sorted_asc,
    }
