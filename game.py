from __future__ import annotations

# Facade module that re-exports the tic-tac-toe core.
# The Flask app, the CLI entry point and the tests import from here.
# Single-responsibility modules live under tictactoe_core/*.

try:
    from .tictactoe_core.board import (  # type: ignore
        Board,
        Cell,
        Line,
        Mark,
        MARKS,
        WINNING_LINES,
        calculate_winner,
        cell_to_row_col,
        check_index,
    )
    from .tictactoe_core.state import GameState, HistoryStep, verify_state  # type: ignore
    from .tictactoe_core.moves import (  # type: ignore
        apply_move,
        is_legal,
        jump_to,
        legal_moves,
        toggle_moves,
    )
    from .tictactoe_core.status import (  # type: ignore
        DRAWN,
        IN_PROGRESS,
        WON,
        game_status,
        move_list,
        outcome,
        render_view,
        step_label,
        winning_line,
    )
except ImportError:
    from tictactoe_core.board import (  # type: ignore
        Board,
        Cell,
        Line,
        Mark,
        MARKS,
        WINNING_LINES,
        calculate_winner,
        cell_to_row_col,
        check_index,
    )
    from tictactoe_core.state import GameState, HistoryStep, verify_state  # type: ignore
    from tictactoe_core.moves import (  # type: ignore
        apply_move,
        is_legal,
        jump_to,
        legal_moves,
        toggle_moves,
    )
    from tictactoe_core.status import (  # type: ignore
        DRAWN,
        IN_PROGRESS,
        WON,
        game_status,
        move_list,
        outcome,
        render_view,
        step_label,
        winning_line,
    )


def play(moves) -> GameState:
    """Applies a sequence of cell indices to a fresh game."""
    state = GameState.new()
    for index in moves:
        state = apply_move(state, index)
    return state


def main() -> None:
    # CLI driver delegated to tictactoe_core.cli
    try:
        from .tictactoe_core.cli import main as _main  # type: ignore
    except ImportError:
        from tictactoe_core.cli import main as _main  # type: ignore
    _main()


if __name__ == '__main__':
    main()
