"""
Tic-tac-toe core Python package.

Pure game logic used by the Flask app, the CLI and the tests.
Modules:
- board.py: Board, Mark, Cell, winning lines and winner detection
- state.py: HistoryStep, GameState
- moves.py: the state machine transitions (apply_move, jump_to, toggle_moves)
- status.py: values derived for display (status line, move list, view)
- cli.py: hot-seat terminal play
"""
