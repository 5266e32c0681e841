import unittest

from game import (
    Board,
    GameState,
    apply_move,
    calculate_winner,
    game_status,
    jump_to,
    play,
)


def status_of(state):
    return game_status(state.current.board, state.x_is_next)


class TestTicTacToeGames(unittest.TestCase):
    def test_top_row_win_for_x(self):
        state = play([0, 4, 1, 5, 2])
        self.assertEqual(calculate_winner(state.current.board), ('X', (0, 1, 2)))
        self.assertEqual(status_of(state), "Winner: X")

    def test_column_win_for_o(self):
        state = play([0, 1, 3, 4, 8, 7])
        self.assertEqual(calculate_winner(state.current.board), ('O', (1, 4, 7)))
        self.assertEqual(status_of(state), "Winner: O")

    def test_full_board_without_line_is_draw(self):
        # X O X / X O O / O X X
        state = play([0, 1, 2, 4, 3, 5, 7, 6, 8])
        self.assertTrue(state.current.board.is_full())
        self.assertIsNone(calculate_winner(state.current.board))
        self.assertEqual(status_of(state), "It's a draw!")

    def test_draw_is_terminal(self):
        state = play([0, 1, 2, 4, 3, 5, 7, 6, 8])
        for i in range(9):
            self.assertIs(apply_move(state, i), state)

    def test_moves_after_win_are_ignored(self):
        state = play([0, 4, 1, 5, 2, 8, 7])
        self.assertEqual(len(state.history), 6)
        self.assertEqual(state.current.board.cells[8], None)

    def test_jump_to_start_resets_board_and_player(self):
        state = play([0, 4, 1, 5])
        start = jump_to(state, 0)
        self.assertEqual(start.current.board, Board.empty())
        self.assertEqual(start.next_player, 'X')
        self.assertEqual(status_of(start), "Next player: X")

    def test_new_move_from_start_discards_old_game(self):
        state = play([0, 4, 1, 5, 2])
        fresh = apply_move(jump_to(state, 0), 8)
        self.assertEqual(len(fresh.history), 2)
        self.assertEqual(fresh.current.board.empty_cells(), [0, 1, 2, 3, 4, 5, 6, 7])
        self.assertEqual(fresh.current.player, 'X')

    def test_rejected_moves_never_change_history(self):
        state = GameState.new()
        for i, accepted in [(4, True), (4, False), (0, True), (0, False), (4, False), (8, True)]:
            before = state
            state = apply_move(state, i)
            if accepted:
                self.assertEqual(len(state.history), len(before.history) + 1)
            else:
                self.assertIs(state, before)
        self.assertEqual(len(state.history), 4)


if __name__ == '__main__':
    unittest.main()
