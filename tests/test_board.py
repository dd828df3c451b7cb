import unittest

from tetris_board import clear_lines, merge, new_board, valid_position
from tetris_piece import SHAPES

ROWS, COLS = 20, 10


class PlacementTests(unittest.TestCase):
    def setUp(self):
        self.board = new_board(ROWS, COLS)

    def test_new_board_is_empty(self):
        self.assertEqual(len(self.board), ROWS)
        self.assertTrue(all(len(row) == COLS and not any(row) for row in self.board))

    def test_new_board_rejects_bad_dimensions(self):
        with self.assertRaises(ValueError):
            new_board(0, 10)

    def test_in_bounds_on_empty_board(self):
        for shape in SHAPES.values():
            self.assertTrue(valid_position(self.board, shape, 0, 0))
            self.assertTrue(valid_position(self.board, shape, COLS - len(shape[0]), ROWS - len(shape)))

    def test_overlap_is_invalid(self):
        self.board[1][4] = 1
        self.assertFalse(valid_position(self.board, SHAPES["O"], 4, 0))
        self.assertTrue(valid_position(self.board, SHAPES["O"], 5, 0))

    def test_out_of_bounds_is_invalid(self):
        self.assertFalse(valid_position(self.board, SHAPES["I"], -1, 0))
        self.assertFalse(valid_position(self.board, SHAPES["I"], 7, 0))
        self.assertFalse(valid_position(self.board, SHAPES["O"], 0, ROWS - 1))
        self.assertFalse(valid_position(self.board, SHAPES["O"], 0, -1))

    def test_empty_cells_may_overhang(self):
        # top row of S is empty at column 0
        s = ((0, 1, 1), (1, 1, 0))
        self.assertFalse(valid_position(self.board, s, -1, 0))
        hollow = ((0, 1), (0, 1))
        self.assertTrue(valid_position(self.board, hollow, -1, 0))


class MergeTests(unittest.TestCase):
    def test_merge_sets_filled_cells_only(self):
        board = new_board(ROWS, COLS)
        merge(board, SHAPES["T"], 2, 18)
        self.assertEqual(board[18][2:5], [1, 1, 1])
        self.assertEqual(board[19][2:5], [0, 1, 0])
        self.assertEqual(sum(map(sum, board)), 4)


class ClearLinesTests(unittest.TestCase):
    def test_two_full_rows_are_removed_and_order_kept(self):
        board = new_board(ROWS, COLS)
        board[5] = [1] * COLS
        board[12] = [1] * COLS
        board[3][0] = 1
        board[8][1] = 1
        board[15][2] = 1

        self.assertEqual(clear_lines(board), 2)
        self.assertEqual(len(board), ROWS)
        self.assertFalse(any(board[0]) or any(board[1]))
        self.assertEqual(board[5][0], 1)
        self.assertEqual(board[9][1], 1)
        self.assertEqual(board[15][2], 1)
        self.assertEqual(sum(map(sum, board)), 3)

    def test_adjacent_rows(self):
        board = new_board(ROWS, COLS)
        board[18] = [1] * COLS
        board[19] = [1] * COLS
        board[17][9] = 1
        self.assertEqual(clear_lines(board), 2)
        self.assertEqual(board[19][9], 1)
        self.assertEqual(sum(map(sum, board)), 1)

    def test_partial_row_stays(self):
        board = new_board(ROWS, COLS)
        board[19] = [1] * (COLS - 1) + [0]
        self.assertEqual(clear_lines(board), 0)
        self.assertEqual(board[19], [1] * (COLS - 1) + [0])

    def test_top_row_is_never_cleared_by_default(self):
        board = new_board(ROWS, COLS)
        board[0] = [1] * COLS
        self.assertEqual(clear_lines(board), 0)
        self.assertEqual(board[0], [1] * COLS)

    def test_top_row_cleared_when_included(self):
        board = new_board(ROWS, COLS)
        board[0] = [1] * COLS
        self.assertEqual(clear_lines(board, include_top=True), 1)
        self.assertFalse(any(board[0]))

    def test_full_top_row_shifted_down_gets_cleared(self):
        board = new_board(ROWS, COLS)
        board[0] = [1] * COLS
        board[1] = [1] * COLS
        self.assertEqual(clear_lines(board), 2)
        self.assertFalse(any(map(any, board)))


if __name__ == "__main__":
    unittest.main()
