import unittest

from tetris_board import Board, ghost_y, merge, shape_can_fit, sweep
from tetris_errors import InvariantError
from tetris_piece import Piece


def fill_row(board, row, cols=None, t="J"):
    for x in (range(board.cols) if cols is None else cols):
        board.set_cell(x, row, t)


class TestBoard(unittest.TestCase):

    def setUp(self):
        self.board = Board()

    def test_board_initialization(self):
        self.assertEqual(self.board.cols, 10)
        self.assertEqual(self.board.rows, 20)
        self.assertTrue(all(v is None for row in self.board.cells for v in row))

    def test_outside_the_grid_counts_as_occupied(self):
        for x, y in [(-1, 0), (10, 0), (0, 20), (0, -1)]:
            self.assertTrue(self.board.is_occupied(x, y), (x, y))
        self.assertFalse(self.board.is_occupied(0, 0))
        self.board.set_cell(3, 7, "S")
        self.assertTrue(self.board.is_occupied(3, 7))
        self.assertEqual(self.board.get_cell(3, 7), "S")

    def test_set_cell_preconditions(self):
        with self.assertRaises(InvariantError):
            self.board.set_cell(10, 0, "T")
        with self.assertRaises(InvariantError):
            self.board.set_cell(0, -1, "T")
        with self.assertRaises(InvariantError):
            self.board.set_cell(0, 0, "Q")

    def test_row_is_complete(self):
        fill_row(self.board, 19, range(9))
        self.assertFalse(self.board.row_is_complete(19))
        self.board.set_cell(9, 19, "I")
        self.assertTrue(self.board.row_is_complete(19))
        self.assertTrue(self.board.row_has_blocks(19))
        self.assertFalse(self.board.row_has_blocks(18))

    def test_clear_row_shifts_rows_above_by_one(self):
        for r in range(5):
            self.board.set_cell(r, r, "T")
        fill_row(self.board, 5)
        for r in range(6, 20):
            self.board.set_cell(r % 10, r, "Z")
        before = [list(r) for r in self.board.cells]

        self.board.clear_row(5)

        self.assertEqual(self.board.cells[0], [None] * 10)
        for r in range(1, 6):
            self.assertEqual(self.board.cells[r], before[r - 1])
        for r in range(6, 20):
            self.assertEqual(self.board.cells[r], before[r])

    def test_sweep_clears_separated_rows_in_one_pass(self):
        fill_row(self.board, 17)
        fill_row(self.board, 18, range(4), t="L")
        fill_row(self.board, 19)
        self.board.set_cell(0, 16, "O")

        self.assertEqual(sweep(self.board), 2)
        self.assertEqual(self.board.cells[19], ["L"] * 4 + [None] * 6)
        self.assertEqual(self.board.cells[18][0], "O")
        self.assertTrue(all(not self.board.row_has_blocks(r) for r in range(18)))

    def test_sweep_without_full_rows(self):
        fill_row(self.board, 19, range(9))
        self.assertEqual(sweep(self.board), 0)
        self.assertEqual(self.board.cells[19][:9], ["J"] * 9)

    def test_reset(self):
        fill_row(self.board, 0)
        self.board.reset()
        self.assertFalse(self.board.row_has_blocks(0))

    def test_snapshot_is_immutable_copy(self):
        self.board.set_cell(1, 1, "I")
        snap = self.board.snapshot()
        self.board.set_cell(2, 2, "I")
        self.assertEqual(snap[1][1], "I")
        self.assertIsNone(snap[2][2])
        self.assertIsInstance(snap, tuple)


class TestShapeCanFit(unittest.TestCase):

    def setUp(self):
        self.board = Board()

    def test_side_walls(self):
        # O occupies columns x and x+1
        self.assertTrue(shape_can_fit(self.board, 0, 5, "O", 0))
        self.assertTrue(shape_can_fit(self.board, 8, 5, "O", 0))
        self.assertFalse(shape_can_fit(self.board, -1, 5, "O", 0))
        self.assertFalse(shape_can_fit(self.board, 9, 5, "O", 0))

    def test_floor(self):
        self.assertTrue(shape_can_fit(self.board, 4, 18, "O", 0))
        self.assertFalse(shape_can_fit(self.board, 4, 19, "O", 0))

    def test_occupancy_goes_through_is_occupied(self):
        class WalledBoard(Board):
            """Column 5 is solid without any tag in the grid."""
            def is_occupied(self, x, y):
                return x == 5 or super().is_occupied(x, y)

        board = WalledBoard()
        self.assertFalse(shape_can_fit(board, 4, 10, "O", 0))
        self.assertTrue(shape_can_fit(board, 6, 10, "O", 0))
        # above the top only the side walls count
        self.assertTrue(shape_can_fit(board, 3, -4, "I", 1))
        self.assertFalse(shape_can_fit(board, 3, -3, "I", 1))

    def test_occupied_cell(self):
        self.board.set_cell(5, 11, "Z")
        self.assertFalse(shape_can_fit(self.board, 4, 10, "O", 0))
        self.assertTrue(shape_can_fit(self.board, 6, 10, "O", 0))

    def test_cells_above_the_top_only_respect_walls(self):
        # vertical I lives in column x+2
        self.assertTrue(shape_can_fit(self.board, 0, -3, "I", 1))
        self.assertFalse(shape_can_fit(self.board, -3, -3, "I", 1))
        self.assertFalse(shape_can_fit(self.board, 8, -3, "I", 1))
        self.board.set_cell(2, 0, "T")
        self.assertFalse(shape_can_fit(self.board, 0, -3, "I", 1))
        self.assertTrue(shape_can_fit(self.board, 0, -4, "I", 1))

    def test_merge_writes_exactly_four_cells(self):
        self.board.set_cell(0, 19, "S")
        before = self.board.snapshot()
        piece = Piece("T", 0, 4, 10)
        merge(self.board, piece)
        for x, y in piece.cells():
            self.assertEqual(self.board.get_cell(x, y), "T")
        changed = [(x, y) for y in range(20) for x in range(10)
                   if self.board.cells[y][x] != before[y][x]]
        self.assertEqual(sorted(changed), sorted(piece.cells()))

    def test_merge_skips_cells_above_the_board(self):
        merge(self.board, Piece("I", 1, 0, -2))
        self.assertEqual(self.board.get_cell(2, 0), "I")
        self.assertEqual(self.board.get_cell(2, 1), "I")
        self.assertEqual(sum(v is not None for row in self.board.cells for v in row), 2)

    def test_ghost_y(self):
        self.assertEqual(ghost_y(self.board, Piece("O", 0, 4, 0)), 18)
        self.board.set_cell(4, 10, "L")
        self.assertEqual(ghost_y(self.board, Piece("O", 0, 4, 0)), 8)


if __name__ == '__main__':
    unittest.main()
