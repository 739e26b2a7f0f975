import unittest

from tetris_errors import InvariantError
from tetris_shapes import PIECES, SHAPE_TABLE, box_width, offsets, spawn_rows_above


class TestShapeTable(unittest.TestCase):

    def test_every_type_and_angle_has_four_cells(self):
        self.assertEqual(len(SHAPE_TABLE), 28)
        for t in PIECES:
            for angle in range(4):
                cells = offsets(t, angle)
                self.assertEqual(len(cells), 4, (t, angle))
                self.assertEqual(len(set(cells)), 4, (t, angle))

    def test_table_is_read_only(self):
        with self.assertRaises(TypeError):
            SHAPE_TABLE[("T", 0)] = ((0, 0),)

    def test_angle_is_taken_mod_four(self):
        self.assertEqual(offsets("T", 5), offsets("T", 1))
        self.assertEqual(offsets("L", -1), offsets("L", 3))

    def test_i_piece_rotations(self):
        self.assertEqual(offsets("I", 0), ((0, 1), (1, 1), (2, 1), (3, 1)))
        self.assertEqual(offsets("I", 1), ((2, 0), (2, 1), (2, 2), (2, 3)))
        self.assertEqual(offsets("I", 2), ((0, 2), (1, 2), (2, 2), (3, 2)))
        self.assertEqual(offsets("I", 3), ((1, 0), (1, 1), (1, 2), (1, 3)))

    def test_t_piece_clockwise_turn(self):
        self.assertEqual(sorted(offsets("T", 0)), [(0, 1), (1, 0), (1, 1), (2, 1)])
        self.assertEqual(sorted(offsets("T", 1)), [(1, 0), (1, 1), (1, 2), (2, 1)])

    def test_o_piece_does_not_change(self):
        for angle in range(4):
            self.assertEqual(sorted(offsets("O", angle)), [(0, 0), (0, 1), (1, 0), (1, 1)])

    def test_unknown_type_is_an_invariant_violation(self):
        with self.assertRaises(InvariantError):
            offsets("X", 0)
        with self.assertRaises(InvariantError):
            box_width("X")

    def test_spawn_geometry(self):
        self.assertEqual(box_width("I"), 4)
        self.assertEqual(box_width("O"), 2)
        self.assertEqual(box_width("S"), 3)
        self.assertEqual(spawn_rows_above("I"), 1)
        for t in "OTLJZS":
            self.assertEqual(spawn_rows_above(t), 0)


if __name__ == '__main__':
    unittest.main()
