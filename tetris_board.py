"""Board grid and placement rules: shape_can_fit, merge, sweep, ghost"""
from typing import TYPE_CHECKING, List, Optional, Tuple

from tetris_errors import InvariantError
from tetris_shapes import PIECES, offsets

if TYPE_CHECKING:
    from tetris_piece import Piece

COLS, ROWS = 10, 20

Row = List[Optional[str]]


class Board:
    """cols x rows grid; each cell is None or the tag of the piece that locked there."""

    def __init__(self, cols: int = COLS, rows: int = ROWS):
        self.cols = cols
        self.rows = rows
        self.cells: List[Row] = [[None] * cols for _ in range(rows)]

    def reset(self) -> None:
        self.cells = [[None] * self.cols for _ in range(self.rows)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.cols and 0 <= y < self.rows

    def is_occupied(self, x: int, y: int) -> bool:
        """Anything outside the grid counts as occupied."""
        if not self.in_bounds(x, y):
            return True
        return self.cells[y][x] is not None

    def get_cell(self, x: int, y: int) -> Optional[str]:
        return self.cells[y][x]

    def set_cell(self, x: int, y: int, t: str) -> None:
        if not self.in_bounds(x, y):
            raise InvariantError(f"cell ({x}, {y}) is outside the {self.cols}x{self.rows} board")
        if t not in PIECES:
            raise InvariantError(f"unknown piece type {t!r}")
        self.cells[y][x] = t

    def row_is_complete(self, row: int) -> bool:
        return all(v is not None for v in self.cells[row])

    def row_has_blocks(self, row: int) -> bool:
        return any(v is not None for v in self.cells[row])

    def clear_row(self, row: int) -> None:
        """Drop every row above `row` by one; row 0 comes back empty."""
        for r in range(row, 0, -1):
            self.cells[r] = list(self.cells[r - 1])
        self.cells[0] = [None] * self.cols

    def snapshot(self) -> Tuple[Tuple[Optional[str], ...], ...]:
        return tuple(tuple(r) for r in self.cells)


def shape_can_fit(board: Board, x: int, y: int, t: str, angle: int) -> bool:
    """True if every block of `t` at (x, y, angle) is on an empty cell.

    Blocks above the top edge (y < 0) only have to respect the side walls."""
    for dx, dy in offsets(t, angle):
        bx, by = x + dx, y + dy
        if bx < 0 or bx >= board.cols or by >= board.rows:
            return False
        if by >= 0 and board.is_occupied(bx, by):
            return False
    return True


def merge(board: Board, piece: "Piece") -> None:
    """Lock the piece into the board (no collision check)."""
    for bx, by in piece.cells():
        if by >= 0:
            board.set_cell(bx, by, piece.t)


def sweep(board: Board) -> int:
    """Clear full rows in one top-to-bottom pass and return how many went."""
    cleared = 0
    for r in range(board.rows):
        if board.row_is_complete(r):
            board.clear_row(r)
            cleared += 1
    return cleared


def ghost_y(board: Board, piece: "Piece") -> int:
    """Return the y position where the piece would come to rest."""
    y = piece.y
    while shape_can_fit(board, piece.x, y + 1, piece.t, piece.angle):
        y += 1
    return y
