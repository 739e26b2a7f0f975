"""Piece model, spawning and movement/rotation predicates"""
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from tetris_board import COLS, Board, shape_can_fit
from tetris_shapes import box_width, offsets, spawn_rows_above


@dataclass(frozen=True)
class Piece:
    t: str
    angle: int  # 0=spawn, then clockwise quarter turns
    x: int
    y: int

    @staticmethod
    def spawn(t: str, cols: int = COLS) -> "Piece":
        return Piece(t, 0, (cols - box_width(t)) // 2, -spawn_rows_above(t))

    def cells(self) -> List[Tuple[int, int]]:
        return [(self.x + dx, self.y + dy) for dx, dy in offsets(self.t, self.angle)]

    def moved(self, dx: int, dy: int) -> "Piece":
        return replace(self, x=self.x + dx, y=self.y + dy)

    def rotated(self, direction: int) -> "Piece":
        return replace(self, angle=(self.angle + direction) % 4)


def fits(board: Board, piece: Piece) -> bool:
    return shape_can_fit(board, piece.x, piece.y, piece.t, piece.angle)


def can_move_down(board: Board, piece: Piece) -> bool:
    return shape_can_fit(board, piece.x, piece.y + 1, piece.t, piece.angle)


def can_move_left(board: Board, piece: Piece) -> bool:
    return shape_can_fit(board, piece.x - 1, piece.y, piece.t, piece.angle)


def can_move_right(board: Board, piece: Piece) -> bool:
    return shape_can_fit(board, piece.x + 1, piece.y, piece.t, piece.angle)


def can_rotate(board: Board, piece: Piece, direction: int) -> bool:
    """Rotation in place only; there is no kick search."""
    return shape_can_fit(board, piece.x, piece.y, piece.t, (piece.angle + direction) % 4)


def try_rotate(board: Board, piece: Piece, direction: int) -> Optional[Piece]:
    """Return the rotated piece, or None if it does not fit where it stands."""
    if can_rotate(board, piece, direction):
        return piece.rotated(direction)
    return None
