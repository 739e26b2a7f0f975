"""Shape table: the four cell offsets of every (piece type, angle) pair"""
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

from tetris_errors import InvariantError

PIECES = ("I", "O", "T", "L", "J", "Z", "S")

Offsets = Tuple[Tuple[int, int], ...]

# Spawn orientation (angle 0) in its bounding box, 1s are blocks.
SHAPES: Dict[str, List[List[int]]] = {
    "I": [[0,0,0,0],
          [1,1,1,1],
          [0,0,0,0],
          [0,0,0,0]],
    "O": [[1,1],
          [1,1]],
    "T": [[0,1,0],
          [1,1,1],
          [0,0,0]],
    "L": [[0,0,1],
          [1,1,1],
          [0,0,0]],
    "J": [[1,0,0],
          [1,1,1],
          [0,0,0]],
    "Z": [[1,1,0],
          [0,1,1],
          [0,0,0]],
    "S": [[0,1,1],
          [1,1,0],
          [0,0,0]],
}


def rotate_cw(m): return [list(r) for r in zip(*m[::-1])]


def _offsets(m) -> Offsets:
    return tuple((x, y) for y, row in enumerate(m) for x, v in enumerate(row) if v)


def _build_table() -> Mapping[Tuple[str, int], Offsets]:
    table = {}
    for t, m in SHAPES.items():
        for angle in range(4):
            table[(t, angle)] = _offsets(m)
            m = rotate_cw(m)
    return MappingProxyType(table)


# (type, angle) -> offsets, angle k+1 is a clockwise quarter turn of angle k
SHAPE_TABLE = _build_table()


def offsets(t: str, angle: int) -> Offsets:
    try:
        return SHAPE_TABLE[(t, angle % 4)]
    except KeyError:
        raise InvariantError(f"unknown piece type {t!r}") from None


def box_width(t: str) -> int:
    if t not in SHAPES:
        raise InvariantError(f"unknown piece type {t!r}")
    return len(SHAPES[t][0])


def spawn_rows_above(t: str) -> int:
    """How many rows above the board a freshly spawned piece's box starts,
    so its top blocks land on row 0."""
    if t not in SHAPES:
        raise InvariantError(f"unknown piece type {t!r}")
    empty = 0
    for r in SHAPES[t]:
        if all(v == 0 for v in r): empty += 1
        else: break
    return min(empty, 2)
