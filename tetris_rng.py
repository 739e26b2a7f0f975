"""Next-piece randomizer with a single repeat redraw"""
import random
from typing import Optional

from tetris_shapes import PIECES


class PieceRandomizer:
    """Uniform draw over the 7 types. A draw equal to the previously returned
    type is redrawn once and the redraw is kept, so repeats still happen,
    only less often."""
    PIECES = PIECES

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)
        self.prev: Optional[str] = None

    def _roll(self) -> str:
        return self.rng.choice(self.PIECES)

    def next_piece(self) -> str:
        cand = self._roll()
        if self.prev is not None and cand == self.prev:
            cand = self._roll()
        self.prev = cand
        return cand
