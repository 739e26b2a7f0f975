"""Score, level and gravity curve (classic NES numbers)"""
from dataclasses import dataclass

from tetris_errors import InvariantError

# Points per lock by rows cleared, multiplied by (level + 1)
SCORE_TABLE = {0: 0, 1: 40, 2: 100, 3: 300, 4: 1200}

# Frames per forced drop for levels 0..9
_FALL_RATES = (48, 43, 38, 33, 28, 23, 18, 13, 8, 6)

LINES_PER_LEVEL = 10


def score_delta(level: int, lines: int) -> int:
    if lines not in SCORE_TABLE:
        raise InvariantError(f"a single lock cannot clear {lines} rows")
    return SCORE_TABLE[lines] * (level + 1)


def fall_rate(level: int) -> int:
    """Frames between forced one-row drops; never increases with level."""
    if level < len(_FALL_RATES):
        return _FALL_RATES[max(level, 0)]
    if level <= 12: return 5
    if level <= 15: return 4
    if level <= 18: return 3
    if level <= 28: return 2
    return 1


def initial_lines_until_next_level(start_level: int) -> int:
    s = start_level
    return min(10 * s + 10, max(100, 10 * s - 50))


@dataclass
class Progression:
    level: int = 0
    score: int = 0
    cleared_lines: int = 0
    lines_until_next_level: int = LINES_PER_LEVEL
    fall_rate: int = _FALL_RATES[0]

    @classmethod
    def start(cls, level: int = 0) -> "Progression":
        return cls(level=level,
                   lines_until_next_level=initial_lines_until_next_level(level),
                   fall_rate=fall_rate(level))

    def award(self, lines: int) -> int:
        """Book the rows cleared by one lock; return the points added."""
        delta = score_delta(self.level, lines)
        self.score += delta
        self.cleared_lines += lines
        return delta

    def level_up(self) -> bool:
        """Advance one level if enough rows are cleared. The caller resets
        its frame counter when this returns True."""
        if self.cleared_lines < self.lines_until_next_level:
            return False
        self.level += 1
        self.lines_until_next_level += LINES_PER_LEVEL
        self.fall_rate = fall_rate(self.level)
        return True
