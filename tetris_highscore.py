"""Highscore file: a single decimal integer"""
import logging
from pathlib import Path
from typing import Union

log = logging.getLogger(__name__)


class HighscoreStore:
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    def load(self) -> int:
        """Return the stored highscore, or 0 if there is none we can use."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return 0
        except OSError as e:
            log.warning("cannot read highscore file %s: %s", self.path, e)
            return 0
        try:
            value = int(text.strip())
        except ValueError:
            log.warning("ignoring malformed highscore file %s", self.path)
            return 0
        if value < 0:
            log.warning("ignoring negative highscore %d in %s", value, self.path)
            return 0
        return value

    def save(self, score: int) -> bool:
        """Write the score; False (and a warning) if the file cannot be written."""
        try:
            self.path.write_text(f"{int(score)}\n", encoding="utf-8")
        except OSError as e:
            log.warning("cannot write highscore file %s: %s", self.path, e)
            return False
        return True
