"""Runtime configuration, fixed for the duration of one game."""
from pathlib import Path

CONFIG = {
    "START_LEVEL": 0,
    "COLS": 10,
    "ROWS": 20,
    "FRAME_MS": 16.6,
    "PAUSED_FPS": 10,
    "CELL_SIZE": 32,
    "DAS_MS": 170,
    "ARR_MS": 50,
    "SEED": None,
    "HIGHSCORE_PATH": str(Path.home() / ".tetris_highscore"),
    "GAME_OVER_HOLD_MS": 1500,
}


def validate_config(cfg: dict) -> None:
    """Raise ValueError for settings the engine cannot run with."""
    if int(cfg["START_LEVEL"]) < 0:
        raise ValueError(f"starting level must be >= 0, got {cfg['START_LEVEL']}")
    if int(cfg["COLS"]) < 4 or int(cfg["ROWS"]) < 4:
        raise ValueError(f"board must be at least 4x4, got {cfg['COLS']}x{cfg['ROWS']}")
    if float(cfg["FRAME_MS"]) <= 0:
        raise ValueError(f"frame interval must be positive, got {cfg['FRAME_MS']}")
    if int(cfg["PAUSED_FPS"]) <= 0:
        raise ValueError(f"paused poll rate must be positive, got {cfg['PAUSED_FPS']}")
