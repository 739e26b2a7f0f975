import argparse
import logging
import sys

import pygame

from tetris_config import CONFIG, validate_config
from tetris_errors import InvariantError
from tetris_game import GameResult, GameState, Status, step
from tetris_highscore import HighscoreStore
from tetris_input import KeyboardInput
from tetris_layout import compute_dims
from tetris_overlay import Overlay
from tetris_render import RenderAssets

log = logging.getLogger(__name__)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def run() -> GameResult:
    """Play one game with the current CONFIG and return its result."""
    store = HighscoreStore(CONFIG["HIGHSCORE_PATH"])
    best = store.load()
    state = GameState.new(cols=int(CONFIG["COLS"]), rows=int(CONFIG["ROWS"]),
                          start_level=int(CONFIG["START_LEVEL"]),
                          highscore=best, seed=CONFIG["SEED"])
    log.info("starting at level %d, highscore %d", state.level, best)

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP])
    try:
        dims = compute_dims(state.board.cols, state.board.rows)
        screen = recreate_window(dims)
        pygame.display.set_caption("Falling Blocks")
        font = pygame.font.SysFont(None, 22)
        big_font = pygame.font.SysFont(None, 42)

        render = RenderAssets(dims, font)
        overlay = Overlay(font, big_font)
        keyboard = KeyboardInput()
        clock = pygame.time.Clock()
        fps = max(1, round(1000.0 / float(CONFIG["FRAME_MS"])))

        while True:
            status = step(state, keyboard.poll(paused=state.status is Status.PAUSED))
            snap = state.snapshot()
            render.draw(screen, snap)
            overlay.draw(screen, snap, dims)
            pygame.display.flip()
            if status is Status.GAME_OVER:
                break
            clock.tick(int(CONFIG["PAUSED_FPS"]) if status is Status.PAUSED else fps)

        pygame.time.wait(int(CONFIG["GAME_OVER_HOLD_MS"]))
    finally:
        pygame.quit()

    result = state.result()
    if result.is_new_highscore and not store.save(result.score):
        log.warning("new highscore %d was not saved", result.score)
    return result


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Falling-block puzzle game")
    p.add_argument("--level", type=int, default=CONFIG["START_LEVEL"], help="Starting level")
    p.add_argument("--cols", type=int, default=CONFIG["COLS"], help="Board width in cells")
    p.add_argument("--rows", type=int, default=CONFIG["ROWS"], help="Board height in cells")
    p.add_argument("--fps", type=float, default=None, help="Target frames per second (default ~60)")
    p.add_argument("--seed", type=int, default=CONFIG["SEED"], help="Seed for the piece randomizer")
    p.add_argument("--highscore-file", default=CONFIG["HIGHSCORE_PATH"], help="Where the highscore is kept")
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    args = p.parse_args(argv)

    CONFIG["START_LEVEL"] = args.level
    CONFIG["COLS"] = args.cols
    CONFIG["ROWS"] = args.rows
    CONFIG["SEED"] = args.seed
    CONFIG["HIGHSCORE_PATH"] = args.highscore_file
    if args.fps is not None:
        if args.fps <= 0:
            p.error("--fps must be positive")
        CONFIG["FRAME_MS"] = 1000.0 / args.fps
    try:
        validate_config(CONFIG)
    except ValueError as e:
        p.error(str(e))
    return args


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        result = run()
    except InvariantError:
        log.critical("internal state corrupted, aborting", exc_info=True)
        return 1

    print(f"Score: {result.score}")
    print(f"Highscore: {result.highscore}" + ("  (new!)" if result.is_new_highscore else ""))
    return 0


if __name__ == '__main__':
    sys.exit(main())
