"""Game state aggregate and the per-frame state machine.

One call to :func:`step` is one frame. The caller supplies at most one
command per frame and paces the frames; nothing in here sleeps, draws or
touches files.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from tetris_board import COLS, ROWS, Board, merge, sweep
from tetris_errors import InvariantError
from tetris_piece import Piece, can_move_down, can_move_left, can_move_right, fits, try_rotate
from tetris_progression import Progression
from tetris_rng import PieceRandomizer

log = logging.getLogger(__name__)


class Command(Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    SOFT_DROP = "soft_drop"
    ROTATE_CW = "rotate_cw"
    ROTATE_CCW = "rotate_ccw"
    TOGGLE_PAUSE = "toggle_pause"
    QUIT = "quit"


class Status(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Snapshot:
    """Everything the renderer needs, taken between frames."""
    board: Tuple[Tuple[Optional[str], ...], ...]
    piece: Piece
    next_type: str
    score: int
    level: int
    cleared_lines: int
    highscore: int
    paused: bool
    game_over: bool


@dataclass(frozen=True)
class GameResult:
    score: int
    highscore: int
    is_new_highscore: bool


@dataclass
class GameState:
    board: Board
    piece: Piece
    next_type: str
    progression: Progression
    randomizer: PieceRandomizer
    frame: int = 0
    status: Status = Status.RUNNING
    highscore: int = 0
    best_at_start: int = 0

    @classmethod
    def new(cls, cols: int = COLS, rows: int = ROWS, start_level: int = 0,
            highscore: int = 0, seed: Optional[int] = None) -> "GameState":
        rng = PieceRandomizer(seed)
        first = rng.next_piece()
        return cls(board=Board(cols, rows),
                   piece=Piece.spawn(first, cols),
                   next_type=rng.next_piece(),
                   progression=Progression.start(start_level),
                   randomizer=rng,
                   highscore=highscore,
                   best_at_start=highscore)

    @property
    def score(self) -> int:
        return self.progression.score

    @property
    def level(self) -> int:
        return self.progression.level

    @property
    def cleared_lines(self) -> int:
        return self.progression.cleared_lines

    def snapshot(self) -> Snapshot:
        return Snapshot(board=self.board.snapshot(),
                        piece=self.piece,
                        next_type=self.next_type,
                        score=self.score,
                        level=self.level,
                        cleared_lines=self.cleared_lines,
                        highscore=self.highscore,
                        paused=self.status is Status.PAUSED,
                        game_over=self.status is Status.GAME_OVER)

    def result(self) -> GameResult:
        return GameResult(score=self.score,
                          highscore=max(self.highscore, self.score),
                          is_new_highscore=self.score > self.best_at_start)


def lock_piece(state: GameState) -> int:
    """Freeze the active piece, clear rows and score them, then either end the
    game (row 0 still holds a block) or promote the next piece. Returns the
    number of rows cleared."""
    board = state.board
    merge(board, state.piece)
    cleared = sweep(board)
    state.progression.award(cleared)
    if cleared:
        log.debug("cleared %d row(s), score %d", cleared, state.score)
    if board.row_has_blocks(0):
        _game_over(state)
        return cleared
    state.piece = Piece.spawn(state.next_type, board.cols)
    state.next_type = state.randomizer.next_piece()
    # a spawn on top of the stack could only ever lock into row 0
    if not fits(board, state.piece):
        _game_over(state)
    return cleared


def _game_over(state: GameState) -> None:
    state.status = Status.GAME_OVER
    log.info("game over: score %d, level %d, lines %d",
             state.score, state.level, state.cleared_lines)


def _apply(state: GameState, command: Command) -> None:
    board, piece = state.board, state.piece
    if command is Command.MOVE_LEFT:
        if can_move_left(board, piece):
            state.piece = piece.moved(-1, 0)
    elif command is Command.MOVE_RIGHT:
        if can_move_right(board, piece):
            state.piece = piece.moved(1, 0)
    elif command is Command.SOFT_DROP:
        if can_move_down(board, piece):
            state.piece = piece.moved(0, 1)
            # grace window before the automatic lock
            if not can_move_down(board, state.piece):
                state.frame = 0
    elif command in (Command.ROTATE_CW, Command.ROTATE_CCW):
        rotated = try_rotate(board, piece, 1 if command is Command.ROTATE_CW else -1)
        if rotated:
            state.piece = rotated
    elif command is Command.TOGGLE_PAUSE:
        state.status = Status.PAUSED
    elif command is Command.QUIT:
        state.status = Status.GAME_OVER
    else:
        raise InvariantError(f"unknown command {command!r}")


def step(state: GameState, command: Optional[Command] = None) -> Status:
    """Advance one frame and return the resulting status."""
    if state.status is Status.GAME_OVER:
        return state.status
    if state.status is Status.PAUSED:
        if command is Command.TOGGLE_PAUSE:
            state.status = Status.RUNNING
        elif command is Command.QUIT:
            state.status = Status.GAME_OVER
        return state.status

    prog = state.progression
    if state.frame % prog.fall_rate == 0:
        if can_move_down(state.board, state.piece):
            state.piece = state.piece.moved(0, 1)
        else:
            lock_piece(state)
            if state.status is Status.GAME_OVER:
                state.highscore = max(state.highscore, state.score)
                return state.status

    if prog.level_up():
        log.debug("level %d, %d frames per drop", prog.level, prog.fall_rate)
        state.frame = 0

    if command is not None:
        _apply(state, command)

    state.highscore = max(state.highscore, state.score)
    state.frame += 1
    return state.status
