
"""
Game engine: active/next piece, gravity, locking, line clears and score.

The engine does no scheduling and no drawing. A driver calls tick() with the
wall time elapsed since the previous frame and handle_command() for each input
event; both return a Snapshot the front end redraws from.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from tetris_board import Board, clear_lines, merge, new_board, valid_position
from tetris_config import CONFIG
from tetris_piece import Piece, Shape
from tetris_rng import RandomShapes, ShapeSource

logger = logging.getLogger("tetris.engine")

# Points for clearing n lines at once, indexed by n
LINE_POINTS = (0, 100, 300, 600, 1000)


class Command(Enum):
    MOVE_LEFT = "moveLeft"
    MOVE_RIGHT = "moveRight"
    SOFT_DROP_ON = "softDropOn"
    SOFT_DROP_OFF = "softDropOff"
    ROTATE = "rotate"
    PAUSE_TOGGLE = "pauseToggle"
    RESET = "reset"


class GameState(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the engine handed to the front end."""
    board: Tuple[Tuple[int, ...], ...]
    active_shape: Shape
    active_offset: Tuple[int, int]
    next_shape: Shape
    score: int
    paused: bool
    game_over: bool

    @property
    def state(self) -> GameState:
        return state_of(self.paused, self.game_over)


def state_of(paused: bool, game_over: bool) -> GameState:
    if game_over:
        return GameState.GAME_OVER
    return GameState.PAUSED if paused else GameState.RUNNING


def line_points(n: int) -> int:
    return LINE_POINTS[max(0, min(n, len(LINE_POINTS) - 1))]


class Game:
    def __init__(self, shapes: Optional[ShapeSource] = None,
                 rows: Optional[int] = None, cols: Optional[int] = None,
                 normal_ms: Optional[float] = None, fast_ms: Optional[float] = None,
                 clear_top_row: Optional[bool] = None):
        self.shapes = shapes if shapes is not None else RandomShapes(CONFIG["SEED"])
        self.rows = rows if rows is not None else CONFIG["ROWS"]
        self.cols = cols if cols is not None else CONFIG["COLS"]
        self.normal_ms = normal_ms if normal_ms is not None else CONFIG["NORMAL_DROP_MS"]
        self.fast_ms = fast_ms if fast_ms is not None else CONFIG["FAST_DROP_MS"]
        self.clear_top_row = CONFIG["CLEAR_TOP_ROW"] if clear_top_row is None else clear_top_row

        self.board: Board = []
        self.current: Piece
        self.next_shape: Shape
        self.score = 0
        self.paused = False
        self.game_over = False
        self.drop_interval = self.normal_ms
        self.drop_counter = 0.0
        self.reset()

    # ---------- State ----------
    @property
    def state(self) -> GameState:
        return state_of(self.paused, self.game_over)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            board=tuple(tuple(row) for row in self.board),
            active_shape=self.current.shape,
            active_offset=(self.current.x, self.current.y),
            next_shape=self.next_shape,
            score=self.score,
            paused=self.paused,
            game_over=self.game_over,
        )

    def reset(self) -> Snapshot:
        self.board = new_board(self.rows, self.cols)
        self.score = 0
        self.paused = False
        self.game_over = False
        self.drop_interval = self.normal_ms
        self.drop_counter = 0.0
        self.current = Piece.spawn(self.shapes.next_shape(), self.cols)
        self.next_shape = self.shapes.next_shape()
        logger.info("New game on a %dx%d board.", self.cols, self.rows)
        return self.snapshot()

    # ---------- Per-frame update ----------
    def tick(self, elapsed_ms: float) -> Snapshot:
        if self.state is not GameState.RUNNING:
            return self.snapshot()
        self.drop_counter += elapsed_ms
        if self.drop_counter > self.drop_interval:
            self._drop()
        return self.snapshot()

    def _fits(self, piece: Piece) -> bool:
        return valid_position(self.board, piece.shape, piece.x, piece.y)

    def _drop(self):
        down = self.current.moved(0, 1)
        if self._fits(down):
            self.current = down
        else:
            self._lock()
        self.drop_counter = 0.0

    def _lock(self):
        p = self.current
        merge(self.board, p.shape, p.x, p.y)
        cleared = clear_lines(self.board, include_top=self.clear_top_row)
        logger.debug("Locked piece at (%d, %d), cleared %d line(s).", p.x, p.y, cleared)
        if cleared:
            self.score += line_points(cleared)
        self._spawn()

    def _spawn(self):
        self.current = Piece.spawn(self.next_shape, self.cols)
        self.next_shape = self.shapes.next_shape()
        if not self._fits(self.current):
            self.game_over = True
            logger.info("Game over. Final score: %d", self.score)

    # ---------- Commands ----------
    def handle_command(self, cmd: Union[Command, str]) -> Snapshot:
        if not isinstance(cmd, Command):
            try:
                cmd = Command(cmd)
            except ValueError:
                logger.debug("Ignoring unknown command %r", cmd)
                return self.snapshot()

        if cmd is Command.RESET:
            return self.reset()
        if cmd is Command.PAUSE_TOGGLE:
            self._toggle_pause()
            return self.snapshot()
        if self.state is not GameState.RUNNING:
            return self.snapshot()

        if cmd is Command.MOVE_LEFT:
            self._try(self.current.moved(-1, 0))
        elif cmd is Command.MOVE_RIGHT:
            self._try(self.current.moved(1, 0))
        elif cmd is Command.ROTATE:
            self._try(self.current.rotated())
        elif cmd is Command.SOFT_DROP_ON:
            self.drop_interval = self.fast_ms
        elif cmd is Command.SOFT_DROP_OFF:
            self.drop_interval = self.normal_ms
        return self.snapshot()

    def _try(self, piece: Piece) -> bool:
        if self._fits(piece):
            self.current = piece
            return True
        return False

    def _toggle_pause(self):
        if self.game_over:
            return
        self.paused = not self.paused
        if not self.paused:
            # the paused span must not count as gravity time
            self.drop_counter = 0.0
            logger.info("Resumed.")
        else:
            logger.info("Paused.")
