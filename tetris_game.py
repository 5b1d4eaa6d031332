"""
Falling-block rules engine.

`Game` owns the board, the active piece and the score counters, and
advances only when a caller hands it a `Command`. It never reads a clock or
touches the screen: the front-end (see main.py) turns key presses into
commands and fires `Command.TICK` at `Game.drop_interval_ms`.

Lifecycle of one piece:

    FALLING --(downward move blocked)--> LOCKING --> SPAWNING --> FALLING
                                                        |
                                                        +--(spawn blocked)--> GAME_OVER

Rejected commands (blocked moves, anything but pause/reset while paused,
anything but reset after game over) leave the state untouched and return
False.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from tetris_board import Board, new_board, is_valid_move, lock, clear_full_rows
from tetris_level import level_for_lines, line_clear_score, drop_interval_ms
from tetris_piece import Piece, COLS, ROWS
from tetris_rng import PieceGenerator

log = logging.getLogger(__name__)


class Command(enum.Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    ROTATE_CW = "rotate_cw"
    SOFT_DROP = "soft_drop"
    HARD_DROP = "hard_drop"
    TOGGLE_PAUSE = "toggle_pause"
    RESET = "reset"
    TICK = "tick"


@dataclass
class GameState:
    board: Board = field(default_factory=new_board)
    piece: Optional[Piece] = None
    score: int = 0
    lines: int = 0
    level: int = 1
    paused: bool = True
    game_over: bool = False


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a game for renderers."""
    board: Tuple[Tuple[Optional[str], ...], ...]
    piece: Optional[Piece]
    score: int
    lines: int
    level: int
    paused: bool
    game_over: bool
    drop_interval_ms: int

    def composite(self) -> List[List[Optional[str]]]:
        """Board rows with the active piece painted over them (visible blocks only)."""
        grid = [list(row) for row in self.board]
        if self.piece is not None:
            for x, y in self.piece.cells():
                if 0 <= x < COLS and 0 <= y < ROWS:
                    grid[y][x] = self.piece.shape.color
        return grid


class Game:
    def __init__(self, generator: Optional[PieceGenerator] = None):
        self.generator = generator if generator is not None else PieceGenerator()
        self.state = GameState()
        self.reset()

    # ---------- Queries ----------
    @property
    def drop_interval_ms(self) -> int:
        return drop_interval_ms(self.state.level)

    def snapshot(self) -> Snapshot:
        st = self.state
        return Snapshot(
            board=tuple(tuple(row) for row in st.board),
            piece=st.piece,
            score=st.score, lines=st.lines, level=st.level,
            paused=st.paused, game_over=st.game_over,
            drop_interval_ms=self.drop_interval_ms,
        )

    # ---------- Commands ----------
    def apply(self, command: Command) -> bool:
        handlers = {
            Command.MOVE_LEFT: self.move_left,
            Command.MOVE_RIGHT: self.move_right,
            Command.ROTATE_CW: self.rotate,
            Command.SOFT_DROP: self.soft_drop,
            Command.HARD_DROP: self.hard_drop,
            Command.TOGGLE_PAUSE: self.toggle_pause,
            Command.RESET: self.reset,
            Command.TICK: self.tick,
        }
        return handlers[command]()

    def reset(self) -> bool:
        self.state = GameState()
        self._spawn()
        log.debug("game reset")
        return True

    def toggle_pause(self) -> bool:
        if self.state.game_over:
            return False
        self.state.paused = not self.state.paused
        log.debug("paused=%s", self.state.paused)
        return True

    def move_left(self) -> bool:
        return self._shift(-1)

    def move_right(self) -> bool:
        return self._shift(1)

    def rotate(self) -> bool:
        """Rotate clockwise in place. There are no wall kicks: a blocked rotation is dropped."""
        if not self._accepting():
            return False
        turned = self.state.piece.rotated()
        if not is_valid_move(self.state.board, turned.shape, turned.x, turned.y):
            return False
        self.state.piece = turned
        return True

    def soft_drop(self) -> bool:
        return self._step_down()

    def tick(self) -> bool:
        return self._step_down()

    def hard_drop(self) -> bool:
        if not self._accepting():
            return False
        st = self.state
        while is_valid_move(st.board, st.piece.shape, st.piece.x, st.piece.y + 1):
            st.piece = st.piece.moved(dy=1)
        self._lock_and_spawn()
        return True

    # ---------- Internals ----------
    def _accepting(self) -> bool:
        st = self.state
        return not st.paused and not st.game_over and st.piece is not None

    def _shift(self, dx: int) -> bool:
        if not self._accepting():
            return False
        p = self.state.piece
        if not is_valid_move(self.state.board, p.shape, p.x + dx, p.y):
            return False
        self.state.piece = p.moved(dx=dx)
        return True

    def _step_down(self) -> bool:
        if not self._accepting():
            return False
        p = self.state.piece
        if is_valid_move(self.state.board, p.shape, p.x, p.y + 1):
            self.state.piece = p.moved(dy=1)
        else:
            self._lock_and_spawn()
        return True

    def _lock_and_spawn(self):
        st = self.state
        lock(st.board, st.piece)
        st.piece = None
        cleared = clear_full_rows(st.board)
        if cleared:
            # scored at the level in effect before these lines count
            st.score += line_clear_score(cleared, st.level)
            st.lines += cleared
            log.debug("cleared %d line(s): score=%d lines=%d", cleared, st.score, st.lines)
        self._spawn()

    def _spawn(self):
        st = self.state
        level = level_for_lines(st.lines)
        if level != st.level:
            log.info("level %d -> %d, drop interval %d ms", st.level, level, drop_interval_ms(level))
            st.level = level
        st.piece = Piece.spawn(self.generator.next_shape())
        if not is_valid_move(st.board, st.piece.shape, st.piece.x, st.piece.y):
            st.game_over = True
            st.paused = True
            log.info("game over: score=%d lines=%d level=%d", st.score, st.lines, st.level)
