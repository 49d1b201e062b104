# controller.py
from typing import Callable, Optional, Tuple
import logging

import numpy as np  # type: ignore

from .config import Config, DOWN, LEFT, RIGHT, UP
from .game import GameState, Phase, is_opposite, new_game_state, step_game
from .scheduler import TickScheduler

logger = logging.getLogger(__name__)

STATUS_TEXT = {
    Phase.IDLE: "Press Start",
    Phase.PLAYING: "Playing",
    Phase.PAUSED: "Paused",
    Phase.GAME_OVER: "Game over",
}


def speed_label(tick_ms: int) -> str:
    """Human label for a tick interval (larger interval = slower snake)."""
    if tick_ms <= 80:
        return "Very fast"
    if tick_ms <= 120:
        return "Fast"
    if tick_ms <= 180:
        return "Medium"
    if tick_ms <= 240:
        return "Slow"
    return "Very slow"


class SnakeGame:
    """
    Owns the game state, the tick timer and the tick interval.

    Phases: idle -> playing (start) -> paused <-> playing (toggle_pause)
    -> game_over (collision). start() is accepted from idle and game_over;
    restart() returns any phase to idle without starting.

    on_render is called with the game after every processed tick and after
    every phase transition.
    """

    def __init__(
        self,
        cfg: Config,
        scheduler: Optional[TickScheduler] = None,
        on_render: Optional[Callable[["SnakeGame"], None]] = None,
    ):
        self.cfg = cfg
        self.rng = np.random.default_rng(cfg.seed)
        self.scheduler = scheduler if scheduler is not None else TickScheduler()
        self.on_render = on_render
        self.tick_ms = cfg.tick_ms
        self.state: GameState = new_game_state(cfg.grid_w, cfg.grid_h, self.rng)

    # ---------- Read-only views ----------
    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def status_text(self) -> str:
        return STATUS_TEXT[self.state.phase]

    @property
    def speed_label(self) -> str:
        return speed_label(self.tick_ms)

    # ---------- Transitions ----------
    def _reset(self, phase: Phase) -> None:
        self.state = new_game_state(self.cfg.grid_w, self.cfg.grid_h, self.rng)
        self.state.phase = phase

    def start(self) -> bool:
        if self.state.phase not in (Phase.IDLE, Phase.GAME_OVER):
            return False
        self._reset(Phase.PLAYING)
        self.scheduler.start(self.tick_ms)
        logger.info("Game started at %d ms per tick", self.tick_ms)
        self.render()
        return True

    def toggle_pause(self) -> bool:
        if self.state.phase == Phase.PLAYING:
            self.state.phase = Phase.PAUSED
            self.scheduler.stop()
            logger.info("Game paused (score %d)", self.state.score)
        elif self.state.phase == Phase.PAUSED:
            self.state.phase = Phase.PLAYING
            self.scheduler.start(self.tick_ms)
            logger.info("Game resumed")
        else:
            return False
        self.render()
        return True

    def restart(self) -> None:
        self.scheduler.stop()
        self._reset(Phase.IDLE)
        logger.info("Game reset")
        self.render()

    def tick(self) -> bool:
        """Run one simulation step. Ticks that arrive outside play are dropped."""
        if self.state.phase != Phase.PLAYING:
            return False
        alive = step_game(self.state, self.cfg.grid_w, self.cfg.grid_h, self.rng)
        if not alive:
            self.state.phase = Phase.GAME_OVER
            self.scheduler.stop()
            logger.info(
                "Game over: score %d, length %d",
                self.state.score, len(self.state.snake),
            )
        self.render()
        return True

    # ---------- Input ----------
    def request_direction(self, direction: Tuple[int, int]) -> bool:
        """Queue a turn for the next tick unless it reverses the snake."""
        if is_opposite(direction, self.state.direction):
            logger.debug("Ignored reversal %s while moving %s", direction, self.state.direction)
            return False
        self.state.pending = direction
        return True

    def swipe(self, dx: float, dy: float) -> bool:
        """
        Turn from a swipe delta. The larger axis wins; the turn is only taken
        when the snake is not already moving along that axis.
        """
        cur_x, cur_y = self.state.direction
        if abs(dx) > abs(dy):
            if cur_x != 0 or dx == 0:
                return False
            self.state.pending = RIGHT if dx > 0 else LEFT
        else:
            if cur_y != 0 or dy == 0:
                return False
            self.state.pending = DOWN if dy > 0 else UP
        return True

    def set_speed(self, tick_ms: int) -> None:
        """Takes effect at the next timer (re)start; restarts it now while playing."""
        self.tick_ms = int(tick_ms)
        logger.info("Tick interval set to %d ms (%s)", self.tick_ms, self.speed_label)
        if self.state.phase == Phase.PLAYING:
            self.scheduler.start(self.tick_ms)

    def render(self) -> None:
        if self.on_render is not None:
            self.on_render(self)
