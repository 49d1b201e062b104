# scheduler.py
from typing import Callable, Optional
import logging

import pygame  # type: ignore

logger = logging.getLogger(__name__)

# Posted to the event queue on every tick
TICK_EVENT = pygame.USEREVENT + 1


class TickScheduler:
    """
    A single repeating pygame timer.

    pygame keeps at most one timer per event type; start() still cancels the
    running one first so a restart never leaves two intervals armed.
    """

    def __init__(
        self,
        set_timer: Callable[[int, int], None] = pygame.time.set_timer,
        event_type: int = TICK_EVENT,
    ):
        self._set_timer = set_timer
        self.event_type = event_type
        self.interval_ms: Optional[int] = None
        self.running = False

    def start(self, interval_ms: int) -> None:
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        self.stop()
        self._set_timer(self.event_type, interval_ms)
        self.interval_ms = interval_ms
        self.running = True
        logger.debug("Tick timer armed every %d ms", interval_ms)

    def stop(self) -> None:
        if not self.running:
            return
        # An interval of 0 disables the timer
        self._set_timer(self.event_type, 0)
        self.running = False
        logger.debug("Tick timer stopped")
