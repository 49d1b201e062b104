import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from gridsnake.config import Config
from gridsnake.controller import SnakeGame
from gridsnake.scheduler import TickScheduler


class FakeTimer:
    """Stands in for pygame.time.set_timer and records every call."""

    def __init__(self):
        self.calls = []

    def __call__(self, event_type, interval_ms):
        self.calls.append((event_type, interval_ms))

    @property
    def armed(self):
        """Intervals of timers that were armed (non-zero calls)."""
        return [ms for _, ms in self.calls if ms]


@pytest.fixture
def cfg():
    return Config(width=400, height=400, cell_size=20, tick_ms=150, seed=0)


@pytest.fixture
def timer():
    return FakeTimer()


@pytest.fixture
def frames():
    return []


@pytest.fixture
def game(cfg, timer, frames):
    return SnakeGame(cfg, scheduler=TickScheduler(set_timer=timer), on_render=frames.append)
