# controls.py
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Tuple
import logging

import pygame  # type: ignore

from .config import (
    UP, DOWN, LEFT, RIGHT, HUD_HEIGHT,
    SPEED_MIN_MS, SPEED_MAX_MS, SPEED_STEP_MS,
)
from .controller import SnakeGame
from .game import Phase
from .scheduler import TICK_EVENT

logger = logging.getLogger(__name__)

KEY_DIRECTIONS: Dict[int, Tuple[int, int]] = {
    pygame.K_LEFT: LEFT,
    pygame.K_UP: UP,
    pygame.K_RIGHT: RIGHT,
    pygame.K_DOWN: DOWN,
    pygame.K_a: LEFT,
    pygame.K_w: UP,
    pygame.K_d: RIGHT,
    pygame.K_s: DOWN,
}

QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)

# Which HUD buttons accept clicks in each phase: (start, pause, restart)
BUTTON_ENABLED = {
    Phase.IDLE: (True, False, False),
    Phase.PLAYING: (False, True, True),
    Phase.PAUSED: (False, True, True),
    Phase.GAME_OVER: (True, False, True),
}


# ---------- Widgets ----------
@dataclass
class Button:
    rect: pygame.Rect
    label: str
    callback: Callable[[], object]
    enabled: bool = True

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.enabled and self.rect.collidepoint(event.pos):
                self.callback()
                return True
        return False


@dataclass
class Slider:
    """Horizontal slider snapped to `step`; on_change gets the new value."""
    rect: pygame.Rect
    value: int
    on_change: Callable[[int], None]
    minimum: int = SPEED_MIN_MS
    maximum: int = SPEED_MAX_MS
    step: int = SPEED_STEP_MS
    dragging: bool = False

    @property
    def fraction(self) -> float:
        return (self.value - self.minimum) / (self.maximum - self.minimum)

    def value_at(self, x: int) -> int:
        t = (x - self.rect.left) / max(self.rect.width, 1)
        t = min(max(t, 0.0), 1.0)
        raw = self.minimum + t * (self.maximum - self.minimum)
        snapped = self.minimum + round((raw - self.minimum) / self.step) * self.step
        return int(min(max(snapped, self.minimum), self.maximum))

    def _set_from(self, x: int) -> None:
        new = self.value_at(x)
        if new != self.value:
            self.value = new
            self.on_change(new)

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.dragging = True
                self._set_from(event.pos[0])
                return True
        elif event.type == pygame.MOUSEMOTION and self.dragging:
            self._set_from(event.pos[0])
            return True
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1 and self.dragging:
            self.dragging = False
            return True
        return False


@dataclass
class HudWidgets:
    start: Button
    pause: Button
    restart: Button
    speed: Slider
    top: int = 0

    @property
    def buttons(self):
        return (self.start, self.pause, self.restart)

    def sync(self, phase: Phase) -> None:
        """Enable buttons and relabel pause for the current phase."""
        for button, enabled in zip(self.buttons, BUTTON_ENABLED[phase]):
            button.enabled = enabled
        self.pause.label = "Resume" if phase == Phase.PAUSED else "Pause"


def build_widgets(game: SnakeGame) -> HudWidgets:
    """Lay out the HUD strip under the board."""
    top = game.cfg.height
    width = game.cfg.width
    pad = 8
    bw = (width - 4 * pad) // 3
    bh = 30
    by = top + 36

    def rect(i):
        return pygame.Rect(pad + i * (bw + pad), by, bw, bh)

    # Leaves room right of the track for the longest speed label
    slider_w = width // 2 - 40
    widgets = HudWidgets(
        start=Button(rect(0), "Start", game.start),
        pause=Button(rect(1), "Pause", game.toggle_pause),
        restart=Button(rect(2), "Restart", game.restart),
        speed=Slider(
            pygame.Rect(pad + 52, top + HUD_HEIGHT - 18, slider_w, 8),
            value=game.tick_ms,
            on_change=game.set_speed,
        ),
        top=top,
    )
    widgets.sync(game.phase)
    return widgets


# ---------- Dispatch ----------
@dataclass
class InputMapper:
    """Routes pygame events to the game. handle_event returns False to quit."""
    game: SnakeGame
    widgets: HudWidgets
    window_size: Tuple[int, int]
    touch_start: Optional[Tuple[float, float]] = field(default=None)

    def _to_pixels(self, event) -> Tuple[float, float]:
        # Finger events carry coordinates normalised to [0, 1]
        w, h = self.window_size
        return event.x * w, event.y * h

    def handle_key(self, key: int) -> bool:
        if key in QUIT_KEYS:
            logger.debug("Quit key pressed")
            return False
        direction = KEY_DIRECTIONS.get(key)
        if direction is not None:
            self.game.request_direction(direction)
        elif key == pygame.K_SPACE:
            self.game.toggle_pause()
        return True

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.QUIT:
            return False
        if event.type == TICK_EVENT:
            self.game.tick()
        elif event.type == pygame.KEYDOWN:
            return self.handle_key(event.key)
        elif event.type == pygame.FINGERDOWN:
            # Swipes steer only when they start on the board
            start = self._to_pixels(event)
            self.touch_start = start if start[1] < self.widgets.top else None
        elif event.type == pygame.FINGERUP:
            if self.touch_start is not None:
                sx, sy = self.touch_start
                ex, ey = self._to_pixels(event)
                self.touch_start = None
                self.game.swipe(ex - sx, ey - sy)
        elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEMOTION, pygame.MOUSEBUTTONUP):
            # Touches also arrive as synthesized mouse events; on the board they are swipes
            on_board = event.pos[1] < self.widgets.top
            if getattr(event, "touch", False) and on_board and not self.widgets.speed.dragging:
                return True
            self.widgets.sync(self.game.phase)
            handled = self.widgets.speed.handle_event(event)
            if not handled:
                for button in self.widgets.buttons:
                    if button.handle_event(event):
                        break
            if handled or event.type == pygame.MOUSEBUTTONDOWN:
                self.game.render()
        elif event.type in (pygame.WINDOWEXPOSED, pygame.VIDEOEXPOSE):
            self.game.render()
        return True
