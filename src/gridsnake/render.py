# render.py
from dataclasses import dataclass
from typing import Tuple

import pygame  # type: ignore

from .config import (
    BG, GRID_LINE, FOOD, BODY_EVEN, BODY_ODD, HEAD, EYE, TEXT,
    HUD_BG, HUD_TEXT, HUD_HEIGHT, BUTTON, BUTTON_OFF, TRACK, KNOB,
)
from .controller import SnakeGame
from .controls import HudWidgets
from .game import Phase

SPEED_LABEL_GAP = 12


@dataclass
class Fonts:
    title: pygame.font.Font
    body: pygame.font.Font
    small: pygame.font.Font


def load_fonts() -> Fonts:
    if not pygame.font.get_init():
        pygame.font.init()
    return Fonts(
        title=pygame.font.SysFont(None, 40),
        body=pygame.font.SysFont(None, 26),
        small=pygame.font.SysFont(None, 22),
    )


# ---------- Board ----------
def draw_grid(screen: pygame.Surface, cell: int, width: int, height: int) -> None:
    # Lines on both outer edges, like a canvas stroked at x = 0..width
    for x in range(0, width + 1, cell):
        pygame.draw.line(screen, GRID_LINE, (x, 0), (x, height), 1)
    for y in range(0, height + 1, cell):
        pygame.draw.line(screen, GRID_LINE, (0, y), (width, y), 1)


def draw_food(screen: pygame.Surface, cell: int, food: Tuple[int, int]) -> None:
    fx, fy = food
    center = (fx * cell + cell / 2, fy * cell + cell / 2)
    pygame.draw.circle(screen, FOOD, center, cell / 2 * 0.8)


def eye_rects(head: Tuple[int, int], direction: Tuple[int, int], cell: int):
    """Two eye squares on the side of the head facing `direction`."""
    size = cell / 5
    offset = cell / 3
    left, top = head[0] * cell, head[1] * cell
    if direction == (1, 0):
        x1 = x2 = left + cell - size - 2
        y1, y2 = top + offset, top + cell - offset - size
    elif direction == (-1, 0):
        x1 = x2 = left + 2
        y1, y2 = top + offset, top + cell - offset - size
    elif direction == (0, -1):
        y1 = y2 = top + 2
        x1, x2 = left + offset, left + cell - offset - size
    else:
        y1 = y2 = top + cell - size - 2
        x1, x2 = left + offset, left + cell - offset - size
    return (
        pygame.Rect(int(x1), int(y1), int(size), int(size)),
        pygame.Rect(int(x2), int(y2), int(size), int(size)),
    )


def draw_snake(screen: pygame.Surface, cell: int, snake, direction) -> None:
    # Body alternates two greens so segments read separately
    for i in range(1, len(snake)):
        x, y = snake[i]
        color = BODY_EVEN if i % 2 == 0 else BODY_ODD
        pygame.draw.rect(screen, color, pygame.Rect(x * cell, y * cell, cell, cell))

    hx, hy = snake[0]
    pygame.draw.rect(screen, HEAD, pygame.Rect(hx * cell, hy * cell, cell, cell))
    for eye in eye_rects(snake[0], direction, cell):
        pygame.draw.rect(screen, EYE, eye)


def draw_overlay(screen: pygame.Surface, fonts: Fonts, alpha: int, lines) -> None:
    """Dim the board and center `lines` of (text, font) on it."""
    w, h = screen.get_size()
    overlay = pygame.Surface((w, h), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, alpha))
    screen.blit(overlay, (0, 0))

    y = h // 2 - 30 * (len(lines) - 1) // 2
    for text, font in lines:
        surf = font.render(text, True, TEXT)
        screen.blit(surf, surf.get_rect(center=(w // 2, y)))
        y += 34


def draw_board(screen: pygame.Surface, game: SnakeGame, fonts: Fonts) -> None:
    """Draw one frame of the board. `screen` is exactly board-sized."""
    cell = game.cfg.cell_size
    w, h = screen.get_size()
    state = game.state

    screen.fill(BG)
    draw_grid(screen, cell, w, h)
    draw_food(screen, cell, state.food)
    draw_snake(screen, cell, state.snake, state.direction)

    if state.phase == Phase.PAUSED:
        draw_overlay(screen, fonts, 128, [("Paused", fonts.title)])
    elif state.phase == Phase.GAME_OVER:
        draw_overlay(screen, fonts, 179, [
            ("Game Over!", fonts.title),
            (f"Final score: {state.score}", fonts.body),
            ("Press Start to play again", fonts.body),
        ])


# ---------- HUD ----------
def draw_button(screen: pygame.Surface, fonts: Fonts, button) -> None:
    color = BUTTON if button.enabled else BUTTON_OFF
    pygame.draw.rect(screen, color, button.rect, border_radius=6)
    label = fonts.small.render(button.label, True, HUD_TEXT)
    screen.blit(label, label.get_rect(center=button.rect.center))


def draw_hud(screen: pygame.Surface, game: SnakeGame, widgets: HudWidgets, fonts: Fonts) -> None:
    top = widgets.top
    width = screen.get_width()
    pygame.draw.rect(screen, HUD_BG, pygame.Rect(0, top, width, HUD_HEIGHT))

    score = fonts.body.render(f"Score: {game.score}", True, HUD_TEXT)
    screen.blit(score, (8, top + 8))
    status = fonts.small.render(game.status_text, True, HUD_TEXT)
    screen.blit(status, status.get_rect(topright=(width - 8, top + 10)))

    widgets.sync(game.phase)
    for button in widgets.buttons:
        draw_button(screen, fonts, button)

    slider = widgets.speed
    caption = fonts.small.render("Speed", True, HUD_TEXT)
    screen.blit(caption, caption.get_rect(midright=(slider.rect.left - 6, slider.rect.centery)))
    pygame.draw.rect(screen, TRACK, slider.rect, border_radius=4)
    knob_x = slider.rect.left + int(slider.fraction * slider.rect.width)
    pygame.draw.circle(screen, KNOB, (knob_x, slider.rect.centery), 8)
    label = fonts.small.render(f"{game.tick_ms} ms ({game.speed_label})", True, HUD_TEXT)
    screen.blit(label, label.get_rect(midleft=(slider.rect.right + SPEED_LABEL_GAP, slider.rect.centery)))


def draw_frame(screen: pygame.Surface, game: SnakeGame, widgets: HudWidgets, fonts: Fonts) -> None:
    board = screen.subsurface(pygame.Rect(0, 0, game.cfg.width, game.cfg.height))
    draw_board(board, game, fonts)
    draw_hud(screen, game, widgets, fonts)
