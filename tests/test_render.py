import pygame
import pytest

from gridsnake.config import (
    BG, GRID_LINE, FOOD, BODY_EVEN, BODY_ODD, HEAD, EYE, HUD_BG,
    UP, DOWN, LEFT, RIGHT,
)
from gridsnake.controls import build_widgets
from gridsnake.game import Phase
from gridsnake.render import SPEED_LABEL_GAP, draw_board, draw_frame, eye_rects, load_fonts


@pytest.fixture(scope="module")
def fonts():
    pygame.font.init()
    yield load_fonts()
    pygame.font.quit()


@pytest.fixture
def board(game):
    return pygame.Surface((game.cfg.width, game.cfg.height))


def rgb(surface, pos):
    return tuple(surface.get_at(pos))[:3]


def test_board_layers(game, board, fonts):
    game.state.snake = [(10, 10), (9, 10), (8, 10)]
    game.state.food = (2, 3)
    draw_board(board, game, fonts)

    assert rgb(board, (20, 5)) == GRID_LINE
    assert rgb(board, (5, 5)) == BG
    assert rgb(board, (2 * 20 + 10, 3 * 20 + 10)) == FOOD
    # Inscribed circle leaves the cell corner clear
    assert rgb(board, (2 * 20 + 1, 3 * 20 + 1)) == BG
    assert rgb(board, (10 * 20 + 3, 10 * 20 + 3)) == HEAD
    assert rgb(board, (9 * 20 + 10, 10 * 20 + 10)) == BODY_ODD
    assert rgb(board, (8 * 20 + 10, 10 * 20 + 10)) == BODY_EVEN


@pytest.mark.parametrize("direction", [UP, DOWN, LEFT, RIGHT])
def test_eyes_face_direction(game, board, fonts, direction):
    game.state.snake = [(5, 5)]
    game.state.direction = direction
    game.state.food = (0, 0)
    draw_board(board, game, fonts)
    for eye in eye_rects((5, 5), direction, 20):
        assert rgb(board, eye.center) == EYE


def test_eye_placement_for_right():
    a, b = eye_rects((0, 0), RIGHT, 20)
    assert a.x == b.x == 14
    assert a.size == (4, 4)
    assert a.y < b.y


def test_pause_overlay_darkens_board(game, board, fonts):
    game.start()
    game.state.food = (0, 0)
    game.toggle_pause()
    assert game.phase == Phase.PAUSED
    draw_board(board, game, fonts)
    r, g, b = rgb(board, (5, 5))
    assert r < 140 and r == g == b


def test_game_over_overlay_is_darker_than_pause(game, board, fonts):
    game.start()
    game.toggle_pause()
    draw_board(board, game, fonts)
    paused = rgb(board, (5, 5))[0]

    game.toggle_pause()
    game.state.snake = [(19, 10)]
    game.tick()
    assert game.phase == Phase.GAME_OVER
    draw_board(board, game, fonts)
    assert rgb(board, (5, 5))[0] < paused


def test_full_frame_draws_hud_below_board(game, fonts):
    screen = pygame.Surface(game.cfg.window_size)
    widgets = build_widgets(game)
    draw_frame(screen, game, widgets, fonts)
    assert rgb(screen, (1, game.cfg.height + 2)) == HUD_BG
    assert rgb(screen, (5, 5)) == BG


def test_slowest_speed_label_fits_in_window(game, fonts):
    game.set_speed(300)
    slider = build_widgets(game).speed
    label = fonts.small.render(f"{game.tick_ms} ms ({game.speed_label})", True, (0, 0, 0))
    assert slider.rect.right + SPEED_LABEL_GAP + label.get_width() <= game.cfg.width
