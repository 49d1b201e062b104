# game.py
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple
import logging

import numpy as np  # type: ignore

from .config import RIGHT, FOOD_SCORE

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


class Phase(str, Enum):
    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


# ---------- Helpers ----------
def spawn_food(
    snake: List[Cell], grid_w: int, grid_h: int, rng: np.random.Generator
) -> Cell:
    """Pick a cell uniformly among those the snake does not cover.

    Falls back to any cell on the board when the snake fills it.
    """
    occupied = np.zeros((grid_h, grid_w), dtype=bool)
    for x, y in snake:
        occupied[y, x] = True
    free = np.argwhere(~occupied)  # rows of (y, x)
    if len(free) == 0:
        return (int(rng.integers(grid_w)), int(rng.integers(grid_h)))
    fy, fx = free[rng.integers(len(free))]
    return (int(fx), int(fy))


def is_opposite(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


def hits_wall(cell: Cell, grid_w: int, grid_h: int) -> bool:
    x, y = cell
    return not (0 <= x < grid_w and 0 <= y < grid_h)


def hits_body(cell: Cell, snake: List[Cell]) -> bool:
    return cell in snake


# ---------- State ----------
@dataclass
class GameState:
    snake: List[Cell]              # head at index 0
    direction: Tuple[int, int]
    pending: Tuple[int, int]       # latched into direction at the next tick
    food: Cell
    score: int
    phase: Phase

    @property
    def head(self) -> Cell:
        return self.snake[0]


def new_game_state(grid_w: int, grid_h: int, rng: np.random.Generator) -> GameState:
    snake = [(grid_w // 2, grid_h // 2)]
    return GameState(
        snake=snake,
        direction=RIGHT,
        pending=RIGHT,
        food=spawn_food(snake, grid_w, grid_h, rng),
        score=0,
        phase=Phase.IDLE,
    )


# ---------- Update ----------
def step_game(
    state: GameState, grid_w: int, grid_h: int, rng: np.random.Generator
) -> bool:
    """
    Advance the snake by one cell.
    Returns True if alive, False on a wall or body collision. A colliding
    head is never committed, so the snake and score stay as they were.
    """
    # Commit direction once per tick
    state.direction = state.pending

    hx, hy = state.head
    dx, dy = state.direction
    new_head = (hx + dx, hy + dy)

    if hits_wall(new_head, grid_w, grid_h):
        logger.debug("Head %s left the %dx%d board", new_head, grid_w, grid_h)
        return False

    # Checked against the body before the tail moves away
    if hits_body(new_head, state.snake):
        logger.debug("Head %s ran into the body", new_head)
        return False

    state.snake.insert(0, new_head)

    if new_head == state.food:
        state.score += FOOD_SCORE
        state.food = spawn_food(state.snake, grid_w, grid_h, rng)
        logger.debug(
            "Food eaten at %s, score %d, next food at %s",
            new_head, state.score, state.food,
        )
    else:
        state.snake.pop()

    return True
