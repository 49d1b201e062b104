"""Single-player grid snake on pygame."""

from .config import Config
from .controller import SnakeGame
from .game import GameState, Phase

__all__ = ["Config", "SnakeGame", "GameState", "Phase"]
