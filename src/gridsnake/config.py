from dataclasses import dataclass
from typing import Optional

# ----- Board & HUD -----
WIDTH, HEIGHT = 400, 400
CELL_SIZE = 20
HUD_HEIGHT = 96

# ----- Colors -----
BG         = (255, 255, 255)
GRID_LINE  = (224, 224, 224)   # #e0e0e0
FOOD       = (255, 0, 0)
BODY_EVEN  = (76, 175, 80)     # #4caf50
BODY_ODD   = (56, 142, 60)     # #388e3c
HEAD       = (46, 125, 50)     # #2e7d32
EYE        = (255, 255, 255)
TEXT       = (240, 240, 240)
HUD_BG     = (38, 42, 50)
HUD_TEXT   = (230, 232, 238)
BUTTON     = (76, 175, 80)
BUTTON_OFF = (90, 94, 102)
TRACK      = (90, 94, 102)
KNOB       = (224, 224, 224)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

# ----- Rules -----
FOOD_SCORE = 10

# ----- Speed slider (tick interval in ms; larger = slower) -----
SPEED_MIN_MS = 50
SPEED_MAX_MS = 300
SPEED_STEP_MS = 10
DEFAULT_TICK_MS = 150


# ----- Tunables -----
@dataclass
class Config:
    width: int = WIDTH
    height: int = HEIGHT
    cell_size: int = CELL_SIZE
    tick_ms: int = DEFAULT_TICK_MS
    seed: Optional[int] = None
    fps: int = 60

    def __post_init__(self):
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.width < self.cell_size or self.height < self.cell_size:
            raise ValueError(
                f"board {self.width}x{self.height} is smaller than one "
                f"{self.cell_size}px cell"
            )
        if self.grid_w < 2 or self.grid_h < 2:
            raise ValueError(
                f"board must hold at least 2x2 cells, got {self.grid_w}x{self.grid_h}"
            )
        if not SPEED_MIN_MS <= self.tick_ms <= SPEED_MAX_MS:
            raise ValueError(
                f"tick_ms must be within [{SPEED_MIN_MS}, {SPEED_MAX_MS}], got {self.tick_ms}"
            )

    @property
    def grid_w(self) -> int:
        return self.width // self.cell_size

    @property
    def grid_h(self) -> int:
        return self.height // self.cell_size

    @property
    def window_size(self):
        return (self.width, self.height + HUD_HEIGHT)
