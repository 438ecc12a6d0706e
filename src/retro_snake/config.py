from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

# ----- Board -----
BOARD_SIZE = 20                 # cells per side (square grid)
CELL_SIZE = 22                  # px per cell at full size
MIN_CELL_SIZE = 12              # px, smallest cell when shrinking to fit the display
MOVE_INTERVAL_MS = 110          # one tick per period

# Food lands here when no cell is free
FALLBACK_FOOD = (1, 1)

# ----- Layout (px) -----
MARGIN = 32
SCORE_BAR_H = 56
CONTROLS_H = 92

# ----- Colors -----
PRIMARY   = (76, 175, 80)       # head, primary buttons
SECONDARY = (56, 142, 60)       # body, score bar
ACCENT    = (255, 193, 7)       # food, reset button
FOOD_EDGE = (216, 179, 0)
BOARD_BG  = (250, 251, 252)
GRID_LINE = (230, 237, 237)
WINDOW_BG = (255, 255, 255)
TEXT      = (34, 34, 34)
HINT      = (85, 153, 85)
EYE       = (255, 255, 255)
PUPIL     = (34, 34, 34)
GAME_OVER_WASH = (255, 68, 0, 46)   # RGBA, ~0.18 alpha
PANEL_BG  = (255, 255, 255, 247)
DISABLED  = (200, 205, 200)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
INITIAL_DIRECTION = RIGHT


def initial_snake(board_size: int = BOARD_SIZE) -> Tuple[Tuple[int, int], ...]:
    """Three cells facing right, head two cells left of centre: (8,10),(7,10),(6,10) on 20x20."""
    c = board_size // 2
    return ((c - 2, c), (c - 3, c), (c - 4, c))


# ----- Tunables -----
@dataclass(frozen=True)
class Config:
    seed: int | None = None
    board_size: int = BOARD_SIZE
    cell_size: int = CELL_SIZE
    move_interval_ms: int = MOVE_INTERVAL_MS

    def __post_init__(self):
        if self.board_size < 8:
            raise ValueError(f"board_size must be at least 8, got {self.board_size}")
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.move_interval_ms <= 0:
            raise ValueError(f"move_interval_ms must be positive, got {self.move_interval_ms}")


CFG = Config()
