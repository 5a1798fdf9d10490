"""Layout constants for the practice board UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from ..board import GoalColor, RobotColor
from ..config import BOARD_SIZE

# Tile metrics
TILE_SIZE: int = 40
WALL_THICKNESS: int = 4
BOARD_OUTER_PADDING: int = 24
GRID_PADDING: int = 24

# UI panel metrics
UI_PANEL_WIDTH: int = 280
UI_PANEL_PADDING: int = 18
UI_PANEL_SPACING: int = 10

# Colors expressed as RGB tuples
BACKGROUND_COLOR: Tuple[int, int, int] = (12, 14, 26)
BOARD_BACKGROUND_COLOR: Tuple[int, int, int] = (226, 222, 208)
PANEL_BACKGROUND_COLOR: Tuple[int, int, int] = (32, 36, 60)
GRID_LINE_COLOR: Tuple[int, int, int] = (190, 184, 168)
WALL_COLOR: Tuple[int, int, int] = (40, 36, 44)
CENTER_COLOR: Tuple[int, int, int] = (70, 66, 80)
TEXT_COLOR: Tuple[int, int, int] = (232, 236, 244)
ACCENT_COLOR: Tuple[int, int, int] = (255, 94, 0)

ROBOT_RGB: Dict[RobotColor, Tuple[int, int, int]] = {
    RobotColor.RED: (220, 50, 47),
    RobotColor.YELLOW: (230, 190, 30),
    RobotColor.GREEN: (60, 170, 80),
    RobotColor.BLUE: (40, 110, 220),
}

GOAL_RGB: Dict[GoalColor, Tuple[int, int, int]] = {
    GoalColor.RED: (240, 160, 150),
    GoalColor.YELLOW: (245, 225, 140),
    GoalColor.GREEN: (160, 220, 170),
    GoalColor.BLUE: (150, 185, 240),
    GoalColor.ANY: (200, 170, 230),
}


@dataclass(frozen=True)
class BoardGeometry:
    """Pixel rectangles for the major UI regions."""

    board: Tuple[int, int, int, int]
    panel: Tuple[int, int, int, int]
    window: Tuple[int, int]


def compute_geometry(board_size: int = BOARD_SIZE, tile_size: int = TILE_SIZE) -> BoardGeometry:
    """Place the board on the left and the status panel to its right."""

    board_pixels = board_size * tile_size

    board_x = BOARD_OUTER_PADDING
    board_y = BOARD_OUTER_PADDING

    panel_x = board_x + board_pixels + GRID_PADDING
    panel_y = board_y

    window_width = panel_x + UI_PANEL_WIDTH + BOARD_OUTER_PADDING
    window_height = board_y + board_pixels + BOARD_OUTER_PADDING

    return BoardGeometry(
        board=(board_x, board_y, board_pixels, board_pixels),
        panel=(panel_x, panel_y, UI_PANEL_WIDTH, board_pixels),
        window=(window_width, window_height),
    )
