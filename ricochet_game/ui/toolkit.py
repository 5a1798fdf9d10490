"""Pygame practice board: draw a puzzle and slide robots with the keyboard.

Rendering only uses primitive shapes and pygame's default font so it runs
headless under the SDL ``dummy`` video driver.
"""

from __future__ import annotations

import os
from typing import Iterable, List, Optional, Sequence, Tuple

from ..board import Direction, Goal, Move, Position, RobotColor, RobotSet, WallSet
from ..config import BOARD_SIZE
from ..engine import apply_move, apply_moves
from ..skeleton import CENTER_CELLS
from ..solution import ValidationResult, validate_solution
from ..text import GOAL_SYMBOLS
from . import layout

# Pygame is only needed for the UI.  The import is performed lazily in
# ``ensure_pygame`` so test environments can pick the SDL drivers first.
_PYGAME = None


def ensure_pygame():
    global _PYGAME
    if _PYGAME is None:
        os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
        _PYGAME = __import__("pygame")
        _PYGAME.display.init()
        _PYGAME.font.init()
    return _PYGAME


def _direction_keys(pygame) -> dict:
    return {
        pygame.K_UP: Direction.UP,
        pygame.K_DOWN: Direction.DOWN,
        pygame.K_LEFT: Direction.LEFT,
        pygame.K_RIGHT: Direction.RIGHT,
    }


def _robot_keys(pygame) -> dict:
    return {
        pygame.K_1: RobotColor.RED,
        pygame.K_2: RobotColor.YELLOW,
        pygame.K_3: RobotColor.GREEN,
        pygame.K_4: RobotColor.BLUE,
    }


class RicochetBoardUI:
    """Board view that records a move list while the player practices."""

    def __init__(
        self,
        walls: WallSet,
        robots: RobotSet,
        goals: Sequence[Goal] = (),
        *,
        active_goal: Optional[Goal] = None,
        cell_size: int = layout.TILE_SIZE,
        surface=None,
        use_display: bool = False,
    ) -> None:
        pygame = ensure_pygame()
        self.walls = walls
        self.initial_robots = robots
        self.robots = robots
        self.goals = list(goals)
        self.active_goal = active_goal
        self.cell_size = cell_size
        size = BOARD_SIZE * cell_size
        self.surface = surface or pygame.Surface((size, size))
        self.screen = None
        if use_display:
            self.screen = pygame.display.set_mode((size, size))
        self.selected = RobotColor.RED
        self.moves: List[Move] = []
        self.font = pygame.font.Font(pygame.font.get_default_font(), max(10, cell_size // 3))

    # ------------------------------------------------------------------
    # Input handling
    def process_events(self, events: Iterable[object]) -> None:
        pygame = ensure_pygame()
        directions = _direction_keys(pygame)
        robots = _robot_keys(pygame)
        for event in events:
            if event.type == pygame.KEYDOWN:
                if event.key in robots:
                    self.selected = robots[event.key]
                elif event.key in directions:
                    self.move_selected(directions[event.key])
                elif event.key == pygame.K_BACKSPACE:
                    self.undo()
                elif event.key == pygame.K_SPACE:
                    self.reset()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._handle_click(event.pos)

    def _grid_from_pixel(self, pos: Tuple[int, int]) -> Optional[Position]:
        grid_x = pos[0] // self.cell_size
        grid_y = pos[1] // self.cell_size
        if not (0 <= grid_x < BOARD_SIZE and 0 <= grid_y < BOARD_SIZE):
            return None
        return grid_x, grid_y

    def _handle_click(self, pos: Tuple[int, int]) -> None:
        cell = self._grid_from_pixel(pos)
        if cell is None:
            return
        color = self.robots.robot_at(cell)
        if color is not None:
            self.selected = color

    def move_selected(self, direction: Direction) -> Position:
        """Slide the selected robot. Moves that go nowhere are not recorded."""

        move = Move(self.selected, direction)
        before = self.robots.get(self.selected)
        updated = apply_move(self.robots, self.walls, move)
        if updated.get(self.selected) != before:
            self.robots = updated
            self.moves.append(move)
        return self.robots.get(self.selected)

    def undo(self) -> None:
        if not self.moves:
            return
        self.moves.pop()
        self.robots = apply_moves(self.initial_robots, self.walls, self.moves)

    def reset(self) -> None:
        self.moves.clear()
        self.robots = self.initial_robots

    def check_solution(self) -> Optional[ValidationResult]:
        if self.active_goal is None:
            return None
        return validate_solution(self.initial_robots, self.walls, self.moves, self.active_goal)

    # ------------------------------------------------------------------
    # Rendering helpers
    def render(self):
        pygame = ensure_pygame()
        self.surface.fill(layout.BOARD_BACKGROUND_COLOR)
        self._draw_grid()
        self._draw_goals()
        self._draw_walls()
        self._draw_robots()
        if self.screen:
            self.screen.blit(self.surface, (0, 0))
            pygame.display.flip()
        return self.surface

    def _cell_rect(self, position: Position):
        pygame = ensure_pygame()
        return pygame.Rect(
            position[0] * self.cell_size,
            position[1] * self.cell_size,
            self.cell_size,
            self.cell_size,
        )

    def _draw_grid(self) -> None:
        pygame = ensure_pygame()
        for x in range(BOARD_SIZE):
            for y in range(BOARD_SIZE):
                pygame.draw.rect(self.surface, layout.GRID_LINE_COLOR, self._cell_rect((x, y)), 1)
        for position in CENTER_CELLS:
            self.surface.fill(layout.CENTER_COLOR, self._cell_rect(position))

    def _draw_goals(self) -> None:
        pygame = ensure_pygame()
        for goal in self.goals:
            rect = self._cell_rect(goal.position).inflate(-6, -6)
            self.surface.fill(layout.GOAL_RGB[goal.color], rect)
            if self.active_goal is not None and goal == self.active_goal:
                pygame.draw.rect(self.surface, layout.ACCENT_COLOR, rect, 3)
            self._draw_text(goal.position, GOAL_SYMBOLS[goal.color])

    def _draw_text(self, position: Position, text: str) -> None:
        label = self.font.render(text, True, layout.WALL_COLOR)
        rect = label.get_rect()
        rect.center = self._cell_rect(position).center
        self.surface.blit(label, rect)

    def _draw_walls(self) -> None:
        pygame = ensure_pygame()
        size = self.cell_size
        for row, columns in enumerate(self.walls.horizontal):
            for col in columns:
                y = (row + 1) * size
                pygame.draw.line(
                    self.surface,
                    layout.WALL_COLOR,
                    (col * size, y),
                    ((col + 1) * size, y),
                    layout.WALL_THICKNESS,
                )
        for col, rows in enumerate(self.walls.vertical):
            for row in rows:
                x = (col + 1) * size
                pygame.draw.line(
                    self.surface,
                    layout.WALL_COLOR,
                    (x, row * size),
                    (x, (row + 1) * size),
                    layout.WALL_THICKNESS,
                )

    def _draw_robots(self) -> None:
        pygame = ensure_pygame()
        radius = self.cell_size // 2 - 5
        for color, position in self.robots.items():
            center = self._cell_rect(position).center
            pygame.draw.circle(self.surface, layout.ROBOT_RGB[color], center, radius)
            if color is self.selected:
                pygame.draw.circle(self.surface, layout.ACCENT_COLOR, center, radius + 2, 2)


__all__ = ["RicochetBoardUI", "ensure_pygame"]
