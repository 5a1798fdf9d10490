"""Interactive practice window for generated Ricochet Robots boards.

Keys: 1-4 select red/yellow/green/blue, arrows slide the selected robot,
Backspace undoes, Space resets, Enter checks the moves against the active
goal, N moves on to the next goal, Escape quits.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import pygame

from ricochet_game.config import resolve_generation_config
from ricochet_game.logger_config import configure_logging
from ricochet_game.puzzle import GenerationFailure, Puzzle, generate_puzzle
from ricochet_game.ui import RicochetBoardUI, compute_geometry
from ricochet_game.ui import layout

logger = logging.getLogger(__name__)


def draw_status(
    surface: pygame.Surface,
    board_ui: RicochetBoardUI,
    panel_rect: pygame.Rect,
    font: pygame.font.Font,
    small_font: pygame.font.Font,
    message: Optional[str],
) -> None:
    """Render the active goal, move list and last check result."""

    pygame.draw.rect(surface, layout.PANEL_BACKGROUND_COLOR, panel_rect, border_radius=12)
    x = panel_rect.x + layout.UI_PANEL_PADDING
    y = panel_rect.y + layout.UI_PANEL_PADDING

    lines: List[str] = []
    goal = board_ui.active_goal
    if goal is not None:
        lines.append(f"Goal: {goal.color.value} at {goal.position}")
    lines.append(f"Selected: {board_ui.selected.value}")
    lines.append(f"Moves: {len(board_ui.moves)}")
    for move in board_ui.moves[-12:]:
        lines.append(f"  {move.robot.value} {move.direction.value}")

    heading = font.render("Practice", True, layout.TEXT_COLOR)
    surface.blit(heading, (x, y))
    y += font.get_linesize() + layout.UI_PANEL_SPACING

    for line in lines:
        text_surface = small_font.render(line, True, layout.TEXT_COLOR)
        surface.blit(text_surface, (x, y))
        y += text_surface.get_height() + 4

    if message:
        y += layout.UI_PANEL_SPACING
        status_surface = small_font.render(message, True, layout.ACCENT_COLOR)
        surface.blit(status_surface, (x, y))


def shift_mouse_event(event: pygame.event.Event, origin) -> pygame.event.Event:
    """Translate click positions from window to board coordinates."""

    if event.type != pygame.MOUSEBUTTONDOWN:
        return event
    x, y = event.pos
    return pygame.event.Event(event.type, button=event.button, pos=(x - origin[0], y - origin[1]))


def make_board_ui(puzzle: Puzzle, goal_index: int) -> RicochetBoardUI:
    return RicochetBoardUI(
        puzzle.walls,
        puzzle.robots,
        puzzle.goals,
        active_goal=puzzle.goal(goal_index),
    )


def main() -> int:
    configure_logging()

    puzzle = generate_puzzle(config=resolve_generation_config())
    if isinstance(puzzle, GenerationFailure):
        logger.error("Could not generate a board: %s", puzzle.error)
        return 1

    pygame.init()
    pygame.font.init()

    geometry = compute_geometry()
    screen = pygame.display.set_mode(geometry.window)
    pygame.display.set_caption("Ricochet Robots Practice")

    font = pygame.font.Font(None, 30)
    small_font = pygame.font.Font(None, 22)

    goal_index = 0
    board_ui = make_board_ui(puzzle, goal_index)
    message: Optional[str] = None

    clock = pygame.time.Clock()
    running = True

    while running:
        events = pygame.event.get()
        for event in events:
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_RETURN:
                result = board_ui.check_solution()
                if result is not None and result.valid:
                    message = f"Solved in {len(board_ui.moves)} moves!"
                elif result is not None:
                    message = result.reason
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_n:
                # Robots stay where the last round left them.
                goal_index = (goal_index + 1) % len(puzzle.goals)
                puzzle.robots = board_ui.robots
                board_ui = make_board_ui(puzzle, goal_index)
                message = None

        board_rect = pygame.Rect(*geometry.board)
        board_ui.process_events(
            [shift_mouse_event(event, board_rect.topleft) for event in events]
        )

        screen.fill(layout.BACKGROUND_COLOR)
        screen.blit(board_ui.render(), board_rect.topleft)
        draw_status(screen, board_ui, pygame.Rect(*geometry.panel), font, small_font, message)

        pygame.display.flip()
        clock.tick(60)

    pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
