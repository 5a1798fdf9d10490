"""Plain-text helpers for the command line: board drawing and move parsing."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from .board import Goal, GoalColor, Move, Position, RobotColor, RobotSet, WallSet
from .config import BOARD_SIZE
from .skeleton import CENTER_CELLS

ROBOT_SYMBOLS: Dict[RobotColor, str] = {
    RobotColor.RED: "R",
    RobotColor.YELLOW: "Y",
    RobotColor.GREEN: "G",
    RobotColor.BLUE: "B",
}

GOAL_SYMBOLS: Dict[GoalColor, str] = {
    GoalColor.RED: "r",
    GoalColor.YELLOW: "y",
    GoalColor.GREEN: "g",
    GoalColor.BLUE: "b",
    GoalColor.ANY: "*",
}


def _cell_symbol(
    position: Position,
    robots: Optional[RobotSet],
    goals: Dict[Position, Goal],
) -> str:
    if robots is not None:
        color = robots.robot_at(position)
        if color is not None:
            return ROBOT_SYMBOLS[color]
    goal = goals.get(position)
    if goal is not None:
        return GOAL_SYMBOLS[goal.color]
    if position in CENTER_CELLS:
        return "#"
    return "."


def render_board(
    walls: WallSet,
    robots: Optional[RobotSet] = None,
    goals: Sequence[Goal] = (),
) -> str:
    """Draw the board with ``|`` and ``---`` for walls.

    Robots are upper-case letters, goals lower-case (``*`` for the any-robot
    goal) and the blocked center is ``#``.
    """

    goal_map = {goal.position: goal for goal in goals}
    lines: List[str] = ["+" + "---+" * BOARD_SIZE]

    for y in range(BOARD_SIZE):
        row = "|"
        for x in range(BOARD_SIZE):
            row += f" {_cell_symbol((x, y), robots, goal_map)} "
            wall_right = x == BOARD_SIZE - 1 or y in walls.vertical[x]
            row += "|" if wall_right else " "
        lines.append(row)

        below = "+"
        for x in range(BOARD_SIZE):
            wall_below = y == BOARD_SIZE - 1 or x in walls.horizontal[y]
            below += ("---" if wall_below else "   ") + "+"
        lines.append(below)

    return "\n".join(lines)


def parse_moves(text: str) -> List[Move]:
    """Parse ``"red:up, blue:left"`` into moves. Raises ValueError on bad input."""

    moves: List[Move] = []
    for token in text.split(","):
        token = token.strip()
        if not token:
            continue
        moves.append(Move.from_value(token))
    return moves
