"""Solution checking for submitted move lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from .board import (
    ROBOT_COLORS,
    Goal,
    GoalColor,
    Move,
    Position,
    RobotColor,
    RobotSet,
    WallSet,
    coerce_position,
    is_valid_goal_color,
    is_valid_move,
    is_valid_position,
    positions_equal,
)
from .engine import apply_moves


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    reason: Optional[str] = None
    final_positions: Optional[RobotSet] = None
    winning_robot: Optional[RobotColor] = None


def _goal_parts(goal: object):
    if isinstance(goal, Goal):
        return goal.position, goal.color
    if isinstance(goal, Mapping):
        return goal.get("position"), goal.get("color")
    return getattr(goal, "position", None), getattr(goal, "color", None)


def validate_solution(
    initial_robots: Optional[RobotSet],
    walls: Optional[WallSet],
    moves: Optional[Sequence[object]],
    goal: object,
) -> ValidationResult:
    """Replay ``moves`` and decide whether they solve ``goal``.

    Moves may be :class:`Move` objects or ``{"robot", "direction"}``
    mappings, and the goal a :class:`Goal` or a mapping with ``position`` and
    ``color``. Malformed input is reported in the result, never raised.
    """

    if initial_robots is None or walls is None or moves is None or goal is None:
        return ValidationResult(False, reason="Missing required parameters")

    raw_position, raw_color = _goal_parts(goal)
    if raw_position is None or raw_color is None:
        return ValidationResult(False, reason="Goal must have position and color")
    if isinstance(raw_position, Mapping):
        raw_position = (raw_position.get("x"), raw_position.get("y"))
    if not is_valid_position(raw_position) or not is_valid_goal_color(raw_color):
        return ValidationResult(False, reason="Goal must have position and color")
    target = coerce_position(raw_position)
    color = GoalColor.from_name(raw_color)

    for index, move in enumerate(moves):
        if not is_valid_move(move):
            return ValidationResult(False, reason=f"Invalid move at index {index}")

    final_positions = apply_moves(initial_robots, walls, [Move.from_value(move) for move in moves])
    x, y = target

    robot = color.robot_color
    if robot is not None:
        if positions_equal(final_positions.get(robot), target):
            return ValidationResult(True, final_positions=final_positions, winning_robot=robot)
        return ValidationResult(
            False,
            reason=f"Robot {robot.value} did not reach goal position ({x}, {y})",
            final_positions=final_positions,
        )

    winner = find_robot_at_goal(final_positions, target)
    if winner is not None:
        return ValidationResult(True, final_positions=final_positions, winning_robot=winner)
    return ValidationResult(
        False,
        reason=f"No robot reached goal position ({x}, {y})",
        final_positions=final_positions,
    )


def move_count(
    initial_robots: RobotSet, walls: WallSet, moves: Sequence[object], goal: object
) -> int:
    """Number of moves in a valid solution, or -1."""

    result = validate_solution(initial_robots, walls, moves, goal)
    return len(moves) if result.valid else -1


def is_robot_at_goal(robots: RobotSet, color: RobotColor, goal_position: Position) -> bool:
    return positions_equal(robots.get(color), goal_position)


def find_robot_at_goal(robots: RobotSet, goal_position: Position) -> Optional[RobotColor]:
    for color in ROBOT_COLORS:
        if is_robot_at_goal(robots, color, goal_position):
            return color
    return None
