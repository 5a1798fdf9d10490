"""Robot movement: slide until a wall, the board edge or another robot."""

from __future__ import annotations

import logging
from typing import Iterable

from .board import Direction, Move, Position, RobotColor, RobotSet, WallSet
from .config import BOARD_SIZE
from .walls import is_wall_blocking

logger = logging.getLogger(__name__)


def _occupied_by_other(robots: RobotSet, moving: RobotColor, x: int, y: int) -> bool:
    for color, (rx, ry) in robots.items():
        if color is moving:
            continue
        if rx == x and ry == y:
            return True
    return False


def move_robot(
    robots: RobotSet, walls: WallSet, color: RobotColor, direction: Direction
) -> Position:
    """Return the cell where ``color`` comes to rest after sliding.

    The robot keeps going until the next step would leave the board, cross a
    wall or land on another robot. A robot that cannot move stays put.
    Inputs are assumed well formed; see :func:`ricochet_game.solution.validate_solution`.
    """

    x, y = robots.get(color)
    dx, dy = direction.vector

    while True:
        next_x, next_y = x + dx, y + dy
        if not (0 <= next_x < BOARD_SIZE and 0 <= next_y < BOARD_SIZE):
            break
        if is_wall_blocking(walls, x, y, direction):
            break
        if _occupied_by_other(robots, color, next_x, next_y):
            break
        x, y = next_x, next_y

    return (x, y)


def apply_move(robots: RobotSet, walls: WallSet, move: Move) -> RobotSet:
    """Apply one move and return the updated robot set."""

    destination = move_robot(robots, walls, move.robot, move.direction)
    logger.debug(
        "Moved %s %s: %s -> %s",
        move.robot.value,
        move.direction.value,
        robots.get(move.robot),
        destination,
    )
    return robots.with_position(move.robot, destination)


def apply_moves(robots: RobotSet, walls: WallSet, moves: Iterable[Move]) -> RobotSet:
    """Apply ``moves`` in order; each move sees the result of the previous ones."""

    current = robots
    for move in moves:
        current = apply_move(current, walls, move)
    return current


def robot_position(robots: RobotSet, color: RobotColor) -> Position:
    return robots.get(color)
