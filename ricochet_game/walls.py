"""Wall collision queries."""

from __future__ import annotations

from typing import Optional

from .board import Direction, WallSet
from .config import BOARD_SIZE


def is_wall_blocking(walls: WallSet, x: int, y: int, direction: Direction) -> bool:
    """Return True if a wall stops a move from ``(x, y)`` in ``direction``.

    Cells outside the board and moves off the board edge report no wall; the
    board edge itself is handled by the movement code.
    """

    if walls is None:
        return False
    if not (0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE):
        return False

    if direction is Direction.UP:
        if y == 0:
            return False
        return x in walls.horizontal[y - 1]
    if direction is Direction.DOWN:
        if y == BOARD_SIZE - 1:
            return False
        return x in walls.horizontal[y]
    if direction is Direction.LEFT:
        if x == 0:
            return False
        return y in walls.vertical[x - 1]
    if direction is Direction.RIGHT:
        if x == BOARD_SIZE - 1:
            return False
        return y in walls.vertical[x]
    return False


def is_on_boundary(x: int, y: int) -> bool:
    return x == 0 or x == BOARD_SIZE - 1 or y == 0 or y == BOARD_SIZE - 1


def boundary_direction(x: int, y: int) -> Optional[Direction]:
    """Edge a boundary cell lies on, rows checked before columns."""

    if y == 0:
        return Direction.UP
    if y == BOARD_SIZE - 1:
        return Direction.DOWN
    if x == 0:
        return Direction.LEFT
    if x == BOARD_SIZE - 1:
        return Direction.RIGHT
    return None
