"""L-shaped wall corners that pocket each goal.

A corner puts two walls on adjacent sides of its goal cell. Orientation names
the pair of sides::

    NW  walls above and left      NE  walls above and right
    SW  walls below and left      SE  walls below and right
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import Iterable, List, Optional, Sequence, Tuple

from .board import Position, WallKind, WallSegment, WallSet


class Orientation(Enum):
    NW = "NW"
    NE = "NE"
    SW = "SW"
    SE = "SE"

    @property
    def north(self) -> bool:
        return self in (Orientation.NW, Orientation.NE)

    @property
    def west(self) -> bool:
        return self in (Orientation.NW, Orientation.SW)


ORIENTATIONS: Tuple[Orientation, ...] = tuple(Orientation)


@dataclass(frozen=True)
class Corner:
    """Goal cell plus the orientation of its L-shaped walls."""

    position: Position
    orientation: Orientation

    def segments(self) -> Tuple[WallSegment, WallSegment]:
        return wall_segments_for(self.position, self.orientation)


def _horizontal_row(y: int, orientation: Orientation) -> int:
    return y - 1 if orientation.north else y


def _vertical_col(x: int, orientation: Orientation) -> int:
    return x - 1 if orientation.west else x


def wall_segments_for(
    position: Position, orientation: Orientation
) -> Tuple[WallSegment, WallSegment]:
    """Return the horizontal and vertical segment of a corner."""

    x, y = position
    return (
        WallSegment(WallKind.HORIZONTAL, row=_horizontal_row(y, orientation), col=x),
        WallSegment(WallKind.VERTICAL, row=y, col=_vertical_col(x, orientation)),
    )


def segments_overlap(first: WallSegment, second: WallSegment) -> bool:
    return first.kind is second.kind and first.row == second.row and first.col == second.col


def walls_overlap(first: Iterable[WallSegment], second: Iterable[WallSegment]) -> bool:
    second = list(second)
    return any(segments_overlap(a, b) for a in first for b in second)


def adjacent_segments(position: Position, orientation: Orientation) -> List[WallSegment]:
    """Segments that would touch the corner's walls.

    For each of the two walls this covers the collinear neighbour on either
    side, and at the free end (away from the corner) the perpendicular wall
    continuing outward. Segments off the board are dropped.
    """

    x, y = position
    h_row = _horizontal_row(y, orientation)
    v_col = _vertical_col(x, orientation)
    candidates = [
        WallSegment(WallKind.HORIZONTAL, row=h_row, col=x - 1),
        WallSegment(WallKind.HORIZONTAL, row=h_row, col=x + 1),
        WallSegment(WallKind.VERTICAL, row=y - 1, col=v_col),
        WallSegment(WallKind.VERTICAL, row=y + 1, col=v_col),
        # Free end of the horizontal wall sits on the side opposite the vertical one.
        WallSegment(
            WallKind.VERTICAL,
            row=y - 1 if orientation.north else y + 1,
            col=x if orientation.west else x - 1,
        ),
        # Free end of the vertical wall sits on the side opposite the horizontal one.
        WallSegment(
            WallKind.HORIZONTAL,
            row=y if orientation.north else y - 1,
            col=x - 1 if orientation.west else x + 1,
        ),
    ]

    unique: List[WallSegment] = []
    for segment in candidates:
        if segment.in_bounds() and segment not in unique:
            unique.append(segment)
    return unique


def would_be_enclosed(position: Position, orientation: Orientation, walls: WallSet) -> bool:
    """True if the two sides the corner leaves open are already walled."""

    opposite = {
        Orientation.NW: Orientation.SE,
        Orientation.NE: Orientation.SW,
        Orientation.SW: Orientation.NE,
        Orientation.SE: Orientation.NW,
    }[orientation]
    return all(walls.has(segment) for segment in wall_segments_for(position, opposite))


def can_place(
    position: Position,
    orientation: Orientation,
    existing: Sequence[Corner],
    walls: Optional[WallSet] = None,
) -> bool:
    """Check whether a corner may be placed, stopping at the first failure.

    1. its walls must not coincide with any existing corner's walls;
    2. its cell must be at Chebyshev distance >= 2 from every existing corner;
    3. (with ``walls``) its walls must not touch a wall already on the board;
    4. (with ``walls``) its goal cell must not end up walled on all four sides.
    """

    new_segments = wall_segments_for(position, orientation)

    for corner in existing:
        if walls_overlap(new_segments, corner.segments()):
            return False

    x, y = position
    for corner in existing:
        cx, cy = corner.position
        if abs(x - cx) <= 1 and abs(y - cy) <= 1:
            return False

    if walls is not None:
        for segment in adjacent_segments(position, orientation):
            if walls.has(segment):
                return False
        if would_be_enclosed(position, orientation, walls):
            return False

    return True


def add_corner(walls: WallSet, position: Position, orientation: Orientation) -> None:
    for segment in wall_segments_for(position, orientation):
        walls.add(segment)


def random_orientation(rng: Optional[Random] = None) -> Orientation:
    return (rng or Random()).choice(ORIENTATIONS)


def is_valid_orientation(value: object) -> bool:
    if isinstance(value, Orientation):
        return True
    return isinstance(value, str) and value in {orientation.value for orientation in Orientation}


def is_valid_corner_position(
    position: Position,
    x_min: int = 1,
    x_max: int = 14,
    y_min: int = 1,
    y_max: int = 14,
) -> bool:
    """Corners stay off the outer ring by default; bounds are inclusive."""

    x, y = position
    return x_min <= x <= x_max and y_min <= y <= y_max
