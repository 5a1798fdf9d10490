"""Fixed board structure laid down before any goal is placed."""

from __future__ import annotations

import logging
from random import Random
from typing import FrozenSet, Optional

from .board import Position, WallKind, WallSegment, WallSet
from .config import BOARD_SIZE

logger = logging.getLogger(__name__)

CENTER_CELLS: FrozenSet[Position] = frozenset({(7, 7), (7, 8), (8, 7), (8, 8)})
"""The blocked 2x2 square in the middle of the board."""

_LOW_EDGE_RANGE = range(1, 7)
_HIGH_EDGE_RANGE = range(8, 14)


def empty_walls() -> WallSet:
    return WallSet()


def add_center_block(walls: WallSet) -> None:
    """Wall in the four center cells on every side."""

    for member in (7, 8):
        walls.add(WallSegment(WallKind.HORIZONTAL, row=6, col=member))
        walls.add(WallSegment(WallKind.HORIZONTAL, row=8, col=member))
        walls.add(WallSegment(WallKind.VERTICAL, row=member, col=6))
        walls.add(WallSegment(WallKind.VERTICAL, row=member, col=8))


def add_outer_edge_walls(walls: WallSet, rng: Optional[Random] = None) -> None:
    """Add eight short walls sticking in from the board edge, two per quadrant.

    Each quadrant gets one wall on its top/bottom edge and one on its
    left/right edge, 2-7 cells from the nearest board corner. Walls on the top
    and bottom edges are vertical; walls on the left and right edges are
    horizontal.
    """

    rng = rng or Random()
    last = BOARD_SIZE - 1

    def low() -> int:
        return rng.choice(_LOW_EDGE_RANGE)

    def high() -> int:
        return rng.choice(_HIGH_EDGE_RANGE)

    placements = (
        # NW: top edge, left edge
        WallSegment(WallKind.VERTICAL, row=0, col=low()),
        WallSegment(WallKind.HORIZONTAL, row=low(), col=0),
        # NE: top edge, right edge
        WallSegment(WallKind.VERTICAL, row=0, col=high()),
        WallSegment(WallKind.HORIZONTAL, row=low(), col=last),
        # SW: bottom edge, left edge
        WallSegment(WallKind.VERTICAL, row=last, col=low()),
        WallSegment(WallKind.HORIZONTAL, row=high(), col=0),
        # SE: bottom edge, right edge
        WallSegment(WallKind.VERTICAL, row=last, col=high()),
        WallSegment(WallKind.HORIZONTAL, row=high(), col=last),
    )
    for segment in placements:
        walls.add(segment)


def build_skeleton(rng: Optional[Random] = None) -> WallSet:
    """Empty board plus the center block and the outer edge walls."""

    walls = empty_walls()
    add_center_block(walls)
    add_outer_edge_walls(walls, rng)
    logger.debug("Built board skeleton with %d wall segments", walls.segment_count())
    return walls
