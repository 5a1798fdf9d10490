"""Goal placement: 17 goals, each pocketed by an L-shaped corner."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from random import Random
from typing import List, Optional, Sequence, Tuple

from .board import Goal, GoalColor, Position, WallSet
from .config import (
    ANY_GOAL_ATTEMPTS,
    GOAL_COUNT,
    GOALS_PER_COLOR,
    SINGLE_GOAL_ATTEMPTS,
    GenerationConfig,
)
from .corners import Corner, add_corner, can_place, is_valid_corner_position, random_orientation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Quadrant:
    """Inclusive cell bounds where goals of one board quarter may go."""

    name: str
    x_min: int
    x_max: int
    y_min: int
    y_max: int

    def contains(self, position: Position) -> bool:
        return is_valid_corner_position(position, self.x_min, self.x_max, self.y_min, self.y_max)


# The outer ring and rows/cols 7-8 around the center block are left out.
QUADRANTS: Tuple[Quadrant, ...] = (
    Quadrant("NW", 1, 6, 1, 6),
    Quadrant("NE", 9, 14, 1, 6),
    Quadrant("SW", 1, 6, 9, 14),
    Quadrant("SE", 9, 14, 9, 14),
)

SINGLE_GOAL_COLORS: Tuple[GoalColor, ...] = (
    GoalColor.RED,
    GoalColor.YELLOW,
    GoalColor.GREEN,
    GoalColor.BLUE,
)


@dataclass
class GoalGenerationResult:
    """Outcome of a goal placement run.

    On success ``walls`` holds the finished board (skeleton plus corners). On
    failure ``goals``/``corners`` are empty, ``walls`` is None and ``error``
    says what ran out.
    """

    success: bool
    goals: List[Goal] = field(default_factory=list)
    corners: List[Corner] = field(default_factory=list)
    walls: Optional[WallSet] = None
    error: Optional[str] = None
    attempts: int = 0


def random_position_in_quadrant(quadrant: Quadrant, rng: Optional[Random] = None) -> Position:
    rng = rng or Random()
    return (
        rng.randint(quadrant.x_min, quadrant.x_max),
        rng.randint(quadrant.y_min, quadrant.y_max),
    )


def place_goal_in_quadrant(
    quadrant: Quadrant,
    existing: Sequence[Corner],
    walls: WallSet,
    rng: Optional[Random] = None,
    max_attempts: int = SINGLE_GOAL_ATTEMPTS,
) -> Optional[Corner]:
    """Sample cells and orientations until one passes :func:`can_place`."""

    rng = rng or Random()
    for _ in range(max_attempts):
        position = random_position_in_quadrant(quadrant, rng)
        orientation = random_orientation(rng)
        if can_place(position, orientation, existing, walls):
            return Corner(position, orientation)
    return None


def generate_single_color_goals(
    walls: WallSet,
    rng: Optional[Random] = None,
    max_attempts: int = SINGLE_GOAL_ATTEMPTS,
) -> GoalGenerationResult:
    """Place one goal of each robot color in every quadrant.

    ``walls`` receives the corner walls as they are committed.
    """

    rng = rng or Random()
    goals: List[Goal] = []
    corners: List[Corner] = []

    for quadrant in QUADRANTS:
        for color in SINGLE_GOAL_COLORS:
            corner = place_goal_in_quadrant(quadrant, corners, walls, rng, max_attempts)
            if corner is None:
                return GoalGenerationResult(
                    success=False,
                    error=f"Failed to place {color.value} goal in {quadrant.name} quadrant",
                )
            add_corner(walls, corner.position, corner.orientation)
            corners.append(corner)
            goals.append(Goal(corner.position, color))

    return GoalGenerationResult(success=True, goals=goals, corners=corners, walls=walls)


def generate_any_goal(
    walls: WallSet,
    existing: Sequence[Corner],
    rng: Optional[Random] = None,
    max_attempts: int = ANY_GOAL_ATTEMPTS,
) -> GoalGenerationResult:
    """Place the any-robot goal in a randomly chosen quadrant."""

    rng = rng or Random()
    quadrant = rng.choice(QUADRANTS)
    corner = place_goal_in_quadrant(quadrant, existing, walls, rng, max_attempts)
    if corner is None:
        return GoalGenerationResult(
            success=False,
            error=f"Failed to place any-robot goal in {quadrant.name} quadrant",
        )
    add_corner(walls, corner.position, corner.orientation)
    return GoalGenerationResult(
        success=True,
        goals=[Goal(corner.position, GoalColor.ANY)],
        corners=[corner],
        walls=walls,
    )


def generate_all_goals(
    walls: WallSet,
    max_retries: Optional[int] = None,
    *,
    rng: Optional[Random] = None,
    config: Optional[GenerationConfig] = None,
) -> GoalGenerationResult:
    """Place all 17 goals on top of a skeleton board.

    Every attempt starts from a fresh copy of ``walls``, which is never
    modified. The copy belonging to the successful attempt is returned in the
    result. After ``max_retries`` failed attempts a failed result is returned.
    """

    config = config or GenerationConfig()
    retries = config.max_retries if max_retries is None else max_retries
    rng = rng or Random()

    for attempt in range(1, retries + 1):
        board = walls.copy()

        single = generate_single_color_goals(board, rng, config.single_goal_attempts)
        if not single.success:
            logger.debug("Goal placement attempt %d failed: %s", attempt, single.error)
            continue

        extra = generate_any_goal(board, single.corners, rng, config.any_goal_attempts)
        if not extra.success:
            logger.debug("Goal placement attempt %d failed: %s", attempt, extra.error)
            continue

        logger.debug("Placed %d goals on attempt %d", GOAL_COUNT, attempt)
        return GoalGenerationResult(
            success=True,
            goals=single.goals + extra.goals,
            corners=single.corners + extra.corners,
            walls=board,
            attempts=attempt,
        )

    error = f"Failed to generate all {GOAL_COUNT} goals after {retries} retries"
    logger.warning(error)
    return GoalGenerationResult(success=False, error=error, attempts=retries)


def validate_goals(goals: Sequence[Goal]) -> Tuple[bool, Optional[str]]:
    """Check goal counts per color and that no two goals share a cell."""

    if len(goals) != GOAL_COUNT:
        return False, f"Expected {GOAL_COUNT} goals, got {len(goals)}"

    counts = Counter(goal.color for goal in goals)
    if counts[GoalColor.ANY] != 1:
        return False, f"Expected 1 any-robot goal, got {counts[GoalColor.ANY]}"
    for color in SINGLE_GOAL_COLORS:
        if counts[color] != GOALS_PER_COLOR:
            return False, f"Expected {GOALS_PER_COLOR} {color.value} goals, got {counts[color]}"

    seen = set()
    for goal in goals:
        if goal.position in seen:
            x, y = goal.position
            return False, f"Duplicate goal position at ({x}, {y})"
        seen.add(goal.position)

    return True, None
