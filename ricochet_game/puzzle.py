"""Puzzle generation: skeleton, goals and robot start cells in one go."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from random import Random
from typing import Dict, List, Optional, Sequence, Set, Union

from .board import ROBOT_COLORS, Goal, Position, RobotSet, WallSet
from .config import BOARD_SIZE, ROBOT_PLACEMENT_ATTEMPTS, GenerationConfig
from .corners import Corner
from .goals import generate_all_goals
from .skeleton import CENTER_CELLS, build_skeleton

logger = logging.getLogger(__name__)


@dataclass
class Puzzle:
    """A generated board. ``robots`` is the starting snapshot for round one."""

    walls: WallSet
    robots: RobotSet
    goals: List[Goal]
    corners: List[Corner] = field(default_factory=list)

    def goal(self, index: int) -> Goal:
        return self.goals[index]

    def as_dict(self) -> Dict[str, object]:
        return {
            "walls": self.walls.as_dict(),
            "robots": self.robots.as_dict(),
            "goals": [goal.as_dict() for goal in self.goals],
        }


@dataclass(frozen=True)
class GenerationFailure:
    """Generation ran out of attempts; no puzzle was produced."""

    error: str


def place_robots(
    goals: Sequence[Goal],
    rng: Optional[Random] = None,
    max_attempts: int = ROBOT_PLACEMENT_ATTEMPTS,
) -> Optional[RobotSet]:
    """Pick a start cell per robot, avoiding the center, goals and each other.

    Returns None if some robot found no free cell within ``max_attempts``.
    """

    rng = rng or Random()
    blocked: Set[Position] = set(CENTER_CELLS)
    blocked.update(goal.position for goal in goals)
    positions: Dict[str, Position] = {}

    for color in ROBOT_COLORS:
        for _ in range(max_attempts):
            candidate = (rng.randrange(BOARD_SIZE), rng.randrange(BOARD_SIZE))
            if candidate not in blocked:
                positions[color.value] = candidate
                blocked.add(candidate)
                break
        else:
            logger.warning("No free start cell found for the %s robot", color.value)
            return None

    return RobotSet(**positions)


def generate_puzzle(
    rng: Optional[Random] = None, config: Optional[GenerationConfig] = None
) -> Union[Puzzle, GenerationFailure]:
    """Build a complete puzzle, or report why it could not be built."""

    rng = rng or Random()
    config = config or GenerationConfig()

    skeleton = build_skeleton(rng)
    result = generate_all_goals(skeleton, rng=rng, config=config)
    if not result.success or result.walls is None:
        return GenerationFailure(result.error or "Goal placement failed")

    robots = place_robots(result.goals, rng, config.robot_placement_attempts)
    if robots is None:
        return GenerationFailure(
            f"Failed to place robots after {config.robot_placement_attempts} attempts"
        )

    logger.info(
        "Generated puzzle with %d goals and %d wall segments",
        len(result.goals),
        result.walls.segment_count(),
    )
    return Puzzle(walls=result.walls, robots=robots, goals=result.goals, corners=result.corners)
