"""Board constants and generation settings for the puzzle engine.

Magic numbers shared by several modules live here. ``GenerationConfig``
bundles the attempt budgets used while building a puzzle and can be
overridden from the environment via :func:`resolve_generation_config`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

BOARD_SIZE = 16
"""Board width and height in cells."""

GOALS_PER_COLOR = 4
"""Single-color goals per robot color (one in each quadrant)."""

GOAL_COUNT = 17
"""Total goals on a board: 16 single-color plus one for any robot."""

MAX_GENERATION_RETRIES = 10
"""Whole-board goal placement attempts before giving up."""

SINGLE_GOAL_ATTEMPTS = 500
"""Random samples tried for each single-color goal."""

ANY_GOAL_ATTEMPTS = 200
"""Random samples tried for the any-robot goal."""

ROBOT_PLACEMENT_ATTEMPTS = 1_000
"""Random samples tried per robot start cell."""

RETRIES_ENV_VAR = "RICOCHET_MAX_RETRIES"
GOAL_ATTEMPTS_ENV_VAR = "RICOCHET_GOAL_ATTEMPTS"
ANY_GOAL_ATTEMPTS_ENV_VAR = "RICOCHET_ANY_GOAL_ATTEMPTS"
ROBOT_ATTEMPTS_ENV_VAR = "RICOCHET_ROBOT_ATTEMPTS"


@dataclass(frozen=True)
class GenerationConfig:
    """Attempt budgets for puzzle generation."""

    max_retries: int = MAX_GENERATION_RETRIES
    single_goal_attempts: int = SINGLE_GOAL_ATTEMPTS
    any_goal_attempts: int = ANY_GOAL_ATTEMPTS
    robot_placement_attempts: int = ROBOT_PLACEMENT_ATTEMPTS

    def __post_init__(self) -> None:
        if self.max_retries < 1:
            raise ValueError("max_retries must be >= 1")
        if self.single_goal_attempts < 1:
            raise ValueError("single_goal_attempts must be >= 1")
        if self.any_goal_attempts < 1:
            raise ValueError("any_goal_attempts must be >= 1")
        if self.robot_placement_attempts < 1:
            raise ValueError("robot_placement_attempts must be >= 1")


def _read_int(environ: Mapping[str, str], env_var: str, fallback: int) -> int:
    value = environ.get(env_var)
    if not value:
        return fallback
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"{env_var} must be an integer, got {value!r}") from exc


def resolve_generation_config(environ: Optional[Mapping[str, str]] = None) -> GenerationConfig:
    """Build a :class:`GenerationConfig` using environment overrides.

    Parameters
    ----------
    environ:
        Mapping to read from. Defaults to :data:`os.environ`. Unset or empty
        variables fall back to the module constants.
    """

    env = os.environ if environ is None else environ
    return GenerationConfig(
        max_retries=_read_int(env, RETRIES_ENV_VAR, MAX_GENERATION_RETRIES),
        single_goal_attempts=_read_int(env, GOAL_ATTEMPTS_ENV_VAR, SINGLE_GOAL_ATTEMPTS),
        any_goal_attempts=_read_int(env, ANY_GOAL_ATTEMPTS_ENV_VAR, ANY_GOAL_ATTEMPTS),
        robot_placement_attempts=_read_int(
            env, ROBOT_ATTEMPTS_ENV_VAR, ROBOT_PLACEMENT_ATTEMPTS
        ),
    )
