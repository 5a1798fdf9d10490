from random import Random

import pytest

from ricochet_game.board import Goal, GoalColor, RobotColor, WallKind, WallSegment, WallSet
from ricochet_game.config import GOAL_COUNT, GenerationConfig
from ricochet_game.goals import (
    QUADRANTS,
    SINGLE_GOAL_COLORS,
    generate_all_goals,
    generate_any_goal,
    generate_single_color_goals,
    place_goal_in_quadrant,
    random_position_in_quadrant,
    validate_goals,
)
from ricochet_game.puzzle import GenerationFailure, Puzzle, generate_puzzle, place_robots
from ricochet_game.skeleton import CENTER_CELLS, add_center_block, build_skeleton

FAST = GenerationConfig(max_retries=2, single_goal_attempts=5, any_goal_attempts=5)


def saturated_walls() -> WallSet:
    """Every horizontal segment present, so no corner can avoid touching one."""

    walls = WallSet()
    for row in range(16):
        walls.horizontal[row] = list(range(16))
    return walls


def generated_puzzles(seeds=range(8)):
    puzzles = [generate_puzzle(Random(seed)) for seed in seeds]
    return [puzzle for puzzle in puzzles if isinstance(puzzle, Puzzle)]


# ---------------------------------------------------------------------------
# Skeleton
# ---------------------------------------------------------------------------


def test_center_block_walls():
    walls = WallSet()
    add_center_block(walls)

    assert walls.segment_count() == 8
    for col in (7, 8):
        assert walls.has(WallSegment(WallKind.HORIZONTAL, row=6, col=col))
        assert walls.has(WallSegment(WallKind.HORIZONTAL, row=8, col=col))
    for row in (7, 8):
        assert walls.has(WallSegment(WallKind.VERTICAL, row=row, col=6))
        assert walls.has(WallSegment(WallKind.VERTICAL, row=row, col=8))


def _edge_indices(lines, member):
    return sorted(index for index, members in enumerate(lines) if member in members)


@pytest.mark.parametrize("seed", range(5))
def test_skeleton_has_center_and_eight_edge_walls(seed):
    walls = build_skeleton(Random(seed))

    assert walls.segment_count() == 16
    for edge in (
        _edge_indices(walls.vertical, 0),
        _edge_indices(walls.vertical, 15),
        _edge_indices(walls.horizontal, 0),
        _edge_indices(walls.horizontal, 15),
    ):
        low, high = edge
        assert 1 <= low <= 6
        assert 8 <= high <= 13


# ---------------------------------------------------------------------------
# Goals
# ---------------------------------------------------------------------------


def test_random_position_stays_in_quadrant():
    rng = Random(0)
    for quadrant in QUADRANTS:
        for _ in range(50):
            assert quadrant.contains(random_position_in_quadrant(quadrant, rng))


def test_generate_all_goals_places_seventeen_goals():
    skeleton = build_skeleton(Random(1))
    before = skeleton.as_dict()

    result = generate_all_goals(skeleton, rng=Random(1))

    assert result.success, result.error
    assert skeleton.as_dict() == before
    assert len(result.goals) == GOAL_COUNT
    assert len(result.corners) == GOAL_COUNT
    assert validate_goals(result.goals) == (True, None)
    assert result.walls.segment_count() == 50
    assert 1 <= result.attempts <= 10

    for quadrant in QUADRANTS:
        colors = [goal.color for goal in result.goals if quadrant.contains(goal.position)]
        assert sorted(c.value for c in colors if c is not GoalColor.ANY) == sorted(
            c.value for c in SINGLE_GOAL_COLORS
        )
    assert sum(quadrant.contains(result.goals[-1].position) for quadrant in QUADRANTS) == 1
    assert result.goals[-1].color is GoalColor.ANY

    for corner in result.corners:
        for segment in corner.segments():
            assert result.walls.has(segment)


def test_generate_all_goals_reports_failure_without_touching_input():
    walls = saturated_walls()
    before = walls.as_dict()

    result = generate_all_goals(walls, rng=Random(0), config=FAST)

    assert not result.success
    assert result.error == "Failed to generate all 17 goals after 2 retries"
    assert result.goals == []
    assert result.walls is None
    assert walls.as_dict() == before


def test_explicit_retry_count_overrides_config():
    result = generate_all_goals(saturated_walls(), 3, rng=Random(0), config=FAST)

    assert result.error == "Failed to generate all 17 goals after 3 retries"
    assert result.attempts == 3


def test_single_color_failure_names_color_and_quadrant():
    result = generate_single_color_goals(saturated_walls(), Random(0), max_attempts=3)

    assert not result.success
    assert result.error == "Failed to place red goal in NW quadrant"


def test_place_goal_in_quadrant_gives_up():
    assert place_goal_in_quadrant(QUADRANTS[0], [], saturated_walls(), Random(0), 10) is None


def test_generate_any_goal_commits_its_corner():
    walls = build_skeleton(Random(2))

    result = generate_any_goal(walls, [], Random(2))

    assert result.success
    assert [goal.color for goal in result.goals] == [GoalColor.ANY]
    assert walls.segment_count() == 18


def _seventeen_goals():
    goals = []
    for index, quadrant in enumerate(QUADRANTS):
        for offset, color in enumerate(SINGLE_GOAL_COLORS):
            goals.append(Goal((quadrant.x_min + offset, quadrant.y_min + index), color))
    goals.append(Goal((14, 14), GoalColor.ANY))
    return goals


def test_validate_goals_errors():
    goals = _seventeen_goals()
    assert validate_goals(goals) == (True, None)

    assert validate_goals(goals[:-1]) == (False, "Expected 17 goals, got 16")

    two_any = goals[:-2] + [Goal((13, 13), GoalColor.ANY), goals[-1]]
    assert validate_goals(two_any) == (False, "Expected 1 any-robot goal, got 2")

    swapped = [Goal(goals[0].position, GoalColor.BLUE)] + goals[1:]
    assert validate_goals(swapped) == (False, "Expected 4 red goals, got 3")

    duplicate = goals[:-1] + [Goal(goals[0].position, GoalColor.ANY)]
    assert validate_goals(duplicate) == (False, "Duplicate goal position at (1, 1)")


# ---------------------------------------------------------------------------
# Puzzles
# ---------------------------------------------------------------------------


def test_generated_puzzles_are_well_formed():
    puzzles = generated_puzzles()
    assert puzzles

    for puzzle in puzzles:
        assert validate_goals(puzzle.goals) == (True, None)
        assert puzzle.walls.segment_count() == 50

        cells = [corner.position for corner in puzzle.corners]
        for i, first in enumerate(cells):
            for second in cells[i + 1:]:
                assert max(abs(first[0] - second[0]), abs(first[1] - second[1])) >= 2

        goal_cells = {goal.position for goal in puzzle.goals}
        robot_cells = [position for _, position in puzzle.robots.items()]
        assert len(set(robot_cells)) == 4
        for position in robot_cells:
            assert position not in goal_cells
            assert position not in CENTER_CELLS


def test_same_seed_gives_same_puzzle():
    assert generate_puzzle(Random(7)) == generate_puzzle(Random(7))


def test_puzzle_as_dict_shape():
    puzzle = generated_puzzles()[0]
    data = puzzle.as_dict()

    assert set(data) == {"walls", "robots", "goals"}
    assert len(data["goals"]) == 17
    assert set(data["robots"]) == {color.value for color in RobotColor}
    assert puzzle.goal(16).color is GoalColor.ANY


def test_place_robots_avoids_blocked_cells():
    goals = [Goal((x, 0), GoalColor.RED) for x in range(16)]
    robots = place_robots(goals, Random(4))

    assert robots is not None
    for _, (x, y) in robots.items():
        assert y != 0
        assert (x, y) not in CENTER_CELLS


def test_place_robots_gives_up_on_full_board():
    goals = [Goal((x, y), GoalColor.ANY) for x in range(16) for y in range(16)]

    assert place_robots(goals, Random(0), max_attempts=50) is None


def test_generate_puzzle_reports_goal_failure(monkeypatch):
    monkeypatch.setattr("ricochet_game.puzzle.build_skeleton", lambda rng: saturated_walls())

    result = generate_puzzle(Random(0), FAST)

    assert result == GenerationFailure("Failed to generate all 17 goals after 2 retries")
