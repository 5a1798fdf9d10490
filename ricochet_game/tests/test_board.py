import pytest

from ricochet_game.board import (
    Direction,
    Goal,
    GoalColor,
    Move,
    RobotColor,
    RobotSet,
    WallKind,
    WallSegment,
    WallSet,
    coerce_position,
    is_valid_direction,
    is_valid_goal_color,
    is_valid_move,
    is_valid_position,
    is_valid_robot_color,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ((0, 0), True),
        ((15, 15), True),
        ([3, 4], True),
        ((16, 0), False),
        ((0, -1), False),
        ((1.0, 2), False),
        ((True, 2), False),
        ((1, 2, 3), False),
        (None, False),
        ("ab", False),
    ],
)
def test_is_valid_position(value, expected):
    assert is_valid_position(value) is expected


def test_color_and_direction_validators_are_strict():
    assert is_valid_robot_color("red")
    assert is_valid_robot_color(RobotColor.BLUE)
    assert not is_valid_robot_color("RED")
    assert not is_valid_robot_color("any")

    assert is_valid_goal_color("any")
    assert is_valid_goal_color(GoalColor.GREEN)
    assert not is_valid_goal_color("purple")

    assert is_valid_direction("left")
    assert not is_valid_direction("north")
    assert not is_valid_direction(None)


def test_is_valid_move_accepts_moves_and_mappings():
    assert is_valid_move(Move(RobotColor.RED, Direction.UP))
    assert is_valid_move({"robot": "green", "direction": "down"})
    assert not is_valid_move({"robot": "green"})
    assert not is_valid_move({"robot": "pink", "direction": "down"})
    assert not is_valid_move("green:down")


def test_enum_lookups():
    assert Direction.from_name("UP") is Direction.UP
    assert Direction.from_name("right") is Direction.RIGHT
    assert Direction.UP.reverse() is Direction.DOWN
    assert Direction.LEFT.vector == (-1, 0)
    assert GoalColor.from_name("multi") is GoalColor.ANY
    assert GoalColor.YELLOW.robot_color is RobotColor.YELLOW
    assert GoalColor.ANY.robot_color is None

    with pytest.raises(ValueError):
        Direction.from_name("sideways")
    with pytest.raises(ValueError):
        RobotColor.from_name("silver")


@pytest.mark.parametrize(
    "value",
    [
        Move(RobotColor.BLUE, Direction.LEFT),
        {"robot": "blue", "direction": "left"},
        "blue:left",
        " Blue : LEFT ",
    ],
)
def test_move_from_value(value):
    assert Move.from_value(value) == Move(RobotColor.BLUE, Direction.LEFT)


@pytest.mark.parametrize("value", ["blue", 42, {"robot": "blue"}, "blue:diagonal"])
def test_move_from_value_rejects_garbage(value):
    with pytest.raises(ValueError):
        Move.from_value(value)


def test_robot_set_updates_are_copies():
    robots = RobotSet(red=(1, 1), yellow=(2, 2), green=(3, 3), blue=(4, 4))
    moved = robots.with_position(RobotColor.GREEN, (9, 9))

    assert robots.green == (3, 3)
    assert moved.green == (9, 9)
    assert moved.robot_at((9, 9)) is RobotColor.GREEN
    assert moved.robot_at((3, 3)) is None
    assert [color for color, _ in moved.items()] == list(RobotColor)


def test_robot_set_mapping_round_trip():
    data = {
        "red": {"x": 1, "y": 2},
        "yellow": [3, 4],
        "green": (5, 6),
        "blue": {"x": 7, "y": 8},
    }
    robots = RobotSet.from_mapping(data)

    assert robots.yellow == (3, 4)
    assert robots.as_dict()["red"] == {"x": 1, "y": 2}

    with pytest.raises(ValueError, match="blue"):
        RobotSet.from_mapping({key: value for key, value in data.items() if key != "blue"})
    with pytest.raises(ValueError):
        coerce_position({"x": 1})


def test_wall_set_add_has_and_copy():
    walls = WallSet()
    segment = WallSegment(WallKind.VERTICAL, row=3, col=7)
    walls.add(segment)
    walls.add(segment)

    assert walls.has(segment)
    assert walls.vertical[7] == [3]
    assert walls.segment_count() == 1
    assert not walls.has(WallSegment(WallKind.VERTICAL, row=-1, col=7))

    copied = walls.copy()
    copied.add(WallSegment(WallKind.HORIZONTAL, row=0, col=0))
    assert walls.segment_count() == 1
    assert copied.segment_count() == 2

    with pytest.raises(ValueError):
        walls.add(WallSegment(WallKind.HORIZONTAL, row=16, col=0))


def test_wall_set_mapping_round_trip():
    walls = WallSet()
    walls.add(WallSegment(WallKind.HORIZONTAL, row=2, col=9))
    walls.add(WallSegment(WallKind.HORIZONTAL, row=2, col=1))
    walls.add(WallSegment(WallKind.VERTICAL, row=5, col=0))

    data = walls.as_dict()
    assert data["horizontal"][2] == [1, 9]
    assert WallSet.from_mapping(data).as_dict() == data
    assert set(WallSet.from_mapping(data).segments()) == set(walls.segments())


def test_goal_from_value():
    goal = Goal.from_value({"position": {"x": 4, "y": 2}, "color": "multi"})

    assert goal == Goal((4, 2), GoalColor.ANY)
    assert goal.as_dict() == {"position": {"x": 4, "y": 2}, "color": "any"}
    with pytest.raises(ValueError):
        Goal.from_value({"position": (20, 2), "color": "red"})
