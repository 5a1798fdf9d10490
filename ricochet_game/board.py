"""Core board vocabulary: positions, robots, moves, walls and goals."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Set, Tuple

from .config import BOARD_SIZE

Position = Tuple[int, int]


class RobotColor(Enum):
    """The four robots, in the fixed order used for tie-breaks."""

    RED = "red"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"

    @staticmethod
    def from_name(name: object) -> "RobotColor":
        if isinstance(name, RobotColor):
            return name
        try:
            return RobotColor(str(name).lower())
        except ValueError as exc:
            raise ValueError(f"Unknown robot color: {name}") from exc


class GoalColor(Enum):
    """Goal tags: one per robot color plus a goal any robot may claim."""

    RED = "red"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    ANY = "any"

    @staticmethod
    def from_name(name: object) -> "GoalColor":
        if isinstance(name, GoalColor):
            return name
        value = str(name).lower()
        if value == "multi":
            return GoalColor.ANY
        try:
            return GoalColor(value)
        except ValueError as exc:
            raise ValueError(f"Unknown goal color: {name}") from exc

    @property
    def robot_color(self) -> Optional[RobotColor]:
        if self is GoalColor.ANY:
            return None
        return RobotColor(self.value)


class Direction(Enum):
    """Cardinal slide directions. ``y`` grows downwards."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def vector(self) -> Tuple[int, int]:
        return _DIRECTION_VECTORS[self]

    @staticmethod
    def from_name(name: object) -> "Direction":
        if isinstance(name, Direction):
            return name
        try:
            return Direction[str(name).upper()]
        except KeyError as exc:
            raise ValueError(f"Unknown direction: {name}") from exc

    def reverse(self) -> "Direction":
        mapping = {
            Direction.UP: Direction.DOWN,
            Direction.DOWN: Direction.UP,
            Direction.LEFT: Direction.RIGHT,
            Direction.RIGHT: Direction.LEFT,
        }
        return mapping[self]


_DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

ROBOT_COLORS: Tuple[RobotColor, ...] = tuple(RobotColor)
GOAL_COLORS: Tuple[GoalColor, ...] = tuple(GoalColor)
DIRECTIONS: Tuple[Direction, ...] = tuple(Direction)


# ---------------------------------------------------------------------------
# Validators
# ---------------------------------------------------------------------------


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_valid_position(value: object) -> bool:
    """Return True for an ``(x, y)`` pair of ints inside the board."""

    if not isinstance(value, (tuple, list)) or len(value) != 2:
        return False
    x, y = value
    if not _is_int(x) or not _is_int(y):
        return False
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


def is_valid_robot_color(value: object) -> bool:
    if isinstance(value, RobotColor):
        return True
    return isinstance(value, str) and value in {color.value for color in RobotColor}


def is_valid_goal_color(value: object) -> bool:
    if isinstance(value, GoalColor):
        return True
    return isinstance(value, str) and value in {color.value for color in GoalColor}


def is_valid_direction(value: object) -> bool:
    if isinstance(value, Direction):
        return True
    return isinstance(value, str) and value in {direction.value for direction in Direction}


def is_valid_move(value: object) -> bool:
    """Check a :class:`Move` or a ``{"robot": ..., "direction": ...}`` mapping."""

    if isinstance(value, Move):
        return isinstance(value.robot, RobotColor) and isinstance(value.direction, Direction)
    if isinstance(value, Mapping):
        return is_valid_robot_color(value.get("robot")) and is_valid_direction(
            value.get("direction")
        )
    return False


def positions_equal(first: Sequence[int], second: Sequence[int]) -> bool:
    return first[0] == second[0] and first[1] == second[1]


def coerce_position(value: object) -> Position:
    """Turn ``(x, y)``, ``[x, y]`` or ``{"x": x, "y": y}`` into a Position."""

    if isinstance(value, Mapping):
        value = (value.get("x"), value.get("y"))
    if not is_valid_position(value):
        raise ValueError(f"Invalid position: {value!r}")
    x, y = value  # type: ignore[misc]
    return (x, y)


# ---------------------------------------------------------------------------
# Moves and robots
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Move:
    """A single robot slide."""

    robot: RobotColor
    direction: Direction

    @classmethod
    def from_value(cls, value: object) -> "Move":
        """Build a move from a Move, a mapping or a ``"robot:direction"`` string."""

        if isinstance(value, Move):
            return value
        if isinstance(value, Mapping):
            robot, direction = value.get("robot"), value.get("direction")
        elif isinstance(value, str) and ":" in value:
            robot, _, direction = value.partition(":")
            robot, direction = robot.strip(), direction.strip()
        else:
            raise ValueError(f"Cannot interpret move: {value!r}")
        return cls(RobotColor.from_name(robot), Direction.from_name(direction))

    def as_dict(self) -> Dict[str, str]:
        return {"robot": self.robot.value, "direction": self.direction.value}


@dataclass(frozen=True)
class RobotSet:
    """Positions of the four robots. Updates return a new set."""

    red: Position
    yellow: Position
    green: Position
    blue: Position

    def get(self, color: RobotColor) -> Position:
        return getattr(self, color.value)

    def with_position(self, color: RobotColor, position: Position) -> "RobotSet":
        return replace(self, **{color.value: position})

    def items(self) -> List[Tuple[RobotColor, Position]]:
        return [(color, self.get(color)) for color in ROBOT_COLORS]

    def occupied(self) -> Set[Position]:
        return {position for _, position in self.items()}

    def robot_at(self, position: Sequence[int]) -> Optional[RobotColor]:
        for color, robot in self.items():
            if positions_equal(robot, position):
                return color
        return None

    @classmethod
    def from_mapping(cls, data: Mapping[object, object]) -> "RobotSet":
        positions: Dict[str, Position] = {}
        for key, value in data.items():
            color = RobotColor.from_name(key)
            positions[color.value] = coerce_position(value)
        missing = [color.value for color in ROBOT_COLORS if color.value not in positions]
        if missing:
            raise ValueError(f"Missing robot positions: {', '.join(missing)}")
        return cls(**positions)

    def as_dict(self) -> Dict[str, Dict[str, int]]:
        return {color.value: {"x": x, "y": y} for color, (x, y) in self.items()}


# ---------------------------------------------------------------------------
# Walls
# ---------------------------------------------------------------------------


class WallKind(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class WallSegment:
    """One unit wall.

    A horizontal segment sits below cell ``(col, row)``; a vertical segment
    sits right of cell ``(col, row)``.
    """

    kind: WallKind
    row: int
    col: int

    @property
    def index(self) -> int:
        """Position in ``WallSet.horizontal`` / ``WallSet.vertical``."""

        return self.row if self.kind is WallKind.HORIZONTAL else self.col

    @property
    def member(self) -> int:
        return self.col if self.kind is WallKind.HORIZONTAL else self.row

    def in_bounds(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE


def _empty_lines() -> List[List[int]]:
    return [[] for _ in range(BOARD_SIZE)]


@dataclass
class WallSet:
    """Walls stored per row (horizontal) and per column (vertical).

    ``horizontal[row]`` lists the columns with a wall below that row's cell and
    ``vertical[col]`` lists the rows with a wall right of that column's cell.
    """

    horizontal: List[List[int]] = field(default_factory=_empty_lines)
    vertical: List[List[int]] = field(default_factory=_empty_lines)

    def _lines(self, kind: WallKind) -> List[List[int]]:
        return self.horizontal if kind is WallKind.HORIZONTAL else self.vertical

    def has(self, segment: WallSegment) -> bool:
        if not segment.in_bounds():
            return False
        return segment.member in self._lines(segment.kind)[segment.index]

    def add(self, segment: WallSegment) -> None:
        if not segment.in_bounds():
            raise ValueError(f"Wall segment outside the board: {segment}")
        line = self._lines(segment.kind)[segment.index]
        if segment.member not in line:
            line.append(segment.member)

    def segments(self) -> Iterator[WallSegment]:
        for row, columns in enumerate(self.horizontal):
            for col in columns:
                yield WallSegment(WallKind.HORIZONTAL, row, col)
        for col, rows in enumerate(self.vertical):
            for row in rows:
                yield WallSegment(WallKind.VERTICAL, row, col)

    def segment_count(self) -> int:
        return sum(len(line) for line in self.horizontal) + sum(
            len(line) for line in self.vertical
        )

    def copy(self) -> "WallSet":
        return WallSet(
            horizontal=[list(line) for line in self.horizontal],
            vertical=[list(line) for line in self.vertical],
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Sequence[Sequence[int]]]) -> "WallSet":
        walls = cls()
        for kind in WallKind:
            for index, members in enumerate(data.get(kind.value) or []):
                for member in members or []:
                    if kind is WallKind.HORIZONTAL:
                        walls.add(WallSegment(kind, row=index, col=int(member)))
                    else:
                        walls.add(WallSegment(kind, row=int(member), col=index))
        return walls

    def as_dict(self) -> Dict[str, List[List[int]]]:
        return {
            "horizontal": [sorted(line) for line in self.horizontal],
            "vertical": [sorted(line) for line in self.vertical],
        }


def clone_walls(walls: WallSet) -> WallSet:
    return walls.copy()


# ---------------------------------------------------------------------------
# Goals
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Goal:
    """Target cell for a round, tagged with the robot that must reach it."""

    position: Position
    color: GoalColor

    @classmethod
    def from_value(cls, value: object) -> "Goal":
        if isinstance(value, Goal):
            return value
        if not isinstance(value, Mapping):
            raise ValueError(f"Cannot interpret goal: {value!r}")
        return cls(coerce_position(value.get("position")), GoalColor.from_name(value.get("color")))

    def as_dict(self) -> Dict[str, object]:
        x, y = self.position
        return {"position": {"x": x, "y": y}, "color": self.color.value}
