"""Ricochet Robots puzzle engine."""

from .board import Direction, Goal, GoalColor, Move, RobotColor, RobotSet, WallSet
from .engine import apply_move, apply_moves, move_robot
from .goals import generate_all_goals, validate_goals
from .puzzle import GenerationFailure, Puzzle, generate_puzzle
from .solution import ValidationResult, validate_solution

__all__ = [
    "Direction",
    "GenerationFailure",
    "Goal",
    "GoalColor",
    "Move",
    "Puzzle",
    "RobotColor",
    "RobotSet",
    "ValidationResult",
    "WallSet",
    "apply_move",
    "apply_moves",
    "generate_all_goals",
    "generate_puzzle",
    "move_robot",
    "validate_goals",
    "validate_solution",
]
