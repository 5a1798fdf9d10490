"""Command line demo: generate a board, replay moves, check a goal."""

from __future__ import annotations

import argparse
import json
import logging
from random import Random
from typing import Optional, Sequence

from .config import resolve_generation_config
from .engine import apply_moves
from .goals import validate_goals
from .logger_config import configure_logging
from .puzzle import GenerationFailure, generate_puzzle
from .solution import validate_solution
from .text import parse_moves, render_board

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_SOLUTION = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Ricochet Robots puzzle demo")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible board.")
    parser.add_argument(
        "--moves",
        default="",
        help='Comma separated moves to replay, e.g. "red:up,blue:left".',
    )
    parser.add_argument(
        "--goal",
        type=int,
        default=None,
        help="Index of the goal (0-16) to check the moves against.",
    )
    parser.add_argument("--json", action="store_true", help="Print the puzzle as JSON.")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging level for stderr.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = resolve_generation_config()
        moves = parse_moves(args.moves)
    except ValueError as exc:
        print(f"error: {exc}")
        return EXIT_ERROR

    rng = Random(args.seed) if args.seed is not None else Random()
    puzzle = generate_puzzle(rng, config)
    if isinstance(puzzle, GenerationFailure):
        print(f"error: {puzzle.error}")
        return EXIT_ERROR

    if args.goal is not None and not 0 <= args.goal < len(puzzle.goals):
        print(f"error: goal index must be between 0 and {len(puzzle.goals) - 1}")
        return EXIT_ERROR

    if args.json:
        print(json.dumps(puzzle.as_dict(), indent=2))
        return EXIT_OK

    valid, problem = validate_goals(puzzle.goals)
    if not valid:
        logger.warning("Generated goals failed validation: %s", problem)

    final = apply_moves(puzzle.robots, puzzle.walls, moves)

    print("=== Ricochet Robots Demo ===")
    print(render_board(puzzle.walls, final, puzzle.goals))
    print("Goals:")
    for index, goal in enumerate(puzzle.goals):
        x, y = goal.position
        print(f"  {index:2d}: {goal.color.value:<6} ({x}, {y})")
    print("Robots:")
    for color, (x, y) in final.items():
        print(f"  {color.value:<6} ({x}, {y})")

    if args.goal is None:
        return EXIT_OK

    result = validate_solution(puzzle.robots, puzzle.walls, moves, puzzle.goal(args.goal))
    if result.valid:
        winner = result.winning_robot.value if result.winning_robot else "?"
        print(f"Solved in {len(moves)} moves by {winner}.")
        return EXIT_OK
    print(f"Not solved: {result.reason}")
    return EXIT_INVALID_SOLUTION


if __name__ == "__main__":
    raise SystemExit(main())
