"""Command-line interface for the number path puzzle solver."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict

from .core.constants import ShapeKind
from .core.exceptions import HidatoError
from .engine.board import Board
from .engine.solver import BacktrackingSolver, SolverConfig
from .engine.validator import PathValidator
from .io.puzzle_file import read_puzzle
from .utils.logger import configure_logging, get_logger
from .utils.pretty import pretty_print_board, print_solve_stats


LOGGER = get_logger(__name__)

EXIT_SOLVED = 0
EXIT_USAGE = 0
EXIT_NO_SOLUTION = 1
EXIT_INVALID_INPUT = 2
EXIT_INVALID_SOLUTION = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hidato-solve",
        description="Solve a number path puzzle on a board with rows of varying width",
    )
    parser.add_argument("puzzle", type=Path, nargs="?", help="Path to the puzzle text file")
    parser.add_argument(
        "--shape",
        type=str,
        choices=[s.value for s in ShapeKind],
        default=ShapeKind.AUTO.value,
        help="Board shape family used for adjacency (default: detect from row widths)",
    )
    parser.add_argument(
        "--middle-row",
        type=int,
        default=None,
        help="Middle row index for diamond boards (default: widest or narrowest row)",
    )
    parser.add_argument(
        "--indent",
        action="store_true",
        help="Indent narrower rows to suggest the board shape",
    )
    parser.add_argument("--stats", action="store_true", help="Print search statistics")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args, extra = parser.parse_known_args(argv)
    # Exactly one puzzle path; anything else prints usage and solves nothing.
    if args.puzzle is None or extra:
        print(parser.format_usage(), end="")
        return EXIT_USAGE

    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    config = SolverConfig(shape=ShapeKind(args.shape), middle_row=args.middle_row)
    try:
        board = read_puzzle(args.puzzle)
        original = Board(board.snapshot().cells)
        solver = BacktrackingSolver(board, config)
        result = solver.solve()
    except HidatoError as exc:
        LOGGER.error("%s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    payload: Dict[str, Any] = {
        "puzzle": str(args.puzzle),
        "solved": result.solved,
        "shape": result.shape.value,
        "nodes_visited": result.nodes_visited,
        "elapsed_seconds": round(result.elapsed_seconds, 6),
        "board": board.to_jsonable(),
    }

    exit_code = EXIT_NO_SOLUTION
    if result.solved:
        validation = PathValidator(solver.resolver).validate(board, original=original)
        payload["validation"] = validation.messages
        if validation.ok:
            pretty_print_board(board, indent=args.indent)
            exit_code = EXIT_SOLVED
        else:
            for message in validation.messages:
                LOGGER.error("Rejected solution: %s", message)
                print(f"error: invalid solution: {message}", file=sys.stderr)
            exit_code = EXIT_INVALID_SOLUTION
    else:
        print("No solution found.")

    if args.stats:
        print_solve_stats(result)
    if args.output:
        args.output.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        LOGGER.info("Result written to %s", args.output)

    return exit_code
