"""Pretty-print helpers for puzzle boards."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from ..core.constants import CELL_SYMBOLS
from ..core.models import Cell

if TYPE_CHECKING:
    from ..engine.board import Board
    from ..engine.solver import SolveResult


def cell_symbol(cell: Cell) -> str:
    if cell.is_numbered():
        return f"{cell.value:02}"
    return CELL_SYMBOLS[cell.type]


def format_board(board: Board, *, indent: bool = False) -> str:
    """Render one line per row; ``indent`` shifts narrower rows half a cell per missing cell."""

    widest = max(board.widths, default=0)
    lines = []
    for row in board.rows:
        prefix = " " * (2 * (widest - len(row))) if indent else ""
        lines.append(prefix + "".join(f" {cell_symbol(cell)} " for cell in row))
    return "\n".join(lines)


def pretty_print_board(board: Board, *, indent: bool = False, stream=None) -> None:
    stream = stream or sys.stdout
    print(format_board(board, indent=indent), file=stream)


def print_solve_stats(result: SolveResult, *, stream=None) -> None:
    """Print a short summary of the search effort."""

    stream = stream or sys.stdout
    print(file=stream)
    print("--- Search ---", file=stream)
    print(f"  Shape:         {result.shape.value}", file=stream)
    print(f"  Path length:   {result.board.max_constant}", file=stream)
    print(f"  Nodes visited: {result.nodes_visited}", file=stream)
    print(f"  Elapsed:       {result.elapsed_seconds:.3f}s", file=stream)
