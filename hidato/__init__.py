"""Solver for number path puzzles on boards with rows of varying width.

This package exposes the public API surface via:

- ``hidato.engine.board.Board``: parses token rows and derives clue metadata.
- ``hidato.engine.adjacency.resolver_for``: builds the neighbor rule for a board shape.
- ``hidato.engine.solver.BacktrackingSolver``: searches for the first consecutive path.
"""

from .engine.adjacency import AdjacencyResolver, DiamondResolver, MonotonicResolver, resolver_for
from .engine.board import Board
from .engine.solver import BacktrackingSolver, SolveResult, SolverConfig, solve_board

__all__ = [
    "AdjacencyResolver",
    "BacktrackingSolver",
    "Board",
    "DiamondResolver",
    "MonotonicResolver",
    "SolveResult",
    "SolverConfig",
    "resolver_for",
    "solve_board",
]

__version__ = "0.1.0"
