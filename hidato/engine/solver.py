"""Depth-first backtracking search for a consecutive number path."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional

from ..core.constants import CellType, ShapeKind
from ..core.models import Position
from ..utils.logger import get_logger
from .adjacency import AdjacencyResolver, resolver_for
from .board import Board


LOGGER = get_logger(__name__)


@dataclass
class SolverConfig:
    """Configuration values driving the search."""

    shape: ShapeKind = ShapeKind.AUTO
    middle_row: Optional[int] = None

    def build_resolver(self, board: Board) -> AdjacencyResolver:
        return resolver_for(board.widths, shape=self.shape, middle_row=self.middle_row)


@dataclass
class SolveResult:
    solved: bool
    board: Board
    shape: ShapeKind
    nodes_visited: int = 0
    elapsed_seconds: float = 0.0


class BacktrackingSolver:
    """Grows a numbered path from the start cell, undoing every failed step.

    The board is mutated in place. On success the winning path stays on the
    board as CANDIDATE cells; on failure the board ends exactly as it started.
    ``progress_index`` is restored after every call either way.
    """

    def __init__(
        self,
        board: Board,
        config: Optional[SolverConfig] = None,
        resolver: Optional[AdjacencyResolver] = None,
    ) -> None:
        self.board = board
        self.config = config or SolverConfig()
        self.resolver = resolver or self.config.build_resolver(board)
        self.nodes_visited = 0

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def solve(self) -> SolveResult:
        self.board.check_preconditions()
        LOGGER.info(
            "Solving %s-row board (%s) from %s to %s, constants %s",
            len(self.board.rows),
            self.resolver.shape.value,
            self.board.start,
            self.board.end,
            self.board.constants,
        )
        self.nodes_visited = 0
        started = time.perf_counter()
        solved = self.search(self.board.start)
        elapsed = time.perf_counter() - started
        if solved:
            LOGGER.info("Solution found after %s nodes in %.3fs", self.nodes_visited, elapsed)
        else:
            LOGGER.info("No solution after %s nodes in %.3fs", self.nodes_visited, elapsed)
        return SolveResult(
            solved=solved,
            board=self.board,
            shape=self.resolver.shape,
            nodes_visited=self.nodes_visited,
            elapsed_seconds=elapsed,
        )

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    def search(self, current: Position) -> bool:
        self.nodes_visited += 1
        board = self.board
        if current == board.end:
            return True

        cell = board.cell(current)
        if not cell.is_numbered():
            LOGGER.warning("Search reached unnumbered %s cell at %s", cell.type.value, current)
            return False
        next_value = cell.value + 1
        target = board.next_constant()
        if target is None:
            return False

        for neighbor in self.resolver.neighbors(current):
            candidate = board.cell(neighbor)
            if candidate.type == CellType.EMPTY:
                if next_value >= target:
                    continue
                board.mark_candidate(neighbor, next_value)
                if self.search(neighbor):
                    return True
                board.clear_candidate(neighbor)
            elif candidate.type == CellType.CONST:
                if candidate.value != next_value or candidate.value != target:
                    continue
                board.progress_index += 1
                try:
                    found = self.search(neighbor)
                finally:
                    board.progress_index -= 1
                if found:
                    return True
            # HOLE is never a step; CANDIDATE is already on the path.
        return False


def solve_board(
    board: Board,
    shape: ShapeKind = ShapeKind.AUTO,
    middle_row: Optional[int] = None,
) -> SolveResult:
    """Convenience wrapper running a solver with the given shape settings."""

    return BacktrackingSolver(board, SolverConfig(shape=shape, middle_row=middle_row)).solve()
