"""Deterministic path validation for solved boards."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from ..core.constants import CellType
from ..core.exceptions import HidatoError
from ..core.models import Position
from ..utils.logger import get_logger
from .adjacency import AdjacencyResolver
from .board import Board


LOGGER = get_logger(__name__)


class PathValidationError(HidatoError):
    """Raised internally when a numbered path breaks a rule."""


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class PathValidator:
    """Checks that a board carries a complete consecutive path."""

    def __init__(self, resolver: AdjacencyResolver) -> None:
        self.resolver = resolver

    def validate(self, board: Board, original: Optional[Board] = None) -> ValidationResult:
        try:
            path = self._collect_path(board)
            self._check_adjacency(path)
            if original is not None:
                self._check_original_constants(board, original)
        except PathValidationError as exc:
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=[str(exc)])
        return ValidationResult(ok=True, messages=[])

    def _collect_path(self, board: Board) -> List[Position]:
        numbered: Dict[int, List[Position]] = board.numbered()
        path: List[Position] = []
        for value in range(1, board.max_constant + 1):
            positions = numbered.get(value, [])
            if not positions:
                raise PathValidationError(f"Value {value} is missing from the path")
            if len(positions) > 1:
                raise PathValidationError(f"Value {value} appears {len(positions)} times")
            path.append(positions[0])
        stray = [value for value in numbered if not 1 <= value <= board.max_constant]
        if stray:
            raise PathValidationError(f"Values outside the path: {sorted(stray)}")
        return path

    def _check_adjacency(self, path: List[Position]) -> None:
        for value, (a, b) in enumerate(zip(path, path[1:]), start=1):
            if not self.resolver.are_adjacent(a, b):
                raise PathValidationError(
                    f"Step {value}->{value + 1} jumps from {a} to non-neighbor {b}"
                )

    @staticmethod
    def _check_original_constants(board: Board, original: Board) -> None:
        if board.widths != original.widths:
            raise PathValidationError("Board shape differs from the original puzzle")
        for pos, cell in original.items():
            current = board.cell(pos)
            if cell.type in {CellType.CONST, CellType.HOLE} and current != cell:
                raise PathValidationError(f"Fixed cell at {pos} changed to {current.type.value}")
