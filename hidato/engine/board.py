"""Board representation and metadata derivation."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from ..core.constants import EMPTY_TOKENS, HOLE_TOKEN, MAX_VALUE, MIN_VALUE, CellType
from ..core.exceptions import CellStateError, ParseError, PreconditionError
from ..core.models import Cell, Position
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def parse_token(token: str, row: int = 0, col: int = 0) -> Cell:
    """Map a single input token to a cell."""

    if token in EMPTY_TOKENS:
        return Cell()
    if token == HOLE_TOKEN:
        return Cell.hole()
    if not (token.isascii() and token.isdigit()):
        raise ParseError(f"Unrecognized token {token!r} at row {row}, column {col}")
    value = int(token)
    if not MIN_VALUE <= value <= MAX_VALUE:
        raise ParseError(
            f"Clue {value} at row {row}, column {col} is outside {MIN_VALUE}..{MAX_VALUE}"
        )
    return Cell.const(value)


@dataclass
class BoardSnapshot:
    cells: List[List[Cell]]
    progress_index: int


class Board:
    """Rows of cells with per-row widths plus the derived clue metadata."""

    def __init__(self, rows: Sequence[Sequence[Cell]]) -> None:
        self.rows: List[List[Cell]] = [list(row) for row in rows]
        self.constants: List[int] = []
        self.start = Position(0, 0)
        self.end = Position(0, 0)
        self.progress_index = 1
        self.derive_metadata()

    @classmethod
    def parse(cls, rows_of_tokens: Iterable[Sequence[str]]) -> "Board":
        rows: List[List[Cell]] = []
        for r, tokens in enumerate(rows_of_tokens):
            rows.append([parse_token(token, r, c) for c, token in enumerate(tokens)])
        board = cls(rows)
        LOGGER.debug(
            "Parsed board with %s rows, widths %s, constants %s",
            len(rows),
            board.widths,
            board.constants,
        )
        return board

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------
    def derive_metadata(self) -> None:
        """Collect the clue values and locate the start and end cells."""

        constants: List[int] = []
        start = Position(0, 0)
        end = Position(0, 0)
        max_value = 0
        for pos, cell in self.items():
            if cell.type != CellType.CONST:
                continue
            constants.append(cell.value)
            if cell.value == 1:
                start = pos
            # First cell holding the maximum wins.
            if cell.value > max_value:
                end = pos
                max_value = cell.value
        constants.sort()
        self.constants = constants
        self.start = start
        self.end = end

    def check_preconditions(self) -> None:
        if not self.constants:
            raise PreconditionError("Board has no constants")
        if self.constants[0] < 1:
            raise PreconditionError(f"Clue {self.constants[0]} is below the first path step")
        if self.constants[0] != 1:
            raise PreconditionError("Board has no cell holding 1")
        repeated = sorted({v for v, nxt in zip(self.constants, self.constants[1:]) if v == nxt})
        if repeated:
            raise PreconditionError(f"Clues appear more than once: {repeated}")

    @property
    def max_constant(self) -> int:
        return self.constants[-1] if self.constants else 0

    def next_constant(self) -> Optional[int]:
        """Return the clue the path must reach next, or None once all are consumed."""

        if self.progress_index < len(self.constants):
            return self.constants[self.progress_index]
        return None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def widths(self) -> Tuple[int, ...]:
        return tuple(len(row) for row in self.rows)

    def row_width(self, row: int) -> int:
        return len(self.rows[row])

    def cell(self, pos: Position) -> Cell:
        return self.rows[pos.row][pos.col]

    def items(self) -> Iterator[Tuple[Position, Cell]]:
        for r, row in enumerate(self.rows):
            for c, cell in enumerate(row):
                yield Position(r, c), cell

    def numbered(self) -> Dict[int, List[Position]]:
        """Map every assigned value to the positions holding it."""

        found: Dict[int, List[Position]] = {}
        for pos, cell in self.items():
            if cell.is_numbered():
                found.setdefault(cell.value, []).append(pos)
        return found

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def mark_candidate(self, pos: Position, value: int) -> None:
        cell = self.cell(pos)
        if not cell.is_empty():
            raise CellStateError(f"Cannot place candidate on {cell.type.value} cell at {pos}")
        cell.type = CellType.CANDIDATE
        cell.value = value

    def clear_candidate(self, pos: Position) -> None:
        cell = self.cell(pos)
        if cell.type != CellType.CANDIDATE:
            raise CellStateError(f"Cannot clear {cell.type.value} cell at {pos}")
        cell.type = CellType.EMPTY
        cell.value = None

    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot(cells=copy.deepcopy(self.rows), progress_index=self.progress_index)

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "widths": list(self.widths),
            "constants": list(self.constants),
            "start": list(self.start.as_tuple()),
            "end": list(self.end.as_tuple()),
            "cells": [
                [{"type": cell.type.value, "value": cell.value} for cell in row]
                for row in self.rows
            ],
        }
