"""Data models supporting the puzzle solver."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .constants import CellType


@dataclass(frozen=True)
class Position:
    """A (row, col) coordinate on the board."""

    row: int
    col: int

    def as_tuple(self) -> tuple:
        return (self.row, self.col)


@dataclass
class Cell:
    """Represents a board cell and its current tag."""

    type: CellType = CellType.EMPTY
    value: Optional[int] = None

    @classmethod
    def const(cls, value: int) -> "Cell":
        return cls(type=CellType.CONST, value=value)

    @classmethod
    def hole(cls) -> "Cell":
        return cls(type=CellType.HOLE)

    def is_numbered(self) -> bool:
        return self.type in {CellType.CONST, CellType.CANDIDATE}

    def is_empty(self) -> bool:
        return self.type == CellType.EMPTY
