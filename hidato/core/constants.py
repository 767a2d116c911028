"""Shared constants and enumerations for the puzzle solver."""

from __future__ import annotations

from enum import Enum
from typing import FrozenSet


class CellType(str, Enum):
    """All supported cell types on the board."""

    EMPTY = "EMPTY"
    HOLE = "HOLE"
    CONST = "CONST"
    CANDIDATE = "CANDIDATE"


class ShapeKind(str, Enum):
    """Board shape families understood by the adjacency resolvers."""

    AUTO = "auto"
    MONOTONIC = "monotonic"
    DIAMOND = "diamond"


EMPTY_TOKENS: FrozenSet[str] = frozenset({"_", "e"})
HOLE_TOKEN = "x"

MIN_VALUE = 0
MAX_VALUE = 255

CELL_SYMBOLS = {
    CellType.EMPTY: "__",
    CellType.HOLE: "xx",
}
