"""Neighbor enumeration for boards whose rows differ in width.

Two shape families are supported and never mixed on one board:

- ``MonotonicResolver``: row widths only grow, only shrink, or stay equal going
  down. Rows above/below are matched with an offset rule derived from the
  width difference.
- ``DiamondResolver``: widths grow to a middle row then shrink (or shrink to a
  middle row then grow). Each side of the middle uses its own diagonal rule.

Neighbors always come back in a fixed order (rows above, rows below, left,
right) since the solver's search order, and thus the first solution found,
follows it.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from ..core.constants import ShapeKind
from ..core.exceptions import ShapeError
from ..core.models import Position
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

Step = Tuple[int, int]

WIDENING_ABOVE: Tuple[Step, ...] = ((-1, -1), (-1, 0), (1, 0), (1, 1))
WIDENING_BELOW: Tuple[Step, ...] = ((-1, 0), (-1, 1), (1, -1), (1, 0))
WIDENING_MIDDLE: Tuple[Step, ...] = ((-1, -1), (-1, 0), (1, -1), (1, 0))
NARROWING_MIDDLE: Tuple[Step, ...] = ((-1, 0), (-1, 1), (1, 0), (1, 1))


class AdjacencyResolver:
    """Maps a position to its geometric neighbors for one board shape."""

    shape = ShapeKind.AUTO

    def __init__(self, widths: Sequence[int]) -> None:
        self.widths: Tuple[int, ...] = tuple(widths)

    def neighbors(self, pos: Position) -> List[Position]:
        result: List[Position] = []
        seen = set()
        for candidate in self._candidates(pos):
            if candidate in seen or not self.in_bounds(candidate.row, candidate.col):
                continue
            seen.add(candidate)
            result.append(candidate)
        return result

    def are_adjacent(self, a: Position, b: Position) -> bool:
        return b in self.neighbors(a)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < len(self.widths) and 0 <= col < self.widths[row]

    def _candidates(self, pos: Position) -> Iterable[Position]:
        yield from self._vertical(pos)
        yield Position(pos.row, pos.col - 1)
        yield Position(pos.row, pos.col + 1)

    def _vertical(self, pos: Position) -> Iterable[Position]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(widths={self.widths})"


class MonotonicResolver(AdjacencyResolver):
    """Offset rule for boards whose widths change in one direction.

    Known limitation: two adjacent rows of equal width give an offset of zero,
    so the indentation direction between them cannot be recovered and only the
    same-column cell is linked.
    """

    shape = ShapeKind.MONOTONIC

    def _vertical(self, pos: Position) -> Iterable[Position]:
        current_width = self.widths[pos.row]
        for adj_row in (pos.row - 1, pos.row + 1):
            if not 0 <= adj_row < len(self.widths):
                continue
            for col in adjacent_columns(current_width, self.widths[adj_row], pos.col):
                yield Position(adj_row, col)


def adjacent_columns(current_width: int, adjacent_width: int, col: int) -> List[int]:
    """Columns of an adjacent row touching ``col`` under the offset rule."""

    offset = current_width - adjacent_width
    columns: List[int] = []
    if col < adjacent_width:
        columns.append(col)
    shifted = col - offset
    if 0 <= shifted < adjacent_width and shifted not in columns:
        columns.append(shifted)
    return columns


class DiamondResolver(AdjacencyResolver):
    """Diagonal rules split at a middle row."""

    shape = ShapeKind.DIAMOND

    def __init__(self, widths: Sequence[int], middle: int, widening: bool = True) -> None:
        super().__init__(widths)
        if not 0 <= middle < len(self.widths):
            raise ShapeError(f"Middle row {middle} outside board of {len(self.widths)} rows")
        self.middle = middle
        self.widening = widening

    def steps_for(self, row: int) -> Tuple[Step, ...]:
        if row == self.middle:
            return WIDENING_MIDDLE if self.widening else NARROWING_MIDDLE
        above = row < self.middle
        # The narrowing side of an hourglass mirrors the widening side of a diamond.
        if above == self.widening:
            return WIDENING_ABOVE
        return WIDENING_BELOW

    def _vertical(self, pos: Position) -> Iterable[Position]:
        for dr, dc in self.steps_for(pos.row):
            yield Position(pos.row + dr, pos.col + dc)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(widths={self.widths}, middle={self.middle}, "
            f"widening={self.widening})"
        )


# ----------------------------------------------------------------------
# Shape detection
# ----------------------------------------------------------------------
def is_monotonic(widths: Sequence[int]) -> bool:
    pairs = list(zip(widths, widths[1:]))
    return all(a <= b for a, b in pairs) or all(a >= b for a, b in pairs)


def find_diamond_middle(widths: Sequence[int]) -> Optional[Tuple[int, bool]]:
    """Return ``(middle, widening)`` when widths strictly rise then fall (or the reverse)."""

    if len(widths) < 3:
        return None
    widening = widths[1] > widths[0]
    middle = 0
    while middle + 1 < len(widths) and _moves(widths[middle], widths[middle + 1], widening):
        middle += 1
    if middle == 0 or middle == len(widths) - 1:
        return None
    for a, b in zip(widths[middle:], widths[middle + 1:]):
        if not _moves(a, b, not widening):
            return None
    return middle, widening


def _moves(a: int, b: int, upwards: bool) -> bool:
    return b > a if upwards else b < a


def detect_shape(widths: Sequence[int]) -> ShapeKind:
    if is_monotonic(widths):
        return ShapeKind.MONOTONIC
    if find_diamond_middle(widths) is not None:
        return ShapeKind.DIAMOND
    raise ShapeError(f"Row widths {tuple(widths)} match no supported board shape")


def resolver_for(
    widths: Sequence[int],
    shape: ShapeKind = ShapeKind.AUTO,
    middle_row: Optional[int] = None,
) -> AdjacencyResolver:
    """Build the resolver for a board shape, detecting the family when asked."""

    shape = ShapeKind(shape)
    if shape == ShapeKind.AUTO:
        shape = ShapeKind.DIAMOND if middle_row is not None else detect_shape(widths)
        LOGGER.debug("Detected %s shape for widths %s", shape.value, tuple(widths))

    if shape == ShapeKind.MONOTONIC:
        if middle_row is not None:
            raise ShapeError("A middle row only applies to diamond boards")
        if not is_monotonic(widths):
            LOGGER.warning(
                "Widths %s are not monotonic; applying the offset rule anyway",
                tuple(widths),
            )
        return MonotonicResolver(widths)

    if middle_row is None:
        found = find_diamond_middle(widths)
        if found is None:
            raise ShapeError(f"Row widths {tuple(widths)} do not form a diamond")
        middle_row, widening = found
    else:
        widening = _declared_widening(widths, middle_row)
    return DiamondResolver(widths, middle_row, widening=widening)


def _declared_widening(widths: Sequence[int], middle_row: int) -> bool:
    if not 0 <= middle_row < len(widths):
        raise ShapeError(f"Middle row {middle_row} outside board of {len(widths)} rows")
    width = widths[middle_row]
    if width == max(widths):
        return True
    if width == min(widths):
        return False
    raise ShapeError(f"Row {middle_row} is neither the widest nor the narrowest row")
