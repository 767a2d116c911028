"""Read puzzle definitions from text into a :class:`Board`."""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..core.exceptions import InputError
from ..engine.board import Board
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def split_rows(text: str) -> List[List[str]]:
    """Split puzzle text into token rows. Blank lines and # comments are skipped."""

    rows: List[List[str]] = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        rows.append(line.split())
    return rows


def parse_puzzle(text: str) -> Board:
    return Board.parse(split_rows(text))


def read_puzzle(path: Path | str) -> Board:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"Cannot read puzzle file {path}: {exc}") from exc
    LOGGER.debug("Loaded puzzle text from %s", path)
    board = parse_puzzle(text)
    if not board.rows:
        raise InputError(f"Puzzle file {path} contains no rows")
    return board
