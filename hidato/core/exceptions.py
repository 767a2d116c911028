"""Custom exception hierarchy for the puzzle solver."""


class HidatoError(Exception):
    """Base exception for solver failures."""


class InputError(HidatoError):
    """Raised when the puzzle source cannot be read."""


class ParseError(InputError):
    """Raised when a token is neither a keyword nor a valid clue value."""


class PreconditionError(HidatoError):
    """Raised when a parsed board cannot be handed to the solver."""


class ShapeError(PreconditionError):
    """Raised when the row widths match no supported shape family."""


class CellStateError(HidatoError):
    """Raised when a cell transition other than EMPTY <-> CANDIDATE is attempted."""
