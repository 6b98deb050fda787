"""Error types raised by the opening book.

Per-query failures derive from OpeningBookError and are recoverable.
ConstructionError and MissingMovesError are RuntimeErrors: they signal broken
bundled data or a caller bug, not a bad query.
"""


class OpeningBookError(Exception):
    """Base class for recoverable lookup/search failures."""


class FenParseError(OpeningBookError, ValueError):
    """Position notation could not be parsed."""


class OpeningNotFoundError(OpeningBookError, LookupError):
    """No opening matches an exact position or name query."""


class NoMatchFoundError(OpeningBookError, LookupError):
    """Fuzzy search produced no candidates (the book is empty)."""


class ConstructionError(RuntimeError):
    """The bundled opening tables are malformed; the book cannot be built."""


class MissingMovesError(RuntimeError):
    """An exact-name lookup matched an entry that has no move sequence."""
