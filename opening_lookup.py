"""Exact lookups against the opening book.

Every function accepts an explicit ``book``; without one the shared,
lazily-built book is used.
"""

from __future__ import annotations

import chess

from chess_position import parse_position
from opening_errors import MissingMovesError, OpeningNotFoundError
from openings import OpeningBook, get_opening_book


def get_opening_from_position(board: chess.Board, book: OpeningBook | None = None) -> str:
    """Name of the first opening whose position equals ``board``."""
    book = book if book is not None else get_opening_book()
    opening = book.find_by_position(board)
    if opening is None:
        raise OpeningNotFoundError("no opening found for this position")
    return opening.name


def get_opening_from_fen(fen: str, book: OpeningBook | None = None) -> str:
    """Parse ``fen`` and look the position up.

    Raises:
        FenParseError: ``fen`` is not valid notation.
        OpeningNotFoundError: no opening reaches that position.
    """
    return get_opening_from_position(parse_position(fen), book)


def get_opening_from_name(name: str, book: OpeningBook | None = None) -> str:
    """Move sequence of the first opening named exactly ``name``.

    Only table entries carry moves. Matching a synthetic entry is a caller
    bug and raises MissingMovesError instead of OpeningNotFoundError.
    """
    book = book if book is not None else get_opening_book()
    opening = book.find_by_name(name)
    if opening is None:
        raise OpeningNotFoundError(f"no opening named {name!r}")
    if opening.moves is None:
        raise MissingMovesError(f"opening {name!r} has no move sequence")
    return opening.moves
