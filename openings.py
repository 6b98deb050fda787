"""
Opening book built from the bundled ECO tables.

Each entry is an Opening: (eco, name, position, moves)
- eco:       ECO classification string ("Extra" for the synthetic entries)
- name:      Human-readable opening name, not unique across the tables
- position:  Board reached by replaying moves from the standard start
- moves:     The pgn column exactly as bundled; None for synthetic entries

Two synthetic entries, "Starting Position" and "Empty Board", always come
first, followed by every table row in volume order. The shared book is built
once per process on first use and is read-only afterwards.

Replay is permissive: any token that is not a legal move in the current
position (move numbers, annotations, illegal moves) is skipped rather than
rejected. Only structurally broken rows abort the build.
"""

from __future__ import annotations

import csv
import io
import logging
import threading
import time
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import InitVar, dataclass, field
from types import MappingProxyType

import chess

from chess_position import (
    PositionKey,
    apply_move,
    empty_position,
    position_key,
    serialize_position,
    starting_position,
)
from eco_data import TSV_DATA
from opening_errors import ConstructionError

logger = logging.getLogger(__name__)

SYNTHETIC_ECO = "Extra"
STARTING_POSITION_NAME = "Starting Position"
EMPTY_BOARD_NAME = "Empty Board"
TSV_COLUMNS = ("eco", "name", "pgn")


@dataclass(frozen=True)
class Opening:
    """One named opening line and the position it reaches."""

    eco: str
    name: str
    board: InitVar[chess.Board]
    moves: str | None = None
    key: PositionKey = field(init=False, repr=False)
    _board: chess.Board = field(init=False, repr=False, compare=False)

    def __post_init__(self, board: chess.Board) -> None:
        # The book owns its board; callers only ever see copies.
        object.__setattr__(self, "_board", board.copy(stack=False))
        object.__setattr__(self, "key", position_key(board))

    @property
    def position(self) -> chess.Board:
        """Fresh copy of the position; mutating it leaves the entry untouched."""
        return self._board.copy(stack=False)

    @property
    def fen(self) -> str:
        return serialize_position(self._board)

    def to_dict(self) -> dict[str, str]:
        """Payload shape handed to the host application."""
        return {"eco": self.eco, "name": self.name, "fen": self.fen}


def synthetic_openings() -> list[Opening]:
    return [
        Opening(SYNTHETIC_ECO, STARTING_POSITION_NAME, starting_position()),
        Opening(SYNTHETIC_ECO, EMPTY_BOARD_NAME, empty_position()),
    ]


def replay_moves(moves: str) -> chess.Board:
    """Play a whitespace-separated SAN sequence from the starting position.

    Tokens that do not apply are skipped, so "1. e4 e5 2. Ke3" reaches the
    same position as "e4 e5".
    """
    board = starting_position()
    skipped = [token for token in moves.split() if not apply_move(board, token)]
    if skipped:
        logger.debug("Skipped %d token(s) in %r: %s", len(skipped), moves, skipped)
    return board


def parse_records(text: str, source: str = "<tsv>") -> list[Opening]:
    """Parse one tab-separated table with an eco/name/pgn header.

    Raises:
        ConstructionError: wrong header, wrong column count or empty pgn.
    """
    reader = csv.DictReader(io.StringIO(text), delimiter="\t")
    if tuple(reader.fieldnames or ()) != TSV_COLUMNS:
        raise ConstructionError(
            f"{source}: expected columns {TSV_COLUMNS}, got {reader.fieldnames}"
        )

    openings = []
    for row in reader:
        # DictReader files surplus fields under None and fills missing ones with None
        if None in row or any(row[column] is None for column in TSV_COLUMNS):
            raise ConstructionError(f"{source}:{reader.line_num}: malformed record {row!r}")
        pgn = row["pgn"]
        if not pgn.strip():
            raise ConstructionError(f"{source}:{reader.line_num}: empty pgn for {row['name']!r}")
        openings.append(Opening(row["eco"], row["name"], replay_moves(pgn), pgn))
    return openings


def build_openings(sources: Sequence[str] = TSV_DATA) -> list[Opening]:
    """Synthetic entries followed by every record of every source, in order."""
    openings = synthetic_openings()
    for i, text in enumerate(sources):
        openings.extend(parse_records(text, source=f"source[{i}]"))
    return openings


class OpeningBook:
    """Immutable, ordered collection of openings.

    Lookups resolve to the first entry in book order; the position and name
    maps are built with that rule so they agree with a linear scan.
    """

    def __init__(self, openings: Iterable[Opening]) -> None:
        self._openings: tuple[Opening, ...] = tuple(openings)
        by_key: dict[PositionKey, Opening] = {}
        by_name: dict[str, Opening] = {}
        for opening in self._openings:
            by_key.setdefault(opening.key, opening)
            by_name.setdefault(opening.name, opening)
        self._by_key = MappingProxyType(by_key)
        self._by_name = MappingProxyType(by_name)

    @classmethod
    def from_sources(cls, sources: Sequence[str] = TSV_DATA) -> OpeningBook:
        return cls(build_openings(sources))

    def __len__(self) -> int:
        return len(self._openings)

    def __iter__(self) -> Iterator[Opening]:
        return iter(self._openings)

    def __getitem__(self, index: int) -> Opening:
        return self._openings[index]

    @property
    def openings(self) -> tuple[Opening, ...]:
        return self._openings

    def find_by_position(self, board: chess.Board) -> Opening | None:
        return self._by_key.get(position_key(board))

    def find_by_name(self, name: str) -> Opening | None:
        return self._by_name.get(name)


# --- Shared book ---

_book: OpeningBook | None = None
_book_lock = threading.Lock()


def _build_shared_book() -> OpeningBook:
    logger.info("Initializing openings table...")
    start = time.perf_counter()
    book = OpeningBook.from_sources(TSV_DATA)
    logger.info("Loaded %d openings in %.2fs", len(book), time.perf_counter() - start)
    return book


def get_opening_book() -> OpeningBook:
    """Return the process-wide book, building it on first call.

    Concurrent first callers wait on the lock and receive the same instance.
    A failed build publishes nothing and re-raises to the caller.
    """
    global _book
    book = _book
    if book is None:
        with _book_lock:
            if _book is None:
                _book = _build_shared_book()
            book = _book
    return book
