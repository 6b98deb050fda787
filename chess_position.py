"""Thin adapter over python-chess for the opening book.

Positions are plain chess.Board objects. Two positions are equal when their
structural keys match: piece placement, side to move, castling rights and the
en-passant square (only when an en-passant capture is actually legal). Move
counters and move history are ignored.
"""

from __future__ import annotations

import chess

from opening_errors import FenParseError

EMPTY_FEN = "8/8/8/8/8/8/8/8 w - - 0 1"

PositionKey = tuple[int, int, int, int, int, int, int, int, bool, int, int | None]


def starting_position() -> chess.Board:
    return chess.Board()


def empty_position() -> chess.Board:
    return chess.Board.empty()


def parse_position(fen: str) -> chess.Board:
    """Parse a FEN string.

    Well-formed but unplayable positions (e.g. no kings) are accepted, so the
    empty board round-trips.
    """
    try:
        return chess.Board(fen.strip())
    except ValueError as exc:
        raise FenParseError(f"invalid fen {fen!r}: {exc}") from exc


def apply_move(board: chess.Board, token: str) -> bool:
    """Play one SAN token on ``board`` in place.

    Returns False, leaving the board untouched, if the token is not a legal
    move here: move numbers, annotations, result markers, illegal or
    ambiguous moves and null moves all count as not a move.
    """
    try:
        move = board.parse_san(token)
    except ValueError:
        return False
    if not move:
        return False
    board.push(move)
    return True


def position_key(board: chess.Board) -> PositionKey:
    ep_square = board.ep_square if board.has_legal_en_passant() else None
    return (
        board.pawns,
        board.knights,
        board.bishops,
        board.rooks,
        board.queens,
        board.kings,
        board.occupied_co[chess.WHITE],
        board.occupied_co[chess.BLACK],
        board.turn,
        board.clean_castling_rights(),
        ep_square,
    )


def positions_equal(a: chess.Board, b: chess.Board) -> bool:
    return position_key(a) == position_key(b)


def serialize_position(board: chess.Board) -> str:
    return board.fen(en_passant="legal")
