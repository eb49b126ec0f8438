"""Piece-placement text (the first field of FEN) for building and printing boards."""

from __future__ import annotations

from chessling.core.board import Board
from chessling.core.enums import Color, PieceType
from chessling.core.piece import Piece
from chessling.core.state import GameState
from chessling.core.types import BOARD_SIZE, Position

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

_PAWN_START_ROWS: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 6}


def board_from_placement(placement: str) -> Board:
    """Parse placement text into a :class:`Board`.

    Pawns standing off their starting row are marked as having moved; every
    other piece is read as unmoved.
    """
    rows = placement.split("/")
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Invalid placement (must contain 8 rows): {placement!r}")

    changes: dict[Position, Piece | None] = {}
    for row_idx, row_text in enumerate(rows):
        row = BOARD_SIZE - 1 - row_idx
        col = 0
        for ch in row_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid placement digit {ch!r}: {placement!r}")
                col += step
            else:
                if col >= BOARD_SIZE:
                    raise ValueError(f"Invalid placement row width: {placement!r}")
                piece = Piece.from_char(ch)
                if piece.piece_type == PieceType.PAWN and row != _PAWN_START_ROWS[piece.color]:
                    piece = piece.moved()
                changes[Position(row, col)] = piece
                col += 1
            if col > BOARD_SIZE:
                raise ValueError(f"Invalid placement row width: {placement!r}")
        if col != BOARD_SIZE:
            raise ValueError(f"Invalid placement row width: {placement!r}")

    return Board.empty().update(changes)


def board_to_placement(board: Board) -> str:
    """Serialise *board* to placement text (``has_moved`` is not encoded)."""
    rows: list[str] = []
    for row in range(BOARD_SIZE - 1, -1, -1):
        empty = 0
        text = ""
        for col in range(BOARD_SIZE):
            piece = board[Position(row, col)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    return "/".join(rows)


def state_from_placement(placement: str, to_move: Color = Color.WHITE) -> GameState:
    """Fresh :class:`GameState` (empty history) for a placement."""
    return GameState(board_from_placement(placement), to_move=to_move)
