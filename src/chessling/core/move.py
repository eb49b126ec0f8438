"""Move value objects and raw-input classification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias, Union

from chessling.core.board import Board
from chessling.core.enums import CastleSide, PieceType
from chessling.core.types import Position


@dataclass(frozen=True, slots=True)
class NormalMove:
    """Plain relocation from *origin* to *dest*, capturing whatever is there."""

    origin: Position
    dest: Position

    def __str__(self) -> str:
        return f"{self.origin}{self.dest}"


@dataclass(frozen=True, slots=True)
class EnPassantMove:
    """En passant capture by the pawn on *origin*.

    The landing square is not stored: it follows from the double pawn push
    that is the most recent entry in the game history.
    """

    origin: Position

    def __str__(self) -> str:
        return f"{self.origin}ep"


@dataclass(frozen=True, slots=True)
class CastleMove:
    """Castling; king and rook squares follow from *side* and the mover."""

    side: CastleSide

    def __str__(self) -> str:
        return "O-O-O" if self.side == CastleSide.QUEEN_SIDE else "O-O"


Move: TypeAlias = Union[NormalMove, EnPassantMove, CastleMove]


def from_input_positions(origin: Position, destination: Position, board: Board) -> Move:
    """Classify a raw square-to-square gesture into a move shape.

    No legality check is made: a king stepping more than one square becomes a
    castle (queen side when heading below the e-file), a pawn moving sideways
    onto an empty square becomes en passant, anything else is a normal move.
    """
    normal = NormalMove(origin, destination)
    if not (origin.in_bounds and destination.in_bounds):
        return normal

    piece = board[origin]
    if piece is None:
        return normal

    delta = abs(destination - origin)
    if piece.piece_type == PieceType.KING and (delta.col > 1 or delta.row > 1):
        side = CastleSide.QUEEN_SIDE if destination.col < 4 else CastleSide.KING_SIDE
        return CastleMove(side)

    if piece.piece_type == PieceType.PAWN and delta.col != 0 and board.is_empty(destination):
        return EnPassantMove(origin)

    return normal
