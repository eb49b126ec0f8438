"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def symbol(self) -> str:
        """Upper-case letter, e.g. ``N`` for a knight."""
        return _SYMBOLS[self]

    @classmethod
    def from_symbol(cls, letter: str) -> PieceType:
        """Piece type for an upper-case letter, e.g. ``'R'`` → ROOK."""
        try:
            return _SYMBOLS_REV[letter]
        except KeyError:
            raise ValueError(f"Invalid piece letter: {letter!r}") from None


class CastleSide(IntEnum):
    """Which rook the king castles with."""

    QUEEN_SIDE = 0
    KING_SIDE = 1


_SYMBOLS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}
_SYMBOLS_REV: dict[str, PieceType] = {v: k for k, v in _SYMBOLS.items()}
