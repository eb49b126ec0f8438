"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from chessling.core.enums import Color, PieceType


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece.

    ``has_moved`` records whether the piece has ever been relocated; it gates
    castling and the pawn double step.
    """

    color: Color
    piece_type: PieceType
    has_moved: bool = False

    def moved(self) -> Piece:
        """Copy of this piece flagged as having moved."""
        return replace(self, has_moved=True)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        letter = self.piece_type.symbol
        return letter if self.color == Color.WHITE else letter.lower()

    @classmethod
    def from_char(cls, char: str, has_moved: bool = False) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        if len(char) != 1 or not char.isalpha():
            raise ValueError(f"Invalid piece character: {char!r}")
        color = Color.WHITE if char.isupper() else Color.BLACK
        try:
            piece_type = PieceType.from_symbol(char.upper())
        except ValueError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, piece_type, has_moved)
