"""Game state and its history records."""

from __future__ import annotations

from dataclasses import dataclass

from chessling.core.board import Board
from chessling.core.enums import Color, PieceType
from chessling.core.move import Move
from chessling.core.piece import Piece
from chessling.core.types import Position


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history.

    ``moved`` is the mover as it stands after the move (``has_moved`` set);
    ``had_moved`` is its flag before the move, kept so the move can be
    reverted exactly.
    """

    move: Move
    moved: Piece
    captured: Piece | None = None
    had_moved: bool = False


@dataclass(frozen=True, slots=True)
class GameState:
    """Board, history (most recent first), side to move and captured pieces.

    Never mutated: :func:`~chessling.core.transitions.apply_move` and
    :func:`~chessling.core.transitions.revert_last` return new states.
    """

    board: Board
    history: tuple[MoveRecord, ...] = ()
    to_move: Color = Color.WHITE
    captured_pieces: tuple[Piece, ...] = ()

    @classmethod
    def initial(cls) -> GameState:
        """Standard starting position, White to move."""
        return cls(Board.initial())

    @property
    def last_record(self) -> MoveRecord | None:
        """The history head, or ``None`` before the first move."""
        return self.history[0] if self.history else None

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.history)


def find_pieces(color: Color, piece_type: PieceType, state: GameState) -> list[Position]:
    """Positions of *color*'s pieces of *piece_type* on the state's board."""
    return state.board.find(color, piece_type)
