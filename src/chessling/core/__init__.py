"""Core domain layer — pure, immutable chess rules with zero external dependencies.

Quick start::

    from chessling.core import GameState, apply_move, from_algebraic, create_transcript

    state = GameState.initial()
    for text in ("e4", "e5", "Nf3"):
        state = apply_move(from_algebraic(text, state), state)
    print(list(create_transcript(state)))
"""

from chessling.core.board import Board
from chessling.core.enums import CastleSide, Color, PieceType
from chessling.core.move import (
    CastleMove,
    EnPassantMove,
    Move,
    NormalMove,
    from_input_positions,
)
from chessling.core.notation import (
    STARTING_PLACEMENT,
    ReplayError,
    Transcript,
    board_from_placement,
    board_to_placement,
    create_transcript,
    from_algebraic,
    replay,
    state_from_placement,
    to_algebraic,
)
from chessling.core.piece import Piece
from chessling.core.rules import CastleSquares, EnPassantTarget, Rules
from chessling.core.state import GameState, MoveRecord, find_pieces
from chessling.core.transitions import apply_move, revert_last
from chessling.core.types import BOARD_SIZE, FILES, Position

__all__ = [
    # Enums
    "CastleSide",
    "Color",
    "PieceType",
    # Types / helpers
    "BOARD_SIZE",
    "FILES",
    "Position",
    # Domain objects
    "Board",
    "CastleMove",
    "CastleSquares",
    "EnPassantMove",
    "EnPassantTarget",
    "GameState",
    "Move",
    "MoveRecord",
    "NormalMove",
    "Piece",
    "Rules",
    # Operations
    "apply_move",
    "find_pieces",
    "from_input_positions",
    "revert_last",
    # Notation
    "STARTING_PLACEMENT",
    "ReplayError",
    "Transcript",
    "board_from_placement",
    "board_to_placement",
    "create_transcript",
    "from_algebraic",
    "replay",
    "state_from_placement",
    "to_algebraic",
]
