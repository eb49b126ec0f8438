"""Notation package: algebraic moves, transcripts and board placement text."""

from chessling.core.notation.algebraic import from_algebraic, to_algebraic
from chessling.core.notation.placement import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
    state_from_placement,
)
from chessling.core.notation.transcript import (
    ReplayError,
    Transcript,
    create_transcript,
    replay,
)

__all__ = [
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
