"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessling.core.enums import Color
from chessling.core.move import Move, NormalMove
from chessling.core.rules import Rules
from chessling.core.state import GameState
from chessling.core.transitions import apply_move
from chessling.core.types import Position, all_positions

Play = Callable[..., GameState]

# Placement text and side to move for positions with many pieces in play.
BUSY_POSITIONS: list[tuple[str, Color]] = [
    ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR", Color.WHITE),
    ("r3k2r/pp1n1ppp/2p1b3/3pP3/1b1P4/2N2N2/PPQ2PPP/R3KB1R", Color.WHITE),
    ("r3k2r/pp1n1ppp/2p1b3/3pP3/1b1P4/2N2N2/PPQ2PPP/R3KB1R", Color.BLACK),
    ("4k3/8/8/R7/8/8/4K3/R2N3R", Color.WHITE),
]


def legal_normal_moves(state: GameState) -> list[NormalMove]:
    """Every pseudo-legal normal move for the side to move."""
    return [
        NormalMove(origin, dest)
        for origin, piece in state.board.occupied()
        if piece.color == state.to_move
        for dest in all_positions()
        if Rules.is_legal(NormalMove(origin, dest), state)
    ]


@pytest.fixture
def initial() -> GameState:
    """Standard starting state, White to move."""
    return GameState.initial()


@pytest.fixture
def play() -> Play:
    """Apply moves in order, failing the test on the first rejected one.

    Moves may be given as :class:`Move` objects or as ``"e2e4"``-style
    origin/destination strings for normal moves.
    """

    def _play(state: GameState, *moves: Move | str) -> GameState:
        for move in moves:
            if isinstance(move, str):
                move = NormalMove(Position.parse(move[:2]), Position.parse(move[2:]))
            next_state = apply_move(move, state)
            assert next_state is not None, f"{move} was rejected"
            state = next_state
        return state

    return _play
