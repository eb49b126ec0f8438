"""Applying moves to a :class:`GameState` and taking them back."""

from __future__ import annotations

import logging
from dataclasses import replace

from chessling.core.move import CastleMove, EnPassantMove, Move, NormalMove
from chessling.core.piece import Piece
from chessling.core.rules import Rules
from chessling.core.state import GameState, MoveRecord
from chessling.core.types import Position

_LOGGER = logging.getLogger(__name__)


def apply_move(move: Move, state: GameState) -> GameState | None:
    """New state after *move*, or ``None`` when the move is not legal.

    *state* is never modified.  Every piece the move relocates (including the
    rook when castling) ends up with ``has_moved`` set.
    """
    if not Rules.is_legal(move, state):
        _LOGGER.debug("Rejected %s for %s", move, state.to_move)
        return None

    if isinstance(move, NormalMove):
        return _apply_normal(move, state)
    if isinstance(move, EnPassantMove):
        return _apply_en_passant(move, state)
    return _apply_castle(move, state)


def revert_last(state: GameState) -> GameState:
    """State before the history head was played; unchanged if history is empty."""
    record = state.last_record
    if record is None:
        return state

    previous = replace(
        state,
        history=state.history[1:],
        to_move=state.to_move.opposite,
        captured_pieces=(
            state.captured_pieces[1:] if record.captured is not None else state.captured_pieces
        ),
    )
    mover = replace(record.moved, has_moved=record.had_moved)
    move = record.move

    if isinstance(move, NormalMove):
        board = state.board.update({move.origin: mover, move.dest: record.captured})
    elif isinstance(move, EnPassantMove):
        target = Rules.en_passant_target(previous)
        if target is None:
            raise ValueError(f"En passant record without a double push before it: {record}")
        board = state.board.update(
            {target.landing: None, move.origin: mover, target.victim: record.captured}
        )
    else:
        squares = Rules.castle_squares(move.side, previous.to_move)
        rook = state.board[squares.rook_to]
        if rook is None:
            raise ValueError(f"Castled rook missing from {squares.rook_to}: {record}")
        board = state.board.update(
            {
                squares.king_to: None,
                squares.rook_to: None,
                squares.king_from: mover,
                squares.rook_from: replace(rook, has_moved=False),
            }
        )

    return replace(previous, board=board)


# -- Per-move-type application (private) -------------------------------------


def _advance(
    state: GameState, board_changes: dict[Position, Piece | None], record: MoveRecord
) -> GameState:
    captured = state.captured_pieces
    if record.captured is not None:
        captured = (record.captured, *captured)
    return GameState(
        board=state.board.update(board_changes),
        history=(record, *state.history),
        to_move=state.to_move.opposite,
        captured_pieces=captured,
    )


def _apply_normal(move: NormalMove, state: GameState) -> GameState | None:
    piece = state.board[move.origin]
    if piece is None:
        return None
    moved = piece.moved()
    record = MoveRecord(move, moved, state.board[move.dest], had_moved=piece.has_moved)
    return _advance(state, {move.origin: None, move.dest: moved}, record)


def _apply_en_passant(move: EnPassantMove, state: GameState) -> GameState | None:
    target = Rules.en_passant_capture(move, state)
    pawn = state.board[move.origin]
    if target is None or pawn is None:
        return None
    moved = pawn.moved()
    record = MoveRecord(move, moved, state.board[target.victim], had_moved=pawn.has_moved)
    changes: dict[Position, Piece | None] = {
        move.origin: None,
        target.victim: None,
        target.landing: moved,
    }
    return _advance(state, changes, record)


def _apply_castle(move: CastleMove, state: GameState) -> GameState | None:
    squares = Rules.castle_squares(move.side, state.to_move)
    king = state.board[squares.king_from]
    rook = state.board[squares.rook_from]
    if king is None or rook is None:
        return None
    record = MoveRecord(move, king.moved(), None, had_moved=king.has_moved)
    changes: dict[Position, Piece | None] = {
        squares.king_from: None,
        squares.rook_from: None,
        squares.king_to: king.moved(),
        squares.rook_to: rook.moved(),
    }
    return _advance(state, changes, record)
