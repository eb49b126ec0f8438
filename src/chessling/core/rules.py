"""Pseudo-legal move rules.

A move is accepted when it follows the piece's movement pattern and the board
occupancy allows it.  Whether the move leaves the mover's own king attacked
is *not* considered: there is no check, checkmate or stalemate detection.
"""

from __future__ import annotations

from dataclasses import dataclass

from chessling.core.enums import CastleSide, Color, PieceType
from chessling.core.move import CastleMove, EnPassantMove, Move, NormalMove
from chessling.core.state import GameState, find_pieces
from chessling.core.types import Position

KING_HOME_COL = 4
ROOK_HOME_COLS: dict[CastleSide, int] = {CastleSide.QUEEN_SIDE: 0, CastleSide.KING_SIDE: 7}
KING_CASTLED_COLS: dict[CastleSide, int] = {CastleSide.QUEEN_SIDE: 2, CastleSide.KING_SIDE: 6}
ROOK_CASTLED_COLS: dict[CastleSide, int] = {CastleSide.QUEEN_SIDE: 3, CastleSide.KING_SIDE: 5}
# Squares between king and rook that must be empty.
CASTLE_GAP_COLS: dict[CastleSide, tuple[int, ...]] = {
    CastleSide.QUEEN_SIDE: (1, 2, 3),
    CastleSide.KING_SIDE: (5, 6),
}

_KNIGHT_SHAPES = {(1, 2), (2, 1)}


@dataclass(frozen=True, slots=True)
class CastleSquares:
    """Origins and destinations of the king and rook for one castle."""

    king_from: Position
    king_to: Position
    rook_from: Position
    rook_to: Position


@dataclass(frozen=True, slots=True)
class EnPassantTarget:
    """Where an en passant capture lands and which pawn it removes."""

    landing: Position
    victim: Position


class Rules:
    """Static rule-checker that operates on a :class:`GameState`."""

    # ── Geometry ─────────────────────────────────────────────────────────

    @staticmethod
    def pawn_direction(color: Color) -> int:
        """Row step of a pawn moving forward: rows grow towards Black."""
        return 1 if color == Color.WHITE else -1

    @staticmethod
    def home_row(color: Color) -> int:
        return 0 if color == Color.WHITE else 7

    @staticmethod
    def castle_squares(side: CastleSide, color: Color) -> CastleSquares:
        row = Rules.home_row(color)
        return CastleSquares(
            king_from=Position(row, KING_HOME_COL),
            king_to=Position(row, KING_CASTLED_COLS[side]),
            rook_from=Position(row, ROOK_HOME_COLS[side]),
            rook_to=Position(row, ROOK_CASTLED_COLS[side]),
        )

    # ── En passant ───────────────────────────────────────────────────────

    @staticmethod
    def en_passant_target(state: GameState) -> EnPassantTarget | None:
        """Capture square opened by the last move, if it was a double push."""
        last = state.last_record
        if last is None or not isinstance(last.move, NormalMove):
            return None
        if last.moved.piece_type != PieceType.PAWN:
            return None

        delta = last.move.dest - last.move.origin
        if abs(delta.row) != 2 or delta.col != 0:
            return None

        direction = Rules.pawn_direction(state.to_move.opposite)
        victim = last.move.dest
        return EnPassantTarget(landing=Position(victim.row - direction, victim.col), victim=victim)

    @staticmethod
    def en_passant_capture(move: EnPassantMove, state: GameState) -> EnPassantTarget | None:
        """Target of *move* when it is a valid en passant capture, else ``None``.

        Shared by the legality check and move application so both always agree.
        """
        target = Rules.en_passant_target(state)
        if target is None or not move.origin.in_bounds:
            return None

        pawn = state.board[move.origin]
        if pawn is None or pawn.piece_type != PieceType.PAWN or pawn.color != state.to_move:
            return None

        delta = target.landing - move.origin
        if delta.row != Rules.pawn_direction(state.to_move) or abs(delta.col) != 1:
            return None
        return target

    # ── Legality ─────────────────────────────────────────────────────────

    @staticmethod
    def is_legal(move: Move, state: GameState) -> bool:
        """Whether *move* is pseudo-legal for the side to move in *state*."""
        if isinstance(move, NormalMove):
            return _is_legal_normal(move, state)
        if isinstance(move, EnPassantMove):
            return Rules.en_passant_capture(move, state) is not None
        if isinstance(move, CastleMove):
            return _is_legal_castle(move, state)
        raise TypeError(f"Unknown move type: {type(move).__name__}")


# -- Per-move-type checks (private) ----------------------------------------


def _is_legal_normal(move: NormalMove, state: GameState) -> bool:
    origin, dest = move.origin, move.dest
    if not (origin.in_bounds and dest.in_bounds):
        return False

    board = state.board
    piece = board[origin]
    if piece is None or piece.color != state.to_move:
        return False
    target = board[dest]
    if target is not None and target.color == piece.color:
        return False

    piece_type = piece.piece_type
    if piece_type == PieceType.KNIGHT:
        return _is_knight_move(origin, dest)
    if piece_type == PieceType.BISHOP:
        return _is_diagonal_move(origin, dest, state)
    if piece_type == PieceType.ROOK:
        return _is_straight_move(origin, dest, state)
    if piece_type == PieceType.QUEEN:
        return _is_straight_move(origin, dest, state) or _is_diagonal_move(
            origin, dest, state
        )
    if piece_type == PieceType.KING:
        return _is_king_move(origin, dest)
    return _is_pawn_move(origin, dest, state)


def _is_knight_move(origin: Position, dest: Position) -> bool:
    d = abs(dest - origin)
    return (d.row, d.col) in _KNIGHT_SHAPES


def _is_king_move(origin: Position, dest: Position) -> bool:
    d = abs(dest - origin)
    return d.row <= 1 and d.col <= 1 and origin != dest


def _is_diagonal_move(origin: Position, dest: Position, state: GameState) -> bool:
    d = abs(dest - origin)
    return d.row == d.col != 0 and _is_path_clear(origin, dest, state)


def _is_straight_move(origin: Position, dest: Position, state: GameState) -> bool:
    d = dest - origin
    return (d.row == 0) != (d.col == 0) and _is_path_clear(origin, dest, state)


def _is_path_clear(origin: Position, dest: Position, state: GameState) -> bool:
    """Ray walk: every square strictly between *origin* and *dest* is empty."""
    step = (dest - origin).normalized
    pos = origin + step
    while pos != dest:
        if not pos.in_bounds or state.board[pos] is not None:
            return False
        pos = pos + step
    return True


def _is_pawn_move(origin: Position, dest: Position, state: GameState) -> bool:
    board = state.board
    pawn = board[origin]
    assert pawn is not None
    direction = Rules.pawn_direction(pawn.color)
    d = dest - origin
    dest_empty = board[dest] is None

    if d.col == 0:
        if d.row == direction:
            return dest_empty
        if d.row == 2 * direction:
            skipped = Position(origin.row + direction, origin.col)
            return not pawn.has_moved and dest_empty and board[skipped] is None
        return False

    return abs(d.col) == 1 and d.row == direction and not dest_empty


def _is_legal_castle(move: CastleMove, state: GameState) -> bool:
    color = state.to_move
    board = state.board
    squares = Rules.castle_squares(move.side, color)

    kings = find_pieces(color, PieceType.KING, state)
    if squares.king_from not in kings:
        return False
    if any(board[pos].has_moved for pos in kings):  # type: ignore[union-attr]
        return False

    row = squares.king_from.row
    if any(board[Position(row, col)] is not None for col in CASTLE_GAP_COLS[move.side]):
        return False

    rook = board[squares.rook_from]
    return (
        rook is not None
        and rook.piece_type == PieceType.ROOK
        and rook.color == color
        and not rook.has_moved
    )
