"""SAN-like algebraic notation for move records.

The notation has a piece letter, optional disambiguation, an ``x`` for
captures and the destination square; there are no check, mate or promotion
suffixes.  Text is read right-to-left with :mod:`chessling.parsing`, so the
destination square anchors the parse and everything before it is optional.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from chessling.core.enums import CastleSide, PieceType
from chessling.core.move import CastleMove, EnPassantMove, Move, NormalMove
from chessling.core.rules import Rules
from chessling.core.state import GameState, MoveRecord, find_pieces
from chessling.core.transitions import revert_last
from chessling.core.types import BOARD_SIZE, FILES, Position
from chessling.parsing import (
    alternative,
    constant,
    digit,
    fmap,
    literal,
    optional,
    parse_all,
    sequence,
    transform,
)

_LOGGER = logging.getLogger(__name__)

_SAN_PIECE: dict[PieceType, str] = {
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}


@dataclass(frozen=True, slots=True)
class _ParsedSan:
    piece_type: PieceType
    dest: Position
    is_capture: bool
    from_file: int | None
    from_row: int | None


# ── Grammar (read right-to-left) ─────────────────────────────────────────────

_PIECE = alternative(
    *(constant(letter, piece_type) for piece_type, letter in _SAN_PIECE.items()),
    constant("P", PieceType.PAWN),
    constant("", PieceType.PAWN),
)
_FILE = alternative(*(constant(letter, col) for col, letter in enumerate(FILES)))
_ROW = transform(lambda d: d - 1 if 1 <= d <= BOARD_SIZE else None, digit)
_SQUARE = fmap(lambda row_col: Position(*row_col), sequence(_ROW, _FILE))
_CAPTURE = optional(literal("x"))
_DISAMBIGUATION = sequence(optional(_ROW), optional(_FILE))

_SAN = fmap(
    lambda parts: _ParsedSan(
        piece_type=parts[1],
        dest=parts[0][0][0],
        is_capture=parts[0][0][1] is not None,
        from_file=parts[0][1][1],
        from_row=parts[0][1][0],
    ),
    sequence(sequence(sequence(_SQUARE, _CAPTURE), _DISAMBIGUATION), _PIECE),
)
_CASTLE = alternative(
    constant("O-O-O", CastleSide.QUEEN_SIDE),
    constant("0-0-0", CastleSide.QUEEN_SIDE),
    constant("O-O", CastleSide.KING_SIDE),
    constant("0-0", CastleSide.KING_SIDE),
)


# ── Rendering ────────────────────────────────────────────────────────────────


def to_algebraic(record: MoveRecord, state: GameState) -> str | None:
    """Render *record* in algebraic notation, or ``None`` if it cannot be.

    *state* is the state the record produced, i.e. the one whose history head
    is *record*.  Any other state is taken to be the position the move was
    played from.
    """
    move = record.move
    if isinstance(move, CastleMove):
        return str(move)

    is_head = state.last_record == record
    if isinstance(move, EnPassantMove):
        # The target depends on the history alone.
        if is_head:
            state = replace(state, history=state.history[1:], to_move=state.to_move.opposite)
        target = Rules.en_passant_target(state)
        if target is None:
            return None
        return f"{move.origin.file}x{target.landing.name}"

    before = revert_last(state) if is_head else state
    return _normal_to_algebraic(move, record, before)


def _normal_to_algebraic(move: NormalMove, record: MoveRecord, before: GameState) -> str:
    piece = record.moved
    is_capture = record.captured is not None
    san = ""

    if piece.piece_type == PieceType.PAWN:
        if is_capture:
            san += move.origin.file
    else:
        san += _SAN_PIECE[piece.piece_type]

        # Disambiguation
        ambiguous = [
            pos
            for pos in find_pieces(piece.color, piece.piece_type, before)
            if pos != move.origin and Rules.is_legal(NormalMove(pos, move.dest), before)
        ]
        if ambiguous:
            same_file = any(pos.col == move.origin.col for pos in ambiguous)
            same_row = any(pos.row == move.origin.row for pos in ambiguous)
            if not same_file:
                san += move.origin.file
            elif not same_row:
                san += str(move.origin.row + 1)
            else:
                san += move.origin.name

    if is_capture:
        san += "x"

    return san + move.dest.name


# ── Parsing ──────────────────────────────────────────────────────────────────


def from_algebraic(text: str, state: GameState) -> Move | None:
    """Resolve algebraic *text* to a move for the side to move in *state*.

    Returns ``None`` when the text does not parse or does not identify a
    single move.  A fully disambiguated square (``"Qh4e1"``) is trusted as
    given; callers still pass the result through ``apply_move``.
    """
    text = text.strip()

    side = parse_all(_CASTLE, text)
    if side is not None:
        return CastleMove(side)

    parsed = parse_all(_SAN, text)
    if parsed is None:
        _LOGGER.debug("Unparseable move text %r", text)
        return None

    candidates = [
        pos
        for pos in find_pieces(state.to_move, parsed.piece_type, state)
        if (parsed.from_file is None or pos.col == parsed.from_file)
        and (parsed.from_row is None or pos.row == parsed.from_row)
        and Rules.is_legal(NormalMove(pos, parsed.dest), state)
    ]
    if len(candidates) == 1:
        return NormalMove(candidates[0], parsed.dest)

    if not candidates and parsed.piece_type == PieceType.PAWN and parsed.is_capture:
        en_passant = _en_passant_from(parsed, state)
        if en_passant is not None:
            return en_passant

    if parsed.from_file is not None and parsed.from_row is not None:
        return NormalMove(Position(parsed.from_row, parsed.from_file), parsed.dest)

    _LOGGER.debug("Move text %r matches %d candidates", text, len(candidates))
    return None


def _en_passant_from(parsed: _ParsedSan, state: GameState) -> EnPassantMove | None:
    if parsed.from_file is None:
        return None
    origin = Position(parsed.dest.row - Rules.pawn_direction(state.to_move), parsed.from_file)
    move = EnPassantMove(origin)
    target = Rules.en_passant_capture(move, state)
    if target is None or target.landing != parsed.dest:
        return None
    return move
