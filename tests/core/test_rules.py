"""Tests for Rules: pseudo-legal move evaluation."""

import pytest
from conftest import Play

from chessling.core.board import Board
from chessling.core.enums import CastleSide, Color, PieceType
from chessling.core.move import CastleMove, EnPassantMove, NormalMove
from chessling.core.notation import state_from_placement
from chessling.core.piece import Piece
from chessling.core.rules import Rules
from chessling.core.state import GameState
from chessling.core.types import (
    A1, A8, B1, C1, D1, D4, D5, E1, E2, E3, E4, E5, E8, F1, G1, H1, H8,
    Position,
)


def _lone(piece: Piece, pos: Position, to_move: Color = Color.WHITE) -> GameState:
    return GameState(Board.empty().set(pos, piece), to_move=to_move)


class TestBasicRejections:
    def test_empty_origin(self, initial: GameState) -> None:
        assert not Rules.is_legal(NormalMove(E4, E5), initial)

    def test_opponent_piece(self, initial: GameState) -> None:
        e7 = Position.parse("e7")
        assert not Rules.is_legal(NormalMove(e7, E5), initial)

    def test_same_color_target(self, initial: GameState) -> None:
        assert not Rules.is_legal(NormalMove(A1, Position.parse("a2")), initial)

    def test_out_of_bounds_destination(self, initial: GameState) -> None:
        assert not Rules.is_legal(NormalMove(B1, Position(-1, 0)), initial)

    def test_out_of_bounds_origin(self, initial: GameState) -> None:
        assert not Rules.is_legal(NormalMove(Position(0, 8), E4), initial)

    def test_zero_distance_is_illegal(self) -> None:
        state = _lone(Piece(Color.WHITE, PieceType.QUEEN), D4)
        assert not Rules.is_legal(NormalMove(D4, D4), state)


KNIGHT_OFFSETS = [(1, 2), (2, 1), (-1, 2), (-2, 1), (1, -2), (2, -1), (-1, -2), (-2, -1)]
NON_KNIGHT_OFFSETS = [(1, 1), (2, 2), (0, 2), (2, 0), (3, 1), (1, 3), (0, 1)]


class TestKnight:
    @pytest.mark.parametrize(("dr", "dc"), KNIGHT_OFFSETS)
    def test_accepts_knight_offsets(self, dr: int, dc: int) -> None:
        state = _lone(Piece(Color.WHITE, PieceType.KNIGHT), D4)
        assert Rules.is_legal(NormalMove(D4, D4 + Position(dr, dc)), state)

    @pytest.mark.parametrize(("dr", "dc"), NON_KNIGHT_OFFSETS)
    def test_rejects_other_offsets(self, dr: int, dc: int) -> None:
        state = _lone(Piece(Color.WHITE, PieceType.KNIGHT), D4)
        assert not Rules.is_legal(NormalMove(D4, D4 + Position(dr, dc)), state)

    def test_jumps_over_pieces(self, initial: GameState) -> None:
        assert Rules.is_legal(NormalMove(G1, Position.parse("f3")), initial)

    def test_captures_enemy(self) -> None:
        e6 = Position.parse("e6")
        board = Board.empty().update(
            {D4: Piece(Color.WHITE, PieceType.KNIGHT), e6: Piece(Color.BLACK, PieceType.PAWN)}
        )
        assert Rules.is_legal(NormalMove(D4, e6), GameState(board))


class TestSliders:
    @pytest.mark.parametrize(
        ("piece_type", "origin", "dest"),
        [
            (PieceType.ROOK, A1, Position.parse("a3")),
            (PieceType.ROOK, A1, A8),
            (PieceType.ROOK, A1, H1),
            (PieceType.BISHOP, A1, Position.parse("c3")),
            (PieceType.BISHOP, A1, H8),
            (PieceType.QUEEN, A1, A8),
            (PieceType.QUEEN, A1, H8),
            (PieceType.QUEEN, A1, Position.parse("c3")),
        ],
    )
    def test_clear_path(self, piece_type: PieceType, origin: Position, dest: Position) -> None:
        state = _lone(Piece(Color.WHITE, piece_type), origin)
        assert Rules.is_legal(NormalMove(origin, dest), state)

    @pytest.mark.parametrize(
        ("piece_type", "origin", "dest"),
        [
            (PieceType.ROOK, A1, Position.parse("a3")),
            (PieceType.ROOK, A1, A8),
            (PieceType.BISHOP, A1, Position.parse("c3")),
            (PieceType.BISHOP, A1, H8),
            (PieceType.QUEEN, A1, A8),
            (PieceType.QUEEN, A1, H8),
        ],
    )
    def test_blocked_anywhere_on_path(
        self, piece_type: PieceType, origin: Position, dest: Position
    ) -> None:
        step = (dest - origin).normalized
        blocker = Piece(Color.BLACK, PieceType.PAWN)
        pos = origin + step
        while pos != dest:
            board = Board.empty().update({origin: Piece(Color.WHITE, piece_type), pos: blocker})
            assert not Rules.is_legal(NormalMove(origin, dest), GameState(board)), (
                f"{piece_type.name} {origin}->{dest} should be blocked by {pos}"
            )
            pos = pos + step

    def test_capture_on_destination_is_not_a_block(self) -> None:
        board = Board.empty().update(
            {A1: Piece(Color.WHITE, PieceType.ROOK), A8: Piece(Color.BLACK, PieceType.ROOK)}
        )
        assert Rules.is_legal(NormalMove(A1, A8), GameState(board))

    def test_rook_rejects_diagonal(self) -> None:
        state = _lone(Piece(Color.WHITE, PieceType.ROOK), A1)
        assert not Rules.is_legal(NormalMove(A1, H8), state)

    def test_bishop_rejects_straight_and_crooked(self) -> None:
        state = _lone(Piece(Color.WHITE, PieceType.BISHOP), A1)
        assert not Rules.is_legal(NormalMove(A1, A8), state)
        assert not Rules.is_legal(NormalMove(A1, Position.parse("b3")), state)

    def test_queen_rejects_knight_shape(self) -> None:
        state = _lone(Piece(Color.WHITE, PieceType.QUEEN), D4)
        assert not Rules.is_legal(NormalMove(D4, Position.parse("e6")), state)


class TestKing:
    @pytest.mark.parametrize(
        ("dr", "dc"), [(1, 0), (-1, 0), (0, 1), (0, -1), (1, 1), (-1, -1), (1, -1), (-1, 1)]
    )
    def test_single_steps(self, dr: int, dc: int) -> None:
        state = _lone(Piece(Color.WHITE, PieceType.KING), D4)
        assert Rules.is_legal(NormalMove(D4, D4 + Position(dr, dc)), state)

    def test_two_squares_rejected(self) -> None:
        state = _lone(Piece(Color.WHITE, PieceType.KING), D4)
        assert not Rules.is_legal(NormalMove(D4, Position.parse("d6")), state)

    def test_zero_displacement_rejected(self) -> None:
        state = _lone(Piece(Color.WHITE, PieceType.KING), D4)
        assert not Rules.is_legal(NormalMove(D4, D4), state)


class TestPawn:
    def test_single_push(self, initial: GameState) -> None:
        assert Rules.is_legal(NormalMove(E2, E3), initial)

    def test_double_push(self, initial: GameState) -> None:
        assert Rules.is_legal(NormalMove(E2, E4), initial)

    def test_triple_push_rejected(self, initial: GameState) -> None:
        assert not Rules.is_legal(NormalMove(E2, E5), initial)

    def test_backwards_rejected(self) -> None:
        state = _lone(Piece(Color.WHITE, PieceType.PAWN, has_moved=True), E4)
        assert not Rules.is_legal(NormalMove(E4, E3), state)

    def test_black_moves_down(self) -> None:
        e7 = Position.parse("e7")
        state = _lone(Piece(Color.BLACK, PieceType.PAWN), e7, to_move=Color.BLACK)
        assert Rules.is_legal(NormalMove(e7, Position.parse("e6")), state)
        assert Rules.is_legal(NormalMove(e7, E5), state)
        assert not Rules.is_legal(NormalMove(e7, Position.parse("e8")), state)

    def test_double_push_needs_unmoved_pawn(self) -> None:
        state = _lone(Piece(Color.WHITE, PieceType.PAWN, has_moved=True), E2)
        assert not Rules.is_legal(NormalMove(E2, E4), state)

    def test_double_push_needs_empty_skipped_square(self) -> None:
        board = Board.empty().update(
            {E2: Piece(Color.WHITE, PieceType.PAWN), E3: Piece(Color.BLACK, PieceType.KNIGHT)}
        )
        assert not Rules.is_legal(NormalMove(E2, E4), GameState(board))

    def test_double_push_needs_empty_destination(self) -> None:
        board = Board.empty().update(
            {E2: Piece(Color.WHITE, PieceType.PAWN), E4: Piece(Color.BLACK, PieceType.KNIGHT)}
        )
        assert not Rules.is_legal(NormalMove(E2, E4), GameState(board))

    def test_single_push_blocked(self) -> None:
        board = Board.empty().update(
            {E2: Piece(Color.WHITE, PieceType.PAWN), E3: Piece(Color.BLACK, PieceType.KNIGHT)}
        )
        assert not Rules.is_legal(NormalMove(E2, E3), GameState(board))

    def test_diagonal_capture(self) -> None:
        board = Board.empty().update(
            {E4: Piece(Color.WHITE, PieceType.PAWN, True), D5: Piece(Color.BLACK, PieceType.PAWN)}
        )
        assert Rules.is_legal(NormalMove(E4, D5), GameState(board))

    def test_diagonal_to_empty_square_rejected(self) -> None:
        state = _lone(Piece(Color.WHITE, PieceType.PAWN, True), E4)
        assert not Rules.is_legal(NormalMove(E4, D5), state)

    def test_two_column_diagonal_rejected(self) -> None:
        board = Board.empty().update(
            {
                E4: Piece(Color.WHITE, PieceType.PAWN, True),
                Position.parse("c5"): Piece(Color.BLACK, PieceType.PAWN),
            }
        )
        assert not Rules.is_legal(NormalMove(E4, Position.parse("c5")), GameState(board))


class TestEnPassant:
    def _setup(self, play: Play, initial: GameState, black_double: bool) -> GameState:
        # White pawn walks e2-e3-e4-e5 in single steps while Black shuffles a knight.
        state = play(initial, "e2e3", "g8f6", "e3e4", "f6g8", "e4e5")
        return play(state, "d7d5" if black_double else "d7d6")

    def test_capture_after_double_push(self, play: Play, initial: GameState) -> None:
        state = self._setup(play, initial, black_double=True)
        assert Rules.is_legal(EnPassantMove(E5), state)
        target = Rules.en_passant_capture(EnPassantMove(E5), state)
        assert target is not None
        assert target.landing == Position.parse("d6")
        assert target.victim == D5

    def test_rejected_after_single_push(self, play: Play, initial: GameState) -> None:
        state = self._setup(play, initial, black_double=False)
        assert not Rules.is_legal(EnPassantMove(E5), state)

    def test_rejected_with_empty_history(self, initial: GameState) -> None:
        assert not Rules.is_legal(EnPassantMove(E2), initial)

    def test_rejected_for_non_adjacent_pawn(self, play: Play, initial: GameState) -> None:
        state = self._setup(play, initial, black_double=True)
        state = play(state, "e5e6", "f7f5")
        assert not Rules.is_legal(EnPassantMove(Position.parse("e6")), state)

    def test_rejected_when_last_move_was_not_a_pawn(self, play: Play, initial: GameState) -> None:
        state = self._setup(play, initial, black_double=True)
        state = play(state, "b1c3", "g8f6")
        assert not Rules.is_legal(EnPassantMove(E5), state)

    def test_rejected_for_non_pawn_origin(self) -> None:
        board = Board.initial()
        state = GameState(board)
        assert not Rules.is_legal(EnPassantMove(B1), state)

    def test_black_captures_white_double_push(self, play: Play, initial: GameState) -> None:
        state = play(initial, "a2a3", "d7d5", "a3a4", "d5d4", "e2e4")
        assert Rules.is_legal(EnPassantMove(D4), state)
        target = Rules.en_passant_target(state)
        assert target is not None
        assert target.landing == E3
        assert target.victim == E4


class TestCastling:
    def test_king_side_after_clearing(self, play: Play, initial: GameState) -> None:
        state = play(initial, "g1f3", "a7a6", "e2e3", "a6a5", "f1e2", "a5a4")
        assert Rules.is_legal(CastleMove(CastleSide.KING_SIDE), state)
        assert not Rules.is_legal(CastleMove(CastleSide.QUEEN_SIDE), state)

    def test_blocked_in_initial_position(self, initial: GameState) -> None:
        assert not Rules.is_legal(CastleMove(CastleSide.KING_SIDE), initial)
        assert not Rules.is_legal(CastleMove(CastleSide.QUEEN_SIDE), initial)

    def test_both_sides_with_clear_back_rank(self) -> None:
        state = state_from_placement("r3k2r/8/8/8/8/8/8/R3K2R")
        assert Rules.is_legal(CastleMove(CastleSide.KING_SIDE), state)
        assert Rules.is_legal(CastleMove(CastleSide.QUEEN_SIDE), state)

    def test_black_uses_its_home_row(self) -> None:
        state = state_from_placement("r3k2r/8/8/8/8/8/8/4K3", to_move=Color.BLACK)
        assert Rules.is_legal(CastleMove(CastleSide.KING_SIDE), state)
        assert Rules.is_legal(CastleMove(CastleSide.QUEEN_SIDE), state)

    def test_moved_king_rejected(self) -> None:
        state = state_from_placement("4k3/8/8/8/8/8/8/R3K2R")
        board = state.board.set(E1, Piece(Color.WHITE, PieceType.KING, has_moved=True))
        assert not Rules.is_legal(CastleMove(CastleSide.KING_SIDE), GameState(board))

    def test_moved_rook_rejected(self) -> None:
        state = state_from_placement("4k3/8/8/8/8/8/8/R3K2R")
        board = state.board.set(H1, Piece(Color.WHITE, PieceType.ROOK, has_moved=True))
        assert not Rules.is_legal(CastleMove(CastleSide.KING_SIDE), GameState(board))
        assert Rules.is_legal(CastleMove(CastleSide.QUEEN_SIDE), GameState(board))

    def test_missing_or_enemy_rook_rejected(self) -> None:
        state = state_from_placement("4k3/8/8/8/8/8/8/r3K3")
        assert not Rules.is_legal(CastleMove(CastleSide.QUEEN_SIDE), state)
        assert not Rules.is_legal(CastleMove(CastleSide.KING_SIDE), state)

    def test_queen_side_b_file_must_be_empty(self) -> None:
        state = state_from_placement("4k3/8/8/8/8/8/8/RN2K3")
        assert not Rules.is_legal(CastleMove(CastleSide.QUEEN_SIDE), state)

    def test_king_off_home_square_rejected(self) -> None:
        state = state_from_placement("4k3/8/8/8/8/8/8/R2K3R")
        assert not Rules.is_legal(CastleMove(CastleSide.KING_SIDE), state)

    def test_castle_geometry(self) -> None:
        squares = Rules.castle_squares(CastleSide.QUEEN_SIDE, Color.BLACK)
        assert squares.king_from == E8
        assert squares.king_to == Position.parse("c8")
        assert squares.rook_from == A8
        assert squares.rook_to == Position.parse("d8")

        squares = Rules.castle_squares(CastleSide.KING_SIDE, Color.WHITE)
        assert (squares.king_to, squares.rook_from, squares.rook_to) == (G1, H1, F1)

    def test_rook_on_d1_square_of_queen_castle(self) -> None:
        assert Rules.castle_squares(CastleSide.QUEEN_SIDE, Color.WHITE).rook_to == D1
        assert Rules.castle_squares(CastleSide.QUEEN_SIDE, Color.WHITE).king_to == C1
