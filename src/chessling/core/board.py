"""Board - immutable piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from chessling.core.enums import Color, PieceType
from chessling.core.piece import Piece
from chessling.core.types import BOARD_SIZE, Position, all_positions

_SQUARE_COUNT = BOARD_SIZE * BOARD_SIZE
_POSITIONS: tuple[Position, ...] = tuple(all_positions())

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def _index(pos: Position) -> int:
    if not pos.in_bounds:
        raise ValueError(f"Position off the board: {pos!r}")
    return pos.row * BOARD_SIZE + pos.col


class Board:
    """Immutable 64-square board backed by a single flat tuple.

    Every change produces a new board; :meth:`update` replaces any number of
    slots with one copy of the underlying tuple.
    """

    __slots__ = ("_squares",)

    def __init__(self, squares: tuple[Piece | None, ...] | None = None) -> None:
        if squares is None:
            squares = (None,) * _SQUARE_COUNT
        if len(squares) != _SQUARE_COUNT:
            raise ValueError(f"Board needs {_SQUARE_COUNT} squares, got {len(squares)}")
        self._squares: tuple[Piece | None, ...] = squares

    # -- Element access -----------------------------------------------------

    def __getitem__(self, pos: Position) -> Piece | None:
        return self._squares[_index(pos)]

    def get(self, pos: Position) -> Piece | None:
        """Piece on *pos* (``None`` when empty); *pos* must be on the board."""
        return self._squares[_index(pos)]

    def is_empty(self, pos: Position) -> bool:
        return self._squares[_index(pos)] is None

    def rows(self) -> Iterator[tuple[Piece | None, ...]]:
        """The eight rows, row 0 first, each indexed by column."""
        for row in range(BOARD_SIZE):
            start = row * BOARD_SIZE
            yield self._squares[start : start + BOARD_SIZE]

    # -- Derived boards -----------------------------------------------------

    def set(self, pos: Position, piece: Piece | None) -> Board:
        """New board with the slot at *pos* replaced by *piece*."""
        return self.update({pos: piece})

    def update(self, changes: Mapping[Position, Piece | None]) -> Board:
        """New board with every slot in *changes* replaced."""
        squares = list(self._squares)
        for pos, piece in changes.items():
            squares[_index(pos)] = piece
        return Board(tuple(squares))

    # -- Query helpers ------------------------------------------------------

    def find(self, color: Color, piece_type: PieceType) -> list[Position]:
        """Positions holding *color*'s *piece_type*, row by row from a1."""
        return [
            pos
            for pos, piece in zip(_POSITIONS, self._squares)
            if piece is not None
            and piece.color == color
            and piece.piece_type == piece_type
        ]

    def occupied(self) -> Iterator[tuple[Position, Piece]]:
        """(position, piece) for every non-empty square."""
        for pos, piece in zip(_POSITIONS, self._squares):
            if piece is not None:
                yield pos, piece

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position, every piece unmoved."""
        changes: dict[Position, Piece | None] = {}
        for col in range(BOARD_SIZE):
            changes[Position(1, col)] = Piece(Color.WHITE, PieceType.PAWN)
            changes[Position(6, col)] = Piece(Color.BLACK, PieceType.PAWN)
        for col, piece_type in enumerate(_BACK_RANK):
            changes[Position(0, col)] = Piece(Color.WHITE, piece_type)
            changes[Position(7, col)] = Piece(Color.BLACK, piece_type)
        return cls().update(changes)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(self._squares)

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE - 1, -1, -1):
            cells = []
            for col in range(BOARD_SIZE):
                p = self[Position(row, col)]
                cells.append(str(p) if p else ".")
            rows.append(f"{row + 1} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
