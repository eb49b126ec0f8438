"""Board coordinates and vector helpers.

Rows run 0–7 from White's back rank (row 0, rank "1") to Black's (row 7,
rank "8"); columns run 0–7 from the a-file to the h-file.  A :class:`Position`
is used both as a square and as a displacement between two squares, so it is
not bounds-checked on construction: call :attr:`Position.in_bounds` before
looking a position up on a board.
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8
FILES = "abcdefgh"


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass(frozen=True, slots=True)
class Position:
    """Row/column pair; also used as a (row, col) vector."""

    row: int
    col: int

    # ── Vector arithmetic ────────────────────────────────────────────────

    def __add__(self, other: Position) -> Position:
        return Position(self.row + other.row, self.col + other.col)

    def __sub__(self, other: Position) -> Position:
        return Position(self.row - other.row, self.col - other.col)

    def __abs__(self) -> Position:
        return Position(abs(self.row), abs(self.col))

    @property
    def normalized(self) -> Position:
        """Unit step in the same direction: the sign of each component."""
        return Position(_sign(self.row), _sign(self.col))

    @property
    def in_bounds(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE

    # ── Naming ───────────────────────────────────────────────────────────

    @property
    def file(self) -> str:
        """File letter, e.g. ``'e'``."""
        return FILES[self.col]

    @property
    def name(self) -> str:
        """Algebraic square name, e.g. ``Position(3, 4)`` → ``'e4'``."""
        if not self.in_bounds:
            raise ValueError(f"Position off the board: {self!r}")
        return f"{self.file}{self.row + 1}"

    @classmethod
    def parse(cls, name: str) -> Position:
        """Parse a square name, e.g. ``'e4'`` → ``Position(3, 4)``."""
        if len(name) != 2 or name[0] not in FILES or name[1] not in "12345678":
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(int(name[1]) - 1, FILES.index(name[0]))

    def __str__(self) -> str:
        return self.name if self.in_bounds else f"({self.row}, {self.col})"


def all_positions() -> list[Position]:
    """Every square, row by row from a1 to h8."""
    return [Position(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)]


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Position(0, c) for c in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Position(1, c) for c in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Position(2, c) for c in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Position(3, c) for c in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Position(4, c) for c in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Position(5, c) for c in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Position(6, c) for c in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = (Position(7, c) for c in range(8))
