"""Cursor over a string that is consumed from its right-hand end."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable read position into *text*.

    Everything before ``end`` is still unread; parsers look at the tail of
    that slice and hand back a new cursor with ``end`` moved to the left.
    """

    text: str
    end: int

    @classmethod
    def at_end(cls, text: str) -> Cursor:
        """Cursor positioned after the last character of *text*."""
        return cls(text, len(text))

    @property
    def remaining(self) -> str:
        """The unread part of the input."""
        return self.text[: self.end]

    @property
    def exhausted(self) -> bool:
        return self.end == 0

    def endswith(self, token: str) -> bool:
        """Whether the unread input ends with *token*."""
        return self.remaining.endswith(token)

    def last(self) -> str | None:
        """The character just before the cursor, or ``None`` if exhausted."""
        if self.exhausted:
            return None
        return self.text[self.end - 1]

    def consume(self, count: int) -> Cursor:
        """Step back over *count* characters."""
        if not (0 <= count <= self.end):
            raise ValueError(f"Cannot consume {count} characters from {self!r}")
        return Cursor(self.text, self.end - count)
