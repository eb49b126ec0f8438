"""Backward parser combinators.

A parser is a plain callable taking a :class:`Cursor` and returning either a
:class:`Parsed` result (value plus the cursor left after consuming input) or
``None`` on failure.  Failure never consumes input: combinators that give up
hand back nothing, so the caller still holds its original cursor.

Parsers read right-to-left.  In ``sequence(first, second)`` *first* matches
the end of the input and *second* matches what precedes it, which lets
trailing, fixed-shape tokens (a destination square, say) anchor the parse.

Two kinds of chaining exist:

* :func:`transform` post-processes a successful value with a function that
  may reject it.  It never consumes more input.
* :func:`sequence` / :func:`keep_left` / :func:`keep_right` run a second
  parser on the remaining input.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from chessling.parsing.cursor import Cursor

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Parsed(Generic[T]):
    """Successful parse: the value and the cursor after it was consumed."""

    value: T
    rest: Cursor


Parser = Callable[[Cursor], Optional[Parsed[T]]]


# ── Primitives ───────────────────────────────────────────────────────────────


def literal(token: str) -> Parser[str]:
    """Match *token* exactly (case-sensitive) at the end of the input.

    The empty token always matches without consuming anything.
    """

    def parser(cursor: Cursor) -> Parsed[str] | None:
        if not cursor.endswith(token):
            return None
        return Parsed(token, cursor.consume(len(token)))

    return parser


def digit(cursor: Cursor) -> Parsed[int] | None:
    """Match a single ASCII digit and yield its integer value."""
    char = cursor.last()
    if char is None or char not in "0123456789":
        return None
    return Parsed(int(char), cursor.consume(1))


def end_of_input(cursor: Cursor) -> Parsed[None] | None:
    """Succeed only when nothing is left to read."""
    if not cursor.exhausted:
        return None
    return Parsed(None, cursor)


def constant(token: str, value: U) -> Parser[U]:
    """Match *token* and yield *value* instead of the matched text."""
    return fmap(lambda _: value, literal(token))


# ── Combinators ──────────────────────────────────────────────────────────────


def fmap(func: Callable[[T], U], parser: Parser[T]) -> Parser[U]:
    """Apply *func* to the value of a successful parse."""

    def mapped(cursor: Cursor) -> Parsed[U] | None:
        result = parser(cursor)
        if result is None:
            return None
        return Parsed(func(result.value), result.rest)

    return mapped


def transform(func: Callable[[T], U | None], parser: Parser[T]) -> Parser[U]:
    """Refine a successful value; *func* returning ``None`` fails the parse.

    This does not sequence a second parser: no further input is read.
    """

    def transformed(cursor: Cursor) -> Parsed[U] | None:
        result = parser(cursor)
        if result is None:
            return None
        value = func(result.value)
        if value is None:
            return None
        return Parsed(value, result.rest)

    return transformed


def optional(parser: Parser[T]) -> Parser[T | None]:
    """Always succeed, yielding ``None`` when *parser* does not match."""

    def maybe(cursor: Cursor) -> Parsed[T | None]:
        result = parser(cursor)
        if result is None:
            return Parsed(None, cursor)
        return Parsed(result.value, result.rest)

    return maybe


def sequence(first: Parser[T], second: Parser[U]) -> Parser[tuple[T, U]]:
    """Run *first* on the end of the input, then *second* on what precedes it."""

    def both(cursor: Cursor) -> Parsed[tuple[T, U]] | None:
        head = first(cursor)
        if head is None:
            return None
        tail = second(head.rest)
        if tail is None:
            return None
        return Parsed((head.value, tail.value), tail.rest)

    return both


def keep_left(first: Parser[T], second: Parser[U]) -> Parser[T]:
    """:func:`sequence`, keeping only the value of *first*."""
    return fmap(lambda pair: pair[0], sequence(first, second))


def keep_right(first: Parser[T], second: Parser[U]) -> Parser[U]:
    """:func:`sequence`, keeping only the value of *second*."""
    return fmap(lambda pair: pair[1], sequence(first, second))


def alternative(*parsers: Parser[T]) -> Parser[T]:
    """Try each parser in order against the same input; first success wins."""
    if not parsers:
        raise ValueError("alternative() needs at least one parser")

    def choice(cursor: Cursor) -> Parsed[T] | None:
        for parser in parsers:
            result = parser(cursor)
            if result is not None:
                return result
        return None

    return choice


# ── Running ──────────────────────────────────────────────────────────────────


def parse_all(parser: Parser[T], text: str) -> T | None:
    """Run *parser* over the whole of *text*; leftovers count as failure."""
    result = keep_left(parser, end_of_input)(Cursor.at_end(text))
    if result is None:
        return None
    return result.value
