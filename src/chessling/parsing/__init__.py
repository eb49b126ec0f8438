"""Tiny backward-reading parser combinator toolkit.

Quick start::

    from chessling.parsing import digit, literal, parse_all, sequence

    parser = sequence(digit, literal("x"))
    parse_all(parser, "x7")  # -> (7, "x")
"""

from chessling.parsing.combinators import (
    Parsed,
    Parser,
    alternative,
    constant,
    digit,
    end_of_input,
    fmap,
    keep_left,
    keep_right,
    literal,
    optional,
    parse_all,
    sequence,
    transform,
)
from chessling.parsing.cursor import Cursor

__all__ = [
    # Input / results
    "Cursor",
    "Parsed",
    "Parser",
    # Primitives
    "constant",
    "digit",
    "end_of_input",
    "literal",
    # Combinators
    "alternative",
    "fmap",
    "keep_left",
    "keep_right",
    "optional",
    "sequence",
    "transform",
    # Running
    "parse_all",
]
