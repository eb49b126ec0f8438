"""Game transcripts: notation for a whole history, and replaying one."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import replace

from chessling.core.notation.algebraic import from_algebraic, to_algebraic
from chessling.core.state import GameState
from chessling.core.transitions import apply_move, revert_last

_LOGGER = logging.getLogger(__name__)


class Transcript:
    """Algebraic notation of every move in a state's history, oldest first.

    Iterating is lazy and can be repeated.  Records that cannot be rendered
    are skipped, so the transcript may be shorter than the history.
    """

    __slots__ = ("_state",)

    def __init__(self, state: GameState) -> None:
        self._state = state

    def __iter__(self) -> Iterator[str]:
        # Walk back once to recover the state each record produced.
        produced: list[GameState] = []
        state = self._state
        while state.history:
            produced.append(state)
            state = _step_back(state)

        for after in reversed(produced):
            record = after.history[0]
            san = to_algebraic(record, after)
            if san is None:
                _LOGGER.debug(
                    "Dropping unrenderable move %s at ply %d", record.move, after.ply_count
                )
                continue
            yield san

    def __repr__(self) -> str:
        return f"Transcript({list(self)!r})"


def _step_back(state: GameState) -> GameState:
    """Previous state, or the head dropped from history when it cannot be reverted."""
    try:
        return revert_last(state)
    except ValueError as exc:
        _LOGGER.debug("Cannot revert %s (%s); keeping the board", state.last_record, exc)
        return replace(state, history=state.history[1:], to_move=state.to_move.opposite)


def create_transcript(state: GameState) -> Transcript:
    """Transcript of *state*'s history in the order the moves were played."""
    return Transcript(state)


class ReplayError(ValueError):
    """A notation string could not be resolved or applied during replay."""

    def __init__(self, index: int, notation: str) -> None:
        super().__init__(f"Cannot replay move {index}: {notation!r}")
        self.index = index
        self.notation = notation


def replay(notations: Iterable[str], state: GameState | None = None) -> GameState:
    """Apply *notations* in order, starting from *state* (default: initial).

    Stops at the first string that does not resolve to a legal move and raises
    :class:`ReplayError` naming its index.
    """
    current = state if state is not None else GameState.initial()
    for index, notation in enumerate(notations):
        move = from_algebraic(notation, current)
        next_state = apply_move(move, current) if move is not None else None
        if next_state is None:
            _LOGGER.warning("Replay halted at move %d (%r)", index, notation)
            raise ReplayError(index, notation)
        current = next_state
    return current
