"""Forward iteration cursor for indexed sequences.

The cursor moves through ``not-started``, ``positioned`` and ``exhausted``
states. Reading the current element or key outside a valid position is a
programming error and raises instead of signalling the end of iteration.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from core.constants import INVALID_INDEX_MESSAGE
from core.errors import InvalidIndexError

if TYPE_CHECKING:
    from sequence.indexed_sequence import IndexedSequence


class CursorState(Enum):
    """Lifecycle states of a sequence cursor."""

    NOT_STARTED = "not-started"
    POSITIONED = "positioned"
    EXHAUSTED = "exhausted"


class SequenceCursor:
    """Stateful forward cursor over the populated slots of a sequence.

    The explicit ``rewind``/``valid``/``current``/``key``/``next`` methods
    drive the cursor by hand. The Python iterator protocol is layered on
    top and yields elements, rewinding on the first ``__next__`` call.
    """

    def __init__(self, sequence: "IndexedSequence") -> None:
        self._sequence = sequence
        self._position = 0
        self._state = CursorState.NOT_STARTED

    @property
    def state(self) -> CursorState:
        return self._state

    def rewind(self) -> None:
        """Move to the first slot."""
        self._position = 0
        self._state = CursorState.POSITIONED
        self._sync_state()

    def valid(self) -> bool:
        """Return whether the cursor points at a populated slot."""
        return self._state is CursorState.POSITIONED and self._position < len(self._sequence)

    def current(self) -> Any:
        """Return the element under the cursor.

        Raises:
            InvalidIndexError: If the cursor is not on a populated slot.
        """
        self._assert_valid()
        return self._sequence.get(self._position)

    def key(self) -> int:
        """Return the index under the cursor.

        Raises:
            InvalidIndexError: If the cursor is not on a populated slot.
        """
        self._assert_valid()
        return self._position

    def next(self) -> None:
        """Advance one slot."""
        if self._state is not CursorState.POSITIONED:
            return
        self._position += 1
        self._sync_state()

    def __iter__(self) -> "SequenceCursor":
        return self

    def __next__(self) -> Any:
        if self._state is CursorState.NOT_STARTED:
            self.rewind()
        else:
            self.next()
        if not self.valid():
            raise StopIteration
        return self.current()

    def _sync_state(self) -> None:
        if self._position >= len(self._sequence):
            self._state = CursorState.EXHAUSTED

    def _assert_valid(self) -> None:
        if not self.valid():
            raise InvalidIndexError(
                f"{INVALID_INDEX_MESSAGE} {self._position}: cursor is {self._state.value}."
            )
