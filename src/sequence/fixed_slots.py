"""Fixed-capacity backing storage.

This module provides the slot array that backs every indexed sequence.
Slots start unset (``None``) and the array only changes length through
an explicit resize, which keeps existing slots at their positions.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from core.constants import INVALID_INDEX_MESSAGE
from core.errors import InvalidArgumentError, InvalidIndexError


class FixedSlots:
    """Contiguous array of a fixed number of nullable slots."""

    __slots__ = ("_slots",)

    def __init__(self, capacity: int = 0) -> None:
        """Allocate unset slots.

        Args:
            capacity: Number of slots to allocate.

        Raises:
            InvalidArgumentError: If capacity is negative or not an integer.
        """
        self._slots: list[Any] = [None] * _checked_capacity(capacity)

    @classmethod
    def from_values(cls, values: Iterable[Any]) -> "FixedSlots":
        """Build slots holding ``values`` in order, one slot per value."""
        slots = cls()
        slots._slots = list(values)
        return slots

    @property
    def capacity(self) -> int:
        """Number of allocated slots."""
        return len(self._slots)

    def resize(self, capacity: int) -> None:
        """Change the slot count in place.

        Growing appends unset slots; shrinking drops trailing slots.

        Args:
            capacity: New slot count.
        """
        capacity = _checked_capacity(capacity)
        current = len(self._slots)
        if capacity > current:
            self._slots.extend([None] * (capacity - current))
        else:
            del self._slots[capacity:]

    def last_set_index(self) -> int:
        """Return one past the last slot that is not ``None``, or 0."""
        for index in range(len(self._slots) - 1, -1, -1):
            if self._slots[index] is not None:
                return index + 1
        return 0

    def to_list(self) -> list[Any]:
        """Copy every slot, set or not, into a list."""
        return list(self._slots)

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots)

    def __getitem__(self, index: int) -> Any:
        self.assert_boundaries(index)
        return self._slots[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self.assert_boundaries(index)
        self._slots[index] = value

    def __delitem__(self, index: int) -> None:
        self.assert_boundaries(index)
        self._slots[index] = None

    def __repr__(self) -> str:
        return f"FixedSlots({self._slots!r})"

    def assert_boundaries(self, index: int) -> None:
        """Raise unless ``index`` addresses an allocated slot.

        Raises:
            InvalidIndexError: For negative or out-of-capacity indices.
        """
        if index < 0 or index >= len(self._slots):
            raise InvalidIndexError(f"{INVALID_INDEX_MESSAGE} {index}")


def _checked_capacity(capacity: int) -> int:
    """Validate a requested slot count.

    Args:
        capacity: Requested slot count.

    Returns:
        The same count when valid.

    Raises:
        InvalidArgumentError: For booleans, non-integers, and negative counts.
    """
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise InvalidArgumentError(
            f"Slot capacity must be an integer, got {type(capacity).__name__}."
        )
    if capacity < 0:
        raise InvalidArgumentError(f"Slot capacity cannot be negative, got {capacity}.")
    return capacity
