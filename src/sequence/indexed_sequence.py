"""Growable fixed-slot sequence.

This module implements ``IndexedSequence``: a container over fixed-capacity
slot storage with a logical size cursor, automatic growth on out-of-range
writes, slice-address indexing, and functional transformation combinators.
Every derived result is an independent sequence with copied references.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Iterator

from core.constants import DEFAULT_GROWTH_FACTOR, INVALID_INDEX_MESSAGE
from core.errors import InvalidArgumentError, InvalidIndexError
from core.logging_config import get_logger
from sequence.cursor import SequenceCursor
from sequence.fixed_slots import FixedSlots
from sequence.flattening import default_flatten
from sequence.matching import as_matcher
from sequence.slice_address import (
    IndexAddress,
    RangeAddress,
    SliceAddress,
    parse_slice_address,
)
from sequence.slice_window import SliceWindow, resolve_range, resolve_take, resolve_window

_LOGGER = get_logger(__name__)

_NO_MATCH = object()


class IndexedSequence:
    """Ordered container with separate capacity and logical size.

    Construct it from a capacity (``IndexedSequence(10)``), a list or
    tuple of values, or an existing ``FixedSlots`` array, which is adopted
    without copying. Values are copied into fresh slots for lists and
    tuples; the logical size is one past the last slot that is not None.

    Indexing accepts integers and slice-address strings::

        words = IndexedSequence(["foo", "bar", "baz"])
        words[0]        # "foo"
        words["1:2"]    # IndexedSequence(["bar", "baz"])
        words["1,1"]    # IndexedSequence(["bar"])
    """

    def __init__(
        self,
        source: int | list[Any] | tuple[Any, ...] | FixedSlots,
        *,
        growth_factor: float = DEFAULT_GROWTH_FACTOR,
    ) -> None:
        """Create a sequence.

        Args:
            source: Capacity, literal values, or backing slots to adopt.
            growth_factor: Capacity multiplier used on out-of-range writes.

        Raises:
            InvalidArgumentError: If ``source`` is not a supported form.
        """
        if growth_factor <= 1:
            raise InvalidArgumentError(
                f"Growth factor must be greater than 1, got {growth_factor}."
            )
        self._slots = _build_slots(source)
        self._size = self._slots.last_set_index()
        self._growth_factor = growth_factor

    @property
    def capacity(self) -> int:
        """Number of allocated slots, populated or not."""
        return self._slots.capacity

    @property
    def growth_factor(self) -> float:
        return self._growth_factor

    def get(self, index: int) -> Any:
        """Return the slot at ``index``.

        Raises:
            InvalidIndexError: If ``index`` is not an integer inside the capacity.
        """
        return self._slots[_checked_index(index)]

    def set(self, index: int, value: Any) -> None:
        """Write ``value`` at ``index``, growing capacity when needed.

        Args:
            index: Non-negative slot position; may lie past the capacity.
            value: Element to store.

        Raises:
            InvalidIndexError: If ``index`` is negative or not an integer.
        """
        index = _checked_index(index)
        if index < 0:
            raise InvalidIndexError(f"{INVALID_INDEX_MESSAGE} {index}")
        self._ensure_capacity(index)
        self._slots[index] = value
        self._size = max(self._size, index + 1)

    def remove(self, index: int) -> None:
        """Clear the slot at ``index`` without changing the size."""
        del self._slots[_checked_index(index)]

    def has(self, key: int | str) -> bool:
        """Return whether ``key`` addresses populated data.

        Plain indices must lie inside the capacity and report whether the
        slot is populated. Range and take tokens report whether the
        resolved slice is non-empty.

        Raises:
            InvalidIndexError: For out-of-capacity or unparseable indices.
            InvalidSliceError: For malformed range tokens.
            InvalidTakeError: For malformed take tokens.
            InvalidArgumentError: For windows with a negative length.
        """
        address = _address_for(key)
        if isinstance(address, IndexAddress):
            self._slots.assert_boundaries(address.index)
            return address.index < self._size
        return self._window_for(address).length > 0

    def append(self, value: Any) -> None:
        """Write ``value`` in the first unpopulated slot."""
        self.set(self._size, value)

    def push(self, value: Any) -> None:
        """Alias of ``append``."""
        self.append(value)

    def pop(self) -> Any:
        """Remove and return the last populated element, or None if empty."""
        if self._size == 0:
            return None
        self._size -= 1
        value = self._slots[self._size]
        del self._slots[self._size]
        return value

    def prepend(self, value: Any) -> None:
        """Shift populated elements right by one and write ``value`` first."""
        self._ensure_capacity(self._size)
        for index in range(self._size - 1, -1, -1):
            self._slots[index + 1] = self._slots[index]
        self._slots[0] = value
        self._size += 1

    def slice(self, offset: int, length: int | None = None) -> "IndexedSequence":
        """Copy a window of populated elements into a new sequence.

        Args:
            offset: Start position; negative values count from the end.
            length: Element count; None runs to the end and negative
                values stop that many elements before the end.

        Returns:
            New sequence sized to the window.

        Raises:
            InvalidArgumentError: If the window would have a negative length.
        """
        return self._copy_window(resolve_window(self._size, offset, length))

    def map(self, fn: Callable[[Any], Any]) -> "IndexedSequence":
        """Return a new sequence of ``fn`` applied to each populated element."""
        return self._derive([fn(element) for element in self])

    def each(self, fn: Callable[[Any], Any]) -> "IndexedSequence":
        """Call ``fn`` on each populated element and return this sequence."""
        for element in self:
            fn(element)
        return self

    def reduce(self, fn: Callable[[Any, Any], Any], carry: Any) -> Any:
        """Fold populated elements from the left, starting with ``carry``."""
        for element in self:
            carry = fn(carry, element)
        return carry

    def filter(self, fn: Callable[[Any], Any] | None = None) -> "IndexedSequence":
        """Return a compact sequence of the elements ``fn`` accepts.

        Args:
            fn: Predicate; defaults to element truthiness.

        Returns:
            New sequence whose capacity equals the retained count.
        """
        predicate = fn or bool
        return self._derive([element for element in self if predicate(element)])

    def flatten(
        self, flatten_with: Callable[[Any], Any] | None = None
    ) -> "IndexedSequence":
        """Expand each element into parts and concatenate them.

        Args:
            flatten_with: Function returning the parts of one element;
                defaults to unwrapping one level of nesting.

        Returns:
            New sequence sized to the total number of parts.
        """
        expand = flatten_with or default_flatten
        parts = self.map(lambda element: list(expand(element)))
        total = parts.reduce(lambda count, part: count + len(part), 0)
        flattened = self._derive_empty(total)
        position = 0
        for part in parts:
            for element in part:
                flattened.set(position, element)
                position += 1
        return flattened

    def contains(self, predicate_or_value: Any) -> bool:
        """Return whether any populated element matches."""
        return self._find(predicate_or_value, reversed_order=False) is not _NO_MATCH

    def first(self, predicate_or_value: Any = None) -> Any:
        """Return the first element, or the first matching element.

        Args:
            predicate_or_value: Optional predicate or value to match.

        Returns:
            Matching element, or None when nothing matches.

        Raises:
            InvalidIndexError: If called without a matcher on an empty sequence.
        """
        if predicate_or_value is None:
            return self._boundary_element(0)
        found = self._find(predicate_or_value, reversed_order=False)
        return None if found is _NO_MATCH else found

    def last(self, predicate_or_value: Any = None) -> Any:
        """Return the last element, or the last matching element.

        Raises:
            InvalidIndexError: If called without a matcher on an empty sequence.
        """
        if predicate_or_value is None:
            return self._boundary_element(self._size - 1)
        found = self._find(predicate_or_value, reversed_order=True)
        return None if found is _NO_MATCH else found

    def reverse(self) -> "IndexedSequence":
        """Return a new sequence with populated elements in reverse order."""
        return self._derive(self.to_list()[::-1])

    def group_by(self, key_fn: Callable[[Any], Any]) -> "IndexedSequence":
        """Partition elements by ``key_fn`` in first-seen key order.

        Keys are compared with ``==`` against each group's key, so they
        do not need to be hashable.

        Returns:
            Sequence of sub-sequences, one per distinct key.
        """
        keys: list[Any] = []
        groups: list[IndexedSequence] = []
        for element in self:
            key = key_fn(element)
            for position, group_key in enumerate(keys):
                if group_key == key:
                    groups[position].append(element)
                    break
            else:
                keys.append(key)
                group = self._derive_empty(1)
                group.append(element)
                groups.append(group)
        return self._derive(groups)

    def to_list(self) -> list[Any]:
        """Copy the populated slots into a list."""
        return [self._slots[index] for index in range(self._size)]

    def cursor(self) -> SequenceCursor:
        """Return a new, not yet started cursor."""
        return SequenceCursor(self)

    def items(self) -> Iterator[tuple[int, Any]]:
        """Yield ``(index, element)`` pairs for populated slots."""
        cursor = self.cursor()
        cursor.rewind()
        while cursor.valid():
            yield cursor.key(), cursor.current()
            cursor.next()

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> SequenceCursor:
        return self.cursor()

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    def __getitem__(self, key: int | str) -> Any:
        address = _address_for(key)
        if isinstance(address, IndexAddress):
            return self.get(address.index)
        return self._copy_window(self._window_for(address))

    def __setitem__(self, key: int | str, value: Any) -> None:
        self.set(_single_index(key), value)

    def __delitem__(self, key: int | str) -> None:
        self.remove(_single_index(key))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IndexedSequence):
            return NotImplemented
        return self.to_list() == other.to_list()

    def __repr__(self) -> str:
        return f"IndexedSequence({self.to_list()!r}, capacity={self.capacity})"

    def _ensure_capacity(self, index: int) -> None:
        """Grow capacity until ``index`` addresses an allocated slot."""
        capacity = self._slots.capacity
        if index < capacity:
            return
        new_capacity = capacity
        while index >= new_capacity:
            new_capacity = math.floor(self._growth_factor * new_capacity) + 1
        self._slots.resize(new_capacity)
        _LOGGER.debug(
            "sequence_grown",
            old_capacity=capacity,
            new_capacity=new_capacity,
            size=self._size,
        )

    def _window_for(self, address: SliceAddress) -> SliceWindow:
        if isinstance(address, RangeAddress):
            return resolve_range(self._size, address)
        return resolve_take(self._size, address)

    def _copy_window(self, window: SliceWindow) -> "IndexedSequence":
        return self._derive(
            [self._slots[index] for index in range(window.offset, window.stop)]
        )

    def _find(self, predicate_or_value: Any, reversed_order: bool) -> Any:
        matcher = as_matcher(predicate_or_value)
        positions = range(self._size)
        if reversed_order:
            positions = range(self._size - 1, -1, -1)
        for index in positions:
            element = self._slots[index]
            if matcher.matches(element):
                return element
        return _NO_MATCH

    def _boundary_element(self, index: int) -> Any:
        if self._size == 0:
            raise InvalidIndexError(
                f"{INVALID_INDEX_MESSAGE} {index}: the sequence is empty."
            )
        return self._slots[index]

    def _derive(self, values: list[Any]) -> "IndexedSequence":
        """Build a sibling sequence whose size is exactly ``len(values)``."""
        derived = self._derive_empty(len(values))
        for index, value in enumerate(values):
            derived._slots[index] = value
        derived._size = len(values)
        return derived

    def _derive_empty(self, capacity: int) -> "IndexedSequence":
        return IndexedSequence(capacity, growth_factor=self._growth_factor)


def _build_slots(source: Any) -> FixedSlots:
    """Turn a constructor argument into backing slots.

    Args:
        source: Capacity, list or tuple of values, or slots to adopt.

    Returns:
        Backing slots for a new sequence.

    Raises:
        InvalidArgumentError: For unsupported argument types.
    """
    if isinstance(source, FixedSlots):
        return source
    if isinstance(source, (list, tuple)):
        return FixedSlots.from_values(source)
    if isinstance(source, int) and not isinstance(source, bool):
        return FixedSlots(source)
    raise InvalidArgumentError(
        "Invalid argument supplied to IndexedSequence(): "
        f"expected int, list, tuple or FixedSlots, got {type(source).__name__}."
    )


def _address_for(key: Any) -> SliceAddress:
    """Normalize an integer or token key into a slice address.

    Raises:
        InvalidIndexError: For keys that are neither integers nor strings.
    """
    if isinstance(key, bool):
        raise InvalidIndexError(f"{INVALID_INDEX_MESSAGE} {key!r}")
    if isinstance(key, int):
        return IndexAddress(index=key)
    if isinstance(key, str):
        return parse_slice_address(key)
    raise InvalidIndexError(f"{INVALID_INDEX_MESSAGE} {key!r}")


def _single_index(key: Any) -> int:
    """Resolve a key that must address exactly one slot.

    Raises:
        InvalidIndexError: For range and take tokens, and for invalid keys.
    """
    address = _address_for(key)
    if not isinstance(address, IndexAddress):
        raise InvalidIndexError(
            f"{INVALID_INDEX_MESSAGE} {key!r}: only single slots can be written or removed."
        )
    return address.index


def _checked_index(index: Any) -> int:
    """Reject slot positions that are not plain integers.

    Raises:
        InvalidIndexError: For bools, floats, strings and other non-integers.
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidIndexError(f"{INVALID_INDEX_MESSAGE} {index!r}")
    return index
