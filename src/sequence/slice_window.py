"""Slice window resolution.

This module converts offsets, optional lengths, and parsed range or take
addresses into a concrete ``(offset, length)`` window over a sequence
of known logical size.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.constants import NEGATIVE_SLICE_MESSAGE, SLICE_OFFSET_MESSAGE
from core.errors import InvalidArgumentError
from sequence.slice_address import RangeAddress, TakeAddress


@dataclass(frozen=True)
class SliceWindow:
    """Resolved slice window, both fields non-negative."""

    offset: int
    length: int

    @property
    def stop(self) -> int:
        """Index one past the last element of the window."""
        return self.offset + self.length


def resolve_window(size: int, offset: int, length: int | None = None) -> SliceWindow:
    """Resolve a slice request against a sequence size.

    A negative offset counts back from the end. An omitted length runs to
    the end, and a negative length stops that many elements before the end.
    The length is then clamped to the elements available after the offset.

    Args:
        size: Logical size of the sequence being sliced.
        offset: Requested start position.
        length: Requested element count, or None for "to the end".

    Returns:
        Window with a non-negative offset and length.

    Raises:
        InvalidArgumentError: If the window has a negative length or
            the offset still lies before the sequence start.
    """
    if offset < 0:
        offset = size + offset
    if length is None:
        length = size - offset
    if length < 0:
        length = size - offset + length
    length = min(length, size - offset)
    if length < 0:
        raise InvalidArgumentError(NEGATIVE_SLICE_MESSAGE)
    if offset < 0:
        raise InvalidArgumentError(
            f"{SLICE_OFFSET_MESSAGE}: offset {offset - size} reaches before the start "
            f"of a sequence of size {size}."
        )
    return SliceWindow(offset=offset, length=length)


def resolve_range(size: int, address: RangeAddress) -> SliceWindow:
    """Resolve an inclusive ``start:end`` range.

    Non-negative ends are inclusive positions. Negative ends keep the
    "elements before the end" meaning of a negative slice length.

    Args:
        size: Logical size of the sequence being sliced.
        address: Parsed range address.

    Returns:
        Resolved window.

    Raises:
        InvalidArgumentError: If the end lies before the start.
    """
    offset = 0 if address.start is None else address.start
    if address.end is None or address.end < 0:
        return resolve_window(size, offset, address.end)
    start = offset if offset >= 0 else size + offset
    length = address.end - start + 1
    if length < 0:
        raise InvalidArgumentError(NEGATIVE_SLICE_MESSAGE)
    return resolve_window(size, offset, length)


def resolve_take(size: int, address: TakeAddress) -> SliceWindow:
    """Resolve an ``offset,length`` take."""
    return resolve_window(size, address.offset, address.length)
