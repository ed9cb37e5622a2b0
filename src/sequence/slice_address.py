"""Slice-address token parsing.

This module turns the textual addressing scheme accepted by indexed
sequences into typed addresses. Supported tokens are a plain integer
(``"4"``), an inclusive range (``"1:3"``, ``":-6"``, ``"7:"``) and a take
(``"5,3"`` meaning three elements starting at offset five).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from core.constants import (
    INVALID_SLICE_MESSAGE,
    INVALID_TAKE_MESSAGE,
    RANGE_SEPARATOR,
    TAKE_SEPARATOR,
    UNKNOWN_INDEX_MESSAGE,
)
from core.errors import InvalidIndexError, InvalidSliceError, InvalidTakeError


@dataclass(frozen=True)
class IndexAddress:
    """Single slot address."""

    index: int


@dataclass(frozen=True)
class RangeAddress:
    """Range address; ``None`` bounds mean sequence start or end."""

    start: int | None
    end: int | None


@dataclass(frozen=True)
class TakeAddress:
    """Take address of ``length`` elements starting at ``offset``."""

    offset: int
    length: int


SliceAddress = Union[IndexAddress, RangeAddress, TakeAddress]


def parse_slice_address(token: str) -> SliceAddress:
    """Parse a slice-address token.

    Args:
        token: Raw token such as ``"2"``, ``"-3:8"`` or ``"5,3"``.

    Returns:
        Typed address for the token.

    Raises:
        InvalidSliceError: For range tokens with non-integer bounds.
        InvalidTakeError: For take tokens without two positive integers.
        InvalidIndexError: For any other token that is not an integer.
    """
    if RANGE_SEPARATOR in token:
        return _parse_range(token)
    if TAKE_SEPARATOR in token:
        return _parse_take(token)
    index = parse_int(token)
    if index is None:
        raise InvalidIndexError(f"{UNKNOWN_INDEX_MESSAGE} '{token}'")
    return IndexAddress(index=index)


def parse_int(text: str) -> int | None:
    """Parse canonical integer text.

    The text only counts as an integer when converting it and back
    reproduces it exactly, so ``" 1"``, ``"+1"`` and ``"01"`` are rejected.

    Args:
        text: Candidate integer text.

    Returns:
        Parsed integer, or None when the text is not canonical.
    """
    try:
        value = int(text)
    except ValueError:
        return None
    return value if str(value) == text else None


def _parse_range(token: str) -> RangeAddress:
    parts = token.split(RANGE_SEPARATOR)
    if len(parts) != 2:
        _raise_slice_error(token)
    raw_start, raw_end = parts
    start = _parse_range_bound(raw_start, token)
    end = _parse_range_bound(raw_end, token)
    return RangeAddress(start=start, end=end)


def _parse_range_bound(raw_bound: str, token: str) -> int | None:
    if raw_bound == "":
        return None
    bound = parse_int(raw_bound)
    if bound is None:
        _raise_slice_error(token)
    return bound


def _parse_take(token: str) -> TakeAddress:
    parts = token.split(TAKE_SEPARATOR)
    if len(parts) != 2:
        _raise_take_error(token)
    offset = parse_int(parts[0])
    length = parse_int(parts[1])
    if offset is None or length is None or offset <= 0 or length <= 0:
        _raise_take_error(token)
    return TakeAddress(offset=offset, length=length)


def _raise_slice_error(token: str) -> None:
    """Raise the invalid range error for ``token``.

    Raises:
        InvalidSliceError: Always.
    """
    raise InvalidSliceError(
        f"{INVALID_SLICE_MESSAGE} '{token}': expected start:end with integer bounds."
    )


def _raise_take_error(token: str) -> None:
    """Raise the invalid take error for ``token``.

    Raises:
        InvalidTakeError: Always.
    """
    raise InvalidTakeError(
        f"{INVALID_TAKE_MESSAGE} '{token}': expected offset,length with positive integers."
    )
