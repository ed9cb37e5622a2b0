"""Public API surface for SpeedBag.

This module provides a stable import path for library users.
It re-exports the container, its address and matcher types, and errors.
"""

from __future__ import annotations

from core.config import SpeedBagConfig
from core.errors import (
    InvalidArgumentError,
    InvalidIndexError,
    InvalidSliceError,
    InvalidTakeError,
    SpeedBagConfigError,
    SpeedBagError,
)
from sequence.cursor import CursorState, SequenceCursor
from sequence.fixed_slots import FixedSlots
from sequence.indexed_sequence import IndexedSequence
from sequence.matching import Literal, Predicate
from sequence.slice_address import (
    IndexAddress,
    RangeAddress,
    TakeAddress,
    parse_slice_address,
)
from sequence.slice_window import SliceWindow, resolve_window

__all__ = [
    "CursorState",
    "FixedSlots",
    "IndexAddress",
    "IndexedSequence",
    "InvalidArgumentError",
    "InvalidIndexError",
    "InvalidSliceError",
    "InvalidTakeError",
    "Literal",
    "Predicate",
    "RangeAddress",
    "SequenceCursor",
    "SliceWindow",
    "SpeedBagConfig",
    "SpeedBagConfigError",
    "SpeedBagError",
    "TakeAddress",
    "parse_slice_address",
    "resolve_window",
]
