"""Core constants used across SpeedBag modules.

This module centralizes growth policy defaults, environment variable names,
and error messages. Keeping values here avoids magic literals in the container.
"""

from __future__ import annotations

DEFAULT_GROWTH_FACTOR = 1.5
DEFAULT_INITIAL_CAPACITY = 0
DEFAULT_LOG_LEVEL = "warning"
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error")

GROWTH_FACTOR_ENV = "SPEEDBAG_GROWTH_FACTOR"
INITIAL_CAPACITY_ENV = "SPEEDBAG_INITIAL_CAPACITY"
LOG_LEVEL_ENV = "SPEEDBAG_LOG_LEVEL"

RANGE_SEPARATOR = ":"
TAKE_SEPARATOR = ","

INVALID_INDEX_MESSAGE = "Invalid index"
UNKNOWN_INDEX_MESSAGE = "Unknown or invalid index"
INVALID_SLICE_MESSAGE = "Invalid slice range"
INVALID_TAKE_MESSAGE = "Invalid take notation"
NEGATIVE_SLICE_MESSAGE = (
    "This slice would have a negative length, refer to the documentation for usage."
)
SLICE_OFFSET_MESSAGE = "Slice offset out of range"
