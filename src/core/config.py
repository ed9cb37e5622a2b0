"""Runtime configuration model for SpeedBag.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_GROWTH_FACTOR,
    DEFAULT_INITIAL_CAPACITY,
    DEFAULT_LOG_LEVEL,
    GROWTH_FACTOR_ENV,
    INITIAL_CAPACITY_ENV,
    LOG_LEVEL_ENV,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import SpeedBagConfigError


@dataclass(frozen=True)
class SpeedBagConfig:
    """Validated runtime configuration.

    Attributes:
        growth_factor: Multiplier applied to capacity on out-of-range writes.
        initial_capacity: Capacity of sequences built item by item.
        log_level: Minimum level emitted by structured loggers.
    """

    growth_factor: float
    initial_capacity: int
    log_level: str

    @classmethod
    def from_env(cls) -> "SpeedBagConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            SpeedBagConfigError: If environment values are invalid.
        """
        growth_factor = _parse_growth_factor(
            os.getenv(GROWTH_FACTOR_ENV, str(DEFAULT_GROWTH_FACTOR))
        )
        initial_capacity = _parse_initial_capacity(
            os.getenv(INITIAL_CAPACITY_ENV, str(DEFAULT_INITIAL_CAPACITY))
        )
        log_level = _parse_log_level(os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL))
        return cls(
            growth_factor=growth_factor,
            initial_capacity=initial_capacity,
            log_level=log_level,
        )


def _parse_growth_factor(raw_value: str) -> float:
    """Parse the growth factor environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed factor strictly greater than one.

    Raises:
        SpeedBagConfigError: If value is not numeric or does not grow capacity.
    """
    try:
        growth_factor = float(raw_value)
    except ValueError as error:
        raise SpeedBagConfigError(
            f"Invalid {GROWTH_FACTOR_ENV} value: "
            f"expected number, got '{raw_value}'. "
            f"Set {GROWTH_FACTOR_ENV} to a value such as 1.5."
        ) from error
    if growth_factor <= 1.0:
        raise SpeedBagConfigError(
            f"Invalid {GROWTH_FACTOR_ENV} value {growth_factor}: "
            "the factor must be greater than 1."
        )
    return growth_factor


def _parse_initial_capacity(raw_value: str) -> int:
    """Parse the initial capacity environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed non-negative capacity.

    Raises:
        SpeedBagConfigError: If value is not a non-negative integer.
    """
    try:
        initial_capacity = int(raw_value)
    except ValueError as error:
        raise SpeedBagConfigError(
            f"Invalid {INITIAL_CAPACITY_ENV} value: "
            f"expected integer, got '{raw_value}'. "
            f"Set {INITIAL_CAPACITY_ENV} to a numeric value."
        ) from error
    if initial_capacity < 0:
        raise SpeedBagConfigError(
            f"Invalid {INITIAL_CAPACITY_ENV} value {initial_capacity}: "
            "capacity cannot be negative."
        )
    return initial_capacity


def _parse_log_level(raw_value: str) -> str:
    """Parse and normalize the log level environment value."""
    log_level = raw_value.strip().lower()
    if log_level in SUPPORTED_LOG_LEVELS:
        return log_level
    supported_rows = ", ".join(SUPPORTED_LOG_LEVELS)
    raise SpeedBagConfigError(
        f"Invalid {LOG_LEVEL_ENV} value '{raw_value}'. Use one of: {supported_rows}."
    )
