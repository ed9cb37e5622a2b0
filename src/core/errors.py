"""SpeedBag exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each failure kind of the container raises a specific error type so callers
can tell malformed addresses apart from out-of-range ones.
"""

from __future__ import annotations


class SpeedBagError(Exception):
    """Base exception for all SpeedBag failures."""


class SpeedBagConfigError(SpeedBagError):
    """Raised for invalid runtime configuration."""


class InvalidIndexError(SpeedBagError, IndexError):
    """Raised for out-of-range, negative, or unparseable plain indices."""


class InvalidSliceError(SpeedBagError, ValueError):
    """Raised for malformed ``start:end`` range tokens."""


class InvalidTakeError(SpeedBagError, ValueError):
    """Raised for malformed ``offset,length`` take tokens."""


class InvalidArgumentError(SpeedBagError, ValueError):
    """Raised for negative-length slices and unsupported constructor input."""
