"""Default element expansion for ``flatten``.

This module decides how one element of a sequence expands into the parts
that get concatenated into a flattened result.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

_SCALAR_ITERABLES = (str, bytes, bytearray, Mapping)


def default_flatten(element: Any) -> list[Any]:
    """Expand one element by a single level.

    Iterables such as lists, tuples and indexed sequences are unwrapped
    one level. Text, bytes and mappings are treated as scalars and, like
    every other scalar, wrapped as a single part.

    Args:
        element: Element to expand.

    Returns:
        Ordered parts contributed by the element.
    """
    if isinstance(element, Iterable) and not isinstance(element, _SCALAR_ITERABLES):
        return list(element)
    return [element]
