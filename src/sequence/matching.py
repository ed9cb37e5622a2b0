"""Element matchers for search combinators.

``first``, ``last`` and ``contains`` accept either a predicate or a plain
value. This module makes that choice explicit: callables become
``Predicate`` matchers and everything else becomes a ``Literal`` matcher
compared with ``==``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Union


@dataclass(frozen=True)
class Predicate:
    """Matcher that calls a user function and tests its truthiness."""

    fn: Callable[[Any], Any]

    def matches(self, element: Any) -> bool:
        return bool(self.fn(element))


@dataclass(frozen=True)
class Literal:
    """Matcher that compares elements to a value by equality."""

    value: Any

    def matches(self, element: Any) -> bool:
        return bool(element == self.value)


Matcher = Union[Predicate, Literal]


def as_matcher(predicate_or_value: Any) -> Matcher:
    """Wrap a predicate or a value into a matcher.

    Matchers pass through unchanged, so a callable value can still be
    searched for by wrapping it in ``Literal`` explicitly.

    Args:
        predicate_or_value: Callable predicate, plain value, or matcher.

    Returns:
        Matcher for the argument.
    """
    if isinstance(predicate_or_value, (Predicate, Literal)):
        return predicate_or_value
    if callable(predicate_or_value):
        return Predicate(fn=predicate_or_value)
    return Literal(value=predicate_or_value)
