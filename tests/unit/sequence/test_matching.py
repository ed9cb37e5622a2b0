"""Unit tests for predicate-or-value matchers."""

from __future__ import annotations

from sequence.matching import Literal, Predicate, as_matcher


def test_callables_become_predicates() -> None:
    """A callable argument should be used as a predicate."""
    matcher = as_matcher(lambda word: word.startswith("s"))

    assert isinstance(matcher, Predicate)
    assert matcher.matches("sit") and not matcher.matches("amet")


def test_values_become_literals() -> None:
    """A plain value should be compared by equality."""
    matcher = as_matcher(5)

    assert matcher == Literal(value=5)
    assert matcher.matches(5.0) and not matcher.matches(6)


def test_explicit_matchers_pass_through() -> None:
    """Wrapping a callable in Literal searches for the callable itself."""
    literal = Literal(value=len)

    assert as_matcher(literal) is literal
    assert literal.matches(len) and not literal.matches("len")
