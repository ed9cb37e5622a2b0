"""Unit tests for indexed sequence transformation and search combinators."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from core.errors import InvalidIndexError
from sequence.indexed_sequence import IndexedSequence
from sequence.matching import Literal

PHRASES = [
    "Lorem ipsum dolor",
    "sit amet consectetur",
    "adipiscing elit sed",
    "do",
]
NESTED = [[1, 2, 3], [4, 5, 6], [7, 8, 9], [10]]


def test_each_visits_every_element() -> None:
    """Each should hand every element to the callback and return the sequence."""
    sequence = IndexedSequence([SimpleNamespace(value=True) for _ in range(3)])

    def negate(element: SimpleNamespace) -> None:
        element.value = not element.value

    returned = sequence.each(negate)

    assert returned is sequence
    assert [element.value for element in sequence] == [False, False, False]


def test_map_returns_new_sequence_of_mapped_elements() -> None:
    """Map leaves the source untouched and sizes the result to it."""
    sequence = IndexedSequence(["foo", "bar", "baz", None])

    mapped = sequence.map(str.upper)

    assert mapped is not sequence
    assert sequence.to_list() == ["foo", "bar", "baz"]
    assert mapped.to_list() == ["FOO", "BAR", "BAZ"] and mapped.capacity == 3


def test_map_skips_unpopulated_slots() -> None:
    """Allocated slots past the size are never passed to the callback."""
    sequence = IndexedSequence(5)
    sequence.append(1)
    calls: list[int] = []

    sequence.map(calls.append)

    assert calls == [1]


def test_reduce_folds_from_the_left() -> None:
    """Reduce should carry the accumulator through the elements in order."""
    sequence = IndexedSequence([1, 2, 3])

    assert sequence.reduce(lambda total, value: total + value, 0) == 6
    assert sequence.reduce(lambda text, value: f"{text}{value}", ">") == ">123"


def test_filter_keeps_matching_elements() -> None:
    """Filter should compact the retained elements in order."""
    sequence = IndexedSequence(list(range(10)))

    odds = sequence.filter(lambda value: value % 2)

    assert odds is not sequence
    assert odds.to_list() == [1, 3, 5, 7, 9] and odds.capacity == 5


def test_filter_drops_falsy_elements_by_default() -> None:
    """Without a predicate every falsy element is removed."""
    sequence = IndexedSequence([False, 0, 0.0, "", [], "0", "kept", None])

    filtered = sequence.filter()

    assert filtered.to_list() == ["0", "kept"]


def test_filter_may_retain_none_values() -> None:
    """A retained None still counts towards the result size."""
    sequence = IndexedSequence(["a", None, "b"])

    kept = sequence.filter(lambda value: value != "b")

    assert len(kept) == 2 and kept.to_list() == ["a", None]


def test_flatten_two_dimensional_lists_by_default() -> None:
    """The default flatten should concatenate nested lists."""
    flattened = IndexedSequence(NESTED).flatten()

    assert len(flattened) == 10 and flattened.to_list() == list(range(1, 11))


def test_flatten_with_custom_function_can_keep_nesting() -> None:
    """Wrapping each element keeps the original structure."""
    flattened = IndexedSequence(NESTED).flatten(lambda element: [element])

    assert len(flattened) == 4 and flattened.to_list() == NESTED


def test_flatten_with_recursive_function() -> None:
    """A recursive expansion flattens deeply nested input."""

    def walk(element: object) -> list[object]:
        if isinstance(element, list):
            return [leaf for child in element for leaf in walk(child)]
        return [element]

    deep = [[[1, 2], [3, 4]], [[5, 6], [7, 8]], [[9, 10]]]

    flattened = IndexedSequence(deep).flatten(walk)

    assert flattened.to_list() == list(range(1, 11)) and flattened.capacity == 10


def test_flatten_wraps_scalars_and_unwraps_sequences() -> None:
    """Mixed input flattens one level and keeps text whole."""
    mixed = IndexedSequence(["ab", IndexedSequence([1, 2]), (3,), 4])

    assert mixed.flatten().to_list() == ["ab", 1, 2, 3, 4]


def test_contains_scalar_values() -> None:
    """Contains should compare plain values by equality."""
    sequence = IndexedSequence(list(range(1, 11)))

    assert sequence.contains(1) and sequence.contains(5) and sequence.contains(10)
    assert not sequence.contains(42)
    assert 5 in sequence and 42 not in sequence


def test_contains_finds_falsy_values() -> None:
    """Presence is reported even when the matching element is falsy."""
    sequence = IndexedSequence([0, False, 3])

    assert sequence.contains(0) and sequence.contains(False)


def test_contains_with_predicate() -> None:
    """Callables should be treated as predicates."""
    sequence = IndexedSequence(PHRASES)

    def has_word(word: str):
        return lambda element: word in element

    assert sequence.contains(has_word("elit"))
    assert not sequence.contains(has_word("foo"))


def test_contains_callable_value_with_explicit_literal() -> None:
    """Wrapping a callable in Literal searches for the callable itself."""
    sequence = IndexedSequence([len, str])

    assert sequence.contains(Literal(str)) and not sequence.contains(Literal(repr))


def test_first_without_argument_returns_first_element() -> None:
    """First with no matcher reads index zero."""
    assert IndexedSequence([1, 2, 3, 4, 5]).first() == 1


def test_first_with_scalar_and_predicate() -> None:
    """First returns the earliest match or None."""
    numbers = IndexedSequence([1, 2, 3, 4, 5])
    phrases = IndexedSequence(PHRASES)

    assert numbers.first(5) == 5
    assert numbers.first(42) is None
    assert phrases.first(lambda phrase: "sit amet" in phrase) == "sit amet consectetur"
    assert phrases.first(lambda phrase: "foo bar baz" in phrase) is None


def test_last_without_argument_returns_last_element() -> None:
    """Last with no matcher reads the last populated index."""
    assert IndexedSequence([1, 2, 3, 4, 5, None]).last() == 5


def test_last_with_scalar_and_predicate() -> None:
    """Last returns the latest match or None."""
    numbers = IndexedSequence([1, 2, 3, 4, 5])
    phrases = IndexedSequence(PHRASES)

    assert numbers.last(1) == 1
    assert numbers.last(42) is None
    assert phrases.last(lambda phrase: "s" in phrase) == "adipiscing elit sed"
    assert phrases.last(lambda phrase: "foo bar baz" in phrase) is None


@pytest.mark.parametrize("method", ["first", "last"])
def test_first_and_last_on_empty_sequence_raise(method: str) -> None:
    """Reading a boundary element of an empty sequence is an index error."""
    sequence = IndexedSequence(3)

    with pytest.raises(InvalidIndexError):
        getattr(sequence, method)()


@pytest.mark.parametrize(
    ("original", "reversed_values"),
    [([1, 2, 3, 4, 5], [5, 4, 3, 2, 1]), ([1, 2, 3, 4], [4, 3, 2, 1]), ([], [])],
)
def test_reverse_returns_new_reversed_sequence(
    original: list[int], reversed_values: list[int]
) -> None:
    """Reverse must not mutate the source."""
    sequence = IndexedSequence(original)

    reversed_sequence = sequence.reverse()

    assert reversed_sequence.to_list() == reversed_values
    assert sequence.to_list() == original


def test_group_by_groups_in_first_seen_order(lorem_words: list[str]) -> None:
    """Groups follow first-seen key order and keep insertion order."""
    grouped = IndexedSequence(lorem_words).group_by(len)

    assert len(grouped) == 6
    assert [group.to_list() for group in grouped] == [
        ["Lorem", "ipsum", "dolor"],
        ["sit", "sed"],
        ["amet", "elit"],
        ["consectetur"],
        ["adipiscing"],
        ["do"],
    ]


def test_group_by_supports_unhashable_keys() -> None:
    """Keys are matched by equality, so lists work as keys."""
    grouped = IndexedSequence(["ab", "ba", "cd"]).group_by(sorted)

    assert [group.to_list() for group in grouped] == [["ab", "ba"], ["cd"]]


def test_sequences_compare_by_populated_elements() -> None:
    """Equality ignores spare capacity."""
    padded = IndexedSequence(["a", "b", None, None])

    assert padded == IndexedSequence(("a", "b"))
    assert padded != IndexedSequence(["b", "a"])
    assert padded != ["a", "b"]
