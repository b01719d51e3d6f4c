"""Hypothesis property tests for the sequence and number helpers.

Properties:

- **Shuffle is a permutation** of its input and leaves the input alone.
- **Deduplication is idempotent** and keeps first occurrences in order.
- **Chunking partitions** the input into bounded, order-preserving slices.
- **random_number stays in bounds** for any seed.
- **Thousands grouping** only inserts commas into integer digits.
"""

import random
from collections import Counter

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from awesomelib import arrays, numbers

pytestmark = [pytest.mark.property]

_PROPSET = settings(max_examples=100, deadline=None)

hashables = st.lists(st.integers(-5, 5) | st.booleans() | st.text(max_size=2))


@_PROPSET
@given(st.lists(st.integers()), st.integers())
def test_shuffle_is_a_permutation(items, seed):
    """Same multiset of elements; the input is not modified."""
    before = list(items)
    shuffled = arrays.shuffle_array(items, rng=random.Random(seed))
    assert Counter(shuffled) == Counter(items)
    assert items == before


@_PROPSET
@given(hashables)
def test_remove_duplicates_is_idempotent(items):
    """Deduplicating twice changes nothing."""
    once = arrays.remove_duplicates(items)
    assert arrays.remove_duplicates(once) == once
    assert len(once) <= len(items)


@_PROPSET
@given(hashables)
def test_remove_duplicates_keeps_first_occurrence_order(items):
    """Result order matches the order of first appearance."""
    unique = arrays.remove_duplicates(items)
    positions = [
        next(i for i, x in enumerate(items) if type(x) is type(u) and x == u)
        for u in unique
    ]
    assert positions == sorted(positions)


@_PROPSET
@given(st.lists(st.integers(), max_size=50), st.integers(min_value=1, max_value=10))
def test_chunk_partitions_input(items, size):
    """Concatenated chunks restore the input; only the last may be short."""
    chunks = arrays.chunk(items, size)
    assert [x for c in chunks for x in c] == items
    assert all(len(c) == size for c in chunks[:-1])
    assert all(0 < len(c) <= size for c in chunks)


@_PROPSET
@given(
    st.integers(-1000, 1000),
    st.integers(0, 1000),
    st.integers(),
)
def test_random_number_in_bounds(minimum, span, seed):
    """Results are integers within the inclusive bounds."""
    rng = random.Random(seed)
    for _ in range(20):
        value = numbers.random_number(minimum, minimum + span, rng=rng)
        assert minimum <= value <= minimum + span


@_PROPSET
@given(st.integers(-(10**15), 10**15))
def test_format_number_only_inserts_commas(n):
    """Removing the separators yields the plain integer string."""
    formatted = numbers.format_number(n)
    assert formatted.replace(",", "") == str(n)
    assert all(len(group) == 3 for group in formatted.split(",")[1:])
