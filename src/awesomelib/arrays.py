"""Sequence helpers: shuffling, deduplication, chunking and set-like operations.

Every helper returns a new list and leaves its inputs untouched. Membership
tests use strict equality (see `awesomelib._compare`): scalars by value with
``True`` kept apart from ``1``, containers by identity rather than contents.
"""

import random
from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from awesomelib._compare import identity_key

T = TypeVar("T")


def shuffle_array(items: Sequence[T], *, rng: random.Random | None = None) -> list[T]:
    """Return a uniformly random permutation of `items` (Fisher-Yates).

    Args:
        items: Elements to shuffle; not modified.
        rng: Random source; defaults to the `random` module's shared instance.

    Returns:
        list: A new list holding the same elements.
    """
    source = rng or random
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = source.randrange(i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def remove_duplicates(items: Sequence[T]) -> list[T]:
    """Drop repeated elements, keeping first occurrences in order."""
    seen: set[Any] = set()
    unique: list[T] = []
    for item in items:
        key = identity_key(item)
        if key not in seen:
            seen.add(key)
            unique.append(item)
    return unique


def chunk(items: Sequence[T], size: int) -> list[list[T]]:
    """Split `items` into consecutive slices of at most `size` elements.

    Raises:
        ValueError: If `size` is not positive.
    """
    if size <= 0:
        raise ValueError(f"chunk size must be positive, got {size}")
    return [list(items[i : i + size]) for i in range(0, len(items), size)]


def difference(first: Sequence[T], second: Sequence[T]) -> list[T]:
    """Return the elements of `first` that do not occur in `second`."""
    exclude = {identity_key(item) for item in second}
    return [item for item in first if identity_key(item) not in exclude]


def intersect(first: Sequence[T], second: Sequence[T]) -> list[T]:
    """Return the elements of `first` that also occur in `second`."""
    include = {identity_key(item) for item in second}
    return [item for item in first if identity_key(item) in include]


def sort_by_key(items: Sequence[T], key: str) -> list[T]:
    """Sort records ascending by one field.

    Mappings are indexed with ``item[key]``; other objects are read with
    ``getattr``. The sort is stable, so records with equal keys keep their
    relative order.
    """

    def _field(item: Any) -> Any:
        if isinstance(item, Mapping):
            return item[key]
        return getattr(item, key)

    return sorted(items, key=_field)
