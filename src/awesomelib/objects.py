"""Mapping helpers: cloning, merging, equality, flattening and nested access.

Unless stated otherwise a helper returns a new `dict` and leaves its inputs
alone. Two helpers mutate on purpose: `merge_deep` merges into `target` (its
non-mutating, shallow twin is `merge_objects`) and `set_nested_value` writes
into `obj`.

Known limitations:
    - `deep_clone` is a JSON round trip. Tuples come back as lists, non-string
      keys as strings, and values without a JSON form are rejected.
    - `invert_object` and `unflatten_object` resolve collisions as last write
      wins in iteration order. That order is an implementation detail, not a
      guarantee.
    - A ``.`` inside an original key cannot survive `flatten_object` followed
      by `unflatten_object`.
"""

from __future__ import annotations

import copy
import json
from collections.abc import Callable, Hashable, Iterable, Mapping, MutableMapping
from types import MappingProxyType
from typing import Any, TypeVar

from awesomelib._compare import is_container, strict_equal
from awesomelib._serialize import dumps
from awesomelib.errors import PathConflictError

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
U = TypeVar("U")

SEPARATOR = "."


# ============================================================================
#                           Copying & merging
# ============================================================================


def deep_clone(obj: V) -> V:
    """Return a structural copy of `obj` that shares nothing with it.

    Raises:
        CyclicReferenceError: If `obj` contains itself.
        UnserializableValueError: If `obj` holds a value with no JSON form
            (functions, sets, arbitrary objects, ...).
    """
    return json.loads(dumps(obj))


def merge_objects(target: Mapping[K, V], source: Mapping[K, V]) -> dict[K, V]:
    """Shallow merge into a new dict; keys in `source` win.

    Neither argument is modified.
    """
    return {**target, **source}


def merge_deep(
    target: MutableMapping[Any, Any], source: Mapping[Any, Any]
) -> MutableMapping[Any, Any]:
    """Recursively merge `source` into `target`, **mutating** `target`.

    When both sides hold a mapping under the same key the two are merged
    recursively. A mapping in `source` over anything else in `target` is
    merged into a fresh dict. Every other source value (scalars, lists)
    overwrites the target's.

    Returns:
        The same `target` object, for chaining.
    """
    for key, value in source.items():
        if isinstance(value, Mapping):
            current = target.get(key)
            if not isinstance(current, MutableMapping):
                current = {}
                target[key] = current
            merge_deep(current, value)
        else:
            target[key] = value
    return target


# ============================================================================
#                           Selecting & reshaping
# ============================================================================


def pick(obj: Mapping[K, V], keys: Iterable[K]) -> dict[K, V]:
    """Return a new dict holding only `keys`; missing keys are skipped."""
    return {key: obj[key] for key in keys if key in obj}


def omit(obj: Mapping[K, V], keys: Iterable[K]) -> dict[K, V]:
    """Return a new dict without `keys`."""
    excluded = set(keys)
    return {key: value for key, value in obj.items() if key not in excluded}


def get_object_keys(obj: Mapping[K, V]) -> list[K]:
    return list(obj.keys())


def get_object_values(obj: Mapping[K, V]) -> list[V]:
    return list(obj.values())


def to_entries(obj: Mapping[K, V]) -> list[tuple[K, V]]:
    return list(obj.items())


def rename_keys(obj: Mapping[str, V], key_map: Mapping[str, str]) -> dict[str, V]:
    """Return a new dict with keys renamed through `key_map`.

    Keys absent from `key_map` (or mapped to an empty string) keep their name.
    """
    return {(key_map.get(key) or key): value for key, value in obj.items()}


def map_object(obj: Mapping[K, V], callback: Callable[[V, K], U]) -> dict[K, U]:
    """Apply ``callback(value, key)`` to every entry."""
    return {key: callback(value, key) for key, value in obj.items()}


def filter_object(
    obj: Mapping[K, V], predicate: Callable[[V, K], bool]
) -> dict[K, V]:
    """Keep the entries for which ``predicate(value, key)`` is true."""
    return {key: value for key, value in obj.items() if predicate(value, key)}


def invert_object(obj: Mapping[K, Any]) -> dict[Any, K]:
    """Swap keys and values.

    When several keys share a value the last one in iteration order wins.
    Values must be hashable.
    """
    return {value: key for key, value in obj.items()}


def group_by(
    obj: Mapping[K, V], selector: Callable[[V, K], Hashable]
) -> dict[Hashable, list[V]]:
    """Partition values by ``selector(value, key)``, preserving order."""
    groups: dict[Hashable, list[V]] = {}
    for key, value in obj.items():
        groups.setdefault(selector(value, key), []).append(value)
    return groups


def compact_object(obj: Mapping[K, V | None]) -> dict[K, V]:
    """Drop entries whose value is None; falsy values such as 0 are kept."""
    return {key: value for key, value in obj.items() if value is not None}


def key_difference(first: Mapping[Any, Any], second: Mapping[Any, Any]) -> list[Any]:
    """Return the keys of `first` that `second` lacks, in `first`'s order."""
    return [key for key in first if key not in second]


def key_intersection(
    first: Mapping[Any, Any], second: Mapping[Any, Any]
) -> list[Any]:
    """Return the keys of `first` that `second` also has, in `first`'s order."""
    return [key for key in first if key in second]


# ============================================================================
#                           Flattening
# ============================================================================


def flatten_object(obj: Mapping[Any, Any], prefix: str = "") -> dict[str, Any]:
    """Collapse nested mappings into one level with dot-joined keys.

    Lists and empty mappings are leaves and are not descended into.

    Example:
        ```py
        flatten_object({"a": {"b": 1, "c": {"d": 2}}})
        # {"a.b": 1, "a.c.d": 2}
        ```
    """
    flat: dict[str, Any] = {}
    for key, value in obj.items():
        path = f"{prefix}{SEPARATOR}{key}" if prefix else str(key)
        if isinstance(value, Mapping) and value:
            flat.update(flatten_object(value, path))
        else:
            flat[path] = value
    return flat


def unflatten_object(obj: Mapping[str, Any]) -> dict[str, Any]:
    """Rebuild nested dicts from dot-joined keys.

    If one key's path runs through a leaf written by another key (e.g. both
    ``"a"`` and ``"a.b"``), the later key in iteration order wins.
    """
    nested: dict[str, Any] = {}
    for flat_key, value in obj.items():
        *parents, leaf = flat_key.split(SEPARATOR)
        node = nested
        for part in parents:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        # mapping leaves are copied so later keys never write into the input
        node[leaf] = copy.deepcopy(dict(value)) if isinstance(value, Mapping) else value
    return nested


# ============================================================================
#                           Nested access
# ============================================================================


def get_nested_value(
    obj: Mapping[Any, Any], path: Iterable[Any], default: Any = None
) -> Any:
    """Follow `path` through nested mappings.

    Returns:
        The value at the end of `path`, or `default` if any step is missing or
        is not a mapping.
    """
    node: Any = obj
    for key in path:
        if not isinstance(node, Mapping) or key not in node:
            return default
        node = node[key]
    return node


def set_nested_value(
    obj: MutableMapping[Any, Any], path: list[Any], value: Any
) -> MutableMapping[Any, Any]:
    """Write `value` at `path`, **mutating** `obj` in place.

    Missing (or None) intermediates are created as empty dicts. An empty
    `path` leaves `obj` untouched.

    Returns:
        The same `obj`, for chaining.

    Raises:
        PathConflictError: If an intermediate value exists but is not a
            mutable mapping.
    """
    if not path:
        return obj
    node = obj
    for key in path[:-1]:
        child = node.get(key)
        if child is None:
            child = {}
            node[key] = child
        elif not isinstance(child, MutableMapping):
            raise PathConflictError(list(path), key)
        node = child
    node[path[-1]] = value
    return obj


# ============================================================================
#                           Predicates & equality
# ============================================================================


def is_empty_object(obj: Mapping[Any, Any]) -> bool:
    return len(obj) == 0


def has_key(obj: Mapping[Any, Any], key: Any) -> bool:
    """Own-key membership test."""
    return key in obj


def is_plain_object(value: object) -> bool:
    """Return True for dict instances (not lists, None or other mappings)."""
    return isinstance(value, dict)


def shallow_equal(first: Mapping[Any, Any], second: Mapping[Any, Any]) -> bool:
    """Compare one level deep.

    Both mappings must have the same number of keys and every value must be
    strictly equal: scalars by value, containers by identity.
    """
    if len(first) != len(second):
        return False
    return all(key in second and strict_equal(first[key], second[key]) for key in first)


def deep_equal(first: Any, second: Any) -> bool:
    """Recursively compare mappings and lists/tuples by content.

    Scalars are compared strictly (``True`` does not equal ``1``) and a
    difference in key count or length short-circuits to False.
    """
    if first is second:
        return True
    if isinstance(first, Mapping) and isinstance(second, Mapping):
        if len(first) != len(second):
            return False
        return all(
            key in second and deep_equal(first[key], second[key]) for key in first
        )
    if isinstance(first, (list, tuple)) and isinstance(second, (list, tuple)):
        if len(first) != len(second):
            return False
        return all(deep_equal(a, b) for a, b in zip(first, second))
    if is_container(first) or is_container(second):
        return False
    return strict_equal(first, second)


# ============================================================================
#                           Freezing
# ============================================================================


def freeze_object(obj: Any) -> Any:
    """Return a recursively read-only view of `obj`.

    Mappings become `MappingProxyType` over frozen copies of their values,
    lists and tuples become tuples and sets become frozensets. Scalars are
    returned as-is. Python dicts cannot be locked in place, so the result is a
    new structure rather than `obj` itself.
    """
    if isinstance(obj, Mapping):
        frozen = {key: freeze_object(value) for key, value in obj.items()}
        return MappingProxyType(frozen)
    if isinstance(obj, (list, tuple)):
        return tuple(freeze_object(item) for item in obj)
    if isinstance(obj, (set, frozenset)):
        return frozenset(obj)
    return obj
