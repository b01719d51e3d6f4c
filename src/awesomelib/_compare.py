"""Strict-equality primitives shared by the sequence and mapping helpers.

Strict equality here means: scalars compare by value within their kind
(``True`` is not ``1``, ``1`` is ``1.0``), containers compare by identity.
"""

from collections.abc import Hashable, Mapping
from typing import Any

CONTAINER_TYPES = (Mapping, list, tuple, set, frozenset)


def is_container(value: Any) -> bool:
    """Return True for values compared by identity under strict equality."""
    return isinstance(value, CONTAINER_TYPES)


def _kind(value: Any) -> object:
    if isinstance(value, bool):
        return bool
    if isinstance(value, (int, float)):
        return float
    return type(value)


def strict_equal(a: Any, b: Any) -> bool:
    """Compare two values by identity for containers and by value for scalars."""
    if a is b:
        return True
    if is_container(a) or is_container(b):
        return False
    return _kind(a) is _kind(b) and bool(a == b)


def identity_key(value: Any) -> Hashable:
    """Return a hashable key such that equal keys imply strictly equal values."""
    if is_container(value) or not isinstance(value, Hashable):
        return ("id", id(value))
    return (_kind(value), value)
