"""Number helpers: random integers, parity, formatting and rounding."""

import math
import random
import re
from collections.abc import Sequence
from typing import TypeGuard, TypeVar

N = TypeVar("N", int, float)

_THOUSANDS_RE = re.compile(r"\B(?=(\d{3})+(?!\d))")

# JavaScript-style decimal form switches to exponent notation from here on
_EXPONENT_THRESHOLD = 1e21


def random_number(
    minimum: int, maximum: int, *, rng: random.Random | None = None
) -> int:
    """Return a uniformly distributed integer in ``[minimum, maximum]``.

    Args:
        minimum: Lower bound (inclusive).
        maximum: Upper bound (inclusive), must not be below `minimum`.
        rng: Random source; defaults to the `random` module's shared instance.

    Returns:
        int: ``floor(rng.random() * (maximum - minimum + 1)) + minimum``.
    """
    source = rng or random
    return math.floor(source.random() * (maximum - minimum + 1)) + minimum


def is_even(n: float) -> bool:
    """Return True if `n` is divisible by two."""
    return n % 2 == 0


def is_odd(n: float) -> bool:
    """Return True if `n` leaves a remainder of one (defined for negatives)."""
    return abs(n % 2) == 1


def is_number(value: object) -> TypeGuard[int | float]:
    """Return True for int/float values that are not NaN.

    Booleans are excluded even though `bool` subclasses `int`.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value)


def find_max(values: Sequence[N]) -> N | None:
    """Return the largest element, or None for an empty sequence."""
    return max(values) if values else None


def find_min(values: Sequence[N]) -> N | None:
    """Return the smallest element, or None for an empty sequence."""
    return min(values) if values else None


def _decimal_string(n: float) -> str:
    if (
        isinstance(n, float)
        and math.isfinite(n)
        and n.is_integer()
        and abs(n) < _EXPONENT_THRESHOLD
    ):
        return str(int(n))
    return str(n)


def format_number(n: float) -> str:
    """Insert comma thousands separators into the decimal form of `n`.

    The separator regex runs over the whole string form, so digits after the
    decimal point are grouped as well (``1234.5678`` -> ``"1,234.5,678"``).
    Integral floats render without a trailing ``.0``.

    Example:
        ```py
        format_number(1234567890)  # "1,234,567,890"
        ```
    """
    return _THOUSANDS_RE.sub(",", _decimal_string(n))


def round_to(n: float, places: int = 2) -> float:
    """Round half-up (toward positive infinity) to `places` decimal places.

    Uses scale, round, unscale, so binary floating-point representation error
    shows through for some inputs (``round_to(1.005, 2) == 1.0``). NaN and
    infinities, and values too large to scale, are returned unchanged.
    """
    factor = 10**places
    scaled = n * factor
    if not math.isfinite(scaled):
        return n
    return math.floor(scaled + 0.5) / factor
