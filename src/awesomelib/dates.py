"""Date helpers: formatting, calendar arithmetic, ranges and clock-relative checks.

Values are `datetime.date` or `datetime.datetime`. Arithmetic returns new
values and keeps the time of day and `tzinfo` of its input.

Predicates relative to "now" (`is_today`, `is_future_date`, ...) read the time
once per call from an injectable `Clock` (default: `SystemClock`). Aware
values are compared in their own timezone; naive values and plain dates are
compared against local wall time.
"""

from __future__ import annotations

import calendar
import math
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import TYPE_CHECKING, TypeVar

from awesomelib.adapters.clocks import SystemClock
from awesomelib.errors import InvalidDateError

if TYPE_CHECKING:
    from awesomelib.interfaces.clock import Clock

D = TypeVar("D", date, datetime)

SECONDS_PER_DAY = 24 * 60 * 60
_END_OF_DAY = time.max  # 23:59:59.999999
_SATURDAY = 5

_default_clock = SystemClock()


@dataclass(frozen=True)
class DateRange:
    """Inclusive pair of instants returned by the range queries."""

    start: datetime
    end: datetime


# ============================================================================
#                           Parsing & formatting
# ============================================================================


def parse_date(text: str) -> datetime:
    """Parse an ISO-8601 date or datetime string.

    A bare date (``"2023-12-25"``) yields midnight of that day.

    Raises:
        InvalidDateError: If `text` is not a recognisable ISO-8601 value.
    """
    try:
        return datetime.fromisoformat(text.strip())
    except (TypeError, ValueError, AttributeError) as e:
        raise InvalidDateError(text) from e


def format_date(value: date, fmt: str = "MM/DD/YYYY") -> str:
    """Substitute the ``YYYY``, ``MM`` and ``DD`` tokens in `fmt`.

    Only the first occurrence of each token is replaced, in that order. Any
    other text, including unrecognized tokens, passes through unchanged.
    """
    return (
        fmt.replace("YYYY", str(value.year), 1)
        .replace("MM", f"{value.month:02d}", 1)
        .replace("DD", f"{value.day:02d}", 1)
    )


def format_locale_date(value: date | str, pattern: str = "%x") -> str:
    """Render a date with `strftime`, using the current locale for ``%x``/``%c``.

    Args:
        value: A date/datetime, or an ISO-8601 string to be parsed first.
        pattern: `strftime` pattern.

    Raises:
        InvalidDateError: If `value` is a string that cannot be parsed, or
            neither a string nor a date.
    """
    if isinstance(value, str):
        value = parse_date(value)
    elif not isinstance(value, date):
        raise InvalidDateError(value)
    return value.strftime(pattern)


def is_valid_date(value: object) -> bool:
    """Return True for date instances and ISO-8601 strings that parse."""
    if isinstance(value, date):
        return True
    if isinstance(value, str):
        try:
            parse_date(value)
        except InvalidDateError:
            return False
        return True
    return False


# ============================================================================
#                           Calendar arithmetic
# ============================================================================


def _shift(value: D, *, years: int = 0, months: int = 0, days: int = 0) -> D:
    """Move `value` by calendar fields, normalizing any overflow.

    Overflowing months roll into years and overflowing days roll into the
    following months, so Jan 31 + 1 month lands on Mar 3 (Mar 2 in a leap year).
    """
    month_index = value.year * 12 + (value.month - 1) + years * 12 + months
    year, month = divmod(month_index, 12)
    first = value.replace(year=year, month=month + 1, day=1)
    return first + timedelta(days=value.day - 1 + days)


def add_days(value: D, days: int) -> D:
    """Return `value` moved by `days` calendar days (may be negative)."""
    return _shift(value, days=days)


def add_months(value: D, months: int) -> D:
    """Return `value` moved by `months` calendar months (may be negative)."""
    return _shift(value, months=months)


def add_years(value: D, years: int) -> D:
    """Return `value` moved by `years` calendar years (may be negative)."""
    return _shift(value, years=years)


def days_between(first: date, second: date) -> int:
    """Return the absolute number of days between two values, half-up rounded.

    Plain dates count from midnight, so a date and a datetime can be mixed.
    """
    seconds = abs((_as_datetime(first) - _as_datetime(second)).total_seconds())
    return math.floor(seconds / SECONDS_PER_DAY + 0.5)


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in `month` (1-12) of `year`."""
    return calendar.monthrange(year, month)[1]


def get_quarter(value: date) -> int:
    """Return the calendar quarter (1-4)."""
    return (value.month - 1) // 3 + 1


# ============================================================================
#                           Ranges
# ============================================================================


def _as_datetime(value: date) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def start_of_day(value: date) -> datetime:
    """Return midnight at the start of `value`'s day."""
    return _as_datetime(value).replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(value: date) -> datetime:
    """Return the last representable instant of `value`'s day."""
    return _as_datetime(value).replace(
        hour=_END_OF_DAY.hour,
        minute=_END_OF_DAY.minute,
        second=_END_OF_DAY.second,
        microsecond=_END_OF_DAY.microsecond,
    )


def get_week_range(value: date) -> DateRange:
    """Return the Monday-to-Sunday week containing `value`."""
    monday = start_of_day(value) - timedelta(days=value.weekday())
    return DateRange(start=monday, end=end_of_day(monday + timedelta(days=6)))


def get_month_range(value: date) -> DateRange:
    """Return the first and last instants of `value`'s month."""
    first = start_of_day(value).replace(day=1)
    last = first.replace(day=days_in_month(value.year, value.month))
    return DateRange(start=first, end=end_of_day(last))


# ============================================================================
#                           Comparisons
# ============================================================================


def is_same_day(first: date, second: date) -> bool:
    """Return True if both values fall on the same calendar day."""
    return (first.year, first.month, first.day) == (
        second.year,
        second.month,
        second.day,
    )


def is_same_month(first: date, second: date) -> bool:
    """Return True if both values fall in the same calendar month."""
    return (first.year, first.month) == (second.year, second.month)


def is_same_year(first: date, second: date) -> bool:
    """Return True if both values fall in the same calendar year."""
    return first.year == second.year


def is_weekend(value: date) -> bool:
    """Return True for Saturdays and Sundays."""
    return value.weekday() >= _SATURDAY


# ============================================================================
#                           Clock-relative predicates
# ============================================================================


def _now_like(value: date, clock: Clock | None) -> datetime:
    """Read the clock in the frame of reference of `value`."""
    now = (clock or _default_clock).now()
    if isinstance(value, datetime) and value.tzinfo is not None:
        return now.astimezone(value.tzinfo)
    return now.astimezone().replace(tzinfo=None)


def is_future_date(value: date, *, clock: Clock | None = None) -> bool:
    """Return True if `value` lies after the current instant."""
    return _as_datetime(value) > _now_like(value, clock)


def is_past_date(value: date, *, clock: Clock | None = None) -> bool:
    """Return True if `value` lies before the current instant."""
    return _as_datetime(value) < _now_like(value, clock)


def is_today(value: date, *, clock: Clock | None = None) -> bool:
    """Return True if `value` falls on the current day."""
    return is_same_day(value, _now_like(value, clock))


def is_tomorrow(value: date, *, clock: Clock | None = None) -> bool:
    """Return True if `value` falls on the day after the current day."""
    return is_same_day(value, add_days(_now_like(value, clock), 1))


def is_yesterday(value: date, *, clock: Clock | None = None) -> bool:
    """Return True if `value` falls on the day before the current day."""
    return is_same_day(value, add_days(_now_like(value, clock), -1))


def is_this_month(value: date, *, clock: Clock | None = None) -> bool:
    """Return True if `value` falls in the current month."""
    return is_same_month(value, _now_like(value, clock))


def is_this_year(value: date, *, clock: Clock | None = None) -> bool:
    """Return True if `value` falls in the current year."""
    return is_same_year(value, _now_like(value, clock))
