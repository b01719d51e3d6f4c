"""Clock implementations."""

import time
from datetime import datetime, timedelta, timezone

from awesomelib.interfaces.clock import Clock


class SystemClock(Clock):
    """Clock that reads the host's wall and monotonic clocks."""

    def now(self) -> datetime:
        """Return the current UTC instant."""
        return datetime.now(timezone.utc)

    def monotonic(self) -> float:
        """Return `time.monotonic()`."""
        return time.monotonic()


class FixedClock(Clock):
    """Clock frozen at a given instant until advanced explicitly.

    Intended for tests and reproducible runs. A naive `instant` is taken to be
    local wall time, the same way `datetime.astimezone()` treats naive values.

    Example:
        ```py
        clock = FixedClock(datetime(2024, 2, 29, 12, tzinfo=timezone.utc))
        is_today(date(2024, 2, 29), clock=clock)  # True
        clock.advance(days=1)
        ```
    """

    def __init__(self, instant: datetime, monotonic_start: float = 0.0) -> None:
        self._instant = instant
        self._monotonic = monotonic_start

    def now(self) -> datetime:
        """Return the frozen instant."""
        return self._instant

    def monotonic(self) -> float:
        """Return the frozen monotonic reading."""
        return self._monotonic

    def advance(self, seconds: float = 0.0, **kwargs: float) -> None:
        """Move both readings forward.

        Args:
            seconds: Seconds to add.
            **kwargs: Extra `timedelta` fields (e.g. ``days=1``, ``milliseconds=50``).
        """
        delta = timedelta(seconds=seconds, **kwargs)
        self._instant += delta
        self._monotonic += delta.total_seconds()
