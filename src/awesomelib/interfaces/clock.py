"""Interface for clocks."""

import abc
from datetime import datetime

# pylint: disable=too-few-public-methods


class Clock(abc.ABC):
    """Contract for a source of the current time."""

    @abc.abstractmethod
    def now(self) -> datetime:
        """Return the current instant as a tz-aware datetime."""

    @abc.abstractmethod
    def monotonic(self) -> float:
        """Return a monotonic reading in seconds, for measuring intervals."""
