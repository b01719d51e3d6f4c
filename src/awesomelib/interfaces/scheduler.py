"""Interfaces for deferred callbacks.

A Scheduler runs a callback once after a delay and hands back a TimerHandle
that can cancel it while it is still pending.
"""

import abc
from collections.abc import Callable

# pylint: disable=too-few-public-methods


class TimerHandle(abc.ABC):
    """Handle to a pending callback."""

    @abc.abstractmethod
    def cancel(self) -> None:
        """Cancel the callback if it has not run yet; no-op otherwise."""


class Scheduler(abc.ABC):
    """Contract for a timer facility."""

    @abc.abstractmethod
    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        """Schedule `callback` to run once after `delay` seconds.

        Args:
            delay: Seconds to wait before running the callback.
            callback: Zero-argument callable to run.

        Returns:
            A handle that can cancel the pending callback.
        """
