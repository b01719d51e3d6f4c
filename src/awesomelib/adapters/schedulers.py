"""Scheduler backed by `threading.Timer`."""

import threading
from collections.abc import Callable

from awesomelib.interfaces.scheduler import Scheduler, TimerHandle

# pylint: disable=too-few-public-methods


class _ThreadTimerHandle(TimerHandle):
    def __init__(self, timer: threading.Timer) -> None:
        self._timer = timer

    def cancel(self) -> None:
        self._timer.cancel()


class ThreadingScheduler(Scheduler):
    """Run callbacks on daemon `threading.Timer` threads.

    Timers are daemonic so a pending debounce never keeps the interpreter
    alive at exit.
    """

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        """Start a timer that runs `callback` after `delay` seconds."""
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return _ThreadTimerHandle(timer)
