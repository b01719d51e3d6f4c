"""Function wrappers: memoize, debounce and throttle.

Each wrapper owns its private state (cache, pending timer, last-call time);
nothing is shared between wrappers or visible outside them. Applied to a
method, a wrapper binds `self` and keeps separate state for each instance.

Debounce and throttle take their timing sources as parameters. By default
`debounce` schedules on `threading.Timer` threads and `throttle` reads
`time.monotonic()`; tests pass a manual scheduler or a `FixedClock` instead
of sleeping. Delays are in seconds.
"""

from __future__ import annotations

import functools
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Generic, ParamSpec, TypeVar

from awesomelib._serialize import dumps
from awesomelib.adapters.clocks import SystemClock
from awesomelib.adapters.schedulers import ThreadingScheduler

if TYPE_CHECKING:
    from awesomelib.interfaces.clock import Clock
    from awesomelib.interfaces.scheduler import Scheduler, TimerHandle

P = ParamSpec("P")
R = TypeVar("R")

# pylint: disable=too-few-public-methods


def _check_delay(delay: float) -> None:
    if delay < 0:
        raise ValueError(f"delay must not be negative, got {delay}")


class _BindsToInstances:
    """Descriptor behaviour shared by the wrappers.

    Used on a method, each instance gets its own wrapper around the bound
    method, so `self` is passed through and caches or timers are per instance.
    The per-instance wrapper is stored in the instance `__dict__` when it has
    one; otherwise a fresh wrapper is built on every attribute access.
    """

    _func: Callable[..., Any]
    _attr_name: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self._attr_name = name

    def __get__(self, instance: object, owner: type | None = None) -> Any:
        binder = getattr(self._func, "__get__", None)
        if instance is None or binder is None:
            return self
        bound = self._rebind(binder(instance, owner))
        if self._attr_name is not None and hasattr(instance, "__dict__"):
            instance.__dict__[self._attr_name] = bound
        return bound

    def _rebind(self, method: Callable[..., Any]) -> Any:
        raise NotImplementedError


# ============================================================================
#                           Memoize
# ============================================================================


class Memoized(_BindsToInstances, Generic[P, R]):
    """Callable returned by `memoize`.

    Attributes:
        cache: Mapping of serialized argument lists to results. It is never
            evicted; call `cache_clear()` to bound memory yourself.
    """

    def __init__(self, func: Callable[P, R]) -> None:
        self._func = func
        self.cache: dict[str, R] = {}
        functools.update_wrapper(self, func)

    def __call__(self, *args: P.args, **kwargs: P.kwargs) -> R:
        key = dumps([args, kwargs])
        if key in self.cache:
            return self.cache[key]
        result = self._func(*args, **kwargs)
        self.cache[key] = result
        return result

    def cache_clear(self) -> None:
        """Forget every cached result."""
        self.cache.clear()

    def _rebind(self, method: Callable[..., R]) -> Memoized[..., R]:
        return Memoized(method)


def memoize(func: Callable[P, R]) -> Memoized[P, R]:
    """Cache `func`'s results keyed by the JSON form of its arguments.

    Arguments must be JSON-serializable. Keyword arguments are keyed in the
    order they were passed, so ``f(a=1, b=2)`` and ``f(b=2, a=1)`` are cached
    separately. Tuples and lists serialize identically and share entries.

    Raises:
        UnserializableValueError: On a call whose arguments have no JSON form.
        CyclicReferenceError: On a call whose arguments contain themselves.
    """
    return Memoized(func)


# ============================================================================
#                           Debounce
# ============================================================================


class Debounced(_BindsToInstances, Generic[P]):
    """Callable returned by `debounce`.

    Every call supersedes the pending one. Once `delay` seconds pass without a
    new call, the wrapped function runs exactly once with the last call's
    arguments.
    """

    def __init__(
        self, func: Callable[P, Any], delay: float, scheduler: Scheduler
    ) -> None:
        self._func = func
        self._delay = delay
        self._scheduler = scheduler
        self._lock = threading.Lock()
        self._handle: TimerHandle | None = None
        self._pending: tuple[tuple[Any, ...], dict[str, Any]] | None = None
        self._generation = 0
        functools.update_wrapper(self, func)

    def __call__(self, *args: P.args, **kwargs: P.kwargs) -> None:
        with self._lock:
            if self._handle is not None:
                self._handle.cancel()
            self._generation += 1
            generation = self._generation
            self._pending = (args, kwargs)
            self._handle = self._scheduler.call_later(
                self._delay, lambda: self._fire(generation)
            )

    @property
    def pending(self) -> bool:
        """True while a call is waiting for its quiet period to end."""
        with self._lock:
            return self._pending is not None

    def _take_pending(self) -> tuple[tuple[Any, ...], dict[str, Any]] | None:
        # caller holds the lock
        pending, self._pending = self._pending, None
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self._generation += 1
        return pending

    def _fire(self, generation: int) -> None:
        with self._lock:
            # a timer that lost the race against a newer call must not run
            if generation != self._generation:
                return
            pending = self._take_pending()
        if pending is not None:
            args, kwargs = pending
            self._func(*args, **kwargs)

    def cancel(self) -> None:
        """Drop the pending call, if any, without running it."""
        with self._lock:
            self._take_pending()

    def flush(self) -> None:
        """Run the pending call now instead of waiting for the timer."""
        with self._lock:
            pending = self._take_pending()
        if pending is not None:
            args, kwargs = pending
            self._func(*args, **kwargs)

    def _rebind(self, method: Callable[..., Any]) -> Debounced[...]:
        return Debounced(method, self._delay, self._scheduler)


def debounce(
    func: Callable[P, Any], delay: float, *, scheduler: Scheduler | None = None
) -> Debounced[P]:
    """Delay `func` until `delay` seconds have passed since the last call.

    Args:
        func: Function to wrap. Its return value is discarded.
        delay: Quiet period in seconds.
        scheduler: Timer facility; defaults to `ThreadingScheduler`, which
            runs `func` on a timer thread.

    Returns:
        Debounced: Wrapper that also offers `cancel()` and `flush()`.

    Raises:
        ValueError: If `delay` is negative.
    """
    _check_delay(delay)
    return Debounced(func, delay, scheduler or ThreadingScheduler())


# ============================================================================
#                           Throttle
# ============================================================================


class Throttled(_BindsToInstances, Generic[P, R]):
    """Callable returned by `throttle`.

    The first call runs immediately and opens a `delay`-second window; calls
    inside the window are dropped (not queued) and return None.
    """

    def __init__(self, func: Callable[P, R], delay: float, clock: Clock) -> None:
        self._func = func
        self._delay = delay
        self._clock = clock
        self._lock = threading.Lock()
        self._last_run: float | None = None
        functools.update_wrapper(self, func)

    def __call__(self, *args: P.args, **kwargs: P.kwargs) -> R | None:
        with self._lock:
            now = self._clock.monotonic()
            if self._last_run is not None and now - self._last_run < self._delay:
                return None
            self._last_run = now
        return self._func(*args, **kwargs)

    def _rebind(self, method: Callable[..., R]) -> Throttled[..., R]:
        return Throttled(method, self._delay, self._clock)


def throttle(
    func: Callable[P, R], delay: float, *, clock: Clock | None = None
) -> Throttled[P, R]:
    """Run `func` at most once per `delay` seconds.

    Args:
        func: Function to wrap.
        delay: Window length in seconds.
        clock: Source of monotonic readings; defaults to `SystemClock`.

    Returns:
        Throttled: Wrapper returning `func`'s result, or None for dropped calls.

    Raises:
        ValueError: If `delay` is negative.
    """
    _check_delay(delay)
    return Throttled(func, delay, clock or SystemClock())
