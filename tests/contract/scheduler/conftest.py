"""Fixtures for scheduler contract tests."""

from collections.abc import Iterable

import pytest

from awesomelib.adapters.schedulers import ThreadingScheduler
from awesomelib.interfaces.scheduler import Scheduler


@pytest.fixture(params=["threading"])
def scheduler(request: pytest.FixtureRequest) -> Iterable[Scheduler]:
    """Yield a fresh Scheduler for each backend."""
    match request.param:
        case "threading":
            yield ThreadingScheduler()
        case _:
            raise ValueError(f"unknown scheduler type: {request.param}")
