"""Fixtures for id_generator contract tests."""

from collections.abc import Iterable

import pytest

from awesomelib.adapters.id_generators import ULIDGenerator, UUIDv4Generator
from awesomelib.interfaces.id_generator import IdGenerator


@pytest.fixture(params=["ulid", "uuid4"])
def id_generator(request: pytest.FixtureRequest) -> Iterable[IdGenerator]:
    """Yield a fresh IdGenerator for each backend.

    Supported params:
      - `"ulid"` → ULIDGenerator
      - `"uuid4"` → UUIDv4Generator
    """
    match request.param:
        case "ulid":
            yield ULIDGenerator()
        case "uuid4":
            yield UUIDv4Generator()
        case _:
            raise ValueError(f"unknown id generator type: {request.param}")


@pytest.fixture(params=["ulid"])
def monotonic_id_generator(request: pytest.FixtureRequest) -> Iterable[IdGenerator]:
    """Yield IdGenerators that promise non-decreasing IDs."""
    match request.param:
        case "ulid":
            yield ULIDGenerator()
        case _:
            raise ValueError(f"unknown monotonic id generator type: {request.param}")
