"""ID generators backing `awesomelib.identifiers`."""

import threading
import uuid

from ulid import monotonic

from awesomelib.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class ULIDGenerator(IdGenerator):
    """Thread-safe monotonic ULID generator.

    ULIDs are 26-character, lexicographically sortable identifiers made of a
    millisecond timestamp and a random component. Within the same millisecond
    the `ulid-py` monotonic provider increments the random part, so IDs from
    one generator never sort backwards.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self) -> str:
        """Generate a new ULID (serialized across threads)."""
        with self._lock:
            return str(monotonic.new())


class UUIDv4Generator(IdGenerator):
    """Random UUIDv4 generator (36-character canonical form)."""

    def new_id(self) -> str:
        """Generate a new UUID."""
        return str(uuid.uuid4())
