"""Unique identifier helpers.

Both helpers delegate to process-wide generators from
`awesomelib.adapters.id_generators`, so ULIDs produced across threads stay
monotonic.
"""

from awesomelib.adapters.id_generators import ULIDGenerator, UUIDv4Generator

_uuid_generator = UUIDv4Generator()
_ulid_generator = ULIDGenerator()


def generate_uuid() -> str:
    """Return a random UUIDv4 in canonical 36-character form."""
    return _uuid_generator.new_id()


def generate_ulid() -> str:
    """Return a 26-character ULID, never sorting below the previous one."""
    return _ulid_generator.new_id()
