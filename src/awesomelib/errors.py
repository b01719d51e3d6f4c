"""Errors raised by awesomelib helpers.

Most helpers degrade silently or follow IEEE-754 propagation; the classes
below cover the few operations that fail loudly.
"""


class AwesomeLibError(Exception):
    """Base class for all awesomelib errors."""


class InvalidDateError(AwesomeLibError, ValueError):
    """Raised when a value cannot be interpreted as a date."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid date: {value!r}")


class CyclicReferenceError(AwesomeLibError, ValueError):
    """Raised when a structure to be serialized references itself."""

    def __init__(self, message: str = "Cyclic reference detected") -> None:
        super().__init__(message)


class UnserializableValueError(AwesomeLibError, TypeError):
    """Raised when a value has no JSON representation."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Value cannot be serialized: {reason}")


class PathConflictError(AwesomeLibError, TypeError):
    """Raised when a nested path runs through a non-mapping value."""

    def __init__(self, path: list[str], key: str) -> None:
        self.path = path
        self.key = key
        super().__init__(
            f"Cannot descend into {key!r} along path {path!r}: not a mapping"
        )


class InvalidSeedError(AwesomeLibError, ValueError):
    """Raised when AWESOMELIB_SEED is set to something other than an integer."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"AWESOMELIB_SEED must be an integer, got {value!r}")
