"""JSON serialization with awesomelib's error types."""

import json
from typing import Any

from awesomelib.errors import CyclicReferenceError, UnserializableValueError


def dumps(value: Any) -> str:
    """Serialize `value` to JSON, preserving key insertion order.

    Raises:
        CyclicReferenceError: If `value` contains itself.
        UnserializableValueError: If `value` holds something with no JSON form.
    """
    try:
        return json.dumps(value)
    except ValueError as e:
        # json signals cycles with "Circular reference detected"
        raise CyclicReferenceError() from e
    except TypeError as e:
        raise UnserializableValueError(str(e)) from e
