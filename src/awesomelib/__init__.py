"""AWESOMELIB

A collection of small, stateless utility functions for numbers, strings,
sequences, mappings and dates, plus memoize/debounce/throttle helpers.

Each data-type group lives in its own module and is re-exported here as a
namespace, e.g. ``awesomelib.strings.to_slug("Hello World!")``.
"""

from awesomelib import (
    arrays,
    colors,
    dates,
    functional,
    identifiers,
    numbers,
    objects,
    strings,
)

__all__ = [
    "__version__",
    "arrays",
    "colors",
    "dates",
    "functional",
    "identifiers",
    "numbers",
    "objects",
    "strings",
]
__version__ = "0.1.0"
