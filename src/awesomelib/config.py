"""Configuration helpers for the awesomelib command-line tool.

The library functions never read the environment; only the CLI consults these
helpers to pick its defaults.
"""

import os

from awesomelib.errors import InvalidSeedError

DATE_FORMAT_ENV = "AWESOMELIB_DATE_FORMAT"  # pragma: no mutate
SEED_ENV = "AWESOMELIB_SEED"  # pragma: no mutate

DEFAULT_DATE_FORMAT = "MM/DD/YYYY"


def get_date_format() -> str:
    """Return the date format used by ``awesomelib date format``.

    Returns:
        The value of `AWESOMELIB_DATE_FORMAT`, or ``MM/DD/YYYY`` when it is
        unset or empty.
    """
    return os.environ.get(DATE_FORMAT_ENV) or DEFAULT_DATE_FORMAT


def get_seed() -> int | None:
    """Return the seed for the CLI's random commands.

    Returns:
        The integer value of `AWESOMELIB_SEED`, or None when it is unset.

    Raises:
        InvalidSeedError: If `AWESOMELIB_SEED` is set but not an integer.
    """
    if not (raw := os.environ.get(SEED_ENV)):
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise InvalidSeedError(raw) from e
