"""``awesomelib date``: date helpers on the command line.

Dates are given in ISO-8601 form (``2024-02-29`` or ``2024-02-29T13:45:00``)
and printed back in ISO-8601 unless a format is requested.

Configuration
- ``AWESOMELIB_DATE_FORMAT`` sets the default pattern for ``date format``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click
import click_extra as clickx

from awesomelib import config, dates

from .helpers import warn
from .params import DATE

if TYPE_CHECKING:
    from datetime import datetime

logger = logging.getLogger(__name__)


@click.group(cls=clickx.ExtraGroup)
def date() -> None:
    """Date formatting and arithmetic."""


@date.command(name="format")
@click.argument("value", type=DATE)
@click.option(
    "--format",
    "-f",
    "fmt",
    default=None,
    help=(
        "Pattern using YYYY, MM and DD tokens "
        "[default: $AWESOMELIB_DATE_FORMAT or MM/DD/YYYY]."
    ),
)
def format_(value: datetime, fmt: str | None) -> None:
    """Print VALUE rendered with a YYYY/MM/DD token pattern."""
    pattern = fmt or config.get_date_format()
    logger.debug("Formatting %s with %r", value.isoformat(), pattern)
    click.echo(dates.format_date(value, pattern))


@date.command()
@click.argument("first", type=DATE)
@click.argument("second", type=DATE)
def between(first: datetime, second: datetime) -> None:
    """Print the number of days between FIRST and SECOND."""
    try:
        click.echo(dates.days_between(first, second))
    except TypeError as e:
        # naive minus aware
        raise click.UsageError(
            "Both dates must either carry a UTC offset or both omit it."
        ) from e


@date.command()
@click.argument("value", type=DATE)
@click.option("--days", type=int, default=0, help="Days to add (may be negative).")
@click.option("--months", type=int, default=0, help="Months to add (may be negative).")
@click.option("--years", type=int, default=0, help="Years to add (may be negative).")
def add(value: datetime, days: int, months: int, years: int) -> None:
    """Print VALUE shifted by the given calendar amounts.

    Years are applied first, then months, then days; day overflow rolls into
    the next month (Jan 31 + 1 month is Mar 3 in a common year), and a notice
    about the roll-over goes to stderr.
    """
    shifted = dates.add_years(value, years)
    shifted = dates.add_months(shifted, months)
    if shifted.day != value.day:
        warn(
            f"Day {value.day} does not exist in the target month; "
            f"rolled over to {shifted.date().isoformat()}."
        )
    shifted = dates.add_days(shifted, days)
    click.echo(shifted.isoformat())


@date.command(name="range")
@click.argument("value", type=DATE)
@click.option(
    "--period",
    type=click.Choice(["week", "month"], case_sensitive=False),
    default="week",
    show_default=True,
    help="Calendar period containing VALUE.",
)
def range_(value: datetime, period: str) -> None:
    """Print the first and last instants of the week or month containing VALUE."""
    span = (
        dates.get_week_range(value)
        if period.lower() == "week"
        else dates.get_month_range(value)
    )
    click.echo(f"{span.start.isoformat()} {span.end.isoformat()}")


@date.command()
@click.argument("year", type=int)
def leap(year: int) -> None:
    """Print 'true' if YEAR is a leap year, 'false' otherwise."""
    click.echo("true" if dates.is_leap_year(year) else "false")
