"""awesomelib CLI entry point.

Defines the top-level ``awesomelib`` command (via Click-Extra), configures
console logging, and registers the helper command groups:

- ``awesomelib text``: slugs, case conversion, truncation, validation.
- ``awesomelib date``: formatting, day counts, calendar arithmetic, ranges.
- ``awesomelib num``: random integers, thousands separators, rounding.
- ``awesomelib gen``: UUIDs, ULIDs and color codes.

Results are printed to stdout; log records and status lines go to stderr.

Examples
    $ awesomelib text slug "Hello World!"
    $ awesomelib date between 2023-01-01 2023-12-31
    $ awesomelib -v gen ulid -n 3
"""

import logging
from typing import TYPE_CHECKING

import click
import click_extra as clickx

from awesomelib import __version__
from awesomelib.logging import config_console_handler, log_startup

from .dates import date as date_group
from .generate import gen as gen_group
from .helpers import parse_log_level
from .numbers import num as num_group
from .text import text as text_group

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """awesomelib command-line interface.

    Small, stateless helpers for strings, numbers, dates, identifiers and
    colors, usable straight from the shell. Every command prints its result on
    stdout so it can be piped into other tools.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (timestamps, logger names and source paths).",
    default=False,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Repeatable "
        "(e.g. -L awesomelib=DEBUG -L click_extra=ERROR) or via "
        "AWESOMELIB_LOGGER_LEVELS (comma/space list)."
    ),
    envvar="AWESOMELIB_LOGGER_LEVELS",
    default=("click_extra=WARNING",),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def awesomelib(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    logger_levels: dict[str, int],
) -> None:
    """awesomelib command-line interface."""

    # 0) compute effective verbosity
    base_level = logging.WARNING
    level = base_level - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    # 1) configure console handler
    use_color = ctx.color is not False  # None or True => allow color
    handlers: list[Handler] = [
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    ]

    # 2) configure root logger; handlers filter by level
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 3) per-logger overrides
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    # 4) startup info
    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


awesomelib.add_command(text_group)
awesomelib.add_command(date_group)
awesomelib.add_command(num_group)
awesomelib.add_command(gen_group)
