"""Console logging for the awesomelib CLI.

The utility modules never log; only the CLI does. `awesomelib` attaches one
Rich handler to the root logger, on stderr, so piping a command's stdout into
another tool never picks up log lines. Click-Extra is the only dependency that
logs during a normal run, and its lines are tagged ``[click_extra]``.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "awesomelib"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]

_PLAIN_FORMAT = "%(prefix)s %(message)s"
_DEBUG_FORMAT = "%(asctime)s %(name)s: %(message)s"


def is_project_logger(name: str) -> bool:
    """Return True for the ``awesomelib`` logger and its children only."""
    return name == PROJECT_PREFIX or name.startswith(f"{PROJECT_PREFIX}.")


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag each record with the package it came from.

    Sets ``record.prefix``, which the plain console format expects: empty for
    awesomelib's own loggers, ``[<top-level package>]`` for anything else.
    Records are never dropped.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if is_project_logger(record.name):
            record.prefix = ""
        else:
            package, _, _ = record.name.partition(".")
            record.prefix = f"[{package}]"
        return True


def _console(color: bool) -> Console:
    # --no-color from click-extra also switches Rich to plain text
    color_system: ColorSystem | None = "auto" if color else None
    return Console(color_system=color_system, stderr=True)


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr handler behind ``-v``, ``-q`` and ``--debug``.

    Normal runs print only the message, tagged with its package when it does
    not come from awesomelib. ``--debug`` lowers the handler to DEBUG and
    swaps the tag for a timestamp, the logger name and a clickable source path.

    Args:
        level: Threshold computed from the verbosity flags; ignored when
            `debug_mode` is set.
        debug_mode: Value of the ``--debug`` flag.
        color: False when click-extra's ``--no-color`` is in effect.

    Returns:
        RichHandler: Ready to pass to `logging.basicConfig`.
    """
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=_console(color),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    handler.setFormatter(
        logging.Formatter(fmt=_DEBUG_FORMAT if debug_mode else _PLAIN_FORMAT)
    )
    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler

def log_startup(
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    logger_levels: dict[str, int],
) -> None:
    """Report the CLI version at INFO and the runtime around it at DEBUG.

    Args:
        logger: Logger used to emit startup messages.
        app_version: Application version string to display.
        level: Effective console logging level (numeric).
        handlers: Active logging handlers attached to the root logger.
        logger_levels: Mapping of logger names to their configured numeric levels.
    """

    logger.info(
        "awesomelib %s (console=%s)",
        app_version,
        logging.getLevelName(level),
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("Click: %s", _distribution_version("click"))
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if logger_levels:
        logger.debug(
            "Per-logger overrides: %s",
            {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()},
        )
    else:
        logger.debug("Per-logger overrides: <none>")


def _distribution_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:
        return "<unknown>"
