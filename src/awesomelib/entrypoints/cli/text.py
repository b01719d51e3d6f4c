"""``awesomelib text``: string helpers on the command line.

Each command reads its input from the TEXT argument and prints the result to
stdout. ``email`` and ``alnum`` report through their exit status (0 valid, 1
invalid) so they compose in shell conditionals.
"""

import logging

import click
import click_extra as clickx

from awesomelib import strings

from .helpers import error, success

logger = logging.getLogger(__name__)


@click.group(cls=clickx.ExtraGroup)
def text() -> None:
    """String formatting and validation."""


@text.command()
@click.argument("value")
def slug(value: str) -> None:
    """Print VALUE as a URL slug."""
    click.echo(strings.to_slug(value))


@text.command()
@click.argument("value")
def kebab(value: str) -> None:
    """Print VALUE in kebab-case."""
    click.echo(strings.to_kebab_case(value))


@text.command()
@click.argument("value")
def camel(value: str) -> None:
    """Print VALUE in camelCase."""
    click.echo(strings.to_camel_case(value))


@text.command()
@click.argument("value")
def capitalize(value: str) -> None:
    """Print VALUE with its first character upper-cased."""
    click.echo(strings.capitalize(value))


@text.command()
@click.argument("value")
@click.option(
    "--length",
    "-n",
    "max_length",
    type=click.IntRange(min=0),
    default=20,
    show_default=True,
    help="Characters to keep before the suffix.",
)
@click.option(
    "--suffix", default="...", show_default=True, help="Text appended when cut."
)
def truncate(value: str, max_length: int, suffix: str) -> None:
    """Print VALUE cut to --length characters."""
    click.echo(strings.truncate_string(value, max_length, suffix))


@text.command()
@click.argument("value")
def words(value: str) -> None:
    """Print the number of whitespace-separated words in VALUE."""
    click.echo(strings.count_words(value))


@text.command()
@click.argument("value")
@click.pass_context
def email(ctx: click.Context, value: str) -> None:
    """Exit 0 if VALUE looks like an email address, 1 otherwise."""
    if strings.is_valid_email(value):
        success(f"{value} looks like an email address.")
        return
    logger.debug("Rejected email candidate %r", value)
    error(f"{value} is not an email address.")
    ctx.exit(1)


@text.command()
@click.argument("value")
@click.pass_context
def alnum(ctx: click.Context, value: str) -> None:
    """Exit 0 if VALUE is only ASCII letters and digits, 1 otherwise."""
    if strings.is_alpha_numeric(value):
        success(f"{value} is alphanumeric.")
        return
    error(f"{value} is not alphanumeric.")
    ctx.exit(1)
