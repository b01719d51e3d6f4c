"""``awesomelib num``: number helpers on the command line.

Configuration
- ``AWESOMELIB_SEED`` seeds ``num random`` when ``--seed`` is not given.
"""

import logging
import random

import click
import click_extra as clickx

from awesomelib import config, numbers
from awesomelib.errors import InvalidSeedError

logger = logging.getLogger(__name__)


def resolve_rng(seed: int | None) -> random.Random | None:
    """Return a seeded generator, falling back to ``AWESOMELIB_SEED``.

    Returns:
        A `random.Random` seeded from `seed` or the environment, or None to use
        the shared module-level generator.

    Raises:
        click.ClickException: If ``AWESOMELIB_SEED`` is not an integer.
    """
    if seed is None:
        try:
            seed = config.get_seed()
        except InvalidSeedError as e:
            raise click.ClickException(str(e)) from e
    if seed is None:
        return None
    logger.debug("Seeding random source with %d", seed)
    return random.Random(seed)


@click.group(cls=clickx.ExtraGroup)
def num() -> None:
    """Random numbers, formatting and rounding."""


@num.command(name="random")
@click.argument("minimum", type=int)
@click.argument("maximum", type=int)
@click.option("--seed", type=int, default=None, help="Seed for reproducible output.")
def random_(minimum: int, maximum: int, seed: int | None) -> None:
    """Print a random integer between MINIMUM and MAXIMUM (inclusive)."""
    if minimum > maximum:
        raise click.BadParameter(
            f"MINIMUM ({minimum}) must not exceed MAXIMUM ({maximum}).",
            param_hint="MINIMUM",
        )
    click.echo(numbers.random_number(minimum, maximum, rng=resolve_rng(seed)))


@num.command(name="format")
@click.argument("value", type=float)
def format_(value: float) -> None:
    """Print VALUE with comma thousands separators."""
    click.echo(numbers.format_number(value))


@num.command(name="round")
@click.argument("value", type=float)
@click.option(
    "--places",
    "-p",
    type=click.IntRange(min=0),
    default=2,
    show_default=True,
    help="Decimal places to keep.",
)
def round_(value: float, places: int) -> None:
    """Print VALUE rounded half-up to --places decimals."""
    click.echo(numbers.round_to(value, places))
