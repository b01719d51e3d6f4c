"""``awesomelib gen``: identifiers and colors."""

import click
import click_extra as clickx

from awesomelib import colors, identifiers

from .numbers import resolve_rng

_COUNT_OPTION = click.option(
    "--count",
    "-n",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="How many values to print, one per line.",
)


@click.group(cls=clickx.ExtraGroup)
def gen() -> None:
    """Generate identifiers and colors."""


@gen.command()
@_COUNT_OPTION
def uuid(count: int) -> None:
    """Print random UUIDv4 identifiers."""
    for _ in range(count):
        click.echo(identifiers.generate_uuid())


@gen.command()
@_COUNT_OPTION
def ulid(count: int) -> None:
    """Print monotonic ULIDs (sortable by creation time)."""
    for _ in range(count):
        click.echo(identifiers.generate_ulid())


@gen.command()
@_COUNT_OPTION
@click.option("--seed", type=int, default=None, help="Seed for reproducible output.")
def color(count: int, seed: int | None) -> None:
    """Print random #RRGGBB color codes."""
    rng = resolve_rng(seed)
    for _ in range(count):
        click.echo(colors.generate_random_color(rng=rng))


@gen.command(name="hex")
@click.argument("red", type=click.IntRange(0, 255))
@click.argument("green", type=click.IntRange(0, 255))
@click.argument("blue", type=click.IntRange(0, 255))
def hex_(red: int, green: int, blue: int) -> None:
    """Print the #RRGGBB code for RED GREEN BLUE channels (0-255)."""
    click.echo(colors.rgb_to_hex(red, green, blue))
