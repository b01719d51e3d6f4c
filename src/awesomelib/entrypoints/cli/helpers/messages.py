"""Terminal message helpers for the awesomelib CLI.

Status lines go to stderr so stdout only carries command results. Glyphs fall
back to ASCII when stderr cannot encode the emoji.
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if `character` can be encoded on Click's stderr stream."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(emoji: str, fallback: str) -> str:
    return emoji if _supports_character(emoji) else fallback


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line (``⚠️`` or ``[!]``) to stderr."""
    click.secho(f"{_glyph('⚠️', '[!]')}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line (``✅`` or ``[OK]``) to stderr."""
    click.secho(f"{_glyph('✅', '[OK]')}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line (``❌`` or ``[X]``) to stderr."""
    click.secho(f"{_glyph('❌', '[X]')}  {msg}", fg="red", bold=True, err=True)
