"""Color code helpers."""

import random

HEX_DIGITS = "0123456789ABCDEF"


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Convert 0-255 RGB channels to an upper-case ``#RRGGBB`` code.

    Channels outside ``[0, 255]`` produce an undefined (but non-failing) code.

    Example:
        ```py
        rgb_to_hex(255, 165, 0)  # "#FFA500"
        ```
    """
    return "#" + format((1 << 24) | (r << 16) | (g << 8) | b, "X")[1:]


def generate_random_color(*, rng: random.Random | None = None) -> str:
    """Return a random upper-case ``#RRGGBB`` color code."""
    source = rng or random
    return "#" + "".join(source.choice(HEX_DIGITS) for _ in range(6))
