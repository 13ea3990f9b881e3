#!/usr/bin/env python3

# Import modules
import re

COLOR_MAX = 0xFFFFFF

# Defined colors, in listing order
COLORS = {
    "blue":   0x0000FF,
    "cyan":   0x00FFFF,
    "green":  0x00FF00,
    "purple": 0xFF00FF,
    "red":    0xFF0000,
    "white":  0xFFFFFF,
    "yellow": 0xFFFF00,
}

_HEX_COLOR = re.compile(r'(?:0[xX])?([0-9a-fA-F]+)')

def list_colors() -> list[str]:
    return list(COLORS.keys())

def parse_color(token: str) -> int:
    r"""Resolve a color name or hexadecimal value to a 24-bit RGB integer.

    Defined color names are matched first (case-sensitive). Anything else
    must be a hexadecimal number, optionally prefixed with ``0x``, that
    fits in 24 bits.

    :param token: The color name or hex string (e.g. ``red``, ``454545``).
    :return: The color as ``0xRRGGBB``.
    :raises ValueError: If the token is neither a defined name nor a valid hex color.
    """

    if token in COLORS:
        return COLORS[token]

    match = _HEX_COLOR.fullmatch(token)
    if match is None:
        raise ValueError(f"invalid color '{token}'")
    value = int(match.group(1), 16)
    if value > COLOR_MAX:
        raise ValueError(f"invalid color '{token}'")
    return value

def split_rgb(value: int) -> tuple[int, int, int]:
    return (value & 0xFF0000) >> 16, (value & 0x00FF00) >> 8, value & 0x0000FF
