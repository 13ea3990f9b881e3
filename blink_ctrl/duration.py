#!/usr/bin/env python3

# Import modules
import decimal
import re

DURATION_MAX = 0xFFFF   # stored on two bytes
DURATION_INVALID = -1

# Leading decimal number, as accepted by strtof(); ASCII digits only
_NUMBER_PREFIX = re.compile(r'\s*([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)', re.ASCII)

# Unit suffix -> conversion to hundredths of a second
_UNITS = {
    "":   lambda value: value,
    "s":  lambda value: value * 100,
    "ms": lambda value: value / 10,
}

def clamp(value, low, high):
    return max(low, min(high, value))

def parse_duration(token: str) -> int:
    r"""Parse a duration into hundredths of a second, as used by the blink(1).

    Leading whitespace is skipped. A bare number is taken as hundredths of a
    second. The ``s`` and ``ms`` suffixes convert from seconds and
    milliseconds. Fractional hundredths are truncated and the result is
    clamped to ``[-1, 0xFFFF]``.

    :param token: The duration (e.g. ``50``, ``.5s``, ``2000ms``).
    :return: The duration, or ``DURATION_INVALID`` (-1) if it cannot be parsed
             or would be negative.
    """

    match = _NUMBER_PREFIX.match(token)
    if match is None:
        return DURATION_INVALID

    convert = _UNITS.get(token[match.end():])
    if convert is None:
        return DURATION_INVALID

    # Decimal keeps "2.3s" at 230 where a binary float lands on 229.99...
    with decimal.localcontext() as ctx:
        ctx.traps[decimal.Overflow] = False
        value = convert(decimal.Decimal(match.group(1)))
    return int(clamp(value, DURATION_INVALID, DURATION_MAX))

def require_duration(token: str) -> int:
    duration = parse_duration(token)
    if duration < 0:
        raise ValueError(f"invalid duration '{token}'")
    return duration
