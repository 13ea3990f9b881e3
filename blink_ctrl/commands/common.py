#!/usr/bin/env python3

# Import modules
import re
from ..colors import parse_color, split_rgb
from ..duration import clamp

REPORT_SIZE = 9
REPORT_ID = 0x01
POSITION_MAX = 11

_INT_PREFIX = re.compile(r'\s*([+-]?[0-9]+)', re.ASCII)

def new_report(command: str) -> bytearray:
    report = bytearray(REPORT_SIZE)
    report[0] = REPORT_ID
    report[1] = ord(command)
    return report

def to_int(value: str) -> int:
    r"""Parse the leading integer of a string, like C's atoi().

    Text without a leading integer parses as 0.

    :param value: The string to parse.
    :return: The parsed integer.
    """

    match = _INT_PREFIX.match(value)
    return int(match.group(1)) if match else 0

def to_flag(value: str) -> int:
    return 0x01 if to_int(value) != 0 else 0x00

def to_position(value: str) -> int:
    return clamp(to_int(value), 0, POSITION_MAX)

def put_color(report: bytearray, color: str) -> None:
    report[2:5] = bytes(split_rgb(parse_color(color)))

def put_duration(report: bytearray, offset: int, duration: int) -> None:
    report[offset:offset + 2] = duration.to_bytes(2, 'big')
