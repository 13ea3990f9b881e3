#!/usr/bin/env python3

# Import modules
from . import common
from . import fade_color

COMMAND = "P"
ARGC = 3
DESCRIPTION = "Set pattern entry"
USAGE = (
    "Usage: blink P COLOR FADE POSITION\n"
    "Example: blink P green .5s 2 # 3rd pattern green with 500ms fade time"
)

def make(fields: list[str]) -> bytes:
    # Check arguments
    position = common.to_int(fields[2])
    if position < 0 or position > common.POSITION_MAX:
        raise ValueError(f"invalid position {position}")

    # Make payload
    report = common.new_report(COMMAND)
    report[7] = position
    fade_color.fill(report, fields[0], fields[1])
    return bytes(report)
