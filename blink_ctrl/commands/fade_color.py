#!/usr/bin/env python3

# Import modules
from . import common
from ..duration import require_duration

COMMAND = "c"
ARGC = 2
DESCRIPTION = "Fade to RGB color"
USAGE = (
    "Usage: blink c COLOR FADE\n"
    "Example: blink c red 50"
)

def fill(report: bytearray, color: str, fade: str) -> None:
    # Fade time goes to bytes 5-6, color to bytes 2-4
    common.put_duration(report, 5, require_duration(fade))
    common.put_color(report, color)

def make(fields: list[str]) -> bytes:
    # Make payload
    report = common.new_report(COMMAND)
    fill(report, fields[0], fields[1])
    return bytes(report)
