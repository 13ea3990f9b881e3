#!/usr/bin/env python3

# Import modules
from . import common

COMMAND = "n"
ARGC = 1
DESCRIPTION = "Set RGB color now"
USAGE = (
    "Usage: blink n COLOR\n"
    "Example: blink n 454545"
)

def make(fields: list[str]) -> bytes:
    # Make payload
    report = common.new_report(COMMAND)
    common.put_color(report, fields[0])
    return bytes(report)
