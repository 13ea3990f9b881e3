#!/usr/bin/env python3

# Import modules
from . import common
from ..duration import require_duration

COMMAND = "D"
ARGC = 2
DESCRIPTION = "Serverdown tickle/off"
USAGE = (
    "Usage: blink D 0|1 DURATION\n"
    "Example: blink D 0 0 # stop server tickle mode\n"
    "         blink D 1 2000ms # start server tickle mode with 2s time"
)

def make(fields: list[str]) -> bytes:
    # Check arguments
    duration = require_duration(fields[1])

    # Make payload
    report = common.new_report(COMMAND)
    report[2] = common.to_flag(fields[0])
    common.put_duration(report, 3, duration)
    return bytes(report)
