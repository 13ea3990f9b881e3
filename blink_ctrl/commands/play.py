#!/usr/bin/env python3

# Import modules
from . import common

COMMAND = "p"
ARGC = 2
DESCRIPTION = "Play/Pause"
USAGE = (
    "Usage: blink p 0|1 POSITION\n"
    "Example: blink p 0 0 # Pause\n"
    "         blink p 1 4 # Play from 5th position"
)

def make(fields: list[str]) -> bytes:
    # Make payload; out of range positions are clamped, not rejected
    report = common.new_report(COMMAND)
    report[2] = common.to_flag(fields[0])
    report[3] = common.to_position(fields[1])
    return bytes(report)
