#!/usr/bin/env python3

# Import modules
import argparse
from .commands import *

COMMANDS = {
    fade_color.COMMAND: fade_color,
    server_down.COMMAND: server_down,
    set_color.COMMAND: set_color,
    play.COMMAND: play,
    set_pattern.COMMAND: set_pattern,
}

USAGE = "blink [OPTIONS] COMMAND [FIELD...]"

USAGE_OPTIONS = (
    "Options:\n"
    "\t-h\tprint this help message\n"
    "\t-c\tlist defined colors"
)

class UsageError(ValueError):
    """Raised when a command is missing, unknown or given the wrong number of fields."""

class ArgumentParser(argparse.ArgumentParser):
    # Report parser errors to the caller instead of exiting with status 2
    def error(self, message):
        raise argparse.ArgumentError(None, message)

def helper_commands_table() -> str:
    lines = ["Commands:"]
    for name, command in COMMANDS.items():
        lines.append(f"  {name}\t{command.DESCRIPTION}")
    return "\n".join(lines)

def make_report(command: str, fields: list[str]) -> bytes:
    r"""Validate a command and its fields, and encode the matching report.

    The field count is checked against the command's arity before any
    field is parsed.

    :param command: The single-letter command (c, D, n, p or P).
    :param fields: The positional fields following the command.
    :return: The encoded report.
    :raises UsageError: On a missing, unknown or wrongly used command.
    :raises ValueError: On an invalid field value; the message ends with the command usage.
    """

    # Check arguments
    if command is None or len(command) != 1:
        raise UsageError("Put colors! Try 'blink -h' for more information.")
    if command not in COMMANDS:
        raise UsageError(f"unknown command '{command}'. Try 'blink -h' for help.")
    handler = COMMANDS[command]
    if len(fields) != handler.ARGC:
        raise UsageError(f"{handler.DESCRIPTION}\n{handler.USAGE}")

    # Make payload
    try:
        return handler.make(fields)
    except ValueError as e:
        raise ValueError(f"{e}\n{handler.USAGE}") from e

def parse(argv: list[str]):
    parser = ArgumentParser(
        prog = "blink",
        usage = USAGE,
        description = "Encode a blink(1) command into a HID report written to stdout.",
        epilog = helper_commands_table(),
        formatter_class = argparse.RawDescriptionHelpFormatter
    )

    ## Global option
    parser.add_argument(
        "-c", "--colors",
        dest = "list_colors",
        default = False,
        action = "store_true",
        help = 'list defined colors'
    )
    parser.add_argument(
        "-v", "--verbose",
        default = False,
        action = "store_true",
        help = 'dump the report to stderr'
    )

    # Command and its fields
    parser.add_argument(
        "command",
        nargs = "?",
        help = 'command letter (see below)'
    )
    parser.add_argument(
        "fields",
        metavar = "field",
        nargs = "*",
        help = 'command fields'
    )

    ## Do parse
    return parser.parse_args(argv)
