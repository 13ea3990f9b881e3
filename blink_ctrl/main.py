#!/usr/bin/env python3

# Import modules
import argparse
import sys
from typing import Optional
from . import arguments
from . import colors
from . import output
from . import utils

# Send command
def send_command(params: argparse.Namespace) -> int:
    # List colors
    if params.list_colors:
        for name in colors.list_colors():
            print(name)
        return 0

    # Make payload
    report = arguments.make_report(params.command, params.fields)
    if params.verbose:
        print("Report:", file=sys.stderr)
        utils.dump_data(report)

    # Send payload
    output.send(report)

    return 0

# Entrypoint
def main(argv: Optional[list[str]] = None) -> int:
    try:
        # Parse arguments
        args = arguments.parse(sys.argv[1:] if argv is None else argv)
        # Send command
        return send_command(args)
    except argparse.ArgumentError as e:
        print(f"{e}\n{arguments.USAGE_OPTIONS}", file=sys.stderr)
        return 1
    except (ValueError, OSError) as e:
        print(f"{e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        return 1
