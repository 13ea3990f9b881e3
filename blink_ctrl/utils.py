#!/usr/bin/env python3

# Import modules
from itertools import chain
import sys

REPORT_COLUMNS = 9

def dump_data(data: bytes, columns: int = REPORT_COLUMNS, file=None) -> None:
    r"""Print binary data as a hex table with offsets.

    One row holds ``columns`` bytes, so a blink(1) report fits on a single
    row; a short last row is padded with '**'. The table goes to standard
    error so it never mixes with a report written to stdout.

    :param data: The binary data to display.
    :param columns: Bytes per row.
    :param file: Text stream to print to. Defaults to standard error.
    :return: None
    """

    if file is None:
        file = sys.stderr

    # Header
    header = ' | '.join(f"{i:02X}" for i in range(columns))
    print(f"| Offset   | {header} |", file=file)
    print("|----------+" + "----+" * columns, file=file)
    # Body
    if not data:
        print("| 00000000 |" + " ** |" * columns, file=file)
        return
    for i in range(0, len(data), columns):
        chunk = data[i:i + columns]
        hex_bytes = ' | '.join(chain((f"{b:02X}" for b in chunk), ('**' for _ in range(columns - len(chunk)))))
        print(f"| {i:08X} | {hex_bytes} |", file=file)
