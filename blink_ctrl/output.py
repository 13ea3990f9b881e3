#!/usr/bin/env python3

# Import modules
import sys
from typing import BinaryIO, Optional

def send(report: bytes, stream: Optional[BinaryIO] = None) -> None:
    r"""Write a report to the device input stream as a single raw block.

    The stream is usually redirected to the blink(1) hidraw node,
    e.g. ``blink n red > /dev/hidraw0``.

    :param report: The encoded report.
    :param stream: Binary stream to write to. Defaults to standard output.
    :raises OSError: If the report could not be written completely.
    """

    if stream is None:
        stream = sys.stdout.buffer
    written = stream.write(report)
    if written != len(report):
        raise OSError(f"short write: {written} of {len(report)} bytes")
    stream.flush()
