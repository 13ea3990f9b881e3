"""Hex table used by --verbose."""

import io

from blink_ctrl.utils import dump_data


def test_report_fits_one_row() -> None:
    out = io.StringIO()
    dump_data(bytes([0x01, 0x6E, 0xFF, 0, 0, 0, 0, 0, 0]), file=out)
    assert out.getvalue().splitlines() == [
        "| Offset   | 00 | 01 | 02 | 03 | 04 | 05 | 06 | 07 | 08 |",
        "|----------+----+----+----+----+----+----+----+----+----+",
        "| 00000000 | 01 | 6E | FF | 00 | 00 | 00 | 00 | 00 | 00 |",
    ]


def test_short_last_row_is_padded() -> None:
    out = io.StringIO()
    dump_data(b"\xaa\xbb\xcc", columns=2, file=out)
    assert out.getvalue().splitlines()[2:] == [
        "| 00000000 | AA | BB |",
        "| 00000002 | CC | ** |",
    ]


def test_empty_data() -> None:
    out = io.StringIO()
    dump_data(b"", file=out)
    assert out.getvalue().splitlines()[-1] == "| 00000000 | ** | ** | ** | ** | ** | ** | ** | ** | ** |"
