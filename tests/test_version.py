"""Package metadata."""

import importlib

meta = importlib.import_module("blink_ctrl.__version__")


def test_author_matches_copyright() -> None:
    assert meta.__author__ in meta.__copyright__
    assert meta.__author_email__.startswith("vivien.")
    assert meta.__version__ == "1.0.0"
