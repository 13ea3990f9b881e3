"""Color name and hex value resolution."""

import pytest

from blink_ctrl.colors import COLORS, list_colors, parse_color, split_rgb


@pytest.mark.parametrize("name, value", [
    ("blue", 0x0000FF),
    ("cyan", 0x00FFFF),
    ("green", 0x00FF00),
    ("purple", 0xFF00FF),
    ("red", 0xFF0000),
    ("white", 0xFFFFFF),
    ("yellow", 0xFFFF00),
])
def test_defined_colors(name: str, value: int) -> None:
    assert parse_color(name) == value


def test_channels_rebuild_the_defined_value() -> None:
    for value in COLORS.values():
        r, g, b = split_rgb(value)
        assert (r << 16) | (g << 8) | b == value


def test_list_colors_keeps_registry_order() -> None:
    assert list_colors() == ["blue", "cyan", "green", "purple", "red", "white", "yellow"]


@pytest.mark.parametrize("token, value", [
    ("0", 0x000000),
    ("f", 0x00000F),
    ("454545", 0x454545),
    ("FfFfFf", 0xFFFFFF),
    ("0x00ff00", 0x00FF00),
    ("00abcdef", 0xABCDEF),
])
def test_hex_colors(token: str, value: int) -> None:
    assert parse_color(token) == value


@pytest.mark.parametrize("token", [
    "",
    "Red",
    "1000000",
    "fffffff",
    "12345g",
    "#ff0000",
    " ff",
    "-1",
    "0x",
])
def test_invalid_colors(token: str) -> None:
    with pytest.raises(ValueError, match="invalid color"):
        parse_color(token)


def test_split_rgb() -> None:
    assert split_rgb(0x123456) == (0x12, 0x34, 0x56)
