import re

import pytest

from ascii_color import Color, ColorError, parse_color, validate_color
from config import NAMED_COLORS


@pytest.mark.parametrize("name", ["red", "green", "yellow", "orange", "blue", "magenta"])
def test_named_palette_colors(name: str) -> None:
    color = parse_color(name)
    assert color.rgb == NAMED_COLORS[name]
    r, g, b = NAMED_COLORS[name]
    assert color.ansi == f"\033[38;2;{r};{g};{b}m"


def test_names_are_case_insensitive() -> None:
    assert parse_color("  RED ").rgb == (255, 0, 0)


def test_pillow_color_names() -> None:
    assert parse_color("navy").rgb == (0, 0, 128)


def test_hex_color() -> None:
    assert parse_color("#00FF80").rgb == (0, 255, 128)
    assert parse_color("#0a0B0c").rgb == (10, 11, 12)


def test_rgb_color() -> None:
    color = parse_color("rgb(1, 2, 3)")
    assert color.rgb == (1, 2, 3)
    assert color.ansi == "\033[38;2;1;2;3m"
    assert parse_color("rgb(0,0,255)").rgb == (0, 0, 255)


def test_color_keeps_original_spec() -> None:
    assert parse_color("rgb(0,0,0)") == Color(spec="rgb(0,0,0)", rgb=(0, 0, 0))


@pytest.mark.parametrize("spec,message", [
    ("#", "missing hexadecimal value"),
    ("#12345", "expected 6 hexadecimal characters"),
    ("#1234567", "expected 6 hexadecimal characters"),
    ("#12345g", "non-hexadecimal character"),
    ("rgb(1,2)", "expected rgb(r,g,b)"),
    ("rgb(1,2,3", "expected rgb(r,g,b)"),
    ("rgb(a,2,3)", "must be a number"),
    ("rgb(1,2,256)", "between 0 and 255"),
    ("rgb(-1,2,3)", "between 0 and 255"),
    ("rgb(1_0,0,0)", "must be a number"),
    ("rgb(١,0,0)", "must be a number"),
    ("rgb(1.5,0,0)", "must be a number"),
    ("notacolor", "unsupported color format"),
    ("", "missing color value"),
])
def test_invalid_colors(spec: str, message: str) -> None:
    with pytest.raises(ColorError, match=re.escape(message)):
        parse_color(spec)


def test_validate_color() -> None:
    assert validate_color("blue")
    with pytest.raises(ColorError):
        validate_color("rgb()")
