#!/usr/bin/env python3
"""
🎨 ASCII Art Color - Color Resolver
===================================
Copyright (c) 2025 PNGN-Tec LLC

Color Specification Parsing
===========================
Turns a user color specification into an RGB triple and the 24-bit ANSI
foreground sequence used by the colorizer.

Accepted Formats
================
- Named colors: the palette in config.NAMED_COLORS, then any name known
  to Pillow's ImageColor table (case-insensitive)
- HEX: #RRGGBB, exactly six hexadecimal digits
- RGB: rgb(r,g,b), three integers each between 0 and 255

Module Interface
================
- parse_color(): Resolve a specification to a Color
- validate_color(): Check a specification without keeping the result
- ColorError: Raised for any invalid specification
"""

import logging
import re
import string
from dataclasses import dataclass

from PIL import ImageColor

from config import NAMED_COLORS, RGBColor, rgb_to_ansi

# Configure logging
logger = logging.getLogger('ascii_color')

HEX_PREFIX = "#"
RGB_PREFIX = "rgb("
RGB_SUFFIX = ")"
HEX_DIGITS = 6
# ASCII decimal with optional sign (no "1_0", no non-ASCII digits)
RGB_CHANNEL = re.compile(r"[+-]?[0-9]+")


class ColorError(ValueError):
    """Invalid color specification."""


@dataclass(frozen=True)
class Color:
    """A resolved color specification."""
    spec: str
    rgb: RGBColor

    @property
    def ansi(self) -> str:
        return rgb_to_ansi(self.rgb)


def _parse_hex(value: str) -> RGBColor:
    digits = value[len(HEX_PREFIX):]
    if not digits:
        raise ColorError("invalid HEX color: missing hexadecimal value")
    if len(digits) != HEX_DIGITS:
        raise ColorError(f"invalid HEX color: expected {HEX_DIGITS} hexadecimal characters")
    if any(ch not in string.hexdigits for ch in digits):
        raise ColorError("invalid HEX color: contains non-hexadecimal character")
    return ImageColor.getrgb(value)


def _parse_rgb(value: str) -> RGBColor:
    if not value.endswith(RGB_SUFFIX):
        raise ColorError("invalid RGB format: expected rgb(r,g,b)")

    channels = value[len(RGB_PREFIX):-len(RGB_SUFFIX)].split(",")
    if len(channels) != 3:
        raise ColorError("invalid RGB format: expected rgb(r,g,b)")

    rgb = []
    for channel in channels:
        channel = channel.strip()
        if not RGB_CHANNEL.fullmatch(channel):
            raise ColorError("invalid RGB value: must be a number")
        number = int(channel)
        if not 0 <= number <= 255:
            raise ColorError("invalid RGB value: must be between 0 and 255")
        rgb.append(number)

    r, g, b = rgb
    return (r, g, b)


def _parse_name(value: str) -> RGBColor:
    name = value.lower()
    if name in NAMED_COLORS:
        return NAMED_COLORS[name]
    if name in ImageColor.colormap:
        r, g, b = ImageColor.getrgb(name)[:3]
        return (r, g, b)
    raise ColorError(f"unsupported color format: {value!r}")


def parse_color(spec: str) -> Color:
    """
    Resolve a color specification.

    Args:
        spec: Named color, #RRGGBB, or rgb(r,g,b)

    Returns:
        Color with the RGB triple and ANSI prefix

    Raises:
        ColorError: If the specification is empty or malformed

    Examples:
        >>> parse_color("red").rgb
        (255, 0, 0)
        >>> parse_color("#00FF80").rgb
        (0, 255, 128)
        >>> parse_color("rgb(1, 2, 3)").ansi
        '\\x1b[38;2;1;2;3m'
    """
    value = spec.strip()
    if not value:
        raise ColorError("missing color value")

    if value.startswith(HEX_PREFIX):
        rgb = _parse_hex(value)
    elif value.lower().startswith(RGB_PREFIX):
        rgb = _parse_rgb(value)
    else:
        rgb = _parse_name(value)

    logger.debug(f"Resolved color {spec!r} to {rgb}")
    return Color(spec=spec, rgb=rgb)


def validate_color(spec: str) -> bool:
    """Raise ColorError if spec is invalid; True otherwise."""
    parse_color(spec)
    return True
