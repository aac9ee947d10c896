# -*- coding: utf-8 -*-
"""
propconv.converters.color
~~~~~~~~~~~~~~~~~~~~~~~~~


"""

from __future__ import annotations

import re
from typing import Any, Dict, Optional, Type

from propconv.color import Color
from propconv.converters.context import register_converter_type
from propconv.converters.converter import Converter
from propconv.converters.errors import ComponentRangeError, MalformedValueError, UnsupportedTypeError
from propconv.util import INT_MAX, INT_MIN, decode_int

HEX_COLOR_PREFIX = "#"

# Matches the string representation of colors, like "Color[r=255,g=0,b=0]", "r=255,g=0,b=0" or "255,0,0"
COLOR_COMPONENTS_PATTERN = re.compile(
    r"^(?:[A-Za-z_][A-Za-z\d._]*)?\[?"
    r"(?:r=)?(\d{1,3}),\s*(?:g=)?(\d{1,3}),\s*(?:b=)?(\d{1,3})(?:,\s*(?:a=)?(\d{1,3}))?"
    r"\]?$",
    re.IGNORECASE,
)

HEX_DIGITS_PATTERN = re.compile(r"[0-9A-Fa-f]+")

NAMED_COLORS: Dict[str, Color] = {
    "black": Color.BLACK,
    "blue": Color.BLUE,
    "cyan": Color.CYAN,
    "darkgray": Color.DARK_GRAY,
    "darkgrey": Color.DARK_GRAY,
    "gray": Color.GRAY,
    "grey": Color.GRAY,
    "green": Color.GREEN,
    "lightgray": Color.LIGHT_GRAY,
    "lightgrey": Color.LIGHT_GRAY,
    "magenta": Color.MAGENTA,
    "orange": Color.ORANGE,
    "pink": Color.PINK,
    "red": Color.RED,
    "white": Color.WHITE,
    "yellow": Color.YELLOW,
}


@register_converter_type("color", "colour")
class ColorConverter(Converter[Color]):
    """
    Converts configuration values into :class:`Color` objects.

    Compatible with the web color formats supported by browsers with CSS, such as ``#RGB``, ``#RGBA``,
    ``#RRGGBB`` and ``#RRGGBBAA``, which will be used if the value is prefixed with ``#``.

    Besides those, named colors like ``dark_gray`` and component lists like ``Color[r=255,g=0,b=0]`` or
    ``255,0,0`` are accepted. Any other value will be decoded as a literal integer holding the packed RGB
    channels, so to decode a literal hexadecimal number, prefix it with ``0x`` instead of ``#``.

    """

    TYPE: str = "color"

    dtype: Type[Color] = Color

    def _to_str(self, value: Any) -> str:
        if isinstance(value, Color):
            return str(value)
        return str(self._to_dtype(Color, value))

    def _to_dtype(self, dtype: Type[Color], value: Any) -> Color:
        if not issubclass(dtype, Color):
            raise UnsupportedTypeError(f"Unable to convert '{type(value).__name__}' to type: {dtype.__name__}")
        if isinstance(value, Color):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            if not INT_MIN <= value <= INT_MAX:
                raise MalformedValueError(f"Invalid color value {value}, exceeding the 32 bit integer range")
            return Color.from_rgb(value)
        if not isinstance(value, str):
            raise MalformedValueError(f"Expected str or {Color.__name__}, not: {type(value)}")

        value = value.strip()
        color = parse_named_color(value)
        if color is not None:
            return color

        if value.startswith(HEX_COLOR_PREFIX):
            return parse_web_color(value)

        if "," in value:
            return parse_color_components(value)

        try:
            return Color.from_rgb(decode_int(value))

        except ValueError as e:
            raise MalformedValueError(f"Invalid color string '{value}': {str(e)}") from e


def parse_named_color(value: str) -> Optional[Color]:
    name = re.sub(r"[\s_\-]", "", value.lower())
    return NAMED_COLORS.get(name, None)


def parse_web_color(value: str) -> Color:
    """
    Parse a web based hexadecimal color, prefixed with ``#``.

    Short notations with 3 or 4 digits get each digit expanded to a full channel, while 6 or 8 digits
    are parsed as pairs. The optional 4th or 4th pair of digits specifies the alpha channel.

    Parameters
    ----------
    value : str
        The web friendly hexadecimal color string

    Returns
    ----------
    color: Color
        The color this string represents

    Raises
    ----------
    MalformedValueError
        If the hexadecimal digits contain invalid characters or are of unexpected length.

    """
    digits = value[len(HEX_COLOR_PREFIX) :]
    if len(digits) not in [3, 4, 6, 8]:
        raise MalformedValueError(
            f"Invalid hexadecimal color '{value}', expected 3, 4, 6, or 8 hex digits. "
            "If literal value decoding is required, specify 0x instead of #"
        )
    if not HEX_DIGITS_PATTERN.fullmatch(digits):
        raise MalformedValueError(f"Invalid hexadecimal color '{value}', containing non hex digits")

    if len(digits) <= 4:
        channels = [int(d, 16) * 17 for d in digits]
    else:
        channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
    return Color(*channels)


def parse_color_components(value: str) -> Color:
    """
    Parse a color from a list of decimal components, e.g. as represented by ``str(Color)``.

    Accepts values like ``Color[r=255,g=255,b=255]``, ``[r=255,g=255,b=255]``, ``r=255,g=255,b=255``,
    ``255,255,255`` or ``Color[r=255,g=255,b=255,a=128]``.
    """
    match = COLOR_COMPONENTS_PATTERN.match(value)
    if match is None:
        raise MalformedValueError(f"Invalid color string '{value}', unable to parse components")

    channels = [int(c) for c in match.groups() if c is not None]
    if any(c > 255 for c in channels):
        raise ComponentRangeError(f"Invalid color string '{value}', components must be between 0 and 255")
    return Color(*channels)
