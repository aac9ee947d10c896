# -*- coding: utf-8 -*-
"""
propconv.color
~~~~~~~~~~~~~~


"""

from __future__ import annotations

from typing import Any, Tuple

import numpy as np


class Color:
    """
    Immutable RGBA color, with each channel in the range of 0 to 255.

    The alpha channel defaults to 255 and a color is considered opaque with the full alpha value.

    """

    BLACK: Color
    BLUE: Color
    CYAN: Color
    DARK_GRAY: Color
    GRAY: Color
    GREEN: Color
    LIGHT_GRAY: Color
    MAGENTA: Color
    ORANGE: Color
    PINK: Color
    RED: Color
    WHITE: Color
    YELLOW: Color

    __slots__ = ("__red", "__green", "__blue", "__alpha")

    def __init__(self, red: int, green: int, blue: int, alpha: int = 255) -> None:
        self.__red = _assert_channel("red", red)
        self.__green = _assert_channel("green", green)
        self.__blue = _assert_channel("blue", blue)
        self.__alpha = _assert_channel("alpha", alpha)

    @classmethod
    def from_rgb(cls, rgb: int) -> Color:
        """
        Create an opaque color from a packed 0xRRGGBB integer. Bits above the lowest 24 are ignored.
        """
        return cls((rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(red={self.red}, green={self.green}, blue={self.blue}, alpha={self.alpha})"

    def __str__(self) -> str:
        channels = f"r={self.red},g={self.green},b={self.blue}"
        if not self.is_opaque():
            channels += f",a={self.alpha}"
        return f"{type(self).__name__}[{channels}]"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.to_tuple() == other.to_tuple()

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    def __setattr__(self, attr: str, value: Any) -> None:
        if hasattr(self, attr):
            raise AttributeError(f"'{type(self).__name__}' object is immutable")
        super().__setattr__(attr, value)

    @property
    def red(self) -> int:
        return self.__red

    @property
    def green(self) -> int:
        return self.__green

    @property
    def blue(self) -> int:
        return self.__blue

    @property
    def alpha(self) -> int:
        return self.__alpha

    @property
    def rgb(self) -> int:
        return (self.__red << 16) | (self.__green << 8) | self.__blue

    def is_opaque(self) -> bool:
        return self.__alpha == 255

    def to_tuple(self) -> Tuple[int, int, int, int]:
        return self.__red, self.__green, self.__blue, self.__alpha

    def to_hex(self) -> str:
        value = f"#{self.__red:02X}{self.__green:02X}{self.__blue:02X}"
        if not self.is_opaque():
            value += f"{self.__alpha:02X}"
        return value


def _assert_channel(channel: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"Invalid {channel} channel type: {type(value)}")
    if not 0 <= value <= 255:
        raise ValueError(f"Color {channel} channel must be between 0 and 255: {value}")
    return int(value)


Color.BLACK = Color(0, 0, 0)
Color.BLUE = Color(0, 0, 255)
Color.CYAN = Color(0, 255, 255)
Color.DARK_GRAY = Color(64, 64, 64)
Color.GRAY = Color(128, 128, 128)
Color.GREEN = Color(0, 255, 0)
Color.LIGHT_GRAY = Color(192, 192, 192)
Color.MAGENTA = Color(255, 0, 255)
Color.ORANGE = Color(255, 200, 0)
Color.PINK = Color(255, 175, 175)
Color.RED = Color(255, 0, 0)
Color.WHITE = Color(255, 255, 255)
Color.YELLOW = Color(255, 255, 0)
