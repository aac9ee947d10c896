# -*- coding: utf-8 -*-
"""
propconv.typing
~~~~~~~~~~~~~~~


"""

from __future__ import annotations

from dateutil.relativedelta import relativedelta


class Character(str):
    """
    A string holding exactly one character.
    """

    def __new__(cls, value: str) -> Character:
        if not isinstance(value, str):
            raise TypeError(f"Expected str, not: {type(value)}")
        if len(value) != 1:
            raise ValueError(f"Expected a single character, not {len(value)}: '{value}'")
        return str.__new__(cls, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str.__repr__(self)})"


Period = relativedelta
