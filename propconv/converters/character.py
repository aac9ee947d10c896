# -*- coding: utf-8 -*-
"""
propconv.converters.character
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~


"""

from __future__ import annotations

from typing import Any, Type

from propconv.converters.context import register_converter_type
from propconv.converters.converter import Converter
from propconv.converters.errors import MalformedValueError, UnsupportedTypeError
from propconv.typing import Character
from propconv.util import decode_int

UNICODE_MAX = 0x10FFFF


@register_converter_type("char", "character")
class CharacterConverter(Converter[Character]):
    """
    Converts configuration values into single :class:`Character` strings.

    Hexadecimal values prefixed with ``0x`` will be decoded as unicode code point, if possible.
    Any other value will be reduced to the first character of its string representation.

    """

    TYPE: str = "char"

    dtype: Type[Character] = Character

    def _to_str(self, value: Any) -> str:
        value = str(value)
        return value[:1]

    def _to_dtype(self, dtype: Type[Character], value: Any) -> Character:
        if not issubclass(dtype, Character):
            raise UnsupportedTypeError(f"Unable to convert '{type(value).__name__}' to type: {dtype.__name__}")

        value = str(value)
        if len(value) == 0:
            raise MalformedValueError("Value must not be empty")

        if len(value) > 2 and value[:2].lower() == "0x":
            try:
                code_point = decode_int(value)
                if 0 <= code_point <= UNICODE_MAX:
                    return dtype(chr(code_point))

            except ValueError:
                self._logger.debug(f"Unable to decode '{value}' as code point, using first character instead")

        return dtype(value[0])
