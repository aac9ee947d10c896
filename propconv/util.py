# -*- coding: utf-8 -*-
"""
propconv.util
~~~~~~~~~~~~~


"""

from __future__ import annotations

import re
from typing import Any, Callable, Dict, Mapping, Optional

from propconv.core.errors import ResourceError

# noinspection SpellCheckingInspection
INVALID_CHARS = "'!@#$%^&?*;:,./\\|`´+~=- "

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_INT_DIGITS = re.compile(r"[0-9A-Za-z]+")


# noinspection PyShadowingBuiltins
def get_members(
    obj: Any,
    filter: Optional[Callable] = None,
    private: bool = False,
) -> Dict[str, Any]:
    members = dict()
    processed = set()
    for attr in dir(obj):
        try:
            member = getattr(obj, attr)
            # Handle duplicate attr
            if attr in processed:
                raise AttributeError
        except (AttributeError, ResourceError):
            continue
        if (private or "__" not in attr) and (filter is None or filter(attr, member)):
            members[attr] = member
        processed.add(attr)
    return dict(sorted(members.items()))


def update_recursive(configs: Dict[str, Any], update: Mapping[str, Any], replace: bool = True) -> Dict[str, Any]:
    for k, v in update.items():
        if isinstance(v, Mapping):
            if k not in configs.keys():
                configs[k] = {}
            configs[k] = update_recursive(configs[k], v, replace)
        elif k not in configs or replace:
            configs[k] = v
    return configs


def to_float(value: str | float) -> Optional[float]:
    if value is None:
        return None
    if type(value) == float:
        return value
    if isinstance(value, (str, int)) or issubclass(type(value), float):
        return float(value)
    raise TypeError(f"Expected str or float, not: {type(value)}")


def to_int(value: str | int) -> Optional[int]:
    if value is None:
        return None
    if type(value) == int:
        return value
    if isinstance(value, str) or issubclass(type(value), int):
        return int(value)
    raise TypeError(f"Expected str or int, not: {type(value)}")


def to_bool(value: str | bool) -> Optional[bool]:
    if value is None:
        return None
    if type(value) == bool:
        return value
    if isinstance(value, str):
        if value.lower() in ["true", "yes", "y"]:
            return True
        if value.lower() in ["false", "no", "n"]:
            return False
    if issubclass(type(value), int):
        return bool(value)
    raise TypeError(f"Invalid bool type: {type(value)}")


def decode_int(value: str) -> int:
    """
    Decode a string into a 32 bit signed integer.

    Accepts an optional sign, followed by a radix specifier: ``0x``, ``0X`` or ``#``
    for hexadecimal, a leading ``0`` for octal and plain decimal digits otherwise.

    Parameters
    ----------
    value : str
        The string to decode

    Returns
    ----------
    decoded: int
        The decoded integer

    Raises
    ----------
    ValueError
        If the string is empty, holds invalid digits or exceeds the 32 bit range.

    """
    if len(value) == 0:
        raise ValueError("Zero length string")

    index = 0
    negative = False
    if value[0] in "+-":
        negative = value[0] == "-"
        index += 1

    if value.startswith(("0x", "0X"), index):
        radix = 16
        index += 2
    elif value.startswith("#", index):
        radix = 16
        index += 1
    elif value.startswith("0", index) and len(value) > index + 1:
        radix = 8
        index += 1
    else:
        radix = 10

    digits = value[index:]
    if not _INT_DIGITS.fullmatch(digits):
        raise ValueError(f"Invalid integer string: '{value}'")

    decoded = int(digits, radix)
    if negative:
        decoded = -decoded
    if not INT_MIN <= decoded <= INT_MAX:
        raise ValueError(f"Integer out of range: '{value}'")
    return decoded


# noinspection PyShadowingBuiltins
def parse_key(id: str) -> str:
    for c in INVALID_CHARS:
        id = id.replace(c, "_")
    return re.sub(r"\W", "", id).lower()
