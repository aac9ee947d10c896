# -*- coding: utf-8 -*-
"""
propconv.converters.period
~~~~~~~~~~~~~~~~~~~~~~~~~~


"""

from __future__ import annotations

import re
from typing import Any, Type

from dateutil.relativedelta import relativedelta

from propconv.converters.context import register_converter_type
from propconv.converters.converter import Converter
from propconv.converters.errors import MalformedValueError, UnsupportedTypeError
from propconv.typing import Period

PERIOD_PATTERN = re.compile(
    r"(?P<sign>[-+]?)P"
    r"(?:(?P<years>[-+]?\d+)Y)?"
    r"(?:(?P<months>[-+]?\d+)M)?"
    r"(?:(?P<weeks>[-+]?\d+)W)?"
    r"(?:(?P<days>[-+]?\d+)D)?",
    re.IGNORECASE,
)

PERIOD_TIME_ATTRS = ["hours", "minutes", "seconds", "microseconds", "leapdays"]
PERIOD_ABSOLUTE_ATTRS = ["year", "month", "day", "weekday", "hour", "minute", "second", "microsecond"]


@register_converter_type("period")
class PeriodConverter(Converter[Period]):
    """
    Converts ISO-8601 date based periods like ``P1Y2M3D`` into :class:`relativedelta` objects.

    """

    TYPE: str = "period"

    dtype: Type[Period] = relativedelta

    def _to_str(self, value: Any) -> str:
        if not isinstance(value, relativedelta):
            value = parse_period(str(value))
        return format_period(value)

    def _to_dtype(self, dtype: Type[Period], value: Any) -> Period:
        if not issubclass(dtype, relativedelta):
            raise UnsupportedTypeError(f"Unable to convert '{type(value).__name__}' to type: {dtype.__name__}")
        return parse_period(str(value))


def parse_period(value: str) -> relativedelta:
    match = PERIOD_PATTERN.fullmatch(value.strip())
    if match is None or all(match.group(g) is None for g in ["years", "months", "weeks", "days"]):
        raise MalformedValueError(f"Invalid period '{value}', expected input like: P1Y2M3D")

    def _parse_group(group: str) -> int:
        amount = match.group(group)
        return int(amount) if amount is not None else 0

    period = relativedelta(
        years=_parse_group("years"),
        months=_parse_group("months"),
        days=_parse_group("weeks") * 7 + _parse_group("days"),
    )
    if match.group("sign") == "-":
        period = -period
    return period


def format_period(period: relativedelta) -> str:
    if any(getattr(period, a) for a in PERIOD_TIME_ATTRS) or any(
        getattr(period, a) is not None for a in PERIOD_ABSOLUTE_ATTRS
    ):
        raise MalformedValueError(f"Unable to format period with time or absolute values: {period}")

    if not any([period.years, period.months, period.days]):
        return "P0D"
    period_str = "P"
    if period.years:
        period_str += f"{period.years}Y"
    if period.months:
        period_str += f"{period.months}M"
    if period.days:
        period_str += f"{period.days}D"
    return period_str
