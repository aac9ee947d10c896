# -*- coding: utf-8 -*-
"""
tests.conftest
~~~~~~~~~~~~~~


"""

import pytest

from propconv import ColorConverter, ConverterContext, EnumConverter


@pytest.fixture
def color_converter() -> ColorConverter:
    return ColorConverter()


@pytest.fixture
def enum_converter() -> EnumConverter:
    return EnumConverter()


@pytest.fixture
def context() -> ConverterContext:
    context = ConverterContext()
    context.load()
    return context
