# -*- coding: utf-8 -*-
"""
propconv
~~~~~~~~


"""

from typing import Optional

from ._version import __version__  # noqa: F401

from .core import (  # noqa: F401
    Configurations,
    ConfigurationError,
    ConfigurationUnavailableError,
    Configurator,
    Context,
    Registrator,
    Registry,
    ResourceError,
    ResourceUnavailableError,
)

from . import color  # noqa: F401
from .color import Color  # noqa: F401

from . import typing  # noqa: F401
from .typing import (  # noqa: F401
    Character,
    Period,
)

from . import converters  # noqa: F401
from .converters import (  # noqa: F401
    ConversionError,
    Converter,
    ConverterContext,
    ColorConverter,
    EnumConverter,
    CharacterConverter,
    PeriodConverter,
    register_converter_type,
)

from .settings import Settings  # noqa: F401


def load(conf_dir: Optional[str] = None, **kwargs) -> ConverterContext:
    settings = Settings(conf_dir=conf_dir, **kwargs)
    configs = Configurations.load("converters.conf", conf_dir=settings.dir, require=False)

    context = ConverterContext()
    context.load(configs)
    return context
