# -*- coding: utf-8 -*-
"""
propconv.converters
~~~~~~~~~~~~~~~~~~~


"""

from .errors import (  # noqa: F401
    ConversionError,
    MissingValueError,
    UnsupportedTypeError,
    MalformedValueError,
    ComponentRangeError,
    UnresolvableTypeError,
    NotEnumerationError,
    TypeMismatchError,
    NoSuchConstantError,
)

from .converter import (  # noqa: F401
    MISSING,
    Converter,
)

from . import context  # noqa: F401
from .context import (  # noqa: F401
    ConverterContext,
    register_converter_type,
    registry,
)

from . import color  # noqa: F401
from .color import ColorConverter  # noqa: F401

from . import enumeration  # noqa: F401
from .enumeration import EnumConverter  # noqa: F401

from . import character  # noqa: F401
from .character import CharacterConverter  # noqa: F401

from . import period  # noqa: F401
from .period import PeriodConverter  # noqa: F401
