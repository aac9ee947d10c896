# -*- coding: utf-8 -*-
"""
propconv.converters.errors
~~~~~~~~~~~~~~~~~~~~~~~~~~


"""

from __future__ import annotations

from propconv.core.errors import ResourceError


class ConversionError(ResourceError, TypeError):
    """
    Raise if a conversion failed.

    """


class MissingValueError(ConversionError):
    """
    Raise if no value was passed to a converter without default value.

    """


class UnsupportedTypeError(ConversionError):
    """
    Raise if the requested type is not handled by the converter.

    """


class MalformedValueError(ConversionError, ValueError):
    """
    Raise if a string value does not follow any accepted notation.

    """


class ComponentRangeError(MalformedValueError):
    """
    Raise if a numeric component exceeds its valid range.

    """


class UnresolvableTypeError(ConversionError):
    """
    Raise if a fully qualified type name can not be located.

    """


class NotEnumerationError(ConversionError):
    """
    Raise if a resolved type is not an enumeration.

    """


class TypeMismatchError(ConversionError):
    """
    Raise if a resolved type is not a subclass of the requested type.

    """


class NoSuchConstantError(ConversionError):
    """
    Raise if a name is not a member of the resolved enumeration.

    """
