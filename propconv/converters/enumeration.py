# -*- coding: utf-8 -*-
"""
propconv.converters.enumeration
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~


"""

from __future__ import annotations

import re
from enum import Enum
from pydoc import ErrorDuringImport, locate
from typing import Any, Callable, Optional, Tuple, Type

from propconv.converters.context import register_converter_type
from propconv.converters.converter import Converter
from propconv.converters.errors import (
    MalformedValueError,
    NoSuchConstantError,
    NotEnumerationError,
    TypeMismatchError,
    UnresolvableTypeError,
    UnsupportedTypeError,
)

# Validates that the value references an enum member and splits it into its components
ENUM_PATTERN = re.compile(r"(?P<module>[a-z\d._]*)\.(?P<class>[A-Za-z\d_]+)[#.](?P<name>[A-Z\d_]+)")

TypeResolver = Callable[[str], Optional[Any]]


@register_converter_type("enum", "enumeration")
class EnumConverter(Converter[Enum]):
    """
    Converts configuration values into members of :class:`Enum` types.

    Values will be looked up by member name in the requested enumeration first. If the requested type
    is :class:`Enum` itself, or the name is no member of it, the value is expected to be a fully qualified
    reference like ``http.HTTPStatus.NOT_FOUND`` or ``http.HTTPStatus#NOT_FOUND``, whose type will be
    located by the converters type resolver.

    """

    TYPE: str = "enum"

    dtype: Type[Enum] = Enum

    _resolver: TypeResolver

    def __init__(self, *args, resolver: Optional[TypeResolver] = None, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        if resolver is None:
            resolver = locate
        if not callable(resolver):
            raise TypeError(f"Invalid type resolver: {type(resolver)}")
        self._resolver = resolver

    def _to_str(self, value: Any) -> str:
        if isinstance(value, Enum):
            return value.name
        return str(value)

    # noinspection PyTypeChecker
    def _to_dtype(self, dtype: Type[Enum], value: Any) -> Enum:
        if not issubclass(dtype, Enum):
            raise UnsupportedTypeError(f"Unable to convert '{type(value).__name__}' to type: {dtype.__name__}")

        value = str(value).strip()
        if dtype is not Enum:
            try:
                return dtype[value]

            except KeyError:
                # Continue to check fully qualified name
                self._logger.debug(f"'{value}' is no member of {dtype.__name__}, expecting a qualified reference")

        try:
            module, cls, name = parse_enum_reference(value)

        except MalformedValueError as e:
            if dtype is not Enum:
                raise MalformedValueError(
                    f"'{value}' is neither a member of {dtype.__name__}, nor a qualified enum reference"
                ) from e
            raise

        enum_type = self._resolve(f"{module}.{cls}")
        if not isinstance(enum_type, type) or not issubclass(enum_type, Enum):
            raise NotEnumerationError(f"Type '{module}.{cls}' is not an enumerated type")

        if not issubclass(enum_type, dtype):
            raise TypeMismatchError(f"Type '{module}.{cls}' is not the required type: {dtype.__name__}")

        try:
            return enum_type[name]

        except KeyError as e:
            raise NoSuchConstantError(f"No enum constant '{name}' in {enum_type.__name__}") from e

    def _resolve(self, type_name: str) -> Any:
        try:
            resolved = self._resolver(type_name)

        except (ImportError, LookupError, ErrorDuringImport) as e:
            raise UnresolvableTypeError(f"Class '{type_name}' doesn't exist") from e

        if resolved is None:
            raise UnresolvableTypeError(f"Class '{type_name}' doesn't exist")
        return resolved


def parse_enum_reference(value: str) -> Tuple[str, str, str]:
    """
    Split a fully qualified enum reference into its module path, class and member name.

    Parameters
    ----------
    value : str
        The reference, following the pattern ``module.Class#MEMBER`` or ``module.Class.MEMBER``

    Returns
    ----------
    reference: Tuple[str, str, str]
        The module path, class name and member name

    Raises
    ----------
    MalformedValueError
        If the value doesn't follow naming conventions.

    """
    match = ENUM_PATTERN.fullmatch(value)
    if match is None:
        raise MalformedValueError(
            f"Value '{value}' doesn't follow naming conventions, expected input like: http.HTTPStatus.NOT_FOUND"
        )
    return match.group("module"), match.group("class"), match.group("name")
