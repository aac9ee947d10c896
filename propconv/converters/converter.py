# -*- coding: utf-8 -*-
"""
propconv.converters.converter
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~


"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, Generic, Optional, Type, TypeVar, overload

import pandas as pd

from propconv.converters.errors import ConversionError, MissingValueError, UnsupportedTypeError
from propconv.core import Configurations, Context, Registrator

T = TypeVar("T", bound=Any)


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


class Converter(Registrator, Generic[T]):
    """
    Converts configuration values into instances of the converters data type and back into strings.

    A converter may be constructed with a default value, which will be returned instead of raising a
    :class:`ConversionError` when the value to be converted is missing or invalid. If no default is passed,
    the ``default`` key of the converters configurations will be used, if present.

    Instances are immutable after construction and may be shared freely.

    """

    SECTION: str = "converter"

    __default: Any

    def __init__(
        self,
        default: Any = MISSING,
        context: Optional[Context | Registrator] = None,
        configs: Optional[Configurations] = None,
        **kwargs,
    ) -> None:
        super().__init__(context=context, configs=configs, **kwargs)
        if default is MISSING and configs is not None and "default" in configs:
            default = configs["default"]
        self.__default = default

    @property
    @abstractmethod
    def dtype(self) -> Type[T]: ...

    @property
    def default(self) -> Any:
        return self.__default

    def has_default(self) -> bool:
        return self.__default is not MISSING

    def is_dtype(self, value: Any) -> bool:
        return isinstance(value, self.dtype)

    def is_supported(self, dtype: Type) -> bool:
        return dtype is str or (isinstance(dtype, type) and issubclass(dtype, self.dtype))

    @overload
    def convert(self, dtype: Optional[Type], value: pd.Series) -> pd.Series: ...

    @overload
    def convert(self, dtype: Optional[Type], value: Any) -> Any: ...

    def convert(self, dtype: Optional[Type], value: Any) -> Any:
        """
        Convert a value into the passed type.

        Parameters
        ----------
        dtype : type, optional
            The type to convert the value into. Either ``str``, the converters data type or a subclass of it.
            Defaults to the converters data type if None.
        value : Any
            The value to convert. Series will be converted element-wise, while lists or tuples will be
            reduced to their first element.

        Returns
        ----------
        converted: Any
            The converted value

        Raises
        ----------
        ConversionError
            If the conversion failed and no default value is configured.

        """
        if dtype is None:
            dtype = self.dtype
        if not self.is_supported(dtype):
            raise UnsupportedTypeError(
                f"{type(self).__name__} can not convert '{type(value).__name__}' to unsupported type: {_name(dtype)}"
            )
        if isinstance(value, pd.Series):
            return value.apply(lambda v: self.convert(dtype, v))

        value = self._reduce(value)
        if value is None:
            return self._handle_missing(dtype)
        try:
            if dtype is str:
                return self._to_str(value)
            if isinstance(value, dtype):
                return value
            return self._to_dtype(dtype, value)

        except Exception as e:
            return self._handle_error(dtype, value, e)

    @overload
    def to_str(self, value: pd.Series) -> pd.Series: ...

    @overload
    def to_str(self, value: Any) -> Optional[str]: ...

    def to_str(self, value: Any) -> Optional[str] | pd.Series:
        return self.convert(str, value)

    # noinspection PyMethodMayBeStatic
    def _to_str(self, value: Any) -> str:
        return str(value)

    @abstractmethod
    def _to_dtype(self, dtype: Type[T], value: Any) -> T: ...

    # noinspection PyMethodMayBeStatic
    def _reduce(self, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return value[0] if len(value) > 0 else None
        if isinstance(value, float) and pd.isna(value):
            return None
        return value

    def _handle_missing(self, dtype: Type) -> Any:
        if dtype is str:
            return None
        if not self.has_default():
            raise MissingValueError(f"No value specified for '{_name(dtype)}'")

        default = self.__default
        if default is not None and not isinstance(default, dtype):
            try:
                default = self._to_dtype(dtype, default)

            except Exception as e:
                raise ConversionError(
                    f"Error converting default value '{self.__default}' of {type(self).__name__} "
                    f"to type '{_name(dtype)}': {str(e)}"
                ) from e
        return default

    def _default_to_str(self) -> str:
        try:
            return self._to_str(self.__default)

        except Exception as e:
            raise ConversionError(
                f"Error converting default value '{self.__default}' of {type(self).__name__} to string: {str(e)}"
            ) from e

    def _handle_error(self, dtype: Type, value: Any, error: Exception) -> Any:
        if self.has_default():
            self._logger.debug(
                f"Using default value of {type(self).__name__} '{self.id}' for invalid value '{value}': {str(error)}"
            )
            if dtype is str and self.__default is not None:
                return self._default_to_str()
            return self._handle_missing(dtype)

        if isinstance(error, ConversionError):
            raise error
        raise ConversionError(
            f"Error converting '{value}' from type '{type(value).__name__}' to '{_name(dtype)}': {str(error)}"
        ) from error


# noinspection PyShadowingBuiltins
def _name(type: Any) -> str:
    return getattr(type, "__name__", str(type))
