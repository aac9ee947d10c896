# -*- coding: utf-8 -*-
"""
propconv.converters.context
~~~~~~~~~~~~~~~~~~~~~~~~~~~


"""

from __future__ import annotations

from typing import Any, Callable, Collection, List, Optional, Type, TypeVar

from propconv.converters.converter import Converter
from propconv.core import Configurations, Context, Registrator, RegistratorContext, Registry, ResourceUnavailableError

C = TypeVar("C", bound=Converter)

registry = Registry[Converter]()


def register_converter_type(
    key: str,
    *alias: str,
    factory: Callable[[Context | Registrator, Optional[Configurations]], C] = None,
    replace: bool = False,
) -> Callable[[Type[C]], Type[C]]:
    # noinspection PyShadowingNames
    def _register(cls: Type[C]) -> Type[C]:
        registry.register(cls, key, *alias, factory=factory, replace=replace)
        return cls

    return _register


class ConverterContext(RegistratorContext[Converter]):
    """
    Holds the converter instances of an application and dispatches conversions by their data type.

    """

    @property
    def _registry(self) -> Registry[Converter]:
        return registry

    def load(self, configs: Optional[Configurations] = None, **kwargs: Any) -> Collection[Converter]:
        """
        Instance a converter for every registered converter type, configured by the section of its key.

        Further sections with a ``type`` entry create additional converters of that registered type.

        """
        converters = []
        converter_keys = []
        for registration in self._registry.values():
            converter_keys.append(registration.key)
            converter_configs = None
            if configs is not None:
                converter_configs = Configurations(
                    f"{registration.key}.conf",
                    configs.dir,
                    configs.get_section(registration.key, defaults={}),
                )
                if not converter_configs.enabled:
                    self._logger.debug(f"Skipping disabled {registration.name} '{registration.key}'")
                    continue
            converters.append(self._load_from_registration(registration, converter_configs, **kwargs))

        if configs is not None:
            converters.extend(self._load_from_sections(configs, excludes=converter_keys, **kwargs))
        return converters

    def has_dtype(self, *dtypes: Type) -> bool:
        if len(dtypes) == 0:
            raise ValueError("At least one type to look up required")
        return all(len(self._get_by_dtype(t)) > 0 for t in dtypes)

    def get_by_dtype(self, dtype: Type) -> Converter:
        converters = self._get_by_dtype(dtype)
        if len(converters) == 0:
            raise ResourceUnavailableError(f"Converter instance for '{getattr(dtype, '__name__', dtype)}' does not exist")
        return converters[0]

    def _get_by_dtype(self, dtype: Type) -> List[Converter]:
        if not isinstance(dtype, type):
            return []
        return [c for c in self.values() if issubclass(dtype, c.dtype)]

    def convert(self, dtype: Type, value: Any) -> Any:
        if dtype is str:
            return self.to_str(value)
        return self.get_by_dtype(dtype).convert(dtype, value)

    def to_str(self, value: Any) -> Optional[str]:
        if value is None or isinstance(value, str):
            return value
        return self.get_by_dtype(type(value)).to_str(value)
