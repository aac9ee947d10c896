# -*- coding: utf-8 -*-
"""
propconv.core.register.context
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~


"""

from __future__ import annotations

import logging
from abc import abstractmethod
from copy import deepcopy
from typing import Any, Collection, Generic, Mapping, Optional, Type, TypeVar, get_args

from propconv.core.configs import Configurations
from propconv.core.context import Context
from propconv.core.register.registrator import Registrator
from propconv.core.register.registry import Registration, RegistrationError, Registry
from propconv.util import update_recursive

R = TypeVar("R", bound=Registrator)


# noinspection PyAbstractClass
class RegistratorContext(Context[R], Generic[R]):
    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._logger = logging.getLogger(self.__module__)

    @property
    @abstractmethod
    def _registry(self) -> Registry[R]: ...

    # noinspection PyUnresolvedReferences
    def _get_type(self) -> Type[R]:
        return get_args(self._registry.__orig_class__)[0]

    def _load_from_sections(
        self,
        configs: Configurations,
        defaults: Optional[Mapping[str, Any]] = None,
        excludes: Collection[str] = (),
        **kwargs: Any,
    ) -> Collection[R]:
        registrators = []
        if defaults is None:
            defaults = {}

        for section_name in configs.sections:
            if section_name in excludes:
                continue
            section_configs = deepcopy(defaults)
            update_recursive(section_configs, configs.get_section(section_name))

            section = Configurations(f"{section_name}.conf", configs.dir, section_configs)
            if not section.enabled:
                self._logger.debug(f"Skipping disabled {self._get_type().__name__} section: {section_name}")
                continue
            try:
                registrators.append(self._load_from_configs(section, **kwargs))

            except RegistrationError as e:
                self._logger.debug(f"Skipping section '{section_name}' with unknown type: {str(e)}")
        return registrators

    def _load_from_configs(self, configs: Configurations, **kwargs: Any) -> R:
        if "type" not in configs:
            raise RegistrationError(f"Missing registration type in section: {configs.key}")
        registration = self._registry.from_type(configs["type"])
        return self._load_from_registration(registration, configs, **kwargs)

    def _load_from_registration(
        self,
        registration: Registration[R],
        configs: Optional[Configurations] = None,
        **kwargs: Any,
    ) -> R:
        registrator = self._create(registration, configs, **kwargs)
        self._logger.debug(f"Loaded {registration.name} '{registrator.id}'")
        self._add(registrator)
        return registrator

    def _create(self, registration: Registration[R], configs: Optional[Configurations] = None, **kwargs) -> R:
        return registration.initialize(context=self, configs=configs, **kwargs)

    def get_all(self, *types: Type) -> Collection[R]:
        if len(types) == 0:
            return list(self.values())
        return self.filter(lambda r: any(isinstance(r, t) for t in types))

    def get_first(self, *types: Type) -> Optional[R]:
        registrators = self.get_all(*types)
        return next(iter(registrators)) if len(registrators) > 0 else None
