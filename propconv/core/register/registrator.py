# -*- coding: utf-8 -*-
"""
propconv.core.register.registrator
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~


"""

from __future__ import annotations

import os
from typing import Optional

from propconv.core.configs import Configurations, Configurator
from propconv.core.context import Context
from propconv.core.errors import ResourceError
from propconv.util import parse_key


class Registrator(Configurator):
    SECTION: str = "registration"
    TYPE: Optional[str] = None

    __context: Optional[Context]

    _id: str
    _key: str
    _name: Optional[str]

    # noinspection PyShadowingBuiltins
    def __init__(
        self,
        context: Optional[Context | Registrator] = None,
        configs: Optional[Configurations] = None,
        key: Optional[str] = None,
        name: Optional[str] = None,
        **kwargs,
    ) -> None:
        super().__init__(configs=configs, **kwargs)
        self.__context = self._assert_context(context)
        self._key = self._build_key(key, configs)
        self._id = self._build_id(self._key, context)
        self._name = self._build_name(name, configs)

    @classmethod
    def _assert_context(cls, context: Optional[Context | Registrator]) -> Optional[Context | Registrator]:
        if context is None:
            return None
        if not isinstance(context, (Context, Registrator)):
            raise ResourceError(f"Invalid '{cls.__name__}' context: {type(context)}")
        return context

    @classmethod
    def _build_key(cls, key: Optional[str], configs: Optional[Configurations]) -> str:
        if configs is not None:
            if configs.has_section(cls.SECTION) and "key" in configs[cls.SECTION]:
                key = configs[cls.SECTION]["key"]
            elif "key" in configs:
                key = configs["key"]
            elif key is None:
                key = "_".join(os.path.splitext(configs.name)[:-1])
        if key is None:
            key = cls.TYPE
        if key is None:
            raise ResourceError(f"Unable to build '{cls.__name__}' key")
        return parse_key(key)

    # noinspection PyShadowingBuiltins
    @classmethod
    def _build_id(cls, key: str, context: Optional[Context | Registrator]) -> str:
        if context is not None and isinstance(context, Registrator):
            return f"{context.id}.{key}"
        return key

    @classmethod
    def _build_name(cls, name: Optional[str], configs: Optional[Configurations]) -> Optional[str]:
        if configs is not None:
            if configs.has_section(cls.SECTION) and "name" in configs[cls.SECTION]:
                name = configs[cls.SECTION]["name"]
            elif "name" in configs:
                name = configs["name"]
        return name

    @property
    def context(self) -> Optional[Context | Registrator]:
        return self.__context

    @property
    def id(self) -> str:
        return self._id

    @property
    def key(self) -> str:
        return self._key

    @property
    def name(self) -> str:
        if self._name is None:
            return self._key.replace("_", " ").title()
        return self._name
