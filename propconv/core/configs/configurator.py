# -*- coding: utf-8 -*-
"""
propconv.core.configs.configurator
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~


"""

from __future__ import annotations

import logging
from abc import ABC
from collections import OrderedDict
from logging import Logger
from typing import Any, Dict, Optional

from propconv.core.configs.configurations import Configurations
from propconv.core.configs.errors import ConfigurationError
from propconv.util import get_members


class Configurator(ABC, object):
    __configs: Optional[Configurations]

    _logger: Logger

    def __init__(self, configs: Optional[Configurations] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.__configs = self._assert_configs(configs)
        self._logger = logging.getLogger(self.__module__)

    @classmethod
    def _assert_configs(cls, configs: Optional[Configurations]) -> Optional[Configurations]:
        if configs is None:
            return None
        if not isinstance(configs, Configurations):
            raise ConfigurationError(f"Invalid '{cls.__name__}' configurations: {type(configs)}")
        return configs

    def _get_vars(self) -> Dict[str, Any]:
        def _is_var(attr: str, var: Any) -> bool:
            return not (attr.startswith("_") or attr.isupper() or callable(var) or isinstance(var, Configurations))

        return get_members(self, filter=_is_var)

    # noinspection PyShadowingBuiltins
    def _convert_vars(self, convert: callable = str) -> Dict[str, str]:
        def _convert(var: Any) -> str:
            return str(var) if not isinstance(var, Configurator) else convert(var)

        vars = self._get_vars()
        values = OrderedDict([(k, _convert(v)) for k, v in vars.items()])
        if self.configs is not None:
            values["enabled"] = str(self.is_enabled())
            values["configs"] = convert(self.configs)
        return values

    # noinspection PyShadowingBuiltins
    def __repr__(self) -> str:
        vars = [f"{k}={v}" for k, v in self._convert_vars(lambda v: f"<{type(v).__name__}>").items()]
        return f"{type(self).__name__}({', '.join(vars)})"

    # noinspection PyShadowingBuiltins
    def __str__(self) -> str:
        vars = [f"{k} = {v}" for k, v in self._convert_vars(repr).items()]
        return f"{type(self).__name__}:\n\t" + "\n\t".join(vars)

    def is_enabled(self) -> bool:
        return self.__configs is None or self.__configs.enabled

    @property
    def configs(self) -> Optional[Configurations]:
        return self.__configs
