# -*- coding: utf-8 -*-
"""
propconv.core.register.registry
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~


"""

from __future__ import annotations

import builtins
from typing import Callable, Collection, Dict, Generic, List, Optional, Type, TypeVar, get_args

from propconv.core.configs import Configurations
from propconv.core.context import Context
from propconv.core.errors import ResourceError
from propconv.core.register.registrator import Registrator

R = TypeVar("R", bound=Registrator)


class RegistrationError(ResourceError):
    """
    Raise if an error with the registration occurred.

    """


# noinspection PyShadowingBuiltins
class Registration(Generic[R]):
    __class: Type[R]
    __factory: Callable[..., R]

    _key: str
    alias: List[str]

    def __init__(
        self,
        cls: Type[R],
        key: str,
        *alias: str,
        factory: Optional[Callable[..., R]] = None,
    ):
        if not isinstance(key, str):
            raise RegistrationError(f"Invalid '{builtins.type(key)}' registration key: {key}")
        self._key = key.lower()
        self.alias = list(a.lower() for a in alias if a is not None and isinstance(a, str))
        self.__class = cls

        if factory is not None:
            if not callable(factory):
                raise RegistrationError(f"Invalid registration initialization function: {factory}")
            self.__factory = factory
        else:
            self.__factory = cls

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._key}: {self.name})"

    @property
    def key(self) -> str:
        return self._key

    @property
    def name(self) -> str:
        return self.__class.__name__

    @property
    def type(self) -> Type[R]:
        return self.__class

    def is_key(self, key: str) -> bool:
        key = key.lower()
        return self._key == key or self.is_alias(key)

    def is_alias(self, key: str) -> bool:
        return key.lower() in self.alias

    def initialize(self, *args, **kwargs) -> R:
        return self.__factory(*args, **kwargs)


# noinspection PyShadowingBuiltins
class Registry(Generic[R]):
    __types: Dict[str, Registration[R]]

    def __init__(self) -> None:
        self.__types = {}

    # noinspection PyUnresolvedReferences
    def register(
        self,
        cls: Type[R],
        key: str,
        *alias: str,
        factory: Optional[Callable[[Optional[Context], Optional[Configurations]], R]] = None,
        replace: bool = False,
    ) -> None:
        if not isinstance(key, str):
            raise RegistrationError(f"Invalid '{builtins.type(key)}' registration key: {key}")
        key = key.lower()
        type = get_args(self.__orig_class__)[0]
        if not issubclass(cls, type):
            raise RegistrationError(f"Can only register {type.__name__} types, not: {cls.__name__}")
        if self.has_type(key) and not replace:
            raise RegistrationError(f"Registration '{key}' does already exist: {self.from_type(key).name}")
        self.__types[key] = Registration[R](cls, key, *alias, factory=factory)

    def has_type(self, type: str) -> bool:
        return any(r.is_key(type) for r in self.__types.values())

    def from_type(self, type: str) -> Registration[R]:
        for registration in self.__types.values():
            if registration.is_key(type):
                return registration
        raise RegistrationError(f"Registration '{type}' does not exist")

    def values(self) -> Collection[Registration[R]]:
        return self.__types.values()
