# -*- coding: utf-8 -*-
"""
propconv.core.context
~~~~~~~~~~~~~~~~~~~~~


"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import OrderedDict
from collections.abc import Callable, MutableMapping
from typing import Any, Collection, Generic, Iterable, Iterator, TypeVar

from propconv.core.errors import ResourceError

E = TypeVar("E", bound=Any)


# noinspection PyAbstractClass
class Context(ABC, MutableMapping[str, E], Generic[E]):
    __map: OrderedDict[str, E]

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.__map = OrderedDict()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(str(i) for i in self.__map.keys())})"

    def __str__(self) -> str:
        return f"{type(self).__name__}:\n\t" + "\n\t".join(f"{i} = {repr(c)}" for i, c in self.__map.items())

    def __iter__(self) -> Iterator[str]:
        return iter(self.__map.keys())

    def __len__(self) -> int:
        return len(self.__map)

    def __contains__(self, __object: str | E) -> bool:
        return self._contains(__object)

    def __getitem__(self, __uid: Iterable[str] | str) -> E | Collection[E]:
        if isinstance(__uid, str):
            return self._get(__uid)
        if isinstance(__uid, Iterable):
            return [self._get(i) for i in __uid]
        raise KeyError(__uid)

    def __setitem__(self, __uid: str, __object: E) -> None:
        self._set(__uid, __object)

    def __delitem__(self, __uid: str) -> None:
        self._remove(__uid)

    def _contains(self, __object: str | E) -> bool:
        if isinstance(__object, str):
            return __object in self.__map.keys()
        return __object in self.__map.values()

    def _get(self, __uid: str) -> E:
        return self.__map[__uid]

    def _set(self, __uid: str, __object: E) -> None:
        if __uid in self.__map.keys():
            raise ResourceError(f'Entity with ID "{__uid}" already exists')

        self.__map[__uid] = __object

    def _add(self, *__objects: E) -> None:
        for __object in __objects:
            self._set(str(__object.id), __object)

    @abstractmethod
    def _create(self, *args, **kwargs) -> E: ...

    def _remove(self, *__objects: str | E) -> None:
        for __object in __objects:
            if isinstance(__object, str):
                del self.__map[__object]
            else:
                del self.__map[__object.id]

    # noinspection PyShadowingBuiltins
    def filter(self, filter: Callable[[E], bool]) -> Collection[E]:
        return [c for c in self.__map.values() if filter(c)]
