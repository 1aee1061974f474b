# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 iso_currency Rui Pinheiro

from collections.abc import Callable
from typing import Any, override


# NOTE: We extend property so that anything special-casing property descriptors treats this one the same way
class ClassInstancePropertyDescriptor[T](property):
    """Read-only property that can be accessed from both a class and its instances.

    The getter receives the instance when accessed through an instance, or the class when accessed through the class.
    """

    def __init__(self, fget: Callable[[Any], T]) -> None:
        self.getter: Any = fget
        self.__doc__ = getattr(fget, "__doc__", None)

    @override
    def __get__(self, obj: Any, cls: type | None = None) -> T:  # pyright: ignore[reportIncompatibleMethodOverride]
        return self.getter(cls if obj is None else obj)

    @override
    def __set__(self, obj: Any, value: Any) -> None:
        msg = "Can't set classinstanceproperty descriptor"
        raise AttributeError(msg)

    @override
    def __delete__(self, obj: Any) -> None:
        msg = "Can't delete classinstanceproperty descriptor"
        raise AttributeError(msg)


def classinstanceproperty[T](func: Callable[[Any], T]) -> ClassInstancePropertyDescriptor[T]:
    return ClassInstancePropertyDescriptor(func)
