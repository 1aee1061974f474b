# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 iso_currency Rui Pinheiro

from __future__ import annotations

import functools

from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Self, override

from ..country import Country


if TYPE_CHECKING:
    from ..table.record import CurrencyRecord
    from .flag import Flag
    from .registry import Registry
    from .symbol import CurrencySymbol


INVALID_CODE_MESSAGE = "not a valid ISO 4217 currency code"


class ParseCurrencyError(ValueError):
    """Raised when a string does not name a member of a currency enumeration."""

    def __init__(self, value: object = None) -> None:
        self.value = value
        super().__init__(INVALID_CODE_MESSAGE if value is None else f"{value!r} is {INVALID_CODE_MESSAGE}")


@functools.total_ordering
class CurrencyEnum(Enum):
    """Base class of generated currency enumerations.

    Subclasses carry one member per row of their :class:`Registry` (``__registry__``), whose value is the alphabetic
    code. Every property is a lookup into that registry. Members format as the currency name and order by table
    position.
    """

    __registry__: ClassVar[Registry]

    @classmethod
    def _missing_(cls, value: object) -> Any:
        raise ParseCurrencyError(value)

    # MARK: Properties
    @property
    def record(self) -> CurrencyRecord:
        return self.__registry__.record(self.value)

    @property
    def code(self) -> str:
        return self.value

    @property
    def numeric(self) -> int:
        return self.__registry__.numeric(self.value)

    @property
    def currency_name(self) -> str:
        return self.__registry__.name(self.value)

    @property
    def symbol(self) -> CurrencySymbol:
        return self.__registry__.symbol(self.value)

    @property
    def exponent(self) -> int | None:
        return self.__registry__.exponent(self.value)

    @property
    def subunit_fraction(self) -> int | None:
        return self.__registry__.subunit_fraction(self.value)

    @property
    def used_by(self) -> list[Country]:
        return [Country(territory) for territory in self.__registry__.used_by(self.value)]

    @property
    def flags(self) -> list[Flag]:
        return list(self.__registry__.flags(self.value))

    def has_flag(self, flag: Flag) -> bool:
        return self.__registry__.has_flag(self.value, flag)

    @property
    def is_fund(self) -> bool:
        return self.__registry__.is_fund(self.value)

    @property
    def is_special(self) -> bool:
        return self.__registry__.is_special(self.value)

    @property
    def is_superseded(self) -> Self | None:
        target = self.__registry__.is_superseded(self.value)
        return None if target is None else type(self)(target)

    @property
    def latest(self) -> Self:
        return type(self)(self.__registry__.latest(self.value))

    # MARK: Lookups
    @classmethod
    def parse(cls, value: str) -> Self:
        """Member for the exact alphabetic code ``value``, raising :class:`ParseCurrencyError` otherwise."""
        member = cls.from_code(value)
        if member is None:
            raise ParseCurrencyError(value)
        return member

    @classmethod
    def from_code(cls, value: str) -> Self | None:
        code = cls.__registry__.from_code(value)
        return None if code is None else cls(code)

    @classmethod
    def from_numeric(cls, value: int) -> Self | None:
        code = cls.__registry__.from_numeric(value)
        return None if code is None else cls(code)

    @classmethod
    def from_country(cls, territory: Country | str) -> list[Self]:
        return [cls(code) for code in cls.__registry__.from_country(territory)]

    @classmethod
    def default_for_country(cls, territory: Country | str) -> Self | None:
        code = cls.__registry__.default_for_country(territory)
        return None if code is None else cls(code)

    # MARK: Formatting and ordering
    @override
    def __str__(self) -> str:
        return self.currency_name

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.__registry__.position(self.value) < self.__registry__.position(other.value)
