# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 iso_currency Rui Pinheiro

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from frozendict import frozendict

from ..table.errors import TableValidationError
from ..util.mixins import LoggableMixin
from .flag import Flag, FlagKind
from .symbol import CurrencySymbol


if TYPE_CHECKING:
    from ..table.record import CurrencyRecord
    from .enum import CurrencyEnum


class Registry(LoggableMixin):
    """Compiled, immutable lookup tables over an ordered sequence of currency records.

    Every per-currency query is keyed by the alphabetic code, and every derived value (symbols, flags, sorted
    territory lists, the territory index) is computed once here so lookups are plain dictionary reads.

    Table order is preserved: it is the iteration order, the ordering of enumeration members, and the order in which
    ``from_country`` reports the currencies of a territory.
    """

    def __init__(self, records: Iterable[CurrencyRecord]) -> None:
        self._records: tuple[CurrencyRecord, ...] = tuple(records)
        if not self._records:
            msg = "Cannot compile an empty currency registry"
            raise TableValidationError(msg)

        by_code: dict[str, CurrencyRecord] = {}
        by_numeric: dict[int, str] = {}
        by_territory: dict[str, list[str]] = {}

        for record in self._records:
            if record.code in by_code:
                msg = "Duplicate currency code"
                raise TableValidationError(msg, line=record.line, code=record.code)
            if record.numeric in by_numeric:
                msg = f"Duplicate numeric code {record.numeric:03d}, already used by '{by_numeric[record.numeric]}'"
                raise TableValidationError(msg, line=record.line, code=record.code)

            by_code[record.code] = record
            by_numeric[record.numeric] = record.code
            for territory in record.used_by or ():
                codes = by_territory.setdefault(territory, [])
                if record.code not in codes:
                    codes.append(record.code)

        for record in self._records:
            target = record.superseded_target
            if target is not None and (target == record.code or target not in by_code):
                msg = f"Superseded by unresolvable currency '{target}'"
                raise TableValidationError(msg, line=record.line, code=record.code)

        self._by_code: frozendict[str, CurrencyRecord] = frozendict(by_code)
        self._by_numeric: frozendict[int, str] = frozendict(by_numeric)
        self._by_territory: frozendict[str, tuple[str, ...]] = frozendict((k, tuple(v)) for k, v in sorted(by_territory.items()))
        self._position: frozendict[str, int] = frozendict((record.code, i) for i, record in enumerate(self._records))
        self._flags: frozendict[str, tuple[Flag, ...]] = frozendict((record.code, Flag.from_record(record)) for record in self._records)
        self._symbols: frozendict[str, CurrencySymbol] = frozendict(
            (record.code, CurrencySymbol(record.symbol, record.subunit_symbol)) for record in self._records
        )
        self._used_by: frozendict[str, tuple[str, ...]] = frozendict((record.code, tuple(sorted(record.used_by or ()))) for record in self._records)

        self.log.debug("Compiled registry with %d currencies over %d territories", len(self._records), len(self._by_territory))

    # MARK: Collection
    @property
    def records(self) -> tuple[CurrencyRecord, ...]:
        return self._records

    @property
    def codes(self) -> tuple[str, ...]:
        return tuple(self._by_code)

    @property
    def territories(self) -> tuple[str, ...]:
        """Every territory used by at least one currency, sorted."""
        return tuple(self._by_territory)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[CurrencyRecord]:
        return iter(self._records)

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def __repr__(self) -> str:
        return f"<{type(self).__name__} with {len(self)} currencies>"

    # MARK: Per-currency queries
    def record(self, code: str) -> CurrencyRecord:
        try:
            return self._by_code[code]
        except KeyError:
            msg = f"Currency '{code}' is not part of this registry"
            raise KeyError(msg) from None

    def position(self, code: str) -> int:
        self.record(code)
        return self._position[code]

    def numeric(self, code: str) -> int:
        return self.record(code).numeric

    def name(self, code: str) -> str:
        return self.record(code).name

    def symbol(self, code: str) -> CurrencySymbol:
        self.record(code)
        return self._symbols[code]

    def exponent(self, code: str) -> int | None:
        return self.record(code).exponent

    def subunit_fraction(self, code: str) -> int | None:
        return self.record(code).subunit_fraction

    def used_by(self, code: str) -> tuple[str, ...]:
        """Territories using ``code``, sorted by territory code. Empty for currencies without territories."""
        self.record(code)
        return self._used_by[code]

    def flags(self, code: str) -> tuple[Flag, ...]:
        self.record(code)
        return self._flags[code]

    def has_flag(self, code: str, flag: Flag) -> bool:
        return flag in self.flags(code)

    def is_special(self, code: str) -> bool:
        return self.record(code).is_special

    def is_fund(self, code: str) -> bool:
        return self.record(code).is_fund

    def is_superseded(self, code: str) -> str | None:
        """Code of the currency that replaced ``code``, if any."""
        return self.record(code).superseded_target

    def latest(self, code: str) -> str:
        """The replacement of ``code`` if it is superseded, otherwise ``code`` itself.

        Only one supersession step is followed.
        """
        target = self.is_superseded(code)
        return code if target is None else target

    # MARK: Reverse lookups
    def from_code(self, value: str) -> str | None:
        if not isinstance(value, str) or len(value) != 3:  # noqa: PLR2004
            return None
        return value if value in self._by_code else None

    def from_numeric(self, value: int) -> str | None:
        return self._by_numeric.get(value)

    def from_country(self, territory: str) -> tuple[str, ...]:
        """Codes of every currency used by ``territory``, in table order."""
        return self._by_territory.get(str(territory), ())

    def default_for_country(self, territory: str) -> str | None:
        """The first currency of ``territory`` in table order that carries no flag, if any."""
        for code in self.from_country(territory):
            if not self._flags[code]:
                return code
        return None

    def with_flag(self, kind: FlagKind) -> tuple[str, ...]:
        """Codes of every currency carrying a flag of ``kind``, in table order."""
        return tuple(code for code, flags in self._flags.items() if any(flag.kind is kind for flag in flags))

    # MARK: Enumeration
    def enum_members(self) -> dict[str, str]:
        return {record.code: record.code for record in self._records}

    def create_enum(self, name: str = "Currency", *, module: str | None = None, qualname: str | None = None) -> type[CurrencyEnum]:
        """Build a :class:`CurrencyEnum` subclass with one member per currency of this registry."""
        from .enum import CurrencyEnum

        enum = CurrencyEnum(name, self.enum_members(), module=module, qualname=qualname)
        enum.__registry__ = self
        self.log.debug("Created enumeration %s with %d members", name, len(enum))
        return enum
