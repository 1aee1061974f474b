# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 iso_currency Rui Pinheiro

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, override


if TYPE_CHECKING:
    from ..table.record import CurrencyRecord


class FlagKind(Enum):
    SPECIAL = "special"
    FUND = "fund"
    SUPERSEDED = "superseded"


@dataclass(frozen=True, slots=True)
class Flag:
    """Classification tag of a currency.

    ``Superseded`` flags carry the code of the replacing currency, and are only equal to ``Superseded`` flags with the
    same target.

    >>> from iso_currency.registry import Flag
    >>> Flag.superseded("EUR") == Flag.superseded("EUR"), Flag.superseded("EUR") == Flag.superseded("USD")
    (True, False)
    >>> str(Flag.FUND), str(Flag.superseded("EUR"))
    ('fund', 'superseded(EUR)')
    """

    kind: FlagKind
    target: str | None = None

    SPECIAL: ClassVar[Flag]
    FUND: ClassVar[Flag]

    def __post_init__(self) -> None:
        if (self.kind is FlagKind.SUPERSEDED) != (self.target is not None):
            msg = f"Only superseded flags carry a target, got {self.kind.name} with target {self.target!r}"
            raise ValueError(msg)

    @classmethod
    def superseded(cls, target: str | Enum) -> Flag:
        """Return the flag of a currency replaced by ``target`` (a code, or a currency enumeration member)."""
        return cls(FlagKind.SUPERSEDED, target.value if isinstance(target, Enum) else target)

    @classmethod
    def from_record(cls, record: CurrencyRecord) -> tuple[Flag, ...]:
        """Rebuild the flags parsed for ``record``, always in the order Special, Fund, Superseded."""
        flags: list[Flag] = []
        if record.is_special:
            flags.append(cls.SPECIAL)
        if record.is_fund:
            flags.append(cls.FUND)
        if record.superseded_target is not None:
            flags.append(cls.superseded(record.superseded_target))
        return tuple(flags)

    @override
    def __str__(self) -> str:
        if self.kind is FlagKind.SUPERSEDED:
            return f"{self.kind.value}({self.target})"
        return self.kind.value


Flag.SPECIAL = Flag(FlagKind.SPECIAL)
Flag.FUND = Flag(FlagKind.FUND)
