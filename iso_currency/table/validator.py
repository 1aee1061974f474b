# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 iso_currency Rui Pinheiro

from collections.abc import Collection, Iterable, Sequence

from ..country import Country
from ..util.mixins import LoggableMixin
from .errors import TableValidationError
from .record import CurrencyRecord


class TableValidator(LoggableMixin):
    """Cross-row consistency checks over a parsed currency table.

    Rows are checked for unique codes and numeric codes, resolvable supersession targets, and territories that exist in
    ``territories`` (by default, the :class:`~iso_currency.country.Country` enumeration).
    """

    def __init__(self, *, territories: Collection[str] | None = None) -> None:
        self.territories: frozenset[str] = frozenset(Country if territories is None else territories)

    def validate(self, records: Sequence[CurrencyRecord]) -> tuple[CurrencyRecord, ...]:
        records = tuple(records)

        if not records:
            msg = "Currency table is empty"
            raise TableValidationError(msg)

        self._check_unique_codes(records)
        self._check_unique_numerics(records)
        self._check_territories(records)
        self.check_supersession(records)

        self.log.debug("Validated %d currency records", len(records))
        return records

    def _check_unique_codes(self, records: Iterable[CurrencyRecord]) -> None:
        seen: dict[str, CurrencyRecord] = {}
        for record in records:
            if (previous := seen.get(record.code)) is not None:
                msg = f"Duplicate currency code, first defined on line {previous.line}"
                raise TableValidationError(msg, line=record.line, code=record.code)
            seen[record.code] = record

    def _check_unique_numerics(self, records: Iterable[CurrencyRecord]) -> None:
        seen: dict[int, CurrencyRecord] = {}
        for record in records:
            if (previous := seen.get(record.numeric)) is not None:
                msg = f"Duplicate numeric code {record.numeric:03d}, already used by '{previous.code}'"
                raise TableValidationError(msg, line=record.line, code=record.code)
            seen[record.numeric] = record

    def _check_territories(self, records: Iterable[CurrencyRecord]) -> None:
        for record in records:
            for territory in record.used_by or ():
                if territory not in self.territories:
                    msg = f"Unknown territory '{territory}'"
                    raise TableValidationError(msg, line=record.line, code=record.code)

    def check_supersession(self, records: Sequence[CurrencyRecord]) -> None:
        """Every ``superseded(CODE)`` target must be another currency of ``records``."""
        codes = {record.code for record in records}

        for record in records:
            target = record.superseded_target
            if target is None:
                continue
            if target == record.code:
                msg = "Currency cannot be superseded by itself"
                raise TableValidationError(msg, line=record.line, code=record.code)
            if target not in codes:
                msg = f"Superseded by unknown currency '{target}'"
                raise TableValidationError(msg, line=record.line, code=record.code)

    def select(self, records: Sequence[CurrencyRecord], include: Iterable[str] | None) -> tuple[CurrencyRecord, ...]:
        """Restrict ``records`` to the codes in ``include``, keeping table order.

        ``None`` selects every record. Unknown codes and an empty selection are errors, as are selections that leave a
        supersession target out.
        """
        if include is None:
            return tuple(records)

        include = frozenset(include)
        unknown = include.difference(record.code for record in records)
        if unknown:
            msg = f"Cannot include unknown currencies: {', '.join(sorted(unknown))}"
            raise TableValidationError(msg)

        selected = tuple(record for record in records if record.code in include)
        if not selected:
            msg = "Currency selection is empty"
            raise TableValidationError(msg)

        self.check_supersession(selected)

        self.log.debug("Selected %d of %d currency records", len(selected), len(records))
        return selected
