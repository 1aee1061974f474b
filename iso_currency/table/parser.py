# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 iso_currency Rui Pinheiro

"""Parsing of the tab-separated currency table into :class:`CurrencyRecord` values.

The table has one header line followed by one row per currency, each with exactly eight tab-separated fields::

    CODE  NUMERIC  NAME  USED_BY  SYMBOL  SUBUNIT_SYMBOL  EXPONENT  FLAGS

``USED_BY`` is a ``;``-separated list of territories and ``FLAGS`` a ``,``-separated list of ``special``, ``fund``
and ``superseded(CODE)`` tokens. Empty fields are absent values.

>>> from iso_currency.table import TableParser
>>> parser = TableParser()
>>> (eur,) = parser.parse(["header", "EUR\\t978\\tEuro\\tAT;BE\\t€\\tc\\t2\\t"])
>>> eur.code, eur.numeric, eur.used_by, eur.exponent
('EUR', 978, ('AT', 'BE'), 2)
"""

import csv
import re

from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import NamedTuple

from pydantic import ValidationError

from ..util.mixins import LoggableMixin
from .errors import TableParseError, TableReadError
from .record import CurrencyRecord


COLUMNS: tuple[str, ...] = ("code", "numeric", "name", "used_by", "symbol", "subunit_symbol", "exponent", "flags")

USED_BY_SEPARATOR = ";"
FLAGS_SEPARATOR = ","

SUPERSEDED_PREFIX = "superseded"
SUPERSEDED_REGEX = re.compile(r"^superseded\((?P<target>[A-Z]{3})\)$")
UNSIGNED_REGEX = re.compile(r"^[0-9]+$")
NUMERIC_DIGITS = 3


class RowFlags(NamedTuple):
    is_special: bool = False
    is_fund: bool = False
    superseded_target: str | None = None


class TableParser(LoggableMixin):
    def __init__(self, *, default_symbol: str = "¤", max_exponent: int = 4) -> None:
        self.default_symbol = default_symbol
        self.max_exponent = max_exponent

    # MARK: Entry points
    def read(self, path: Path | str) -> tuple[CurrencyRecord, ...]:
        path = Path(path)
        self.log.debug("Reading currency table %s", path)

        try:
            with path.open(encoding="utf-8", newline="") as f:
                return self.parse(f)
        except (OSError, UnicodeDecodeError) as err:
            msg = f"Could not read currency table '{path}': {err}"
            raise TableReadError(msg) from err

    def parse(self, lines: Iterable[str]) -> tuple[CurrencyRecord, ...]:
        reader = csv.reader(lines, delimiter="\t", quoting=csv.QUOTE_NONE)

        records: list[CurrencyRecord] = []
        for row in reader:
            # Header
            if reader.line_num == 1:
                continue
            # Blank lines, e.g. a trailing newline
            if not row:
                continue
            records.append(self.parse_row(row, line=reader.line_num))

        self.log.debug("Parsed %d currency records", len(records))
        return tuple(records)

    # MARK: Rows
    def parse_row(self, row: Sequence[str], *, line: int | None = None) -> CurrencyRecord:
        code = row[0] if row else None

        if len(row) != len(COLUMNS):
            msg = f"Expected {len(COLUMNS)} tab-separated fields, got {len(row)}"
            raise TableParseError(msg, line=line, code=code)

        fields = dict(zip(COLUMNS, row, strict=True))
        flags = self.parse_flags(fields["flags"], line=line, code=code)

        try:
            return CurrencyRecord(
                code=fields["code"],
                numeric=self._parse_unsigned(fields["numeric"], "numeric code", max_digits=NUMERIC_DIGITS, line=line, code=code),
                name=fields["name"],
                used_by=tuple(fields["used_by"].split(USED_BY_SEPARATOR)) if fields["used_by"] else None,
                symbol=fields["symbol"] or self.default_symbol,
                subunit_symbol=fields["subunit_symbol"] or None,
                exponent=self._parse_exponent(fields["exponent"], line=line, code=code),
                is_special=flags.is_special,
                is_fund=flags.is_fund,
                superseded_target=flags.superseded_target,
                line=line,
            )
        except ValidationError as err:
            raise TableParseError(self._describe_validation_error(err), line=line, code=code) from err

    def _parse_unsigned(self, value: str, what: str, *, max_digits: int, line: int | None, code: str | None) -> int:
        if UNSIGNED_REGEX.match(value) is None:
            msg = f"Could not parse {what} '{value}' as an unsigned integer"
            raise TableParseError(msg, line=line, code=code)

        # Bounded before conversion, leading zeros aside
        digits = len(value.lstrip("0"))
        if digits > max_digits:
            msg = f"Could not parse {what}: {digits} significant digits, at most {max_digits} allowed"
            raise TableParseError(msg, line=line, code=code)
        return int(value)

    def _parse_exponent(self, value: str, *, line: int | None, code: str | None) -> int | None:
        if not value:
            return None

        exponent = self._parse_unsigned(value, "exponent", max_digits=len(str(self.max_exponent)), line=line, code=code)
        if exponent > self.max_exponent:
            msg = f"Exponent {exponent} is larger than the maximum of {self.max_exponent}"
            raise TableParseError(msg, line=line, code=code)
        return exponent

    @staticmethod
    def _describe_validation_error(err: ValidationError) -> str:
        return "; ".join(f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}" for error in err.errors())

    # MARK: Flags
    def parse_flags(self, value: str, *, line: int | None = None, code: str | None = None) -> RowFlags:
        is_special = False
        is_fund = False
        superseded_target = None

        for token in (token.strip() for token in value.split(FLAGS_SEPARATOR)):
            if not token:
                continue

            if token == "special":
                is_special = True
            elif token == "fund":
                is_fund = True
            elif token.startswith(SUPERSEDED_PREFIX):
                match = SUPERSEDED_REGEX.match(token)
                if match is None:
                    msg = f"Invalid format for superseded flag '{token}', expected 'superseded(CODE)'"
                    raise TableParseError(msg, line=line, code=code)
                if superseded_target is not None:
                    msg = f"Currency is superseded more than once ('{superseded_target}' and '{match['target']}')"
                    raise TableParseError(msg, line=line, code=code)
                superseded_target = match["target"]
            else:
                # Unknown tokens are skipped
                self.log.warning("Ignoring unknown flag '%s' (line %s, currency '%s')", token, line, code)

        return RowFlags(is_special=is_special, is_fund=is_fund, superseded_target=superseded_target)
