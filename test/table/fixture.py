# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 iso_currency Rui Pinheiro

from iso_currency.table.parser import COLUMNS


HEADER = "\t".join(COLUMNS)


def row(
    code: str,
    numeric: str,
    name: str = "Test currency",
    used_by: str = "",
    symbol: str = "$",
    subunit_symbol: str = "",
    exponent: str = "2",
    flags: str = "",
) -> str:
    return "\t".join((code, numeric, name, used_by, symbol, subunit_symbol, exponent, flags))


def table(*rows: str) -> list[str]:
    """Table lines, header included, as read from a file without the trailing newlines."""
    return [HEADER, *rows]
