# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 iso_currency Rui Pinheiro

import pytest

from iso_currency.registry import Registry
from iso_currency.table import TableParser, TableValidator

from test.table.fixture import row, table


SMALL_TABLE = table(
    row("CHE", "947", "WIR euro", "CH", "", "", "2", "fund"),
    row("CHF", "756", "Swiss franc", "LI;CH", "Fr.", "Rp.", "2"),
    row("EUR", "978", "Euro", "DE;AT", "€", "c", "2"),
    row("DEM", "276", "Deutsche Mark", "DE", "DM", "Pf", "2", "superseded(EUR)"),
    row("XAU", "959", "Gold", "", "", "", "", "special"),
    row("XXX", "999", "No currency", "", "¤", "", "", "special"),
    row("JPY", "392", "Japanese yen", "JP", "¥", "", "0"),
    row("USN", "997", "US dollar (next day)", "US", "", "", "2", "fund"),
    row("OLD", "001", "Old mark", "DE", "M", "", "2", "superseded(DEM)"),
    row("MIX", "002", "Mixed flags", "", "", "", "2", "superseded(EUR),fund,special"),
)


def compile_registry(lines: list[str]) -> Registry:
    return Registry(TableValidator().validate(TableParser().parse(lines)))


@pytest.fixture
def registry() -> Registry:
    return compile_registry(SMALL_TABLE)
