# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 iso_currency Rui Pinheiro

from dataclasses import dataclass
from typing import override


@dataclass(frozen=True, slots=True)
class CurrencySymbol:
    """Symbol commonly used to display a currency, and the symbol of its subunit if it has one.

    Formats as the main symbol.
    """

    symbol: str
    subunit_symbol: str | None = None

    @override
    def __str__(self) -> str:
        return self.symbol
