# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 iso_currency Rui Pinheiro

from .errors import TableError, TableParseError, TableReadError, TableValidationError
from .parser import TableParser
from .record import CurrencyRecord
from .validator import TableValidator


__all__ = [
    "CurrencyRecord",
    "TableError",
    "TableParseError",
    "TableReadError",
    "TableParser",
    "TableValidationError",
    "TableValidator",
]
