# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 iso_currency Rui Pinheiro

from .config import Config, ConfigLoader, GeneratorConfig
from .country import Country
from .currency import REGISTRY, Currency
from .registry import (
    CurrencyEnum,
    CurrencySymbol,
    Flag,
    FlagKind,
    ParseCurrencyError,
    Registry,
    RegistryGenerator,
    render_module,
    write_module,
)
from .table import CurrencyRecord, TableError, TableParseError, TableReadError, TableValidationError


__all__ = [
    "REGISTRY",
    "Config",
    "ConfigLoader",
    "Country",
    "Currency",
    "CurrencyEnum",
    "CurrencyRecord",
    "CurrencySymbol",
    "Flag",
    "FlagKind",
    "GeneratorConfig",
    "ParseCurrencyError",
    "Registry",
    "RegistryGenerator",
    "TableError",
    "TableParseError",
    "TableReadError",
    "TableValidationError",
    "render_module",
    "write_module",
]
