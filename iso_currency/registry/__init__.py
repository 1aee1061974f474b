# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 iso_currency Rui Pinheiro

from .enum import CurrencyEnum, ParseCurrencyError
from .flag import Flag, FlagKind
from .generator import RegistryGenerator
from .registry import Registry
from .source import ModuleRenderer, render_module, write_module
from .symbol import CurrencySymbol


__all__ = [
    "CurrencyEnum",
    "CurrencySymbol",
    "Flag",
    "FlagKind",
    "ModuleRenderer",
    "ParseCurrencyError",
    "Registry",
    "RegistryGenerator",
    "render_module",
    "write_module",
]
