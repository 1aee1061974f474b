# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 iso_currency Rui Pinheiro

from .loader import ConfigLoader
from .models import Config, CurrencyCode, GeneratorConfig


__all__ = [
    "Config",
    "ConfigLoader",
    "CurrencyCode",
    "GeneratorConfig",
]
