# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 iso_currency Rui Pinheiro

from .mixins import LoggableMixin
from .models import BaseConfigModel


__all__ = [
    "BaseConfigModel",
    "LoggableMixin",
]
