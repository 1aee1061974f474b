# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 iso_currency Rui Pinheiro

import logging

from .helpers.classinstanceproperty import classinstanceproperty
from .logging import getLogger


_LOG_ATTRIBUTE = "__log"

# Every mixin logger is a child of the package logger
PACKAGE = __package__.split(".")[0]


class LoggableMixin:
    """Mixin that adds a ``.log`` logger to a class.

    The logger is available both on the class (named ``iso_currency.T(ClassName)``) and on its instances (named
    ``iso_currency.ClassName``), and is created lazily on first access.
    """

    @classinstanceproperty
    def log(self) -> logging.Logger:
        # Cached per class or instance, never inherited from a base class
        log = vars(self).get(_LOG_ATTRIBUTE)
        if log is None:
            log = getLogger(self.__log_name__)
            setattr(self, _LOG_ATTRIBUTE, log)
        return log

    @classinstanceproperty
    def __log_name__(self) -> str:
        if isinstance(self, type):
            return f"{PACKAGE}.T({self.__name__})"
        return f"{PACKAGE}.{type(self).__name__}"
