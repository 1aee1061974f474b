# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 iso_currency Rui Pinheiro

import logging

from typing import Any, override


class Logger(logging.Logger):
    """Logger that can also answer whether a level reaches a specific handler ('tty' or 'file')."""

    @override
    def isEnabledFor(self, level: int, *, handler: str | None = None) -> bool:
        if handler is None:
            return super().isEnabledFor(level)
        if handler == "tty":
            return self.isEnabledForTty(level)
        if handler == "file":
            return self.isEnabledForFile(level)
        msg = f"Unknown handler: {handler}. Expected 'tty' or 'file'."
        raise ValueError(msg)

    def _is_enabled_for_handler(self, handler: logging.Handler | None, level: int) -> bool:
        if handler is None or handler.level > level:
            return False
        return super().isEnabledFor(level)

    def isEnabledForTty(self, level: int) -> bool:  # noqa: N802 which matches isEnabledFor
        from .manager import LoggingManager

        return self._is_enabled_for_handler(LoggingManager().ch, level)

    def isEnabledForFile(self, level: int) -> bool:  # noqa: N802 which matches isEnabledFor
        from .manager import LoggingManager

        return self._is_enabled_for_handler(LoggingManager().fh, level)


def getLogger(obj: object, parent: Any = None, name: str | None = None) -> logging.Logger:  # noqa: N802 which matches logging.getLogger
    """Return the logger for ``obj``.

    The name is ``name`` if given, ``obj`` itself if it is a string, or otherwise the name of its type.
    With a ``parent`` logger (or an object exposing ``.log``) the logger becomes a child of it.
    Loggers that already exist, or that are created before :class:`LoggingManager` is initialised, are plain
    :class:`logging.Logger` instances.
    """
    if name is None:
        name = obj if isinstance(obj, str) else type(obj).__name__

    if parent is None:
        logger = logging.getLogger(name)
    elif isinstance(parent, logging.Logger):
        logger = parent.getChild(name)
    else:
        logger = parent.log.getChild(name)

    # Apply the configured logging level, if the manager is already up
    from .manager import LoggingManager

    manager = LoggingManager()
    if manager.initialized:
        manager.apply_logging_level(logger)

    return logger
