# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 iso_currency Rui Pinheiro


class TableError(ValueError):
    """Base class for every error raised while loading, validating or compiling a currency table.

    These are generation-time errors: no registry is produced when one is raised.
    """

    def __init__(self, message: str, *, line: int | None = None, code: str | None = None) -> None:
        self.message = message
        self.line = line
        self.code = code
        super().__init__(self._format())

    def _format(self) -> str:
        location = []
        if self.line is not None:
            location.append(f"line {self.line}")
        if self.code:
            location.append(f"currency '{self.code}'")
        if not location:
            return self.message
        return f"{', '.join(location)}: {self.message}"


class TableReadError(TableError):
    """The table resource could not be read."""


class TableParseError(TableError):
    """A row of the table is malformed."""


class TableValidationError(TableError):
    """The table rows are individually well-formed but inconsistent with each other."""
