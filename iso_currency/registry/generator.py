# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 iso_currency Rui Pinheiro

from collections.abc import Iterable

from ..config.models import GeneratorConfig
from ..table.parser import TableParser
from ..table.record import CurrencyRecord
from ..table.validator import TableValidator
from ..util.mixins import LoggableMixin
from .registry import Registry


class RegistryGenerator(LoggableMixin):
    """Turns the currency table into a compiled :class:`Registry`.

    The table is read from ``config.table`` (or from explicit ``lines``), parsed, validated as a whole, then reduced to
    ``config.include`` when a subset is requested. Any failure aborts generation with a :class:`TableError`, so a
    registry is never built from a partially valid table.

    >>> from iso_currency.config import GeneratorConfig
    >>> from iso_currency.registry import RegistryGenerator
    >>> registry = RegistryGenerator(GeneratorConfig(include=("USD", "EUR"))).generate()
    >>> registry.codes
    ('EUR', 'USD')
    """

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        self.config = GeneratorConfig() if config is None else config
        self.parser = TableParser(default_symbol=self.config.default_symbol, max_exponent=self.config.max_exponent)
        self.validator = TableValidator()

    def load(self, lines: Iterable[str] | None = None) -> tuple[CurrencyRecord, ...]:
        """Parse and validate every row of the table."""
        records = self.parser.read(self.config.table) if lines is None else self.parser.parse(lines)
        return self.validator.validate(records)

    def generate(self, lines: Iterable[str] | None = None) -> Registry:
        records = self.validator.select(self.load(lines), self.config.include)
        registry = Registry(records)
        self.log.info("Generated currency registry with %d currencies", len(registry))
        return registry
