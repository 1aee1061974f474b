# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 iso_currency Rui Pinheiro

"""Rendering of a :class:`Registry` as a standalone Python module.

The rendered module depends only on the standard library. It declares the enumeration, the per-currency attribute
tables and the lookup functions, all as literals, so it can be vendored into projects that do not want to read the
currency table at import time.

>>> from iso_currency.config import GeneratorConfig
>>> from iso_currency.registry import RegistryGenerator, render_module
>>> registry = RegistryGenerator(GeneratorConfig(include=("CHF",))).generate()
>>> namespace = {"__name__": "currencies"}
>>> exec(render_module(registry), namespace)
>>> chf = namespace["Currency"]("CHF")
>>> namespace["numeric"](chf), namespace["used_by"](chf)
(756, ['CH', 'LI'])
"""

import keyword
import re

from pathlib import Path

from ..util.mixins import LoggableMixin
from .registry import Registry


HEADER = """\
# Generated by iso_currency from the ISO 4217 currency table. Do not edit.
#
# {count} currencies.

from enum import Enum
"""

# Static part of the generated module, appended after the data tables
FUNCTIONS = '''

def numeric(currency):
    return _RECORDS[currency.value][0]


def name(currency):
    return _RECORDS[currency.value][1]


def code(currency):
    return currency.value


def symbol(currency):
    """Tuple of the display symbol and the subunit symbol (or None)."""
    return _RECORDS[currency.value][2:4]


def exponent(currency):
    return _RECORDS[currency.value][4]


def subunit_fraction(currency):
    value = exponent(currency)
    return None if value is None else 10**value


def used_by(currency):
    return list(_RECORDS[currency.value][5])


def flags(currency):
    return list(_RECORDS[currency.value][6])


def has_flag(currency, flag):
    return str(flag) in _RECORDS[currency.value][6]


def is_special(currency):
    return "special" in _RECORDS[currency.value][6]


def is_fund(currency):
    return "fund" in _RECORDS[currency.value][6]


def is_superseded(currency):
    target = _RECORDS[currency.value][7]
    return None if target is None else {enum_name}(target)


def latest(currency):
    target = is_superseded(currency)
    return currency if target is None else target


def from_code(value):
    if not isinstance(value, str) or len(value) != 3:
        return None
    return {enum_name}(value) if value in _RECORDS else None


def from_numeric(value):
    target = _BY_NUMERIC.get(value)
    return None if target is None else {enum_name}(target)


def from_country(territory):
    return [{enum_name}(target) for target in _BY_TERRITORY.get(str(territory), ())]


def default_for_country(territory):
    for currency in from_country(territory):
        if not _RECORDS[currency.value][6]:
            return currency
    return None
'''


# Names the generated module binds besides the enumeration
RESERVED_NAMES: frozenset[str] = frozenset(re.findall(r"^def (\w+)\(", FUNCTIONS, re.MULTILINE)) | {"Enum"}


class ModuleRenderer(LoggableMixin):
    def __init__(self, registry: Registry, *, enum_name: str = "Currency") -> None:
        if not enum_name.isidentifier() or enum_name.startswith("_") or keyword.iskeyword(enum_name):
            msg = f"Enumeration name '{enum_name}' is not a valid public Python identifier"
            raise ValueError(msg)
        if enum_name in RESERVED_NAMES:
            msg = f"Enumeration name '{enum_name}' clashes with a name defined by the generated module"
            raise ValueError(msg)

        self.registry = registry
        self.enum_name = enum_name

    def render(self) -> str:
        registry = self.registry
        lines = [HEADER.format(count=len(registry)), "", f"class {self.enum_name}(Enum):"]
        lines.extend(f"    {code} = {code!r}" for code in registry.codes)

        # code: (numeric, name, symbol, subunit_symbol, exponent, used_by, flags, superseded_by)
        lines += ["", "", "_RECORDS = {"]
        for record in registry:
            row = (
                record.numeric,
                record.name,
                record.symbol,
                record.subunit_symbol,
                record.exponent,
                registry.used_by(record.code),
                tuple(str(flag) for flag in registry.flags(record.code)),
                record.superseded_target,
            )
            lines.append(f"    {record.code!r}: {row!r},")
        lines.append("}")

        lines += ["", "_BY_NUMERIC = {"]
        lines.extend(f"    {record.numeric!r}: {record.code!r}," for record in registry)
        lines.append("}")

        lines += ["", "_BY_TERRITORY = {"]
        lines.extend(f"    {territory!r}: {registry.from_country(territory)!r}," for territory in registry.territories)
        lines.append("}")

        return "\n".join(lines) + "\n" + FUNCTIONS.replace("{enum_name}", self.enum_name)

    def write(self, path: Path | str) -> bool:
        """Write the rendered module to ``path``, leaving the file untouched if its content is already current.

        Returns whether the file was written.
        """
        path = Path(path)
        source = self.render()

        if path.is_file() and path.read_text(encoding="utf-8") == source:
            self.log.debug("Generated module %s is up to date", path)
            return False

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(source, encoding="utf-8")
        self.log.info("Wrote generated module %s", path)
        return True


def render_module(registry: Registry, *, enum_name: str = "Currency") -> str:
    return ModuleRenderer(registry, enum_name=enum_name).render()


def write_module(registry: Registry, path: Path | str, *, enum_name: str = "Currency") -> bool:
    return ModuleRenderer(registry, enum_name=enum_name).write(path)
