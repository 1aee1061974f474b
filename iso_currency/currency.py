# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 iso_currency Rui Pinheiro

from typing import Any

from .registry import CurrencyEnum, Registry, RegistryGenerator


REGISTRY: Registry = RegistryGenerator().generate()


def _update_enum_dict(locals_: dict[str, Any]) -> None:
    locals_.update(REGISTRY.enum_members())


class Currency(CurrencyEnum):
    """ISO 4217 currencies of the bundled currency table.

    >>> from iso_currency import Country, Currency
    >>> Currency.EUR.numeric, Currency.from_numeric(978)
    (978, <Currency.EUR: 'EUR'>)
    >>> Currency.CHF.used_by
    [<Country.CH: 'CH'>, <Country.LI: 'LI'>]
    >>> str(Currency.EUR), str(Currency.EUR.symbol), Currency.JPY.subunit_fraction
    ('Euro', '€', 1)
    >>> Currency.default_for_country(Country.CH)
    <Currency.CHF: 'CHF'>
    >>> Currency.HRK.latest
    <Currency.EUR: 'EUR'>
    """

    __registry__ = REGISTRY

    _update_enum_dict(locals())
