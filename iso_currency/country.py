# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 iso_currency Rui Pinheiro

"""Territory enumeration referenced by the currency table.

Territories are the ISO 3166-1 alpha-2 codes known to :mod:`pycountry`. Members are strings, so they compare, sort
and hash exactly like their code.

>>> from iso_currency import Country
>>> Country.CH, Country("LI").country_name
(<Country.CH: 'CH'>, 'Liechtenstein')
>>> sorted([Country.LI, Country.CH])
[<Country.CH: 'CH'>, <Country.LI: 'LI'>]
"""

from enum import StrEnum
from typing import Any

import pycountry


def _update_enum_dict(locals_: dict[str, Any]) -> None:
    locals_.update({code: code for code in sorted(country.alpha_2 for country in pycountry.countries)})


class Country(StrEnum):
    _update_enum_dict(locals())

    @property
    def code(self) -> str:
        return self.value

    @property
    def country_name(self) -> str:
        country = pycountry.countries.get(alpha_2=self.value)
        if country is None:
            msg = f"Territory {self.value} is not known to pycountry"
            raise LookupError(msg)
        return country.name
