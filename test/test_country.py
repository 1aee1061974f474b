# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 iso_currency Rui Pinheiro

import pycountry
import pytest

from iso_currency import Country


@pytest.mark.country
class TestCountry:
    def test_members(self):
        assert len(Country) == len(pycountry.countries)
        assert [member.value for member in Country] == sorted(member.value for member in Country)

    def test_string_semantics(self):
        assert Country.CH == "CH"
        assert str(Country.CH) == "CH"
        assert Country("LI") is Country.LI
        assert Country.CH.code == "CH"

    def test_ordering(self):
        assert sorted([Country.LI, Country.CH, Country.AT]) == [Country.AT, Country.CH, Country.LI]

    def test_country_name(self):
        assert Country.CH.country_name == "Switzerland"
        assert Country.LI.country_name == "Liechtenstein"

    def test_unknown(self):
        with pytest.raises(ValueError):
            Country("QQ")
