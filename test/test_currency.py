# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 iso_currency Rui Pinheiro

import pytest

from pydantic import BaseModel

from iso_currency import REGISTRY, Country, Currency, CurrencySymbol, Flag, ParseCurrencyError


CURRENCIES = list(Currency)


class Price(BaseModel):
    currency: Currency


@pytest.mark.currency
class TestCurrencyProperties:
    def test_member_count(self):
        assert len(Currency) == len(REGISTRY) == 182
        assert [member.value for member in Currency] == list(REGISTRY.codes)

    def test_unique(self):
        assert len({member.code for member in CURRENCIES}) == len(CURRENCIES)
        assert len({member.numeric for member in CURRENCIES}) == len(CURRENCIES)

    @pytest.mark.parametrize("currency", CURRENCIES, ids=lambda currency: currency.code)
    def test_round_trip(self, currency: Currency):
        assert Currency.from_code(currency.code) is currency
        assert Currency.from_numeric(currency.numeric) is currency
        assert Currency.parse(currency.code) is currency

    @pytest.mark.parametrize("currency", CURRENCIES, ids=lambda currency: currency.code)
    def test_total(self, currency: Currency):
        assert currency.currency_name
        assert 0 <= currency.numeric <= 999
        assert len(currency.code) == 3
        assert isinstance(currency.symbol, CurrencySymbol)
        assert currency.symbol.symbol

    @pytest.mark.parametrize("currency", CURRENCIES, ids=lambda currency: currency.code)
    def test_used_by_sorted(self, currency: Currency):
        assert currency.used_by == sorted(currency.used_by)
        assert all(isinstance(territory, Country) for territory in currency.used_by)

    @pytest.mark.parametrize("currency", CURRENCIES, ids=lambda currency: currency.code)
    def test_flag_consistency(self, currency: Currency):
        candidates = [Flag.SPECIAL, Flag.FUND, *(Flag.superseded(other) for other in CURRENCIES)]
        for flag in candidates:
            assert currency.has_flag(flag) == (flag in currency.flags)
        assert currency.is_fund == (Flag.FUND in currency.flags)
        assert currency.is_special == (Flag.SPECIAL in currency.flags)

    @pytest.mark.parametrize("currency", CURRENCIES, ids=lambda currency: currency.code)
    def test_supersession_single_hop(self, currency: Currency):
        successor = currency.is_superseded
        if successor is None:
            assert currency.latest is currency
        else:
            assert currency.latest is successor
            assert Flag.superseded(successor) in currency.flags

    @pytest.mark.parametrize("currency", CURRENCIES, ids=lambda currency: currency.code)
    def test_subunit_consistency(self, currency: Currency):
        assert (currency.subunit_fraction is None) == (currency.exponent is None)
        if currency.exponent is not None:
            assert currency.subunit_fraction == 10**currency.exponent

    @pytest.mark.parametrize("currency", CURRENCIES, ids=lambda currency: currency.code)
    def test_from_country_contains_currency(self, currency: Currency):
        for territory in currency.used_by:
            assert currency in Currency.from_country(territory)


@pytest.mark.currency
class TestCurrencyScenarios:
    def test_euro(self):
        assert Currency.EUR.numeric == 978
        assert Currency.EUR.currency_name == "Euro"
        assert Currency.EUR.code == "EUR"
        assert Currency.EUR.subunit_fraction == 100
        assert Currency.from_numeric(978) is Currency.EUR
        assert Currency.EUR.symbol == CurrencySymbol("€", "c")

    def test_swiss_franc(self):
        assert Currency.CHF.used_by == [Country.CH, Country.LI]
        assert Currency.from_country(Country.CH) == [Currency.CHE, Currency.CHF, Currency.CHW]
        assert Currency.default_for_country(Country.CH) is Currency.CHF
        assert Currency.default_for_country("LI") is Currency.CHF

    def test_yen(self):
        assert Currency.JPY.exponent == 0
        assert Currency.JPY.subunit_fraction == 1

    def test_fund(self):
        assert Currency.BOV.is_fund
        assert Currency.BOV.flags == [Flag.FUND]
        assert not Currency.BOB.is_fund
        assert Currency.default_for_country(Country.BO) is Currency.BOB

    def test_special(self):
        assert Currency.XAU.is_special
        assert Currency.XAU.exponent is None
        assert Currency.XAU.used_by == []
        assert str(Currency.XAU.symbol) == "¤"
        assert Currency.XAU.symbol.subunit_symbol is None

    def test_superseded(self):
        successor = Currency.VES.is_superseded
        assert successor is Currency.VED
        assert Currency.VES.latest is successor
        assert successor.latest is successor
        assert Currency.VES.has_flag(Flag.superseded(Currency.VED))
        assert Currency.default_for_country(Country.VE) is Currency.VED

    def test_euro_successor(self):
        assert Currency.HRK.latest is Currency.EUR
        assert Currency.from_country(Country.HR) == [Currency.EUR, Currency.HRK]
        assert Currency.default_for_country(Country.HR) is Currency.EUR

    def test_negative_lookups(self):
        assert Currency.from_code("AAA") is None
        assert Currency.from_code("EU") is None
        assert Currency.from_code("eur") is None
        assert Currency.from_numeric(9999) is None
        assert Currency.from_country(Country.AQ) == []
        assert Currency.default_for_country(Country.AQ) is None


@pytest.mark.currency
class TestCurrencyFacade:
    def test_parse(self):
        assert Currency("EUR") is Currency.EUR
        assert Currency.parse("USD") is Currency.USD

    @pytest.mark.parametrize("value", ["AAA", "eur", "EU", "", "EURO", 978])
    def test_parse_invalid(self, value):
        with pytest.raises(ParseCurrencyError, match="not a valid ISO 4217 currency code"):
            Currency(value)

    @pytest.mark.parametrize("value", ["AAA", "eur", "EU", ""])
    def test_parse_method_invalid(self, value):
        with pytest.raises(ParseCurrencyError, match="not a valid ISO 4217 currency code"):
            Currency.parse(value)

    def test_str_and_format(self):
        assert str(Currency.EUR) == "Euro"
        assert f"{Currency.USD}" == "United States dollar"
        assert f"{Currency.GBP:>16}" == "  Pound sterling"
        assert repr(Currency.EUR) == "<Currency.EUR: 'EUR'>"

    def test_ordering(self):
        assert sorted([Currency.SEK, Currency.DKK, Currency.EUR]) == [Currency.DKK, Currency.EUR, Currency.SEK]
        assert Currency.AED < Currency.ZWL
        assert max(CURRENCIES) is CURRENCIES[-1]

    def test_hashable(self):
        assert len(set(CURRENCIES)) == len(CURRENCIES)
        assert {Currency.EUR: 1}[Currency("EUR")] == 1

    def test_pydantic_field(self):
        assert Price(currency="EUR").currency is Currency.EUR
        assert Price(currency=Currency.CHF).model_dump(mode="json") == {"currency": "CHF"}
        assert Price.model_validate_json('{"currency": "JPY"}').currency is Currency.JPY

        with pytest.raises(ValueError):
            Price.model_validate_json('{"currency": "AAA"}')
        with pytest.raises(ValueError):
            Price(currency="AAA")
