# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 iso_currency Rui Pinheiro

import pytest

from iso_currency.config import GeneratorConfig
from iso_currency.registry import RegistryGenerator
from iso_currency.table import TableParseError, TableReadError, TableValidationError

from test.registry.fixture import SMALL_TABLE
from test.table.fixture import row, table


@pytest.mark.generator
class TestRegistryGenerator:
    def test_bundled_table(self):
        registry = RegistryGenerator().generate()

        assert len(registry) == 182
        assert registry.codes[0] == "AED"
        assert registry.codes[-1] == "ZWL"

    def test_idempotent(self):
        first = RegistryGenerator().generate()
        second = RegistryGenerator().generate()

        assert first.records == second.records
        assert first.codes == second.codes
        assert [first.from_country(territory) for territory in first.territories] == [
            second.from_country(territory) for territory in second.territories
        ]

    def test_explicit_lines(self):
        registry = RegistryGenerator().generate(SMALL_TABLE)
        assert registry.codes[:3] == ("CHE", "CHF", "EUR")

    def test_table_from_config(self, tmp_path):
        path = tmp_path / "table.tsv"
        path.write_text("\n".join(table(row("AAA", "001", used_by="CH"))) + "\n", encoding="utf-8")

        registry = RegistryGenerator(GeneratorConfig(table=path)).generate()
        assert registry.codes == ("AAA",)
        assert registry.from_country("CH") == ("AAA",)

    def test_missing_table(self, tmp_path):
        with pytest.raises(TableReadError):
            RegistryGenerator(GeneratorConfig(table=tmp_path / "missing.tsv")).generate()

    def test_subset(self):
        registry = RegistryGenerator(GeneratorConfig(include=("USD", "EUR", "CHF"))).generate()

        # Table order, not include order
        assert registry.codes == ("CHF", "EUR", "USD")
        assert registry.from_numeric(840) == "USD"
        assert registry.from_code("JPY") is None
        assert registry.from_country("CH") == ("CHF",)

    def test_subset_with_supersession(self):
        registry = RegistryGenerator(GeneratorConfig(include=("HRK", "EUR"))).generate()
        assert registry.latest("HRK") == "EUR"

    def test_subset_dangling_supersession(self):
        with pytest.raises(TableValidationError, match="Superseded by unknown currency 'EUR'"):
            RegistryGenerator(GeneratorConfig(include=("HRK",))).generate()

    def test_subset_unknown_code(self):
        with pytest.raises(TableValidationError, match="Cannot include unknown currencies: ABC"):
            RegistryGenerator(GeneratorConfig(include=("EUR", "ABC"))).generate()

    def test_subset_empty(self):
        with pytest.raises(TableValidationError, match="Currency selection is empty"):
            RegistryGenerator(GeneratorConfig(include=())).generate()

    def test_empty_table(self):
        with pytest.raises(TableValidationError, match="Currency table is empty"):
            RegistryGenerator().generate(table())

    def test_default_symbol(self):
        registry = RegistryGenerator(GeneratorConfig(default_symbol="?", include=("XAU", "XXX"))).generate()

        assert str(registry.symbol("XAU")) == "?"
        # Explicit symbols are kept
        assert str(registry.symbol("XXX")) == "¤"

    def test_max_exponent(self):
        # CLF uses four decimal digits
        with pytest.raises(TableParseError, match="Exponent 4 is larger than the maximum of 3") as info:
            RegistryGenerator(GeneratorConfig(max_exponent=3)).generate()
        assert info.value.code == "CLF"

    def test_validation_runs_before_subset(self):
        lines = table(row("AAA", "001"), row("BBB", "001"))
        with pytest.raises(TableValidationError, match="Duplicate numeric code"):
            RegistryGenerator(GeneratorConfig(include=("AAA",))).generate(lines)
