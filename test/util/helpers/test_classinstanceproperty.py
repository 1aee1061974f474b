# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 iso_currency Rui Pinheiro

"""Unit tests for the @classinstanceproperty decorator.

Validates class-level and instance-level access and read-only behavior.
"""

import pytest

from iso_currency.util.helpers import classinstanceproperty


class Table:
    rows = 5

    def __init__(self) -> None:
        self.rows = 10

    @classinstanceproperty
    def size(self):
        # first is instance when accessed from an instance, else class
        return self.rows

    @classinstanceproperty
    def doubled(self):
        return self.rows * 2


class SubTable(Table):
    rows = 100

    def __init__(self) -> None:
        self.rows = 200


@pytest.mark.helpers
class TestClassInstanceProperty:
    def test_access_on_class(self):
        assert Table.size == 5
        assert Table.doubled == 10

    def test_access_on_instance(self):
        t = Table()
        assert t.size == 10
        assert t.doubled == 20

    def test_subclass_behavior(self):
        assert SubTable.size == 100
        s = SubTable()
        assert s.size == 200
        assert s.doubled == 400

    def test_read_only_on_instance(self):
        t = Table()
        with pytest.raises(AttributeError):
            t.size = 1  # type: ignore[misc]
        with pytest.raises(AttributeError):
            del t.size
