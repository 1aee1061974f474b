# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 iso_currency Rui Pinheiro

import pathlib

from typing import Any

import pytest

from iso_currency.config import Config, ConfigLoader


class ConfigFixture:
    def __init__(self):
        self.loader: ConfigLoader | None = None
        self.config: Config | None = None

    def load(self, data: dict[str, Any] | str | None) -> Config:
        """Load the configuration with the provided data, using a fresh loader."""
        self.loader = ConfigLoader()
        self.config = self.loader.load(data)
        return self.config

    def open(self, path: pathlib.Path | str) -> Config:
        self.loader = ConfigLoader()
        self.config = self.loader.open(path)
        return self.config

    def __getattr__(self, name) -> Any:
        if self.config is None:
            msg = "Configuration not initialized. Call 'load()' first."
            raise RuntimeError(msg)
        return getattr(self.config, name)


@pytest.fixture
def config():
    return ConfigFixture()
