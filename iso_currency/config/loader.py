# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 iso_currency Rui Pinheiro

import pathlib

from typing import Any

import yaml

from ..util.helpers import script_info
from ..util.logging import LoggingManager
from ..util.mixins import LoggableMixin
from .models import Config
from .yaml_loader import IncludeLoader


class ConfigLoader[C: Config](LoggableMixin):
    """Load a :class:`Config` (or subclass) from a YAML file, a YAML string or a plain dict."""

    def __init__(self, config_class: type[C] = Config) -> None:
        self.config_class = config_class
        self.config: C | None = None

    def open(self, path: pathlib.Path | str) -> C:
        path = pathlib.Path(path)

        with path.open(encoding="UTF-8") as f:
            data = yaml.load(f, IncludeLoader)  # noqa: S506 as IncludeLoader extends yaml.SafeLoader

        return self.load(data)

    def load(self, data: dict[str, Any] | str | None) -> C:
        if self.config is not None:
            msg = "Configuration already loaded. Cannot load again."
            raise RuntimeError(msg)

        if isinstance(data, str):
            data = yaml.load(data, IncludeLoader)  # noqa: S506 as IncludeLoader extends yaml.SafeLoader

        if data is None:
            msg = "Configuration is empty"
            raise ValueError(msg)

        if not isinstance(data, dict):
            msg = f"Invalid configuration format. Expected a dictionary, got {type(data).__name__}"
            raise TypeError(msg)

        self.config = self.config_class.model_validate(data)
        self._init_logging_manager(self.config)

        self.log.debug("Configuration loaded: %s", self.config)
        return self.config

    def _init_logging_manager(self, config: C) -> None:
        # Unit tests set up logging through a session fixture
        if script_info.is_unit_test():
            return

        manager = LoggingManager()
        if not manager.initialized:
            manager.initialize(config.logging)
