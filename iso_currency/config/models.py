# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 iso_currency Rui Pinheiro

from pathlib import Path
from typing import Annotated

from pydantic import Field, StringConstraints

from ..data import TABLE_PATH
from ..util.logging import LoggingConfig
from ..util.models import BaseConfigModel


CurrencyCode = Annotated[str, StringConstraints(pattern=r"^[A-Z]{3}$")]


class GeneratorConfig(BaseConfigModel):
    table: Path = Field(default=TABLE_PATH, description="Path of the tab-separated currency table")
    include: tuple[CurrencyCode, ...] | None = Field(
        default=None,
        description="Codes to include in the generated registry, in any order. 'None' includes every row of the table.",
    )
    default_symbol: str = Field(default="¤", min_length=1, description="Symbol used for rows whose symbol column is empty")
    max_exponent: int = Field(default=4, ge=0, le=9, description="Largest accepted exponent (number of subunit decimal digits)")


class Config(BaseConfigModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="Logging configuration")
    generator: GeneratorConfig = Field(default_factory=GeneratorConfig, description="Registry generator configuration")
