# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 iso_currency Rui Pinheiro

from pydantic import BaseModel, ConfigDict


class BaseConfigModel(BaseModel):
    """Base for every configuration model: immutable, and unknown keys are an error."""

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )
