# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 iso_currency Rui Pinheiro

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints


CODE_PATTERN = r"^[A-Z]{3}$"

Code = Annotated[str, StringConstraints(pattern=CODE_PATTERN)]
Territory = Annotated[str, StringConstraints(min_length=1, strip_whitespace=True)]


class CurrencyRecord(BaseModel):
    """One validated row of the currency table."""

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    code: Code = Field(description="ISO 4217 alphabetic code, the primary key of the registry")
    numeric: int = Field(ge=0, le=999, description="ISO 4217 numeric code")
    name: str = Field(min_length=1, description="English name of the currency")
    symbol: str = Field(min_length=1, description="Display symbol")
    subunit_symbol: str | None = Field(default=None, description="Display symbol of the fractional subunit, if any")
    exponent: int | None = Field(default=None, ge=0, description="Number of subunit decimal digits, absent for currencies without a subunit")
    used_by: tuple[Territory, ...] | None = Field(default=None, description="Territories using the currency, in table order")
    is_special: bool = Field(default=False, description="Non-circulating special-purpose unit")
    is_fund: bool = Field(default=False, description="Investment-fund unit")
    superseded_target: Code | None = Field(default=None, description="Code of the currency that replaced this one")
    line: int | None = Field(default=None, ge=1, repr=False, exclude=True, description="Source line number, for error reporting")

    @property
    def has_flags(self) -> bool:
        return self.is_special or self.is_fund or self.superseded_target is not None

    @property
    def subunit_fraction(self) -> int | None:
        return None if self.exponent is None else 10**self.exponent
