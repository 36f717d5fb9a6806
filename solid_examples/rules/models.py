from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProjectRules(BaseModel):
    slug: str
    rules_version: str


class LoggingRules(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("level", mode="before")
    @classmethod
    def _upper(cls, value: object) -> object:
        if isinstance(value, str):
            return value.upper()
        return value


class InvoiceCountryRules(BaseModel):
    currency: str = Field(min_length=3, max_length=3)
    tax_rate: Decimal = Field(ge=0, le=1)  # fraction, 0.18 == 18%


class PaymentsRules(BaseModel):
    gateway: str = "stub"
    succeed: bool = True


class Rules(BaseModel):
    project: ProjectRules
    logging: LoggingRules = LoggingRules()
    invoices: dict[str, InvoiceCountryRules] = {}
    payments: PaymentsRules = PaymentsRules()

    model_config = ConfigDict(extra="forbid")

    @field_validator("invoices")
    @classmethod
    def _lowercase_countries(
        cls, value: dict[str, InvoiceCountryRules]
    ) -> dict[str, InvoiceCountryRules]:
        # The invoice factory matches on lower-cased names
        countries: dict[str, InvoiceCountryRules] = {}
        for country, rules in value.items():
            key = country.lower()
            if key in countries:
                raise ValueError(f"Duplicate invoice country after lower-casing: {country!r}")
            countries[key] = rules
        return countries
