"""
Open/closed component models.

Invoice documents, dispatcher input/output and error results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .ports import Invoice

CENT = Decimal("0.01")


def to_money(value: Decimal | int | str) -> Decimal:
    """Round to two decimal places, half-up."""
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


class UnknownCountryError(ValueError):
    """Raised by the invoice factory for a country it has no invoice for."""

    def __init__(self, country: str) -> None:
        self.country = country
        super().__init__("Not Valid")


# --- Invoice Document ---


@dataclass(frozen=True)
class InvoiceDocument:
    """A generated invoice."""

    country: str
    currency: str
    net: Decimal
    tax: Decimal
    gross: Decimal

    def render(self) -> str:
        return (
            f"Invoice ({self.country.title()})\n"
            f"  net:   {self.net} {self.currency}\n"
            f"  tax:   {self.tax} {self.currency}\n"
            f"  gross: {self.gross} {self.currency}"
        )


# --- Dispatcher ---


@dataclass(frozen=True)
class InvoiceError:
    """Invoice dispatch error."""

    code: str
    message: str
    field: str | None = None


@dataclass(frozen=True)
class GetInvoiceInput:
    """Input for resolving an invoice by country."""

    country: str
    amount: Decimal | None = None


@dataclass(frozen=True)
class InvoiceOutput:
    """Output of an invoice dispatch; document is set when an amount was given."""

    invoice: Invoice | None = None
    document: InvoiceDocument | None = None
    errors: list[InvoiceError] = field(default_factory=list)
    success: bool = True
