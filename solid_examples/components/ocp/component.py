"""
Open/closed component.

Invoices and shapes that are open for extension and closed for modification.
A new country is a new Invoice class plus one mapping entry; a new shape
only has to provide area().

Invariants:
- Country lookup is case-insensitive and exact otherwise
- Unknown countries never fall back to a default invoice
- Money is rounded half-up to cents
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType

from .models import (
    GetInvoiceInput,
    InvoiceDocument,
    InvoiceError,
    InvoiceOutput,
    UnknownCountryError,
    to_money,
)
from .ports import Invoice, Shape

logger = logging.getLogger(__name__)


# --- Invoice Variants ---


class _BaseInvoice:
    country: str = ""
    currency: str = ""
    default_tax_rate: Decimal = Decimal("0")

    def __init__(self, tax_rate: Decimal | None = None, currency: str | None = None):
        self.tax_rate = Decimal(tax_rate) if tax_rate is not None else self.default_tax_rate
        if currency is not None:
            self.currency = currency

    def calculate_tax(self, amount: Decimal) -> Decimal:
        amount = Decimal(amount)
        if not amount.is_finite():
            raise ValueError(f"Invoice amount must be a finite number: {amount}")
        if amount < 0:
            raise ValueError(f"Invoice amount must not be negative: {amount}")
        return to_money(to_money(amount) * self.tax_rate)

    def generate(self, amount: Decimal) -> InvoiceDocument:
        tax = self.calculate_tax(amount)
        net = to_money(amount)
        return InvoiceDocument(
            country=self.country,
            currency=self.currency,
            net=net,
            tax=tax,
            gross=net + tax,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(tax_rate={self.tax_rate}, currency={self.currency!r})"


class IndiaInvoice(_BaseInvoice):
    """Indian invoice with GST."""

    country = "india"
    currency = "INR"
    default_tax_rate = Decimal("0.18")


class GermanyInvoice(_BaseInvoice):
    """German invoice with VAT (Mehrwertsteuer)."""

    country = "germany"
    currency = "EUR"
    default_tax_rate = Decimal("0.19")


INVOICE_TYPES: Mapping[str, type[Invoice]] = MappingProxyType(
    {
        "india": IndiaInvoice,
        "germany": GermanyInvoice,
    }
)


# --- Dispatcher ---


def get_invoice(
    country: str,
    rates: Mapping[str, tuple[str, Decimal]] | None = None,
) -> Invoice:
    """
    Return the invoice variant for a country.

    Args:
        country: Country name, any letter case
        rates: Optional per-country (currency, tax_rate) overrides from rules

    Returns:
        IndiaInvoice or GermanyInvoice

    Raises:
        UnknownCountryError: for any other country
    """
    key = country.lower()
    invoice_type = INVOICE_TYPES.get(key)
    if invoice_type is None:
        logger.warning(f"No invoice for country {country!r}")
        raise UnknownCountryError(country)

    if rates and key in rates:
        currency, tax_rate = rates[key]
        return invoice_type(tax_rate=tax_rate, currency=currency)  # type: ignore[call-arg]
    return invoice_type()


def run(
    inp: GetInvoiceInput,
    rates: Mapping[str, tuple[str, Decimal]] | None = None,
) -> InvoiceOutput:
    """
    Resolve an invoice, reporting an unknown country as an error result.

    Args:
        inp: Country and optional amount to invoice
        rates: Optional per-country overrides from rules

    Returns:
        InvoiceOutput; success is False for an unknown country or bad amount
    """
    try:
        invoice = get_invoice(inp.country, rates)
    except UnknownCountryError as e:
        return InvoiceOutput(
            errors=[
                InvoiceError(
                    code="unknown_country",
                    message=f"{e}: {e.country!r}",
                    field="country",
                )
            ],
            success=False,
        )

    if inp.amount is None:
        return InvoiceOutput(invoice=invoice)

    try:
        document = invoice.generate(inp.amount)
    except ValueError as e:
        return InvoiceOutput(
            invoice=invoice,
            errors=[InvoiceError(code="invalid_amount", message=str(e), field="amount")],
            success=False,
        )
    return InvoiceOutput(invoice=invoice, document=document)


# --- Shapes ---


@dataclass(frozen=True)
class Circle:
    radius: float

    def area(self) -> float:
        return math.pi * self.radius**2


@dataclass(frozen=True)
class Rectangle:
    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class Triangle:
    """Added without changing total_area."""

    base: float
    height: float

    def area(self) -> float:
        return 0.5 * self.base * self.height


def total_area(shapes: Iterable[Shape]) -> float:
    return sum(shape.area() for shape in shapes)
