"""
Open/closed component ports.

Capabilities that new variants implement without touching the callers.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Protocol, runtime_checkable

from .models import InvoiceDocument


@runtime_checkable
class Invoice(Protocol):
    """Country-specific invoice capability."""

    country: str
    currency: str
    tax_rate: Decimal

    def calculate_tax(self, amount: Decimal) -> Decimal:
        """Tax due on a net amount."""
        ...

    def generate(self, amount: Decimal) -> InvoiceDocument:
        """Build the invoice for a net amount."""
        ...


@runtime_checkable
class Shape(Protocol):
    """Anything with an area."""

    def area(self) -> float: ...
