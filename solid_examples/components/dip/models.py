"""
Dependency inversion component models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class PaymentResult:
    """
    Result of a charge.

    Attributes:
        success: Whether the gateway accepted the charge
        amount: Amount that was charged
        gateway: Name of the gateway that handled it
        reference: Gateway reference, if any
    """

    success: bool
    amount: Decimal
    gateway: str
    reference: str | None = None


@dataclass(frozen=True)
class PaymentError:
    """Payment operation error."""

    code: str
    message: str
    field: str | None = None


@dataclass(frozen=True)
class MakePaymentInput:
    """Input for making a payment."""

    amount: Decimal


@dataclass(frozen=True)
class PaymentOutput:
    """Output of a payment."""

    result: PaymentResult | None = None
    errors: list[PaymentError] = field(default_factory=list)
    success: bool = True
