"""
Dependency inversion component ports.

High-level payment code depends on this contract, never on a gateway class.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Protocol

from .models import PaymentResult


class PaymentGatewayPort(Protocol):
    """
    Port for charging money.

    Implementations:
    - PaymentStubAdapter: Succeeds (or declines) without any network call
    """

    def charge(self, amount: Decimal) -> PaymentResult:
        """
        Charge an amount.

        Args:
            amount: Amount to charge

        Returns:
            PaymentResult describing the outcome
        """
        ...
