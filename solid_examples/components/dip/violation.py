"""
Dependency inversion violation.

The service builds its own low-level processor, so the processor can
neither be swapped nor faked in a test.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from .models import PaymentResult

logger = logging.getLogger(__name__)


class CreditCardProcessor:
    def charge(self, amount: Decimal) -> PaymentResult:
        logger.debug(f"CreditCardProcessor.charge: amount={amount}")
        return PaymentResult(success=True, amount=amount, gateway="credit_card")


class PaymentService:
    def __init__(self) -> None:
        self.processor = CreditCardProcessor()

    def make_payment(self, amount: Decimal) -> PaymentResult:
        return self.processor.charge(amount)
