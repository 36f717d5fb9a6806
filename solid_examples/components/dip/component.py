"""
Dependency inversion component.

PaymentService receives its gateway instead of constructing one and
forwards every payment to it unchanged.

Invariants:
- make_payment calls gateway.charge exactly once with the same amount
- The gateway's result is returned as-is
"""

from __future__ import annotations

import logging
from decimal import Decimal

from .models import MakePaymentInput, PaymentError, PaymentOutput, PaymentResult
from .ports import PaymentGatewayPort

logger = logging.getLogger(__name__)


class PaymentService:
    """Makes payments through whatever gateway it is given."""

    def __init__(self, gateway: PaymentGatewayPort) -> None:
        self.gateway = gateway

    def make_payment(self, amount: Decimal) -> PaymentResult:
        return self.gateway.charge(amount)


def run(inp: MakePaymentInput, *, gateway: PaymentGatewayPort) -> PaymentOutput:
    """
    Make a payment.

    Args:
        inp: Amount to pay
        gateway: Gateway to charge

    Returns:
        PaymentOutput; success mirrors the gateway result
    """
    amount = Decimal(inp.amount)
    if not amount.is_finite() or amount <= 0:
        return PaymentOutput(
            errors=[
                PaymentError(
                    code="invalid_amount",
                    message=f"Amount must be a positive finite number, got {amount}",
                    field="amount",
                )
            ],
            success=False,
        )

    result = PaymentService(gateway).make_payment(amount)
    if not result.success:
        logger.info(f"Payment of {amount} declined by {result.gateway}")
        return PaymentOutput(
            result=result,
            errors=[PaymentError(code="declined", message=f"Declined by {result.gateway}")],
            success=False,
        )
    return PaymentOutput(result=result)
