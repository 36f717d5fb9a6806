"""
Dependency inversion principle (DIP).

High-level modules depend on abstractions, not on low-level details.
"""

from . import violation
from .component import PaymentService, run
from .models import MakePaymentInput, PaymentError, PaymentOutput, PaymentResult
from .ports import PaymentGatewayPort

__all__ = [
    "PaymentService",
    "run",
    "MakePaymentInput",
    "PaymentError",
    "PaymentOutput",
    "PaymentResult",
    "PaymentGatewayPort",
    "violation",
]
