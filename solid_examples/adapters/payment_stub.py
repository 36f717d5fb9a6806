"""
Payment stub adapter.

Stub implementation of PaymentGatewayPort. It never talks to a real
payment provider and reports success unless told to decline.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from uuid import uuid4

from solid_examples.components.dip.models import PaymentResult
from solid_examples.components.dip.ports import PaymentGatewayPort

logger = logging.getLogger(__name__)


@dataclass
class PaymentStubAdapter:
    """
    Stub payment gateway.

    Succeeds for every charge by default. Records the amounts it was
    charged so callers can check what reached the gateway.

    This adapter satisfies the PaymentGatewayPort protocol.
    """

    name: str = "stub"
    succeed: bool = True
    charges: list[Decimal] = field(default_factory=list)

    def charge(self, amount: Decimal) -> PaymentResult:
        """
        Record and "charge" an amount.

        Args:
            amount: Amount to charge

        Returns:
            PaymentResult with success per the configured behavior
        """
        self.charges.append(amount)

        logger.debug(
            f"PaymentStubAdapter.charge: amount={amount}, succeed={self.succeed}"
        )

        return PaymentResult(
            success=self.succeed,
            amount=amount,
            gateway=self.name,
            reference=f"stub-{uuid4().hex[:12]}" if self.succeed else None,
        )

    # --- Testing Helpers ---

    def set_succeed(self, succeed: bool) -> None:
        """Switch between accepting and declining charges."""
        self.succeed = succeed

    def clear_charges(self) -> None:
        """Forget recorded charges."""
        self.charges.clear()


# Verify protocol compliance at module load time
def _verify_protocol_compliance() -> None:
    """Verify PaymentStubAdapter satisfies PaymentGatewayPort protocol."""
    adapter: PaymentGatewayPort = PaymentStubAdapter()
    _ = adapter


_verify_protocol_compliance()
