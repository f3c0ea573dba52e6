"""Payment gateway factory.

Builds a PaymentGatewayClient around the processor selected by configuration:
- FakeProcessor for development and testing (default)
- BraintreeProcessor for sandbox/production

The client is handed to whatever needs it (the checkout service, the payments
router) rather than held in a module-level global.

Environment:
    PAYMENT_GATEWAY         fake | braintree
    BRAINTREE_ENVIRONMENT   sandbox | production
    BRAINTREE_MERCHANT_ID, BRAINTREE_PUBLIC_KEY, BRAINTREE_PRIVATE_KEY
"""

import os

from payments.gateway.client import PaymentGatewayClient
from payments.gateway.fake_adapter import FakeProcessor
from payments.gateway.port import PaymentOutcome, TransactionProcessor


def build_processor(environ=None) -> TransactionProcessor:
    """Return the processor named by ``PAYMENT_GATEWAY``."""
    environ = os.environ if environ is None else environ
    kind = environ.get("PAYMENT_GATEWAY", "fake").lower()

    if kind == "fake":
        return FakeProcessor()
    if kind == "braintree":
        from payments.gateway.braintree_adapter import BraintreeProcessor

        return BraintreeProcessor(
            merchant_id=environ.get("BRAINTREE_MERCHANT_ID"),
            public_key=environ.get("BRAINTREE_PUBLIC_KEY"),
            private_key=environ.get("BRAINTREE_PRIVATE_KEY"),
            environment=environ.get("BRAINTREE_ENVIRONMENT", "sandbox").lower(),
        )
    raise ValueError(f"Unknown payment gateway: {kind}")


def build_gateway(environ=None) -> PaymentGatewayClient:
    return PaymentGatewayClient(build_processor(environ))


__all__ = [
    "PaymentGatewayClient",
    "PaymentOutcome",
    "build_gateway",
    "build_processor",
]
