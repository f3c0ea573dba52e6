"""Checkout: charge a cart and record the paid order.

Pipeline: validate request → price cart → charge gateway → write order.

The order is written strictly after the gateway reports a capture, and
exactly once per capture. If the write fails the money has already moved:
no refund or void is sent back to the gateway and the buyer sees a generic
failure. The captured transaction is logged so it can be reconciled by hand.
"""

import structlog
from payments.gateway import PaymentGatewayClient
from shared.errors import PersistenceError, PricingError

from ordering.checkout.pricing import price_cart
from ordering.checkout.validation import validate_checkout
from ordering.order.placement import place_order

logger = structlog.get_logger(__name__)


class CheckoutService:
    def __init__(self, gateway: PaymentGatewayClient, writer=place_order) -> None:
        self.gateway = gateway
        self.writer = writer

    async def checkout(self, payload, buyer_id):
        cart = validate_checkout(payload)

        priced = price_cart(cart)
        if not priced.ok:
            logger.warning("Rejected cart with invalid price", buyer_id=str(buyer_id), item_index=priced.index)
            raise PricingError(priced.error, index=priced.index)

        logger.info("Charging cart", buyer_id=str(buyer_id), item_count=len(cart), amount=priced.total)
        outcome = await self.gateway.charge(priced.total, payload["nonce"])
        logger.info(
            "Payment captured",
            buyer_id=str(buyer_id),
            transaction_id=outcome.transaction_id,
            amount=outcome.amount,
        )

        try:
            order = self.writer(cart, outcome, buyer_id)
        except Exception as exc:
            logger.error(
                "Order could not be recorded after payment capture",
                buyer_id=str(buyer_id),
                transaction_id=outcome.transaction_id,
                amount=outcome.amount,
                error=str(exc),
            )
            raise PersistenceError(cause=exc) from exc

        logger.info("Order placed", order_id=str(order.id), transaction_id=outcome.transaction_id)
        return order
