"""Awaitable payment gateway client.

Adapts a callback-based TransactionProcessor into coroutines. A call suspends
the current task until the processor invokes its completion callback (from
any thread) or raises synchronously; every failure path, including a sale the
processor reports as unsuccessful, surfaces as a single GatewayError.

One attempt per call: no retries, no idempotency key, no timeout. A processor
that never calls back hangs the awaiting task.
"""

import asyncio

import structlog
from shared.errors import GatewayError

from payments.gateway.port import PaymentOutcome, SaleResult, TransactionProcessor

logger = structlog.get_logger(__name__)


class PaymentGatewayClient:
    """Charges and client tokens as awaitables."""

    def __init__(self, processor: TransactionProcessor) -> None:
        self.processor = processor

    @property
    def name(self) -> str:
        return type(self.processor).__name__

    async def charge(self, amount: float, nonce: str) -> PaymentOutcome:
        """Capture ``amount`` against the payment method behind ``nonce``."""
        result = await self._call(self.processor.sale, amount, nonce)

        if not isinstance(result, SaleResult):
            raise GatewayError(cause="Payment gateway returned no result")
        if not result.success:
            raise GatewayError(cause=result.message or "Payment was not successful")

        return PaymentOutcome(
            success=True,
            transaction_id=result.transaction_id,
            amount=result.amount if result.amount is not None else amount,
            status=result.status,
            processor=self.name,
        )

    async def generate_client_token(self) -> str:
        try:
            token = await self._call(self.processor.generate_client_token)
        except GatewayError as exc:
            raise GatewayError("Error generating payment token", cause=exc.cause) from exc
        if not token:
            raise GatewayError("Error generating payment token", cause="Payment gateway returned no token")
        return token

    async def _call(self, operation, *args):
        loop = asyncio.get_running_loop()
        future = loop.create_future()

        def settle(error, result):
            # Processors must call back once; ignore anything after that
            if future.done():
                return
            future.set_result((error, result))

        def callback(error, result):
            loop.call_soon_threadsafe(settle, error, result)

        try:
            operation(*args, callback)
        except Exception as exc:
            logger.warning("Payment gateway raised during invocation", processor=self.name, error=str(exc))
            raise GatewayError(cause=exc) from exc

        error, result = await future
        if error is not None:
            logger.warning("Payment gateway reported an error", processor=self.name, error=str(error))
            raise GatewayError(cause=error)
        return result
