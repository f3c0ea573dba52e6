"""Braintree payment processor adapter.

Wraps the official ``braintree`` SDK. SDK calls block on network I/O, so they
run on a small worker pool and complete through the processor callback. The
SDK gateway is built on first use, which means missing credentials surface as
a synchronous raise from the call that needed them.
"""

from concurrent.futures import Future, ThreadPoolExecutor

import braintree
import structlog

from payments.gateway.port import Callback, SaleResult, TransactionProcessor

logger = structlog.get_logger(__name__)

_ENVIRONMENTS = {
    "sandbox": braintree.Environment.Sandbox,
    "production": braintree.Environment.Production,
}


class BraintreeProcessor(TransactionProcessor):
    """Production processor backed by Braintree."""

    def __init__(
        self,
        merchant_id: str | None,
        public_key: str | None,
        private_key: str | None,
        environment: str = "sandbox",
        sdk_gateway=None,
        max_workers: int = 4,
    ) -> None:
        self.merchant_id = merchant_id
        self.public_key = public_key
        self.private_key = private_key
        self.environment = environment
        self._gateway = sdk_gateway
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="braintree")

    @property
    def gateway(self):
        if self._gateway is None:
            if not (self.merchant_id and self.public_key and self.private_key):
                raise ValueError("Braintree credentials are not configured")
            if self.environment not in _ENVIRONMENTS:
                raise ValueError(f"Unknown Braintree environment: {self.environment}")
            self._gateway = braintree.BraintreeGateway(
                braintree.Configuration(
                    environment=_ENVIRONMENTS[self.environment],
                    merchant_id=self.merchant_id,
                    public_key=self.public_key,
                    private_key=self.private_key,
                )
            )
        return self._gateway

    def generate_client_token(self, callback: Callback) -> None:
        gateway = self.gateway
        future = self._executor.submit(gateway.client_token.generate)
        future.add_done_callback(lambda done: _complete(done, callback, lambda token: token))

    def sale(self, amount: float, nonce: str, callback: Callback) -> None:
        gateway = self.gateway
        future = self._executor.submit(
            gateway.transaction.sale,
            {
                "amount": f"{amount:.2f}",
                "payment_method_nonce": nonce,
                "options": {"submit_for_settlement": True},
            },
        )
        future.add_done_callback(lambda done: _complete(done, callback, _to_sale_result))

    def shutdown(self) -> None:
        self._executor.shutdown(wait=False)


def _complete(future: Future, callback: Callback, convert) -> None:
    error = future.exception()
    if error is not None:
        callback(error, None)
        return
    try:
        value = convert(future.result())
    except Exception as exc:
        logger.warning("Unreadable Braintree response", error=str(exc))
        callback(exc, None)
        return
    callback(None, value)


def _to_sale_result(result) -> SaleResult:
    transaction = getattr(result, "transaction", None)
    if not result.is_success:
        logger.info(
            "Braintree sale not successful",
            message=result.message,
            status=getattr(transaction, "status", None),
        )
        return SaleResult(
            success=False,
            transaction_id=getattr(transaction, "id", None),
            status=getattr(transaction, "status", None),
            message=result.message,
        )
    return SaleResult(
        success=True,
        transaction_id=transaction.id,
        amount=float(transaction.amount),
        status=transaction.status,
    )
