"""Configurable fake payment processor for development and testing.

This adapter simulates a hosted payment processor without any external calls.
It can be configured at runtime to succeed or decline, making it useful for:
- Manual API testing via /payments/gateway/configure
- Automated tests with predictable outcomes
- Development without real gateway credentials

Tests can additionally make it fail at the transport level (error passed to
the callback) or raise synchronously, the two other ways a real SDK fails.
"""

from uuid import uuid4

from payments.gateway.port import Callback, SaleResult, TransactionProcessor


class FakeProcessor(TransactionProcessor):
    """Configurable fake payment processor."""

    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.failure_reason: str = "Processor Declined"
        self.transport_error: BaseException | None = None
        self.raise_on_call: BaseException | None = None
        self.calls: list[dict] = []

    def configure(self, should_succeed: bool, failure_reason: str = "Processor Declined") -> None:
        """Configure processor behavior at runtime."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def generate_client_token(self, callback: Callback) -> None:
        self.calls.append({"method": "generate_client_token"})
        if self.raise_on_call is not None:
            raise self.raise_on_call
        if self.transport_error is not None:
            callback(self.transport_error, None)
            return
        callback(None, f"fake_client_token_{uuid4().hex[:16]}")

    def sale(self, amount: float, nonce: str, callback: Callback) -> None:
        self.calls.append({"method": "sale", "amount": amount, "nonce": nonce})

        if self.raise_on_call is not None:
            raise self.raise_on_call
        if self.transport_error is not None:
            callback(self.transport_error, None)
            return

        if self.should_succeed:
            callback(
                None,
                SaleResult(
                    success=True,
                    transaction_id=f"fake_txn_{uuid4().hex[:12]}",
                    amount=amount,
                    status="submitted_for_settlement",
                ),
            )
        else:
            callback(
                None,
                SaleResult(
                    success=False,
                    status="processor_declined",
                    message=self.failure_reason,
                ),
            )

    @property
    def sales(self) -> list[dict]:
        return [call for call in self.calls if call["method"] == "sale"]
