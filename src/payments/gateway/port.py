"""Payment processor port (abstract interface).

Processors mirror the shape of hosted payment SDKs: every operation takes a
completion callback ``callback(error, result)`` that is invoked exactly once,
possibly from another thread, and an operation may also raise synchronously
(for example when credentials are missing). PaymentGatewayClient turns this
into a single awaitable outcome so callbacks never leak into ordering.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class SaleResult:
    """Processor's answer to a sale request."""

    success: bool
    transaction_id: str | None = None
    amount: float | None = None
    status: str | None = None
    message: str | None = None


@dataclass(frozen=True)
class PaymentOutcome:
    """A captured charge. Only ever produced by PaymentGatewayClient."""

    success: bool
    transaction_id: str | None
    amount: float
    status: str | None = None
    processor: str | None = None

    def to_dict(self) -> dict:
        return asdict(self)


Callback = Callable[[BaseException | None, object], None]


class TransactionProcessor(ABC):
    """Abstract callback-based payment processor."""

    @abstractmethod
    def generate_client_token(self, callback: Callback) -> None:
        """Issue a client token for the storefront's payment UI."""
        ...

    @abstractmethod
    def sale(self, amount: float, nonce: str, callback: Callback) -> None:
        """Authorize and submit for settlement; completes with a SaleResult."""
        ...
