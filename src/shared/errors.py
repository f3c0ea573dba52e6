"""Error taxonomy shared by the ordering and payments contexts.

Every failure that reaches the HTTP boundary is a ServiceError carrying the
status code and client-facing message to render, plus the underlying cause
(if any) for logging.
"""


class ServiceError(Exception):
    """Base class for failures rendered as ``{success: false, message, error?}``."""

    status_code = 500
    default_message = "Internal Server Error"

    def __init__(self, message: str | None = None, cause: BaseException | str | None = None) -> None:
        self.message = message or self.default_message
        self.cause = cause
        super().__init__(self.message)

    def to_dict(self) -> dict:
        body = {"success": False, "message": self.message}
        if self.cause is not None:
            body["error"] = str(self.cause)
        return body


# ---------------------------------------------------------------------------
# Access
# ---------------------------------------------------------------------------
class UnauthorizedError(ServiceError):
    status_code = 401
    default_message = "Unauthorized Access"


# ---------------------------------------------------------------------------
# Checkout
# ---------------------------------------------------------------------------
class CartValidationError(ServiceError):
    status_code = 400
    default_message = "Invalid checkout request"

    def __init__(self, message: str | None = None, rule: str | None = None) -> None:
        super().__init__(message)
        self.rule = rule


class PricingError(ServiceError):
    # Kept at 500 to match the storefront's existing contract
    status_code = 500
    default_message = "Error Processing Payment"

    def __init__(self, reason: str, index: int | None = None) -> None:
        super().__init__(cause=reason)
        self.index = index


class GatewayError(ServiceError):
    status_code = 500
    default_message = "Error Processing Payment"


class PersistenceError(ServiceError):
    status_code = 500
    default_message = "Error Processing Payment"


# ---------------------------------------------------------------------------
# Order administration
# ---------------------------------------------------------------------------
class OrderIdFormatError(ServiceError):
    status_code = 400
    default_message = "Invalid Order ID format. Please provide a valid ObjectId."


class StatusValidationError(ServiceError):
    status_code = 400
    default_message = "Invalid or missing order status."


class OrderNotFoundError(ServiceError):
    status_code = 404
    default_message = "Order not found with the provided ID."


class OrderUpdateError(ServiceError):
    status_code = 500
    default_message = "An error occurred while updating the order status."


class OrderQueryError(ServiceError):
    status_code = 500
    default_message = "Error While Getting Orders"
