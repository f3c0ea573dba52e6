"""Checkout request validation.

The request is checked against an ordered list of named rules; evaluation
stops at the first rule that fails. Runs before any gateway call or store
access.
"""

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass

from shared.errors import CartValidationError

NONCE_REQUIRED = "Payment nonce is required"
CART_REQUIRED = "Cart is required and must not be empty"


@dataclass(frozen=True)
class CheckoutRule:
    name: str
    check: Callable[[Mapping], bool]
    message: str


def _is_sequence(value) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


CHECKOUT_RULES = (
    CheckoutRule(
        "nonce_present",
        lambda payload: isinstance(payload.get("nonce"), str) and payload["nonce"] != "",
        NONCE_REQUIRED,
    ),
    CheckoutRule("cart_present", lambda payload: payload.get("cart") is not None, CART_REQUIRED),
    CheckoutRule("cart_is_sequence", lambda payload: _is_sequence(payload["cart"]), CART_REQUIRED),
    CheckoutRule("cart_not_empty", lambda payload: len(payload["cart"]) > 0, CART_REQUIRED),
)


def validate_checkout(payload, rules=CHECKOUT_RULES):
    """Return the cart from a checkout payload, or raise CartValidationError."""
    if not isinstance(payload, Mapping):
        payload = {}

    for rule in rules:
        if not rule.check(payload):
            raise CartValidationError(rule.message, rule=rule.name)

    return payload["cart"]
