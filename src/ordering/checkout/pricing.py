"""Cart pricing.

Prices are trusted as submitted by the client (the catalogue is not
re-queried), but each one must be a real, finite, non-negative number.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass

INVALID_PRICE = "Invalid price in cart item"


@dataclass(frozen=True)
class PriceCheck:
    """Outcome of pricing a cart: a total, or the first offending item."""

    total: float | None = None
    error: str | None = None
    index: int | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _price_is_valid(item) -> bool:
    if not isinstance(item, Mapping):
        return False
    price = item.get("price")
    # bool is an int subclass but never a price
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        return False
    try:
        return math.isfinite(price) and price >= 0
    except OverflowError:
        # int too large to convert to float
        return False


def price_cart(cart) -> PriceCheck:
    """Sum item prices, failing fast on the first invalid one.

    ``math.fsum`` keeps the total exact to the last bit, so it does not
    depend on the order of the items.
    """
    for index, item in enumerate(cart):
        if not _price_is_valid(item):
            return PriceCheck(error=INVALID_PRICE, index=index)

    try:
        total = math.fsum(item["price"] for item in cart)
    except OverflowError:
        return PriceCheck(error=INVALID_PRICE)
    return PriceCheck(total=total)
