"""Order aggregate (CQRS): the record of a paid checkout.

An order is created exactly once, after the payment gateway has captured the
charge, and is immutable from then on except for its status. Status is
overwritten by administrators and carries no transition ordering: any status
may follow any other.

Order ids follow the 24-hex-character object id format (4-byte timestamp
followed by 8 random bytes) so that they are shared verbatim with the
storefront and the admin UI.
"""

import os
import re
import time
from datetime import UTC, datetime
from enum import Enum

from protean.fields import (
    Boolean,
    DateTime,
    Float,
    HasMany,
    Identifier,
    String,
    Text,
    ValueObject,
)

from ordering.domain import ordering
from ordering.order.events import OrderPlaced, OrderStatusChanged

_OBJECT_ID_PATTERN = re.compile(r"[0-9a-fA-F]{24}")


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    NOT_PROCESSED = "Not Processed"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"

    @classmethod
    def values(cls):
        return [status.value for status in cls]


DEFAULT_ORDER_STATUS = OrderStatus.NOT_PROCESSED


# ---------------------------------------------------------------------------
# Identity helpers
# ---------------------------------------------------------------------------
def new_object_id() -> str:
    """Generate a 24-hex-character object id."""
    return int(time.time()).to_bytes(4, "big").hex() + os.urandom(8).hex()


def is_object_id(value) -> bool:
    return isinstance(value, str) and _OBJECT_ID_PATTERN.fullmatch(value) is not None


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@ordering.value_object(part_of="Order")
class OrderPayment:
    """The gateway's outcome for the charge that paid for this order.

    Recorded verbatim; nothing in ordering interprets it beyond ``success``.
    """

    success = Boolean(default=False)
    transaction_id = String(max_length=255)
    amount = Float(default=0.0)
    status = String(max_length=50)
    processor = String(max_length=50)


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@ordering.entity(part_of="Order")
class OrderLine:
    """A cart item as submitted by the buyer at checkout."""

    name = Text(default="")
    price = Float(required=True, min_value=0.0)
    product_id = Text()


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@ordering.aggregate
class Order:
    products = HasMany(OrderLine)
    payment = ValueObject(OrderPayment)
    buyer_id = Identifier(required=True)
    status = String(
        choices=OrderStatus,
        default=DEFAULT_ORDER_STATUS.value,
    )
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, buyer_id, cart, payment):
        """Record a paid order.

        Args:
            buyer_id: Identity of the signed-in buyer.
            cart: Validated list of cart item dicts (name, price, optional
                  ``_id``/``product_id``).
            payment: Dict with success, transaction_id, amount, status,
                     processor as returned by the gateway client.
        """
        now = datetime.now(UTC)
        lines = [
            OrderLine(
                name=item.get("name") or "",
                price=item["price"],
                product_id=_product_ref(item),
            )
            for item in cart
        ]

        order = cls(
            id=new_object_id(),
            products=lines,
            payment=OrderPayment(**payment),
            buyer_id=str(buyer_id),
            status=DEFAULT_ORDER_STATUS.value,
            created_at=now,
            updated_at=now,
        )
        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                buyer_id=str(buyer_id),
                total=order.payment.amount,
                transaction_id=order.payment.transaction_id or "",
                item_count=len(lines),
                placed_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Status
    # -------------------------------------------------------------------
    def update_status(self, status):
        """Overwrite the status. No transition ordering is enforced."""
        target = OrderStatus(status)
        previous = self.status
        now = datetime.now(UTC)

        self.status = target.value
        self.updated_at = now

        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                previous_status=previous,
                new_status=target.value,
                changed_at=now,
            )
        )


def _product_ref(item):
    ref = item.get("product_id") or item.get("_id")
    return str(ref) if ref is not None else None
