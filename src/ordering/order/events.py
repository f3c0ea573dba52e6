"""Domain events for the Order aggregate.

Events are immutable facts raised by the aggregate and recorded through the
domain's outbox/broker for downstream consumers (fulfillment, notifications).
"""

from protean.fields import DateTime, Float, Identifier, Integer, String

from ordering.domain import ordering


@ordering.event(part_of="Order")
class OrderPlaced:
    """A paid order was recorded after the gateway captured the charge."""

    __version__ = "v1"

    order_id = Identifier(required=True)
    buyer_id = Identifier(required=True)
    total = Float(required=True)
    transaction_id = String(required=True)
    item_count = Integer(required=True)
    placed_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderStatusChanged:
    """An administrator overwrote the order's status."""

    __version__ = "v1"

    order_id = Identifier(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    changed_at = DateTime(required=True)
