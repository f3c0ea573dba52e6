"""Read-side queries over persisted orders."""

from protean.utils.globals import current_domain
from shared.errors import OrderQueryError

from ordering.order.order import Order


def orders_for_buyer(buyer_id):
    """The buyer's orders, newest first."""
    return _query(buyer_id=str(buyer_id))


def all_orders():
    """Every order, newest first."""
    return _query()


def _query(**filters):
    try:
        query = current_domain.repository_for(Order)._dao.query
        if filters:
            query = query.filter(**filters)
        return query.order_by("-created_at").all().items
    except Exception as exc:
        raise OrderQueryError(cause=exc) from exc
