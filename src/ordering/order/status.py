"""Order status updates: command, handler and request validation.

Administrators may set any enumerated status from any current status.
"""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain
from shared.errors import (
    OrderIdFormatError,
    OrderNotFoundError,
    OrderUpdateError,
    StatusValidationError,
)

from ordering.domain import ordering
from ordering.order.order import Order, OrderStatus, is_object_id

logger = structlog.get_logger(__name__)


@ordering.command(part_of="Order")
class UpdateOrderStatus:
    order_id = Identifier(required=True)
    status = String(required=True, choices=OrderStatus)


@ordering.command_handler(part_of=Order)
class UpdateOrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_order_status(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.update_status(command.status)
        repo.add(order)


def change_order_status(order_id, status) -> Order:
    """Validate the request, overwrite the order's status and return the order.

    The id and status are checked before the store is touched.
    """
    if not is_object_id(order_id):
        raise OrderIdFormatError()

    if not status or status not in OrderStatus.values():
        raise StatusValidationError(
            f"Invalid or missing order status. Allowed values are: {', '.join(OrderStatus.values())}."
        )

    try:
        current_domain.process(
            UpdateOrderStatus(order_id=order_id, status=status),
            asynchronous=False,
        )
        order = current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError as exc:
        raise OrderNotFoundError(cause=exc) from exc
    except Exception as exc:
        raise OrderUpdateError(cause=exc) from exc

    logger.info("Order status updated", order_id=order_id, status=status)
    return order
