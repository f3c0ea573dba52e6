"""Order placement: command and handler.

Records a paid order. Only ever dispatched by checkout, after the payment
gateway has reported a successful capture.
"""

import json

from protean import handle
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.order.order import Order


@ordering.command(part_of="Order")
class PlaceOrder:
    buyer_id = Identifier(required=True)
    cart = Text(required=True)  # JSON: list of cart item dicts
    payment = Text(required=True)  # JSON: payment outcome dict


@ordering.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        cart = json.loads(command.cart) if isinstance(command.cart, str) else command.cart
        payment = json.loads(command.payment) if isinstance(command.payment, str) else command.payment

        order = Order.place(
            buyer_id=command.buyer_id,
            cart=cart,
            payment=payment,
        )
        current_domain.repository_for(Order).add(order)
        return str(order.id)


def place_order(cart, outcome, buyer_id) -> Order:
    """Persist a paid order and return the stored aggregate."""
    order_id = current_domain.process(
        PlaceOrder(
            buyer_id=str(buyer_id),
            cart=json.dumps(list(cart)),
            payment=json.dumps(outcome.to_dict()),
        ),
        asynchronous=False,
    )
    return current_domain.repository_for(Order).get(order_id)
