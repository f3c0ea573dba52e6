"""Application tests for order listing queries."""

from unittest.mock import patch

import pytest
from ordering.domain import ordering
from ordering.order.placement import place_order
from ordering.order.queries import all_orders, orders_for_buyer
from payments.gateway.port import PaymentOutcome
from shared.errors import OrderQueryError


def _place(buyer_id, transaction_id):
    outcome = PaymentOutcome(success=True, transaction_id=transaction_id, amount=5.0)
    return place_order([{"name": "Pen", "price": 5}], outcome, buyer_id)


class TestOrdersForBuyer:
    def test_only_the_buyers_orders(self):
        _place("user-001", "txn-1")
        _place("user-002", "txn-2")
        _place("user-001", "txn-3")

        orders = orders_for_buyer("user-001")
        assert {order.payment.transaction_id for order in orders} == {"txn-1", "txn-3"}

    def test_newest_first(self):
        first = _place("user-001", "txn-1")
        second = _place("user-001", "txn-2")

        orders = orders_for_buyer("user-001")
        assert [order.created_at for order in orders] == sorted(
            [first.created_at, second.created_at], reverse=True
        )

    def test_no_orders(self):
        assert orders_for_buyer("user-404") == []


class TestAllOrders:
    def test_every_buyer(self):
        _place("user-001", "txn-1")
        _place("user-002", "txn-2")
        assert len(all_orders()) == 2

    def test_store_failure_is_wrapped(self):
        with patch.object(ordering, "repository_for", side_effect=RuntimeError("store offline")):
            with pytest.raises(OrderQueryError) as exc:
                all_orders()

        assert exc.value.status_code == 500
        assert exc.value.message == "Error While Getting Orders"
