"""Application tests for administrative order status changes."""

from unittest.mock import patch

import pytest
from ordering.domain import ordering
from ordering.order.order import Order
from ordering.order.placement import place_order
from ordering.order.status import UpdateOrderStatus, change_order_status
from payments.gateway.port import PaymentOutcome
from protean import current_domain
from shared.errors import (
    OrderIdFormatError,
    OrderNotFoundError,
    OrderUpdateError,
    StatusValidationError,
)

UNKNOWN_ID = "60c72b2f9b1d4b0015b2e3e6"


def _placed_order():
    outcome = PaymentOutcome(success=True, transaction_id="txn-1", amount=10.0)
    return place_order([{"name": "Novel", "price": 10}], outcome, "user-001")


class TestUpdateOrderStatusCommand:
    def test_process_updates_status(self):
        order = _placed_order()
        current_domain.process(
            UpdateOrderStatus(order_id=str(order.id), status="Processing"),
            asynchronous=False,
        )
        assert current_domain.repository_for(Order).get(order.id).status == "Processing"


class TestChangeOrderStatus:
    def test_returns_updated_order(self):
        order = _placed_order()
        updated = change_order_status(str(order.id), "Shipped")
        assert updated.id == order.id
        assert updated.status == "Shipped"

    def test_change_is_persisted(self):
        order = _placed_order()
        change_order_status(str(order.id), "Delivered")
        assert current_domain.repository_for(Order).get(order.id).status == "Delivered"

    def test_backward_transition_is_allowed(self):
        order = _placed_order()
        change_order_status(str(order.id), "Delivered")
        updated = change_order_status(str(order.id), "Not Processed")
        assert updated.status == "Not Processed"

    def test_other_fields_are_untouched(self):
        order = _placed_order()
        updated = change_order_status(str(order.id), "Cancelled")
        assert updated.payment.transaction_id == "txn-1"
        assert [line.name for line in updated.products] == ["Novel"]
        assert str(updated.buyer_id) == "user-001"


class TestRequestValidation:
    @pytest.mark.parametrize(
        "order_id",
        ["not-a-valid-id", "", "123", UNKNOWN_ID + "0", UNKNOWN_ID + "\n", " " + UNKNOWN_ID],
    )
    def test_malformed_id(self, order_id):
        with pytest.raises(OrderIdFormatError) as exc:
            change_order_status(order_id, "Shipped")
        assert exc.value.status_code == 400
        assert exc.value.message == "Invalid Order ID format. Please provide a valid ObjectId."

    @pytest.mark.parametrize("status", [None, "", "Bogus", "shipped", 3])
    def test_invalid_status(self, status):
        order = _placed_order()
        with pytest.raises(StatusValidationError) as exc:
            change_order_status(str(order.id), status)
        assert exc.value.status_code == 400
        assert exc.value.message == (
            "Invalid or missing order status. Allowed values are: "
            "Not Processed, Processing, Shipped, Delivered, Cancelled."
        )
        assert current_domain.repository_for(Order).get(order.id).status == "Not Processed"

    def test_id_is_checked_before_status(self):
        with pytest.raises(OrderIdFormatError):
            change_order_status("not-a-valid-id", "Bogus")

    def test_validation_does_not_touch_store(self):
        with patch.object(ordering, "process") as process:
            with pytest.raises(OrderIdFormatError):
                change_order_status("not-a-valid-id", "Shipped")
            with pytest.raises(StatusValidationError):
                change_order_status(UNKNOWN_ID, "Bogus")
        process.assert_not_called()


class TestStoreFailures:
    def test_unknown_order(self):
        with pytest.raises(OrderNotFoundError) as exc:
            change_order_status(UNKNOWN_ID, "Shipped")
        assert exc.value.status_code == 404
        assert exc.value.message == "Order not found with the provided ID."

    def test_unexpected_error_is_wrapped(self):
        with patch.object(ordering, "process", side_effect=RuntimeError("store offline")):
            with pytest.raises(OrderUpdateError) as exc:
                change_order_status(UNKNOWN_ID, "Shipped")

        assert exc.value.status_code == 500
        assert exc.value.to_dict() == {
            "success": False,
            "message": "An error occurred while updating the order status.",
            "error": "store offline",
        }
