"""Pydantic response schemas for the Ordering API.

These are external contracts (anti-corruption layer), separate from the
internal Protean aggregate. Checkout and status-update request bodies are
read as raw JSON so that malformed input reaches the domain's own validation
instead of being coerced or rejected with a 422.
"""

from datetime import datetime

from pydantic import BaseModel


class OrderLineSchema(BaseModel):
    name: str | None = None
    price: float
    product_id: str | None = None


class PaymentSchema(BaseModel):
    success: bool
    transaction_id: str | None = None
    amount: float | None = None
    status: str | None = None
    processor: str | None = None


class OrderSchema(BaseModel):
    id: str
    products: list[OrderLineSchema]
    payment: PaymentSchema | None = None
    buyer_id: str
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_order(cls, order) -> "OrderSchema":
        payment = order.payment
        return cls(
            id=str(order.id),
            products=[
                OrderLineSchema(name=line.name, price=line.price, product_id=line.product_id)
                for line in order.products
            ],
            payment=(
                PaymentSchema(
                    success=payment.success,
                    transaction_id=payment.transaction_id,
                    amount=payment.amount,
                    status=payment.status,
                    processor=payment.processor,
                )
                if payment is not None
                else None
            ),
            buyer_id=str(order.buyer_id),
            status=order.status,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )


class CheckoutResponse(BaseModel):
    ok: bool = True
    order: OrderSchema

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "ok": True,
                    "order": {
                        "id": "6650c1e2a4b5c6d7e8f90123",
                        "products": [
                            {"name": "Novel", "price": 10.0, "product_id": None},
                            {"name": "Laptop", "price": 20.0, "product_id": None},
                        ],
                        "payment": {
                            "success": True,
                            "transaction_id": "fake_txn_0123456789ab",
                            "amount": 30.0,
                            "status": "submitted_for_settlement",
                            "processor": "FakeProcessor",
                        },
                        "buyer_id": "user-001",
                        "status": "Not Processed",
                    },
                }
            ]
        }
    }


class OrderStatusResponse(BaseModel):
    success: bool = True
    message: str = "Order status updated successfully."
    order: OrderSchema


class OrderListResponse(BaseModel):
    success: bool = True
    orders: list[OrderSchema]
