"""Pydantic request/response schemas for the Ordering API.

These are external contracts (anti-corruption layer), separate from
internal Protean commands.
"""

from pydantic import BaseModel, Field

from storefront.ordering.order.order import OrderStatus, PaymentMethod, PaymentStatus


# ---------------------------------------------------------------------------
# Cart Schemas
# ---------------------------------------------------------------------------
class AddToCartRequest(BaseModel):
    product_id: str
    quantity: int = Field(ge=1, default=1)
    note: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "product_id": "2f1c9a4e-6c1b-4d59-9d0e-0f7c2f5a8e11",
                    "quantity": 2,
                    "note": "Walnut stain please",
                }
            ]
        }
    }


class UpdateCartLineRequest(BaseModel):
    quantity: int | None = Field(default=None, ge=1)
    note: str | None = None
    clear_note: bool = False


class CartProductSchema(BaseModel):
    id: str
    name: str
    price: float
    category: str
    material: str | None = None
    main_image: str | None = None
    active: bool


class CartLineResponse(BaseModel):
    id: str
    product_id: str
    quantity: int
    note: str | None = None
    product: CartProductSchema | None = None
    line_total: float | None = None


# ---------------------------------------------------------------------------
# Order Schemas
# ---------------------------------------------------------------------------
class PlaceOrderRequest(BaseModel):
    shipping_address: str = Field(min_length=1)
    payment_method: PaymentMethod

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "shipping_address": "12 Long Street, Cape Town, 8001",
                    "payment_method": "eft",
                }
            ]
        }
    }


class UpdateOrderStatusRequest(BaseModel):
    status: OrderStatus


class UpdatePaymentStatusRequest(BaseModel):
    payment_status: PaymentStatus


class OrderIdResponse(BaseModel):
    order_id: str


class OrderLineResponse(BaseModel):
    id: str
    product_id: str
    product_name: str
    quantity: int
    unit_price: float
    line_total: float


class OrderDetailResponse(BaseModel):
    id: str
    customer_id: str
    status: str
    payment_status: str
    payment_method: str
    shipping_address: str
    subtotal: float
    shipping_fee: float
    total_amount: float
    created_at: str | None = None
    lines: list[OrderLineResponse]

    @classmethod
    def from_order(cls, order) -> "OrderDetailResponse":
        return cls(
            id=str(order.id),
            customer_id=str(order.customer_id),
            status=order.status,
            payment_status=order.payment_status,
            payment_method=order.payment_method,
            shipping_address=order.shipping_address,
            subtotal=order.pricing.subtotal,
            shipping_fee=order.pricing.shipping_fee,
            total_amount=order.pricing.total,
            created_at=order.created_at.isoformat() if order.created_at else None,
            lines=[
                OrderLineResponse(
                    id=str(line.id),
                    product_id=str(line.product_id),
                    product_name=line.product_name,
                    quantity=line.quantity,
                    unit_price=line.unit_price,
                    line_total=line.line_total,
                )
                for line in order.lines
            ],
        )


class OrderSummaryResponse(BaseModel):
    order_id: str
    customer_id: str
    customer_name: str | None = None
    customer_email: str | None = None
    status: str
    payment_status: str
    payment_method: str | None = None
    line_count: int
    total_amount: float
    placed_at: str | None = None

    @classmethod
    def from_summary(cls, summary) -> "OrderSummaryResponse":
        return cls(
            order_id=str(summary.order_id),
            customer_id=str(summary.customer_id),
            customer_name=summary.customer_name,
            customer_email=summary.customer_email,
            status=summary.status,
            payment_status=summary.payment_status,
            payment_method=summary.payment_method,
            line_count=summary.line_count or 0,
            total_amount=summary.total_amount or 0.0,
            placed_at=summary.placed_at.isoformat() if summary.placed_at else None,
        )
