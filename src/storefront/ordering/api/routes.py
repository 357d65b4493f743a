"""FastAPI routes for the Ordering context: cart, checkout and orders."""

from fastapi import APIRouter, Depends, HTTPException
from protean.utils.globals import current_domain

from storefront.identity.api.dependencies import current_identity, require_admin
from storefront.identity.auth.tokens import Identity
from storefront.ordering.api.schemas import (
    AddToCartRequest,
    CartLineResponse,
    OrderDetailResponse,
    OrderIdResponse,
    OrderSummaryResponse,
    PlaceOrderRequest,
    UpdateCartLineRequest,
    UpdateOrderStatusRequest,
    UpdatePaymentStatusRequest,
)
from storefront.ordering.cart.items import AddToCart, ClearCart, RemoveFromCart, UpdateCartLine
from storefront.ordering.cart.queries import cart_lines
from storefront.ordering.checkout.placement import PlaceOrder
from storefront.ordering.order.order import Order, OrderStatus
from storefront.ordering.order.status import UpdateOrderStatus, UpdatePaymentStatus
from storefront.ordering.projections.order_summary import all_orders, orders_for_customer


def _cart_response(customer_id) -> list[CartLineResponse]:
    return [CartLineResponse(**line) for line in cart_lines(customer_id)]


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/cart", tags=["cart"])


@cart_router.get("", response_model=list[CartLineResponse])
async def get_cart(identity: Identity = Depends(current_identity)) -> list[CartLineResponse]:
    return _cart_response(identity.account_id)


@cart_router.post("/items", response_model=list[CartLineResponse])
async def add_cart_item(
    body: AddToCartRequest,
    identity: Identity = Depends(current_identity),
) -> list[CartLineResponse]:
    command = AddToCart(
        customer_id=identity.account_id,
        product_id=body.product_id,
        quantity=body.quantity,
        note=body.note,
    )
    current_domain.process(command, asynchronous=False)
    return _cart_response(identity.account_id)


@cart_router.put("/items/{line_id}", response_model=list[CartLineResponse])
async def update_cart_item(
    line_id: str,
    body: UpdateCartLineRequest,
    identity: Identity = Depends(current_identity),
) -> list[CartLineResponse]:
    command = UpdateCartLine(
        customer_id=identity.account_id,
        line_id=line_id,
        quantity=body.quantity,
        note=body.note,
        clear_note=body.clear_note,
    )
    current_domain.process(command, asynchronous=False)
    return _cart_response(identity.account_id)


@cart_router.delete("/items/{line_id}", response_model=list[CartLineResponse])
async def remove_cart_item(
    line_id: str,
    identity: Identity = Depends(current_identity),
) -> list[CartLineResponse]:
    command = RemoveFromCart(customer_id=identity.account_id, line_id=line_id)
    current_domain.process(command, asynchronous=False)
    return _cart_response(identity.account_id)


@cart_router.delete("", response_model=list[CartLineResponse])
async def clear_cart(identity: Identity = Depends(current_identity)) -> list[CartLineResponse]:
    current_domain.process(ClearCart(customer_id=identity.account_id), asynchronous=False)
    return _cart_response(identity.account_id)


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderIdResponse)
async def place_order(
    body: PlaceOrderRequest,
    identity: Identity = Depends(current_identity),
) -> OrderIdResponse:
    command = PlaceOrder(
        customer_id=identity.account_id,
        shipping_address=body.shipping_address,
        payment_method=body.payment_method.value,
    )
    order_id = current_domain.process(command, asynchronous=False)
    return OrderIdResponse(order_id=order_id)


@order_router.get("", response_model=list[OrderSummaryResponse])
async def list_my_orders(identity: Identity = Depends(current_identity)) -> list[OrderSummaryResponse]:
    return [OrderSummaryResponse.from_summary(s) for s in orders_for_customer(identity.account_id)]


@order_router.get("/{order_id}", response_model=OrderDetailResponse)
async def get_order(order_id: str, identity: Identity = Depends(current_identity)) -> OrderDetailResponse:
    order = current_domain.repository_for(Order).get(order_id)
    if str(order.customer_id) != identity.account_id and not identity.is_admin:
        raise HTTPException(status_code=403, detail="Not authorized to view this order")
    return OrderDetailResponse.from_order(order)


# ---------------------------------------------------------------------------
# Admin Order Router
# ---------------------------------------------------------------------------
admin_order_router = APIRouter(
    prefix="/admin/orders",
    tags=["admin"],
    dependencies=[Depends(require_admin)],
)


@admin_order_router.get("", response_model=list[OrderSummaryResponse])
async def list_all_orders(status: OrderStatus | None = None) -> list[OrderSummaryResponse]:
    summaries = all_orders(status=status.value if status else None)
    return [OrderSummaryResponse.from_summary(s) for s in summaries]


@admin_order_router.put("/{order_id}/status", response_model=OrderDetailResponse)
async def update_order_status(order_id: str, body: UpdateOrderStatusRequest) -> OrderDetailResponse:
    command = UpdateOrderStatus(order_id=order_id, status=body.status.value)
    current_domain.process(command, asynchronous=False)
    return OrderDetailResponse.from_order(current_domain.repository_for(Order).get(order_id))


@admin_order_router.put("/{order_id}/payment-status", response_model=OrderDetailResponse)
async def update_payment_status(order_id: str, body: UpdatePaymentStatusRequest) -> OrderDetailResponse:
    command = UpdatePaymentStatus(order_id=order_id, payment_status=body.payment_status.value)
    current_domain.process(command, asynchronous=False)
    return OrderDetailResponse.from_order(current_domain.repository_for(Order).get(order_id))
