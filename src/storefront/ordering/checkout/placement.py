"""Checkout: turn an account's cart into an order.

The order is built, validated and saved, and the cart emptied, inside the
same unit of work: either both changes are committed or neither is.
"""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.domain import storefront
from storefront.ordering.cart.cart import Cart
from storefront.ordering.cart.management import find_cart
from storefront.ordering.checkout.pricing import quote
from storefront.ordering.order.order import Order, PaymentMethod
from storefront.utils.settings import free_shipping_threshold, shipping_fee

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Order")
class PlaceOrder:
    """Check out the customer's cart."""

    customer_id = Identifier(required=True)
    shipping_address = Text(required=True)
    payment_method = String(required=True, choices=PaymentMethod, max_length=10)


def _priced_lines(cart):
    """Cart lines joined with the current catalogue price of each product."""
    product_repo = current_domain.repository_for(Product)
    lines = []
    for line in cart.lines:
        try:
            product = product_repo.get(line.product_id)
        except ObjectNotFoundError:
            raise ValidationError({"cart": [f"Product {line.product_id} no longer exists"]})
        if not product.active:
            raise ValidationError({"cart": [f"{product.name} is no longer available"]})

        lines.append(
            {
                "product_id": str(product.id),
                "product_name": product.name,
                "quantity": line.quantity,
                "unit_price": product.price,
            }
        )
    return lines


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        cart = find_cart(command.customer_id)
        if cart is None or cart.is_empty:
            raise ValidationError({"cart": ["Cannot place an order from an empty cart"]})

        lines = _priced_lines(cart)
        price_quote = quote(
            ((line["quantity"], line["unit_price"]) for line in lines),
            free_shipping_threshold=free_shipping_threshold(),
            flat_fee=shipping_fee(),
        )

        order = Order.place(
            customer_id=command.customer_id,
            shipping_address=command.shipping_address,
            payment_method=command.payment_method,
            lines=lines,
            pricing=price_quote,
        )
        current_domain.repository_for(Order).add(order)

        cart.clear()
        current_domain.repository_for(Cart).add(cart)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            customer_id=str(command.customer_id),
            total=price_quote.total,
        )
        return str(order.id)
