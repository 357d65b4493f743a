"""Cart line management: commands and handler.

Commands address the cart through its owner, since each account has
exactly one cart.
"""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, Identifier, Integer, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.domain import storefront
from storefront.inventory.stock.queries import find_record
from storefront.ordering.cart.cart import Cart
from storefront.ordering.cart.management import cart_for, find_cart


@storefront.command(part_of="Cart")
class AddToCart:
    customer_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    note = Text()


@storefront.command(part_of="Cart")
class UpdateCartLine:
    customer_id = Identifier(required=True)
    line_id = Identifier(required=True)
    quantity = Integer(min_value=1)
    note = Text()
    clear_note = Boolean(default=False)


@storefront.command(part_of="Cart")
class RemoveFromCart:
    customer_id = Identifier(required=True)
    line_id = Identifier(required=True)


@storefront.command(part_of="Cart")
class ClearCart:
    customer_id = Identifier(required=True)


def _ensure_purchasable(product_id):
    product = current_domain.repository_for(Product).get(product_id)
    if not product.active:
        raise ValidationError({"product_id": ["Product is not available"]})
    return product


def _ensure_in_stock(product_id, wanted):
    # Products without an inventory record are not stock-limited
    record = find_record(product_id)
    if record is not None and not record.can_supply(wanted):
        raise ValidationError({"quantity": [f"Not enough stock available (only {record.quantity} left)"]})


@storefront.command_handler(part_of=Cart)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        _ensure_purchasable(command.product_id)

        repo = current_domain.repository_for(Cart)
        cart = cart_for(command.customer_id)
        _ensure_in_stock(command.product_id, cart.quantity_of(command.product_id) + command.quantity)

        line_id = cart.add_line(
            product_id=command.product_id,
            quantity=command.quantity,
            note=command.note,
        )
        repo.add(cart)
        return line_id

    @handle(UpdateCartLine)
    def update_cart_line(self, command):
        repo = current_domain.repository_for(Cart)
        cart = cart_for(command.customer_id)

        changes = {}
        if command.quantity is not None:
            line = cart.get_line(command.line_id)
            if command.quantity > line.quantity:
                _ensure_in_stock(line.product_id, command.quantity)
            changes["quantity"] = command.quantity
        if command.clear_note:
            changes["note"] = None
        elif command.note is not None:
            changes["note"] = command.note

        cart.update_line(command.line_id, **changes)
        repo.add(cart)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = cart_for(command.customer_id)
        cart.remove_line(command.line_id)
        repo.add(cart)

    @handle(ClearCart)
    def clear_cart(self, command):
        cart = find_cart(command.customer_id)
        if cart is None:
            return
        cart.clear()
        current_domain.repository_for(Cart).add(cart)
