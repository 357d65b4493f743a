"""Cart management: cart creation and lookup by owning account."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.ordering.cart.cart import Cart


def find_cart(customer_id):
    repo = current_domain.repository_for(Cart)
    return repo._dao.query.filter(customer_id=str(customer_id)).all().first


def cart_for(customer_id):
    """Return the account's cart, building a fresh (unsaved) one if it has none yet."""
    cart = find_cart(customer_id)
    if cart is None:
        cart = Cart.create(customer_id=str(customer_id))
    return cart


@storefront.command(part_of="Cart")
class CreateCart:
    """Open the (single) cart for an account. Repeated requests are no-ops."""

    customer_id = Identifier(required=True)


@storefront.command_handler(part_of=Cart)
class ManageCartHandler:
    @handle(CreateCart)
    def create_cart(self, command):
        existing = find_cart(command.customer_id)
        if existing is not None:
            return str(existing.id)

        cart = Cart.create(customer_id=command.customer_id)
        current_domain.repository_for(Cart).add(cart)
        return str(cart.id)
