"""Inbound event handler: Ordering reacts to Account events.

Every newly registered customer gets an empty cart straight away, so
reconciliation at first login always has a server cart to merge into.
"""

import structlog
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from storefront.domain import storefront
from storefront.identity.account.account import AccountRole
from storefront.identity.account.events import AccountRegistered
from storefront.ordering.cart.cart import Cart
from storefront.ordering.cart.management import find_cart

logger = structlog.get_logger(__name__)


@storefront.event_handler(part_of=Cart, stream_category="storefront::account")
class AccountEventsHandler:
    """Opens carts for new customer accounts."""

    @handle(AccountRegistered)
    def on_account_registered(self, event: AccountRegistered) -> None:
        if event.role != AccountRole.CUSTOMER.value:
            return

        if find_cart(event.account_id) is not None:
            return

        cart = Cart.create(customer_id=str(event.account_id))
        current_domain.repository_for(Cart).add(cart)
        logger.info("Cart opened for new customer", customer_id=str(event.account_id), cart_id=str(cart.id))
