"""Notifications react to Order events: customer order confirmations."""

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from storefront.domain import storefront
from storefront.identity.account.account import Account
from storefront.notifications import templates
from storefront.notifications.dispatch import send_email
from storefront.ordering.order.events import OrderPlaced
from storefront.ordering.order.order import Order
from storefront.utils.settings import store_setting

logger = structlog.get_logger(__name__)


@storefront.event_handler(part_of=Order)
class OrderNotificationsHandler:
    @handle(OrderPlaced)
    def on_order_placed(self, event: OrderPlaced) -> None:
        """Send the order confirmation to the customer."""
        try:
            customer = current_domain.repository_for(Account).get(event.customer_id)
        except ObjectNotFoundError:
            logger.warning("Order confirmation skipped, unknown customer", order_id=str(event.order_id))
            return

        message = templates.order_confirmation(
            {
                "order_id": str(event.order_id),
                "customer_name": customer.name,
                "subtotal": event.subtotal,
                "shipping_fee": event.shipping_fee,
                "total_amount": event.total_amount,
                "payment_method": event.payment_method,
                "currency": store_setting("currency"),
            }
        )
        send_email(customer.email, message, kind="order_confirmation")
