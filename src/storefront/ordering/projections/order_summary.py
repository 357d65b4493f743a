"""Order summary: lightweight listing view for customers and admins."""

from protean.core.projector import on
from protean.exceptions import ObjectNotFoundError
from protean.fields import DateTime, Float, Identifier, Integer, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.account.account import Account
from storefront.ordering.order.events import OrderPlaced, OrderStatusChanged, PaymentStatusChanged
from storefront.ordering.order.order import Order


@storefront.projection
class OrderSummary:
    order_id = Identifier(identifier=True, required=True)
    customer_id = Identifier(required=True)
    customer_name = String(max_length=100)
    customer_email = String(max_length=254)
    status = String(required=True)
    payment_status = String(required=True)
    payment_method = String()
    line_count = Integer(default=0)
    total_amount = Float()
    placed_at = DateTime()
    updated_at = DateTime()


@storefront.projector(projector_for=OrderSummary, aggregates=[Order])
class OrderSummaryProjector:
    @on(OrderPlaced)
    def on_order_placed(self, event):
        try:
            customer = current_domain.repository_for(Account).get(event.customer_id)
            name, email = customer.name, customer.email
        except ObjectNotFoundError:
            name, email = None, None

        current_domain.repository_for(OrderSummary).add(
            OrderSummary(
                order_id=event.order_id,
                customer_id=event.customer_id,
                customer_name=name,
                customer_email=email,
                status="pending",
                payment_status="pending",
                payment_method=event.payment_method,
                line_count=event.line_count,
                total_amount=event.total_amount,
                placed_at=event.placed_at,
                updated_at=event.placed_at,
            )
        )

    @on(OrderStatusChanged)
    def on_order_status_changed(self, event):
        repo = current_domain.repository_for(OrderSummary)
        summary = repo.get(event.order_id)
        summary.status = event.new_status
        summary.updated_at = event.changed_at
        repo.add(summary)

    @on(PaymentStatusChanged)
    def on_payment_status_changed(self, event):
        repo = current_domain.repository_for(OrderSummary)
        summary = repo.get(event.order_id)
        summary.payment_status = event.new_status
        summary.updated_at = event.changed_at
        repo.add(summary)


def orders_for_customer(customer_id):
    repo = current_domain.repository_for(OrderSummary)
    query = repo._dao.query.filter(customer_id=str(customer_id)).order_by("-placed_at")
    return query.limit(None).all().items


def all_orders(status=None):
    repo = current_domain.repository_for(OrderSummary)
    query = repo._dao.query.filter(status=status) if status else repo._dao.query
    return query.order_by("-placed_at").limit(None).all().items
