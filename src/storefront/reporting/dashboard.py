"""Admin dashboard statistics."""

from collections import Counter
from dataclasses import dataclass, field

from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.identity.account.account import AccountRole
from storefront.identity.account.queries import accounts_with_role
from storefront.ordering.order.order import OrderStatus
from storefront.ordering.projections.order_summary import all_orders
from storefront.shared.money import to_money


@dataclass(frozen=True)
class DashboardStats:
    total_orders: int
    total_revenue: float
    total_products: int
    total_customers: int
    orders_by_status: dict = field(default_factory=dict)


def dashboard_stats() -> DashboardStats:
    """Headline numbers for the back office. Cancelled orders earn no revenue."""
    orders = all_orders()
    revenue = sum(o.total_amount or 0.0 for o in orders if o.status != OrderStatus.CANCELLED.value)
    active_products = current_domain.repository_for(Product)._dao.query.filter(active=True).limit(None).all().items

    return DashboardStats(
        total_orders=len(orders),
        total_revenue=to_money(revenue),
        total_products=len(active_products),
        total_customers=len(accounts_with_role(AccountRole.CUSTOMER)),
        orders_by_status=dict(Counter(o.status for o in orders)),
    )
