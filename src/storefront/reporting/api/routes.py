"""FastAPI routes for admin reporting."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from storefront.identity.api.dependencies import require_admin
from storefront.reporting.dashboard import dashboard_stats


class DashboardResponse(BaseModel):
    total_orders: int
    total_revenue: float
    total_products: int
    total_customers: int
    orders_by_status: dict[str, int] = Field(default_factory=dict)


router = APIRouter(
    prefix="/admin/dashboard",
    tags=["admin"],
    dependencies=[Depends(require_admin)],
)


@router.get("", response_model=DashboardResponse)
async def get_dashboard() -> DashboardResponse:
    stats = dashboard_stats()
    return DashboardResponse(
        total_orders=stats.total_orders,
        total_revenue=stats.total_revenue,
        total_products=stats.total_products,
        total_customers=stats.total_customers,
        orders_by_status=stats.orders_by_status,
    )
