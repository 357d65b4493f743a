"""FastAPI routes for the Inventory context (admin only)."""

from fastapi import APIRouter, Depends
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.identity.api.dependencies import require_admin
from storefront.inventory.api.schemas import InventoryRecordResponse, SetStockLevelRequest
from storefront.inventory.stock.management import SetStockLevel
from storefront.inventory.stock.queries import all_records, find_record

router = APIRouter(
    prefix="/admin/inventory",
    tags=["admin"],
    dependencies=[Depends(require_admin)],
)


def _to_response(record) -> InventoryRecordResponse:
    try:
        product_name = current_domain.repository_for(Product).get(record.product_id).name
    except ObjectNotFoundError:
        product_name = None

    return InventoryRecordResponse(
        id=str(record.id),
        product_id=str(record.product_id),
        product_name=product_name,
        quantity=record.quantity,
        cost_price=record.cost_price,
        last_updated=record.last_updated.isoformat() if record.last_updated else None,
    )


@router.get("", response_model=list[InventoryRecordResponse])
async def list_inventory() -> list[InventoryRecordResponse]:
    rows = [_to_response(r) for r in all_records()]
    return sorted(rows, key=lambda r: (r.product_name or "").lower())


@router.put("/{product_id}", response_model=InventoryRecordResponse)
async def set_stock_level(product_id: str, body: SetStockLevelRequest) -> InventoryRecordResponse:
    command = SetStockLevel(
        product_id=product_id,
        quantity=body.quantity,
        cost_price=body.cost_price,
    )
    current_domain.process(command, asynchronous=False)
    return _to_response(find_record(product_id))
