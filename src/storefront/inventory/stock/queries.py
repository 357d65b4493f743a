"""Read-side stock lookups."""

from protean.utils.globals import current_domain

from storefront.inventory.stock.inventory_record import InventoryRecord


def find_record(product_id):
    repo = current_domain.repository_for(InventoryRecord)
    return repo._dao.query.filter(product_id=str(product_id)).all().first


def all_records():
    repo = current_domain.repository_for(InventoryRecord)
    return repo._dao.query.limit(None).all().items
