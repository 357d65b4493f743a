"""Domain events for the InventoryRecord aggregate."""

from protean.fields import DateTime, Identifier, Integer

from storefront.domain import storefront


@storefront.event(part_of="InventoryRecord")
class StockLevelSet:
    """An administrator recorded a new stock level for a product."""

    __version__ = 1

    product_id = Identifier(required=True)
    previous_quantity = Integer(required=True)
    quantity = Integer(required=True)
    set_at = DateTime(required=True)
