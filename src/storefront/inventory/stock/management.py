"""Stock maintenance: command and handler."""

from protean import handle
from protean.fields import Float, Identifier, Integer
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.domain import storefront
from storefront.inventory.stock.inventory_record import InventoryRecord
from storefront.inventory.stock.queries import find_record


@storefront.command(part_of="InventoryRecord")
class SetStockLevel:
    """Record the stock on hand for a product, creating its record on first use."""

    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=0)
    cost_price = Float(min_value=0.0)


@storefront.command_handler(part_of=InventoryRecord)
class ManageStockHandler:
    @handle(SetStockLevel)
    def set_stock_level(self, command):
        # Unknown products are rejected with ObjectNotFoundError
        current_domain.repository_for(Product).get(command.product_id)

        record = find_record(command.product_id) or InventoryRecord.create(product_id=command.product_id)
        record.set_level(command.quantity, cost_price=command.cost_price)
        current_domain.repository_for(InventoryRecord).add(record)
        return str(record.id)
