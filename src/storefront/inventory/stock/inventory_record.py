"""InventoryRecord aggregate: a plain stock counter for one product.

Stock is informational: nothing reserves or decrements it at checkout.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, Float, Identifier, Integer

from storefront.domain import storefront
from storefront.inventory.stock.events import StockLevelSet
from storefront.shared.money import to_money


@storefront.aggregate
class InventoryRecord:
    product_id = Identifier(required=True, unique=True)
    quantity = Integer(required=True, min_value=0, default=0)
    cost_price = Float(min_value=0.0)
    last_updated = DateTime()

    @classmethod
    def create(cls, product_id):
        return cls(product_id=product_id, quantity=0, last_updated=datetime.now(UTC))

    def set_level(self, quantity, cost_price=None):
        previous_quantity = self.quantity
        self.quantity = quantity
        if cost_price is not None:
            self.cost_price = to_money(cost_price)

        now = datetime.now(UTC)
        self.last_updated = now
        self.raise_(
            StockLevelSet(
                product_id=str(self.product_id),
                previous_quantity=previous_quantity,
                quantity=quantity,
                set_at=now,
            )
        )

    def can_supply(self, quantity) -> bool:
        return quantity <= self.quantity
