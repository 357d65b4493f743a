"""Cart aggregate (CQRS): the server-side cart owned by one account.

A cart holds at most one line per product; adding a product that is
already present increases that line's quantity. The cart is emptied when
its contents are turned into an order at checkout.
"""

from datetime import UTC, datetime

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer, Text

from storefront.domain import storefront
from storefront.ordering.cart.events import (
    CartCleared,
    CartLineAdded,
    CartLineRemoved,
    CartLineUpdated,
)

# Sentinel for distinguishing "not provided" from None in partial updates
_UNSET = object()


@storefront.entity(part_of="Cart")
class CartLine:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    note = Text()
    added_at = DateTime()


@storefront.aggregate
class Cart:
    customer_id = Identifier(required=True, unique=True)
    lines = HasMany(CartLine)
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, customer_id):
        now = datetime.now(UTC)
        return cls(customer_id=customer_id, created_at=now, updated_at=now)

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    @property
    def is_empty(self) -> bool:
        return not self.lines

    def line_for_product(self, product_id):
        return next((line for line in self.lines if str(line.product_id) == str(product_id)), None)

    def quantity_of(self, product_id) -> int:
        line = self.line_for_product(product_id)
        return line.quantity if line else 0

    def get_line(self, line_id):
        line = next((line for line in self.lines if str(line.id) == str(line_id)), None)
        if line is None:
            raise ObjectNotFoundError({"line_id": f"Line {line_id} not found in cart"})
        return line

    # -------------------------------------------------------------------
    # Line management
    # -------------------------------------------------------------------
    def add_line(self, product_id, quantity, note=None):
        """Add a product to the cart, or increase the quantity of its existing line.

        A note replaces the existing line's note only when one is given.
        """
        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})

        now = datetime.now(UTC)
        existing = self.line_for_product(product_id)

        if existing:
            existing.quantity += quantity
            if note:
                existing.note = note
            line = existing
        else:
            line = CartLine(product_id=product_id, quantity=quantity, note=note, added_at=now)
            self.add_lines(line)

        self.updated_at = now
        self.raise_(
            CartLineAdded(
                cart_id=str(self.id),
                line_id=str(line.id),
                product_id=str(product_id),
                quantity_added=quantity,
                line_quantity=line.quantity,
            )
        )
        return str(line.id)

    def update_line(self, line_id, quantity=None, note=_UNSET):
        line = self.get_line(line_id)
        if quantity is not None:
            if quantity < 1:
                raise ValidationError({"quantity": ["Quantity must be at least 1"]})
            line.quantity = quantity
        if note is not _UNSET:
            line.note = note

        self.updated_at = datetime.now(UTC)
        self.raise_(
            CartLineUpdated(
                cart_id=str(self.id),
                line_id=str(line.id),
                quantity=line.quantity,
                note=line.note,
            )
        )

    def remove_line(self, line_id):
        line = self.get_line(line_id)
        self.remove_lines(line)

        self.updated_at = datetime.now(UTC)
        self.raise_(
            CartLineRemoved(
                cart_id=str(self.id),
                line_id=str(line_id),
                product_id=str(line.product_id),
            )
        )

    def clear(self):
        """Remove every line. Clearing an empty cart changes nothing."""
        if self.is_empty:
            return

        line_count = len(self.lines)
        for line in list(self.lines):
            self.remove_lines(line)

        self.updated_at = datetime.now(UTC)
        self.raise_(CartCleared(cart_id=str(self.id), line_count=line_count))
