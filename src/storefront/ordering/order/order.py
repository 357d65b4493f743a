"""Order aggregate (CQRS): the durable record of a checkout.

The header, pricing and lines are fixed when the order is placed; each
line keeps the unit price that applied at checkout, so later catalogue
price changes never alter historical orders. Only ``status`` and
``payment_status`` change afterwards, both set by administrators.

Status lifecycle:
    PENDING → CONFIRMED → IN_PRODUCTION → READY → DELIVERED
    CANCELLED reachable from any non-terminal state
Non-terminal states may be set directly (e.g. PENDING → READY);
DELIVERED and CANCELLED are terminal.

Payment lifecycle (independent of status):
    PENDING → PAID → REFUNDED
"""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, Text, ValueObject

from storefront.domain import storefront
from storefront.ordering.order.events import OrderPlaced, OrderStatusChanged, PaymentStatusChanged
from storefront.shared.money import line_total, to_money


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    IN_PRODUCTION = "in_production"
    READY = "ready"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class PaymentStatus(Enum):
    PENDING = "pending"
    PAID = "paid"
    REFUNDED = "refunded"


class PaymentMethod(Enum):
    CASH = "cash"
    EFT = "eft"
    CARD = "card"


_TERMINAL_STATES = {OrderStatus.DELIVERED, OrderStatus.CANCELLED}

_PAYMENT_TRANSITIONS = {
    PaymentStatus.PENDING: {PaymentStatus.PAID},
    PaymentStatus.PAID: {PaymentStatus.REFUNDED},
    PaymentStatus.REFUNDED: set(),  # Terminal
}


def _parse(enum_cls, value, field):
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValidationError({field: [f"Unknown {field} '{value}'. Expected one of: {allowed}"]})


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@storefront.value_object(part_of="Order")
class OrderPricing:
    """Amounts locked in at checkout: subtotal, shipping fee and the total charged."""

    subtotal = Float(required=True, min_value=0.0)
    shipping_fee = Float(required=True, min_value=0.0)
    total = Float(required=True, min_value=0.0)


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@storefront.entity(part_of="Order")
class OrderLine:
    """Immutable copy of a cart line, including the price paid per unit."""

    product_id = Identifier(required=True)
    product_name = String(required=True, max_length=200)
    quantity = Integer(required=True, min_value=1)
    unit_price = Float(required=True, min_value=0.0)

    @property
    def line_total(self) -> float:
        return line_total(self.quantity, self.unit_price)


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@storefront.aggregate
class Order:
    customer_id = Identifier(required=True)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    payment_status = String(choices=PaymentStatus, default=PaymentStatus.PENDING.value)
    payment_method = String(required=True, choices=PaymentMethod, max_length=10)
    shipping_address = Text(required=True)
    lines = HasMany(OrderLine)
    pricing = ValueObject(OrderPricing)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def total_must_equal_lines_plus_shipping(self):
        if self.pricing is None or not self.lines:
            return
        expected = to_money(sum(line.line_total for line in self.lines) + self.pricing.shipping_fee)
        if abs(expected - self.pricing.total) > 0.005:
            raise ValidationError({"total": ["Order total must equal the sum of its lines plus shipping"]})

    @invariant.post
    def shipping_address_must_not_be_blank(self):
        if not (self.shipping_address or "").strip():
            raise ValidationError({"shipping_address": ["Shipping address is required"]})

    @property
    def total_amount(self) -> float:
        return self.pricing.total if self.pricing else 0.0

    @property
    def is_terminal(self) -> bool:
        return OrderStatus(self.status) in _TERMINAL_STATES

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, customer_id, shipping_address, payment_method, lines, pricing):
        """Create a pending order from priced lines.

        Args:
            lines: list of dicts with product_id, product_name, quantity, unit_price.
            pricing: a quote with subtotal, shipping_fee and total.
        """
        if not lines:
            raise ValidationError({"lines": ["An order needs at least one line"]})
        _parse(PaymentMethod, payment_method, "payment_method")

        now = datetime.now(UTC)
        order = cls(
            customer_id=customer_id,
            status=OrderStatus.PENDING.value,
            payment_status=PaymentStatus.PENDING.value,
            payment_method=payment_method,
            shipping_address=shipping_address,
            lines=[
                OrderLine(
                    product_id=line["product_id"],
                    product_name=line["product_name"],
                    quantity=line["quantity"],
                    unit_price=to_money(line["unit_price"]),
                )
                for line in lines
            ],
            pricing=OrderPricing(
                subtotal=pricing.subtotal,
                shipping_fee=pricing.shipping_fee,
                total=pricing.total,
            ),
            created_at=now,
            updated_at=now,
        )
        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                customer_id=str(customer_id),
                line_count=len(lines),
                subtotal=pricing.subtotal,
                shipping_fee=pricing.shipping_fee,
                total_amount=pricing.total,
                payment_method=payment_method,
                placed_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Admin-driven state changes
    # -------------------------------------------------------------------
    def change_status(self, new_status):
        target = _parse(OrderStatus, new_status, "status")
        current = OrderStatus(self.status)

        if target == current:
            return
        if current in _TERMINAL_STATES:
            raise ValidationError({"status": [f"Order is {current.value} and can no longer change status"]})

        now = datetime.now(UTC)
        self.status = target.value
        self.updated_at = now
        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                customer_id=str(self.customer_id),
                previous_status=current.value,
                new_status=target.value,
                changed_at=now,
            )
        )

    def change_payment_status(self, new_status):
        target = _parse(PaymentStatus, new_status, "payment_status")
        current = PaymentStatus(self.payment_status)

        if target == current:
            return
        if target not in _PAYMENT_TRANSITIONS[current]:
            raise ValidationError(
                {"payment_status": [f"Cannot change payment status from {current.value} to {target.value}"]}
            )

        now = datetime.now(UTC)
        self.payment_status = target.value
        self.updated_at = now
        self.raise_(
            PaymentStatusChanged(
                order_id=str(self.id),
                previous_status=current.value,
                new_status=target.value,
                changed_at=now,
            )
        )
