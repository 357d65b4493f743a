"""Checkout pricing: subtotal, step-function shipping and total.

Pure functions so the same rules price a live checkout and any test
scenario with a custom free-shipping threshold.
"""

from dataclasses import dataclass
from decimal import Decimal

from storefront.shared.money import line_total, to_money


@dataclass(frozen=True)
class PriceQuote:
    subtotal: float
    shipping_fee: float
    total: float


def shipping_for(subtotal: float, free_shipping_threshold: float, flat_fee: float) -> float:
    """Shipping is free once the subtotal reaches the threshold, a flat fee otherwise."""
    if subtotal >= free_shipping_threshold:
        return 0.0
    return to_money(flat_fee)


def quote(lines, free_shipping_threshold: float, flat_fee: float) -> PriceQuote:
    """Price ``lines``, an iterable of ``(quantity, unit_price)`` pairs."""
    subtotal = to_money(sum((Decimal(str(line_total(qty, price))) for qty, price in lines), Decimal("0")))
    shipping = shipping_for(subtotal, free_shipping_threshold, flat_fee)
    return PriceQuote(
        subtotal=subtotal,
        shipping_fee=shipping,
        total=to_money(Decimal(str(subtotal)) + Decimal(str(shipping))),
    )
