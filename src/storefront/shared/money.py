"""Monetary helpers.

Amounts are stored as floats with two decimal places; every computed
amount passes through ``to_money`` before it is persisted.
"""

from decimal import ROUND_HALF_UP, Decimal


def to_money(value) -> float:
    """Round a numeric value to two decimal places (half-up)."""
    return float(Decimal(str(value or 0)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def line_total(quantity: int, unit_price: float) -> float:
    return to_money(Decimal(str(unit_price)) * quantity)
