"""Tests for checkout pricing rules."""

from storefront.ordering.checkout.pricing import PriceQuote, quote, shipping_for
from storefront.shared.money import line_total, to_money


class TestMoney:
    def test_rounds_half_up(self):
        assert to_money(10.005) == 10.01
        assert to_money(10.004) == 10.0

    def test_none_is_zero(self):
        assert to_money(None) == 0.0

    def test_line_total(self):
        assert line_total(3, 33.33) == 99.99


class TestShipping:
    def test_free_at_threshold(self):
        assert shipping_for(2000, free_shipping_threshold=2000, flat_fee=500) == 0.0

    def test_free_above_threshold(self):
        assert shipping_for(2500, free_shipping_threshold=2000, flat_fee=500) == 0.0

    def test_flat_fee_below_threshold(self):
        assert shipping_for(1999.99, free_shipping_threshold=2000, flat_fee=500) == 500.0


class TestQuote:
    def test_free_shipping_when_threshold_reached(self):
        result = quote([(2, 100), (1, 50)], free_shipping_threshold=200, flat_fee=500)
        assert result == PriceQuote(subtotal=250.0, shipping_fee=0.0, total=250.0)

    def test_flat_fee_below_threshold(self):
        result = quote([(2, 100), (1, 50)], free_shipping_threshold=2000, flat_fee=500)
        assert result == PriceQuote(subtotal=250.0, shipping_fee=500.0, total=750.0)

    def test_threshold_equal_to_subtotal_is_free(self):
        assert quote([(2, 100), (1, 50)], free_shipping_threshold=250, flat_fee=500).shipping_fee == 0.0

    def test_amounts_rounded_to_cents(self):
        result = quote([(3, 0.1), (1, 0.2)], free_shipping_threshold=1000, flat_fee=9.999)
        assert result.subtotal == 0.5
        assert result.shipping_fee == 10.0
        assert result.total == 10.5

    def test_no_lines_has_zero_subtotal(self):
        assert quote([], free_shipping_threshold=2000, flat_fee=500).subtotal == 0.0
