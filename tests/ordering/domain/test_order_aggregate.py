"""Tests for the Order aggregate: placement, status and payment lifecycles."""

import pytest
from protean.exceptions import ValidationError

from storefront.ordering.checkout.pricing import quote
from storefront.ordering.order.events import OrderPlaced, OrderStatusChanged, PaymentStatusChanged
from storefront.ordering.order.order import Order, OrderStatus, PaymentStatus

_LINES = [
    {"product_id": "prod-001", "product_name": "Kiaat Headboard", "quantity": 2, "unit_price": 100.0},
    {"product_id": "prod-002", "product_name": "Side Table", "quantity": 1, "unit_price": 50.0},
]


def _order(lines=None, threshold=200, fee=500, **overrides):
    lines = _LINES if lines is None else lines
    defaults = {
        "customer_id": "cust-001",
        "shipping_address": "12 Long Street, Cape Town",
        "payment_method": "eft",
        "lines": lines,
        "pricing": quote(((line["quantity"], line["unit_price"]) for line in lines), threshold, fee),
    }
    defaults.update(overrides)
    return Order.place(**defaults)


class TestOrderPlacement:
    def test_place_starts_pending(self):
        order = _order()
        assert order.status == OrderStatus.PENDING.value
        assert order.payment_status == PaymentStatus.PENDING.value

    def test_place_copies_lines(self):
        order = _order()
        assert len(order.lines) == 2
        assert {line.product_name for line in order.lines} == {"Kiaat Headboard", "Side Table"}

    def test_total_with_free_shipping(self):
        order = _order(threshold=200)
        assert order.pricing.subtotal == 250.0
        assert order.pricing.shipping_fee == 0.0
        assert order.total_amount == 250.0

    def test_total_with_shipping_fee(self):
        order = _order(threshold=2000, fee=500)
        assert order.pricing.shipping_fee == 500.0
        assert order.total_amount == 750.0

    def test_line_totals(self):
        order = _order()
        assert sorted(line.line_total for line in order.lines) == [50.0, 200.0]

    def test_place_raises_order_placed(self):
        order = _order()
        event = order._events[-1]
        assert isinstance(event, OrderPlaced)
        assert event.line_count == 2
        assert event.total_amount == 250.0

    def test_empty_order_rejected(self):
        with pytest.raises(ValidationError):
            _order(lines=[])

    def test_unknown_payment_method_rejected(self):
        with pytest.raises(ValidationError) as exc:
            _order(payment_method="bitcoin")
        assert "payment_method" in exc.value.messages

    def test_blank_address_rejected(self):
        with pytest.raises(ValidationError):
            _order(shipping_address="   ")

    def test_total_must_match_lines(self):
        class Tampered:
            subtotal = 250.0
            shipping_fee = 0.0
            total = 999.0

        with pytest.raises(ValidationError) as exc:
            _order(pricing=Tampered())
        assert "total" in exc.value.messages


class TestOrderStatus:
    def test_forward_progression(self):
        order = _order()
        for status in ("confirmed", "in_production", "ready", "delivered"):
            order.change_status(status)
        assert order.status == "delivered"

    def test_non_terminal_states_may_jump(self):
        order = _order()
        order.change_status("ready")
        assert order.status == "ready"
        order.change_status("confirmed")
        assert order.status == "confirmed"

    def test_cancel_from_non_terminal(self):
        order = _order()
        order.change_status("in_production")
        order.change_status("cancelled")
        assert order.status == "cancelled"

    @pytest.mark.parametrize("terminal", ["delivered", "cancelled"])
    @pytest.mark.parametrize("target", ["pending", "confirmed", "ready", "delivered", "cancelled"])
    def test_terminal_states_are_final(self, terminal, target):
        order = _order()
        order.change_status(terminal)
        if target == terminal:
            order.change_status(target)
            assert order.status == terminal
        else:
            with pytest.raises(ValidationError):
                order.change_status(target)

    def test_same_status_is_a_no_op(self):
        order = _order()
        events_before = len(order._events)
        order.change_status("pending")
        assert len(order._events) == events_before

    def test_status_change_raises_event(self):
        order = _order()
        order.change_status("confirmed")
        event = order._events[-1]
        assert isinstance(event, OrderStatusChanged)
        assert event.previous_status == "pending"
        assert event.new_status == "confirmed"

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            _order().change_status("shipped")


class TestPaymentStatus:
    def test_pending_to_paid_to_refunded(self):
        order = _order()
        order.change_payment_status("paid")
        order.change_payment_status("refunded")
        assert order.payment_status == "refunded"
        assert isinstance(order._events[-1], PaymentStatusChanged)

    def test_cannot_refund_unpaid_order(self):
        with pytest.raises(ValidationError):
            _order().change_payment_status("refunded")

    def test_refunded_is_final(self):
        order = _order()
        order.change_payment_status("paid")
        order.change_payment_status("refunded")
        with pytest.raises(ValidationError):
            order.change_payment_status("paid")

    def test_payment_independent_of_status(self):
        order = _order()
        order.change_status("cancelled")
        order.change_payment_status("paid")
        assert order.payment_status == "paid"
