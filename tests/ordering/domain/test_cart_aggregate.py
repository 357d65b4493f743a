"""Tests for the Cart aggregate and its lines."""

import pytest
from protean.exceptions import ObjectNotFoundError, ValidationError

from storefront.ordering.cart.cart import Cart
from storefront.ordering.cart.events import CartCleared, CartLineAdded, CartLineRemoved, CartLineUpdated


class TestCartCreation:
    def test_create_for_customer(self):
        cart = Cart.create(customer_id="cust-001")
        assert str(cart.customer_id) == "cust-001"
        assert cart.is_empty

    def test_create_sets_timestamps(self):
        cart = Cart.create(customer_id="cust-001")
        assert cart.created_at is not None
        assert cart.updated_at is not None


class TestAddLine:
    def test_add_new_product(self):
        cart = Cart.create(customer_id="cust-001")
        line_id = cart.add_line("prod-001", 2, note="Walnut stain")

        assert len(cart.lines) == 1
        line = cart.get_line(line_id)
        assert line.quantity == 2
        assert line.note == "Walnut stain"

    def test_adding_same_product_sums_quantity(self):
        cart = Cart.create(customer_id="cust-001")
        first = cart.add_line("prod-001", 2)
        second = cart.add_line("prod-001", 3)

        assert first == second
        assert len(cart.lines) == 1
        assert cart.quantity_of("prod-001") == 5

    def test_note_replaced_only_when_given(self):
        cart = Cart.create(customer_id="cust-001")
        cart.add_line("prod-001", 1, note="Walnut stain")
        cart.add_line("prod-001", 1)
        assert cart.line_for_product("prod-001").note == "Walnut stain"

        cart.add_line("prod-001", 1, note="Ebony stain")
        assert cart.line_for_product("prod-001").note == "Ebony stain"

    def test_zero_quantity_rejected(self):
        cart = Cart.create(customer_id="cust-001")
        with pytest.raises(ValidationError):
            cart.add_line("prod-001", 0)

    def test_add_raises_event(self):
        cart = Cart.create(customer_id="cust-001")
        cart.add_line("prod-001", 2)
        cart.add_line("prod-001", 1)

        event = cart._events[-1]
        assert isinstance(event, CartLineAdded)
        assert event.quantity_added == 1
        assert event.line_quantity == 3


class TestUpdateAndRemove:
    def test_update_quantity(self):
        cart = Cart.create(customer_id="cust-001")
        line_id = cart.add_line("prod-001", 2)
        cart.update_line(line_id, quantity=7)
        assert cart.quantity_of("prod-001") == 7
        assert isinstance(cart._events[-1], CartLineUpdated)

    def test_update_note_only(self):
        cart = Cart.create(customer_id="cust-001")
        line_id = cart.add_line("prod-001", 2, note="Old")
        cart.update_line(line_id, note="New")
        line = cart.get_line(line_id)
        assert line.note == "New"
        assert line.quantity == 2

    def test_clear_note(self):
        cart = Cart.create(customer_id="cust-001")
        line_id = cart.add_line("prod-001", 2, note="Old")
        cart.update_line(line_id, note=None)
        assert cart.get_line(line_id).note is None

    def test_update_below_one_rejected(self):
        cart = Cart.create(customer_id="cust-001")
        line_id = cart.add_line("prod-001", 2)
        with pytest.raises(ValidationError):
            cart.update_line(line_id, quantity=0)

    def test_unknown_line_is_not_found(self):
        cart = Cart.create(customer_id="cust-001")
        with pytest.raises(ObjectNotFoundError):
            cart.update_line("missing", quantity=1)

    def test_remove_line(self):
        cart = Cart.create(customer_id="cust-001")
        keep = cart.add_line("prod-001", 1)
        drop = cart.add_line("prod-002", 1)
        cart.remove_line(drop)

        assert [str(line.id) for line in cart.lines] == [keep]
        assert isinstance(cart._events[-1], CartLineRemoved)


class TestClear:
    def test_clear_removes_every_line(self):
        cart = Cart.create(customer_id="cust-001")
        cart.add_line("prod-001", 1)
        cart.add_line("prod-002", 4)
        cart.clear()

        assert cart.is_empty
        event = cart._events[-1]
        assert isinstance(event, CartCleared)
        assert event.line_count == 2

    def test_clearing_empty_cart_is_a_no_op(self):
        cart = Cart.create(customer_id="cust-001")
        cart.clear()
        assert cart._events == []
