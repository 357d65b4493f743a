"""Tests for cart opening when a new account registers."""

from storefront.ordering.cart.management import find_cart


class TestCartOpenedOnRegistration:
    def test_customer_gets_a_cart(self, make_customer):
        customer_id = make_customer()
        cart = find_cart(customer_id)
        assert cart is not None
        assert cart.is_empty

    def test_admin_gets_no_cart(self, make_admin):
        admin_id = make_admin()
        assert find_cart(admin_id) is None
