"""BDD tests for the admin-driven order status lifecycle."""

from pytest_bdd import scenarios

scenarios("features/order_status.feature")
