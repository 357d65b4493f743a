"""Fixtures for the storefront client library."""

import pytest

from storefront_client import CartSession, LocalStorage, StorefrontClient
from storefront_client.errors import AuthenticationRequired, NotFound, TransientError, ValidationFailed


class ScriptedStorefront:
    """Stands in for ``StorefrontClient`` with a server cart held in memory.

    ``fail_on`` maps an operation name to the error it raises, optionally
    after a number of successful calls, to simulate a network drop or an
    expired credential part-way through a merge.
    """

    def __init__(self):
        self.token = None
        self.account = "thandi@example.com"
        self.carts: dict[str, dict[str, int]] = {}
        self.add_requests: list[tuple[str, int]] = []
        self.fail_on: dict[str, tuple[Exception, int]] = {}
        self.known_products: set[str] | None = None
        self.orders: list[str] = []

    @property
    def server_cart(self) -> dict[str, int]:
        return self.carts.setdefault(self.account, {})

    @property
    def is_authenticated(self):
        return self.token is not None

    def _maybe_fail(self, operation):
        if operation in self.fail_on:
            error, remaining_successes = self.fail_on[operation]
            if remaining_successes <= 0:
                raise error
            self.fail_on[operation] = (error, remaining_successes - 1)

    def _lines(self):
        return [
            {"id": f"line-{product_id}", "product_id": product_id, "quantity": quantity, "note": None}
            for product_id, quantity in self.server_cart.items()
        ]

    def login(self, email, password):
        self._maybe_fail("login")
        self.token = f"token-{email}"
        self.account = email
        return {"id": f"account-{email}", "email": email}

    def register(self, name, email, password, **details):
        self.token = f"token-{email}"
        self.account = email
        return {"id": f"account-{email}", "email": email, "name": name}

    def logout(self):
        self.token = None

    def get_cart(self):
        self._maybe_fail("get_cart")
        return self._lines()

    def add_to_cart(self, product_id, quantity=1, note=None):
        self._maybe_fail("add_to_cart")
        if self.known_products is not None and product_id not in self.known_products:
            raise NotFound(f"Product {product_id} not found", 404)
        self.add_requests.append((product_id, quantity))
        self.server_cart[product_id] = self.server_cart.get(product_id, 0) + quantity
        return self._lines()

    def update_cart_line(self, line_id, quantity=None, note=None):
        product_id = line_id.removeprefix("line-")
        if quantity is not None:
            self.server_cart[product_id] = quantity
        return self._lines()

    def remove_cart_line(self, line_id):
        self.server_cart.pop(line_id.removeprefix("line-"), None)
        return self._lines()

    def clear_cart(self):
        self.server_cart.clear()
        return self._lines()

    def place_order(self, shipping_address, payment_method):
        self._maybe_fail("place_order")
        if not self.server_cart:
            raise ValidationFailed("Cannot place an order from an empty cart", 400)
        self.server_cart.clear()
        self.orders.append("order-1")
        return "order-1"


@pytest.fixture
def server():
    return ScriptedStorefront()


@pytest.fixture
def storage(tmp_path):
    return LocalStorage(tmp_path / "storefront.json")


@pytest.fixture
def session(server, storage):
    return CartSession(server, storage)


@pytest.fixture
def transient():
    return TransientError("Could not reach the storefront")


@pytest.fixture
def unauthorized():
    return AuthenticationRequired("Token has expired", 401)


@pytest.fixture
def live_client(api):
    """A real client talking to the in-process API."""
    return StorefrontClient(http=api)
