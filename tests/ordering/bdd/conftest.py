"""Shared BDD fixtures and step definitions for the Ordering context."""

import pytest
from protean import current_domain
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then, when

from storefront.catalogue.product.management import DeactivateProduct, UpdateProduct
from storefront.inventory.stock.management import SetStockLevel
from storefront.ordering.cart.items import AddToCart, ClearCart
from storefront.ordering.cart.queries import cart_lines
from storefront.ordering.checkout.placement import PlaceOrder
from storefront.ordering.order.order import Order
from storefront.ordering.order.status import UpdateOrderStatus


@pytest.fixture
def products():
    """Product ids by their name in the scenario."""
    return {}


@pytest.fixture
def outcome():
    return {"order_id": None, "error": None}


def _quantities(customer_id, products):
    names = {product_id: name for name, product_id in products.items()}
    return {names[line["product_id"]]: line["quantity"] for line in cart_lines(customer_id)}


def _attempt(outcome, command):
    try:
        return current_domain.process(command, asynchronous=False)
    except ValidationError as exc:
        outcome["error"] = exc
        return None


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("a signed-up customer", target_fixture="customer_id")
def signed_up_customer(make_customer):
    return make_customer()


@given(parsers.cfparse('a product "{name}" priced at {price:f}'))
def product_priced_at(make_product, products, name, price):
    products[name] = make_product(name=name, price=price)


@given(parsers.cfparse('"{name}" has {quantity:d} in stock'))
def product_in_stock(products, name, quantity):
    current_domain.process(SetStockLevel(product_id=products[name], quantity=quantity), asynchronous=False)


@given(parsers.cfparse('the customer has {quantity:d} of "{name}" in their cart'))
def cart_holds_one_product(customer_id, products, quantity, name):
    current_domain.process(
        AddToCart(customer_id=customer_id, product_id=products[name], quantity=quantity),
        asynchronous=False,
    )


@given(parsers.cfparse('the customer\'s cart holds {qty_a:d} of "{a}" and {qty_b:d} of "{b}"'))
def cart_holds_two_products(customer_id, products, qty_a, a, qty_b, b):
    for name, quantity in ((a, qty_a), (b, qty_b)):
        current_domain.process(
            AddToCart(customer_id=customer_id, product_id=products[name], quantity=quantity),
            asynchronous=False,
        )


@given(parsers.cfparse("free shipping starts at {threshold:f}"))
def free_shipping_threshold(monkeypatch, threshold):
    monkeypatch.setenv("FREE_SHIPPING_THRESHOLD", str(threshold))


@given(parsers.cfparse("the flat shipping fee is {fee:f}"))
def flat_shipping_fee(monkeypatch, fee):
    monkeypatch.setenv("SHIPPING_FEE", str(fee))


@given(parsers.cfparse('product "{name}" has been withdrawn from sale'))
def product_withdrawn(products, name):
    current_domain.process(DeactivateProduct(product_id=products[name]), asynchronous=False)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('the customer checks out paying by "{method}"'))
@when(parsers.cfparse('the customer checks out paying by "{method}"'))
def customer_checks_out(customer_id, outcome, method):
    outcome["order_id"] = _attempt(
        outcome,
        PlaceOrder(customer_id=customer_id, shipping_address="12 Long Street, Cape Town", payment_method=method),
    )


@when(parsers.cfparse('the customer adds {quantity:d} of "{name}"'))
def customer_adds(customer_id, products, outcome, quantity, name):
    _attempt(outcome, AddToCart(customer_id=customer_id, product_id=products[name], quantity=quantity))


@when("the customer clears the cart")
def customer_clears_cart(customer_id):
    current_domain.process(ClearCart(customer_id=customer_id), asynchronous=False)


@when(parsers.cfparse('product "{name}" is repriced to {price:f}'))
def product_repriced(products, name, price):
    current_domain.process(UpdateProduct(product_id=products[name], price=price), asynchronous=False)


@when(parsers.cfparse('the order is marked "{status}"'))
def order_marked(outcome, status):
    _attempt(outcome, UpdateOrderStatus(order_id=outcome["order_id"], status=status))


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
def _order(outcome):
    assert outcome["error"] is None, outcome["error"]
    return current_domain.repository_for(Order).get(outcome["order_id"])


@then(parsers.cfparse("the order total is {amount:f}"))
def order_total_is(outcome, amount):
    assert _order(outcome).total_amount == pytest.approx(amount)


@then(parsers.cfparse("the shipping fee is {amount:f}"))
def shipping_fee_is(outcome, amount):
    assert _order(outcome).pricing.shipping_fee == pytest.approx(amount)


@then(parsers.cfparse('the order line for "{name}" has unit price {price:f}'))
def order_line_unit_price(outcome, products, name, price):
    line = next(line for line in _order(outcome).lines if str(line.product_id) == products[name])
    assert line.unit_price == pytest.approx(price)


@then(parsers.cfparse('the order status is "{status}"'))
def order_status_is(outcome, status):
    order = current_domain.repository_for(Order).get(outcome["order_id"])
    assert order.status == status


@then("the customer's cart is empty")
def cart_is_empty(customer_id):
    assert cart_lines(customer_id) == []


@then(parsers.cfparse('the customer\'s cart still holds {qty_a:d} of "{a}" and {qty_b:d} of "{b}"'))
def cart_still_holds(customer_id, products, qty_a, a, qty_b, b):
    assert _quantities(customer_id, products) == {a: qty_a, b: qty_b}


@then(parsers.cfparse("the cart has {count:d} line"))
@then(parsers.cfparse("the cart has {count:d} lines"))
def cart_has_lines(customer_id, count):
    assert len(cart_lines(customer_id)) == count


@then(parsers.cfparse('the cart holds {quantity:d} of "{name}"'))
def cart_holds(customer_id, products, quantity, name):
    assert _quantities(customer_id, products)[name] == quantity


@then("the request is rejected")
def request_rejected(outcome):
    assert isinstance(outcome["error"], ValidationError)
