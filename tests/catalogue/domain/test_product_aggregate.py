"""Tests for the Product aggregate."""

import json

import pytest
from protean.exceptions import ValidationError

from storefront.catalogue.product.events import (
    ProductActivated,
    ProductAdded,
    ProductDeactivated,
    ProductDetailsUpdated,
    ProductPriceChanged,
)
from storefront.catalogue.product.product import Product, ProductCategory


def _product(**overrides):
    defaults = {
        "name": "Kiaat Headboard",
        "price": 4500,
        "category": ProductCategory.HEADBOARDS.value,
        "material": "Kiaat",
        "dimensions": "160cm x 120cm",
    }
    defaults.update(overrides)
    return Product.create(**defaults)


class TestProductCreation:
    def test_create_is_active(self):
        product = _product()
        assert product.active is True

    def test_create_rounds_price(self):
        product = _product(price=199.999)
        assert product.price == 200.0

    def test_create_stores_gallery_as_json(self):
        product = _product(gallery_images=["https://cdn.example.com/a.jpg", "https://cdn.example.com/b.jpg"])
        assert json.loads(product.gallery_images) == ["https://cdn.example.com/a.jpg", "https://cdn.example.com/b.jpg"]
        assert product.gallery == ["https://cdn.example.com/a.jpg", "https://cdn.example.com/b.jpg"]

    def test_create_without_gallery(self):
        assert _product().gallery == []

    def test_create_raises_product_added(self):
        product = _product()
        event = product._events[-1]
        assert isinstance(event, ProductAdded)
        assert event.price == 4500.0

    def test_unknown_category_rejected(self):
        with pytest.raises(ValidationError):
            _product(category="beds")

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            _product(price=-1)


class TestProductDetails:
    def test_update_details(self):
        product = _product()
        product.update_details(material="Oak", description="Now in oak")
        assert product.material == "Oak"
        assert product.description == "Now in oak"
        assert isinstance(product._events[-1], ProductDetailsUpdated)

    def test_update_gallery(self):
        product = _product()
        product.update_details(gallery_images=["https://cdn.example.com/c.jpg"])
        assert product.gallery == ["https://cdn.example.com/c.jpg"]

    def test_update_unknown_field_rejected(self):
        product = _product()
        with pytest.raises(ValidationError):
            product.update_details(price=10)


class TestProductPricing:
    def test_change_price(self):
        product = _product(price=100)
        product.change_price(120)
        assert product.price == 120.0
        event = product._events[-1]
        assert isinstance(event, ProductPriceChanged)
        assert event.previous_price == 100.0
        assert event.new_price == 120.0

    def test_same_price_is_a_no_op(self):
        product = _product(price=100)
        events_before = len(product._events)
        product.change_price(100.0)
        assert len(product._events) == events_before


class TestProductListing:
    def test_deactivate(self):
        product = _product()
        product.deactivate()
        assert product.active is False
        assert isinstance(product._events[-1], ProductDeactivated)

    def test_deactivate_twice_rejected(self):
        product = _product()
        product.deactivate()
        with pytest.raises(ValidationError):
            product.deactivate()

    def test_reactivate(self):
        product = _product()
        product.deactivate()
        product.activate()
        assert product.active is True
        assert isinstance(product._events[-1], ProductActivated)

    def test_activate_active_product_rejected(self):
        with pytest.raises(ValidationError):
            _product().activate()
