"""Product aggregate: a furniture piece offered in the catalogue."""

import json
from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, String, Text

from storefront.catalogue.product.events import (
    ProductActivated,
    ProductAdded,
    ProductDeactivated,
    ProductDetailsUpdated,
    ProductPriceChanged,
)
from storefront.domain import storefront
from storefront.shared.money import to_money

# Sentinel for distinguishing "not provided" from None in partial updates
_UNSET = object()

_DETAIL_FIELDS = ("name", "description", "category", "material", "dimensions", "main_image")


class ProductCategory(Enum):
    """Closed set of catalogue categories."""

    HEADBOARDS = "headboards"
    TABLES = "tables"
    SEATING = "seating"
    STORAGE = "storage"
    CUSTOM = "custom"


@storefront.aggregate
class Product:
    name = String(required=True, max_length=200)
    description = Text()
    price = Float(required=True, min_value=0.0)
    category = String(required=True, choices=ProductCategory, max_length=20)
    material = String(max_length=100)
    dimensions = String(max_length=100)
    main_image = String(max_length=500)
    gallery_images = Text()  # JSON array of image URLs
    active = Boolean(default=True)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def gallery_must_be_a_list_of_urls(self):
        if not self.gallery_images:
            return
        try:
            images = json.loads(self.gallery_images)
        except (json.JSONDecodeError, TypeError):
            raise ValidationError({"gallery_images": ["Gallery must be a JSON array of URLs"]})
        if not isinstance(images, list) or not all(isinstance(i, str) for i in images):
            raise ValidationError({"gallery_images": ["Gallery must be a JSON array of URLs"]})

    @property
    def gallery(self) -> list[str]:
        return json.loads(self.gallery_images) if self.gallery_images else []

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(
        cls,
        name,
        price,
        category,
        description=None,
        material=None,
        dimensions=None,
        main_image=None,
        gallery_images=None,
    ):
        now = datetime.now(UTC)
        product = cls(
            name=name,
            description=description,
            price=to_money(price),
            category=category,
            material=material,
            dimensions=dimensions,
            main_image=main_image,
            gallery_images=json.dumps(gallery_images or []),
            active=True,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=str(product.id),
                name=product.name,
                category=product.category,
                price=product.price,
                added_at=now,
            )
        )
        return product

    # -------------------------------------------------------------------
    # Details and pricing
    # -------------------------------------------------------------------
    def update_details(self, gallery_images=_UNSET, **changes):
        unknown = set(changes) - set(_DETAIL_FIELDS)
        if unknown:
            raise ValidationError({"product": [f"Unknown product fields: {', '.join(sorted(unknown))}"]})

        for field, value in changes.items():
            setattr(self, field, value)
        if gallery_images is not _UNSET:
            self.gallery_images = json.dumps(gallery_images or [])

        self.updated_at = datetime.now(UTC)
        self.raise_(
            ProductDetailsUpdated(
                product_id=str(self.id),
                name=self.name,
                category=self.category,
            )
        )

    def change_price(self, new_price):
        new_price = to_money(new_price)
        if new_price == self.price:
            return

        previous_price = self.price
        self.price = new_price
        now = datetime.now(UTC)
        self.updated_at = now
        self.raise_(
            ProductPriceChanged(
                product_id=str(self.id),
                previous_price=previous_price,
                new_price=new_price,
                changed_at=now,
            )
        )

    # -------------------------------------------------------------------
    # Listing lifecycle
    # -------------------------------------------------------------------
    def deactivate(self):
        """Withdraw the product from the public catalogue. Products are never hard-deleted."""
        if not self.active:
            raise ValidationError({"active": ["Product is already inactive"]})

        self.active = False
        now = datetime.now(UTC)
        self.updated_at = now
        self.raise_(ProductDeactivated(product_id=str(self.id), deactivated_at=now))

    def activate(self):
        if self.active:
            raise ValidationError({"active": ["Product is already active"]})

        self.active = True
        now = datetime.now(UTC)
        self.updated_at = now
        self.raise_(ProductActivated(product_id=str(self.id), activated_at=now))
