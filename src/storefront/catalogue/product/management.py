"""Catalogue maintenance: commands and handler for admin product actions."""

import json

from protean import handle
from protean.fields import Float, Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product, ProductCategory
from storefront.domain import storefront


@storefront.command(part_of="Product")
class AddProduct:
    name = String(required=True, max_length=200)
    description = Text()
    price = Float(required=True, min_value=0.0)
    category = String(required=True, choices=ProductCategory, max_length=20)
    material = String(max_length=100)
    dimensions = String(max_length=100)
    main_image = String(max_length=500)
    gallery_images = Text()  # JSON array of image URLs


@storefront.command(part_of="Product")
class UpdateProduct:
    """Edit any subset of a product's details and price. Omitted fields are left alone."""

    product_id = Identifier(required=True)
    name = String(max_length=200)
    description = Text()
    price = Float(min_value=0.0)
    category = String(choices=ProductCategory, max_length=20)
    material = String(max_length=100)
    dimensions = String(max_length=100)
    main_image = String(max_length=500)
    gallery_images = Text()


@storefront.command(part_of="Product")
class DeactivateProduct:
    product_id = Identifier(required=True)


@storefront.command(part_of="Product")
class ActivateProduct:
    product_id = Identifier(required=True)


@storefront.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(AddProduct)
    def add_product(self, command):
        product = Product.create(
            name=command.name,
            price=command.price,
            category=command.category,
            description=command.description,
            material=command.material,
            dimensions=command.dimensions,
            main_image=command.main_image,
            gallery_images=json.loads(command.gallery_images) if command.gallery_images else [],
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)

    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)

        changes = {
            field: getattr(command, field)
            for field in ("name", "description", "category", "material", "dimensions", "main_image")
            if getattr(command, field) is not None
        }
        if command.gallery_images is not None:
            changes["gallery_images"] = json.loads(command.gallery_images)
        if changes:
            product.update_details(**changes)
        if command.price is not None:
            product.change_price(command.price)

        repo.add(product)

    @handle(DeactivateProduct)
    def deactivate_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.deactivate()
        repo.add(product)

    @handle(ActivateProduct)
    def activate_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.activate()
        repo.add(product)
