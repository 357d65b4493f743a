"""Read-side catalogue queries."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product


def browse_products(category=None, min_price=None, max_price=None, material=None, search=None):
    """Active products matching every given filter, newest first.

    ``material`` and ``search`` are case-insensitive substring matches on
    the material and the product name respectively.
    """
    criteria = {"active": True}
    if category:
        criteria["category"] = category
    if min_price is not None:
        criteria["price__gte"] = min_price
    if max_price is not None:
        criteria["price__lte"] = max_price
    if material:
        criteria["material__isnull"] = False
        criteria["material__icontains"] = material
    if search:
        criteria["name__icontains"] = search

    repo = current_domain.repository_for(Product)
    return repo._dao.query.filter(**criteria).order_by("-created_at").limit(None).all().items


def all_products():
    repo = current_domain.repository_for(Product)
    return repo._dao.query.order_by("-created_at").limit(None).all().items


def get_listed_product(product_id):
    """Fetch a product visible in the public catalogue."""
    product = current_domain.repository_for(Product).get(product_id)
    if not product.active:
        raise ObjectNotFoundError({"_entity": f"Product with id {product_id} is not available"})
    return product
