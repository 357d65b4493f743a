"""Cart read model: lines joined with the current product data."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.ordering.cart.management import find_cart
from storefront.shared.money import line_total


def cart_lines(customer_id) -> list[dict]:
    """The account's cart as plain dicts, oldest line first. An account without a cart has none."""
    cart = find_cart(customer_id)
    if cart is None:
        return []

    product_repo = current_domain.repository_for(Product)
    view = []
    for line in sorted(cart.lines, key=lambda line: line.added_at):
        try:
            product = product_repo.get(line.product_id)
        except ObjectNotFoundError:
            product = None

        view.append(
            {
                "id": str(line.id),
                "product_id": str(line.product_id),
                "quantity": line.quantity,
                "note": line.note,
                "product": (
                    {
                        "id": str(product.id),
                        "name": product.name,
                        "price": product.price,
                        "category": product.category,
                        "material": product.material,
                        "main_image": product.main_image,
                        "active": bool(product.active),
                    }
                    if product
                    else None
                ),
                "line_total": line_total(line.quantity, product.price) if product else None,
            }
        )
    return view
