"""FastAPI routes for the Catalogue context: browsing and admin product management."""

import json

from fastapi import APIRouter, Depends, Query
from protean.utils.globals import current_domain

from storefront.catalogue.api.schemas import (
    AddProductRequest,
    ProductIdResponse,
    ProductResponse,
    StatusResponse,
    UpdateProductRequest,
)
from storefront.catalogue.product.management import (
    ActivateProduct,
    AddProduct,
    DeactivateProduct,
    UpdateProduct,
)
from storefront.catalogue.product.product import Product, ProductCategory
from storefront.catalogue.product.queries import all_products, browse_products, get_listed_product
from storefront.identity.api.dependencies import require_admin

# ---------------------------------------------------------------------------
# Public Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.get("", response_model=list[ProductResponse])
async def list_products(
    category: ProductCategory | None = None,
    min_price: float | None = Query(default=None, ge=0),
    max_price: float | None = Query(default=None, ge=0),
    material: str | None = None,
    search: str | None = None,
) -> list[ProductResponse]:
    products = browse_products(
        category=category.value if category else None,
        min_price=min_price,
        max_price=max_price,
        material=material,
        search=search,
    )
    return [ProductResponse.from_product(p) for p in products]


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    return ProductResponse.from_product(get_listed_product(product_id))


# ---------------------------------------------------------------------------
# Admin Product Router
# ---------------------------------------------------------------------------
admin_product_router = APIRouter(
    prefix="/admin/products",
    tags=["admin"],
    dependencies=[Depends(require_admin)],
)


@admin_product_router.get("", response_model=list[ProductResponse])
async def list_all_products() -> list[ProductResponse]:
    return [ProductResponse.from_product(p) for p in all_products()]


@admin_product_router.post("", status_code=201, response_model=ProductIdResponse)
async def add_product(body: AddProductRequest) -> ProductIdResponse:
    command = AddProduct(
        name=body.name,
        description=body.description,
        price=body.price,
        category=body.category.value,
        material=body.material,
        dimensions=body.dimensions,
        main_image=body.main_image,
        gallery_images=json.dumps(body.gallery_images),
    )
    product_id = current_domain.process(command, asynchronous=False)
    return ProductIdResponse(product_id=product_id)


@admin_product_router.put("/{product_id}", response_model=ProductResponse)
async def update_product(product_id: str, body: UpdateProductRequest) -> ProductResponse:
    command = UpdateProduct(
        product_id=product_id,
        name=body.name,
        description=body.description,
        price=body.price,
        category=body.category.value if body.category else None,
        material=body.material,
        dimensions=body.dimensions,
        main_image=body.main_image,
        gallery_images=json.dumps(body.gallery_images) if body.gallery_images is not None else None,
    )
    current_domain.process(command, asynchronous=False)
    return ProductResponse.from_product(current_domain.repository_for(Product).get(product_id))


@admin_product_router.put("/{product_id}/deactivate", response_model=StatusResponse)
async def deactivate_product(product_id: str) -> StatusResponse:
    current_domain.process(DeactivateProduct(product_id=product_id), asynchronous=False)
    return StatusResponse()


@admin_product_router.put("/{product_id}/activate", response_model=StatusResponse)
async def activate_product(product_id: str) -> StatusResponse:
    current_domain.process(ActivateProduct(product_id=product_id), asynchronous=False)
    return StatusResponse()
