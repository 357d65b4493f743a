"""Pydantic request/response schemas for the Catalogue API.

These are external contracts (anti-corruption layer), separate from
internal Protean commands.
"""

from pydantic import BaseModel, Field

from storefront.catalogue.product.product import ProductCategory


class AddProductRequest(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    description: str | None = None
    price: float = Field(ge=0)
    category: ProductCategory
    material: str | None = None
    dimensions: str | None = None
    main_image: str | None = None
    gallery_images: list[str] = Field(default_factory=list)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Kiaat Headboard",
                    "description": "Hand-finished solid kiaat headboard",
                    "price": 4500.0,
                    "category": "headboards",
                    "material": "Kiaat",
                    "dimensions": "160cm x 120cm",
                    "main_image": "https://cdn.example.com/kiaat-headboard.jpg",
                    "gallery_images": [],
                }
            ]
        }
    }


class UpdateProductRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    price: float | None = Field(default=None, ge=0)
    category: ProductCategory | None = None
    material: str | None = None
    dimensions: str | None = None
    main_image: str | None = None
    gallery_images: list[str] | None = None


class ProductResponse(BaseModel):
    id: str
    name: str
    description: str | None = None
    price: float
    category: str
    material: str | None = None
    dimensions: str | None = None
    main_image: str | None = None
    gallery_images: list[str] = Field(default_factory=list)
    active: bool
    created_at: str | None = None

    @classmethod
    def from_product(cls, product) -> "ProductResponse":
        return cls(
            id=str(product.id),
            name=product.name,
            description=product.description,
            price=product.price,
            category=product.category,
            material=product.material,
            dimensions=product.dimensions,
            main_image=product.main_image,
            gallery_images=product.gallery,
            active=bool(product.active),
            created_at=product.created_at.isoformat() if product.created_at else None,
        )


class ProductIdResponse(BaseModel):
    product_id: str


class StatusResponse(BaseModel):
    status: str = "ok"
