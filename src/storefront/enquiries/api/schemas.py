"""Pydantic request/response schemas for the Enquiries API."""

from pydantic import BaseModel, Field

from storefront.enquiries.design.design_request import DesignStatus
from storefront.enquiries.inquiry.inquiry import InquiryStatus, InquiryType


# ---------------------------------------------------------------------------
# Inquiries
# ---------------------------------------------------------------------------
class SubmitInquiryRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: str = Field(max_length=254)
    phone: str | None = Field(default=None, max_length=20)
    subject: str = Field(min_length=1, max_length=200)
    message: str = Field(min_length=1)
    product_id: str | None = None
    inquiry_type: InquiryType = InquiryType.GENERAL

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Sipho Dlamini",
                    "email": "sipho@example.com",
                    "subject": "Delivery to Durban",
                    "message": "Do you deliver dining tables to Durban?",
                    "inquiry_type": "general",
                }
            ]
        }
    }


class UpdateInquiryStatusRequest(BaseModel):
    status: InquiryStatus


class InquiryIdResponse(BaseModel):
    inquiry_id: str


class InquiryResponse(BaseModel):
    id: str
    name: str
    email: str
    phone: str | None = None
    subject: str
    message: str
    product_id: str | None = None
    inquiry_type: str
    status: str
    created_at: str | None = None

    @classmethod
    def from_inquiry(cls, inquiry) -> "InquiryResponse":
        return cls(
            id=str(inquiry.id),
            name=inquiry.name,
            email=inquiry.email,
            phone=inquiry.phone,
            subject=inquiry.subject,
            message=inquiry.message,
            product_id=str(inquiry.product_id) if inquiry.product_id else None,
            inquiry_type=inquiry.inquiry_type,
            status=inquiry.status,
            created_at=inquiry.created_at.isoformat() if inquiry.created_at else None,
        )


# ---------------------------------------------------------------------------
# Custom designs
# ---------------------------------------------------------------------------
class SubmitDesignRequest(BaseModel):
    furniture_type: str = Field(min_length=1, max_length=100)
    dimensions: str | None = Field(default=None, max_length=200)
    material_preference: str | None = Field(default=None, max_length=100)
    color_preference: str | None = Field(default=None, max_length=100)
    special_requirements: str | None = None
    reference_images: list[str] = Field(default_factory=list)
    reference_links: list[str] = Field(default_factory=list)
    budget_range: str | None = Field(default=None, max_length=50)


class UpdateDesignStatusRequest(BaseModel):
    status: DesignStatus
    quote_amount: float | None = Field(default=None, gt=0)


class DesignRequestIdResponse(BaseModel):
    request_id: str


class DesignRequestResponse(BaseModel):
    id: str
    customer_id: str
    furniture_type: str
    dimensions: str | None = None
    material_preference: str | None = None
    color_preference: str | None = None
    special_requirements: str | None = None
    reference_images: list[str] = Field(default_factory=list)
    reference_links: list[str] = Field(default_factory=list)
    budget_range: str | None = None
    status: str
    quote_amount: float | None = None
    created_at: str | None = None

    @classmethod
    def from_request(cls, request) -> "DesignRequestResponse":
        return cls(
            id=str(request.id),
            customer_id=str(request.customer_id),
            furniture_type=request.furniture_type,
            dimensions=request.dimensions,
            material_preference=request.material_preference,
            color_preference=request.color_preference,
            special_requirements=request.special_requirements,
            reference_images=request.images,
            reference_links=request.links,
            budget_range=request.budget_range,
            status=request.status,
            quote_amount=request.quote_amount,
            created_at=request.created_at.isoformat() if request.created_at else None,
        )
