"""FastAPI routes for the Enquiries context: inquiries and custom-design requests."""

import json

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from storefront.enquiries.api.schemas import (
    DesignRequestIdResponse,
    DesignRequestResponse,
    InquiryIdResponse,
    InquiryResponse,
    SubmitDesignRequest,
    SubmitInquiryRequest,
    UpdateDesignStatusRequest,
    UpdateInquiryStatusRequest,
)
from storefront.enquiries.design.design_request import DesignRequest, DesignStatus
from storefront.enquiries.design.management import SubmitDesignRequest as SubmitDesignRequestCommand
from storefront.enquiries.design.management import UpdateDesignStatus
from storefront.enquiries.inquiry.inquiry import Inquiry, InquiryStatus
from storefront.enquiries.inquiry.management import SubmitInquiry, UpdateInquiryStatus
from storefront.enquiries.queries import all_design_requests, all_inquiries, design_requests_for_customer
from storefront.identity.api.dependencies import current_identity, require_admin
from storefront.identity.auth.tokens import Identity

# ---------------------------------------------------------------------------
# Public Inquiry Router
# ---------------------------------------------------------------------------
inquiry_router = APIRouter(prefix="/inquiries", tags=["inquiries"])


@inquiry_router.post("", status_code=201, response_model=InquiryIdResponse)
async def submit_inquiry(body: SubmitInquiryRequest) -> InquiryIdResponse:
    command = SubmitInquiry(
        name=body.name,
        email=body.email,
        phone=body.phone,
        subject=body.subject,
        message=body.message,
        product_id=body.product_id,
        inquiry_type=body.inquiry_type.value,
    )
    inquiry_id = current_domain.process(command, asynchronous=False)
    return InquiryIdResponse(inquiry_id=inquiry_id)


# ---------------------------------------------------------------------------
# Custom Design Router
# ---------------------------------------------------------------------------
design_router = APIRouter(prefix="/custom-designs", tags=["custom-designs"])


@design_router.post("", status_code=201, response_model=DesignRequestIdResponse)
async def submit_design_request(
    body: SubmitDesignRequest,
    identity: Identity = Depends(current_identity),
) -> DesignRequestIdResponse:
    command = SubmitDesignRequestCommand(
        customer_id=identity.account_id,
        furniture_type=body.furniture_type,
        dimensions=body.dimensions,
        material_preference=body.material_preference,
        color_preference=body.color_preference,
        special_requirements=body.special_requirements,
        reference_images=json.dumps(body.reference_images),
        reference_links=json.dumps(body.reference_links),
        budget_range=body.budget_range,
    )
    request_id = current_domain.process(command, asynchronous=False)
    return DesignRequestIdResponse(request_id=request_id)


@design_router.get("", response_model=list[DesignRequestResponse])
async def list_my_design_requests(
    identity: Identity = Depends(current_identity),
) -> list[DesignRequestResponse]:
    return [DesignRequestResponse.from_request(r) for r in design_requests_for_customer(identity.account_id)]


# ---------------------------------------------------------------------------
# Admin Enquiries Router
# ---------------------------------------------------------------------------
admin_enquiry_router = APIRouter(
    prefix="/admin",
    tags=["admin"],
    dependencies=[Depends(require_admin)],
)


@admin_enquiry_router.get("/inquiries", response_model=list[InquiryResponse])
async def list_inquiries(status: InquiryStatus | None = None) -> list[InquiryResponse]:
    return [InquiryResponse.from_inquiry(i) for i in all_inquiries(status.value if status else None)]


@admin_enquiry_router.put("/inquiries/{inquiry_id}/status", response_model=InquiryResponse)
async def update_inquiry_status(inquiry_id: str, body: UpdateInquiryStatusRequest) -> InquiryResponse:
    command = UpdateInquiryStatus(inquiry_id=inquiry_id, status=body.status.value)
    current_domain.process(command, asynchronous=False)
    return InquiryResponse.from_inquiry(current_domain.repository_for(Inquiry).get(inquiry_id))


@admin_enquiry_router.get("/custom-designs", response_model=list[DesignRequestResponse])
async def list_design_requests(status: DesignStatus | None = None) -> list[DesignRequestResponse]:
    return [DesignRequestResponse.from_request(r) for r in all_design_requests(status.value if status else None)]


@admin_enquiry_router.put("/custom-designs/{request_id}/status", response_model=DesignRequestResponse)
async def update_design_status(request_id: str, body: UpdateDesignStatusRequest) -> DesignRequestResponse:
    command = UpdateDesignStatus(
        request_id=request_id,
        status=body.status.value,
        quote_amount=body.quote_amount,
    )
    current_domain.process(command, asynchronous=False)
    return DesignRequestResponse.from_request(current_domain.repository_for(DesignRequest).get(request_id))
