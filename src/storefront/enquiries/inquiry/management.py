"""Inquiry handling: commands and handler."""

from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.domain import storefront
from storefront.enquiries.inquiry.inquiry import Inquiry, InquiryType


@storefront.command(part_of="Inquiry")
class SubmitInquiry:
    name = String(required=True, max_length=100)
    email = String(required=True, max_length=254)
    phone = String(max_length=20)
    subject = String(required=True, max_length=200)
    message = Text(required=True)
    product_id = Identifier()
    inquiry_type = String(choices=InquiryType, default=InquiryType.GENERAL.value)


@storefront.command(part_of="Inquiry")
class UpdateInquiryStatus:
    inquiry_id = Identifier(required=True)
    status = String(required=True, max_length=20)


@storefront.command_handler(part_of=Inquiry)
class InquiryHandler:
    @handle(SubmitInquiry)
    def submit_inquiry(self, command):
        if command.product_id:
            # A linked product must exist; ObjectNotFoundError otherwise
            current_domain.repository_for(Product).get(command.product_id)

        inquiry = Inquiry.submit(
            name=command.name,
            email=command.email,
            phone=command.phone,
            subject=command.subject,
            message=command.message,
            product_id=command.product_id,
            inquiry_type=command.inquiry_type or InquiryType.GENERAL.value,
        )
        current_domain.repository_for(Inquiry).add(inquiry)
        return str(inquiry.id)

    @handle(UpdateInquiryStatus)
    def update_inquiry_status(self, command):
        repo = current_domain.repository_for(Inquiry)
        inquiry = repo.get(command.inquiry_id)
        inquiry.change_status(command.status)
        repo.add(inquiry)
