"""Domain events for the Inquiry aggregate."""

from protean.fields import DateTime, Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="Inquiry")
class InquirySubmitted:
    """A visitor sent a question through the contact form."""

    __version__ = 1

    inquiry_id = Identifier(required=True)
    name = String(required=True)
    email = String(required=True)
    subject = String(required=True)
    inquiry_type = String(required=True)
    product_id = Identifier()
    submitted_at = DateTime(required=True)


@storefront.event(part_of="Inquiry")
class InquiryStatusChanged:
    __version__ = 1

    inquiry_id = Identifier(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    changed_at = DateTime(required=True)
