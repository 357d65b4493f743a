"""Inquiry aggregate: a contact-form submission, independent of carts and orders."""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, String, Text

from storefront.domain import storefront
from storefront.enquiries.inquiry.events import InquiryStatusChanged, InquirySubmitted
from storefront.shared.email import is_valid_email, normalize_email


class InquiryType(Enum):
    GENERAL = "general"
    PRODUCT = "product"
    CUSTOM_DESIGN = "custom_design"
    QUOTE = "quote"


class InquiryStatus(Enum):
    NEW = "new"
    RESPONDED = "responded"
    CLOSED = "closed"


_VALID_TRANSITIONS = {
    InquiryStatus.NEW: {InquiryStatus.RESPONDED, InquiryStatus.CLOSED},
    InquiryStatus.RESPONDED: {InquiryStatus.CLOSED},
    InquiryStatus.CLOSED: set(),  # Terminal
}


@storefront.aggregate
class Inquiry:
    name = String(required=True, max_length=100)
    email = String(required=True, max_length=254)
    phone = String(max_length=20)
    subject = String(required=True, max_length=200)
    message = Text(required=True)
    product_id = Identifier()
    inquiry_type = String(choices=InquiryType, default=InquiryType.GENERAL.value)
    status = String(choices=InquiryStatus, default=InquiryStatus.NEW.value)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def email_must_be_well_formed(self):
        if not is_valid_email(self.email):
            raise ValidationError({"email": [f"Invalid email address: {self.email!r}"]})

    @invariant.post
    def product_inquiries_must_name_a_product(self):
        if self.inquiry_type == InquiryType.PRODUCT.value and not self.product_id:
            raise ValidationError({"product_id": ["Product inquiries must reference a product"]})

    @classmethod
    def submit(cls, name, email, subject, message, inquiry_type=InquiryType.GENERAL.value, phone=None, product_id=None):
        now = datetime.now(UTC)
        inquiry = cls(
            name=name,
            email=normalize_email(email),
            phone=phone,
            subject=subject,
            message=message,
            product_id=product_id,
            inquiry_type=inquiry_type,
            status=InquiryStatus.NEW.value,
            created_at=now,
            updated_at=now,
        )
        inquiry.raise_(
            InquirySubmitted(
                inquiry_id=str(inquiry.id),
                name=inquiry.name,
                email=inquiry.email,
                subject=inquiry.subject,
                inquiry_type=inquiry.inquiry_type,
                product_id=str(product_id) if product_id else None,
                submitted_at=now,
            )
        )
        return inquiry

    def change_status(self, new_status):
        try:
            target = InquiryStatus(new_status)
        except ValueError:
            raise ValidationError({"status": [f"Unknown inquiry status '{new_status}'"]})

        current = InquiryStatus(self.status)
        if target == current:
            return
        if target not in _VALID_TRANSITIONS[current]:
            raise ValidationError({"status": [f"Cannot move an inquiry from {current.value} to {target.value}"]})

        now = datetime.now(UTC)
        self.status = target.value
        self.updated_at = now
        self.raise_(
            InquiryStatusChanged(
                inquiry_id=str(self.id),
                previous_status=current.value,
                new_status=target.value,
                changed_at=now,
            )
        )
