"""DesignRequest aggregate: a customer's brief for a bespoke furniture piece.

Lifecycle:
    SUBMITTED → UNDER_REVIEW → QUOTED → APPROVED
    REJECTED reachable from any non-terminal state
A quote amount is recorded when the request is quoted.
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, String, Text

from storefront.domain import storefront
from storefront.enquiries.design.events import DesignRequestStatusChanged, DesignRequestSubmitted
from storefront.shared.money import to_money


class DesignStatus(Enum):
    SUBMITTED = "submitted"
    UNDER_REVIEW = "under_review"
    QUOTED = "quoted"
    APPROVED = "approved"
    REJECTED = "rejected"


_VALID_TRANSITIONS = {
    DesignStatus.SUBMITTED: {DesignStatus.UNDER_REVIEW, DesignStatus.QUOTED, DesignStatus.REJECTED},
    DesignStatus.UNDER_REVIEW: {DesignStatus.QUOTED, DesignStatus.REJECTED},
    DesignStatus.QUOTED: {DesignStatus.APPROVED, DesignStatus.REJECTED},
    DesignStatus.APPROVED: set(),  # Terminal
    DesignStatus.REJECTED: set(),  # Terminal
}


@storefront.aggregate
class DesignRequest:
    customer_id = Identifier(required=True)
    furniture_type = String(required=True, max_length=100)
    dimensions = String(max_length=200)
    material_preference = String(max_length=100)
    color_preference = String(max_length=100)
    special_requirements = Text()
    reference_images = Text()  # JSON array of image URLs
    reference_links = Text()  # JSON array of URLs
    budget_range = String(max_length=50)
    status = String(choices=DesignStatus, default=DesignStatus.SUBMITTED.value)
    quote_amount = Float(min_value=0.0)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def quoted_requests_carry_an_amount(self):
        if self.status == DesignStatus.QUOTED.value and not self.quote_amount:
            raise ValidationError({"quote_amount": ["A quote amount is required when quoting"]})

    @property
    def images(self) -> list[str]:
        return json.loads(self.reference_images) if self.reference_images else []

    @property
    def links(self) -> list[str]:
        return json.loads(self.reference_links) if self.reference_links else []

    @classmethod
    def submit(
        cls,
        customer_id,
        furniture_type,
        dimensions=None,
        material_preference=None,
        color_preference=None,
        special_requirements=None,
        reference_images=None,
        reference_links=None,
        budget_range=None,
    ):
        now = datetime.now(UTC)
        request = cls(
            customer_id=customer_id,
            furniture_type=furniture_type,
            dimensions=dimensions,
            material_preference=material_preference,
            color_preference=color_preference,
            special_requirements=special_requirements,
            reference_images=json.dumps(reference_images or []),
            reference_links=json.dumps(reference_links or []),
            budget_range=budget_range,
            status=DesignStatus.SUBMITTED.value,
            created_at=now,
            updated_at=now,
        )
        request.raise_(
            DesignRequestSubmitted(
                request_id=str(request.id),
                customer_id=str(customer_id),
                furniture_type=furniture_type,
                budget_range=budget_range,
                submitted_at=now,
            )
        )
        return request

    def change_status(self, new_status, quote_amount=None):
        try:
            target = DesignStatus(new_status)
        except ValueError:
            raise ValidationError({"status": [f"Unknown design request status '{new_status}'"]})

        current = DesignStatus(self.status)
        if target == current:
            return
        if target not in _VALID_TRANSITIONS[current]:
            raise ValidationError({"status": [f"Cannot move a design request from {current.value} to {target.value}"]})

        if target == DesignStatus.QUOTED:
            if quote_amount is None or quote_amount <= 0:
                raise ValidationError({"quote_amount": ["A positive quote amount is required when quoting"]})
            self.quote_amount = to_money(quote_amount)

        now = datetime.now(UTC)
        self.status = target.value
        self.updated_at = now
        self.raise_(
            DesignRequestStatusChanged(
                request_id=str(self.id),
                customer_id=str(self.customer_id),
                previous_status=current.value,
                new_status=target.value,
                quote_amount=self.quote_amount,
                changed_at=now,
            )
        )
