"""Custom-design requests: commands and handler."""

import json

from protean import handle
from protean.fields import Float, Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.enquiries.design.design_request import DesignRequest


@storefront.command(part_of="DesignRequest")
class SubmitDesignRequest:
    customer_id = Identifier(required=True)
    furniture_type = String(required=True, max_length=100)
    dimensions = String(max_length=200)
    material_preference = String(max_length=100)
    color_preference = String(max_length=100)
    special_requirements = Text()
    reference_images = Text()  # JSON array of image URLs
    reference_links = Text()  # JSON array of URLs
    budget_range = String(max_length=50)


@storefront.command(part_of="DesignRequest")
class UpdateDesignStatus:
    request_id = Identifier(required=True)
    status = String(required=True, max_length=20)
    quote_amount = Float(min_value=0.0)


@storefront.command_handler(part_of=DesignRequest)
class DesignRequestHandler:
    @handle(SubmitDesignRequest)
    def submit_design_request(self, command):
        request = DesignRequest.submit(
            customer_id=command.customer_id,
            furniture_type=command.furniture_type,
            dimensions=command.dimensions,
            material_preference=command.material_preference,
            color_preference=command.color_preference,
            special_requirements=command.special_requirements,
            reference_images=json.loads(command.reference_images) if command.reference_images else [],
            reference_links=json.loads(command.reference_links) if command.reference_links else [],
            budget_range=command.budget_range,
        )
        current_domain.repository_for(DesignRequest).add(request)
        return str(request.id)

    @handle(UpdateDesignStatus)
    def update_design_status(self, command):
        repo = current_domain.repository_for(DesignRequest)
        request = repo.get(command.request_id)
        request.change_status(command.status, quote_amount=command.quote_amount)
        repo.add(request)
