"""Domain events for the DesignRequest aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="DesignRequest")
class DesignRequestSubmitted:
    """A customer asked for a custom-made piece."""

    __version__ = 1

    request_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    furniture_type = String(required=True)
    budget_range = String()
    submitted_at = DateTime(required=True)


@storefront.event(part_of="DesignRequest")
class DesignRequestStatusChanged:
    """The workshop reviewed, quoted, approved or rejected a design request."""

    __version__ = 1

    request_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    quote_amount = Float()
    changed_at = DateTime(required=True)
