"""Read-side lookups for inquiries and design requests, newest first."""

from protean.utils.globals import current_domain

from storefront.enquiries.design.design_request import DesignRequest
from storefront.enquiries.inquiry.inquiry import Inquiry


def _newest_first(query):
    return query.order_by("-created_at").limit(None).all().items


def all_inquiries(status=None):
    repo = current_domain.repository_for(Inquiry)
    return _newest_first(repo._dao.query.filter(status=status) if status else repo._dao.query)


def all_design_requests(status=None):
    repo = current_domain.repository_for(DesignRequest)
    return _newest_first(repo._dao.query.filter(status=status) if status else repo._dao.query)


def design_requests_for_customer(customer_id):
    repo = current_domain.repository_for(DesignRequest)
    return _newest_first(repo._dao.query.filter(customer_id=str(customer_id)))
