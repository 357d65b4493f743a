"""Notifications react to inquiries and design requests.

New submissions alert the store admin; a quoted design request is sent
to the customer.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from storefront.domain import storefront
from storefront.enquiries.design.design_request import DesignRequest, DesignStatus
from storefront.enquiries.design.events import DesignRequestStatusChanged, DesignRequestSubmitted
from storefront.enquiries.inquiry.events import InquirySubmitted
from storefront.enquiries.inquiry.inquiry import Inquiry
from storefront.identity.account.account import Account
from storefront.notifications import templates
from storefront.notifications.dispatch import send_email
from storefront.utils.settings import store_setting


def _customer(customer_id):
    try:
        return current_domain.repository_for(Account).get(customer_id)
    except ObjectNotFoundError:
        return None


@storefront.event_handler(part_of=Inquiry)
class InquiryNotificationsHandler:
    @handle(InquirySubmitted)
    def on_inquiry_submitted(self, event: InquirySubmitted) -> None:
        message = templates.new_inquiry_alert(
            {
                "inquiry_id": str(event.inquiry_id),
                "name": event.name,
                "email": event.email,
                "subject": event.subject,
                "inquiry_type": event.inquiry_type,
                "product_id": str(event.product_id) if event.product_id else None,
            }
        )
        send_email(store_setting("admin_email"), message, kind="inquiry_alert")


@storefront.event_handler(part_of=DesignRequest)
class DesignRequestNotificationsHandler:
    @handle(DesignRequestSubmitted)
    def on_design_request_submitted(self, event: DesignRequestSubmitted) -> None:
        customer = _customer(event.customer_id)
        message = templates.new_design_request_alert(
            {
                "request_id": str(event.request_id),
                "furniture_type": event.furniture_type,
                "budget_range": event.budget_range,
                "customer_name": customer.name if customer else None,
                "customer_email": customer.email if customer else None,
            }
        )
        send_email(store_setting("admin_email"), message, kind="design_request_alert")

    @handle(DesignRequestStatusChanged)
    def on_design_request_status_changed(self, event: DesignRequestStatusChanged) -> None:
        if event.new_status != DesignStatus.QUOTED.value:
            return

        customer = _customer(event.customer_id)
        if customer is None:
            return

        request = current_domain.repository_for(DesignRequest).get(event.request_id)
        message = templates.design_quote(
            {
                "customer_name": customer.name,
                "furniture_type": request.furniture_type,
                "quote_amount": event.quote_amount,
                "currency": store_setting("currency"),
            }
        )
        send_email(customer.email, message, kind="design_quote")
