"""Best-effort email dispatch.

Notifications never fail the operation that triggered them: adapter
failures and errors are logged and reported as ``None``.
"""

import structlog

from storefront.notifications.channel import get_mailer
from storefront.notifications.channel.email_port import Delivery
from storefront.utils.settings import store_setting

logger = structlog.get_logger(__name__)


def send_email(to: str | None, message: dict, kind: str) -> Delivery | None:
    if not to:
        logger.warning("Email skipped, no recipient", kind=kind)
        return None

    try:
        delivery = get_mailer().deliver(
            sender=store_setting("mail_from"),
            to=to,
            subject=message["subject"],
            body=message["body"],
        )
    except Exception:
        logger.exception("Email dispatch raised", kind=kind, to=to)
        return None

    if not delivery.sent:
        logger.warning("Email dispatch failed", kind=kind, to=to, error=delivery.error)
        return None

    logger.info("Email sent", kind=kind, to=to, message_id=delivery.message_id)
    return delivery
