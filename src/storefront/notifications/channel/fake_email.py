"""In-memory mailer for development and tests."""

from uuid import uuid4

from storefront.notifications.channel.email_port import Delivery, Mailer


class FakeEmailAdapter(Mailer):
    """Keeps delivered messages in ``sent_emails`` instead of sending them."""

    def __init__(self):
        self.sent_emails: list[dict] = []
        self.failure_reason: str | None = None

    def configure(self, should_succeed: bool = True, failure_reason: str = "Email delivery failed"):
        self.failure_reason = None if should_succeed else failure_reason

    def deliver(self, sender: str, to: str, subject: str, body: str) -> Delivery:
        if self.failure_reason:
            return Delivery(sent=False, error=self.failure_reason)

        message_id = f"email-{uuid4().hex[:12]}"
        self.sent_emails.append(
            {"message_id": message_id, "from": sender, "to": to, "subject": subject, "body": body}
        )
        return Delivery(sent=True, message_id=message_id)

    def sent_to(self, address: str) -> list[dict]:
        return [email for email in self.sent_emails if email["to"] == address]
