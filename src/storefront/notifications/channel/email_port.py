"""Outgoing mail interface shared by every adapter."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Delivery:
    """Outcome of handing one message to an adapter."""

    sent: bool
    message_id: str | None = None
    error: str | None = None


class Mailer(ABC):
    @abstractmethod
    def deliver(self, sender: str, to: str, subject: str, body: str) -> Delivery:
        """Hand a plain-text message to the mail service.

        Adapters report delivery problems in the returned ``Delivery``
        rather than raising.
        """
