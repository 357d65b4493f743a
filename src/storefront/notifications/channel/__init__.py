"""The mailer used for outgoing notifications.

Defaults to the in-memory fake; deployments install a real adapter with
``set_mailer`` at startup.
"""

from storefront.notifications.channel.email_port import Mailer

_mailer: Mailer | None = None


def get_mailer() -> Mailer:
    global _mailer
    if _mailer is None:
        from storefront.notifications.channel.fake_email import FakeEmailAdapter

        _mailer = FakeEmailAdapter()
    return _mailer


def set_mailer(mailer: Mailer) -> None:
    global _mailer
    _mailer = mailer


def reset_mailer() -> None:
    global _mailer
    _mailer = None
