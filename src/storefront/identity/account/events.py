"""Domain events for the Account aggregate."""

from protean.fields import DateTime, Identifier, String, Text

from storefront.domain import storefront


@storefront.event(part_of="Account")
class AccountRegistered:
    """A customer signed up, or an administrator account was created."""

    __version__ = 1

    account_id: Identifier(required=True)
    name: String(required=True)
    email: String(required=True)
    role: String(required=True)
    registered_at: DateTime(required=True)


@storefront.event(part_of="Account")
class ProfileUpdated:
    """An account holder changed their contact details."""

    __version__ = 1

    account_id: Identifier(required=True)
    name: String(required=True)
    phone: String()
    address: Text()


@storefront.event(part_of="Account")
class PasswordChanged:
    """An account's password was replaced."""

    __version__ = 1

    account_id: Identifier(required=True)
    changed_at: DateTime(required=True)


@storefront.event(part_of="Account")
class LoggedIn:
    """An account holder signed in successfully."""

    __version__ = 1

    account_id: Identifier(required=True)
    role: String(required=True)
    logged_in_at: DateTime(required=True)


@storefront.event(part_of="Account")
class AccountDeactivated:
    """An administrator removed an account. It can no longer sign in."""

    __version__ = 1

    account_id: Identifier(required=True)
    role: String(required=True)
    deactivated_by: Identifier()
    deactivated_at: DateTime(required=True)
