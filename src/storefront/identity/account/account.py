"""Account aggregate: one identity model for customers and administrators."""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, String, Text

from storefront.domain import storefront
from storefront.identity.account.events import (
    AccountDeactivated,
    AccountRegistered,
    LoggedIn,
    PasswordChanged,
    ProfileUpdated,
)
from storefront.shared.email import is_valid_email, normalize_email

# Sentinel for distinguishing "not provided" from None in partial updates
_UNSET = object()


class AccountRole(Enum):
    """Roles an account can hold."""

    CUSTOMER = "customer"
    ADMIN = "admin"


@storefront.aggregate
class Account:
    """A person who can sign in to the storefront.

    Customers and administrators share this model and differ only by
    ``role``. Accounts are never hard-deleted: removing one clears ``active``
    and it can no longer sign in. The password is stored only
    as a bcrypt hash.
    """

    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254, unique=True)
    password_hash: String(required=True, max_length=128)
    role: String(choices=AccountRole, default=AccountRole.CUSTOMER.value)
    phone: String(max_length=20)
    address: Text()
    created_at: DateTime()
    updated_at: DateTime()
    last_login_at: DateTime()
    active: Boolean(default=True)
    deactivated_at: DateTime()

    @invariant.post
    def email_must_be_well_formed(self):
        if not is_valid_email(self.email):
            raise ValidationError({"email": [f"Invalid email address: {self.email!r}"]})

    @property
    def is_admin(self) -> bool:
        return self.role == AccountRole.ADMIN.value

    @classmethod
    def register(cls, name, email, password_hash, role=AccountRole.CUSTOMER.value, phone=None, address=None):
        now = datetime.now(UTC)
        account = cls(
            name=name,
            email=normalize_email(email),
            password_hash=password_hash,
            role=role,
            phone=phone,
            address=address,
            created_at=now,
            updated_at=now,
        )
        account.raise_(
            AccountRegistered(
                account_id=account.id,
                name=account.name,
                email=account.email,
                role=account.role,
                registered_at=now,
            )
        )
        return account

    def update_profile(self, name=_UNSET, phone=_UNSET, address=_UNSET):
        if name is not _UNSET:
            if not name:
                raise ValidationError({"name": ["Name cannot be blank"]})
            self.name = name
        if phone is not _UNSET:
            self.phone = phone
        if address is not _UNSET:
            self.address = address

        self.updated_at = datetime.now(UTC)
        self.raise_(
            ProfileUpdated(
                account_id=self.id,
                name=self.name,
                phone=self.phone,
                address=self.address,
            )
        )

    def change_password(self, new_password_hash):
        now = datetime.now(UTC)
        self.password_hash = new_password_hash
        self.updated_at = now
        self.raise_(PasswordChanged(account_id=self.id, changed_at=now))

    def record_login(self):
        now = datetime.now(UTC)
        self.last_login_at = now
        self.raise_(LoggedIn(account_id=self.id, role=self.role, logged_in_at=now))

    def deactivate(self, deactivated_by=None):
        if not self.active:
            raise ValidationError({"account": ["Account is already deactivated"]})

        now = datetime.now(UTC)
        self.active = False
        self.deactivated_at = now
        self.updated_at = now
        self.raise_(
            AccountDeactivated(
                account_id=self.id,
                role=self.role,
                deactivated_by=deactivated_by,
                deactivated_at=now,
            )
        )
