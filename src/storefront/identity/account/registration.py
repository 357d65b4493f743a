"""Account registration: commands and handler.

Passwords arrive here already hashed; plaintext never enters a command.
"""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String, Text
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.account.account import Account, AccountRole
from storefront.identity.account.queries import find_account_by_email


@storefront.command(part_of="Account")
class RegisterCustomer:
    """Sign up a new customer account."""

    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254)
    password_hash: String(required=True, max_length=128)
    phone: String(max_length=20)
    address: Text()


@storefront.command(part_of="Account")
class CreateAdmin:
    """An administrator creates another administrator account."""

    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254)
    password_hash: String(required=True, max_length=128)


@storefront.command_handler(part_of=Account)
class RegistrationHandler:
    def _ensure_email_is_free(self, email):
        if find_account_by_email(email) is not None:
            raise ValidationError({"email": ["Email already registered"]})

    @handle(RegisterCustomer)
    def register_customer(self, command):
        self._ensure_email_is_free(command.email)
        account = Account.register(
            name=command.name,
            email=command.email,
            password_hash=command.password_hash,
            phone=command.phone,
            address=command.address,
        )
        current_domain.repository_for(Account).add(account)
        return str(account.id)

    @handle(CreateAdmin)
    def create_admin(self, command):
        self._ensure_email_is_free(command.email)
        account = Account.register(
            name=command.name,
            email=command.email,
            password_hash=command.password_hash,
            role=AccountRole.ADMIN.value,
        )
        current_domain.repository_for(Account).add(account)
        return str(account.id)
