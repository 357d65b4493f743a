"""Profile maintenance: commands and handler."""

from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.account.account import Account


@storefront.command(part_of="Account")
class UpdateProfile:
    account_id: Identifier(required=True)
    name: String(max_length=100)
    phone: String(max_length=20)
    address: Text()


@storefront.command(part_of="Account")
class ChangePassword:
    account_id: Identifier(required=True)
    new_password_hash: String(required=True, max_length=128)


@storefront.command(part_of="Account")
class RecordLogin:
    account_id: Identifier(required=True)


@storefront.command_handler(part_of=Account)
class ProfileHandler:
    @handle(UpdateProfile)
    def update_profile(self, command):
        repo = current_domain.repository_for(Account)
        account = repo.get(command.account_id)

        updates = {}
        for field in ("name", "phone", "address"):
            value = getattr(command, field)
            if value is not None:
                updates[field] = value

        account.update_profile(**updates)
        repo.add(account)

    @handle(ChangePassword)
    def change_password(self, command):
        repo = current_domain.repository_for(Account)
        account = repo.get(command.account_id)
        account.change_password(command.new_password_hash)
        repo.add(account)

    @handle(RecordLogin)
    def record_login(self, command):
        repo = current_domain.repository_for(Account)
        account = repo.get(command.account_id)
        account.record_login()
        repo.add(account)
