"""Administrator account removal: command and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.account.account import Account


@storefront.command(part_of="Account")
class RemoveAdmin:
    """An administrator removes another administrator account."""

    account_id: Identifier(required=True)
    removed_by: Identifier(required=True)


@storefront.command_handler(part_of=Account)
class AdministrationHandler:
    @handle(RemoveAdmin)
    def remove_admin(self, command):
        if str(command.account_id) == str(command.removed_by):
            raise ValidationError({"account_id": ["Cannot remove your own admin account"]})

        repo = current_domain.repository_for(Account)
        account = repo.get(command.account_id)
        if not account.is_admin or not account.active:
            raise ObjectNotFoundError({"_entity": f"Admin {command.account_id} not found"})

        account.deactivate(deactivated_by=command.removed_by)
        repo.add(account)
