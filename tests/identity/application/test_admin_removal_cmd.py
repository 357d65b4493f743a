"""Application tests for removing administrator accounts."""

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError

from storefront.identity.account.account import Account, AccountRole
from storefront.identity.account.administration import RemoveAdmin
from storefront.identity.account.queries import accounts_with_role, authenticate, is_active_account


def _remove(account_id, removed_by):
    current_domain.process(RemoveAdmin(account_id=account_id, removed_by=removed_by), asynchronous=False)


class TestRemoveAdmin:
    def test_removed_admin_is_deactivated(self, make_admin):
        owner_id = make_admin(email="owner@example.com")
        second_id = make_admin(email="second@example.com")

        _remove(second_id, removed_by=owner_id)

        account = current_domain.repository_for(Account).get(second_id)
        assert account.active is False
        assert not is_active_account(second_id)
        assert is_active_account(owner_id)

    def test_removed_admin_is_not_listed(self, make_admin):
        owner_id = make_admin(email="owner@example.com")
        second_id = make_admin(email="second@example.com")

        _remove(second_id, removed_by=owner_id)

        assert [a.email for a in accounts_with_role(AccountRole.ADMIN)] == ["owner@example.com"]

    def test_removed_admin_cannot_sign_in(self, make_admin):
        owner_id = make_admin(email="owner@example.com")
        second_id = make_admin(email="second@example.com", password="second-pass")

        _remove(second_id, removed_by=owner_id)

        assert authenticate("second@example.com", "second-pass", role=AccountRole.ADMIN) is None

    def test_cannot_remove_own_account(self, make_admin):
        owner_id = make_admin()
        with pytest.raises(ValidationError) as exc:
            _remove(owner_id, removed_by=owner_id)
        assert exc.value.messages["account_id"] == ["Cannot remove your own admin account"]
        assert is_active_account(owner_id)

    def test_unknown_account_not_found(self, make_admin):
        owner_id = make_admin()
        with pytest.raises(ObjectNotFoundError):
            _remove("no-such-admin", removed_by=owner_id)

    def test_customer_accounts_are_not_admins(self, make_admin, make_customer):
        owner_id = make_admin()
        customer_id = make_customer()
        with pytest.raises(ObjectNotFoundError):
            _remove(customer_id, removed_by=owner_id)

    def test_already_removed_admin_not_found(self, make_admin):
        owner_id = make_admin(email="owner@example.com")
        second_id = make_admin(email="second@example.com")
        _remove(second_id, removed_by=owner_id)

        with pytest.raises(ObjectNotFoundError):
            _remove(second_id, removed_by=owner_id)
