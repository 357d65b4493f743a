"""Read-side lookups for accounts."""

from protean.utils.globals import current_domain

from storefront.identity.account.account import Account, AccountRole
from storefront.identity.auth.passwords import verify_password
from storefront.shared.email import normalize_email


def find_account_by_email(email):
    repo = current_domain.repository_for(Account)
    return repo._dao.query.filter(email=normalize_email(email)).all().first


def accounts_with_role(role: AccountRole):
    repo = current_domain.repository_for(Account)
    return repo._dao.query.filter(role=role.value, active=True).order_by("-created_at").limit(None).all().items


def authenticate(email, password, role: AccountRole | None = None):
    """Return the matching account, or None when the credentials do not check out."""
    account = find_account_by_email(email)
    if account is None or not account.active:
        return None
    if not verify_password(password, account.password_hash):
        return None
    if role is not None and account.role != role.value:
        return None
    return account


def is_active_account(account_id) -> bool:
    repo = current_domain.repository_for(Account)
    return repo._dao.query.filter(id=str(account_id), active=True).all().first is not None
