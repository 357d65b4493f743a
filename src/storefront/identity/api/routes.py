"""FastAPI routes for the Identity context: sign-up, sign-in and profiles."""

import structlog
from fastapi import APIRouter, Depends, HTTPException
from protean.utils.globals import current_domain

from storefront.identity.account.account import Account, AccountRole
from storefront.identity.account.administration import RemoveAdmin
from storefront.identity.account.profile import ChangePassword, RecordLogin, UpdateProfile
from storefront.identity.account.queries import accounts_with_role, authenticate
from storefront.identity.account.registration import CreateAdmin, RegisterCustomer
from storefront.identity.api.dependencies import current_identity, require_admin
from storefront.identity.api.schemas import (
    AccountIdResponse,
    AccountResponse,
    AuthResponse,
    ChangePasswordRequest,
    CreateAdminRequest,
    LoginRequest,
    RegisterRequest,
    StatusResponse,
    UpdateProfileRequest,
)
from storefront.identity.auth.passwords import hash_password, verify_password
from storefront.identity.auth.tokens import Identity, issue_token

logger = structlog.get_logger(__name__)


def _signed_in(account) -> AuthResponse:
    current_domain.process(RecordLogin(account_id=str(account.id)), asynchronous=False)
    token = issue_token(str(account.id), account.email, account.role)
    return AuthResponse(token=token, account=AccountResponse.from_account(account))


# ---------------------------------------------------------------------------
# Auth Router
# ---------------------------------------------------------------------------
auth_router = APIRouter(prefix="/auth", tags=["auth"])


@auth_router.post("/register", status_code=201, response_model=AuthResponse)
async def register(body: RegisterRequest) -> AuthResponse:
    command = RegisterCustomer(
        name=body.name,
        email=body.email,
        password_hash=hash_password(body.password),
        phone=body.phone,
        address=body.address,
    )
    account_id = current_domain.process(command, asynchronous=False)
    account = current_domain.repository_for(Account).get(account_id)
    logger.info("Customer registered", account_id=account_id)
    return _signed_in(account)


@auth_router.post("/login", response_model=AuthResponse)
async def login(body: LoginRequest) -> AuthResponse:
    account = authenticate(body.email, body.password)
    if account is None:
        raise HTTPException(status_code=401, detail="Invalid email or password")
    return _signed_in(account)


# ---------------------------------------------------------------------------
# Profile Router
# ---------------------------------------------------------------------------
profile_router = APIRouter(prefix="/profile", tags=["profile"])


@profile_router.get("", response_model=AccountResponse)
async def get_profile(identity: Identity = Depends(current_identity)) -> AccountResponse:
    account = current_domain.repository_for(Account).get(identity.account_id)
    return AccountResponse.from_account(account)


@profile_router.put("", response_model=AccountResponse)
async def update_profile(
    body: UpdateProfileRequest,
    identity: Identity = Depends(current_identity),
) -> AccountResponse:
    command = UpdateProfile(
        account_id=identity.account_id,
        name=body.name,
        phone=body.phone,
        address=body.address,
    )
    current_domain.process(command, asynchronous=False)
    account = current_domain.repository_for(Account).get(identity.account_id)
    return AccountResponse.from_account(account)


@profile_router.put("/password", response_model=StatusResponse)
async def change_password(
    body: ChangePasswordRequest,
    identity: Identity = Depends(current_identity),
) -> StatusResponse:
    account = current_domain.repository_for(Account).get(identity.account_id)
    if not verify_password(body.current_password, account.password_hash):
        raise HTTPException(status_code=400, detail="Current password is incorrect")

    command = ChangePassword(
        account_id=identity.account_id,
        new_password_hash=hash_password(body.new_password),
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Admin Account Router
# ---------------------------------------------------------------------------
admin_account_router = APIRouter(prefix="/admin", tags=["admin"])


@admin_account_router.post("/login", response_model=AuthResponse)
async def admin_login(body: LoginRequest) -> AuthResponse:
    account = authenticate(body.email, body.password, role=AccountRole.ADMIN)
    if account is None:
        raise HTTPException(status_code=401, detail="Invalid admin credentials")
    return _signed_in(account)


@admin_account_router.get("/customers", response_model=list[AccountResponse])
async def list_customers(_: Identity = Depends(require_admin)) -> list[AccountResponse]:
    return [AccountResponse.from_account(a) for a in accounts_with_role(AccountRole.CUSTOMER)]


@admin_account_router.get("/admins", response_model=list[AccountResponse])
async def list_admins(_: Identity = Depends(require_admin)) -> list[AccountResponse]:
    return [AccountResponse.from_account(a) for a in accounts_with_role(AccountRole.ADMIN)]


@admin_account_router.post("/admins", status_code=201, response_model=AccountIdResponse)
async def create_admin(
    body: CreateAdminRequest,
    identity: Identity = Depends(require_admin),
) -> AccountIdResponse:
    command = CreateAdmin(
        name=body.name,
        email=body.email,
        password_hash=hash_password(body.password),
    )
    account_id = current_domain.process(command, asynchronous=False)
    logger.info("Admin account created", account_id=account_id, created_by=identity.account_id)
    return AccountIdResponse(account_id=account_id)


@admin_account_router.delete("/admins/{account_id}", response_model=StatusResponse)
async def remove_admin(account_id: str, identity: Identity = Depends(require_admin)) -> StatusResponse:
    current_domain.process(RemoveAdmin(account_id=account_id, removed_by=identity.account_id), asynchronous=False)
    logger.info("Admin account removed", account_id=account_id, removed_by=identity.account_id)
    return StatusResponse()
