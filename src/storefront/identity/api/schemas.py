"""Pydantic request/response schemas for the Identity API.

These are external contracts (anti-corruption layer), separate from
internal Protean commands.
"""

from pydantic import BaseModel, Field

from storefront.identity.auth.passwords import MIN_PASSWORD_LENGTH


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class RegisterRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: str = Field(max_length=254)
    password: str = Field(min_length=MIN_PASSWORD_LENGTH)
    phone: str | None = Field(default=None, max_length=20)
    address: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Thandi Mokoena",
                    "email": "thandi@example.com",
                    "password": "s3cret-pass",
                    "phone": "+27 82 555 0101",
                    "address": "12 Long Street, Cape Town",
                }
            ]
        }
    }


class LoginRequest(BaseModel):
    email: str
    password: str


class UpdateProfileRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    phone: str | None = Field(default=None, max_length=20)
    address: str | None = None


class ChangePasswordRequest(BaseModel):
    current_password: str
    new_password: str = Field(min_length=MIN_PASSWORD_LENGTH)


class CreateAdminRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: str = Field(max_length=254)
    password: str = Field(min_length=MIN_PASSWORD_LENGTH)


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class AccountResponse(BaseModel):
    id: str
    name: str
    email: str
    role: str
    phone: str | None = None
    address: str | None = None
    created_at: str | None = None

    @classmethod
    def from_account(cls, account) -> "AccountResponse":
        return cls(
            id=str(account.id),
            name=account.name,
            email=account.email,
            role=account.role,
            phone=account.phone,
            address=account.address,
            created_at=account.created_at.isoformat() if account.created_at else None,
        )


class AuthResponse(BaseModel):
    token: str
    account: AccountResponse


class AccountIdResponse(BaseModel):
    account_id: str


class StatusResponse(BaseModel):
    status: str = "ok"
