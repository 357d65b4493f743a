"""Bearer credentials: HS256 JSON Web Tokens signed with the store secret."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import jwt

from storefront.utils.settings import jwt_secret, jwt_ttl_days

_ALGORITHM = "HS256"


class InvalidToken(Exception):
    """Raised when a bearer credential is missing, malformed, expired or forged."""


@dataclass(frozen=True)
class Identity:
    """The caller identified by a valid bearer credential."""

    account_id: str
    email: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


def issue_token(account_id: str, email: str, role: str, now: datetime | None = None) -> str:
    issued_at = now or datetime.now(UTC)
    payload = {
        "sub": str(account_id),
        "email": email,
        "role": role,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=jwt_ttl_days()),
    }
    return jwt.encode(payload, jwt_secret(), algorithm=_ALGORITHM)


def decode_token(token: str) -> Identity:
    try:
        payload = jwt.decode(token, jwt_secret(), algorithms=[_ALGORITHM])
    except jwt.ExpiredSignatureError as exc:
        raise InvalidToken("Token has expired") from exc
    except jwt.InvalidTokenError as exc:
        raise InvalidToken("Invalid token") from exc

    if not payload.get("sub") or not payload.get("role"):
        raise InvalidToken("Token is missing claims")

    return Identity(account_id=payload["sub"], email=payload.get("email", ""), role=payload["role"])
