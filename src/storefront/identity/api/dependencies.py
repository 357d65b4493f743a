"""FastAPI dependencies that identify the caller from the bearer credential."""

import structlog
from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from storefront.identity.account.queries import is_active_account
from storefront.identity.auth.tokens import Identity, InvalidToken, decode_token

logger = structlog.get_logger(__name__)

_bearer = HTTPBearer(auto_error=False)


async def current_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
) -> Identity:
    if credentials is None:
        raise HTTPException(
            status_code=401,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return decode_token(credentials.credentials)
    except InvalidToken as exc:
        logger.info("Rejected bearer credential", reason=str(exc))
        raise HTTPException(
            status_code=401,
            detail=str(exc),
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc


async def require_admin(identity: Identity = Depends(current_identity)) -> Identity:
    if not identity.is_admin:
        raise HTTPException(status_code=403, detail="Admin access required")
    if not is_active_account(identity.account_id):
        logger.info("Admin credential for a removed account", account_id=identity.account_id)
        raise HTTPException(
            status_code=401,
            detail="Account is no longer active",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return identity
