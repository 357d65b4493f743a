"""Identity API package."""

from storefront.identity.api.routes import admin_account_router, auth_router, profile_router

__all__ = ["auth_router", "profile_router", "admin_account_router"]
