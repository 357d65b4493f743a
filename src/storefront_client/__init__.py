"""Python client for the Uncommon Room storefront API.

Holds the visitor's local cart while they browse anonymously and
reconciles it with their server cart when they sign in.
"""

from storefront_client.cart import CartSession, CartSource
from storefront_client.client import StorefrontClient
from storefront_client.errors import (
    AuthenticationRequired,
    Forbidden,
    NotFound,
    StorefrontClientError,
    TransientError,
    ValidationFailed,
)
from storefront_client.storage import LocalStorage

__all__ = [
    "AuthenticationRequired",
    "CartSession",
    "CartSource",
    "Forbidden",
    "LocalStorage",
    "NotFound",
    "StorefrontClient",
    "StorefrontClientError",
    "TransientError",
    "ValidationFailed",
]
