"""Client-side error taxonomy, mapped from HTTP responses."""


class StorefrontClientError(Exception):
    """Base class for every error raised by the storefront client."""

    def __init__(self, message: str, status_code: int | None = None, payload=None):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


class ValidationFailed(StorefrontClientError):
    """The server rejected the input (400/422). Show it inline to the user."""


class AuthenticationRequired(StorefrontClientError):
    """The credential is missing, expired or wrong (401). Send the user to sign in."""


class Forbidden(StorefrontClientError):
    """The caller is signed in but may not touch this resource (403)."""


class NotFound(StorefrontClientError):
    """The referenced product, order or line does not exist (404)."""


class TransientError(StorefrontClientError):
    """The server was unreachable or failed (network error or 5xx). Safe to retry."""
