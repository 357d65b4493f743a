"""Thin HTTP client for the storefront API.

Every call either returns decoded JSON or raises one of the errors in
``storefront_client.errors``.
"""

import httpx
import structlog

from storefront_client.errors import (
    AuthenticationRequired,
    Forbidden,
    NotFound,
    StorefrontClientError,
    TransientError,
    ValidationFailed,
)

logger = structlog.get_logger(__name__)

_STATUS_ERRORS = {
    400: ValidationFailed,
    401: AuthenticationRequired,
    403: Forbidden,
    404: NotFound,
    422: ValidationFailed,
}


def _error_message(response: httpx.Response) -> tuple[str, object]:
    try:
        payload = response.json()
    except ValueError:
        return response.text or response.reason_phrase, None

    if isinstance(payload, dict):
        message = payload.get("detail") or payload.get("error") or payload
    else:
        message = payload
    return str(message), payload


class StorefrontClient:
    """Calls the storefront API on behalf of one visitor.

    Args:
        http: an ``httpx.Client`` (a FastAPI ``TestClient`` works too).
            When omitted, one is created for ``base_url``.
        token: a bearer credential from an earlier sign-in.
    """

    def __init__(
        self,
        http: httpx.Client | None = None,
        base_url: str = "http://localhost:8000",
        token: str | None = None,
        api_prefix: str = "/api",
        timeout: float = 10.0,
    ):
        self.http = http or httpx.Client(base_url=base_url, timeout=timeout)
        self.token = token
        self.api_prefix = api_prefix.rstrip("/")

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def _request(self, method: str, path: str, **kwargs):
        headers = kwargs.pop("headers", {})
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        try:
            response = self.http.request(method, f"{self.api_prefix}{path}", headers=headers, **kwargs)
        except httpx.TransportError as exc:
            logger.warning("Storefront unreachable", method=method, path=path, error=str(exc))
            raise TransientError(f"Could not reach the storefront: {exc}") from exc

        if response.is_success:
            return response.json() if response.content else None

        message, payload = _error_message(response)
        if response.status_code >= 500:
            raise TransientError(message, response.status_code, payload)
        error_cls = _STATUS_ERRORS.get(response.status_code, StorefrontClientError)
        raise error_cls(message, response.status_code, payload)

    # -------------------------------------------------------------------
    # Accounts
    # -------------------------------------------------------------------
    def register(self, name, email, password, phone=None, address=None) -> dict:
        data = self._request(
            "POST",
            "/auth/register",
            json={"name": name, "email": email, "password": password, "phone": phone, "address": address},
        )
        self.token = data["token"]
        return data["account"]

    def login(self, email, password) -> dict:
        data = self._request("POST", "/auth/login", json={"email": email, "password": password})
        self.token = data["token"]
        return data["account"]

    def logout(self) -> None:
        self.token = None

    # -------------------------------------------------------------------
    # Catalogue
    # -------------------------------------------------------------------
    def list_products(self, **filters) -> list[dict]:
        params = {k: v for k, v in filters.items() if v is not None}
        return self._request("GET", "/products", params=params)

    def get_product(self, product_id) -> dict:
        return self._request("GET", f"/products/{product_id}")

    # -------------------------------------------------------------------
    # Cart
    # -------------------------------------------------------------------
    def get_cart(self) -> list[dict]:
        return self._request("GET", "/cart")

    def add_to_cart(self, product_id, quantity=1, note=None) -> list[dict]:
        body = {"product_id": str(product_id), "quantity": quantity}
        if note:
            body["note"] = note
        return self._request("POST", "/cart/items", json=body)

    def update_cart_line(self, line_id, quantity=None, note=None) -> list[dict]:
        return self._request("PUT", f"/cart/items/{line_id}", json={"quantity": quantity, "note": note})

    def remove_cart_line(self, line_id) -> list[dict]:
        return self._request("DELETE", f"/cart/items/{line_id}")

    def clear_cart(self) -> list[dict]:
        return self._request("DELETE", "/cart")

    # -------------------------------------------------------------------
    # Orders
    # -------------------------------------------------------------------
    def place_order(self, shipping_address, payment_method) -> str:
        data = self._request(
            "POST",
            "/orders",
            json={"shipping_address": shipping_address, "payment_method": payment_method},
        )
        return data["order_id"]

    def get_order(self, order_id) -> dict:
        return self._request("GET", f"/orders/{order_id}")

    def list_orders(self) -> list[dict]:
        return self._request("GET", "/orders")
