"""The visitor's cart as the client sees it.

``CartSession`` holds one explicit authoritative source at a time:

- ``LOCAL``: the visitor is anonymous (or the last merge failed). Lines
  live in client storage under the ``cart`` key and are mutated locally.
- ``SERVER``: the visitor is signed in and their local lines have been
  merged. The server cart is the single source of truth and every
  mutation goes through the API.

Signing in runs the reconciliation flow exactly once: local lines are
summed per product, pushed to the server one product at a time, and the
server cart is then fetched to replace the local view wholesale.
"""

from copy import deepcopy
from enum import Enum

import structlog

from storefront_client.client import StorefrontClient
from storefront_client.errors import (
    AuthenticationRequired,
    NotFound,
    TransientError,
    ValidationFailed,
)
from storefront_client.storage import LocalStorage

logger = structlog.get_logger(__name__)

CART_KEY = "cart"
SYNC_KEY = "cart_sync"


class CartSource(Enum):
    LOCAL = "local"
    SERVER = "server"


def merge_local_lines(lines: list[dict]) -> list[dict]:
    """Collapse local lines into one per product, summing quantities.

    Product order follows first appearance. The last non-empty note wins.
    """
    merged: dict[str, dict] = {}
    for line in lines:
        product_id = str(line["product_id"])
        quantity = int(line.get("quantity") or 0)
        if quantity < 1:
            continue
        if product_id not in merged:
            merged[product_id] = {"product_id": product_id, "quantity": 0, "note": None}
        merged[product_id]["quantity"] += quantity
        if line.get("note"):
            merged[product_id]["note"] = line["note"]
    return list(merged.values())


class CartSession:
    def __init__(self, client: StorefrontClient, storage: LocalStorage | None = None):
        self.client = client
        self.storage = storage or LocalStorage()

        sync = self.storage.get(SYNC_KEY) or {}
        self.source = CartSource(sync.get("source", CartSource.LOCAL.value))
        self.synced = bool(sync.get("synced", False))
        self._merged: dict[str, int] = dict(sync.get("merged", {}))
        self.account_id: str | None = sync.get("account_id")

        self.lines: list[dict] = list(self.storage.get(CART_KEY) or [])
        self.rejected: list[dict] = []
        self.last_error: Exception | None = None

        # A server view cannot outlive its credential
        if self.source is CartSource.SERVER and not self.client.is_authenticated:
            self._fall_back_to_local(lines=[])

    @property
    def is_authenticated(self) -> bool:
        return self.client.is_authenticated

    @property
    def item_count(self) -> int:
        return sum(int(line.get("quantity") or 0) for line in self.lines)

    # -------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------
    def _persist(self) -> None:
        if self.source is CartSource.LOCAL:
            self.storage.set(CART_KEY, self.lines)
        else:
            self.storage.remove(CART_KEY)
        self.storage.set(
            SYNC_KEY,
            {
                "source": self.source.value,
                "synced": self.synced,
                "merged": dict(self._merged),
                "account_id": self.account_id,
            },
        )

    def _use_server_lines(self, lines: list[dict]) -> list[dict]:
        self.lines = list(lines)
        self.source = CartSource.SERVER
        self.synced = True
        self._merged = {}
        self._persist()
        return self.lines

    def _fall_back_to_local(self, lines: list[dict]) -> None:
        self.lines = lines
        self.source = CartSource.LOCAL
        self.synced = False
        self._persist()

    # -------------------------------------------------------------------
    # Sign in / out
    # -------------------------------------------------------------------
    def login(self, email: str, password: str) -> dict:
        account = self.client.login(email, password)
        self._signed_in_as(account)
        self.reconcile()
        return account

    def register(self, name: str, email: str, password: str, **details) -> dict:
        account = self.client.register(name, email, password, **details)
        self._signed_in_as(account)
        self.reconcile()
        return account

    def _signed_in_as(self, account: dict) -> None:
        account_id = str(account["id"]) if account.get("id") is not None else None
        if self.account_id is not None and account_id != self.account_id:
            # Cart state of the previous account never carries over
            logger.info("Different account signed in, dropping previous cart state")
            self._merged = {}
            self.rejected = []
            if self.source is CartSource.SERVER:
                self.lines = []
                self.source = CartSource.LOCAL
                self.synced = False
        self.account_id = account_id
        self._persist()

    def logout(self) -> None:
        self.client.logout()
        self.lines = []
        self.source = CartSource.LOCAL
        self.synced = False
        self._merged = {}
        self.account_id = None
        self.rejected = []
        self.last_error = None
        self.storage.remove(CART_KEY, SYNC_KEY)
        logger.info("Signed out, local cart discarded")

    def reconcile(self) -> list[dict]:
        """Merge the local cart into the signed-in visitor's server cart.

        Never raises for an unreachable server or a rejected credential:
        the pre-merge local cart is restored and the session stays
        unsynced so the next sign-in retries. Quantities pushed before the
        failure are remembered per product and not pushed again.

        A session whose lines already come from the server has nothing
        local to merge and only re-reads the server cart.
        """
        if not self.is_authenticated:
            raise AuthenticationRequired("Sign in before merging the cart")

        if self.source is CartSource.SERVER:
            return self._refresh_server_lines()

        snapshot = deepcopy(self.lines)
        self.rejected = []
        self.last_error = None

        try:
            for line in merge_local_lines(snapshot):
                product_id = line["product_id"]
                already_pushed = self._merged.get(product_id, 0)
                outstanding = line["quantity"] - already_pushed
                if outstanding < 1:
                    continue
                note = line["note"] if not already_pushed else None
                try:
                    self.client.add_to_cart(product_id, outstanding, note)
                except (NotFound, ValidationFailed) as exc:
                    # Permanently rejected lines are recorded and not retried
                    logger.warning("Local cart line rejected", product_id=product_id, error=str(exc))
                    self.rejected.append({**line, "reason": str(exc)})
                self._merged[product_id] = line["quantity"]
                self._persist()

            server_lines = self.client.get_cart()
        except (AuthenticationRequired, TransientError) as exc:
            logger.warning(
                "Cart merge interrupted, keeping local cart",
                error=str(exc),
                already_merged=len(self._merged),
            )
            self.last_error = exc
            self._fall_back_to_local(snapshot)
            return self.lines

        logger.info("Cart merged", local_lines=len(snapshot), server_lines=len(server_lines))
        return self._use_server_lines(server_lines)

    def _refresh_server_lines(self) -> list[dict]:
        self.rejected = []
        self.last_error = None
        try:
            return self._use_server_lines(self.client.get_cart())
        except (AuthenticationRequired, TransientError) as exc:
            logger.warning("Could not refresh the server cart", error=str(exc))
            self.last_error = exc
            return self.lines

    # -------------------------------------------------------------------
    # Reading
    # -------------------------------------------------------------------
    def fetch(self) -> list[dict]:
        """Current cart lines. Anonymous visitors always get their local cart."""
        if not self.is_authenticated or self.source is CartSource.LOCAL:
            return self.lines

        try:
            return self._use_server_lines(self.client.get_cart())
        except AuthenticationRequired:
            logger.info("Credential rejected while fetching cart, signing out locally")
            self.client.logout()
            self._fall_back_to_local(lines=[])
            return self.lines

    # -------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------
    def _is_server_backed(self) -> bool:
        return self.is_authenticated and self.source is CartSource.SERVER

    def add(self, product_id, quantity: int = 1, note: str | None = None, product: dict | None = None) -> list[dict]:
        if quantity < 1:
            raise ValidationFailed("Quantity must be at least 1")

        if self._is_server_backed():
            return self._use_server_lines(self.client.add_to_cart(product_id, quantity, note))

        product_id = str(product_id)
        line = self._local_line(product_id)
        if line is None:
            self.lines.append(
                {"id": product_id, "product_id": product_id, "quantity": quantity, "note": note, "product": product}
            )
        else:
            line["quantity"] += quantity
            if note:
                line["note"] = note
            if product:
                line["product"] = product
        self._persist()
        return self.lines

    def update(self, line_id, quantity: int | None = None, note: str | None = None) -> list[dict]:
        if quantity is not None and quantity < 1:
            raise ValidationFailed("Quantity must be at least 1")

        if self._is_server_backed():
            return self._use_server_lines(self.client.update_cart_line(line_id, quantity, note))

        line = self._require_local_line(str(line_id))
        if quantity is not None:
            line["quantity"] = quantity
        if note is not None:
            line["note"] = note or None
        self._persist()
        return self.lines

    def remove(self, line_id) -> list[dict]:
        if self._is_server_backed():
            return self._use_server_lines(self.client.remove_cart_line(line_id))

        line = self._require_local_line(str(line_id))
        self.lines.remove(line)
        self._persist()
        return self.lines

    def clear(self) -> list[dict]:
        if self._is_server_backed():
            return self._use_server_lines(self.client.clear_cart())

        self.lines = []
        self._persist()
        return self.lines

    def _local_line(self, line_id: str) -> dict | None:
        return next((line for line in self.lines if str(line["id"]) == line_id), None)

    def _require_local_line(self, line_id: str) -> dict:
        line = self._local_line(line_id)
        if line is None:
            raise NotFound(f"Cart line {line_id} not found")
        return line

    # -------------------------------------------------------------------
    # Checkout
    # -------------------------------------------------------------------
    def checkout(self, shipping_address: str, payment_method: str) -> str:
        """Place an order for the server cart and return the new order id.

        The cart is left untouched when checkout fails.
        """
        if not self.is_authenticated:
            raise AuthenticationRequired("Sign in to check out")

        if not self.synced:
            self.reconcile()
            if not self.synced:
                raise self.last_error or TransientError("Cart is not synced with the server")

        order_id = self.client.place_order(shipping_address, payment_method)
        self._use_server_lines([])
        logger.info("Order placed", order_id=order_id)
        return order_id
