"""Store settings read from the ``[custom]`` section of ``domain.toml``.

Environment variables with the upper-cased key name take precedence, so
secrets never have to live in the TOML file.
"""

import os

from protean.utils.globals import current_domain

_DEFAULTS = {
    "free_shipping_threshold": 2000.0,
    "shipping_fee": 500.0,
    "currency": "R",
    "jwt_secret": "change-me-in-production",
    "jwt_ttl_days": 7,
    "admin_email": "admin@uncommonroom.co.za",
    "mail_from": "orders@uncommonroom.co.za",
}


def store_setting(key: str):
    override = os.getenv(key.upper())
    if override is not None:
        return override

    custom = current_domain.config.get("custom") or {}
    return custom.get(key, _DEFAULTS.get(key))


def free_shipping_threshold() -> float:
    return float(store_setting("free_shipping_threshold"))


def shipping_fee() -> float:
    return float(store_setting("shipping_fee"))


def jwt_secret() -> str:
    return str(store_setting("jwt_secret"))


def jwt_ttl_days() -> int:
    return int(store_setting("jwt_ttl_days"))
