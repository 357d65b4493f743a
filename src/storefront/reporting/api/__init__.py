"""Reporting API package."""

from storefront.reporting.api.routes import router

__all__ = ["router"]
