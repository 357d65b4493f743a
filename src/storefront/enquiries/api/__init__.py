"""Enquiries API package."""

from storefront.enquiries.api.routes import admin_enquiry_router, design_router, inquiry_router

__all__ = ["inquiry_router", "design_router", "admin_enquiry_router"]
