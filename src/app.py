"""Uncommon Room storefront FastAPI application.

Single-domain web server that processes commands synchronously via HTTP.
Every request under ``/api`` runs inside the storefront domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized once, at import time.
# PROTEAN_ENV selects the config overlay in domain.toml:
#   - unset / "test" → in-memory providers
#   - "production"   → PostgreSQL
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from storefront.domain import storefront
from storefront.utils.logging import log_context

storefront.init()

API_PREFIX = "/api"


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Uncommon Room API",
    description="Furniture storefront and back office",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the storefront domain context for API requests."""
    if request.url.path.startswith(API_PREFIX):
        with storefront.domain_context(), log_context(method=request.method, path=request.url.path):
            response = await call_next(request)
        return response
    # Health check, docs, etc.
    return await call_next(request)


register_exception_handlers(app)

# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from storefront.catalogue.api import admin_product_router, product_router  # noqa: E402
from storefront.enquiries.api import admin_enquiry_router, design_router, inquiry_router  # noqa: E402
from storefront.identity.api import admin_account_router, auth_router, profile_router  # noqa: E402
from storefront.inventory.api import router as inventory_router  # noqa: E402
from storefront.ordering.api import admin_order_router, cart_router, order_router  # noqa: E402
from storefront.reporting.api import router as reporting_router  # noqa: E402

for router in (
    auth_router,
    profile_router,
    admin_account_router,
    product_router,
    admin_product_router,
    inventory_router,
    cart_router,
    order_router,
    admin_order_router,
    inquiry_router,
    design_router,
    admin_enquiry_router,
    reporting_router,
):
    app.include_router(router, prefix=API_PREFIX)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": storefront.name})
