"""Marketplace FastAPI application.

Single-domain web server that processes commands synchronously via HTTP.
Every request runs inside the ``marketplace`` domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

import os

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from marketplace.domain import marketplace
from marketplace.utils.errors import register_error_handlers
from marketplace.utils.logging import add_context, clear_context

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# Initialized at module level so uvicorn workers share the domain.
# PROTEAN_ENV selects the config overlay from domain.toml.
marketplace.init()


def _allowed_origins() -> list[str]:
    raw = os.getenv("CORS_ALLOW_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Marketplace API",
    description="Shop (accounts, catalogue, cart, orders) and developer hiring board",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the marketplace domain context and fresh log context for each request."""
    clear_context()
    add_context(method=request.method, path=request.url.path)
    try:
        with marketplace.domain_context():
            response = await call_next(request)
    finally:
        clear_context()
    return response


register_exception_handlers(app)
register_error_handlers(app)

# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from marketplace.catalogue.api import category_router, product_router  # noqa: E402
from marketplace.identity.api import client_router, developer_router, user_router  # noqa: E402
from marketplace.ordering.api import cart_router, order_router  # noqa: E402
from marketplace.talent.api import onboarding_router, skill_router  # noqa: E402

app.include_router(user_router)
app.include_router(client_router)
app.include_router(developer_router)
app.include_router(onboarding_router)
app.include_router(category_router)
app.include_router(product_router)
app.include_router(cart_router)
app.include_router(order_router)
app.include_router(skill_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": marketplace.name})
