"""Identity domain API package."""

from marketplace.identity.api.routes import build_account_router, client_router, developer_router, user_router

__all__ = ["build_account_router", "client_router", "developer_router", "user_router"]
