"""Token service factory.

Provides get_token_service() / set_token_service() to swap implementations.
The default is a JWTTokenService built from the environment settings.
"""

from marketplace.identity.auth.jwt_adapter import JWTTokenService
from marketplace.identity.auth.port import Principal, TokenService
from marketplace.identity.auth.settings import load_auth_settings

_current_service: TokenService | None = None


def get_token_service() -> TokenService:
    """Return the current token service, building the default on first use."""
    global _current_service
    if _current_service is None:
        settings = load_auth_settings()
        _current_service = JWTTokenService(
            secret=settings.secret,
            previous_secrets=settings.previous_secrets,
            ttl=settings.token_ttl,
        )
    return _current_service


def set_token_service(service: TokenService) -> None:
    """Override the active token service (useful for tests and key rotation)."""
    global _current_service
    _current_service = service


def reset_token_service() -> None:
    """Drop the active service; the next call rebuilds it from settings."""
    global _current_service
    _current_service = None


__all__ = [
    "Principal",
    "TokenService",
    "get_token_service",
    "reset_token_service",
    "set_token_service",
]
