"""Request-level authentication guard (FastAPI dependencies).

``require_principal`` turns an ``Authorization: Bearer <token>`` header into a
``Principal`` or fails the request with 401. Expired, tampered and garbage
tokens all surface as the same "Invalid token." error.
"""

import structlog
from fastapi import Depends, Header, Request

from marketplace.identity.auth import get_token_service
from marketplace.identity.auth.errors import Forbidden, InvalidTokenError, Unauthenticated
from marketplace.identity.auth.port import Principal

logger = structlog.get_logger(__name__)

BEARER_SCHEME = "bearer"


def extract_bearer_token(authorization: str | None) -> str:
    """Return the token from a well-formed ``Bearer <token>`` header value."""
    if not authorization or not authorization.strip():
        raise Unauthenticated("Authorization header is missing")

    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != BEARER_SCHEME or not parts[1]:
        raise Unauthenticated("Malformed authorization header")

    return parts[1]


def require_principal(request: Request, authorization: str | None = Header(default=None)) -> Principal:
    token = extract_bearer_token(authorization)

    try:
        principal = get_token_service().verify(token)
    except InvalidTokenError as exc:
        logger.info("Rejected bearer token", reason=str(exc), path=request.url.path)
        raise Unauthenticated("Invalid token.") from exc

    request.state.principal = principal
    structlog.contextvars.bind_contextvars(principal_id=principal.id, principal_kind=principal.kind)
    return principal


def require_kind(*kinds):
    """Dependency factory: authenticate, then allow only the given principal kinds."""
    allowed = {getattr(kind, "value", kind) for kind in kinds}

    def dependency(principal: Principal = Depends(require_principal)) -> Principal:
        if principal.kind not in allowed:
            raise Forbidden(f"Only {', '.join(sorted(allowed))} accounts may perform this action")
        return principal

    return dependency


def ensure_owner(principal: Principal, user_id: str) -> None:
    """Reject a principal acting on another user's resources."""
    if str(principal.id) != str(user_id):
        raise Forbidden("You may only access your own resources")
