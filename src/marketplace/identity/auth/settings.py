"""Authentication settings read from the environment.

AUTH_TOKEN_SECRET            current signing key (required in production)
AUTH_TOKEN_PREVIOUS_SECRETS  comma-separated keys still accepted for verification
AUTH_TOKEN_TTL_DAYS          token validity window, default 7
AUTH_BCRYPT_ROUNDS           bcrypt cost factor, default 12
"""

import os
import secrets
from dataclasses import dataclass
from datetime import timedelta

import structlog

from marketplace.utils.logging import current_environment

logger = structlog.get_logger(__name__)

DEFAULT_TOKEN_TTL_DAYS = 7
DEFAULT_BCRYPT_ROUNDS = 12

_ephemeral_secret: str | None = None


@dataclass(frozen=True)
class AuthSettings:
    secret: str
    previous_secrets: tuple[str, ...] = ()
    token_ttl: timedelta = timedelta(days=DEFAULT_TOKEN_TTL_DAYS)
    bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS


def _signing_secret() -> str:
    global _ephemeral_secret

    secret = os.getenv("AUTH_TOKEN_SECRET")
    if secret:
        return secret

    if current_environment() == "production":
        raise RuntimeError("AUTH_TOKEN_SECRET must be set in production")

    if _ephemeral_secret is None:
        _ephemeral_secret = secrets.token_urlsafe(48)
        logger.warning(
            "AUTH_TOKEN_SECRET not set, using an ephemeral signing key",
            environment=current_environment(),
        )
    return _ephemeral_secret


def bcrypt_rounds() -> int:
    return int(os.getenv("AUTH_BCRYPT_ROUNDS", DEFAULT_BCRYPT_ROUNDS))


def load_auth_settings() -> AuthSettings:
    previous = tuple(s.strip() for s in os.getenv("AUTH_TOKEN_PREVIOUS_SECRETS", "").split(",") if s.strip())

    return AuthSettings(
        secret=_signing_secret(),
        previous_secrets=previous,
        token_ttl=timedelta(days=int(os.getenv("AUTH_TOKEN_TTL_DAYS", DEFAULT_TOKEN_TTL_DAYS))),
        bcrypt_rounds=bcrypt_rounds(),
    )
