"""PyJWT adapter for the token service (HS256)."""

from datetime import UTC, datetime, timedelta

import jwt

from marketplace.identity.auth.errors import InvalidTokenError, TokenExpiredError
from marketplace.identity.auth.port import Principal, TokenService

_REQUIRED_CLAIMS = ("principal_id", "principal_name", "principal_kind")


class JWTTokenService(TokenService):
    algorithm = "HS256"

    def __init__(
        self,
        secret: str,
        previous_secrets: tuple[str, ...] = (),
        ttl: timedelta = timedelta(days=7),
    ) -> None:
        if not secret:
            raise ValueError("A signing secret is required")
        self.secret = secret
        self.previous_secrets = tuple(previous_secrets)
        self.ttl = ttl

    def issue(self, principal: Principal, now: datetime | None = None) -> str:
        issued_at = now or datetime.now(UTC)
        claims = {
            "principal_id": str(principal.id),
            "principal_name": principal.name,
            "principal_kind": principal.kind,
            "iat": issued_at,
            "exp": issued_at + self.ttl,
        }
        return jwt.encode(claims, self.secret, algorithm=self.algorithm)

    def verify(self, token: str | None) -> Principal:
        if not token:
            raise InvalidTokenError("Token is missing")

        # Tokens are always issued with the current key; older keys stay
        # valid for verification until they are dropped from configuration.
        for secret in (self.secret, *self.previous_secrets):
            try:
                claims = jwt.decode(
                    token,
                    secret,
                    algorithms=[self.algorithm],
                    options={"require": ["exp", "iat"]},
                )
            except jwt.InvalidSignatureError:
                continue
            except jwt.ExpiredSignatureError as exc:
                raise TokenExpiredError("Token has expired") from exc
            except jwt.PyJWTError as exc:
                raise InvalidTokenError(str(exc)) from exc
            return self._principal_from(claims)

        raise InvalidTokenError("Signature verification failed")

    @staticmethod
    def _principal_from(claims: dict) -> Principal:
        missing = [claim for claim in _REQUIRED_CLAIMS if not claims.get(claim)]
        if missing:
            raise InvalidTokenError(f"Token is missing claims: {', '.join(missing)}")

        return Principal(
            id=str(claims["principal_id"]),
            name=claims["principal_name"],
            kind=claims["principal_kind"],
        )
