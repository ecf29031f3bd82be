"""Tests for the JWT token service."""

from datetime import UTC, datetime, timedelta

import jwt
import pytest
from marketplace.identity.auth.errors import InvalidTokenError, TokenExpiredError
from marketplace.identity.auth.jwt_adapter import JWTTokenService
from marketplace.identity.auth.port import Principal

SECRET = "unit-test-secret-with-enough-length-for-hs256"


@pytest.fixture()
def service():
    return JWTTokenService(secret=SECRET)


@pytest.fixture()
def principal():
    return Principal(id="acc-001", name="Jane", kind="user")


class TestIssueAndVerify:
    def test_fresh_token_decodes_to_principal(self, service, principal):
        token = service.issue(principal)
        assert service.verify(token) == principal

    def test_token_carries_seven_day_expiry(self, service, principal):
        issued_at = datetime.now(UTC).replace(microsecond=0)
        token = service.issue(principal, now=issued_at)
        claims = jwt.decode(token, SECRET, algorithms=["HS256"])
        assert claims["exp"] - claims["iat"] == int(timedelta(days=7).total_seconds())

    def test_expired_token_raises_token_expired(self, service, principal):
        token = service.issue(principal, now=datetime.now(UTC) - timedelta(days=8))
        with pytest.raises(TokenExpiredError):
            service.verify(token)

    def test_expired_is_an_invalid_token(self):
        assert issubclass(TokenExpiredError, InvalidTokenError)


class TestRejection:
    def test_garbage_token(self, service):
        with pytest.raises(InvalidTokenError):
            service.verify("not.a.token")

    def test_missing_token(self, service):
        with pytest.raises(InvalidTokenError):
            service.verify("")

    def test_token_signed_with_other_key(self, principal):
        foreign = JWTTokenService(secret="some-other-secret-that-is-long-enough-too").issue(principal)
        with pytest.raises(InvalidTokenError):
            JWTTokenService(secret=SECRET).verify(foreign)

    def test_token_missing_principal_claims(self, service):
        now = datetime.now(UTC)
        token = jwt.encode({"iat": now, "exp": now + timedelta(days=1)}, SECRET, algorithm="HS256")
        with pytest.raises(InvalidTokenError):
            service.verify(token)

    def test_empty_secret_is_refused(self):
        with pytest.raises(ValueError):
            JWTTokenService(secret="")


class TestKeyRotation:
    def test_previous_secret_still_verifies(self, principal):
        old_key = "previous-secret-kept-for-verification-only"
        token = JWTTokenService(secret=old_key).issue(principal)

        rotated = JWTTokenService(secret=SECRET, previous_secrets=(old_key,))
        assert rotated.verify(token) == principal

    def test_new_tokens_use_current_secret(self, principal):
        rotated = JWTTokenService(secret=SECRET, previous_secrets=("previous-secret-kept-for-verification-only",))
        token = rotated.issue(principal)
        assert JWTTokenService(secret=SECRET).verify(token) == principal
