"""Tests for the Account aggregate and PrincipalKind."""

import pytest
from marketplace.identity.account.account import Account, PrincipalKind
from marketplace.identity.account.events import AccountLoggedIn, AccountRegistered
from protean.exceptions import ValidationError


class TestPrincipalKind:
    def test_labels(self):
        assert PrincipalKind.USER.label == "User"
        assert PrincipalKind.CLIENT.label == "Client"
        assert PrincipalKind.DEVELOPER.label == "Developer"


class TestAccountRegistration:
    def test_register_normalizes_email(self):
        account = Account.register(kind="user", name="Jane", email="  Jane@Example.COM ", password_hash="hash")
        assert account.email == "jane@example.com"
        assert account.kind == "user"
        assert account.registered_at is not None

    def test_register_sets_principal_key(self):
        account = Account.register(kind="developer", name="Jane", email="Jane@Example.com", password_hash="hash")
        assert account.principal_key == "developer:jane@example.com"
        assert Account.key_for(PrincipalKind.DEVELOPER, " JANE@example.com") == account.principal_key

    def test_register_raises_event(self):
        account = Account.register(kind="client", name="Acme", email="hire@acme.io", password_hash="hash")
        assert len(account._events) == 1
        event = account._events[0]
        assert isinstance(event, AccountRegistered)
        assert event.kind == "client"
        assert event.email == "hire@acme.io"

    def test_register_rejects_invalid_email(self):
        with pytest.raises((ValueError, ValidationError)):
            Account.register(kind="user", name="Jane", email="not-an-email", password_hash="hash")

    def test_register_rejects_unknown_kind(self):
        with pytest.raises(ValueError):
            Account.register(kind="admin", name="Root", email="root@example.com", password_hash="hash")


class TestAccountLogin:
    def test_record_login_sets_timestamp_and_raises_event(self):
        account = Account.register(kind="developer", name="Dev", email="dev@example.com", password_hash="hash")
        account._events.clear()

        account.record_login()

        assert account.last_login_at is not None
        assert isinstance(account._events[-1], AccountLoggedIn)


class TestPublicView:
    def test_public_dict_excludes_password_hash(self):
        account = Account.register(kind="user", name="Jane", email="jane@example.com", password_hash="secret-hash")
        data = account.to_public_dict()
        assert "password_hash" not in data
        assert data["email"] == "jane@example.com"
        assert data["id"] == str(account.id)
