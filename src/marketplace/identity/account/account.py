"""Account aggregate: one credential record per principal.

Shoppers (users), hiring clients and developers share the same record shape and
the same authentication mechanics; the ``kind`` tag keeps their namespaces
apart, so the same email may register once per kind.
"""

from datetime import datetime
from enum import Enum

from protean.fields import DateTime, String

from marketplace.domain import marketplace
from marketplace.identity.shared.email import EmailAddress


class PrincipalKind(Enum):
    USER = "user"
    CLIENT = "client"
    DEVELOPER = "developer"

    @property
    def label(self):
        return self.value.capitalize()


@marketplace.aggregate
class Account:
    """A registered principal able to log in and hold a bearer token.

    Only the bcrypt hash of the password is kept; it never leaves the
    aggregate through ``to_public_dict``.
    """

    kind: String(required=True, choices=PrincipalKind)
    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254)
    principal_key: String(required=True, unique=True, max_length=265)
    password_hash: String(required=True, max_length=255)
    registered_at: DateTime(default=datetime.now)
    last_login_at: DateTime()

    @staticmethod
    def key_for(kind, email):
        """The (kind, email) pair as one unique column value."""
        return f"{PrincipalKind(kind).value}:{email.strip().lower()}"

    @classmethod
    def register(cls, kind, name, email, password_hash):
        from marketplace.identity.account.events import AccountRegistered

        kind = PrincipalKind(kind)
        address = EmailAddress.normalized(email)
        now = datetime.now()

        account = cls(
            kind=kind.value,
            name=name,
            email=address,
            principal_key=cls.key_for(kind, address),
            password_hash=password_hash,
            registered_at=now,
        )
        account.raise_(
            AccountRegistered(
                account_id=account.id,
                kind=kind.value,
                name=name,
                email=address,
                registered_at=now,
            )
        )
        return account

    def record_login(self):
        from marketplace.identity.account.events import AccountLoggedIn

        now = datetime.now()
        self.last_login_at = now
        self.raise_(AccountLoggedIn(account_id=self.id, kind=self.kind, logged_in_at=now))

    def to_public_dict(self):
        return {
            "id": str(self.id),
            "kind": self.kind,
            "name": self.name,
            "email": self.email,
            "registered_at": self.registered_at.isoformat() if self.registered_at else None,
        }
