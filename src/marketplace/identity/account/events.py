"""Domain events for the Account aggregate."""

from protean.fields import DateTime, Identifier, String

from marketplace.domain import marketplace


@marketplace.event(part_of="Account")
class AccountRegistered:
    """A new principal registered with a hashed password."""

    account_id: Identifier(required=True)
    kind: String(required=True)
    name: String(required=True)
    email: String(required=True)
    registered_at: DateTime(required=True)


@marketplace.event(part_of="Account")
class AccountLoggedIn:
    """A principal presented valid credentials and received a token."""

    account_id: Identifier(required=True)
    kind: String(required=True)
    logged_in_at: DateTime(required=True)
