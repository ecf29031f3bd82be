"""Account registration: command and handler.

The command carries the bcrypt hash, never the plaintext password, because
processed commands are appended to the event store.
"""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.identity.account.account import Account, PrincipalKind
from marketplace.identity.auth.passwords import hash_password

logger = structlog.get_logger(__name__)


@marketplace.command(part_of="Account")
class RegisterAccount:
    """Create a new account of the given kind."""

    kind: String(required=True, choices=PrincipalKind)
    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254)
    password_hash: String(required=True, max_length=255)


@marketplace.command_handler(part_of=Account)
class RegisterAccountHandler:
    @handle(RegisterAccount)
    def register_account(self, command):
        kind = PrincipalKind(command.kind)
        repo = current_domain.repository_for(Account)

        if repo.find_by_email(kind.value, command.email) is not None:
            logger.info("Duplicate registration rejected", kind=kind.value)
            raise ValidationError({"email": [f"{kind.label} already exists, please login"]})

        account = Account.register(
            kind=kind.value,
            name=command.name,
            email=command.email,
            password_hash=command.password_hash,
        )
        repo.add(account)

        logger.info("Account registered", account_id=str(account.id), kind=kind.value)
        return str(account.id)


def register(kind, name, email, password):
    """Hash ``password`` and register the account. Returns the new account id."""
    command = RegisterAccount(
        kind=PrincipalKind(kind).value,
        name=name,
        email=email,
        password_hash=hash_password(password),
    )
    return current_domain.process(command, asynchronous=False)
