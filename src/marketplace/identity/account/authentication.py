"""Login: verify credentials, record the login and issue a bearer token."""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.identity.account.account import Account, PrincipalKind
from marketplace.identity.auth import Principal, get_token_service
from marketplace.identity.auth.errors import Unauthenticated
from marketplace.identity.auth.passwords import verify_password

logger = structlog.get_logger(__name__)


@marketplace.command(part_of="Account")
class RecordLogin:
    account_id: Identifier(required=True)


@marketplace.command_handler(part_of=Account)
class RecordLoginHandler:
    @handle(RecordLogin)
    def record_login(self, command):
        repo = current_domain.repository_for(Account)
        account = repo.get(command.account_id)
        account.record_login()
        repo.add(account)


def authenticate(kind, email, password):
    """Check credentials for an account of ``kind`` and return a signed token.

    Raises ObjectNotFoundError for an unknown email and Unauthenticated for a
    wrong password.
    """
    kind = PrincipalKind(kind)
    account = current_domain.repository_for(Account).find_by_email(kind.value, email)
    if account is None:
        raise ObjectNotFoundError(f"{kind.label} not found")

    if not verify_password(password, account.password_hash):
        logger.info("Login rejected", account_id=str(account.id), kind=kind.value)
        raise Unauthenticated("Wrong credentials")

    current_domain.process(RecordLogin(account_id=str(account.id)), asynchronous=False)

    principal = Principal(id=str(account.id), name=account.name, kind=account.kind)
    return get_token_service().issue(principal), principal
