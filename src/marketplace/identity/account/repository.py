"""Repository for the Account aggregate."""

from marketplace.domain import marketplace
from marketplace.identity.account.account import Account


@marketplace.repository(part_of=Account)
class AccountRepository:
    def find_by_email(self, kind: str, email: str) -> Account | None:
        """Account of the given kind registered under ``email``, if any."""
        accounts = self._dao.query.filter(principal_key=Account.key_for(kind, email)).all().items
        return accounts[0] if accounts else None
