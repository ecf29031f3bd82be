"""Token service port (abstract interface).

Routes and the auth gate depend on this contract only, so the signing
primitive can change without touching them.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Principal:
    """The authenticated identity carried by a bearer token."""

    id: str
    name: str
    kind: str


class TokenService(ABC):
    """Issues and verifies signed, time-limited bearer tokens."""

    @abstractmethod
    def issue(self, principal: Principal, now: datetime | None = None) -> str:
        """Sign a token binding the principal to a fixed validity window."""
        ...

    @abstractmethod
    def verify(self, token: str | None) -> Principal:
        """Return the principal embedded in ``token``.

        Raises TokenExpiredError when the window has passed and
        InvalidTokenError for every other failure.
        """
        ...
