"""Authentication and authorization failures.

``InvalidTokenError`` and ``TokenExpiredError`` come out of the token service.
``Unauthenticated`` and ``Forbidden`` are what the HTTP layer raises; the
application maps them to 401 and 403.
"""


class InvalidTokenError(Exception):
    """The token is malformed, tampered with or signed with an unknown key."""


class TokenExpiredError(InvalidTokenError):
    """The token was valid but its validity window has passed."""


class AuthError(Exception):
    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class Unauthenticated(AuthError):
    """No usable credentials were presented."""

    status_code = 401


class Forbidden(AuthError):
    """The principal is known but may not perform this action."""

    status_code = 403
