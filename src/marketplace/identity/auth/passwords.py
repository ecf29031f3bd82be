"""Password hashing with bcrypt."""

import bcrypt
from protean.exceptions import ValidationError

from marketplace.identity.auth.settings import bcrypt_rounds

MIN_PASSWORD_LENGTH = 6
# bcrypt only looks at the first 72 bytes; longer inputs are rejected.
MAX_PASSWORD_BYTES = 72


def hash_password(password: str) -> str:
    encoded = password.encode("utf-8")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError({"password": [f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"]})
    if len(encoded) > MAX_PASSWORD_BYTES:
        raise ValidationError({"password": [f"Password must be at most {MAX_PASSWORD_BYTES} bytes long"]})

    return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=bcrypt_rounds())).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    encoded = password.encode("utf-8")
    if not password_hash or len(encoded) > MAX_PASSWORD_BYTES:
        return False
    try:
        return bcrypt.checkpw(encoded, password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False
