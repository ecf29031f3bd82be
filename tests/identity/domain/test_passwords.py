import pytest
from marketplace.identity.auth.passwords import hash_password, verify_password
from protean.exceptions import ValidationError


class TestHashPassword:
    def test_hash_is_not_plaintext_and_verifies(self):
        hashed = hash_password("correct-horse")
        assert hashed != "correct-horse"
        assert verify_password("correct-horse", hashed) is True

    def test_wrong_password_does_not_verify(self):
        hashed = hash_password("correct-horse")
        assert verify_password("battery-staple", hashed) is False

    def test_short_password_rejected(self):
        with pytest.raises(ValidationError) as exc:
            hash_password("12345")
        assert "password" in exc.value.messages

    def test_password_over_72_bytes_rejected(self):
        with pytest.raises(ValidationError):
            hash_password("x" * 73)


class TestVerifyPassword:
    def test_empty_hash(self):
        assert verify_password("anything", "") is False

    def test_non_bcrypt_hash(self):
        assert verify_password("anything", "plaintext-stored-by-mistake") is False
