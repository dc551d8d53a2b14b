"""Unit tests for PasswordHasher."""

from shared_kernel.auth import PasswordHasher


class TestPasswordHasher:
    """Tests for bcrypt hashing and verification."""

    def test_hash_is_not_plaintext(self, password_hasher):
        hashed = password_hasher.hash("Password1")

        assert hashed != "Password1"
        assert hashed.startswith("$2")

    def test_hashes_are_salted(self, password_hasher):
        assert password_hasher.hash("Password1") != password_hasher.hash("Password1")

    def test_verify_accepts_correct_password(self, password_hasher):
        hashed = password_hasher.hash("Password1")

        assert password_hasher.verify("Password1", hashed)

    def test_verify_rejects_wrong_password(self, password_hasher):
        hashed = password_hasher.hash("Password1")

        assert not password_hasher.verify("password1", hashed)

    def test_verify_rejects_malformed_hash(self, password_hasher):
        assert not password_hasher.verify("Password1", "not-a-bcrypt-hash")

    def test_uses_configured_rounds(self):
        hashed = PasswordHasher(rounds=5).hash("x")

        assert hashed.split("$")[2] == "05"

    def test_long_passwords_are_accepted(self, password_hasher):
        long_password = "p" * 200
        hashed = password_hasher.hash(long_password)

        assert password_hasher.verify(long_password, hashed)
