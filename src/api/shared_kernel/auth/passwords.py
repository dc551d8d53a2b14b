"""Password hashing for user profiles.

Passwords are never stored or compared in plaintext. Uses bcrypt with a
per-hash random salt and a configurable work factor.
"""

import bcrypt

# bcrypt only looks at the first 72 bytes of the input; longer inputs are
# rejected by recent bcrypt releases, so truncate explicitly.
_BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


class PasswordHasher:
    """Hashes and verifies passwords with bcrypt."""

    def __init__(self, rounds: int = 12) -> None:
        """Initialize the hasher.

        Args:
            rounds: bcrypt work factor (log2 of the iteration count)
        """
        self._rounds = rounds

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Args:
            password: The plaintext password to hash

        Returns:
            The bcrypt hash as a string
        """
        return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=self._rounds)).decode()

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against its hash using constant-time comparison.

        Args:
            password: The plaintext password to verify
            password_hash: The bcrypt hash to verify against

        Returns:
            True if the password matches the hash, False otherwise
        """
        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode())
        except ValueError:
            # Malformed hash
            return False
