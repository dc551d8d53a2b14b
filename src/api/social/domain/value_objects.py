"""Value objects for the social domain.

Value objects are immutable descriptors that provide type safety and
domain semantics for identifiers. Profiles and screeches are keyed by
positive integers handed out by their store's sequence.
"""

from __future__ import annotations

from dataclasses import dataclass


def _parse_positive_int(value: str, kind: str) -> int:
    """Parse a decimal string into a positive integer.

    Raises:
        ValueError: If the value is not a plain positive integer
    """
    text = value.strip() if isinstance(value, str) else value
    if not isinstance(text, str) or not text.isascii() or not text.isdigit():
        raise ValueError(f"Invalid {kind}: {value!r}")
    number = int(text)
    if number < 1:
        raise ValueError(f"Invalid {kind}: {value!r}")
    return number


@dataclass(frozen=True, order=True)
class ProfileId:
    """Identifier for a UserProfile aggregate."""

    value: int

    def __post_init__(self) -> None:
        """Reject non-positive identifiers."""
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"ProfileId value must be int, got {type(self.value)}")
        if self.value < 1:
            raise ValueError(f"ProfileId must be positive, got {self.value}")

    def __str__(self) -> str:
        """Return string representation."""
        return str(self.value)

    @classmethod
    def from_string(cls, value: str) -> ProfileId:
        """Create ProfileId from string value.

        Args:
            value: Decimal string (e.g. the ``sub`` claim of a token)

        Returns:
            ProfileId instance

        Raises:
            ValueError: If value is not a positive integer
        """
        return cls(value=_parse_positive_int(value, "ProfileId"))


@dataclass(frozen=True, order=True)
class ScreechId:
    """Identifier for a Screech aggregate."""

    value: int

    def __post_init__(self) -> None:
        """Reject non-positive identifiers."""
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"ScreechId value must be int, got {type(self.value)}")
        if self.value < 1:
            raise ValueError(f"ScreechId must be positive, got {self.value}")

    def __str__(self) -> str:
        """Return string representation."""
        return str(self.value)

    @classmethod
    def from_string(cls, value: str) -> ScreechId:
        """Create ScreechId from string value.

        Raises:
            ValueError: If value is not a positive integer
        """
        return cls(value=_parse_positive_int(value, "ScreechId"))


@dataclass(frozen=True)
class NewUserProfile:
    """Fields supplied when registering a profile.

    The password is already hashed; the store never sees plaintext.
    """

    user_name: str
    password_hash: str
    first_name: str
    last_name: str
    profile_image: str | None = None
