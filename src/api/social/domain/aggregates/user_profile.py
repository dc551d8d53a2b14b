"""UserProfile aggregate for the social context."""

from __future__ import annotations

from dataclasses import dataclass, replace

from social.domain.value_objects import ProfileId


@dataclass(frozen=True)
class UserProfile:
    """A registered user's identity record.

    Profiles are immutable snapshots. Updates produce a new instance via
    ``with_changes`` which the store then swaps in as a whole record, so a
    profile handed out by the repository never changes underneath its holder.

    Business rules:
    - ``id`` is assigned by the store and never changes
    - ``user_name`` is unique across profiles (case-insensitive)
    - ``date_modified`` is empty until the first update
    """

    id: ProfileId
    user_name: str
    password_hash: str
    first_name: str
    last_name: str
    profile_image: str | None
    date_created: str
    date_modified: str = ""

    def __str__(self) -> str:
        """Return string representation."""
        return f"UserProfile({self.user_name})"

    def has_user_name(self, user_name: str) -> bool:
        """Check whether this profile's user name matches, ignoring case."""
        return self.user_name.casefold() == user_name.casefold()

    def with_changes(
        self,
        *,
        user_name: str,
        password_hash: str,
        first_name: str,
        last_name: str,
        profile_image: str | None,
        modified_at: str,
    ) -> UserProfile:
        """Return a copy with all mutable fields replaced.

        ``id`` and ``date_created`` are carried over unchanged.
        """
        return replace(
            self,
            user_name=user_name,
            password_hash=password_hash,
            first_name=first_name,
            last_name=last_name,
            profile_image=profile_image,
            date_modified=modified_at,
        )
