"""Repository protocols (ports) for the social bounded context.

The data repository is the only stateful component of the service. It is
asynchronous at the seam so routes and services can await it, even though
the in-memory implementation never suspends.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from social.domain.aggregates import Screech, UserProfile
from social.domain.value_objects import NewUserProfile, ProfileId, ScreechId


@runtime_checkable
class IUserDataRepository(Protocol):
    """Repository for profile and screech persistence.

    Records returned from this repository are immutable snapshots. Updates
    go through ``replace_profile`` / ``replace_screech`` as whole records.
    """

    async def profile_exists_by_name(self, user_name: str) -> bool:
        """Check whether a profile exists for the user name (case-insensitive)."""
        ...

    async def profile_exists_by_id(self, profile_id: ProfileId) -> bool:
        """Check whether a profile exists for the ID."""
        ...

    async def get_all_profiles(self) -> list[UserProfile]:
        """Retrieve all profiles. Order is not guaranteed."""
        ...

    async def get_profile_by_id(self, profile_id: ProfileId) -> UserProfile | None:
        """Retrieve a profile by ID.

        Returns:
            The UserProfile, or None if not found
        """
        ...

    async def get_profile_by_name(self, user_name: str) -> UserProfile | None:
        """Retrieve a profile by user name (case-insensitive, first match).

        Returns:
            The UserProfile, or None if not found
        """
        ...

    async def add_profile(self, new_profile: NewUserProfile) -> UserProfile | None:
        """Add a new profile with the next ID and current creation time.

        Returns:
            The stored UserProfile, or None on an ID collision

        Raises:
            DuplicateUserNameError: If the user name is already taken
        """
        ...

    async def replace_profile(self, profile: UserProfile) -> None:
        """Replace a stored profile with a new version of the same ID.

        Raises:
            ProfileNotFoundError: If no profile has this ID
            DuplicateUserNameError: If the new user name belongs to another profile
        """
        ...

    async def get_all_screeches(self) -> list[Screech]:
        """Retrieve all screeches. Order is not guaranteed."""
        ...

    async def get_screech_by_id(self, screech_id: ScreechId) -> Screech | None:
        """Retrieve a screech by ID.

        Returns:
            The Screech, or None if not found
        """
        ...

    async def get_screech_by_creator_and_id(
        self, creator_id: ProfileId, screech_id: ScreechId
    ) -> Screech | None:
        """Retrieve a screech matching both the ID and the creator.

        Returns:
            The Screech, or None if no screech matches both
        """
        ...

    async def add_screech(self, creator_id: ProfileId, content: str) -> Screech | None:
        """Add a new screech with the next ID and current creation time.

        Returns:
            The stored Screech, or None on an ID collision
        """
        ...

    async def replace_screech(self, screech: Screech) -> None:
        """Replace a stored screech with a new version of the same ID.

        Raises:
            ScreechNotFoundError: If no screech has this ID
        """
        ...
