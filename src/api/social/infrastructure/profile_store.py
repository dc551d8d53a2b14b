"""In-memory store for UserProfile aggregates.

Profiles are kept in a dict keyed by ProfileId. A single lock guards every
read and write, so allocating an ID, checking the user name and inserting
happen as one step, and a replace can never interleave with another write.
"""

from __future__ import annotations

import threading

from shared_kernel.identifiers import IdSequence
from social.domain.aggregates import UserProfile
from social.domain.value_objects import NewUserProfile, ProfileId
from social.infrastructure.observability import (
    DefaultProfileStoreProbe,
    ProfileStoreProbe,
)
from social.ports.exceptions import DuplicateUserNameError, ProfileNotFoundError


class InMemoryProfileStore:
    """Thread-safe keyed collection of user profiles."""

    def __init__(
        self,
        sequence: IdSequence | None = None,
        probe: ProfileStoreProbe | None = None,
    ) -> None:
        """Initialize an empty store.

        Args:
            sequence: ID sequence to allocate profile IDs from (starts at 1)
            probe: Optional domain probe for observability
        """
        self._profiles: dict[ProfileId, UserProfile] = {}
        self._sequence = sequence or IdSequence()
        self._probe = probe or DefaultProfileStoreProbe()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._profiles)

    def exists_by_name(self, user_name: str) -> bool:
        """Case-insensitive scan for a matching user name."""
        with self._lock:
            return self._find_by_name(user_name) is not None

    def exists_by_id(self, profile_id: ProfileId) -> bool:
        """Key lookup."""
        with self._lock:
            return profile_id in self._profiles

    def get_all(self) -> list[UserProfile]:
        """Snapshot of all profiles currently stored."""
        with self._lock:
            return list(self._profiles.values())

    def get_by_id(self, profile_id: ProfileId) -> UserProfile | None:
        with self._lock:
            return self._profiles.get(profile_id)

    def get_by_name(self, user_name: str) -> UserProfile | None:
        """First profile whose user name matches, ignoring case."""
        with self._lock:
            return self._find_by_name(user_name)

    def add(self, new_profile: NewUserProfile, created_at: str) -> UserProfile | None:
        """Insert a profile under the next ID.

        Args:
            new_profile: Registration fields (password already hashed)
            created_at: ISO-8601 creation timestamp

        Returns:
            The stored profile, or None if the allocated ID was already taken

        Raises:
            DuplicateUserNameError: If the user name is already held
        """
        with self._lock:
            if self._find_by_name(new_profile.user_name) is not None:
                self._probe.duplicate_user_name(new_profile.user_name)
                raise DuplicateUserNameError(
                    f"User name '{new_profile.user_name}' is already taken"
                )

            profile_id = ProfileId(value=self._sequence.next_value())
            if profile_id in self._profiles:
                self._probe.id_collision(profile_id.value)
                return None

            profile = UserProfile(
                id=profile_id,
                user_name=new_profile.user_name,
                password_hash=new_profile.password_hash,
                first_name=new_profile.first_name,
                last_name=new_profile.last_name,
                profile_image=new_profile.profile_image,
                date_created=created_at,
            )
            self._profiles[profile_id] = profile

        self._probe.profile_added(profile_id.value, profile.user_name)
        return profile

    def replace(self, profile: UserProfile) -> None:
        """Swap in a new version of an existing profile.

        Raises:
            ProfileNotFoundError: If no profile has this ID
            DuplicateUserNameError: If another profile holds the new user name
        """
        with self._lock:
            if profile.id not in self._profiles:
                self._probe.profile_not_found(profile.id.value)
                raise ProfileNotFoundError(f"User profile {profile.id} not found")

            holder = self._find_by_name(profile.user_name)
            if holder is not None and holder.id != profile.id:
                self._probe.duplicate_user_name(profile.user_name)
                raise DuplicateUserNameError(
                    f"User name '{profile.user_name}' is already taken"
                )

            self._profiles[profile.id] = profile

        self._probe.profile_replaced(profile.id.value)

    def _find_by_name(self, user_name: str) -> UserProfile | None:
        # Caller must hold the lock.
        for profile in self._profiles.values():
            if profile.has_user_name(user_name):
                return profile
        return None
