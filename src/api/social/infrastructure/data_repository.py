"""In-memory implementation of IUserDataRepository.

Composes the profile and screech stores behind the asynchronous repository
contract. The stores do synchronous, non-blocking work under their own
locks; nothing here ever awaits I/O.
"""

from __future__ import annotations

from shared_kernel.clock import Clock, iso_timestamp, utc_now
from social.domain.aggregates import Screech, UserProfile
from social.domain.value_objects import NewUserProfile, ProfileId, ScreechId
from social.infrastructure.profile_store import InMemoryProfileStore
from social.infrastructure.screech_store import InMemoryScreechStore
from social.ports.repositories import IUserDataRepository


class UserDataRepository(IUserDataRepository):
    """Repository holding every profile and screech of the running service.

    One instance is created per application and handed to request handlers
    through dependency injection. It exclusively owns both stores.
    """

    def __init__(
        self,
        profile_store: InMemoryProfileStore | None = None,
        screech_store: InMemoryScreechStore | None = None,
        clock: Clock = utc_now,
    ) -> None:
        """Initialize repository with its stores.

        Args:
            profile_store: Store for user profiles (new empty store if omitted)
            screech_store: Store for screeches (new empty store if omitted)
            clock: Source of creation timestamps
        """
        self._profiles = profile_store or InMemoryProfileStore()
        self._screeches = screech_store or InMemoryScreechStore()
        self._clock = clock

    # Profiles

    async def profile_exists_by_name(self, user_name: str) -> bool:
        return self._profiles.exists_by_name(user_name)

    async def profile_exists_by_id(self, profile_id: ProfileId) -> bool:
        return self._profiles.exists_by_id(profile_id)

    async def get_all_profiles(self) -> list[UserProfile]:
        return self._profiles.get_all()

    async def get_profile_by_id(self, profile_id: ProfileId) -> UserProfile | None:
        return self._profiles.get_by_id(profile_id)

    async def get_profile_by_name(self, user_name: str) -> UserProfile | None:
        return self._profiles.get_by_name(user_name)

    async def add_profile(self, new_profile: NewUserProfile) -> UserProfile | None:
        return self._profiles.add(new_profile, created_at=iso_timestamp(self._clock))

    async def replace_profile(self, profile: UserProfile) -> None:
        self._profiles.replace(profile)

    # Screeches

    async def get_all_screeches(self) -> list[Screech]:
        return self._screeches.get_all()

    async def get_screech_by_id(self, screech_id: ScreechId) -> Screech | None:
        return self._screeches.get_by_id(screech_id)

    async def get_screech_by_creator_and_id(
        self, creator_id: ProfileId, screech_id: ScreechId
    ) -> Screech | None:
        return self._screeches.get_by_creator_and_id(creator_id, screech_id)

    async def add_screech(self, creator_id: ProfileId, content: str) -> Screech | None:
        return self._screeches.add(
            creator_id, content, created_at=iso_timestamp(self._clock)
        )

    async def replace_screech(self, screech: Screech) -> None:
        self._screeches.replace(screech)
