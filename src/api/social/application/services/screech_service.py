"""Screech application service for the social bounded context.

Orchestrates posting, lookup and editing of screeches.
"""

from __future__ import annotations

from shared_kernel.clock import Clock, iso_timestamp, utc_now
from social.application.authorization import authorize_owner
from social.application.observability import (
    DefaultScreechServiceProbe,
    ScreechServiceProbe,
)
from social.application.value_objects import CallerIdentity
from social.domain.aggregates import Screech
from social.domain.value_objects import ProfileId, ScreechId
from social.ports.exceptions import (
    ProfileNotFoundError,
    ScreechCreationError,
    ScreechNotFoundError,
)
from social.ports.repositories import IUserDataRepository


class ScreechService:
    """Application service for screech management."""

    def __init__(
        self,
        repository: IUserDataRepository,
        clock: Clock = utc_now,
        probe: ScreechServiceProbe | None = None,
    ):
        """Initialize ScreechService with dependencies.

        Args:
            repository: Repository holding profiles and screeches
            clock: Source of modification timestamps
            probe: Optional domain probe for observability
        """
        self._repository = repository
        self._clock = clock
        self._probe = probe or DefaultScreechServiceProbe()

    async def list_screeches(self) -> list[Screech]:
        return await self._repository.get_all_screeches()

    async def get_screech(self, screech_id: ScreechId) -> Screech | None:
        return await self._repository.get_screech_by_id(screech_id)

    async def create_screech(
        self,
        caller: CallerIdentity,
        creator_id: ProfileId,
        content: str,
    ) -> Screech:
        """Post a screech as the caller.

        Args:
            caller: The authenticated caller
            creator_id: Profile the screech is posted under (must be the caller)
            content: Screech text, already length-validated

        Returns:
            The stored Screech

        Raises:
            MalformedIdentityClaimError: If the caller's claim is unusable
            UnauthorizedError: If the caller is not the creator
            ProfileNotFoundError: If the creator profile does not exist
            ScreechCreationError: If the store refused the insert
        """
        authorize_owner(caller, creator_id, self._probe)

        try:
            if not await self._repository.profile_exists_by_id(creator_id):
                raise ProfileNotFoundError(f"Profile {creator_id} not found")

            screech = await self._repository.add_screech(creator_id, content)
            if screech is None:
                raise ScreechCreationError(
                    f"Could not store screech for profile {creator_id}"
                )

        except Exception as e:
            self._probe.screech_creation_failed(
                creator_id=creator_id.value, error=str(e)
            )
            raise

        self._probe.screech_created(
            screech_id=screech.id.value, creator_id=creator_id.value
        )
        return screech

    async def update_screech(
        self,
        caller: CallerIdentity,
        creator_id: ProfileId,
        screech_id: ScreechId,
        content: str,
    ) -> Screech:
        """Replace the content of one of the caller's screeches.

        Raises:
            MalformedIdentityClaimError: If the caller's claim is unusable
            UnauthorizedError: If the caller is not the creator
            ScreechNotFoundError: If the creator has no screech with this ID
        """
        authorize_owner(caller, creator_id, self._probe)

        try:
            existing = await self._repository.get_screech_by_creator_and_id(
                creator_id, screech_id
            )
            if existing is None:
                raise ScreechNotFoundError(
                    f"Screech {screech_id} by profile {creator_id} not found"
                )

            updated = existing.with_content(
                content, modified_at=iso_timestamp(self._clock)
            )
            await self._repository.replace_screech(updated)

        except Exception as e:
            self._probe.screech_update_failed(
                screech_id=screech_id.value, error=str(e)
            )
            raise

        self._probe.screech_updated(
            screech_id=screech_id.value, creator_id=creator_id.value
        )
        return updated
