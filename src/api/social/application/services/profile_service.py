"""Profile application service for the social bounded context.

Orchestrates registration, lookup, full replacement and JSON Patch updates
of user profiles.
"""

from __future__ import annotations

from typing import Any

import jsonpatch
import jsonpointer
from pydantic import ValidationError

from shared_kernel.auth import PasswordHasher
from shared_kernel.clock import Clock, iso_timestamp, utc_now
from social.application.authorization import authorize_owner
from social.application.observability import (
    DefaultProfileServiceProbe,
    ProfileServiceProbe,
)
from social.application.value_objects import (
    CallerIdentity,
    ProfileDetails,
    ProfileFields,
)
from social.domain.aggregates import UserProfile
from social.domain.value_objects import NewUserProfile, ProfileId
from social.ports.exceptions import (
    DuplicateUserNameError,
    ProfileCreationError,
    ProfileNotFoundError,
    ProfilePatchError,
)
from social.ports.repositories import IUserDataRepository

PASSWORD_PATH = "/password"
_PASSWORD_WRITE_OPS = frozenset({"add", "replace"})


class ProfileService:
    """Application service for user profile management."""

    def __init__(
        self,
        repository: IUserDataRepository,
        password_hasher: PasswordHasher,
        clock: Clock = utc_now,
        probe: ProfileServiceProbe | None = None,
    ):
        """Initialize ProfileService with dependencies.

        Args:
            repository: Repository holding profiles and screeches
            password_hasher: Hasher for incoming plaintext passwords
            clock: Source of modification timestamps
            probe: Optional domain probe for observability
        """
        self._repository = repository
        self._password_hasher = password_hasher
        self._clock = clock
        self._probe = probe or DefaultProfileServiceProbe()

    async def create_profile(self, details: ProfileDetails) -> UserProfile:
        """Register a new profile.

        Args:
            details: Validated profile fields including the plaintext password

        Returns:
            The stored UserProfile

        Raises:
            DuplicateUserNameError: If the user name is already taken
            ProfileCreationError: If the store refused the insert
        """
        try:
            if await self._repository.profile_exists_by_name(details.user_name):
                raise DuplicateUserNameError(
                    f"User name '{details.user_name}' is already taken"
                )

            profile = await self._repository.add_profile(
                NewUserProfile(
                    user_name=details.user_name,
                    password_hash=self._password_hasher.hash(details.password),
                    first_name=details.first_name,
                    last_name=details.last_name,
                    profile_image=details.profile_image_url,
                )
            )
            if profile is None:
                raise ProfileCreationError(
                    f"Could not store profile '{details.user_name}'"
                )

        except Exception as e:
            self._probe.profile_creation_failed(
                user_name=details.user_name, error=str(e)
            )
            raise

        self._probe.profile_created(
            profile_id=profile.id.value, user_name=profile.user_name
        )
        return profile

    async def list_profiles(self) -> list[UserProfile]:
        return await self._repository.get_all_profiles()

    async def get_profile(self, profile_id: ProfileId) -> UserProfile | None:
        return await self._repository.get_profile_by_id(profile_id)

    async def update_profile(
        self,
        caller: CallerIdentity,
        profile_id: ProfileId,
        details: ProfileDetails,
    ) -> UserProfile:
        """Replace every writable field of the caller's own profile.

        The password is re-hashed.

        Raises:
            MalformedIdentityClaimError: If the caller's claim is unusable
            UnauthorizedError: If the caller is not the profile's owner
            ProfileNotFoundError: If the profile does not exist
            DuplicateUserNameError: If the new user name belongs to someone else
        """
        authorize_owner(caller, profile_id, self._probe)

        try:
            existing = await self._get_existing(profile_id)
            updated = existing.with_changes(
                user_name=details.user_name,
                password_hash=self._password_hasher.hash(details.password),
                first_name=details.first_name,
                last_name=details.last_name,
                profile_image=details.profile_image_url,
                modified_at=iso_timestamp(self._clock),
            )
            await self._repository.replace_profile(updated)

        except Exception as e:
            self._probe.profile_update_failed(profile_id=profile_id.value, error=str(e))
            raise

        self._probe.profile_updated(profile_id=profile_id.value)
        return updated

    async def patch_profile(
        self,
        caller: CallerIdentity,
        profile_id: ProfileId,
        operations: list[dict[str, Any]],
    ) -> UserProfile:
        """Apply an RFC 6902 JSON Patch to the caller's own profile.

        The patch runs against a camelCase working copy of the readable
        fields. ``/password`` is write-only: it may only be the target of
        ``add`` or ``replace``, and the new value is hashed. The result is
        validated like a full update and written back as one replacement.

        Raises:
            MalformedIdentityClaimError: If the caller's claim is unusable
            UnauthorizedError: If the caller is not the profile's owner
            ProfileNotFoundError: If the profile does not exist
            ProfilePatchError: If the patch cannot be applied or the result
                is not a valid profile
            DuplicateUserNameError: If the new user name belongs to someone else
        """
        authorize_owner(caller, profile_id, self._probe)

        try:
            existing = await self._get_existing(profile_id)
            field_operations, new_password = _split_password_operations(operations)
            fields = _apply_patch(existing, field_operations)

            if new_password is None:
                password_hash = existing.password_hash
            else:
                password_hash = self._password_hasher.hash(new_password)

            updated = existing.with_changes(
                user_name=fields.user_name,
                password_hash=password_hash,
                first_name=fields.first_name,
                last_name=fields.last_name,
                profile_image=fields.profile_image_url,
                modified_at=iso_timestamp(self._clock),
            )
            await self._repository.replace_profile(updated)

        except Exception as e:
            self._probe.profile_update_failed(profile_id=profile_id.value, error=str(e))
            raise

        self._probe.profile_patched(
            profile_id=profile_id.value, operation_count=len(operations)
        )
        return updated

    async def _get_existing(self, profile_id: ProfileId) -> UserProfile:
        profile = await self._repository.get_profile_by_id(profile_id)
        if profile is None:
            raise ProfileNotFoundError(f"Profile {profile_id} not found")
        return profile


def _touches_password(pointer: Any) -> bool:
    return isinstance(pointer, str) and (
        pointer == PASSWORD_PATH or pointer.startswith(PASSWORD_PATH + "/")
    )


def _split_password_operations(
    operations: list[dict[str, Any]],
) -> tuple[list[dict[str, Any]], str | None]:
    """Separate password writes from operations on the readable fields.

    Returns:
        The remaining operations and the last password written, if any

    Raises:
        ProfilePatchError: If an operation reads, tests, moves or removes
            the password, or writes something other than a non-empty string
    """
    field_operations: list[dict[str, Any]] = []
    new_password: str | None = None

    for operation in operations:
        if not isinstance(operation, dict):
            raise ProfilePatchError("Patch operations must be objects")

        path = operation.get("path")
        if _touches_password(operation.get("from")) or (
            _touches_password(path)
            and (
                path != PASSWORD_PATH
                or operation.get("op") not in _PASSWORD_WRITE_OPS
            )
        ):
            raise ProfilePatchError(
                "/password only supports 'add' and 'replace' operations"
            )

        if path == PASSWORD_PATH:
            value = operation.get("value")
            if not isinstance(value, str) or not value:
                raise ProfilePatchError("/password must be a non-empty string")
            new_password = value
        else:
            field_operations.append(operation)

    return field_operations, new_password


def _apply_patch(
    profile: UserProfile, operations: list[dict[str, Any]]
) -> ProfileFields:
    document: dict[str, Any] = {
        "userName": profile.user_name,
        "firstName": profile.first_name,
        "lastName": profile.last_name,
        "profileImage": profile.profile_image,
    }

    # Library messages can quote document values; keep them out of errors.
    try:
        patched = jsonpatch.JsonPatch(operations).apply(document)
    except jsonpatch.JsonPatchTestFailed as e:
        raise ProfilePatchError("A 'test' operation did not match") from e
    except (jsonpatch.JsonPatchException, jsonpointer.JsonPointerException) as e:
        raise ProfilePatchError("Patch could not be applied") from e

    if not isinstance(patched, dict):
        raise ProfilePatchError("Patch must leave a profile object")

    try:
        return ProfileFields.model_validate(patched)
    except ValidationError as e:
        fields = sorted(
            {".".join(str(part) for part in error["loc"]) for error in e.errors()}
        )
        raise ProfilePatchError(
            f"Patched profile is invalid: {', '.join(fields)}"
        ) from e
