"""Unit tests for ProfileService."""

from unittest.mock import create_autospec

import pytest

from shared_kernel.auth import PasswordHasher
from social.application.observability import ProfileServiceProbe
from social.application.services.profile_service import ProfileService
from social.application.value_objects import CallerIdentity, ProfileDetails
from social.domain.aggregates import UserProfile
from social.domain.value_objects import NewUserProfile, ProfileId
from social.ports.exceptions import (
    DuplicateUserNameError,
    MalformedIdentityClaimError,
    ProfileCreationError,
    ProfileNotFoundError,
    ProfilePatchError,
    UnauthorizedError,
)
from social.ports.repositories import IUserDataRepository

OWNER = CallerIdentity(subject="1")
STRANGER = CallerIdentity(subject="2")


@pytest.fixture
def mock_repository():
    """Create mock data repository."""
    return create_autospec(IUserDataRepository, instance=True)


@pytest.fixture
def mock_hasher():
    """Create mock password hasher that prefixes its input."""
    hasher = create_autospec(PasswordHasher, instance=True)
    hasher.hash.side_effect = lambda password: f"hashed:{password}"
    return hasher


@pytest.fixture
def mock_probe():
    """Create mock profile service probe."""
    return create_autospec(ProfileServiceProbe, instance=True)


@pytest.fixture
def profile_service(mock_repository, mock_hasher, mock_probe, stepping_clock):
    """Create ProfileService with mock dependencies."""
    return ProfileService(
        repository=mock_repository,
        password_hasher=mock_hasher,
        clock=stepping_clock,
        probe=mock_probe,
    )


@pytest.fixture
def existing_profile() -> UserProfile:
    return UserProfile(
        id=ProfileId(value=1),
        user_name="iamyourfather",
        password_hash="hashed:Password1",
        first_name="Anakin",
        last_name="Skywalker",
        profile_image="https://example.com/vader.jpg",
        date_created="2023-12-31T00:00:00+00:00",
    )


def _details(**overrides) -> ProfileDetails:
    values = {
        "userName": "iamyourfather",
        "password": "Password1",
        "firstName": "Anakin",
        "lastName": "Skywalker",
    }
    values.update(overrides)
    return ProfileDetails.model_validate(values)


class TestCreateProfile:
    """Tests for ProfileService.create_profile."""

    @pytest.mark.asyncio
    async def test_hashes_password_before_storing(
        self, profile_service, mock_repository, existing_profile
    ):
        mock_repository.profile_exists_by_name.return_value = False
        mock_repository.add_profile.return_value = existing_profile

        await profile_service.create_profile(_details())

        stored: NewUserProfile = mock_repository.add_profile.call_args.args[0]
        assert stored.password_hash == "hashed:Password1"
        assert stored.user_name == "iamyourfather"

    @pytest.mark.asyncio
    async def test_returns_stored_profile_and_records_event(
        self, profile_service, mock_repository, mock_probe, existing_profile
    ):
        mock_repository.profile_exists_by_name.return_value = False
        mock_repository.add_profile.return_value = existing_profile

        result = await profile_service.create_profile(_details())

        assert result is existing_profile
        mock_probe.profile_created.assert_called_once_with(
            profile_id=1, user_name="iamyourfather"
        )

    @pytest.mark.asyncio
    async def test_passes_profile_image_as_string(
        self, profile_service, mock_repository, existing_profile
    ):
        mock_repository.profile_exists_by_name.return_value = False
        mock_repository.add_profile.return_value = existing_profile

        await profile_service.create_profile(
            _details(profileImage="https://example.com/a.png")
        )

        stored: NewUserProfile = mock_repository.add_profile.call_args.args[0]
        assert stored.profile_image == "https://example.com/a.png"

    @pytest.mark.asyncio
    async def test_duplicate_name_raises_without_insert(
        self, profile_service, mock_repository, mock_probe
    ):
        mock_repository.profile_exists_by_name.return_value = True

        with pytest.raises(DuplicateUserNameError):
            await profile_service.create_profile(_details())

        mock_repository.add_profile.assert_not_called()
        mock_probe.profile_creation_failed.assert_called_once()

    @pytest.mark.asyncio
    async def test_store_refusal_raises_creation_error(
        self, profile_service, mock_repository
    ):
        mock_repository.profile_exists_by_name.return_value = False
        mock_repository.add_profile.return_value = None

        with pytest.raises(ProfileCreationError):
            await profile_service.create_profile(_details())


class TestReadProfiles:
    """Tests for list and get."""

    @pytest.mark.asyncio
    async def test_list_profiles(self, profile_service, mock_repository, existing_profile):
        mock_repository.get_all_profiles.return_value = [existing_profile]

        assert await profile_service.list_profiles() == [existing_profile]

    @pytest.mark.asyncio
    async def test_get_profile_returns_none_when_missing(
        self, profile_service, mock_repository
    ):
        mock_repository.get_profile_by_id.return_value = None

        assert await profile_service.get_profile(ProfileId(value=9)) is None


class TestUpdateProfile:
    """Tests for ProfileService.update_profile (full replacement)."""

    @pytest.mark.asyncio
    async def test_replaces_all_fields_and_rehashes_password(
        self, profile_service, mock_repository, existing_profile
    ):
        mock_repository.get_profile_by_id.return_value = existing_profile

        await profile_service.update_profile(
            OWNER,
            ProfileId(value=1),
            _details(userName="vader", password="DarkSide", firstName="Darth"),
        )

        replaced: UserProfile = mock_repository.replace_profile.call_args.args[0]
        assert replaced.user_name == "vader"
        assert replaced.first_name == "Darth"
        assert replaced.password_hash == "hashed:DarkSide"
        assert replaced.profile_image is None
        assert replaced.date_created == existing_profile.date_created
        assert replaced.date_modified == "2024-01-01T00:00:00+00:00"

    @pytest.mark.asyncio
    async def test_non_owner_is_rejected_before_lookup(
        self, profile_service, mock_repository, mock_probe
    ):
        with pytest.raises(UnauthorizedError):
            await profile_service.update_profile(
                STRANGER, ProfileId(value=1), _details()
            )

        mock_repository.get_profile_by_id.assert_not_called()
        mock_probe.ownership_denied.assert_called_once_with(caller_id=2, owner_id=1)

    @pytest.mark.asyncio
    async def test_malformed_claim_is_rejected(self, profile_service, mock_repository):
        with pytest.raises(MalformedIdentityClaimError):
            await profile_service.update_profile(
                CallerIdentity(subject=None), ProfileId(value=1), _details()
            )

        mock_repository.get_profile_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_profile_raises_not_found(
        self, profile_service, mock_repository, mock_probe
    ):
        mock_repository.get_profile_by_id.return_value = None

        with pytest.raises(ProfileNotFoundError):
            await profile_service.update_profile(OWNER, ProfileId(value=1), _details())

        mock_probe.profile_update_failed.assert_called_once()

    @pytest.mark.asyncio
    async def test_duplicate_name_from_store_propagates(
        self, profile_service, mock_repository, existing_profile
    ):
        mock_repository.get_profile_by_id.return_value = existing_profile
        mock_repository.replace_profile.side_effect = DuplicateUserNameError("taken")

        with pytest.raises(DuplicateUserNameError):
            await profile_service.update_profile(
                OWNER, ProfileId(value=1), _details(userName="chewy")
            )


class TestPatchProfile:
    """Tests for ProfileService.patch_profile (JSON Patch)."""

    @pytest.mark.asyncio
    async def test_patching_first_name_leaves_other_fields(
        self, profile_service, mock_repository, mock_hasher, existing_profile
    ):
        mock_repository.get_profile_by_id.return_value = existing_profile

        await profile_service.patch_profile(
            OWNER,
            ProfileId(value=1),
            [{"op": "replace", "path": "/firstName", "value": "Darth"}],
        )

        replaced: UserProfile = mock_repository.replace_profile.call_args.args[0]
        assert replaced.first_name == "Darth"
        assert replaced.user_name == existing_profile.user_name
        assert replaced.last_name == existing_profile.last_name
        assert replaced.profile_image == existing_profile.profile_image
        assert replaced.password_hash == existing_profile.password_hash
        assert replaced.date_modified > replaced.date_created
        mock_hasher.hash.assert_not_called()

    @pytest.mark.asyncio
    async def test_patching_password_rehashes(
        self, profile_service, mock_repository, existing_profile
    ):
        mock_repository.get_profile_by_id.return_value = existing_profile

        await profile_service.patch_profile(
            OWNER,
            ProfileId(value=1),
            [{"op": "replace", "path": "/password", "value": "NewPassword"}],
        )

        replaced: UserProfile = mock_repository.replace_profile.call_args.args[0]
        assert replaced.password_hash == "hashed:NewPassword"

    @pytest.mark.asyncio
    async def test_removing_profile_image_clears_it(
        self, profile_service, mock_repository, existing_profile
    ):
        mock_repository.get_profile_by_id.return_value = existing_profile

        await profile_service.patch_profile(
            OWNER,
            ProfileId(value=1),
            [{"op": "remove", "path": "/profileImage"}],
        )

        replaced: UserProfile = mock_repository.replace_profile.call_args.args[0]
        assert replaced.profile_image is None

    @pytest.mark.asyncio
    async def test_records_operation_count(
        self, profile_service, mock_repository, mock_probe, existing_profile
    ):
        mock_repository.get_profile_by_id.return_value = existing_profile

        await profile_service.patch_profile(
            OWNER,
            ProfileId(value=1),
            [
                {"op": "replace", "path": "/firstName", "value": "Darth"},
                {"op": "replace", "path": "/lastName", "value": "Vader"},
            ],
        )

        mock_probe.profile_patched.assert_called_once_with(
            profile_id=1, operation_count=2
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "operations",
        [
            [{"op": "replace", "path": "/nickname", "value": "Ani"}],
            [{"op": "add", "path": "/nickname", "value": "Ani"}],
            [{"op": "replace", "path": "/firstName", "value": ""}],
            [{"op": "replace", "path": "/profileImage", "value": "not a url"}],
            [{"op": "remove", "path": "/userName"}],
            [{"op": "test", "path": "/firstName", "value": "Luke"}],
            [{"op": "replace", "path": "/firstName"}],
            [{"op": "frobnicate", "path": "/firstName", "value": "x"}],
            [{"op": "replace", "path": "", "value": []}],
        ],
    )
    async def test_invalid_patch_raises_patch_error(
        self, profile_service, mock_repository, existing_profile, operations
    ):
        mock_repository.get_profile_by_id.return_value = existing_profile

        with pytest.raises(ProfilePatchError):
            await profile_service.patch_profile(OWNER, ProfileId(value=1), operations)

        mock_repository.replace_profile.assert_not_called()

    @pytest.mark.asyncio
    async def test_non_owner_is_rejected_regardless_of_existence(
        self, profile_service, mock_repository
    ):
        mock_repository.get_profile_by_id.return_value = None

        with pytest.raises(UnauthorizedError):
            await profile_service.patch_profile(
                STRANGER,
                ProfileId(value=1),
                [{"op": "replace", "path": "/firstName", "value": "x"}],
            )

    @pytest.mark.asyncio
    async def test_missing_profile_raises_not_found(
        self, profile_service, mock_repository
    ):
        mock_repository.get_profile_by_id.return_value = None

        with pytest.raises(ProfileNotFoundError):
            await profile_service.patch_profile(
                OWNER,
                ProfileId(value=1),
                [{"op": "replace", "path": "/firstName", "value": "x"}],
            )


class TestPatchProfilePassword:
    """The password is write-only inside a patch."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "operation",
        [
            {"op": "copy", "from": "/password", "path": "/lastName"},
            {"op": "move", "from": "/password", "path": "/firstName"},
            {"op": "test", "path": "/password", "value": "Password1"},
            {"op": "remove", "path": "/password"},
            {"op": "copy", "from": "/firstName", "path": "/password"},
            {"op": "replace", "path": "/password/0", "value": "x"},
            {"op": "replace", "path": "/password", "value": ""},
            {"op": "replace", "path": "/password", "value": 123},
            {"op": "replace", "path": "/password"},
        ],
    )
    async def test_only_string_writes_are_allowed(
        self, profile_service, mock_repository, existing_profile, operation
    ):
        mock_repository.get_profile_by_id.return_value = existing_profile

        with pytest.raises(ProfilePatchError) as exc_info:
            await profile_service.patch_profile(
                OWNER, ProfileId(value=1), [operation]
            )

        assert existing_profile.password_hash not in str(exc_info.value)
        mock_repository.replace_profile.assert_not_called()

    @pytest.mark.asyncio
    async def test_add_password_is_hashed(
        self, profile_service, mock_repository, existing_profile
    ):
        mock_repository.get_profile_by_id.return_value = existing_profile

        await profile_service.patch_profile(
            OWNER,
            ProfileId(value=1),
            [
                {"op": "add", "path": "/password", "value": "First"},
                {"op": "replace", "path": "/lastName", "value": "Vader"},
                {"op": "replace", "path": "/password", "value": "Second"},
            ],
        )

        replaced: UserProfile = mock_repository.replace_profile.call_args.args[0]
        assert replaced.password_hash == "hashed:Second"
        assert replaced.last_name == "Vader"

    @pytest.mark.asyncio
    async def test_root_test_never_sees_the_hash(
        self, profile_service, mock_repository, existing_profile
    ):
        mock_repository.get_profile_by_id.return_value = existing_profile

        await profile_service.patch_profile(
            OWNER,
            ProfileId(value=1),
            [
                {
                    "op": "test",
                    "path": "",
                    "value": {
                        "userName": "iamyourfather",
                        "firstName": "Anakin",
                        "lastName": "Skywalker",
                        "profileImage": "https://example.com/vader.jpg",
                    },
                },
                {"op": "replace", "path": "/firstName", "value": "Darth"},
            ],
        )

        replaced: UserProfile = mock_repository.replace_profile.call_args.args[0]
        assert replaced.first_name == "Darth"

    @pytest.mark.asyncio
    async def test_error_messages_do_not_quote_values(
        self, profile_service, mock_repository, mock_probe, existing_profile
    ):
        mock_repository.get_profile_by_id.return_value = existing_profile

        with pytest.raises(ProfilePatchError) as exc_info:
            await profile_service.patch_profile(
                OWNER,
                ProfileId(value=1),
                [{"op": "test", "path": "/firstName", "value": "Luke"}],
            )

        assert "Anakin" not in str(exc_info.value)
        assert "Luke" not in str(exc_info.value)
        error = mock_probe.profile_update_failed.call_args.kwargs["error"]
        assert "Anakin" not in error

    @pytest.mark.asyncio
    async def test_validation_error_names_fields_only(
        self, profile_service, mock_repository, existing_profile
    ):
        mock_repository.get_profile_by_id.return_value = existing_profile

        with pytest.raises(ProfilePatchError) as exc_info:
            await profile_service.patch_profile(
                OWNER,
                ProfileId(value=1),
                [{"op": "replace", "path": "/profileImage", "value": "not a url"}],
            )

        assert "profileImage" in str(exc_info.value)
        assert "not a url" not in str(exc_info.value)
