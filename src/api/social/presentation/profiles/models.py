"""Pydantic models for user profile API requests and responses."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from social.application.value_objects import ProfileDetails
from social.domain.aggregates import UserProfile
from social.presentation.models import CamelModel


class CreateProfileRequest(ProfileDetails):
    """Request model for registering a profile.

    Unknown keys are ignored here; only patched documents reject them.
    """

    model_config = ConfigDict(extra="ignore")


class UpdateProfileRequest(ProfileDetails):
    """Request model for replacing a profile."""

    model_config = ConfigDict(extra="ignore")


class PatchOperation(BaseModel):
    """One RFC 6902 JSON Patch operation."""

    model_config = ConfigDict(populate_by_name=True)

    op: Literal["add", "remove", "replace", "move", "copy", "test"]
    path: str = Field(..., description="JSON Pointer to the target field")
    value: Any = None
    from_: str | None = Field(default=None, alias="from")

    def to_patch_dict(self) -> dict[str, Any]:
        """Return the operation as a plain JSON Patch dict.

        Members absent from the request stay absent, so a ``replace``
        without ``value`` is rejected when the patch is applied.
        """
        return self.model_dump(by_alias=True, exclude_unset=True)


class ProfileResponse(CamelModel):
    """Response model for a user profile.

    Never includes the password hash.
    """

    id: int = Field(..., description="Profile ID")
    user_name: str = Field(..., description="Unique user name")
    first_name: str
    last_name: str
    profile_image: str | None = None
    date_created: str
    date_modified: str

    @classmethod
    def from_domain(cls, profile: UserProfile) -> ProfileResponse:
        """Convert domain UserProfile aggregate to API response.

        Args:
            profile: UserProfile domain aggregate

        Returns:
            ProfileResponse without credentials
        """
        return cls(
            id=profile.id.value,
            user_name=profile.user_name,
            first_name=profile.first_name,
            last_name=profile.last_name,
            profile_image=profile.profile_image,
            date_created=profile.date_created,
            date_modified=profile.date_modified,
        )
