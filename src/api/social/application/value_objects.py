"""Application-layer value objects for the social bounded context.

These represent request-scoped concepts (who is calling) and the validated
shape of profile details shared by creation, full update and patching.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, HttpUrl
from pydantic.alias_generators import to_camel


@dataclass(frozen=True)
class CallerIdentity:
    """The authenticated caller as described by a validated bearer token.

    ``subject`` is the raw ``sub`` claim. It is kept as text because a token
    can validate while carrying a subject that is not a profile ID; the
    ownership policy decides what to do with it.
    """

    subject: str | None
    given_name: str | None = None
    family_name: str | None = None


class ProfileFields(BaseModel):
    """The readable, client-writable fields of a profile.

    Validates the working copy after a JSON Patch has been applied. The
    password is write-only and never part of that copy. Keys are camelCase
    on the wire.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    user_name: str = Field(..., min_length=1, max_length=80)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    profile_image: HttpUrl | None = None

    @property
    def profile_image_url(self) -> str | None:
        """The profile image as a plain string, if set."""
        return str(self.profile_image) if self.profile_image is not None else None


class ProfileDetails(ProfileFields):
    """Every client-writable field of a profile, including the password.

    Used as the request body for creation and full replacement.
    """

    password: str = Field(..., min_length=1)
