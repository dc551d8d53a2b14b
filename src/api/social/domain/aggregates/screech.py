"""Screech aggregate for the social context."""

from __future__ import annotations

from dataclasses import dataclass, replace

from social.domain.value_objects import ProfileId, ScreechId

MAX_CONTENT_LENGTH = 1024


@dataclass(frozen=True)
class Screech:
    """A short text post attributed to a user profile.

    The creator must reference an existing profile when the screech is
    created; that check belongs to the application service, not to the
    aggregate or the store.
    """

    id: ScreechId
    content: str
    creator_id: ProfileId
    date_created: str
    date_modified: str = ""

    def __str__(self) -> str:
        """Return string representation."""
        return f"Screech({self.id} by {self.creator_id})"

    def is_created_by(self, profile_id: ProfileId) -> bool:
        """Check whether the given profile created this screech."""
        return self.creator_id == profile_id

    def with_content(self, content: str, modified_at: str) -> Screech:
        """Return a copy with new content and modification timestamp."""
        return replace(self, content=content, date_modified=modified_at)
