"""Pydantic models for screech API requests and responses."""

from __future__ import annotations

from pydantic import Field

from social.domain.aggregates import MAX_CONTENT_LENGTH, Screech
from social.presentation.models import CamelModel


class ScreechContentRequest(CamelModel):
    """Request model for posting or editing a screech."""

    content: str = Field(
        ...,
        min_length=1,
        max_length=MAX_CONTENT_LENGTH,
        description="Screech text",
    )


class ScreechResponse(CamelModel):
    """Response model for a screech."""

    id: int = Field(..., description="Screech ID")
    content: str
    creator_id: int = Field(..., description="ID of the profile that posted it")
    date_created: str
    date_modified: str

    @classmethod
    def from_domain(cls, screech: Screech) -> ScreechResponse:
        """Convert domain Screech aggregate to API response."""
        return cls(
            id=screech.id.value,
            content=screech.content,
            creator_id=screech.creator_id.value,
            date_created=screech.date_created,
            date_modified=screech.date_modified,
        )
