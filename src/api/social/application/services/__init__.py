"""Application services for the social bounded context."""

from social.application.services.profile_service import ProfileService
from social.application.services.screech_service import ScreechService

__all__ = [
    "ProfileService",
    "ScreechService",
]
