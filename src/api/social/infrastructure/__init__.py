"""Infrastructure layer for the social bounded context.

In-memory stores, the repository that composes them, and demo data seeding.
"""

from social.infrastructure.data_repository import UserDataRepository
from social.infrastructure.profile_store import InMemoryProfileStore
from social.infrastructure.screech_store import InMemoryScreechStore

__all__ = [
    "InMemoryProfileStore",
    "InMemoryScreechStore",
    "UserDataRepository",
]
