"""Domain aggregates for the social context.

Aggregates are immutable records. Stores replace them wholesale on update
instead of mutating them in place.
"""

from social.domain.aggregates.screech import MAX_CONTENT_LENGTH, Screech
from social.domain.aggregates.user_profile import UserProfile

__all__ = [
    "MAX_CONTENT_LENGTH",
    "Screech",
    "UserProfile",
]
