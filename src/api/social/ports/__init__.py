"""Ports (interfaces) for the social bounded context.

Ports define the contracts for repositories without specifying
implementation details, keeping the application layer independent of the
in-memory stores.
"""

from social.ports.exceptions import (
    DuplicateUserNameError,
    MalformedIdentityClaimError,
    ProfileCreationError,
    ProfileNotFoundError,
    ProfilePatchError,
    ScreechCreationError,
    ScreechNotFoundError,
    UnauthorizedError,
)
from social.ports.repositories import IUserDataRepository

__all__ = [
    "IUserDataRepository",
    "DuplicateUserNameError",
    "MalformedIdentityClaimError",
    "ProfileCreationError",
    "ProfileNotFoundError",
    "ProfilePatchError",
    "ScreechCreationError",
    "ScreechNotFoundError",
    "UnauthorizedError",
]
