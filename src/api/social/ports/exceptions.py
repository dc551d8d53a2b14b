"""Domain exceptions for the social bounded context.

These exceptions represent domain-level errors raised by the stores and the
application services. The presentation layer maps each of them to an HTTP
status code.
"""


class DuplicateUserNameError(Exception):
    """Raised when a user name is already held by another profile.

    User names are unique across all profiles, compared case-insensitively.
    """

    pass


class ProfileNotFoundError(Exception):
    """Raised when a profile cannot be found."""

    pass


class ScreechNotFoundError(Exception):
    """Raised when a screech cannot be found for the requested creator/ID."""

    pass


class ProfileCreationError(Exception):
    """Raised when the profile store refuses to insert a new profile.

    Only happens on an identifier collision, which the store's sequence
    rules out. Kept so the failure is reported instead of returning ``None``
    to a route.
    """

    pass


class ScreechCreationError(Exception):
    """Raised when the screech store refuses to insert a new screech."""

    pass


class MalformedIdentityClaimError(Exception):
    """Raised when the caller's identity claim is missing or not a profile ID.

    The application layer treats this as a bad request: the token validated,
    but it does not carry a usable subject.
    """

    pass


class UnauthorizedError(Exception):
    """Raised when the caller does not own the resource being mutated.

    This exception indicates that authorization checks have failed.
    The presentation layer should return HTTP 403 without exposing
    internal details.
    """

    pass


class ProfilePatchError(Exception):
    """Raised when a JSON Patch document cannot be applied to a profile.

    Covers malformed patch operations, paths that do not exist, and patched
    values that fail validation.
    """

    pass
