"""Ownership policy for mutating requests.

Every mutation resolves the caller's identity claim first, then compares it
with the owning profile named in the request path. Existence of the target
is checked afterwards by the caller of this policy, so a non-owner learns
nothing about which resources exist.
"""

from __future__ import annotations

from typing import Protocol

from social.application.value_objects import CallerIdentity
from social.domain.value_objects import ProfileId
from social.ports.exceptions import MalformedIdentityClaimError, UnauthorizedError


def resolve_caller_id(caller: CallerIdentity) -> ProfileId:
    """Turn the caller's identity claim into a ProfileId.

    Raises:
        MalformedIdentityClaimError: If the claim is missing or is not a
            positive integer
    """
    if caller.subject is None:
        raise MalformedIdentityClaimError("Token carries no subject claim")
    try:
        return ProfileId.from_string(caller.subject)
    except ValueError as e:
        raise MalformedIdentityClaimError(
            f"Subject claim is not a profile ID: {caller.subject!r}"
        ) from e


def ensure_owner(caller_id: ProfileId, owner_id: ProfileId) -> None:
    """Require that the caller is the owning profile.

    Raises:
        UnauthorizedError: If the IDs differ
    """
    if caller_id != owner_id:
        raise UnauthorizedError(
            f"Profile {caller_id} may not modify resources owned by {owner_id}"
        )


class OwnershipProbe(Protocol):
    """Any probe that records denied ownership checks."""

    def ownership_denied(self, caller_id: int, owner_id: int) -> None: ...


def authorize_owner(
    caller: CallerIdentity,
    owner_id: ProfileId,
    probe: OwnershipProbe | None = None,
) -> ProfileId:
    """Resolve the caller and require ownership in one step.

    A denial is reported to ``probe`` before the error propagates.

    Returns:
        The caller's ProfileId

    Raises:
        MalformedIdentityClaimError: If the claim is unusable
        UnauthorizedError: If the caller is not the owner
    """
    caller_id = resolve_caller_id(caller)
    try:
        ensure_owner(caller_id, owner_id)
    except UnauthorizedError:
        if probe is not None:
            probe.ownership_denied(caller_id=caller_id.value, owner_id=owner_id.value)
        raise
    return caller_id
