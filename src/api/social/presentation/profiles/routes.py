"""HTTP routes for user profiles."""

from __future__ import annotations

from typing import Annotated

from fastapi import (
    APIRouter,
    Body,
    Depends,
    HTTPException,
    Path,
    Request,
    Response,
    status,
)

from auth.dependencies import get_current_caller
from social.application.services import ProfileService
from social.application.value_objects import CallerIdentity
from social.dependencies import get_profile_service
from social.domain.value_objects import ProfileId
from social.ports.exceptions import (
    DuplicateUserNameError,
    MalformedIdentityClaimError,
    ProfileNotFoundError,
    ProfilePatchError,
    UnauthorizedError,
)
from social.presentation.profiles.models import (
    CreateProfileRequest,
    PatchOperation,
    ProfileResponse,
    UpdateProfileRequest,
)

router = APIRouter(
    prefix="/userprofiles",
    tags=["userprofiles"],
)

ProfileIdPath = Annotated[int, Path(gt=0, description="Profile ID")]


def _raise_for_mutation_error(e: Exception) -> None:
    """Map a profile mutation failure onto an HTTP error."""
    if isinstance(e, MalformedIdentityClaimError):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Token subject is not a valid profile ID",
        ) from e
    if isinstance(e, UnauthorizedError):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You may only modify your own profile",
        ) from e
    if isinstance(e, ProfileNotFoundError):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Profile not found",
        ) from e
    if isinstance(e, DuplicateUserNameError):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="User name is already taken",
        ) from e
    if isinstance(e, ProfilePatchError):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Failed to update profile",
    ) from e


@router.get(
    "",
    response_model=list[ProfileResponse],
    summary="List profiles",
    responses={
        200: {"description": "Profiles listed successfully"},
        401: {"description": "Authentication required"},
        500: {"description": "Internal server error"},
    },
)
async def list_profiles(
    caller: Annotated[CallerIdentity, Depends(get_current_caller)],
    service: Annotated[ProfileService, Depends(get_profile_service)],
) -> list[ProfileResponse]:
    """List every user profile."""
    try:
        profiles = await service.list_profiles()
        return [ProfileResponse.from_domain(profile) for profile in profiles]

    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list profiles",
        ) from e


@router.get("/{profile_id}")
async def get_profile(
    profile_id: ProfileIdPath,
    caller: Annotated[CallerIdentity, Depends(get_current_caller)],
    service: Annotated[ProfileService, Depends(get_profile_service)],
) -> ProfileResponse:
    """Get a profile by ID.

    Raises:
        HTTPException: 404 if the profile does not exist
        HTTPException: 500 for unexpected errors
    """
    try:
        profile = await service.get_profile(ProfileId(value=profile_id))
        if profile is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Profile not found",
            )
        return ProfileResponse.from_domain(profile)

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve profile",
        ) from e


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {"description": "Profile created"},
        409: {"description": "User name already taken"},
        500: {"description": "Internal server error"},
    },
)
async def create_profile(
    body: CreateProfileRequest,
    request: Request,
    response: Response,
    service: Annotated[ProfileService, Depends(get_profile_service)],
) -> ProfileResponse:
    """Register a new user profile.

    No authentication is required. The response carries a ``Location``
    header pointing at the new profile.

    Raises:
        HTTPException: 409 if the user name is already taken
        HTTPException: 500 for unexpected errors
    """
    try:
        profile = await service.create_profile(body)

    except DuplicateUserNameError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="User name is already taken",
        ) from e
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create profile",
        ) from e

    response.headers["Location"] = str(
        request.url_for("get_profile", profile_id=profile.id.value)
    )
    return ProfileResponse.from_domain(profile)


@router.put(
    "/{profile_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        204: {"description": "Profile replaced"},
        400: {"description": "Token subject is not a profile ID"},
        401: {"description": "Authentication required"},
        403: {"description": "Caller does not own this profile"},
        404: {"description": "Profile not found"},
        409: {"description": "User name already taken"},
    },
)
async def update_profile(
    profile_id: ProfileIdPath,
    body: UpdateProfileRequest,
    caller: Annotated[CallerIdentity, Depends(get_current_caller)],
    service: Annotated[ProfileService, Depends(get_profile_service)],
) -> Response:
    """Replace all writable fields of the caller's own profile."""
    try:
        await service.update_profile(caller, ProfileId(value=profile_id), body)
    except Exception as e:
        _raise_for_mutation_error(e)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch(
    "/{profile_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        204: {"description": "Patch applied"},
        400: {"description": "Patch could not be applied or token subject invalid"},
        401: {"description": "Authentication required"},
        403: {"description": "Caller does not own this profile"},
        404: {"description": "Profile not found"},
        409: {"description": "User name already taken"},
    },
)
async def patch_profile(
    profile_id: ProfileIdPath,
    operations: Annotated[list[PatchOperation], Body()],
    caller: Annotated[CallerIdentity, Depends(get_current_caller)],
    service: Annotated[ProfileService, Depends(get_profile_service)],
) -> Response:
    """Apply a JSON Patch document to the caller's own profile.

    Patchable paths are ``/userName``, ``/firstName``, ``/lastName`` and
    ``/profileImage``. ``/password`` is write-only and accepts only ``add``
    and ``replace``.
    """
    try:
        await service.patch_profile(
            caller,
            ProfileId(value=profile_id),
            [operation.to_patch_dict() for operation in operations],
        )
    except Exception as e:
        _raise_for_mutation_error(e)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
