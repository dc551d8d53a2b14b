"""HTTP routes for screeches."""

from __future__ import annotations

from typing import Annotated

from fastapi import (
    APIRouter,
    Depends,
    HTTPException,
    Path,
    Request,
    Response,
    status,
)

from auth.dependencies import get_current_caller
from social.application.services import ScreechService
from social.application.value_objects import CallerIdentity
from social.dependencies import get_screech_service
from social.domain.value_objects import ProfileId, ScreechId
from social.ports.exceptions import (
    MalformedIdentityClaimError,
    ProfileNotFoundError,
    ScreechNotFoundError,
    UnauthorizedError,
)
from social.presentation.screeches.models import (
    ScreechContentRequest,
    ScreechResponse,
)

router = APIRouter(
    prefix="/screeches",
    tags=["screeches"],
)

CreatorIdPath = Annotated[int, Path(gt=0, description="ID of the posting profile")]
ScreechIdPath = Annotated[int, Path(gt=0, description="Screech ID")]


@router.get(
    "",
    response_model=list[ScreechResponse],
    summary="List screeches",
    description="List every screech. No authentication required.",
)
async def list_screeches(
    service: Annotated[ScreechService, Depends(get_screech_service)],
) -> list[ScreechResponse]:
    """List every screech."""
    try:
        screeches = await service.list_screeches()
        return [ScreechResponse.from_domain(screech) for screech in screeches]

    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list screeches",
        ) from e


@router.get("/{screech_id}")
async def get_screech(
    screech_id: ScreechIdPath,
    caller: Annotated[CallerIdentity, Depends(get_current_caller)],
    service: Annotated[ScreechService, Depends(get_screech_service)],
) -> ScreechResponse:
    """Get a screech by ID.

    Raises:
        HTTPException: 404 if the screech does not exist
        HTTPException: 500 for unexpected errors
    """
    try:
        screech = await service.get_screech(ScreechId(value=screech_id))
        if screech is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Screech not found",
            )
        return ScreechResponse.from_domain(screech)

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve screech",
        ) from e


@router.post(
    "/{creator_id}",
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {"description": "Screech posted"},
        400: {"description": "Token subject is not a profile ID"},
        401: {"description": "Authentication required"},
        403: {"description": "Caller may only post as themselves"},
        404: {"description": "Creator profile not found"},
    },
)
async def create_screech(
    creator_id: CreatorIdPath,
    body: ScreechContentRequest,
    request: Request,
    response: Response,
    caller: Annotated[CallerIdentity, Depends(get_current_caller)],
    service: Annotated[ScreechService, Depends(get_screech_service)],
) -> ScreechResponse:
    """Post a screech as the calling profile.

    The response carries a ``Location`` header pointing at the new screech.
    """
    try:
        screech = await service.create_screech(
            caller, ProfileId(value=creator_id), body.content
        )

    except MalformedIdentityClaimError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Token subject is not a valid profile ID",
        ) from e
    except UnauthorizedError as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You may only post screeches as yourself",
        ) from e
    except ProfileNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Profile not found",
        ) from e
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create screech",
        ) from e

    response.headers["Location"] = str(
        request.url_for("get_screech", screech_id=screech.id.value)
    )
    return ScreechResponse.from_domain(screech)


@router.put(
    "/{creator_id}/{screech_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        204: {"description": "Screech updated"},
        400: {"description": "Token subject is not a profile ID"},
        401: {"description": "Authentication required"},
        403: {"description": "Caller may only edit their own screeches"},
        404: {"description": "Screech not found for this creator"},
    },
)
async def update_screech(
    creator_id: CreatorIdPath,
    screech_id: ScreechIdPath,
    body: ScreechContentRequest,
    caller: Annotated[CallerIdentity, Depends(get_current_caller)],
    service: Annotated[ScreechService, Depends(get_screech_service)],
) -> Response:
    """Replace the content of one of the caller's screeches."""
    try:
        await service.update_screech(
            caller,
            ProfileId(value=creator_id),
            ScreechId(value=screech_id),
            body.content,
        )

    except MalformedIdentityClaimError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Token subject is not a valid profile ID",
        ) from e
    except UnauthorizedError as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You may only edit your own screeches",
        ) from e
    except ScreechNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Screech not found",
        ) from e
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update screech",
        ) from e

    return Response(status_code=status.HTTP_204_NO_CONTENT)
