"""Token issuance route.

Exchanges a user name and password for a signed bearer token. The token is
returned as a bare JSON string.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from auth.application import AuthenticationService
from auth.dependencies import get_authentication_service
from auth.ports import InvalidCredentialsError
from auth.presentation.models import AuthenticationRequest

router = APIRouter(prefix="/api/authentication", tags=["authentication"])


@router.post(
    "/authenticate",
    response_model=str,
    responses={
        200: {"description": "Bearer token issued"},
        401: {"description": "Invalid user name or password"},
    },
)
async def authenticate(
    request: AuthenticationRequest,
    service: Annotated[AuthenticationService, Depends(get_authentication_service)],
) -> str:
    """Authenticate with user name and password.

    Each successful call issues a new token.

    Raises:
        HTTPException: 401 if the credentials do not match a profile
        HTTPException: 500 for unexpected errors
    """
    try:
        return await service.authenticate(request.user_name, request.password)

    except InvalidCredentialsError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid user name or password",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to authenticate",
        ) from e
