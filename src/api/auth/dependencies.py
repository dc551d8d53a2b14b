"""Dependency injection for authentication.

Provides the login service and the bearer token check that resolves the
caller of protected routes.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from auth.application import AuthenticationService
from auth.observability import AuthenticationProbe, DefaultAuthenticationProbe
from infrastructure.dependencies import get_password_hasher, get_token_service
from shared_kernel.auth import InvalidTokenError, PasswordHasher, TokenService
from social.application.value_objects import CallerIdentity
from social.dependencies import get_data_repository
from social.ports.repositories import IUserDataRepository

# auto_error=False so a missing header yields our own 401 instead of a 403
bearer_scheme = HTTPBearer(auto_error=False)


def get_authentication_probe() -> AuthenticationProbe:
    """Get AuthenticationProbe instance.

    Returns:
        DefaultAuthenticationProbe instance for observability
    """
    return DefaultAuthenticationProbe()


def get_authentication_service(
    repository: Annotated[IUserDataRepository, Depends(get_data_repository)],
    password_hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
    probe: Annotated[AuthenticationProbe, Depends(get_authentication_probe)],
) -> AuthenticationService:
    """Get AuthenticationService instance."""
    return AuthenticationService(
        repository=repository,
        password_hasher=password_hasher,
        token_service=token_service,
        probe=probe,
    )


async def get_current_caller(
    token_service: Annotated[TokenService, Depends(get_token_service)],
    auth_probe: Annotated[AuthenticationProbe, Depends(get_authentication_probe)],
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ] = None,
) -> CallerIdentity:
    """Authenticate the request via its Bearer token.

    The token's subject is passed through unparsed; whether it names a
    profile is decided by the ownership policy on mutating routes.

    Args:
        token_service: Validates the token
        auth_probe: Authentication probe for observability
        credentials: Bearer credentials from the Authorization header

    Returns:
        CallerIdentity built from the token claims

    Raises:
        HTTPException 401: If the token is missing or invalid
    """
    if credentials is None:
        auth_probe.authentication_failed(reason="Missing authorization")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        claims = token_service.validate(credentials.credentials)
    except InvalidTokenError as e:
        auth_probe.authentication_failed(reason=str(e))
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        ) from e

    auth_probe.caller_authenticated(subject=claims.sub)
    return CallerIdentity(
        subject=claims.sub,
        given_name=claims.given_name,
        family_name=claims.family_name,
    )
