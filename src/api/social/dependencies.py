"""Dependency injection for the social bounded context.

Composes the application-scoped repository with social services.
"""

from typing import Annotated

from fastapi import Depends, Request

from infrastructure.dependencies import get_password_hasher
from shared_kernel.auth import PasswordHasher
from social.application.observability import (
    DefaultProfileServiceProbe,
    DefaultScreechServiceProbe,
    ProfileServiceProbe,
    ScreechServiceProbe,
)
from social.application.services import ProfileService, ScreechService
from social.ports.repositories import IUserDataRepository


def get_data_repository(request: Request) -> IUserDataRepository:
    """Get the repository owned by the running application.

    The repository is created during application startup and kept on
    ``app.state`` for the lifetime of the process.

    Returns:
        The application's IUserDataRepository
    """
    return request.app.state.data_repository


def get_profile_service_probe() -> ProfileServiceProbe:
    """Get ProfileServiceProbe instance.

    Returns:
        DefaultProfileServiceProbe instance for observability
    """
    return DefaultProfileServiceProbe()


def get_screech_service_probe() -> ScreechServiceProbe:
    """Get ScreechServiceProbe instance.

    Returns:
        DefaultScreechServiceProbe instance for observability
    """
    return DefaultScreechServiceProbe()


def get_profile_service(
    repository: Annotated[IUserDataRepository, Depends(get_data_repository)],
    password_hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    probe: Annotated[ProfileServiceProbe, Depends(get_profile_service_probe)],
) -> ProfileService:
    """Get ProfileService instance.

    Args:
        repository: The application's data repository
        password_hasher: Hasher for incoming passwords
        probe: Profile service probe for observability

    Returns:
        ProfileService instance
    """
    return ProfileService(
        repository=repository,
        password_hasher=password_hasher,
        probe=probe,
    )


def get_screech_service(
    repository: Annotated[IUserDataRepository, Depends(get_data_repository)],
    probe: Annotated[ScreechServiceProbe, Depends(get_screech_service_probe)],
) -> ScreechService:
    """Get ScreechService instance.

    Args:
        repository: The application's data repository
        probe: Screech service probe for observability

    Returns:
        ScreechService instance
    """
    return ScreechService(repository=repository, probe=probe)
