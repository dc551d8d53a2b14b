"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from auth.presentation import router as auth_router
from infrastructure.dependencies import get_password_hasher
from infrastructure.logging import configure_logging
from infrastructure.observability import DefaultStartupProbe
from infrastructure.settings import Settings, get_settings
from infrastructure.version import __version__
from social.infrastructure import UserDataRepository
from social.infrastructure.seed import seed_demo_data
from social.presentation import router as social_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the Screechr application.

    Each application owns one in-memory repository, created when the
    lifespan starts and kept on ``app.state``.

    Args:
        settings: Application settings (loaded from the environment if omitted)

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    configure_logging(debug=settings.debug)

    @asynccontextmanager
    async def screechr_lifespan(app: FastAPI):
        """Application lifespan context.

        Manages:
        - Repository creation
        - Demo data seeding (when enabled)
        """
        probe = DefaultStartupProbe()
        probe.application_starting(app_name=settings.app_name, version=__version__)

        repository = UserDataRepository()
        app.state.data_repository = repository

        if settings.seed_demo_data:
            # Dependency overrides apply to seeding too
            hasher_provider = app.dependency_overrides.get(
                get_password_hasher, get_password_hasher
            )
            await seed_demo_data(repository, hasher_provider(), probe=probe)
        else:
            probe.demo_data_seeding_disabled()

        yield

        probe.application_stopped(app_name=settings.app_name)

    app = FastAPI(
        title=settings.app_name,
        description="Post short messages and manage user profiles",
        version=__version__,
        debug=settings.debug,
        lifespan=screechr_lifespan,
    )

    app.include_router(auth_router)
    app.include_router(social_router)

    @app.get("/health")
    def health():
        """Basic health check endpoint."""
        return {"status": "ok"}

    return app


app = create_app()
