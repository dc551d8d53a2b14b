"""User profile routes and models."""

from social.presentation.profiles.routes import router

__all__ = ["router"]
