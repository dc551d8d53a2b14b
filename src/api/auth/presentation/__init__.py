"""Authentication presentation layer."""

from auth.presentation.routes import router

__all__ = ["router"]
