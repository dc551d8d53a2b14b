"""Application layer for authentication."""

from auth.application.service import AuthenticationService

__all__ = ["AuthenticationService"]
