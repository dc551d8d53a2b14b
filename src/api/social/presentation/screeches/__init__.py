"""Screech routes and models."""

from social.presentation.screeches.routes import router

__all__ = ["router"]
