"""Social presentation layer - aggregate-based organization.

Each aggregate package (profiles, screeches) contains its own routes and
models.
"""

from __future__ import annotations

from fastapi import APIRouter

from social.presentation import profiles, screeches

# Auth is enforced per-endpoint: profile registration and the public screech
# listing take no credentials.
router = APIRouter(prefix="/api")

router.include_router(profiles.router)
router.include_router(screeches.router)

__all__ = ["router"]
