"""Protocol for profile application service observability.

Defines the interface for domain probes that capture application-level
domain events for profile service operations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class ProfileServiceProbe(Protocol):
    """Domain probe for profile application service operations."""

    def profile_created(self, profile_id: int, user_name: str) -> None:
        """Record that a profile was registered."""
        ...

    def profile_creation_failed(self, user_name: str, error: str) -> None:
        """Record that profile registration failed."""
        ...

    def profile_updated(self, profile_id: int) -> None:
        """Record that a profile was fully replaced."""
        ...

    def profile_patched(self, profile_id: int, operation_count: int) -> None:
        """Record that a JSON Patch was applied to a profile."""
        ...

    def profile_update_failed(self, profile_id: int, error: str) -> None:
        """Record that a profile update or patch failed."""
        ...

    def ownership_denied(self, caller_id: int, owner_id: int) -> None:
        """Record that a caller tried to modify another user's profile."""
        ...

    def with_context(self, context: ObservationContext) -> ProfileServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultProfileServiceProbe:
    """Default implementation of ProfileServiceProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultProfileServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultProfileServiceProbe(logger=self._logger, context=context)

    def profile_created(self, profile_id: int, user_name: str) -> None:
        """Record that a profile was registered."""
        self._logger.info(
            "profile_created",
            profile_id=profile_id,
            user_name=user_name,
            **self._get_context_kwargs(),
        )

    def profile_creation_failed(self, user_name: str, error: str) -> None:
        """Record that profile registration failed."""
        self._logger.error(
            "profile_creation_failed",
            user_name=user_name,
            error=error,
            **self._get_context_kwargs(),
        )

    def profile_updated(self, profile_id: int) -> None:
        """Record that a profile was fully replaced."""
        self._logger.info(
            "profile_updated",
            profile_id=profile_id,
            **self._get_context_kwargs(),
        )

    def profile_patched(self, profile_id: int, operation_count: int) -> None:
        """Record that a JSON Patch was applied to a profile."""
        self._logger.info(
            "profile_patched",
            profile_id=profile_id,
            operation_count=operation_count,
            **self._get_context_kwargs(),
        )

    def profile_update_failed(self, profile_id: int, error: str) -> None:
        """Record that a profile update or patch failed."""
        self._logger.error(
            "profile_update_failed",
            profile_id=profile_id,
            error=error,
            **self._get_context_kwargs(),
        )

    def ownership_denied(self, caller_id: int, owner_id: int) -> None:
        """Record that a caller tried to modify another user's profile."""
        self._logger.warning(
            "profile_ownership_denied",
            denied_caller_id=caller_id,
            owner_id=owner_id,
            **self._get_context_kwargs(),
        )
