"""Protocol for screech application service observability."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class ScreechServiceProbe(Protocol):
    """Domain probe for screech application service operations."""

    def screech_created(self, screech_id: int, creator_id: int) -> None:
        """Record that a screech was posted."""
        ...

    def screech_creation_failed(self, creator_id: int, error: str) -> None:
        """Record that posting a screech failed."""
        ...

    def screech_updated(self, screech_id: int, creator_id: int) -> None:
        """Record that a screech's content was replaced."""
        ...

    def screech_update_failed(self, screech_id: int, error: str) -> None:
        """Record that a screech update failed."""
        ...

    def ownership_denied(self, caller_id: int, owner_id: int) -> None:
        """Record that a caller tried to post or edit as another user."""
        ...

    def with_context(self, context: ObservationContext) -> ScreechServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultScreechServiceProbe:
    """Default implementation of ScreechServiceProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultScreechServiceProbe:
        return DefaultScreechServiceProbe(logger=self._logger, context=context)

    def screech_created(self, screech_id: int, creator_id: int) -> None:
        self._logger.info(
            "screech_created",
            screech_id=screech_id,
            creator_id=creator_id,
            **self._get_context_kwargs(),
        )

    def screech_creation_failed(self, creator_id: int, error: str) -> None:
        self._logger.error(
            "screech_creation_failed",
            creator_id=creator_id,
            error=error,
            **self._get_context_kwargs(),
        )

    def screech_updated(self, screech_id: int, creator_id: int) -> None:
        self._logger.info(
            "screech_updated",
            screech_id=screech_id,
            creator_id=creator_id,
            **self._get_context_kwargs(),
        )

    def screech_update_failed(self, screech_id: int, error: str) -> None:
        self._logger.error(
            "screech_update_failed",
            screech_id=screech_id,
            error=error,
            **self._get_context_kwargs(),
        )

    def ownership_denied(self, caller_id: int, owner_id: int) -> None:
        self._logger.warning(
            "screech_ownership_denied",
            denied_caller_id=caller_id,
            owner_id=owner_id,
            **self._get_context_kwargs(),
        )
