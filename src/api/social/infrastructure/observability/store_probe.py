"""Domain probes for the in-memory stores.

Following Domain-Oriented Observability patterns, these probes capture
domain-significant events related to profile and screech persistence.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class ProfileStoreProbe(Protocol):
    """Domain probe for profile store operations."""

    def profile_added(self, profile_id: int, user_name: str) -> None:
        """Record that a profile was inserted."""
        ...

    def profile_replaced(self, profile_id: int) -> None:
        """Record that a profile was replaced with a new version."""
        ...

    def profile_not_found(self, profile_id: int) -> None:
        """Record that a replace targeted an unknown profile."""
        ...

    def duplicate_user_name(self, user_name: str) -> None:
        """Record that a user name collided with an existing profile."""
        ...

    def id_collision(self, profile_id: int) -> None:
        """Record that an allocated ID was already present in the store."""
        ...

    def with_context(self, context: ObservationContext) -> ProfileStoreProbe:
        """Create a new probe with observation context bound."""
        ...


class ScreechStoreProbe(Protocol):
    """Domain probe for screech store operations."""

    def screech_added(self, screech_id: int, creator_id: int) -> None:
        """Record that a screech was inserted."""
        ...

    def screech_replaced(self, screech_id: int) -> None:
        """Record that a screech was replaced with a new version."""
        ...

    def screech_not_found(self, screech_id: int) -> None:
        """Record that a replace targeted an unknown screech."""
        ...

    def id_collision(self, screech_id: int) -> None:
        """Record that an allocated ID was already present in the store."""
        ...

    def with_context(self, context: ObservationContext) -> ScreechStoreProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultProfileStoreProbe:
    """Default implementation of ProfileStoreProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultProfileStoreProbe:
        """Create a new probe with observation context bound."""
        return DefaultProfileStoreProbe(logger=self._logger, context=context)

    def profile_added(self, profile_id: int, user_name: str) -> None:
        """Record that a profile was inserted."""
        self._logger.info(
            "profile_added",
            profile_id=profile_id,
            user_name=user_name,
            **self._get_context_kwargs(),
        )

    def profile_replaced(self, profile_id: int) -> None:
        """Record that a profile was replaced with a new version."""
        self._logger.info(
            "profile_replaced",
            profile_id=profile_id,
            **self._get_context_kwargs(),
        )

    def profile_not_found(self, profile_id: int) -> None:
        """Record that a replace targeted an unknown profile."""
        self._logger.debug(
            "profile_not_found",
            profile_id=profile_id,
            **self._get_context_kwargs(),
        )

    def duplicate_user_name(self, user_name: str) -> None:
        """Record that a user name collided with an existing profile."""
        self._logger.warning(
            "duplicate_user_name",
            user_name=user_name,
            **self._get_context_kwargs(),
        )

    def id_collision(self, profile_id: int) -> None:
        """Record that an allocated ID was already present in the store."""
        self._logger.critical(
            "profile_id_collision",
            profile_id=profile_id,
            **self._get_context_kwargs(),
        )


class DefaultScreechStoreProbe:
    """Default implementation of ScreechStoreProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultScreechStoreProbe:
        """Create a new probe with observation context bound."""
        return DefaultScreechStoreProbe(logger=self._logger, context=context)

    def screech_added(self, screech_id: int, creator_id: int) -> None:
        """Record that a screech was inserted."""
        self._logger.info(
            "screech_added",
            screech_id=screech_id,
            creator_id=creator_id,
            **self._get_context_kwargs(),
        )

    def screech_replaced(self, screech_id: int) -> None:
        """Record that a screech was replaced with a new version."""
        self._logger.info(
            "screech_replaced",
            screech_id=screech_id,
            **self._get_context_kwargs(),
        )

    def screech_not_found(self, screech_id: int) -> None:
        """Record that a replace targeted an unknown screech."""
        self._logger.debug(
            "screech_not_found",
            screech_id=screech_id,
            **self._get_context_kwargs(),
        )

    def id_collision(self, screech_id: int) -> None:
        """Record that an allocated ID was already present in the store."""
        self._logger.critical(
            "screech_id_collision",
            screech_id=screech_id,
            **self._get_context_kwargs(),
        )
