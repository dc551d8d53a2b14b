"""Domain-oriented observability for authentication.

Covers both the login endpoint (credentials exchanged for a token) and the
per-request bearer token check that identifies the caller.

Follows the Domain Oriented Observability pattern from Martin Fowler.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class AuthenticationProbe(Protocol):
    """Domain probe for authentication operations."""

    def login_succeeded(self, profile_id: int, user_name: str) -> None:
        """Record that a user exchanged valid credentials for a token."""
        ...

    def login_failed(self, user_name: str, reason: str) -> None:
        """Record that a login attempt was rejected."""
        ...

    def caller_authenticated(self, subject: str | None) -> None:
        """Record that a request carried a valid bearer token."""
        ...

    def authentication_failed(self, reason: str) -> None:
        """Record that a request's bearer token was missing or invalid."""
        ...

    def with_context(self, context: ObservationContext) -> AuthenticationProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultAuthenticationProbe:
    """Default implementation of AuthenticationProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultAuthenticationProbe:
        """Create a new probe with observation context bound."""
        return DefaultAuthenticationProbe(logger=self._logger, context=context)

    def login_succeeded(self, profile_id: int, user_name: str) -> None:
        """Record that a user exchanged valid credentials for a token."""
        self._logger.info(
            "login_succeeded",
            profile_id=profile_id,
            user_name=user_name,
            **self._get_context_kwargs(),
        )

    def login_failed(self, user_name: str, reason: str) -> None:
        """Record that a login attempt was rejected."""
        self._logger.warning(
            "login_failed",
            user_name=user_name,
            reason=reason,
            **self._get_context_kwargs(),
        )

    def caller_authenticated(self, subject: str | None) -> None:
        """Record that a request carried a valid bearer token."""
        self._logger.debug(
            "caller_authenticated",
            subject=subject,
            **self._get_context_kwargs(),
        )

    def authentication_failed(self, reason: str) -> None:
        """Record that a request's bearer token was missing or invalid."""
        self._logger.warning(
            "authentication_failed",
            reason=reason,
            **self._get_context_kwargs(),
        )
