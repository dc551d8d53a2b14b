"""In-memory store for Screech aggregates.

Mirrors the profile store: a dict keyed by ScreechId, its own ID sequence,
and one lock around every read and write.
"""

from __future__ import annotations

import threading

from shared_kernel.identifiers import IdSequence
from social.domain.aggregates import Screech
from social.domain.value_objects import ProfileId, ScreechId
from social.infrastructure.observability import (
    DefaultScreechStoreProbe,
    ScreechStoreProbe,
)
from social.ports.exceptions import ScreechNotFoundError


class InMemoryScreechStore:
    """Thread-safe keyed collection of screeches."""

    def __init__(
        self,
        sequence: IdSequence | None = None,
        probe: ScreechStoreProbe | None = None,
    ) -> None:
        self._screeches: dict[ScreechId, Screech] = {}
        self._sequence = sequence or IdSequence()
        self._probe = probe or DefaultScreechStoreProbe()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._screeches)

    def get_all(self) -> list[Screech]:
        with self._lock:
            return list(self._screeches.values())

    def get_by_id(self, screech_id: ScreechId) -> Screech | None:
        with self._lock:
            return self._screeches.get(screech_id)

    def get_by_creator_and_id(
        self, creator_id: ProfileId, screech_id: ScreechId
    ) -> Screech | None:
        """Linear scan for a screech matching both the ID and the creator."""
        with self._lock:
            for screech in self._screeches.values():
                if screech.id == screech_id and screech.is_created_by(creator_id):
                    return screech
            return None

    def add(
        self, creator_id: ProfileId, content: str, created_at: str
    ) -> Screech | None:
        """Insert a screech under the next ID.

        Returns:
            The stored screech, or None if the allocated ID was already taken
        """
        with self._lock:
            screech_id = ScreechId(value=self._sequence.next_value())
            if screech_id in self._screeches:
                self._probe.id_collision(screech_id.value)
                return None

            screech = Screech(
                id=screech_id,
                content=content,
                creator_id=creator_id,
                date_created=created_at,
            )
            self._screeches[screech_id] = screech

        self._probe.screech_added(screech_id.value, creator_id.value)
        return screech

    def replace(self, screech: Screech) -> None:
        """Swap in a new version of an existing screech.

        Raises:
            ScreechNotFoundError: If no screech has this ID
        """
        with self._lock:
            if screech.id not in self._screeches:
                self._probe.screech_not_found(screech.id.value)
                raise ScreechNotFoundError(f"Screech {screech.id} not found")
            self._screeches[screech.id] = screech

        self._probe.screech_replaced(screech.id.value)
