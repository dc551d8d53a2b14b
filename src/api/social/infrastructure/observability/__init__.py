"""Domain-Oriented Observability for social infrastructure.

Probes for store operations following Domain-Oriented Observability patterns.
"""

from social.infrastructure.observability.store_probe import (
    DefaultProfileStoreProbe,
    DefaultScreechStoreProbe,
    ProfileStoreProbe,
    ScreechStoreProbe,
)

__all__ = [
    "ProfileStoreProbe",
    "DefaultProfileStoreProbe",
    "ScreechStoreProbe",
    "DefaultScreechStoreProbe",
]
