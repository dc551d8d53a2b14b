"""Domain-Oriented Observability for social application layer.

Probes for application service operations following Domain-Oriented Observability patterns.
"""

from social.application.observability.profile_service_probe import (
    DefaultProfileServiceProbe,
    ProfileServiceProbe,
)
from social.application.observability.screech_service_probe import (
    DefaultScreechServiceProbe,
    ScreechServiceProbe,
)

__all__ = [
    "ProfileServiceProbe",
    "DefaultProfileServiceProbe",
    "ScreechServiceProbe",
    "DefaultScreechServiceProbe",
]
