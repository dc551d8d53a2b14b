"""Clock abstraction for timestamping records.

Records carry ISO-8601 strings for creation and modification times. Taking
the clock as a dependency lets tests control time without patching.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Return the current time in UTC."""
    return datetime.now(UTC)


def iso_timestamp(clock: Clock = utc_now) -> str:
    """Return the clock's current time as an ISO-8601 string."""
    return clock().isoformat()
