"""Sequential identifier generation shared across bounded contexts.

Both stores in the social context hand out numeric identifiers from their
own sequence. The sequence is the only place that decides what the next
identifier is, so callers never read-then-increment a counter themselves.
"""

from __future__ import annotations

import threading


class IdSequence:
    """Thread-safe, monotonically increasing integer sequence.

    The first value returned is ``start`` (1 by default). Values are never
    reused, even if the caller discards one.

    Example:
        >>> seq = IdSequence()
        >>> seq.next_value(), seq.next_value()
        (1, 2)
    """

    def __init__(self, start: int = 1) -> None:
        if start < 1:
            raise ValueError(f"Sequence start must be positive, got {start}")
        self._next = start
        self._lock = threading.Lock()

    def next_value(self) -> int:
        """Allocate and return the next identifier."""
        with self._lock:
            value = self._next
            self._next += 1
            return value
