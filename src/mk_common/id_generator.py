"""Sequential ID generator for ledger entities (listings, orders, journal rows).

IDs are dense, 1-based and strictly increasing. Each entity type owns its
own generator, so listing and order sequences never interleave.
"""

import threading


class SequentialIdGenerator:
    """Monotonic counter: first call returns ``start``, then start+1, ..."""

    def __init__(self, start: int = 1) -> None:
        if start < 1:
            raise ValueError(f"start must be >= 1, got {start}")
        self._last = start - 1
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            self._last += 1
            return self._last

    @property
    def last_id(self) -> int:
        """Most recently issued id, 0 when nothing has been issued yet."""
        return self._last
