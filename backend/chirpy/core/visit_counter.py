"""Visit Counter — process-wide hit counter for static-content requests.

Invariants:
    - increment/value/reset are linearizable: no lost updates, no torn reads
    - Never persisted; starts at 0 on every process start

Design Decisions:
    - Held on app.state and injected into middleware/routes, not a module
      global (one instance per application)
    - threading.Lock over relying on the GIL: increments may also come from
      threadpool-executed code, and `+=` is not atomic
"""

import threading


class VisitCounter:
    """Atomically updated integer cell."""

    def __init__(self) -> None:
        self._value = 0
        self._lock = threading.Lock()

    def increment(self) -> int:
        """Add one and return the new value."""
        with self._lock:
            self._value += 1
            return self._value

    def value(self) -> int:
        with self._lock:
            return self._value

    def reset(self) -> int:
        """Swap the value back to zero. Returns the value before the reset."""
        with self._lock:
            previous, self._value = self._value, 0
            return previous
