"""
Compare-and-set integer cell.

CPython exposes no user-level CAS instruction, so the cell guards its
compare and store with a private lock held only for that instant.
Callers build lock-free-style algorithms on compare_and_set() without
holding any lock of their own.
"""

import threading


class AtomicLong:
    """Integer cell with atomic get, set and compare_and_set."""

    __slots__ = ("_value", "_guard")

    def __init__(self, value: int = 0):
        self._value = value
        self._guard = threading.Lock()

    def get(self) -> int:
        return self._value

    def set(self, value: int) -> None:
        with self._guard:
            self._value = value

    def compare_and_set(self, expect: int, update: int) -> bool:
        """Store `update` only if the current value equals `expect`."""
        with self._guard:
            if self._value != expect:
                return False
            self._value = update
            return True

    def __repr__(self):
        return f"AtomicLong({self._value})"
