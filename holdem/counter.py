"""A direct-address frequency table keyed by small non-negative integers."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_SIZE = 7


@dataclass
class Entry:
    key: int
    frequency: int = 1


class FrequencyTable:
    """Counts occurrences of keys in ``range(size)``, one slot per key."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        self.size = size
        self._slots: list[Entry | None] = [None] * size

    def _slot(self, key: int) -> int:
        if not 0 <= key < self.size:
            raise IndexError(f"key {key} outside table of size {self.size}")
        return key

    def insert(self, key: int) -> None:
        """Record one occurrence of ``key``."""
        index = self._slot(key)
        entry = self._slots[index]
        if entry is None:
            self._slots[index] = Entry(key)
        elif entry.key == key:
            entry.frequency += 1

    def find(self, key: int) -> Entry | None:
        """Return the entry for ``key``, or ``None`` if it was never inserted."""
        entry = self._slots[self._slot(key)]
        if entry is not None and entry.key == key:
            return entry
        return None