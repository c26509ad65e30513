"""Hash tables of integer keys using chaining and linear probing."""

from __future__ import annotations

import bisect


class TableFullError(Exception):
    """Raised when a key is inserted into a table with no free slot."""


def _check_size(size: int) -> None:
    if size < 1:
        raise ValueError(f"table size must be positive, got {size}")


class ChainedHashTable:
    """Keys hashed by ``key % size`` into sorted chains; duplicates are ignored."""

    def __init__(self, size: int = 10) -> None:
        _check_size(size)
        self.size = size
        self._chains: list[list[int]] = [[] for _ in range(size)]

    def _chain(self, key: int) -> list[int]:
        return self._chains[key % self.size]

    def insert(self, key: int) -> None:
        """Add key to its chain in sorted position unless it is already there."""
        chain = self._chain(key)
        if key not in chain:
            bisect.insort(chain, key)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and key in self._chain(key)

    def buckets(self) -> list[list[int]]:
        """A copy of every chain, by index."""
        return [list(chain) for chain in self._chains]

    def __str__(self) -> str:
        return "\n".join(
            f"Index {index}: " + "".join(f"{key} -> " for key in chain) + "None"
            for index, chain in enumerate(self._chains)
        )


class LinearProbingHashTable:
    """Keys hashed by ``key % size``, collisions resolved by trying the next slot."""

    def __init__(self, size: int = 10) -> None:
        _check_size(size)
        self.size = size
        self._slots: list[int | None] = [None] * size

    def _probe(self, key: int):
        start = key % self.size
        return ((start + step) % self.size for step in range(self.size))

    def insert(self, key: int) -> int:
        """Store key in the first free slot from its home slot; return that slot."""
        for index in self._probe(key):
            if self._slots[index] is None:
                self._slots[index] = key
                return index
        raise TableFullError(f"no free slot for {key}")

    def search(self, key: int) -> int:
        """Slot that holds key; raises KeyError if it is absent."""
        for index in self._probe(key):
            stored = self._slots[index]
            if stored is None:
                break
            if stored == key:
                return index
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        try:
            self.search(key)
        except KeyError:
            return False
        return True

    def slots(self) -> list[int | None]:
        """A copy of every slot; empty slots are None."""
        return list(self._slots)

    def __str__(self) -> str:
        return "\n".join(
            f"Index {index}: {'' if key is None else key}".rstrip()
            for index, key in enumerate(self._slots)
        )