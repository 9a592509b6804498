"""Hash table of integers resolving collisions by separate chaining."""

from __future__ import annotations


class ChainedHashTable:
    """Fixed number of buckets, each a chain of the keys that hash to it."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("the table needs at least one bucket")
        self._size = size
        self._chains: list[list[int]] = [[] for _ in range(size)]

    def hash(self, key: int) -> int:
        """Return the remainder of ``key`` by the table size, keeping the key's sign."""
        remainder = abs(key) % self._size
        return -remainder if key < 0 else remainder

    def _bucket(self, key: int) -> list[int]:
        return self._chains[abs(self.hash(key))]

    def add(self, key: int) -> None:
        """Append ``key`` to the end of its bucket's chain."""
        self._bucket(key).append(key)

    def find(self, key: int) -> bool:
        """Return True if ``key`` has been added."""
        return key in self._bucket(key)

    def buckets(self) -> list[list[int]]:
        """Return a copy of every chain, in bucket order."""
        return [list(chain) for chain in self._chains]

    def display(self) -> str:
        """Describe every bucket on its own line."""
        lines = []
        for index, chain in enumerate(self._chains):
            if chain:
                values = " ".join(str(key) for key in chain)
                lines.append(f"Key {index} has values = {values}")
            else:
                lines.append(f"Key {index} is empty")
        return "\n".join(lines)