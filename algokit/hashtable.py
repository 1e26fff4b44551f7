"""Fixed-size hash table with separate chaining."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Tuple

TABLE_SIZE = 10


@dataclass
class _Entry:
    key: int
    value: Any


class HashTable:
    """Integer-keyed map over ten chained buckets; new keys go to the bucket head."""

    def __init__(self) -> None:
        self._buckets: List[List[_Entry]] = [[] for _ in range(TABLE_SIZE)]
        self._size = 0

    def _chain(self, key: int) -> List[_Entry]:
        return self._buckets[key % TABLE_SIZE]

    def __setitem__(self, key: int, value: Any) -> None:
        chain = self._chain(key)
        for entry in chain:
            if entry.key == key:
                entry.value = value
                return
        chain.insert(0, _Entry(key, value))
        self._size += 1

    def __getitem__(self, key: int) -> Any:
        for entry in self._chain(key):
            if entry.key == key:
                return entry.value
        raise KeyError(key)

    def __delitem__(self, key: int) -> None:
        if not self.remove(key):
            raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        return any(entry.key == key for entry in self._chain(key))

    def __len__(self) -> int:
        return self._size

    def get(self, key: int, default: Any = None) -> Any:
        """Return the value for ``key``, or ``default`` when it is absent."""
        try:
            return self[key]
        except KeyError:
            return default

    def remove(self, key: int) -> bool:
        """Remove ``key``; return whether it was present."""
        chain = self._chain(key)
        for position, entry in enumerate(chain):
            if entry.key == key:
                del chain[position]
                self._size -= 1
                return True
        return False

    def bucket(self, index: int) -> List[Tuple[int, Any]]:
        """Return the (key, value) pairs of one bucket in chain order."""
        if not 0 <= index < TABLE_SIZE:
            raise IndexError(f"bucket index {index} out of range")
        return [(entry.key, entry.value) for entry in self._buckets[index]]

    def render(self) -> str:
        """Describe every bucket, one line each."""
        lines = []
        for index, chain in enumerate(self._buckets):
            links = "".join(f"[{entry.key}:{entry.value}] -> " for entry in chain)
            lines.append(f"Bucket {index}: {links}None")
        return "\n".join(lines)