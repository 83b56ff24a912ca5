"""String interning pool for identifier and type names."""

from __future__ import annotations

from typing import Iterator

TABLE_SIZE = 1024


def hash_string(name: str) -> int:
    """Return the bucket index of a name (djb-style hash, 32-bit, modulo table size)."""
    h = 0
    for byte in name.encode("utf-8"):
        h = ((h << 5) + h + byte) & 0xFFFFFFFF
    return h % TABLE_SIZE


class StringPool:
    """Stores one shared copy of each distinct string."""

    def __init__(self) -> None:
        self._buckets: list[list[str]] = [[] for _ in range(TABLE_SIZE)]

    def lookup(self, name: str) -> str:
        """Return the pooled copy of name, adding it if it is new."""
        bucket = self._buckets[hash_string(name)]
        for stored in bucket:
            if stored == name:
                return stored
        bucket.insert(0, name)
        return name

    def clear(self) -> None:
        """Drop every pooled string."""
        for bucket in self._buckets:
            bucket.clear()

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return name in self._buckets[hash_string(name)]

    def __iter__(self) -> Iterator[str]:
        for bucket in self._buckets:
            yield from bucket