"""A least-recently-used cache with a fixed capacity."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Hashable
from typing import Any


class LruCache:
    """Map keys to values, evicting the least recently used key.

    Every lookup, hit or miss, marks the key as recently used. An insert
    that pushes the number of tracked keys past the capacity evicts the
    oldest one.
    """

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self._recency: OrderedDict[Hashable, None] = OrderedDict()
        self._values: dict[Hashable, Any] = {}

    def get(self, key: Hashable) -> Any | None:
        """Return the value for ``key``, or ``None`` when absent."""
        self._touch(key)
        return self._values.get(key)

    def insert(self, key: Hashable, value: Any) -> None:
        """Store ``value`` under ``key``."""
        self._touch(key)
        self._values[key] = value
        if len(self._recency) > self.capacity:
            oldest, _ = self._recency.popitem(last=False)
            self._values.pop(oldest, None)

    def _touch(self, key: Hashable) -> None:
        self._recency.pop(key, None)
        self._recency[key] = None