"""Binary search over a sorted sequence."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, NamedTuple


class SearchResult(NamedTuple):
    """Outcome of a search: whether the value was found and its index.

    When not found, ``index`` is where the value could be inserted to keep
    the sequence sorted.
    """

    found: bool
    index: int


def binary_search(xs: Sequence[Any], y: Any) -> SearchResult:
    """Search the sorted sequence ``xs`` for ``y``."""
    left, right = 0, len(xs)

    while left < right:
        middle = (left + right) // 2
        x = xs[middle]
        if x == y:
            return SearchResult(True, middle)
        if x < y:
            left = middle + 1
        else:
            right = middle

    return SearchResult(False, left)