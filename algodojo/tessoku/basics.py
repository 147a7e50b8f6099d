"""Introductory counting, search and prefix-sum problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate, combinations, product

Interval = tuple[int, int]


def square(n: int) -> int:
    """Return ``n`` squared."""
    return n * n


def contains(xs: Iterable[int], y: int) -> bool:
    """Whether ``y`` is one of ``xs``."""
    return y in xs


def has_pair_sum(ps: Iterable[int], qs: Iterable[int], k: int) -> bool:
    """Whether some ``p`` from ``ps`` and ``q`` from ``qs`` add up to ``k``."""
    return any(p + q == k for p, q in product(ps, list(qs)))


def to_binary(n: int) -> str:
    """Write ``n`` in binary, padded with zeros to at least ten digits."""
    if n < 0:
        raise ValueError("n must not be negative")
    return format(n, "010b")


def count_triples(n: int, k: int) -> int:
    """Count triples of values in ``1..n`` whose sum is ``k``."""
    return sum(
        1
        for x in range(1, n + 1)
        for y in range(1, n + 1)
        if 1 <= k - x - y <= n
    )


def _check_ranges(queries: Iterable[Interval], size: int) -> list[Interval]:
    checked = list(queries)
    for left, right in checked:
        if not 1 <= left <= right <= size:
            raise ValueError(f"range {left}..{right} is outside 1..{size}")
    return checked


def range_sums(xs: Sequence[int], queries: Iterable[Interval]) -> list[int]:
    """Sum ``xs`` over each inclusive, 1-based range ``(left, right)``."""
    prefix = [0, *accumulate(xs)]
    return [
        prefix[right] - prefix[left - 1]
        for left, right in _check_ranges(queries, len(xs))
    ]


def attendance(days: int, intervals: Iterable[Interval]) -> list[int]:
    """Count, for each day, the visitors present that day.

    Each interval is an inclusive, 1-based range of days.
    """
    diff = [0] * (days + 1)
    for left, right in _check_ranges(intervals, days):
        diff[left - 1] += 1
        diff[right] -= 1
    return list(accumulate(diff[:days]))


def add(n: int, m: int) -> int:
    """Return ``n + m``."""
    return n + m


def has_divisor_of_hundred(n: int, m: int) -> bool:
    """Whether some integer in ``n..m`` divides 100."""
    if n < 1:
        raise ValueError("range must start at 1 or above")
    return any(100 % i == 0 for i in range(n, m + 1))


def has_triple_of_thousand(xs: Iterable[int]) -> bool:
    """Whether three values at distinct positions add up to 1000."""
    return any(sum(triple) == 1000 for triple in combinations(xs, 3))


def from_binary(s: str) -> int:
    """Read a binary string; any character other than ``0`` counts as 1."""
    value = 0
    for ch in s:
        value = value * 2 + (ch != "0")
    return value


def judge_ranges(xs: Sequence[int], queries: Iterable[Interval]) -> list[str]:
    """Judge each 1-based inclusive range of 0/1 results.

    Returns ``"win"`` where ones outnumber zeros, ``"lose"`` where zeros
    outnumber ones and ``"draw"`` otherwise.
    """
    if any(x not in (0, 1) for x in xs):
        raise ValueError("results must be 0 or 1")
    wins = [0, *accumulate(xs)]
    verdicts = []
    for left, right in _check_ranges(queries, len(xs)):
        won = wins[right] - wins[left - 1]
        lost = right - left + 1 - won
        if won == lost:
            verdicts.append("draw")
        elif won < lost:
            verdicts.append("lose")
        else:
            verdicts.append("win")
    return verdicts


def shop_occupancy(t: int, intervals: Iterable[Interval]) -> list[int]:
    """Count the people inside at each time ``0..t-1``.

    A person with interval ``(arrive, leave)`` is present from ``arrive``
    up to but not including ``leave``.
    """
    diff = [0] * (t + 1)
    for arrive, leave in intervals:
        if not 0 <= arrive <= t or not 0 <= leave <= t:
            raise ValueError(f"interval {arrive}..{leave} is outside 0..{t}")
        diff[arrive] += 1
        diff[leave] -= 1
    return list(accumulate(diff[:t]))