"""Exact travelling salesman tours by dynamic programming over subsets."""

from __future__ import annotations

import math
from collections.abc import Sequence

Point = tuple[float, float]


def _distances(points: Sequence[Point]) -> list[list[float]]:
    return [
        [math.sqrt((ax - bx) ** 2 + (ay - by) ** 2) for bx, by in points]
        for ax, ay in points
    ]


def _float_key(value: float) -> tuple[bool, float]:
    return (math.isnan(value), value)


def solve(points: Sequence[Point]) -> tuple[float, list[int]]:
    """Return the length of the shortest closed tour and its stop order.

    The tour starts and ends at stop 0.
    """
    n = len(points)
    if n == 0:
        raise ValueError("at least one point is required")

    dist = _distances(points)
    full = (1 << n) - 1
    dp = [[math.inf] * n for _ in range(1 << n)]
    dp[0][0] = 0.0

    for mask, row in enumerate(dp):
        for j, cost in enumerate(row):
            if math.isinf(cost):
                continue
            for k in range(n):
                if mask & (1 << k):
                    continue
                nxt = dp[mask | (1 << k)]
                nxt[k] = min(nxt[k], cost + dist[j][k])

    return dp[full][0], _reconstruct(dp, dist, full)


def _reconstruct(
    dp: list[list[float]], dist: list[list[float]], full: int
) -> list[int]:
    order: list[int] = []
    mask, j = full, 0
    y = dp[mask][j]

    while mask > 0:
        mask &= ~(1 << j)
        target = j
        j, y = min(
            enumerate(dp[mask]),
            key=lambda kx: _float_key(abs(y - kx[1] - dist[kx[0]][target])),
        )
        order.append(j)

    order.reverse()
    return order