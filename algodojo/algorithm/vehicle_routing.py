"""Exact vehicle routing via a giant-tour subset dynamic programme."""

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


def solve(
    vehicle_count: int, points: Sequence[Point]
) -> tuple[float, list[list[int]]]:
    """Split the stops among vehicles to minimise the total route length.

    Each vehicle starts at any stop. Returns the total length and the
    ordered stops of each vehicle.
    """
    m = vehicle_count
    n = len(points)
    if m < 1:
        raise ValueError("at least one vehicle is required")
    if n == 0:
        raise ValueError("at least one point is required")

    dist = _distances(points)
    full = (1 << n) - 1
    dp = [[[math.inf] * n for _ in range(m)] for _ in range(1 << n)]
    dp[0][0] = [0.0] * n

    for i in range(1 << n):
        for j in range(m):
            for k in range(n):
                cost = dp[i][j][k]
                if math.isinf(cost):
                    continue
                for l in range(n):
                    if i & (1 << l):
                        continue
                    ii = i | (1 << l)
                    dp[ii][j][l] = min(dp[ii][j][l], cost + dist[k][l])
                    if j + 1 < m:
                        # Switch vehicle, staying put or jumping to a new stop.
                        for mask, stop in ((i, k), (ii, l)):
                            dp[mask][j + 1][stop] = min(dp[mask][j + 1][stop], cost)

    k, y = min(enumerate(dp[full][m - 1]), key=lambda kx: _float_key(kx[1]))
    return y, _reconstruct(m, dist, dp, k, y)


def _reconstruct(
    m: int,
    dist: list[list[float]],
    dp: list[list[list[float]]],
    k: int,
    y: float,
) -> list[list[int]]:
    routes: list[list[int]] = [[] for _ in range(m)]
    mask = len(dp) - 1
    j = m - 1

    while mask > 0:
        routes[j].append(k)
        mask &= ~(1 << k)

        candidates = [
            (j, kk, x, y - x - dist[kk][k]) for kk, x in enumerate(dp[mask][j])
        ]
        if j > 0:
            candidates.extend(
                (j - 1, kk, x, y - x) for kk, x in enumerate(dp[mask][j - 1])
            )
        j, k, y, _ = min(candidates, key=lambda c: _float_key(abs(c[3])))

    for route in routes:
        route.reverse()
    return routes