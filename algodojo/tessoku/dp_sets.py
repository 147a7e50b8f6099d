"""Dynamic programmes over choices: subset sums, knapsacks and strings."""

from __future__ import annotations

from collections.abc import Sequence

from algodojo.algorithm.traveling_salesman import solve as _solve_tour

Item = tuple[int, int]


def _check_target(target: int) -> None:
    if target < 0:
        raise ValueError("the target must not be negative")


def _subset_table(xs: Sequence[int], target: int) -> list[list[bool]]:
    _check_target(target)
    if any(x < 0 for x in xs):
        raise ValueError("values must not be negative")
    rows = [[j == 0 for j in range(target + 1)]]
    for x in xs:
        prev = rows[-1]
        rows.append(
            [prev[j] or (j >= x and prev[j - x]) for j in range(target + 1)]
        )
    return rows


def subset_sum_exists(xs: Sequence[int], target: int) -> bool:
    """Whether some of ``xs``, each used at most once, add up to ``target``."""
    return any(row[target] for row in _subset_table(xs, target))


def subset_sum(xs: Sequence[int], target: int) -> bool:
    """Whether a subset of ``xs`` sums exactly to ``target``."""
    return _subset_table(xs, target)[-1][target]


def subset_sum_choice(xs: Sequence[int], target: int) -> list[int] | None:
    """Positions, numbered from 1, of values summing to ``target``.

    Returns ``None`` when no subset adds up to ``target``.
    """
    rows = _subset_table(xs, target)
    i = next((i for i, row in enumerate(rows) if row[target]), None)
    if i is None:
        return None

    chosen: list[int] = []
    j = target
    while j > 0:
        if not rows[i - 1][j]:
            chosen.append(i)
            j -= xs[i - 1]
        i -= 1
    chosen.reverse()
    return chosen


def unbounded_subset_sum(xs: Sequence[int], target: int) -> bool:
    """Whether ``target`` is a sum of ``xs`` with each value used any number of times."""
    _check_target(target)
    if any(x <= 0 for x in xs):
        raise ValueError("values must be positive")

    reachable = [j == 0 for j in range(target + 1)]
    for x in xs:
        prev = reachable
        reachable = [
            any(prev[j - k * x] for k in range(target // x + 1) if k * x <= j)
            for j in range(target + 1)
        ]
    return reachable[target]


def knapsack_max_value(items: Sequence[Item], capacity: int) -> int:
    """Largest total value of ``(weight, value)`` items within ``capacity``."""
    _check_target(capacity)
    best: list[int | None] = [None] * (capacity + 1)
    best[0] = 0
    for weight, value in items:
        prev = best
        best = []
        for j, kept in enumerate(prev):
            taken = prev[j - weight] if j >= weight else None
            options = [x for x in (kept, None if taken is None else taken + value)
                       if x is not None]
            best.append(max(options) if options else None)
    return max(x for x in best if x is not None)


def knapsack(items: Sequence[Item], capacity: int) -> int:
    """Largest total value of ``(weight, value)`` items within ``capacity``."""
    _check_target(capacity)
    best = [0] * (capacity + 1)
    for weight, value in items:
        prev = best
        best = [
            max(prev[j], prev[j - weight] + value if j >= weight else 0)
            for j in range(capacity + 1)
        ]
    return max(best)


def knapsack_by_value(items: Sequence[Item], capacity: int) -> int:
    """Largest value within ``capacity``, computed over total values.

    Suits items with large weights and small values.
    """
    _check_target(capacity)
    total = sum(value for _, value in items)
    lightest: list[int | None] = [None] * (total + 1)
    lightest[0] = 0
    for weight, value in items:
        prev = lightest
        lightest = []
        for j, kept in enumerate(prev):
            taken = prev[j - value] if j >= value else None
            options = [x for x in (kept, None if taken is None else taken + weight)
                       if x is not None]
            lightest.append(min(options) if options else None)
    return max(
        j for j, weight in enumerate(lightest) if weight is not None and weight <= capacity
    )


def longest_common_subsequence(s: Sequence, t: Sequence) -> int:
    """Length of the longest common subsequence of ``s`` and ``t``."""
    prev = [0] * (len(t) + 1)
    for a in s:
        row = [0]
        for j, b in enumerate(t, start=1):
            row.append(prev[j - 1] + 1 if a == b else max(row[j - 1], prev[j]))
        prev = row
    return prev[-1]


def edit_distance(s: Sequence, t: Sequence) -> int:
    """Fewest insertions, deletions and replacements turning ``s`` into ``t``."""
    prev = list(range(len(t) + 1))
    for i, a in enumerate(s, start=1):
        row = [i]
        for j, b in enumerate(t, start=1):
            row.append(
                min(
                    prev[j - 1] + (a != b),
                    prev[j] + 1,
                    row[j - 1] + 1,
                )
            )
        prev = row
    return prev[-1]


def longest_palindromic_subsequence(s: Sequence) -> int:
    """Length of the longest subsequence of ``s`` that is a palindrome."""
    n = len(s)
    if n == 0:
        return 0
    dp = [[0] * n for _ in range(n)]
    for i in reversed(range(n)):
        dp[i][i] = 1
        for j in range(i + 1, n):
            dp[i][j] = max(
                dp[i + 1][j - 1] + (2 if s[i] == s[j] else 0),
                dp[i + 1][j],
                dp[i][j - 1],
            )
    return dp[0][n - 1]


def block_game(blocks: Sequence[Item]) -> int:
    """Best score removing blocks from either end of a row.

    Removing block ``(target, points)`` scores ``points`` if the block at
    index ``target`` (from 0) is still in the row.
    """
    n = len(blocks)

    def gain(i: int, j: int, target: int, points: int) -> int:
        return points if i <= target < n - j else 0

    dp = [[0] * (n + 1) for _ in range(n + 1)]
    best = 0
    for i in range(n + 1):
        for j in range(n + 1 - i):
            if i == 0 and j == 0:
                continue
            options = []
            if i > 0:
                options.append(dp[i - 1][j] + gain(i, j, *blocks[i - 1]))
            if j > 0:
                options.append(dp[i][j - 1] + gain(i, j, *blocks[n - j]))
            dp[i][j] = max(options)
            best = max(best, dp[i][j])
    return best


def shortest_tour(points: Sequence[tuple[float, float]]) -> float:
    """Length of the shortest closed tour through every point."""
    return _solve_tour(points)[0]