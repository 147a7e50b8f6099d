"""Array problems: pair sums, medians, Pascal's triangle and marble bags."""

from __future__ import annotations

from collections.abc import Sequence


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices of two values summing to ``target``, or ``[]``."""
    seen: dict[int, int] = {}
    for i, x in enumerate(nums):
        j = seen.get(target - x)
        if j is not None:
            return [j, i]
        seen[x] = i
    return []


def find_median_sorted_arrays(xs: Sequence[int], ys: Sequence[int]) -> float:
    """Return the median of the values of both sorted sequences."""
    zs = sorted([*xs, *ys])
    if not zs:
        raise ValueError("cannot take the median of no values")
    return (zs[(len(zs) - 1) // 2] + zs[len(zs) // 2]) / 2


def pascal_triangle(row_count: int) -> list[list[int]]:
    """Return the first ``row_count`` rows of Pascal's triangle."""
    rows: list[list[int]] = []
    for _ in range(row_count):
        if not rows:
            rows.append([1])
        else:
            previous = rows[-1]
            rows.append([a + b for a, b in zip([0, *previous], [*previous, 0])])
    return rows


def marble_bag(weights: Sequence[int], bag_count: int) -> int:
    """Difference between the largest and smallest total cost of a split.

    The marbles are divided into ``bag_count`` contiguous bags, each costing
    the sum of its first and last weights.
    """
    if not weights:
        raise ValueError("at least one weight is required")
    if not 1 <= bag_count <= len(weights):
        raise ValueError("bag count must be between 1 and the number of weights")

    pairs = sorted(a + b for a, b in zip(weights, weights[1:]))
    cuts = bag_count - 1
    return sum(pairs[len(pairs) - cuts :]) - sum(pairs[:cuts])