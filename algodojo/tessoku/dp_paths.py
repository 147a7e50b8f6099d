"""Dynamic programmes over paths: dungeons, jumps, grids and sequences."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence

_SCORE_A = 100
_SCORE_B = 150


def _step_costs(step1: Sequence[int], step2: Sequence[int]) -> list[int]:
    """Cheapest cost to reach each room moving one or two rooms at a time.

    ``step1[i]`` is the cost from room ``i`` to ``i + 1`` and ``step2[i]``
    the cost from room ``i`` to ``i + 2``.
    """
    if len(step2) != max(len(step1) - 1, 0):
        raise ValueError("two-room costs must number one fewer than one-room costs")

    costs = [0] * (len(step1) + 1)
    for i in range(1, len(costs)):
        best = costs[i - 1] + step1[i - 1]
        if i >= 2:
            best = min(best, costs[i - 2] + step2[i - 2])
        costs[i] = best
    return costs


def _route(costs: Sequence[int], step1: Sequence[int]) -> list[int]:
    route = [len(costs) - 1]
    while (i := route[-1]) > 0:
        route.append(i - 1 if costs[i] == costs[i - 1] + step1[i - 1] else i - 2)
    return [room + 1 for room in reversed(route)]


def min_dungeon_cost(ls: Sequence[int], ms: Sequence[int]) -> int:
    """Least total time to walk from the first room to the last.

    ``ls[i]`` is the time from room ``i`` to room ``i + 1`` and ``ms[i]``
    the time from room ``i`` to room ``i + 2``.
    """
    return _step_costs(ls, ms)[-1]


def min_dungeon_route(ls: Sequence[int], ms: Sequence[int]) -> list[int]:
    """Rooms, numbered from 1, visited on a quickest walk through the dungeon."""
    return _route(_step_costs(ls, ms), ls)


def _jump_steps(heights: Sequence[int]) -> tuple[list[int], list[int]]:
    if not heights:
        raise ValueError("at least one height is required")
    step1 = [abs(a - b) for a, b in zip(heights, heights[1:])]
    step2 = [abs(a - b) for a, b in zip(heights, heights[2:])]
    return step1, step2


def min_jump_cost(heights: Sequence[int]) -> int:
    """Least total height change to hop to the last pillar, one or two at a time."""
    step1, step2 = _jump_steps(heights)
    return _step_costs(step1, step2)[-1]


def min_jump_route(heights: Sequence[int]) -> list[int]:
    """Pillars, numbered from 1, visited on a cheapest hop to the last one."""
    step1, step2 = _jump_steps(heights)
    return _route(_step_costs(step1, step2), step1)


def max_score_path(xs: Sequence[int], ys: Sequence[int]) -> int:
    """Highest score on reaching the last square.

    From square ``i`` one may move to ``xs[i]`` scoring 100 or to ``ys[i]``
    scoring 150; squares are numbered from 0.
    """
    if len(xs) != len(ys):
        raise ValueError("both move lists must have the same length")

    best: list[int | None] = [None] * (len(xs) + 1)
    best[0] = 0
    for i, moves in enumerate(zip(xs, ys)):
        for target, points in zip(moves, (_SCORE_A, _SCORE_B)):
            score = best[i]
            if score is None:
                continue
            current = best[target]
            if current is None or score + points > current:
                best[target] = score + points

    last = best[-1]
    if last is None:
        raise ValueError("the last square cannot be reached")
    return last


def min_coupons(item_count: int, coupons: Sequence[Sequence[int]]) -> int | None:
    """Fewest coupons covering every item, or ``None`` if impossible.

    Each coupon holds a 0/1 flag per item saying whether it covers that item.
    """
    masks = []
    for coupon in coupons:
        if len(coupon) != item_count:
            raise ValueError("every coupon needs one flag per item")
        masks.append(sum(flag << i for i, flag in enumerate(coupon)))

    fewest: list[int | None] = [None] * (1 << item_count)
    fewest[0] = 0
    for mask in range(len(fewest)):
        used = fewest[mask]
        if used is None:
            continue
        for coupon in masks:
            covered = mask | coupon
            current = fewest[covered]
            if current is None or used + 1 < current:
                fewest[covered] = used + 1
    return fewest[-1]


def longest_increasing_subsequence(xs: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for x in xs:
        i = bisect_left(tails, x)
        if i == len(tails):
            tails.append(x)
        else:
            tails[i] = x
    return len(tails)


def count_grid_paths(grid: Sequence[str]) -> int:
    """Count right/down paths from the top-left to the bottom-right cell.

    Cells marked ``#`` are walls.
    """
    if not grid or not grid[0]:
        raise ValueError("the grid must not be empty")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("every row must have the same width")

    above = [0] * width
    for r, row in enumerate(grid):
        current: list[int] = []
        for c, cell in enumerate(row):
            if cell == "#":
                ways = 0
            elif r == 0 and c == 0:
                ways = 1
            else:
                ways = above[c] + (current[-1] if current else 0)
            current.append(ways)
        above = current
    return above[-1]


def min_stairs_cost(xs: Sequence[int], ys: Sequence[int]) -> int:
    """Least cost to climb to the top step, going up one or two steps at a time.

    ``xs[i]`` is the cost from step ``i`` to ``i + 1`` and ``ys[i]`` from
    step ``i`` to ``i + 2``.
    """
    return _step_costs(xs, ys)[-1]