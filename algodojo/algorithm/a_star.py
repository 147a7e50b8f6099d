"""A* shortest-path search over a weighted adjacency list."""

from __future__ import annotations

import heapq
from collections.abc import Callable, Iterable, Mapping, Sequence


def search(
    start: int,
    end: int,
    nodes: Sequence[Iterable[tuple[int, int]]],
    h: Callable[[int], int],
) -> tuple[int, list[int]] | None:
    """Find the cheapest path from ``start`` to ``end``.

    ``nodes[i]`` holds ``(neighbour, weight)`` pairs and ``h`` is the
    heuristic estimate of the remaining cost from a node. Returns the total
    cost and the path, or ``None`` when ``end`` cannot be reached.
    """
    open_heap: list[tuple[int, int]] = [(h(start), start)]
    closed: set[int] = set()
    came_from: dict[int, int] = {}
    g: dict[int, int] = {start: 0}

    while open_heap:
        _, i = heapq.heappop(open_heap)
        closed.add(i)

        if i == end:
            return g[end], _reconstruct(end, came_from)

        for j, w in nodes[i]:
            cost = g[i] + w
            if j not in g or cost < g[j]:
                came_from[j] = i
                g[j] = cost
                if j not in closed:
                    heapq.heappush(open_heap, (cost + h(j), j))

    return None


def _reconstruct(i: int, came_from: Mapping[int, int]) -> list[int]:
    path = [i]
    while i in came_from:
        i = came_from[i]
        path.append(i)
    path.reverse()
    return path