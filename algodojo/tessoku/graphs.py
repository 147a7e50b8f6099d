"""Graph problems on vertices numbered from 0: search, paths and union-find."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Sequence

Edge = tuple[int, int]
WeightedEdge = tuple[int, int, int]


class UnionFind:
    """Disjoint sets with union by size."""

    def __init__(self, n: int) -> None:
        self._parents: list[int | None] = [None] * n
        self._sizes = [1] * n

    def union(self, x: int, y: int) -> None:
        """Merge the sets holding ``x`` and ``y``."""
        x, y = self.root(x), self.root(y)
        if x == y:
            return
        if self._sizes[x] > self._sizes[y]:
            x, y = y, x
        self._parents[x] = y
        self._sizes[y] += self._sizes[x]

    def root(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        parent = self._parents[x]
        while parent is not None:
            x = parent
            parent = self._parents[x]
        return x

    def connected(self, x: int, y: int) -> bool:
        """Whether ``x`` and ``y`` are in the same set."""
        return self.root(x) == self.root(y)


def adjacency_list(n: int, edges: Iterable[Edge]) -> list[set[int]]:
    """Build the neighbour sets of an undirected graph."""
    neighbours: list[set[int]] = [set() for _ in range(n)]
    for u, v in edges:
        neighbours[u].add(v)
        neighbours[v].add(u)
    return neighbours


def is_connected(n: int, edges: Iterable[Edge]) -> bool:
    """Whether every vertex can be reached from vertex 0."""
    if n < 1:
        raise ValueError("the graph needs at least one vertex")
    neighbours = adjacency_list(n, edges)
    seen = {0}
    stack = [0]
    while stack:
        for v in neighbours[stack.pop()]:
            if v not in seen:
                seen.add(v)
                stack.append(v)
    return len(seen) == n


def bfs_distances(n: int, edges: Iterable[Edge]) -> list[int | None]:
    """Edge counts of shortest paths from vertex 0, ``None`` if unreachable."""
    if n < 1:
        raise ValueError("the graph needs at least one vertex")
    neighbours = adjacency_list(n, edges)
    distances: list[int | None] = [None] * n
    distances[0] = 0
    queue = deque([0])
    while queue:
        u = queue.popleft()
        for v in neighbours[u]:
            if distances[v] is None:
                distances[v] = distances[u] + 1
                queue.append(v)
    return distances


def dijkstra(n: int, edges: Iterable[WeightedEdge]) -> list[int | None]:
    """Shortest path lengths from vertex 0, ``None`` if unreachable.

    Edges are undirected ``(u, v, weight)``; a repeated edge keeps the last
    weight given.
    """
    if n < 1:
        raise ValueError("the graph needs at least one vertex")
    weights: list[dict[int, int]] = [{} for _ in range(n)]
    for u, v, w in edges:
        weights[u][v] = w
        weights[v][u] = w

    distances: list[int | None] = [None] * n
    distances[0] = 0
    done = [False] * n
    heap = [(0, 0)]
    while heap:
        cost, u = heapq.heappop(heap)
        if done[u]:
            continue
        done[u] = True
        for v, w in weights[u].items():
            candidate = cost + w
            current = distances[v]
            if current is None or candidate < current:
                distances[v] = candidate
                heapq.heappush(heap, (candidate, v))
    return distances


def subordinate_counts(bosses: Sequence[int]) -> list[int]:
    """Count every employee's direct and indirect subordinates.

    ``bosses[i]`` is the boss of employee ``i + 1``; a boss always has a
    smaller number than their subordinates. Employee 0 has no boss.
    """
    counts = [0] * (len(bosses) + 1)
    for employee, boss in reversed(list(enumerate(bosses, start=1))):
        counts[boss] += counts[employee] + 1
    return counts


def subtree_heights(n: int, root: int, edges: Iterable[Edge]) -> list[int | None]:
    """Height of each vertex's subtree when the tree hangs from ``root``.

    Vertices that cannot be reached from ``root`` get ``None``.
    """
    neighbours = adjacency_list(n, edges)
    heights: list[int | None] = [None] * n
    heights[root] = 0
    stack = [(root, iter(neighbours[root]))]
    while stack:
        node, children = stack[-1]
        for child in children:
            if heights[child] is None:
                heights[child] = 0
                stack.append((child, iter(neighbours[child])))
                break
        else:
            stack.pop()
            if stack:
                parent = stack[-1][0]
                heights[parent] = max(heights[parent], heights[node] + 1)
    return heights


def offline_connectivity(
    n: int, edges: Sequence[Edge], queries: Iterable[tuple[int, ...]]
) -> list[bool]:
    """Answer connectivity questions while edges are cut one by one.

    A query ``(edge,)`` cuts the edge with that index; a query ``(u, v)``
    asks whether ``u`` and ``v`` are still connected. Returns the answers
    to the questions in order.
    """
    queries = list(queries)
    if any(len(query) not in (1, 2) for query in queries):
        raise ValueError("a query holds either one edge index or two vertices")

    cut = {query[0] for query in queries if len(query) == 1}
    sets = UnionFind(n)
    for index, (u, v) in enumerate(edges):
        if index not in cut:
            sets.union(u, v)

    answers = []
    for query in reversed(queries):
        if len(query) == 1:
            sets.union(*edges[query[0]])
        else:
            answers.append(sets.connected(*query))
    answers.reverse()
    return answers