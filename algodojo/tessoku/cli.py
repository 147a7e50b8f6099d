"""Command-line solver that reads a problem's input and prints its answer."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence
from decimal import Decimal

from algodojo.tessoku.basics import judge_ranges, square
from algodojo.tessoku.dp_paths import min_dungeon_route
from algodojo.tessoku.dp_sets import shortest_tour, subset_sum_choice
from algodojo.tessoku.graphs import (
    UnionFind,
    adjacency_list,
    dijkstra,
    offline_connectivity,
)


class _Tokens:
    """Whitespace-separated tokens of an input text, read in order."""

    def __init__(self, text: str) -> None:
        self._tokens: Iterator[str] = iter(text.split())

    def _next(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def int(self) -> int:
        token = self._next()
        try:
            value = int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None
        if value < 0:
            raise ValueError(f"expected a non-negative integer, got {value}")
        return value

    def index(self) -> int:
        """Read a 1-based number and return it counted from 0."""
        value = self.int()
        if value < 1:
            raise ValueError("expected a number of 1 or more")
        return value - 1

    def float(self) -> float:
        token = self._next()
        try:
            return float(token)
        except ValueError:
            raise ValueError(f"expected a number, got {token!r}") from None

    def ints(self, count: int) -> list[int]:
        return [self.int() for _ in range(count)]


def _format_float(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def _square(tokens: _Tokens) -> str:
    return f"{square(tokens.int())}\n"


def _dungeon_route(tokens: _Tokens) -> str:
    n = tokens.int()
    if n < 2:
        raise ValueError("the dungeon needs at least two rooms")
    ls = tokens.ints(n - 1)
    ms = tokens.ints(n - 2)
    route = min_dungeon_route(ls, ms)
    return f"{len(route)}\n" + "".join(f"{room} " for room in route)


def _adjacency(tokens: _Tokens) -> str:
    n, m = tokens.int(), tokens.int()
    edges = [(tokens.index(), tokens.index()) for _ in range(m)]
    lines = []
    for i, neighbours in enumerate(adjacency_list(n, edges), start=1):
        inner = ", ".join(str(v + 1) for v in sorted(neighbours))
        lines.append(f"{i}: {{{inner}}}\n")
    return "".join(lines)


def _shortest_paths(tokens: _Tokens) -> str:
    n, m = tokens.int(), tokens.int()
    edges = [(tokens.index(), tokens.index(), tokens.int()) for _ in range(m)]
    return "".join(
        f"{-1 if d is None else d}\n" for d in dijkstra(n, edges)
    )


def _union_queries(tokens: _Tokens) -> str:
    n, q = tokens.int(), tokens.int()
    sets = UnionFind(n)
    out = []
    for _ in range(q):
        kind, i, j = tokens.index(), tokens.index(), tokens.index()
        if kind == 0:
            sets.union(i, j)
        else:
            out.append(f"{'Yes' if sets.connected(i, j) else 'No'} \n")
    return "".join(out)


def _judge(tokens: _Tokens) -> str:
    n = tokens.int()
    xs = tokens.ints(n)
    m = tokens.int()
    queries = [(tokens.int(), tokens.int()) for _ in range(m)]
    return "".join(f"{verdict}\n" for verdict in judge_ranges(xs, queries))


def _subset_choice(tokens: _Tokens) -> str:
    n, target = tokens.int(), tokens.int()
    xs = tokens.ints(n)
    chosen = subset_sum_choice(xs, target)
    if chosen is None:
        return "-1\n"
    return f"{len(chosen)}\n" + "".join(f"{i} " for i in chosen)


def _tour(tokens: _Tokens) -> str:
    n = tokens.int()
    points = [(tokens.float(), tokens.float()) for _ in range(n)]
    return f"{_format_float(shortest_tour(points))}\n"


def _cut_queries(tokens: _Tokens) -> str:
    n, m = tokens.int(), tokens.int()
    edges = [(tokens.index(), tokens.index()) for _ in range(m)]
    q = tokens.int()
    queries = []
    for _ in range(q):
        length = tokens.int()
        queries.append(tuple(tokens.index() for _ in range(length)))
    for query in queries:
        if len(query) == 1 and not query[0] < m:
            raise ValueError(f"no edge numbered {query[0] + 1}")
    answers = offline_connectivity(n, edges, queries)
    return "".join(f"{'Yes' if a else 'No'} \n" for a in answers)


_PROBLEMS: dict[str, Callable[[_Tokens], str]] = {
    "a1": _square,
    "a17": _dungeon_route,
    "a61": _adjacency,
    "a64": _shortest_paths,
    "a66": _union_queries,
    "b6": _judge,
    "b18": _subset_choice,
    "b23": _tour,
    "b66": _cut_queries,
}


def run(problem: str, text: str) -> str:
    """Solve ``problem`` for the input ``text`` and return the printed answer."""
    try:
        solver = _PROBLEMS[problem]
    except KeyError:
        raise ValueError(f"unknown problem {problem!r}") from None
    return solver(_Tokens(text))


def main(argv: Sequence[str] | None = None) -> int:
    """Read a problem's input from standard input and print the answer."""
    parser = argparse.ArgumentParser(
        prog="algodojo", description="Solve a problem read from standard input."
    )
    parser.add_argument("problem", choices=sorted(_PROBLEMS))
    args = parser.parse_args(argv)
    try:
        output = run(args.problem, sys.stdin.read())
    except (ValueError, IndexError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0