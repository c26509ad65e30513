"""Graph traversals, a disjoint-set structure and minimum spanning trees."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Sequence
from operator import itemgetter


class DisjointSet:
    """Union-find over 0..size-1 with union by size."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        # A root holds minus its set's size; other elements hold their parent.
        self._parent = [-1] * size

    def find(self, x: int) -> int:
        """The representative of the set containing x."""
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} out of range")
        while self._parent[x] > -1:
            x = self._parent[x]
        return x

    def union(self, u: int, v: int) -> bool:
        """Join the sets of u and v; False if they were already together."""
        u, v = self.find(u), self.find(v)
        if u == v:
            return False
        parent = self._parent
        if parent[u] < parent[v]:
            parent[u] += parent[v]
            parent[v] = u
        else:
            parent[v] += parent[u]
            parent[u] = v
        return True


def _check_start(graph: Sequence[Sequence[int]], start: int) -> None:
    if not 0 <= start < len(graph):
        raise IndexError(f"start vertex {start} out of range")


def bfs(graph: Sequence[Sequence[int]], start: int) -> list[int]:
    """Breadth-first visiting order over an adjacency matrix."""
    _check_start(graph, start)
    visited = {start}
    order = [start]
    queue = deque([start])
    while queue:
        vertex = queue.popleft()
        for neighbour, edge in enumerate(graph[vertex]):
            if edge and neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                queue.append(neighbour)
    return order


def dfs(graph: Sequence[Sequence[int]], start: int) -> list[int]:
    """Depth-first visiting order over an adjacency matrix."""
    _check_start(graph, start)
    visited: set[int] = set()
    order: list[int] = []

    def visit(vertex: int) -> None:
        visited.add(vertex)
        order.append(vertex)
        for neighbour, edge in enumerate(graph[vertex]):
            if edge and neighbour not in visited:
                visit(neighbour)

    visit(start)
    return order


def prim_mst(graph: Sequence[Sequence[float | None]]) -> list[tuple[int, int, float]]:
    """Minimum spanning tree of a weighted adjacency matrix by Prim's method.

    A weight of None or infinity means there is no edge. Returns the tree's
    edges as (u, v, weight) in the order they were chosen.
    """
    n = len(graph)
    if n < 2:
        return []

    def weight(i: int, j: int) -> float:
        value = graph[i][j]
        return math.inf if value is None else value

    least = math.inf
    first: tuple[int, int] | None = None
    for i in range(n):
        for j in range(i, n):
            if weight(i, j) < least:
                least = weight(i, j)
                first = (i, j)
    if first is None:
        raise ValueError("graph has no edges")
    u, v = first
    tree = [(u, v, least)]

    # near[j] is the tree vertex closest to j, or None once j is in the tree.
    near: list[int | None] = [
        None if j in (u, v) else (u if weight(j, u) < weight(j, v) else v)
        for j in range(n)
    ]
    for _ in range(n - 2):
        outside = [j for j in range(n) if near[j] is not None]
        k = min(outside, key=lambda j: weight(j, near[j]))
        cost = weight(k, near[k])
        if cost == math.inf:
            raise ValueError("graph is not connected")
        tree.append((k, near[k], cost))
        near[k] = None
        for j in range(n):
            if near[j] is not None and weight(j, k) < weight(j, near[j]):
                near[j] = k
    return tree


def kruskal_mst(
    edges: Iterable[tuple[int, int, float]], vertex_count: int
) -> list[tuple[int, int, float]]:
    """Minimum spanning tree by Kruskal's method over (u, v, weight) edges."""
    needed = vertex_count - 1
    if needed <= 0:
        return []
    sets = DisjointSet(vertex_count)
    tree: list[tuple[int, int, float]] = []
    for u, v, w in sorted(edges, key=itemgetter(2)):
        if not (0 <= u < vertex_count and 0 <= v < vertex_count):
            raise ValueError(f"edge ({u}, {v}) names a vertex out of range")
        if sets.union(u, v):
            tree.append((u, v, w))
            if len(tree) == needed:
                return tree
    raise ValueError("graph is not connected")