"""Graph traversals, shortest paths and minimum spanning trees."""

from __future__ import annotations

import heapq
from collections import deque
from typing import Hashable, Iterable, Mapping, Sequence, Union

Adjacency = Union[Mapping[Hashable, Iterable[Hashable]], Sequence[Iterable[Hashable]]]


class DirectedGraph:
    """Directed graph on vertices numbered 1 to ``vertex_count``."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("the vertex count must not be negative")
        self._vertex_count = vertex_count
        self._edges: dict[int, list[int]] = {v: [] for v in range(1, vertex_count + 1)}

    def _check(self, vertex: int) -> int:
        if vertex not in self._edges:
            raise ValueError(
                f"vertex {vertex!r} is outside the range 1..{self._vertex_count}"
            )
        return vertex

    def add_edge(self, src: int, dest: int) -> None:
        """Add an edge from ``src`` to ``dest``."""
        self._edges[self._check(src)].append(self._check(dest))

    def adjacency(self) -> dict[int, list[int]]:
        """Return a copy of every vertex's out-neighbours, in insertion order."""
        return {vertex: list(targets) for vertex, targets in self._edges.items()}

    def bfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in breadth-first order."""
        visited = {self._check(start)}
        order: list[int] = []
        queue = deque([start])
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for target in self._edges[vertex]:
                if target not in visited:
                    visited.add(target)
                    queue.append(target)
        return order


def dfs_matrix(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Depth-first order from ``start`` over a square 0/1 adjacency matrix.

    Neighbours are tried in ascending index order.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("the adjacency matrix must be square")
    if not 0 <= start < size:
        raise ValueError(f"start vertex {start!r} is outside the range 0..{size - 1}")

    visited = [False] * size
    order: list[int] = []

    def visit(vertex: int) -> None:
        visited[vertex] = True
        order.append(vertex)
        for target, linked in enumerate(matrix[vertex]):
            if linked == 1 and not visited[target]:
                visit(target)

    visit(start)
    return order


def _neighbours(adjacency: Adjacency, vertex: Hashable) -> Iterable[Hashable]:
    if isinstance(adjacency, Mapping):
        return adjacency.get(vertex, ())
    if isinstance(vertex, int) and 0 <= vertex < len(adjacency):
        return adjacency[vertex]
    return ()


def dfs_stack(adjacency: Adjacency, start: Hashable) -> list[Hashable]:
    """Depth-first order from ``start`` using an explicit stack.

    All neighbours of a vertex are pushed in list order, so the last
    listed neighbour is explored first.
    """
    done: set[Hashable] = set()
    order: list[Hashable] = []
    stack = [start]
    while stack:
        vertex = stack.pop()
        if vertex in done:
            continue
        done.add(vertex)
        order.append(vertex)
        stack.extend(_neighbours(adjacency, vertex))
    return order


def dijkstra(
    adjacency: Mapping[Hashable, Iterable[tuple[Hashable, float]]],
    source: Hashable,
) -> dict[Hashable, float]:
    """Shortest distances from ``source``.

    ``adjacency`` maps each vertex to ``(neighbour, weight)`` pairs. Only
    reachable vertices appear in the result. Negative weights raise
    ValueError.
    """
    distances: dict[Hashable, float] = {source: 0}
    heap: list[tuple[float, int, Hashable]] = [(0, 0, source)]
    counter = 1
    while heap:
        dist, _, vertex = heapq.heappop(heap)
        if dist > distances[vertex]:
            continue
        for target, weight in adjacency.get(vertex, ()):
            if weight < 0:
                raise ValueError(f"negative edge weight {weight!r}")
            candidate = dist + weight
            if target not in distances or candidate < distances[target]:
                distances[target] = candidate
                heapq.heappush(heap, (candidate, counter, target))
                counter += 1
    return distances


def kruskal(node_count: int, edges: Iterable[tuple[int, int, float]]) -> float:
    """Total cost of a minimum spanning forest.

    ``edges`` holds ``(from, to, cost)`` triples; vertices may be numbered
    from 0 or 1 up to ``node_count``. Edges are taken by ascending cost,
    then by their endpoints.
    """
    if node_count < 0:
        raise ValueError("the node count must not be negative")
    ordered = sorted((cost, src, dest) for src, dest, cost in edges)
    parent: dict[int, int] = {}

    def root(vertex: int) -> int:
        if not 0 <= vertex <= node_count:
            raise ValueError(f"vertex {vertex!r} is outside the range 0..{node_count}")
        parent.setdefault(vertex, vertex)
        while parent[vertex] != vertex:
            parent[vertex] = parent[parent[vertex]]
            vertex = parent[vertex]
        return vertex

    total: float = 0
    for cost, src, dest in ordered:
        root_src, root_dest = root(src), root(dest)
        if root_src != root_dest:
            total += cost
            parent[root_src] = root_dest
    return total