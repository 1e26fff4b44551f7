"""Graph representations, depth-first traversal and shortest paths."""

from __future__ import annotations

import heapq
import math
from typing import Callable, Iterable, List, Sequence


class AdjacencyMatrix:
    """Undirected graph stored as an n×n 0/1 matrix.

    Edges whose endpoints fall outside the graph are ignored.
    """

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self.vertex_count = vertex_count
        self._matrix = [[0] * vertex_count for _ in range(vertex_count)]

    def _valid(self, u: int, v: int) -> bool:
        return 0 <= u < self.vertex_count and 0 <= v < self.vertex_count

    def add_edge(self, u: int, v: int) -> None:
        if self._valid(u, v):
            self._matrix[u][v] = 1
            self._matrix[v][u] = 1

    def remove_edge(self, u: int, v: int) -> None:
        if self._valid(u, v):
            self._matrix[u][v] = 0
            self._matrix[v][u] = 0

    def has_edge(self, u: int, v: int) -> bool:
        return self._valid(u, v) and self._matrix[u][v] == 1

    @property
    def rows(self) -> List[List[int]]:
        """A copy of the matrix rows."""
        return [row[:] for row in self._matrix]

    def render(self) -> str:
        """The matrix as lines of digits."""
        return "\n".join("".join(str(cell) for cell in row) for row in self._matrix)


class IncidenceMatrix:
    """Directed graph as a vertices × edges matrix: 1 at the tail, -1 at the head."""

    def __init__(self, vertex_count: int, edge_count: int) -> None:
        if vertex_count < 0 or edge_count < 0:
            raise ValueError("sizes must not be negative")
        self.vertex_count = vertex_count
        self.edge_count = edge_count
        self._matrix = [[0] * edge_count for _ in range(vertex_count)]

    def add_edge(self, u: int, v: int, edge: int) -> None:
        """Record edge number ``edge`` going from ``u`` to ``v``."""
        for vertex in (u, v):
            if not 0 <= vertex < self.vertex_count:
                raise IndexError(f"vertex {vertex} out of range")
        if not 0 <= edge < self.edge_count:
            raise IndexError(f"edge {edge} out of range")
        self._matrix[u][edge] = 1
        self._matrix[v][edge] = -1

    @property
    def rows(self) -> List[List[int]]:
        """A copy of the matrix rows."""
        return [row[:] for row in self._matrix]

    def render(self) -> str:
        """The matrix as one line of entries per vertex."""
        return "\n".join("".join(str(cell) for cell in row) for row in self._matrix)


class AdjacencyList:
    """Undirected graph as neighbour lists; the newest neighbour comes first."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self.vertex_count = vertex_count
        self._lists: List[List[int]] = [[] for _ in range(vertex_count)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, u: int, v: int) -> None:
        self._check(u)
        self._check(v)
        self._lists[u].insert(0, v)
        self._lists[v].insert(0, u)

    def neighbors(self, vertex: int) -> List[int]:
        """Neighbours of ``vertex``, most recently added first."""
        self._check(vertex)
        return list(self._lists[vertex])

    def render(self) -> str:
        """One line per vertex listing its neighbours."""
        return "\n".join(
            f"vertex {vertex}: " + "".join(f" -> {n}" for n in neighbours)
            for vertex, neighbours in enumerate(self._lists)
        )


def _depth_first(
    start: int, size: int, neighbours: Callable[[int, set], Iterable[int]]
) -> List[int]:
    if not 0 <= start < size:
        raise IndexError(f"vertex {start} out of range")
    visited = {start}
    order = [start]
    pending = [iter(neighbours(start, visited))]
    while pending:
        for nxt in pending[-1]:
            if nxt not in visited:
                visited.add(nxt)
                order.append(nxt)
                pending.append(iter(neighbours(nxt, visited)))
                break
        else:
            pending.pop()
    return order


def dfs_matrix(matrix: Sequence[Sequence[int]], start: int) -> List[int]:
    """Depth-first visit order over an adjacency matrix (non-zero means edge)."""

    def neighbours(vertex: int, visited: set) -> Iterable[int]:
        return (i for i, cell in enumerate(matrix[vertex]) if cell)

    return _depth_first(start, len(matrix), neighbours)


def dfs_list(adjacency: Sequence[Iterable[int]], start: int) -> List[int]:
    """Depth-first visit order over per-vertex neighbour lists."""

    def neighbours(vertex: int, visited: set) -> Iterable[int]:
        return adjacency[vertex]

    return _depth_first(start, len(adjacency), neighbours)


def dijkstra(graph: Sequence[Sequence[float]], start: int) -> List[float]:
    """Shortest distances from ``start`` over a weighted adjacency matrix.

    A zero weight means there is no edge; unreachable vertices get ``math.inf``.
    """
    n = len(graph)
    if any(len(row) != n for row in graph):
        raise ValueError("graph must be a square matrix")
    if not 0 <= start < n:
        raise IndexError(f"vertex {start} out of range")

    distance: List[float] = [math.inf] * n
    distance[start] = 0
    done = [False] * n
    queue = [(0, start)]
    while queue:
        dist, u = heapq.heappop(queue)
        if done[u]:
            continue
        done[u] = True
        for v, weight in enumerate(graph[u]):
            if weight == 0 or done[v]:
                continue
            candidate = dist + weight
            if candidate < distance[v]:
                distance[v] = candidate
                heapq.heappush(queue, (candidate, v))
    return distance