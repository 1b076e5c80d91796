"""Minimum spanning trees from adjacency matrices where 0 means no edge."""

import math
from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class SpanningTree:
    """Edges chosen as ``(from, to, cost)`` with 0-based vertices, in the order chosen."""

    edges: list[tuple[int, int, float]] = field(default_factory=list)

    @property
    def cost(self) -> float:
        """Total cost of the chosen edges."""
        return sum(edge[2] for edge in self.edges)


def _weights(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("adjacency matrix must be square")
    return [[math.inf if cost == 0 else cost for cost in row] for row in matrix]


def _cheapest(weights: list[list[float]], rows: list[int]) -> tuple[int, int] | None:
    """First cheapest finite edge, in row-major order, leaving one of ``rows``."""
    best: tuple[int, int] | None = None
    best_cost = math.inf
    for i in rows:
        for j, cost in enumerate(weights[i]):
            if cost < best_cost:
                best, best_cost = (i, j), cost
    return best


def prim_mst(matrix: Sequence[Sequence[float]]) -> SpanningTree:
    """Grow a spanning tree from vertex 0 by repeatedly taking the cheapest edge out of it.

    Raises ValueError for a non-square matrix or a disconnected graph.
    """
    weights = _weights(matrix)
    n = len(weights)
    visited = [False] * n
    if n:
        visited[0] = True
    edges: list[tuple[int, int, float]] = []
    while len(edges) < n - 1:
        pick = _cheapest(weights, [i for i in range(n) if visited[i]])
        if pick is None:
            raise ValueError("graph is not connected")
        a, b = pick
        if not visited[b]:
            edges.append((a, b, weights[a][b]))
            visited[b] = True
        weights[a][b] = weights[b][a] = math.inf
    return SpanningTree(edges)


def greedy_mst(matrix: Sequence[Sequence[float]]) -> SpanningTree:
    """Pick the cheapest edge leaving an unvisited vertex until n - 1 edges are chosen.

    An edge is kept when either end is still unvisited; both ends are then
    marked. Raises ValueError for a non-square matrix, or when every vertex
    is visited (or no edge is left) before enough edges are chosen.
    """
    weights = _weights(matrix)
    n = len(weights)
    visited = [False] * n
    edges: list[tuple[int, int, float]] = []
    while len(edges) < n - 1:
        pick = _cheapest(weights, [i for i in range(n) if not visited[i]])
        if pick is None:
            raise ValueError("no further edge can be chosen")
        a, b = pick
        if not visited[a] or not visited[b]:
            edges.append((a, b, weights[a][b]))
        visited[a] = visited[b] = True
        weights[a][b] = weights[b][a] = math.inf
    return SpanningTree(edges)