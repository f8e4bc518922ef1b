"""Shortest paths: Dijkstra, Bellman-Ford with negative cycles, Floyd-Warshall."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

INF = math.inf


@dataclass(frozen=True)
class Edge:
    """A directed edge with its cost."""

    source: int
    target: int
    cost: int


def _check_node(n: int, u: int) -> None:
    if not 0 <= u < n:
        raise IndexError(f"node {u} outside [0, {n})")


def _check_matrix(n: int, matrix: Sequence[Sequence]) -> None:
    if len(matrix) != n or any(len(row) != n for row in matrix):
        raise ValueError(f"expected a {n}x{n} matrix")


def dijkstra(n: int, adj: Sequence[Sequence[tuple[int, int]]], source: int = 0) -> list:
    """Distances from ``source`` over ``(target, cost)`` lists; ``inf`` when unreachable."""
    if len(adj) != n:
        raise ValueError(f"adjacency has {len(adj)} entries, expected {n}")
    _check_node(n, source)
    dist: list = [INF] * n
    heap = [(0, source)]
    while heap:
        cost, u = heapq.heappop(heap)
        if dist[u] <= cost:
            continue
        dist[u] = cost
        for v, w in adj[u]:
            if w < 0:
                raise ValueError(f"negative edge cost {w}")
            heapq.heappush(heap, (cost + w, v))
    return dist


def bellman_ford(
    n: int, edges: Iterable[Edge | tuple[int, int, int]], source: int = 0
) -> tuple[list, list[bool]]:
    """Distances from ``source`` and which nodes a negative cycle can reach.

    Distances of nodes flagged as affected by a negative cycle are not final.
    """
    _check_node(n, source)
    edge_list = [e if isinstance(e, Edge) else Edge(*e) for e in edges]
    for e in edge_list:
        _check_node(n, e.source)
        _check_node(n, e.target)
    dist: list = [INF] * n
    dist[source] = 0
    for _ in range(n - 1):
        for e in edge_list:
            if dist[e.source] != INF and dist[e.source] + e.cost < dist[e.target]:
                dist[e.target] = dist[e.source] + e.cost
    in_cycle = [False] * n
    for e in edge_list:
        if dist[e.source] != INF and dist[e.source] + e.cost < dist[e.target]:
            in_cycle[e.target] = True
    outgoing: list[list[int]] = [[] for _ in range(n)]
    for e in edge_list:
        outgoing[e.source].append(e.target)
    queue = deque(u for u in range(n) if in_cycle[u])
    while queue:
        u = queue.popleft()
        for v in outgoing[u]:
            if not in_cycle[v]:
                in_cycle[v] = True
                queue.append(v)
    return dist, in_cycle


def floyd_warshall(n: int, matrix: Sequence[Sequence]) -> list[list]:
    """All-pairs distances from a direct-cost matrix using ``inf`` for no edge."""
    _check_matrix(n, matrix)
    dist = [list(row) for row in matrix]
    for k in range(n):
        row_k = dist[k]
        for i in range(n):
            through = dist[i][k]
            if through == INF:
                continue
            row_i = dist[i]
            for j in range(n):
                if row_k[j] == INF:
                    continue
                if through + row_k[j] < row_i[j]:
                    row_i[j] = through + row_k[j]
    return dist


def count_redundant_edges(n: int, matrix: Sequence[Sequence], dist: Sequence[Sequence]) -> int:
    """Ordered pairs whose direct cost is matched by a path through a third node."""
    _check_matrix(n, matrix)
    _check_matrix(n, dist)
    count = 0
    for i in range(n):
        for j in range(n):
            if i == j or dist[i][j] == INF:
                continue
            if any(
                dist[i][k] + dist[k][j] <= matrix[i][j]
                for k in range(n)
                if k != i and k != j
            ):
                count += 1
    return count


def is_coherent(n: int, matrix: Sequence[Sequence], dist: Sequence[Sequence]) -> bool:
    """True when no shortest distance undercuts the direct cost it came from."""
    _check_matrix(n, matrix)
    _check_matrix(n, dist)
    return all(dist[i][j] >= matrix[i][j] for i in range(n) for j in range(i, n))