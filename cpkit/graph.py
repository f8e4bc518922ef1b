"""Disjoint sets, breadth-first search, cycle detection and grid moves."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

# Row and column offsets: right, down, left, up, then the four diagonals.
GRID_STEPS: tuple[tuple[int, int], ...] = (
    (0, 1),
    (1, 0),
    (0, -1),
    (-1, 0),
    (1, 1),
    (-1, -1),
    (1, -1),
    (-1, 1),
)
STEP_LETTERS = "RDLU"


class DisjointSet:
    """Union-find over the nodes ``0..n``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"expected a non-negative size, got {n}")
        self._parent = list(range(n + 1))

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, u: int) -> None:
        if not 0 <= u < len(self._parent):
            raise IndexError(f"node {u} outside [0, {len(self._parent) - 1}]")

    def find(self, u: int) -> int:
        """Representative of the set holding ``u``."""
        self._check(u)
        parent = self._parent
        root = u
        while parent[root] != root:
            root = parent[root]
        while parent[u] != root:
            following = parent[u]
            parent[u] = root
            u = following
        return root

    def merge(self, u: int, v: int) -> bool:
        """Join the sets of ``u`` and ``v``; False when they were already one."""
        root_u = self.find(u)
        root_v = self.find(v)
        if root_u == root_v:
            return False
        self._parent[root_u] = root_v
        return True


def bfs(
    adj: Sequence[Sequence[int]], start: int
) -> tuple[list[int], list[int | None]]:
    """Edge counts from ``start`` and the BFS parent of every node.

    Unreached nodes have distance -1; ``start`` and unreached nodes have
    parent None.
    """
    if not 0 <= start < len(adj):
        raise IndexError(f"start node {start} outside [0, {len(adj)})")
    dist = [-1] * len(adj)
    parent: list[int | None] = [None] * len(adj)
    dist[start] = 0
    queue = deque([start])
    while queue:
        u = queue.popleft()
        for v in adj[u]:
            if dist[v] == -1:
                dist[v] = dist[u] + 1
                parent[v] = u
                queue.append(v)
    return dist, parent


def has_cycle(adj: Sequence[Sequence[int]]) -> bool:
    """True when the undirected graph given by ``adj`` contains a cycle."""
    visited = [False] * len(adj)
    for root in range(len(adj)):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, -1, iter(adj[root]))]
        while stack:
            u, p, neighbours_left = stack[-1]
            for v in neighbours_left:
                if visited[v]:
                    if v != p:
                        return True
                    continue
                visited[v] = True
                stack.append((v, u, iter(adj[v])))
                break
            else:
                stack.pop()
    return False


def neighbours(row: int, col: int, diagonal: bool = False) -> list[tuple[int, int]]:
    """Grid cells next to ``(row, col)``: right, down, left, up, then diagonals."""
    steps = GRID_STEPS if diagonal else GRID_STEPS[:4]
    return [(row + dr, col + dc) for dr, dc in steps]