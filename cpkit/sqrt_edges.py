"""Total weight of edges joining differently coloured nodes under recolouring."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Hashable, Iterable, Sequence


class ColoredTree:
    """Weighted graph on nodes ``1..n`` whose nodes carry colours.

    Nodes with at least about sqrt(n) neighbours are heavy and keep, per
    colour, the weight of their edges to neighbours of that colour, so a
    recolouring costs O(sqrt(n)) updates.
    """

    def __init__(
        self, colors: Sequence[Hashable], edges: Iterable[tuple[int, int, int]]
    ) -> None:
        self._color: list = [None, *colors]
        n = len(self._color) - 1
        self.n = n
        adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
        self._total = 0
        self._same = 0
        for a, b, w in edges:
            self._check(a)
            self._check(b)
            if a == b:
                raise ValueError(f"self-loop at node {a}")
            self._total += w
            if self._color[a] == self._color[b]:
                self._same += w
            adj[a].append((b, w))
            adj[b].append((a, w))
        threshold = math.isqrt(n) + 1
        heavy = [len(links) >= threshold for links in adj]
        self._adj = adj
        self._heavy = heavy
        self._heavy_adj = [
            [(v, w) for v, w in adj[u] if heavy[v]] if heavy[u] else [] for u in range(n + 1)
        ]
        self._weight_by_color: list[Counter] = [Counter() for _ in range(n + 1)]
        for u in range(1, n + 1):
            if heavy[u]:
                for v, w in adj[u]:
                    self._weight_by_color[u][self._color[v]] += w

    def __len__(self) -> int:
        return self.n

    def _check(self, u: int) -> None:
        if not 1 <= u <= len(self._color) - 1:
            raise IndexError(f"node {u} outside [1, {len(self._color) - 1}]")

    def color(self, node: int) -> Hashable:
        self._check(node)
        return self._color[node]

    def recolor(self, node: int, color: Hashable) -> None:
        """Give ``node`` a new colour."""
        self._check(node)
        old = self._color[node]
        if old == color:
            return
        self._color[node] = color
        if self._heavy[node]:
            weights = self._weight_by_color[node]
            self._same += weights[color] - weights[old]
            for v, w in self._heavy_adj[node]:
                self._weight_by_color[v][old] -= w
                self._weight_by_color[v][color] += w
            return
        for v, w in self._adj[node]:
            if self._heavy[v]:
                self._weight_by_color[v][old] -= w
                self._weight_by_color[v][color] += w
            if self._color[v] == old:
                self._same -= w
            if self._color[v] == color:
                self._same += w

    def different_color_weight(self) -> int:
        """Total weight of edges whose ends have different colours."""
        return self._total - self._same