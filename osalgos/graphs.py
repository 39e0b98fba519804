"""Minimum spanning trees with Kruskal's and Prim's algorithms."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge."""

    source: int
    target: int
    weight: int


class DisjointSet:
    """Union-find with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self._rank = [0] * size

    def find(self, item: int) -> int:
        """Return the representative of the set holding item."""
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, first: int, second: int) -> bool:
        """Merge the two sets; return False if they were already one."""
        root_a, root_b = self.find(first), self.find(second)
        if root_a == root_b:
            return False
        if self._rank[root_a] < self._rank[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        if self._rank[root_a] == self._rank[root_b]:
            self._rank[root_a] += 1
        return True


def _check_edges(vertex_count: int, edges: Iterable[Edge]) -> list[Edge]:
    checked = list(edges)
    for edge in checked:
        for vertex in (edge.source, edge.target):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"vertex {vertex} out of range for {edge}")
    return checked


def kruskal_mst(vertex_count: int, edges: Iterable[Edge]) -> list[Edge]:
    """Edges of a minimum spanning forest, in order of increasing weight."""
    ordered = sorted(_check_edges(vertex_count, edges), key=lambda edge: edge.weight)
    components = DisjointSet(vertex_count)
    return [edge for edge in ordered if components.union(edge.source, edge.target)]


def prims_mst(
    vertex_count: int, edges: Sequence[Edge]
) -> list[tuple[int | None, int]]:
    """Grow a spanning tree from vertex 0.

    Returns (parent, vertex) for every vertex but 0; the parent is None for
    vertices that cannot be reached.
    """
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]
    for edge in _check_edges(vertex_count, edges):
        adjacency[edge.source].append((edge.weight, edge.target))
        adjacency[edge.target].append((edge.weight, edge.source))

    if vertex_count == 0:
        return []

    key: list[float] = [float("inf")] * vertex_count
    parent: list[int | None] = [None] * vertex_count
    in_tree = [False] * vertex_count
    key[0] = 0
    heap = [(0, 0)]

    while heap:
        _, vertex = heapq.heappop(heap)
        if in_tree[vertex]:
            continue
        in_tree[vertex] = True
        for weight, neighbour in adjacency[vertex]:
            if not in_tree[neighbour] and key[neighbour] > weight:
                key[neighbour] = weight
                parent[neighbour] = vertex
                heapq.heappush(heap, (weight, neighbour))

    return [(parent[vertex], vertex) for vertex in range(1, vertex_count)]