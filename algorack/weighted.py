"""Weighted graphs: shortest paths and minimum spanning trees."""

import heapq
import math

from .unionfind import UnionFind

INF = math.inf


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle is reachable from the source."""


class WeightedGraph:
    """Adjacency-list graph whose edges carry weights."""

    def __init__(self, size):
        if size < 0:
            raise ValueError("size must be non-negative")
        self._adj = [[] for _ in range(size)]

    def __len__(self):
        return len(self._adj)

    def _check(self, vertex):
        if not 0 <= vertex < len(self._adj):
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, src, dest, weight, bidirectional=True):
        """Add an edge from ``src`` to ``dest``, and back when bidirectional."""
        self._check(src)
        self._check(dest)
        self._adj[src].append((dest, weight))
        if bidirectional:
            self._adj[dest].append((src, weight))

    def edges(self):
        """Yield ``(src, dest, weight)`` for every stored directed edge."""
        for src, neighbours in enumerate(self._adj):
            for dest, weight in neighbours:
                yield src, dest, weight


def bellman_ford(graph, src):
    """Single-source shortest distances; unreachable vertices get ``inf``."""
    graph._check(src)
    size = len(graph)
    dist = [INF] * size
    dist[src] = 0
    edges = list(graph.edges())
    for round_no in range(1, size + 1):
        for u, v, weight in edges:
            if dist[u] + weight < dist[v]:
                if round_no == size:
                    raise NegativeCycleError("graph contains a negative cycle")
                dist[v] = dist[u] + weight
    return dist


def floyd_warshall(graph):
    """All-pairs shortest distances as a square list of lists."""
    size = len(graph)
    dist = [[INF] * size for _ in range(size)]
    for src, neighbours in enumerate(graph._adj):
        row = dist[src]
        row[src] = 0
        for dest, weight in neighbours:
            row[dest] = weight
    for via in range(size):
        via_row = dist[via]
        for row in dist:
            through = row[via]
            if through == INF:
                continue
            for dest, tail in enumerate(via_row):
                if through + tail < row[dest]:
                    row[dest] = through + tail
    return dist


def prim(graph):
    """Weight of the minimum spanning tree grown from vertex 0."""
    if len(graph) == 0:
        return 0
    visited = [False] * len(graph)
    heap = [(0, 0)]
    total = 0
    while heap:
        weight, vertex = heapq.heappop(heap)
        if visited[vertex]:
            continue
        visited[vertex] = True
        total += weight
        for dest, edge_weight in graph._adj[vertex]:
            if not visited[dest]:
                heapq.heappush(heap, (edge_weight, dest))
    return total


def kruskal(graph):
    """Weight of the minimum spanning forest, using a disjoint-set structure."""
    sets = UnionFind(len(graph))
    total = 0
    for weight, src, dest in sorted((w, s, d) for s, d, w in graph.edges()):
        if not sets.same_set(src, dest):
            total += weight
            sets.union(src, dest)
    return total


def kruskal_visited(edges, size):
    """Greedy edge selection that skips edges whose ends are both touched.

    ``edges`` holds ``(weight, u, v)`` triples. Returns the total weight and
    the chosen ``(u, v)`` pairs in the order they were taken.
    """
    visited = [False] * size
    total = 0
    chosen = []
    for weight, u, v in sorted(edges):
        if visited[u] and visited[v]:
            continue
        chosen.append((u, v))
        visited[u] = visited[v] = True
        total += weight
    return total, chosen