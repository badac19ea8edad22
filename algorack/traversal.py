"""Unweighted graph traversals, grid flood fill, dominators and edge kinds."""

from collections import deque
from enum import Enum


class Graph:
    """Adjacency-list graph over vertices ``0 .. size - 1``."""

    def __init__(self, size):
        if size < 0:
            raise ValueError("size must be non-negative")
        self._adj = [[] for _ in range(size)]

    def __len__(self):
        return len(self._adj)

    def _check(self, vertex):
        if not 0 <= vertex < len(self._adj):
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, u, v, bidirectional=True):
        """Add an edge ``u -> v``, and ``v -> u`` when bidirectional."""
        self._check(u)
        self._check(v)
        self._adj[u].append(v)
        if bidirectional:
            self._adj[v].append(u)

    def neighbours(self, u):
        """Neighbours of ``u`` in insertion order."""
        self._check(u)
        return tuple(self._adj[u])


class EdgeKind(Enum):
    TREE = "tree"
    BACK = "back"
    FORWARD = "forward"


def dfs_order(graph, start):
    """Vertices in depth-first preorder from ``start``."""
    graph._check(start)
    seen = [False] * len(graph)
    order = []
    stack = [start]
    while stack:
        vertex = stack.pop()
        if seen[vertex]:
            continue
        seen[vertex] = True
        order.append(vertex)
        stack.extend(n for n in reversed(graph._adj[vertex]) if not seen[n])
    return order


def bfs_order(graph, start):
    """Vertices in breadth-first order from ``start``."""
    graph._check(start)
    seen = [False] * len(graph)
    seen[start] = True
    order = []
    queue = deque([start])
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for nxt in graph._adj[vertex]:
            if not seen[nxt]:
                seen[nxt] = True
                queue.append(nxt)
    return order


def is_connected_from(graph, start):
    """Tell whether every vertex is reachable from ``start``."""
    return len(dfs_order(graph, start)) == len(graph)


def count_components(graph):
    """Number of connected components found by repeated BFS."""
    seen = [False] * len(graph)
    components = 0
    for vertex in range(len(graph)):
        if not seen[vertex]:
            components += 1
            for reached in bfs_order(graph, vertex):
                seen[reached] = True
    return components


_DIRECTIONS = [(1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0), (-1, -1), (0, -1), (1, -1)]


def flood_fill(grid, row, col, water="W", mark="L"):
    """Fill the 8-connected ``water`` region holding ``(row, col)`` with ``mark``.

    Returns the number of cells filled and the filled grid as strings.
    """
    cells = [list(line) for line in grid]

    def inside(r, c):
        return 0 <= r < len(cells) and 0 <= c < len(cells[r])

    if not inside(row, col) or cells[row][col] != water:
        return 0, ["".join(line) for line in cells]
    cells[row][col] = mark
    count = 0
    queue = deque([(row, col)])
    while queue:
        r, c = queue.popleft()
        count += 1
        for dr, dc in _DIRECTIONS:
            nr, nc = r + dr, c + dc
            if inside(nr, nc) and cells[nr][nc] == water:
                cells[nr][nc] = mark
                queue.append((nr, nc))
    return count, ["".join(line) for line in cells]


def _reachable(matrix, blocked=None):
    seen = {0}
    if blocked is not None:
        seen.add(blocked)
    stack = [0]
    while stack:
        vertex = stack.pop()
        for nxt, edge in enumerate(matrix[vertex]):
            if edge == 1 and nxt not in seen:
                seen.add(nxt)
                stack.append(nxt)
    seen.discard(blocked)
    return seen


def dominators(matrix):
    """Dominator table of an adjacency matrix, rooted at vertex 0.

    ``table[i][j]`` is true when every path from 0 to ``j`` passes ``i``.
    """
    size = len(matrix)
    if any(len(line) != size for line in matrix):
        raise ValueError("adjacency matrix must be square")
    table = [[False] * size for _ in range(size)]
    if size == 0:
        return table
    reach = _reachable(matrix)
    for vertex in reach:
        table[vertex][vertex] = True
        table[0][vertex] = True
    for removed in range(1, size):
        lost = reach - _reachable(matrix, removed) - {removed}
        for vertex in lost:
            table[removed][vertex] = True
    return table


def format_dominators(table, case):
    """Render a dominator table as a boxed grid of Y and N cells."""
    border = "+" + "-" * (2 * len(table) - 1) + "+"
    lines = [f"Case {case}:", border]
    for row in table:
        lines.append("|" + "".join("Y|" if cell else "N|" for cell in row))
        lines.append(border)
    return "\n".join(lines) + "\n"


def classify_edges(graph):
    """Classify every edge met by a depth-first search of the whole graph.

    Returns ``(kind, src, dest)`` triples in the order they are examined.
    """
    unvisited, explored, finished = 0, 1, 2
    state = [unvisited] * len(graph)
    parent = [None] * len(graph)
    result = []
    for root in range(len(graph)):
        if state[root] != unvisited:
            continue
        state[root] = explored
        stack = [(root, iter(graph._adj[root]))]
        while stack:
            vertex, neighbours = stack[-1]
            for nxt in neighbours:
                if state[nxt] == unvisited:
                    parent[nxt] = vertex
                    result.append((EdgeKind.TREE, vertex, nxt))
                    state[nxt] = explored
                    stack.append((nxt, iter(graph._adj[nxt])))
                    break
                if state[nxt] == explored and nxt != parent[vertex]:
                    result.append((EdgeKind.BACK, vertex, nxt))
                elif state[nxt] == finished:
                    result.append((EdgeKind.FORWARD, vertex, nxt))
            else:
                state[vertex] = finished
                stack.pop()
    return result