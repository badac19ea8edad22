"""Articulation points, strongly connected components and two-colouring."""

from collections import deque

from .traversal import Graph, is_connected_from


def _transpose(graph):
    reversed_graph = Graph(len(graph))
    for src in range(len(graph)):
        for dest in graph.neighbours(src):
            reversed_graph.add_edge(dest, src, bidirectional=False)
    return reversed_graph


def articulation_points(graph):
    """Vertices whose removal disconnects their component, in ascending order.

    The graph is taken as undirected: every edge should be stored both ways.
    """
    size = len(graph)
    disc = [-1] * size
    low = [0] * size
    parent = [None] * size
    is_cut = [False] * size
    timer = 0
    for root in range(size):
        if disc[root] != -1:
            continue
        disc[root] = low[root] = timer
        timer += 1
        root_children = 0
        stack = [(root, iter(graph.neighbours(root)))]
        while stack:
            vertex, neighbours = stack[-1]
            for nxt in neighbours:
                if disc[nxt] == -1:
                    parent[nxt] = vertex
                    if vertex == root:
                        root_children += 1
                    disc[nxt] = low[nxt] = timer
                    timer += 1
                    stack.append((nxt, iter(graph.neighbours(nxt))))
                    break
                if nxt != parent[vertex]:
                    low[vertex] = min(low[vertex], disc[nxt])
            else:
                stack.pop()
                above = parent[vertex]
                if above is not None:
                    low[above] = min(low[above], low[vertex])
                    if above != root and low[vertex] >= disc[above]:
                        is_cut[above] = True
        if root_children >= 2:
            is_cut[root] = True
    return [vertex for vertex, cut in enumerate(is_cut) if cut]


def _finish_order(graph):
    seen = [False] * len(graph)
    order = []
    for root in range(len(graph)):
        if seen[root]:
            continue
        seen[root] = True
        stack = [(root, iter(graph.neighbours(root)))]
        while stack:
            vertex, neighbours = stack[-1]
            for nxt in neighbours:
                if not seen[nxt]:
                    seen[nxt] = True
                    stack.append((nxt, iter(graph.neighbours(nxt))))
                    break
            else:
                order.append(vertex)
                stack.pop()
    return order


def strongly_connected_components(graph):
    """Strongly connected components of a directed graph (Kosaraju).

    Each component is a list of vertices in the order they were reached.
    """
    order = _finish_order(graph)
    reversed_graph = _transpose(graph)
    seen = [False] * len(graph)
    components = []
    for start in reversed(order):
        if seen[start]:
            continue
        component = []
        stack = [start]
        while stack:
            vertex = stack.pop()
            if seen[vertex]:
                continue
            seen[vertex] = True
            component.append(vertex)
            stack.extend(
                n for n in reversed(reversed_graph.neighbours(vertex)) if not seen[n]
            )
        components.append(component)
    return components


def is_strongly_connected(graph):
    """Tell whether every vertex reaches every other one."""
    if len(graph) == 0:
        return False
    return is_connected_from(graph, 0) and is_connected_from(_transpose(graph), 0)


def is_bipartite(graph, src=0):
    """Tell whether the part of the graph reachable from ``src`` is two-colourable."""
    graph._check(src)
    colour = [None] * len(graph)
    colour[src] = 0
    queue = deque([src])
    while queue:
        vertex = queue.popleft()
        current = colour[vertex]
        for nxt in graph.neighbours(vertex):
            if colour[nxt] is None:
                colour[nxt] = 1 - current
                queue.append(nxt)
            elif colour[nxt] == current:
                return False
    return True