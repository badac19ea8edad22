import pytest

from algorack.traversal import (
    EdgeKind,
    Graph,
    bfs_order,
    classify_edges,
    count_components,
    dfs_order,
    dominators,
    flood_fill,
    format_dominators,
    is_connected_from,
)

LAKE = [
    "LLLLLLLLL",
    "LLWWLLWLL",
    "LWWLLLLLL",
    "LWWWLWWLL",
    "LLLWWWLLL",
    "LLLLLLLLL",
    "LLLWWLLWL",
    "LLWLWLLLL",
    "LLLLLLLLL",
]


def test_neighbours_and_direction():
    graph = Graph(3)
    graph.add_edge(0, 1, bidirectional=False)
    graph.add_edge(1, 2)
    assert graph.neighbours(0) == (1,)
    assert graph.neighbours(1) == (2,)
    assert graph.neighbours(2) == (1,)


def test_add_edge_out_of_range():
    with pytest.raises(IndexError):
        Graph(2).add_edge(0, 5)


def test_dfs_follows_path():
    graph = Graph(4)
    for u in range(3):
        graph.add_edge(u, u + 1)
    assert dfs_order(graph, 0) == list(range(4))


def test_orders_visit_reachable_once():
    graph = Graph(6)
    for u, v in [(0, 1), (0, 2), (1, 3), (2, 3), (3, 4)]:
        graph.add_edge(u, v)
    for order in (dfs_order(graph, 0), bfs_order(graph, 0)):
        assert order[0] == 0
        assert sorted(order) == [0, 1, 2, 3, 4]


def test_bfs_levels_non_decreasing():
    graph = Graph(7)
    for u, v in [(0, 1), (0, 2), (1, 3), (1, 4), (2, 5), (5, 6)]:
        graph.add_edge(u, v)
    depth = {0: 0}
    for u, v in [(0, 1), (0, 2), (1, 3), (1, 4), (2, 5), (5, 6)]:
        depth[v] = depth[u] + 1
    levels = [depth[v] for v in bfs_order(graph, 0)]
    assert levels == sorted(levels)


def test_connected_from():
    graph = Graph(3)
    graph.add_edge(0, 1, bidirectional=False)
    graph.add_edge(1, 2, bidirectional=False)
    assert is_connected_from(graph, 0) is True
    assert is_connected_from(graph, 2) is False


def test_count_components_sample():
    graph = Graph(5)
    for pair in ["AB", "CE", "DB", "EC"]:
        graph.add_edge(ord(pair[0]) - ord("A"), ord(pair[1]) - ord("A"))
    assert count_components(graph) == 2


def test_count_components_isolated():
    assert count_components(Graph(4)) == 4


def test_flood_fill_sample():
    count, filled = flood_fill(LAKE, 2, 1)
    assert count == 12
    before = sum(line.count("W") for line in LAKE)
    after = sum(line.count("W") for line in filled)
    assert before - after == count


def test_flood_fill_on_land_or_outside():
    assert flood_fill(LAKE, 0, 0)[0] == 0
    assert flood_fill(LAKE, 20, 0) == (0, LAKE)


def test_dominators_root_row_is_reachability():
    matrix = [
        [0, 1, 0, 0],
        [0, 0, 1, 0],
        [0, 0, 0, 0],
        [1, 0, 0, 0],
    ]
    table = dominators(matrix)
    assert table[0] == [True, True, True, False]
    assert table[3] == [False, False, False, False]
    assert all(table[i][i] for i in range(3))


def test_dominators_only_reachable_targets():
    matrix = [
        [0, 1, 1, 0],
        [0, 0, 0, 1],
        [0, 0, 0, 1],
        [0, 0, 0, 0],
    ]
    table = dominators(matrix)
    assert table[1][3] is False
    assert table[2][3] is False
    assert table[1][1] is True


def test_dominators_not_square():
    with pytest.raises(ValueError):
        dominators([[0, 1]])


def test_format_dominators_shape():
    table = [[True, False], [False, True]]
    text = format_dominators(table, 1)
    lines = text.splitlines()
    border = "+" + "-" * 3 + "+"
    assert lines[0] == "Case 1:"
    assert lines[1::2] == [border] * 3
    assert text.count("Y") == 2
    assert len(lines) == 2 * len(table) + 2


def test_classify_forward_edge():
    graph = Graph(3)
    for u, v in [(0, 1), (1, 2), (0, 2)]:
        graph.add_edge(u, v, bidirectional=False)
    kinds = classify_edges(graph)
    assert (EdgeKind.FORWARD, 0, 2) in kinds
    assert sum(kind is EdgeKind.TREE for kind, _, _ in kinds) == 2


def test_classify_back_edge_in_directed_cycle():
    graph = Graph(3)
    for u, v in [(0, 1), (1, 2), (2, 0)]:
        graph.add_edge(u, v, bidirectional=False)
    kinds = classify_edges(graph)
    assert (EdgeKind.BACK, 2, 0) in kinds
    assert len(kinds) == 3