from hypothesis import given
from hypothesis import strategies as st

from dsakit.graph import Graph

TRAVERSAL_EDGES = [("A", "B"), ("A", "C"), ("B", "D"), ("C", "E"), ("D", "E"), ("E", "F")]


def _graph(edges):
    graph = Graph()
    for u, v in edges:
        graph.add_edge(u, v)
    return graph


def test_format_adjacency_list():
    graph = _graph([("A", "B"), ("A", "C")])
    assert graph.format() == "Adjacency List:\nA -> [B C]\nB -> [A]\nC -> [A]"


def test_dfs_order():
    assert _graph(TRAVERSAL_EDGES).dfs("A") == ["A", "B", "D", "E", "C", "F"]


def test_bfs_order():
    assert _graph(TRAVERSAL_EDGES).bfs("A") == list("ABCDEF")


def test_edges_are_symmetric():
    graph = _graph(TRAVERSAL_EDGES)
    for u, v in TRAVERSAL_EDGES:
        assert v in graph.neighbors(u)
        assert u in graph.neighbors(v)


def test_neighbors_of_unknown_node_is_empty():
    assert Graph().neighbors("Z") == []


def test_neighbors_returns_a_copy():
    graph = _graph(TRAVERSAL_EDGES)
    graph.neighbors("A").append("Z")
    assert "Z" not in graph.neighbors("A")


def test_traversals_stay_in_component():
    graph = _graph(TRAVERSAL_EDGES + [("X", "Y")])
    component = {node for edge in TRAVERSAL_EDGES for node in edge}
    assert set(graph.dfs("A")) == component
    assert set(graph.bfs("A")) == component
    assert set(graph.bfs("X")) == {"X", "Y"}
    assert set(graph.dfs("Y")) == {"X", "Y"}


def test_traversal_from_isolated_start():
    graph = _graph(TRAVERSAL_EDGES)
    assert graph.dfs("Z") == ["Z"]
    assert graph.bfs("Z") == ["Z"]


@given(st.lists(st.tuples(st.integers(0, 9), st.integers(0, 9)), min_size=1))
def test_dfs_and_bfs_reach_same_nodes_once(edges):
    graph = _graph(edges)
    start = edges[0][0]
    depth = graph.dfs(start)
    breadth = graph.bfs(start)
    assert depth[0] == start
    assert breadth[0] == start
    assert len(depth) == len(set(depth))
    assert len(breadth) == len(set(breadth))
    assert set(depth) == set(breadth)
    for node in depth:
        assert set(graph.neighbors(node)) <= set(depth)