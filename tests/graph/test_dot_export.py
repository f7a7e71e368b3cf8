from graphwalk import Digraph, UndirectedGraph, to_dot


def test_undirected_dot_lists_each_adjacency_and_isolated_vertices():
    g = UndirectedGraph(3)
    g.add_edge(0, 1)

    assert to_dot(g) == "strict graph {\n  0 -- 1\n  1 -- 0\n2\n}\n"


def test_directed_dot_uses_arrows():
    g = Digraph(3)
    g.add_edge(0, 1)
    g.add_edge(0, 2)
    g.add_edge(2, 0)

    assert to_dot(g) == "digraph {\n  0 -> 1\n  0 -> 2\n1\n  2 -> 0\n}\n"


def test_directed_flag_overrides_graph_kind():
    g = UndirectedGraph(2)
    g.add_edge(0, 1)

    assert to_dot(g, directed=True) == "digraph {\n  0 -> 1\n  1 -> 0\n}\n"


def test_empty_graph():
    assert to_dot(Digraph()) == "digraph {\n}\n"


def test_method_matches_function(square_1):
    assert square_1.to_dot() == to_dot(square_1)
