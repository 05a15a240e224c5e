import pytest

from digraphx import Graph, GraphFormatError, InvalidArgumentError


def test_heads_are_added_with_empty_adjacency():
    g = Graph({1: {2: 10}})
    assert set(g) == {1, 2}
    assert dict(g[2]) == {}
    assert g == {1: {2: 10}, 2: {}}


def test_rejects_self_loop():
    with pytest.raises(GraphFormatError, match="self-loop"):
        Graph({1: {1: 3}})


def test_rejects_negative_weight():
    with pytest.raises(GraphFormatError, match="negative weight"):
        Graph({1: {2: -1}})


def test_rejects_non_numeric_weight():
    with pytest.raises(GraphFormatError):
        Graph({1: {2: "3"}})
    with pytest.raises(GraphFormatError):
        Graph({1: {2: True}})


@pytest.mark.parametrize("weight", [float("nan"), float("inf"), float("-inf")])
def test_rejects_non_finite_weight(weight):
    with pytest.raises(GraphFormatError, match="non-finite weight"):
        Graph({0: {1: weight, 2: 1}, 2: {3: 1}})


def test_format_error_is_invalid_argument():
    with pytest.raises(InvalidArgumentError):
        Graph({"a": {"a": 0}})


def test_graph_is_read_only():
    g = Graph({1: {2: 10}})
    with pytest.raises(TypeError):
        g[1][3] = 4  # type: ignore[index]
    with pytest.raises(TypeError):
        g[5] = {}  # type: ignore[index]


def test_input_mapping_is_copied():
    adj = {1: {2: 10}}
    g = Graph(adj)
    adj[1][3] = 1
    assert dict(g[1]) == {2: 10}


def test_equal_graphs_hash_equal():
    a = Graph({1: {2: 10, 3: 1}, 2: {}, 3: {}})
    b = Graph({3: {}, 1: {3: 1, 2: 10}})
    assert a == b
    assert hash(a) == hash(b)
    assert a != Graph({1: {2: 9, 3: 1}})


def test_edge_queries():
    g = Graph({0: {1: 2, 2: 9}, 1: {2: 3}, 3: {}})
    assert len(g) == 4
    assert g.edge_count() == 3
    assert sorted(g.edges()) == [(0, 1, 2), (0, 2, 9), (1, 2, 3)]


def test_path_weight(diamond):
    assert diamond.path_weight([0, 1, 3]) == 3
    assert diamond.path_weight([0]) == 0
    with pytest.raises(InvalidArgumentError):
        diamond.path_weight([0, 3])


def test_coerce_returns_same_instance(diamond):
    assert Graph.coerce(diamond) is diamond
    assert isinstance(Graph.coerce({1: {2: 3}}), Graph)
