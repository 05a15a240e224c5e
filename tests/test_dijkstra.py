import math
import random

import pytest

from digraphx import Graph, PathFrontier, dijkstra, distance_matrix, make_graph, shortest_path


def test_two_vertex_example():
    assert dijkstra({1: {2: 10}}, 1, 2) == {1: (0, [1]), 2: (10, [1, 2])}


def test_picks_cheaper_longer_path(diamond):
    result = dijkstra(diamond, 0)
    assert result[3] == (3, [0, 1, 3])
    assert result[2] == (4, [0, 2])
    assert 4 not in result


def test_start_vertex_maps_to_itself(diamond):
    for v in diamond:
        assert dijkstra(diamond, v)[v] == (0, [v])


def test_unknown_start_vertex_has_only_itself(diamond):
    assert dijkstra(diamond, "missing") == {"missing": (0, ["missing"])}


def test_early_exit_stops_before_farther_vertices():
    g = {"a": {"b": 1, "c": 50}, "b": {"d": 1}, "c": {}, "d": {}}
    result = dijkstra(g, "a", "b")
    assert result["b"] == (1, ["a", "b"])
    assert "c" not in result
    assert "d" not in result


def test_unreachable_destination_runs_to_exhaustion(diamond):
    result = dijkstra(diamond, 0, 4)
    assert set(result) == {0, 1, 2, 3}


def test_result_entries_are_named(diamond):
    entry = dijkstra(diamond, 0)[3]
    assert entry.distance == 3
    assert entry.path == [0, 1, 3]


def test_zero_weight_edges():
    g = Graph({0: {1: 0}, 1: {2: 0}, 2: {}})
    assert dijkstra(g, 0)[2] == (0, [0, 1, 2])


def test_ties_do_not_replace_existing_path():
    # both 0->1->3 and 0->2->3 cost 2; the first offered path is kept
    g = Graph({0: {1: 1, 2: 1}, 1: {3: 1}, 2: {3: 1}, 3: {}})
    assert dijkstra(g, 0)[3] == (2, [0, 1, 3])


def test_unorderable_vertex_labels():
    g = {("x", 1): {frozenset([2]): 1, None: 1}, frozenset([2]): {}, None: {}}
    result = dijkstra(g, ("x", 1))
    assert result[None].distance == 1
    assert result[frozenset([2])].distance == 1


def test_shortest_path(diamond):
    assert shortest_path(diamond, 0, 3) == [0, 1, 3]
    assert shortest_path(diamond, 0, 0) == [0]
    assert shortest_path(diamond, 3, 0) == []
    assert shortest_path(diamond, 0, 4) == []


@pytest.mark.parametrize("seed", range(8))
def test_paths_are_consistent_and_match_floyd_warshall(seed):
    rng = random.Random(seed)
    v = rng.randint(2, 12)
    e = rng.randint(v - 1, v * (v - 1))
    g = make_graph(v, e, max_weight=20, rng=rng)
    dist, order = distance_matrix(g)
    index = {u: i for i, u in enumerate(order)}
    for s in g:
        result = dijkstra(g, s)
        for t in g:
            expected = dist[index[s], index[t]]
            if t not in result:
                assert math.isinf(expected)
                assert shortest_path(g, s, t) == []
                continue
            d, path = result[t]
            assert d == expected
            assert path[0] == s and path[-1] == t
            assert g.path_weight(path) == d
            assert dijkstra(g, s, t)[t] == (d, path)


def test_frontier_keeps_strictly_better_entries():
    f = PathFrontier()
    assert f.offer("a", 5, ["s", "a"])
    assert f
    assert not f.offer("a", 5, ["s", "x", "a"])
    assert not f.offer("a", 6, ["s", "y", "a"])
    assert f.offer("a", 2, ["s", "z", "a"])
    assert f.pop() == ("a", 2, ["s", "z", "a"])
    # the superseded heap entry for "a" is stale and skipped
    assert f.pop() is None
    assert not f


def test_frontier_pops_in_distance_then_insertion_order():
    f = PathFrontier()
    f.offer("b", 3, ["b"])
    f.offer("a", 1, ["a"])
    f.offer("c", 3, ["c"])
    assert [f.pop()[0] for _ in range(3)] == ["a", "b", "c"]
    assert not f
