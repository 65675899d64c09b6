import pytest

from graphpoet.edges import Edge, EdgesGraph


def test_edge_str():
    assert str(Edge("a", "b", 4)) == "a -> b (4)"


def test_reweight_keeps_single_edge():
    g = EdgesGraph()
    g.set("a", "b", 1)
    g.set("a", "b", 2)
    g.set("a", "b", 3)
    assert list(g.edges()) == [Edge("a", "b", 3)]


def test_edges_snapshot_survives_mutation():
    g = EdgesGraph()
    g.set("a", "b", 1)
    edges = g.edges()
    g.remove("a")
    assert list(edges) == [("a", "b", 1)]


def test_check_rep_catches_misfiled_edge():
    g = EdgesGraph()
    g.set("a", "b", 1)
    g._edges["a", "a"] = Edge("a", "b", 2)  # pylint: disable=protected-access
    with pytest.raises(AssertionError, match="stored under"):
        g.check_rep()


def test_check_rep_catches_zero_weight():
    g = EdgesGraph()
    g.add("a")
    g._edges["a", "a"] = Edge("a", "a", 0)  # pylint: disable=protected-access
    with pytest.raises(AssertionError, match="zero-weight"):
        g.check_rep()
