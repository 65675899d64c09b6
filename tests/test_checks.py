"""Automatic invariant checks and the cost of building large graphs."""

import random
import time

import pytest

from graphpoet import graph
from graphpoet.affinity import build_affinity
from graphpoet.edges import Edge, EdgesGraph
from graphpoet.poet import GraphPoet
from graphpoet.representations import representations


def corrupted() -> EdgesGraph:
    g = EdgesGraph()
    g.add("a")
    g._edges["a", "a"] = Edge("a", "a", 0)  # pylint: disable=protected-access
    return g


def test_mutations_check_when_enabled():
    g = corrupted()
    with pytest.raises(AssertionError):
        g.add("b")


def test_mutations_skip_checks_by_default(monkeypatch):
    monkeypatch.setattr(graph, "CHECK_REP", False)
    g = corrupted()
    assert g.add("b") is True
    assert g.set("b", "c", 1) == 0


def test_poems_skip_checks_by_default(monkeypatch):
    monkeypatch.setattr(graph, "CHECK_REP", False)
    poet = GraphPoet.from_lines(["a b c"])
    poet.graph.set("c", "a", 1)
    assert poet.poem("a c") == "a b c"


@pytest.mark.parametrize("kind", list(representations))
def test_large_corpus_builds_quickly(kind, monkeypatch):
    monkeypatch.setattr(graph, "CHECK_REP", False)
    rng = random.Random(1234)
    vocabulary = [f"word{i}" for i in range(400)]
    lines = [
        " ".join(rng.choice(vocabulary) for _ in range(20)) for _ in range(250)
    ]
    start = time.perf_counter()
    g = build_affinity(lines, kind)
    elapsed = time.perf_counter() - start
    assert sum(weight for _, _, weight in g.edges()) == 20 * 250 - 1
    assert elapsed < 2.0
