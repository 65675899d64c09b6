"""Edge-list graph representation."""

from __future__ import annotations

from typing import Dict, Iterator, NamedTuple, Set, Tuple, TypeVar

from graphpoet.graph import Graph, check_weight

T = TypeVar("T")


class Edge(NamedTuple):

    """An immutable weighted edge from source to target."""

    source: object
    target: object
    weight: int

    def __str__(self) -> str:
        return f"{self.source} -> {self.target} ({self.weight})"


class EdgesGraph(Graph[T]):

    """Graph stored as a set of vertices and a flat collection of edges.

    The edges are keyed by (source, target), so setting a weight is a single
    lookup and enumerating edges is cheap. Finding the sources or targets of a
    vertex requires a scan of every edge.

    Invariants:

    * Every edge's source and target are in the vertex set.
    * Every edge is stored under its own (source, target) pair.
    * No edge has weight zero.
    """

    name = "edges"

    def __init__(self):
        self._vertices: Set[T] = set()
        self._edges: Dict[Tuple[T, T], Edge] = {}

    def add(self, vertex: T) -> bool:
        if vertex in self._vertices:
            return False
        self._vertices.add(vertex)
        self.checked()
        return True

    def set(self, source: T, target: T, weight: int) -> int:
        check_weight(weight)
        pair = (source, target)
        old = self._edges.get(pair)
        if weight == 0:
            self._edges.pop(pair, None)
        else:
            self._vertices.add(source)
            self._vertices.add(target)
            self._edges[pair] = Edge(source, target, weight)
        self.checked()
        return 0 if old is None else old.weight

    def remove(self, vertex: T) -> bool:
        if vertex not in self._vertices:
            return False
        self._vertices.remove(vertex)
        self._edges = {
            pair: e
            for pair, e in self._edges.items()
            if e.source != vertex and e.target != vertex
        }
        self.checked()
        return True

    def vertices(self) -> Set[T]:
        return set(self._vertices)

    def sources(self, target: T) -> Dict[T, int]:
        return {e.source: e.weight for e in self._edges.values() if e.target == target}

    def targets(self, source: T) -> Dict[T, int]:
        return {e.target: e.weight for e in self._edges.values() if e.source == source}

    def edges(self) -> Iterator[Tuple[T, T, int]]:
        return iter(list(self._edges.values()))

    def check_rep(self):
        for pair, edge in self._edges.items():
            assert edge.weight != 0, f"zero-weight edge {edge}"
            assert edge.source in self._vertices, f"dangling source in {edge}"
            assert edge.target in self._vertices, f"dangling target in {edge}"
            assert pair == (edge.source, edge.target), f"{edge} stored under {pair}"
