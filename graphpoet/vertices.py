"""Adjacency (per-vertex) graph representation."""

from __future__ import annotations

from typing import Dict, Generic, Set, TypeVar

from graphpoet.graph import Graph, check_weight

T = TypeVar("T")


class Vertex(Generic[T]):

    """A vertex label together with its outgoing edge weights."""

    def __init__(self, label: T):
        self.label = label
        self._points: Dict[T, int] = {}

    def __repr__(self) -> str:
        return f"Vertex(label={self.label!r}, points={self._points!r})"

    def points(self) -> Dict[T, int]:
        """Return a copy of the outgoing weights, keyed by target."""
        return dict(self._points)

    def weight(self, target: T) -> int:
        """Return the weight of the edge to target, or zero."""
        return self._points.get(target, 0)

    def update(self, target: T, weight: int) -> int:
        """Set the weight to target (zero unlinks). Returns the old weight."""
        previous = self._points.get(target, 0)
        if weight == 0:
            self.unlink(target)
        else:
            self._points[target] = weight
        return previous

    def unlink(self, target: T):
        self._points.pop(target, None)


class VerticesGraph(Graph[T]):

    """Graph stored as vertices, each owning its outgoing edges.

    Looking up the targets of a vertex only touches that vertex; finding its
    sources requires visiting every vertex.

    Invariants:

    * Every vertex is stored under its own label.
    * Every target in a vertex's points is the label of some vertex.
    * No weight is zero.
    """

    name = "vertices"

    def __init__(self):
        self._vertices: Dict[T, Vertex[T]] = {}

    def _find_or_create(self, label: T) -> Vertex[T]:
        vertex = self._vertices.get(label)
        if vertex is None:
            vertex = self._vertices[label] = Vertex(label)
        return vertex

    def add(self, vertex: T) -> bool:
        if vertex in self._vertices:
            return False
        self._vertices[vertex] = Vertex(vertex)
        self.checked()
        return True

    def set(self, source: T, target: T, weight: int) -> int:
        check_weight(weight)
        if weight == 0:
            vertex = self._vertices.get(source)
            if vertex is None:
                return 0
        else:
            vertex = self._find_or_create(source)
            self._find_or_create(target)
        previous = vertex.update(target, weight)
        self.checked()
        return previous

    def remove(self, vertex: T) -> bool:
        if self._vertices.pop(vertex, None) is None:
            return False
        for other in self._vertices.values():
            other.unlink(vertex)
        self.checked()
        return True

    def vertices(self) -> Set[T]:
        return set(self._vertices)

    def sources(self, target: T) -> Dict[T, int]:
        result = {}
        for vertex in self._vertices.values():
            weight = vertex.weight(target)
            if weight != 0:
                result[vertex.label] = weight
        return result

    def targets(self, source: T) -> Dict[T, int]:
        vertex = self._vertices.get(source)
        if vertex is None:
            return {}
        return vertex.points()

    def check_rep(self):
        for label, vertex in self._vertices.items():
            assert vertex.label == label, f"{vertex!r} stored under {label!r}"
            for target, weight in vertex.points().items():
                assert weight != 0, f"zero weight on {label} -> {target}"
                assert target in self._vertices, f"dangling edge {label} -> {target}"
