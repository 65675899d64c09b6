"""Generic weighted directed graph interface."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from io import StringIO
from typing import Dict, Generic, Iterator, Set, TextIO, Tuple, TypeVar

T = TypeVar("T")

# When true, graphs and poets assert their invariants after every mutation or
# poem. Each check is a full pass over the graph. The test suite turns it on.
CHECK_REP = False


def checking() -> bool:
    """Return true if automatic invariant checks are enabled."""
    return CHECK_REP


class Graph(ABC, Generic[T]):

    """A mutable, weighted, directed graph with labeled vertices.

    Vertices are values of type T, compared by equality. Edges are directed and
    carry a nonzero integer weight. There is at most one edge for each ordered
    pair of vertices. Self-loops are allowed.

    All queries return fresh containers: mutating the result of vertices(),
    sources(), or targets() never affects the graph. Querying a vertex that is
    not in the graph is not an error; it simply has no edges.
    """

    name: str

    @abstractmethod
    def add(self, vertex: T) -> bool:
        """Add a vertex. Returns true if it was not already present."""

    @abstractmethod
    def set(self, source: T, target: T, weight: int) -> int:
        """Add, change, or remove the edge from source to target.

        A nonzero weight creates the edge (adding source and target as vertices
        if necessary) or replaces its weight. A zero weight removes the edge if
        it exists; vertices are never removed. Returns the previous weight, or
        zero if there was no such edge.
        """

    @abstractmethod
    def remove(self, vertex: T) -> bool:
        """Remove a vertex and all its edges. Returns true if it existed."""

    @abstractmethod
    def vertices(self) -> Set[T]:
        """Return a snapshot of the vertices."""

    @abstractmethod
    def sources(self, target: T) -> Dict[T, int]:
        """Return the weight of each edge into target, keyed by its source."""

    @abstractmethod
    def targets(self, source: T) -> Dict[T, int]:
        """Return the weight of each edge out of source, keyed by its target."""

    @abstractmethod
    def check_rep(self):
        """Assert the representation invariant."""

    def checked(self):
        """Run check_rep if automatic invariant checks are enabled."""
        if CHECK_REP:
            self.check_rep()

    def edges(self) -> Iterator[Tuple[T, T, int]]:
        """Iterate over (source, target, weight) for every edge."""
        for source in self.vertices():
            for target, weight in self.targets(source).items():
                yield source, target, weight

    def __repr__(self) -> str:
        name = self.__class__.__name__
        n_edges = sum(1 for _ in self.edges())
        return f"{name}(V={len(self.vertices())}, E={n_edges})"

    def __str__(self) -> str:
        out = StringIO()
        self.dump(out)
        return out.getvalue()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self.vertices() == other.vertices() and set(self.edges()) == set(
            other.edges()
        )

    # Graphs are mutable.
    __hash__ = None  # type: ignore

    def dump(self, out: TextIO = sys.stdout):
        """Dump a textual representation of this graph to out.

        The ordering of vertices and edges is unspecified.
        """
        print("vertices:", file=out)
        for vertex in self.vertices():
            print(f"    {vertex}", file=out)
        print("edges:", file=out)
        for source, target, weight in self.edges():
            print(f"    {source} -> {target} ({weight})", file=out)


def check_weight(weight: int):
    """Raise TypeError if weight is not an int."""
    # bool is a subclass of int, but True is not a sensible weight.
    if not isinstance(weight, int) or isinstance(weight, bool):
        raise TypeError(f"edge weight must be an int, not {type(weight).__name__}")

