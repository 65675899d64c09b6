"""Graph-based poetry generator."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set, Tuple, Union

from graphpoet.affinity import build_affinity, load_corpus, words
from graphpoet.graph import Graph, checking


class GraphPoet:

    """A poetry generator driven by a word affinity graph.

    Given an input string, the poet tries to insert a bridge word between every
    adjacent pair of input words. The bridge between w1 and w2 is some b such
    that w1 -> b -> w2 is the heaviest two-edge path from w1 to w2 in the graph
    (ties go to the first candidate found). When there is no such path, nothing
    is inserted. Input words keep their case, bridge words are lowercase, and
    the words of the poem are separated by single spaces.

    For example, with the corpus

        This is a test of the Mugar Omni Theater sound system.

    the input "Test the system." produces "Test of the system."

    The poet never modifies its graph after construction.
    """

    def __init__(self, graph: Graph[str]):
        self.graph = graph
        self._vertices: Set[str] = graph.vertices()
        self._edges: Set[Tuple[str, str, int]] = set(graph.edges())

    def __repr__(self) -> str:
        return f"GraphPoet(graph={self.graph!r})"

    def __str__(self) -> str:
        return str(self.graph)

    @staticmethod
    def from_lines(lines: Iterable[str], kind: str = "edges") -> GraphPoet:
        """Create a poet from lines of corpus text."""
        return GraphPoet(build_affinity(lines, kind))

    @staticmethod
    def from_file(path: Union[str, Path], kind: str = "edges") -> GraphPoet:
        """Create a poet from a corpus file.

        Raises CorpusError if the file cannot be read.
        """
        return GraphPoet(load_corpus(path, kind))

    def check_rep(self):
        assert self.graph.vertices() == self._vertices, "graph vertices changed"
        assert set(self.graph.edges()) == self._edges, "graph edges changed"
        for vertex in self._vertices:
            assert vertex == vertex.lower(), f"vertex {vertex!r} is not lowercase"

    def bridge(self, first: str, second: str) -> Optional[str]:
        """Return the best bridge word from first to second, if any."""
        target = second.lower()
        best: Optional[str] = None
        best_weight = 0
        intermediates: Dict[str, int] = self.graph.targets(first.lower())
        for word, weight1 in intermediates.items():
            weight2 = self.graph.targets(word).get(target, 0)
            if weight2 == 0:
                continue
            if best is None or weight1 + weight2 > best_weight:
                best = word
                best_weight = weight1 + weight2
        if best is not None:
            logging.debug(
                "bridge %r -> %r -> %r (weight %d)", first, best, second, best_weight
            )
        return best

    def poem_words(self, text: str) -> List[str]:
        """Generate a poem from text, returning its words."""
        output: List[str] = []
        last: Optional[str] = None
        for word in words(text):
            if last is not None:
                bridge = self.bridge(last, word)
                if bridge is not None:
                    output.append(bridge)
            output.append(word)
            last = word
        if checking():
            self.check_rep()
        return output

    def poem(self, text: str) -> str:
        """Generate a poem from text."""
        return " ".join(self.poem_words(text))
