"""Registry of graph representations."""

from typing import Dict, Type

from graphpoet.edges import EdgesGraph
from graphpoet.graph import Graph
from graphpoet.vertices import VerticesGraph

_representation_list = [EdgesGraph, VerticesGraph]

representations: Dict[str, Type[Graph]] = {g.name: g for g in _representation_list}


def empty(kind: str = "edges") -> Graph:
    """Create an empty graph using the named representation.

    Both representations behave identically. The "edges" representation keeps
    a flat collection of edges, while "vertices" keeps a map of outgoing edges
    on each vertex.
    """
    if kind not in representations:
        choices = ", ".join(representations)
        raise ValueError(f"unknown graph representation {kind!r} (use {choices})")
    return representations[kind]()
