"""Weighted directed graphs and a bridge-word poetry generator."""

from graphpoet.affinity import CorpusError, build_affinity, load_corpus
from graphpoet.graph import Graph
from graphpoet.poet import GraphPoet
from graphpoet.representations import empty, representations

__all__ = [
    "CorpusError",
    "Graph",
    "GraphPoet",
    "build_affinity",
    "empty",
    "load_corpus",
    "representations",
]
