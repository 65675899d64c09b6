"""Word affinity graphs built from a text corpus."""

import logging
from collections import Counter
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple, Union

from graphpoet.graph import Graph
from graphpoet.representations import empty


class CorpusError(OSError):

    """The corpus could not be read.

    This is distinct from errors in building the graph itself: it always means
    the file was missing, unreadable, or not valid UTF-8.
    """

    def __init__(self, path: Union[str, Path], reason: str):
        super().__init__(f"cannot read corpus {path}: {reason}")
        self.path = path
        self.reason = reason


def words(line: str) -> Iterator[str]:
    """Iterate over the whitespace-delimited words in a line."""
    return iter(line.split())


def build_affinity(lines: Iterable[str], kind: str = "edges") -> Graph[str]:
    """Build a word affinity graph from lines of text.

    Vertices are lowercased words. The edge from w1 to w2 counts how many times
    w2 immediately follows w1. Line breaks do not interrupt adjacency: the last
    word of a line is followed by the first word of the next nonblank line.
    """
    g: Graph[str] = empty(kind)
    counts: Counter[Tuple[str, str]] = Counter()
    last: Optional[str] = None
    for line in lines:
        for word in words(line):
            word = word.lower()
            if last is not None:
                counts[last, word] += 1
            last = word
    # Each pair is counted once, so every edge is new here.
    for (source, target), count in counts.items():
        g.set(source, target, count)
    return g


def load_corpus(path: Union[str, Path], kind: str = "edges") -> Graph[str]:
    """Build a word affinity graph from a UTF-8 corpus file.

    Raises CorpusError if the file cannot be read. The graph is only returned
    once the whole file has been consumed.
    """
    logging.info("reading corpus %s", path)
    try:
        with open(path, encoding="utf-8") as f:
            g = build_affinity(f, kind)
    except UnicodeDecodeError as ex:
        raise CorpusError(path, f"invalid UTF-8 ({ex.reason})") from ex
    except OSError as ex:
        raise CorpusError(path, ex.strerror or str(ex)) from ex
    logging.info("built affinity graph from %s: %r", path, g)
    return g
