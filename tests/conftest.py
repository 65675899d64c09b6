import logging
from pathlib import Path
from typing import Callable

import pytest

from graphpoet import graph
from graphpoet.graph import Graph
from graphpoet.representations import empty, representations


@pytest.fixture(autouse=True)
def check_invariants(monkeypatch):
    """Assert graph and poet invariants after every mutation and poem."""
    monkeypatch.setattr(graph, "CHECK_REP", True)


@pytest.fixture(params=list(representations))
def empty_graph(request) -> Callable[[], Graph]:
    """Factory for empty graphs, run once per representation."""
    return lambda: empty(request.param)


@pytest.fixture
def write_corpus(tmp_path) -> Callable[[str], Path]:
    def write(text: str, name: str = "corpus.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return write


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handlers installed by setup_logging (e.g. via cli.main)."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
