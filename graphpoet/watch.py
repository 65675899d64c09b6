"""Corpus file watching."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from graphpoet.affinity import CorpusError
from graphpoet.poet import GraphPoet


class Watcher:

    """Watch a corpus file and rebuild the poet whenever it changes."""

    def __init__(
        self, corpus: Path, kind: str, on_reload: Callable[[GraphPoet], None]
    ):
        self.handler = Handler(corpus, kind, on_reload)
        self.observer = Observer()

    def run(self):
        # Have to pass str, not Path, otherwise it crashes with SIGILL.
        directory = str(self.handler.corpus.parent)
        self.observer.schedule(self.handler, directory, recursive=False)
        logging.info("running initial load")
        self.handler.reload()
        logging.info("watching %s", self.handler.corpus)
        self.observer.start()
        try:
            self.observer.join()
        except KeyboardInterrupt:
            logging.info("quitting")
        finally:
            self.observer.stop()
            self.observer.join()


class Handler(FileSystemEventHandler):

    """Handler for file system events on the corpus file."""

    def __init__(
        self, corpus: Path, kind: str, on_reload: Callable[[GraphPoet], None]
    ):
        super().__init__()
        self.corpus = corpus.resolve()
        self.kind = kind
        self.on_reload = on_reload
        self.poet: GraphPoet = GraphPoet.from_lines([], kind)

    def matches(self, event: FileSystemEvent) -> bool:
        paths = [event.src_path, getattr(event, "dest_path", "")]
        return any(p and Path(p).resolve() == self.corpus for p in paths)

    def on_any_event(self, event: FileSystemEvent):
        if event.is_directory or not self.matches(event):
            return
        if event.event_type not in ("created", "modified", "moved"):
            return
        logging.info("%s %s: reload", event.src_path, event.event_type)
        self.reload()

    def reload(self):
        """Rebuild the poet from the corpus, keeping the old one on failure."""
        try:
            self.poet = GraphPoet.from_file(self.corpus, self.kind)
        except CorpusError as ex:
            logging.error("%s (keeping previous corpus)", ex)
            return
        self.on_reload(self.poet)
