"""The graphpoet.yml configuration file."""

import logging
import os.path
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from graphpoet.representations import representations

CONFIG_NAME = "graphpoet.yml"


class PoetConfig:

    """Settings loaded from a graphpoet.yml file.

    The file is a YAML mapping with these keys:

        corpus: words.txt         # required, relative to the config file
        representation: edges     # optional, "edges" or "vertices"

    Problems are reported with logging.error and replaced by defaults, so a
    broken file never stops the command when running with --keep-going.
    Call validate() after loading.
    """

    defaults: Dict[str, Any] = {
        "corpus": None,
        "representation": "edges",
    }

    def __init__(self, path: Path, data: Dict[str, Any]):
        self.path = path
        self.data = data

    def __repr__(self) -> str:
        return f"PoetConfig(path={self.path!r}, data={self.data!r})"

    @staticmethod
    def load(path: Path) -> "PoetConfig":
        """Load configuration from a file."""
        with open(path, encoding="utf-8") as f:
            return PoetConfig.parse(path, f.read())

    @staticmethod
    def parse(path: Path, content: str) -> "PoetConfig":
        """Parse configuration text that was read from path."""
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as ex:
            logging.error("cannot parse %s: %s", path, ex)
            data = {}
        if data is None:
            data = {}
        if not isinstance(data, dict):
            logging.error("invalid YAML in %s: %s", path, type(data))
            data = {}
        return PoetConfig(path, data)

    def validate(self):
        """Check the keys and values, filling in defaults."""
        for key in self.data:
            if key not in self.defaults:
                logging.warning("%s: unknown key %r", self.path, key)
        self.data = {**self.defaults, **self.data}

        corpus = self.data["corpus"]
        if corpus is None:
            logging.error("%s: missing 'corpus'", self.path)
        elif not isinstance(corpus, str):
            logging.error(
                "%s: corpus must be a file name, not %s", self.path, type(corpus).__name__
            )
            self.data["corpus"] = None

        kind = self.data["representation"]
        if not isinstance(kind, str) or kind not in representations:
            logging.error(
                "%s: representation must be one of %s, not %r",
                self.path,
                ", ".join(representations),
                kind,
            )
            self.data["representation"] = self.defaults["representation"]

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def corpus_path(self) -> Optional[Path]:
        """Return the corpus path, relative to the config file's directory."""
        corpus = self.data.get("corpus")
        if corpus is None:
            return None
        return self.path.parent / corpus


def find_config(start: Optional[Path] = None) -> Optional[Path]:
    """Find a graphpoet.yml file in start (default cwd) or its parents.

    Returns None if there is none.
    """
    path = (start or Path.cwd()).resolve()
    while True:
        config = path / CONFIG_NAME
        if config.is_file():
            # Relative paths keep log messages short.
            return Path(os.path.relpath(config, Path.cwd()))
        if path == path.parent:
            return None
        path = path.parent
