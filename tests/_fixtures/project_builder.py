"""Helper utilities for constructing temporary source trees in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Mapping

import yaml

from devdocs.config import CONFIG_FILENAME, DevDocsConfig, load_config


class ProjectBuilder:
    """Utility for writing files into a throwaway project and loading its config."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "project"
        self.root.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the project."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def write_config(self, data: Mapping[str, object]) -> Path:
        """Serialise ``data`` as the project's .devdocs.yml."""
        path = self.root / CONFIG_FILENAME
        path.write_text(yaml.safe_dump(dict(data), sort_keys=False), encoding="utf-8")
        return path

    def config(self) -> DevDocsConfig:
        return load_config(self.root)

    def path(self) -> Path:
        """Return the project root path."""
        return self.root


__all__ = ["ProjectBuilder"]
