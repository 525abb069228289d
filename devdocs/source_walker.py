"""Deterministic traversal of source trees."""

from __future__ import annotations

import os
from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence

_EXCLUDED_DIRS = {
    ".git",
    ".hg",
    ".svn",
    ".venv",
    "node_modules",
    "__pycache__",
    ".shadow-cljs",
    ".cpcache",
    ".clj-kondo",
    ".lsp",
    ".idea",
}

_EXCLUDED_FILES = {
    ".DS_Store",
    "Thumbs.db",
}


@dataclass(frozen=True)
class SourceFile:
    """A file discovered under a scan root.

    ``relative`` is relative to the scan root and is what scanners record as
    the source file of a definition.
    """

    path: Path
    relative: str

    @property
    def suffix(self) -> str:
        return self.path.suffix.lower()


@dataclass(frozen=True)
class ExclusionRule:
    """One `.gitignore` line or `exclude_paths` entry.

    ``base`` is the directory that declared the rule, as a POSIX path relative
    to the project root ("" for the root itself). Rules only apply below it.
    """

    glob: str
    base: str = ""
    dirs_only: bool = False
    path_glob: bool = False
    negated: bool = False

    def applies_to(self, project_path: str, is_dir: bool) -> bool:
        if self.dirs_only and not is_dir:
            return False
        if self.base:
            if not project_path.startswith(f"{self.base}/"):
                return False
            project_path = project_path[len(self.base) + 1 :]
        if self.path_glob:
            return fnmatchcase(project_path, self.glob)
        # Excluded directories are pruned, so matching the last segment covers descendants.
        return fnmatchcase(project_path.rsplit("/", 1)[-1], self.glob)


def parse_exclusion(line: str, base: str = "") -> Optional[ExclusionRule]:
    """Parse one gitignore-style line; blank lines and comments yield ``None``."""
    text = line.strip()
    if not text or text.startswith("#"):
        return None
    negated = text.startswith("!")
    text = text[1:] if negated else text
    dirs_only = text.endswith("/")
    text = text.rstrip("/")
    # A leading or inner slash pins the glob to the declaring directory.
    path_glob = "/" in text
    text = text.lstrip("/")
    if not text:
        return None
    return ExclusionRule(glob=text, base=base, dirs_only=dirs_only, path_glob=path_glob, negated=negated)


def read_gitignore(directory: Path, base: str = "") -> List[ExclusionRule]:
    path = directory / ".gitignore"
    if not path.is_file():
        return []
    lines = path.read_text(encoding="utf-8").splitlines()
    return [rule for rule in (parse_exclusion(line, base) for line in lines) if rule is not None]


def _is_excluded(project_path: str, is_dir: bool, rules: Iterable[ExclusionRule]) -> bool:
    excluded = False
    for rule in rules:
        if rule.applies_to(project_path, is_dir):
            excluded = not rule.negated
    return excluded


class SourceWalker:
    """Yields files under a root in a stable, sorted order.

    Directory entries are sorted by name at every level so that the
    traversal order (and therefore every generated document) is identical
    across platforms for an unchanged tree.

    Exclusion rules are resolved against ``project_root``: its `.gitignore`
    and the configured ``exclude_paths`` see paths such as
    ``src/main/frontend/vendor`` even when only ``src/main/frontend`` is
    walked. Every `.gitignore` from the project root down to a walked
    directory applies below the directory that holds it. Without a project
    root (or for a scan root outside it) the scan root stands in for it.
    """

    def __init__(self, exclude_paths: Sequence[str] = (), project_root: Path | None = None) -> None:
        self.project_root = project_root.expanduser().resolve() if project_root is not None else None
        self._configured = [rule for rule in (parse_exclusion(entry) for entry in exclude_paths) if rule is not None]

    def walk(self, root: Path, extensions: Sequence[str] | None = None) -> Iterator[SourceFile]:
        root = root.expanduser().resolve()
        if not root.exists():
            raise FileNotFoundError(f"Source path not found: {root}")
        if not root.is_dir():
            raise NotADirectoryError(f"Source path is not a directory: {root}")

        anchor = self._anchor(root)
        prefix = root.relative_to(anchor).as_posix() if root != anchor else ""
        # `.gitignore` files between the project root and the scan root.
        gitignore_rules: List[ExclusionRule] = []
        directory, base = anchor, ""
        for part in Path(prefix).parts:
            gitignore_rules += read_gitignore(directory, base)
            directory, base = directory / part, _join(base, part)
        wanted = {ext.lower() for ext in extensions} if extensions is not None else None

        for dirpath, dirnames, filenames in os.walk(root):
            current_dir = Path(dirpath)
            rel_dir = current_dir.relative_to(root).as_posix() if current_dir != root else ""
            gitignore_rules += read_gitignore(current_dir, base=_join(prefix, rel_dir))
            rules = gitignore_rules + self._configured

            kept_dirs = []
            for name in sorted(dirnames):
                if name in _EXCLUDED_DIRS:
                    continue
                if _is_excluded(_join(prefix, rel_dir, name), True, rules):
                    continue
                kept_dirs.append(name)
            dirnames[:] = kept_dirs

            for filename in sorted(filenames):
                if filename in _EXCLUDED_FILES:
                    continue
                path = current_dir / filename
                if wanted is not None and path.suffix.lower() not in wanted:
                    continue
                if _is_excluded(_join(prefix, rel_dir, filename), False, rules):
                    continue
                yield SourceFile(path=path, relative=_join(rel_dir, filename))

    def _anchor(self, root: Path) -> Path:
        if self.project_root is not None and root.is_relative_to(self.project_root):
            return self.project_root
        return root


def _join(*parts: str) -> str:
    return "/".join(part for part in parts if part)


__all__ = ["ExclusionRule", "SourceFile", "SourceWalker", "parse_exclusion", "read_gitignore"]
