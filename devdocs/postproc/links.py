"""Link validation for generated documents."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, List, Set

from .toc import TableOfContentsBuilder


class LinkValidator:
    """Checks that relative links point at existing files and headings."""

    _LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
    _HEADING_PATTERN = re.compile(r"^#{1,6}\s+(.*)$", re.M)

    def validate(self, markdown: str, *, root: Path) -> List[str]:
        """Return a list of issues discovered in the provided markdown."""
        issues: List[str] = []
        anchor_cache: Dict[Path, Set[str]] = {}
        for match in self._LINK_PATTERN.finditer(markdown):
            target = match.group(2).strip()
            if not target:
                issues.append("Empty link target detected")
                continue
            if target.startswith(("http://", "https://", "mailto:")):
                continue

            file_part, _, anchor = target.partition("#")
            file_part = file_part.split("?", 1)[0].replace("\\", "/")
            if file_part.startswith("./"):
                file_part = file_part[2:]

            if not file_part:
                if anchor and anchor not in self._anchors(markdown):
                    issues.append(f"Anchor not found: #{anchor}")
                continue

            candidate = root / file_part
            if not candidate.exists():
                issues.append(f"Link target not found: {target}")
                continue
            if anchor and candidate.is_file() and candidate.suffix == ".md":
                if candidate not in anchor_cache:
                    anchor_cache[candidate] = self._anchors(candidate.read_text(encoding="utf-8"))
                if anchor not in anchor_cache[candidate]:
                    issues.append(f"Anchor not found: {target}")
        return issues

    def _anchors(self, markdown: str) -> Set[str]:
        return {
            TableOfContentsBuilder.slugify(match.group(1))
            for match in self._HEADING_PATTERN.finditer(markdown)
        }


__all__ = ["LinkValidator"]
