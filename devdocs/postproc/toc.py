"""Table-of-contents generation for generated reference documents."""

from __future__ import annotations

import re
from typing import Dict, List

from ..renderers.markdown import TOC_PLACEHOLDER


class TableOfContentsBuilder:
    """Replaces the TOC placeholder with links to the document's headings."""

    PLACEHOLDER = TOC_PLACEHOLDER

    def __init__(self, max_level: int = 2) -> None:
        self.max_level = max_level

    def build(self, markdown: str) -> str:
        if self.PLACEHOLDER not in markdown:
            return markdown
        toc_block = self._build_block(markdown)
        return markdown.replace(self.PLACEHOLDER, toc_block, 1)

    def _build_block(self, markdown: str) -> str:
        headings: List[tuple[int, str, str]] = []
        used: Dict[str, int] = {}
        in_code = False
        for line in markdown.splitlines():
            stripped = line.strip()
            if stripped.startswith("```"):
                in_code = not in_code
                continue
            if in_code:
                continue
            match = re.match(r"^(#{2,6})\s+(.*)$", stripped)
            if not match:
                continue
            level = len(match.group(1))
            title = match.group(2).strip()
            anchor = self._unique_anchor(self.slugify(title), used)
            if level <= self.max_level and title.lower() != "table of contents":
                headings.append((level, title, anchor))

        if not headings:
            return "*No sections.*"

        output: List[str] = []
        for level, title, anchor in headings:
            indent = "  " * (level - 2)
            output.append(f"{indent}- [{title}](#{anchor})")
        return "\n".join(output)

    @staticmethod
    def _unique_anchor(slug: str, used: Dict[str, int]) -> str:
        count = used.get(slug, 0)
        used[slug] = count + 1
        return slug if count == 0 else f"{slug}-{count}"

    @staticmethod
    def slugify(title: str) -> str:
        """GitHub-style heading anchor: punctuation dropped, spaces to hyphens."""
        slug = title.strip().lower()
        slug = re.sub(r"[^\w\s-]", "", slug)
        return re.sub(r"\s", "-", slug)


__all__ = ["TableOfContentsBuilder"]
