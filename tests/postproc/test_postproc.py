"""Tests for post-processing helpers."""

from __future__ import annotations

from pathlib import Path

from devdocs.postproc.lint import MarkdownLinter
from devdocs.postproc.links import LinkValidator
from devdocs.postproc.toc import TableOfContentsBuilder


def test_markdown_linter_normalises_whitespace() -> None:
    markdown = "# Title\r\n\r\nText\r\n\r\n\r\n## Section\r\nContent  \r\n"
    linted = MarkdownLinter().lint(markdown)
    assert linted.endswith("\n")
    assert "\r" not in linted
    assert "  \n" not in linted
    assert "\n\n\n" not in linted
    assert "Text\n\n## Section" in linted


def test_markdown_linter_keeps_code_blocks_verbatim() -> None:
    markdown = "Intro\n```typescript\ninterface A {\n\n\n  x: string\n}\n```\n"
    linted = MarkdownLinter().lint(markdown)
    assert "Intro\n\n```typescript\ninterface A {\n\n\n  x: string\n}\n```\n" == linted


def test_table_of_contents_builder_replaces_placeholder() -> None:
    md = "# Project\n\n## Table of Contents\n\n<!-- devdocs:toc -->\n\n## Alpha\n\n### Beta\n"
    result = TableOfContentsBuilder().build(md)
    assert "<!-- devdocs:toc -->" not in result
    assert "- [Alpha](#alpha)" in result
    assert "[Beta]" not in result
    assert "[Table of Contents]" not in result


def test_table_of_contents_builder_slug_matches_github() -> None:
    md = "# Project\n\n<!-- devdocs:toc -->\n\n## Build & Test\n## Build & Test\n## Overview | 概要\n"
    result = TableOfContentsBuilder().build(md)
    assert "- [Build & Test](#build--test)" in result
    assert "- [Build & Test](#build--test-1)" in result
    assert "- [Overview | 概要](#overview--概要)" in result


def test_table_of_contents_builder_ignores_headings_in_code() -> None:
    md = "# Doc\n\n<!-- devdocs:toc -->\n\n```bash\n## not a heading\n```\n\n## Real\n"
    result = TableOfContentsBuilder(max_level=3).build(md)
    assert "not a heading](#" not in result
    assert "- [Real](#real)" in result


def test_table_of_contents_builder_leaves_documents_without_placeholder() -> None:
    md = "# Doc\n\n## Alpha\n"
    assert TableOfContentsBuilder().build(md) == md


def test_link_validator_detects_missing_file(tmp_path: Path) -> None:
    readme = "Refer to [Guide](./css-classes-reference.md)."
    issues = LinkValidator().validate(readme, root=tmp_path)
    assert issues == ["Link target not found: ./css-classes-reference.md"]


def test_link_validator_checks_anchors(tmp_path: Path) -> None:
    (tmp_path / "guide.md").write_text("# Guide\n\n## Colors\n", encoding="utf-8")
    markdown = "## Local\n\n[ok](#local) [bad](#missing) [remote](guide.md#colors) [gone](guide.md#fonts)"
    issues = LinkValidator().validate(markdown, root=tmp_path)
    assert issues == ["Anchor not found: #missing", "Anchor not found: guide.md#fonts"]


def test_link_validator_ignores_external_links(tmp_path: Path) -> None:
    assert LinkValidator().validate("[site](https://logseq.com)", root=tmp_path) == []
