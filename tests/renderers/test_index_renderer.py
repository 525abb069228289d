"""Tests for the README index pages and template loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from devdocs.renderers.index import DOCUMENT_FILES, render_index
from devdocs.renderers.templating import TemplateRenderer


def test_english_index_links_every_document() -> None:
    markdown = render_index(project_name="Acme", generated_at="2024-05-01T12:00:00+00:00")
    assert markdown.startswith("# Acme Developer Documentation")
    for filename in DOCUMENT_FILES.values():
        assert f"(./{filename})" in markdown
    assert "(./README.ja.md)" in markdown
    assert "*Last generated: 2024-05-01T12:00:00+00:00*" in markdown


def test_japanese_index_links_back_to_english() -> None:
    markdown = render_index(language="ja")
    assert markdown.startswith("# Logseq 開発者ドキュメント")
    assert "(./README.md)" in markdown
    assert "最終生成日時" not in markdown


def test_unknown_language_is_rejected() -> None:
    with pytest.raises(ValueError):
        render_index(language="fr")


def test_user_templates_override_bundled_ones(tmp_path: Path) -> None:
    (tmp_path / "index.md.j2").write_text("# Custom {{ project_name }}\n", encoding="utf-8")
    renderer = TemplateRenderer(tmp_path)

    assert render_index(project_name="Acme", templates=renderer) == "# Custom Acme\n"
    assert "# Acme 開発者ドキュメント" in render_index(project_name="Acme", language="ja", templates=renderer)
