"""Tests for devdocs.source_walker."""

from __future__ import annotations

from pathlib import Path

import pytest

from devdocs.source_walker import SourceWalker, parse_exclusion


def test_walk_is_sorted_and_filtered_by_extension(project_builder) -> None:
    project_builder.write(
        {
            "b/z.ts": "",
            "b/a.ts": "",
            "a.ts": "",
            "c/readme.md": "",
            "node_modules/pkg/index.ts": "",
        }
    )
    files = SourceWalker().walk(project_builder.path(), [".ts"])
    assert [source.relative for source in files] == ["a.ts", "b/a.ts", "b/z.ts"]


def test_walk_honours_gitignore_and_exclude_paths(project_builder) -> None:
    project_builder.write(
        {
            ".gitignore": "generated/\n*.min.css\n",
            "generated/out.css": "",
            "app.min.css": "",
            "app.css": "",
            "vendor/lib.css": "",
            "theme/main.css": "",
        }
    )
    walker = SourceWalker(exclude_paths=["vendor/"])
    relatives = [source.relative for source in walker.walk(project_builder.path(), [".css"])]
    assert relatives == ["app.css", "theme/main.css"]


def test_walk_without_extensions_yields_everything(project_builder) -> None:
    project_builder.write({"x.cljs": "", "y.css": ""})
    relatives = [source.relative for source in SourceWalker().walk(project_builder.path())]
    assert relatives == ["x.cljs", "y.css"]


def test_walk_missing_root_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        list(SourceWalker().walk(tmp_path / "missing"))


def test_walk_file_root_raises(tmp_path: Path) -> None:
    target = tmp_path / "file.ts"
    target.write_text("", encoding="utf-8")
    with pytest.raises(NotADirectoryError):
        list(SourceWalker().walk(target))


def test_parse_exclusion_reads_flags() -> None:
    rule = parse_exclusion("/build/")
    assert rule is not None
    assert rule.dirs_only and rule.path_glob
    assert rule.applies_to("build", True)
    assert not rule.applies_to("src/build", True)
    assert not rule.applies_to("build", False)
    assert parse_exclusion("   ") is None
    assert parse_exclusion("# comment") is None
    negated = parse_exclusion("!keep.css")
    assert negated is not None and negated.negated


def test_project_root_gitignore_and_exclude_paths_apply_to_nested_scan_root(project_builder) -> None:
    project_builder.write(
        {
            ".gitignore": "src/main/frontend/vendor/\n",
            "src/main/frontend/vendor/lib.css": "",
            "src/main/frontend/generated/out.css": "",
            "src/main/frontend/theme.css": "",
        }
    )
    walker = SourceWalker(exclude_paths=["src/main/frontend/generated/"], project_root=project_builder.path())
    scan_root = project_builder.path() / "src/main/frontend"
    assert [source.relative for source in walker.walk(scan_root, [".css"])] == ["theme.css"]


def test_nested_gitignore_applies_below_its_directory(project_builder) -> None:
    project_builder.write(
        {
            "styles/.gitignore": "/legacy/\n",
            "styles/legacy/old.css": "",
            "styles/main.css": "",
            "legacy/top.css": "",
        }
    )
    walker = SourceWalker(project_root=project_builder.path())
    assert [source.relative for source in walker.walk(project_builder.path() / "styles", [".css"])] == ["main.css"]
    assert [source.relative for source in walker.walk(project_builder.path(), [".css"])] == [
        "legacy/top.css",
        "styles/main.css",
    ]


def test_negated_rule_keeps_file(project_builder) -> None:
    project_builder.write({".gitignore": "*.css\n!keep.css\n", "drop.css": "", "keep.css": ""})
    relatives = [source.relative for source in SourceWalker().walk(project_builder.path(), [".css"])]
    assert relatives == ["keep.css"]
