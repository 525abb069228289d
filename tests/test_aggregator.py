"""Tests for devdocs.aggregator."""

from __future__ import annotations

import pytest

from devdocs.aggregator import Aggregator, SourceReadError
from devdocs.scanners import StylesheetScanner, TypeScriptScanner


def test_collect_routes_files_to_matching_scanners(project_builder) -> None:
    project_builder.write(
        {
            "libs/LSPlugin.ts": "export interface IAppProxy { getInfo(): Promise<any> }\n",
            "css/a.css": ":root { --ls-color: #fff; }\n.ls-block {}\n",
            "css/b.css": ":root { --ls-color: #fff; }\n.ls-block {}\n",
            "src/api.cljs": '(ns logseq.api)\n(defn ^:export get_page [name] "Get a page")\n',
        }
    )
    corpus = Aggregator().collect(project_builder.path())

    assert corpus.files == ["css/a.css", "css/b.css", "libs/LSPlugin.ts", "src/api.cljs"]
    assert [d.name for d in corpus.definitions.interfaces] == ["IAppProxy"]
    assert [p.source_file for p in corpus.styles.custom_properties] == ["css/a.css", "css/b.css"]
    assert corpus.styles.class_names == ["ls-block"]
    assert corpus.functions.exported_count == 1
    assert corpus.functions.namespaces == ["logseq.api"]
    assert corpus.functions.records[0].docstring == "Get a page"


def test_collect_only_runs_selected_scanners(project_builder) -> None:
    project_builder.write({"a.ts": "export type T = string;\n", "a.css": ".x {}\n"})
    corpus = Aggregator().collect(project_builder.path(), only=["stylesheet"])
    assert corpus.files == ["a.css"]
    assert corpus.definitions.types == []


def test_duplicate_definitions_keep_first_file(project_builder) -> None:
    project_builder.write(
        {
            "a.ts": "export type Shared = string;\n",
            "b.ts": "export type Shared = number;\n",
        }
    )
    corpus = Aggregator(scanners=[TypeScriptScanner()]).collect(project_builder.path())
    assert [(d.body, d.source_file) for d in corpus.definitions.types] == [("string", "a.ts")]


def test_collect_returns_fresh_corpus_each_call(project_builder) -> None:
    project_builder.write({"a.css": ".x { --ls-gap: 1px; }\n"})
    aggregator = Aggregator(scanners=[StylesheetScanner()])
    first = aggregator.collect(project_builder.path())
    second = aggregator.collect(project_builder.path())
    assert first == second
    assert len(second.styles.custom_properties) == 1


def test_unreadable_file_raises_source_read_error(project_builder) -> None:
    project_builder.write({"ok.css": ".x {}\n"})
    (project_builder.path() / "bad.css").write_bytes(b"\xff\xfe\x00broken")
    with pytest.raises(SourceReadError):
        Aggregator(scanners=[StylesheetScanner()]).collect(project_builder.path())
