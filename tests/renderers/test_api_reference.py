"""Tests for the API reference renderer."""

from __future__ import annotations

import json

from devdocs.models import DefinitionCorpus, DefinitionKind, RawDefinition
from devdocs.renderers.api_reference import render_api_reference, render_definitions_json, sort_definitions
from devdocs.scanners.typescript import TypeScriptScanner


def _corpus_from(source: str) -> DefinitionCorpus:
    corpus = DefinitionCorpus()
    corpus.merge(TypeScriptScanner().scan(source, "LSPlugin.ts").definitions)
    return corpus


def test_property_table_row_shape() -> None:
    markdown = render_api_reference(_corpus_from("export interface Foo { bar: string; baz(): void }"))

    table_rows = [line for line in markdown.splitlines() if line.startswith("| bar")]
    assert table_rows == ["| bar | string | No | |"]
    assert "| Name | Type | Optional | Description |" in markdown
    assert "##### baz" in markdown
    assert "baz(): void" in markdown


def test_empty_corpus_renders_every_section_with_empty_state() -> None:
    markdown = render_api_reference(DefinitionCorpus())
    for title in ("Interfaces", "Type Aliases", "Enums", "Classes"):
        assert f"## {title}" in markdown
        assert f"*No {title.lower()} found.*" in markdown


def test_definitions_are_sorted_alphabetically() -> None:
    corpus = _corpus_from(
        "export type zeta = string;\nexport type Alpha = number;\nexport type beta = boolean;\n"
    )
    assert [d.name for d in sort_definitions(corpus.types)] == ["Alpha", "beta", "zeta"]
    markdown = render_api_reference(corpus)
    assert markdown.index("### Alpha") < markdown.index("### beta") < markdown.index("### zeta")


def test_project_name_appears_in_title() -> None:
    markdown = render_api_reference(DefinitionCorpus(), project_name="Acme")
    assert markdown.startswith("# Acme Plugin API Reference")


def test_definitions_json_shape() -> None:
    corpus = _corpus_from(
        "export interface B { x: number }\n"
        "export interface A { y: string }\n"
        "export type T = string;\n"
        "export enum E { One }\n"
        "export class C {}\n"
    )
    payload = json.loads(render_definitions_json(corpus))

    assert [item["name"] for item in payload["interfaces"]] == ["A", "B"]
    assert payload["interfaces"][0] == {
        "name": "A",
        "body": "y: string",
        "fullDefinition": "export interface A { y: string }",
        "file": "LSPlugin.ts",
    }
    assert payload["types"][0]["definition"] == "string"
    assert payload["enums"][0]["body"] == "One"
    assert payload["classes"] == [{"name": "C", "file": "LSPlugin.ts"}]


def test_duplicate_names_keep_first_definition() -> None:
    corpus = DefinitionCorpus()
    first = RawDefinition(kind=DefinitionKind.TYPE, name="T", body="string", source_file="a.ts")
    second = RawDefinition(kind=DefinitionKind.TYPE, name="T", body="number", source_file="b.ts")
    corpus.merge([first, second])
    assert corpus.types == [first]
