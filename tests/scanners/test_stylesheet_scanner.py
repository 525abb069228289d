"""Tests for the stylesheet scanner."""

from __future__ import annotations

import textwrap

from devdocs.models import CustomProperty
from devdocs.scanners.stylesheet import StylesheetScanner, extract_style, is_component_class


def test_class_names_are_unique_and_ordered() -> None:
    css = textwrap.dedent(
        """
        .ls-block { color: red; }
        .ls-block:hover, .page-title > .inner { color: blue; }
        .a.b { margin: 0; }
        .inner { padding: 0; }
        """
    )
    style = extract_style(css, "blocks.css")
    assert style.class_names == ["ls-block", "page-title", "inner", "a", "b"]
    assert style.component_class_names == ["ls-block", "page-title"]


def test_declaration_values_do_not_produce_classes() -> None:
    style = extract_style(".x { width: 0.5rem; font-size: 1.25em; }", "sizes.css")
    assert style.class_names == ["x"]


def test_comments_are_ignored() -> None:
    css = "/* .commented { } --ghost: 1px; */\n.real { --ls-gap: 4px; }\n"
    style = extract_style(css, "main.css")
    assert style.class_names == ["real"]
    assert style.custom_properties == [CustomProperty(name="--ls-gap", value="4px", source_file="main.css")]


def test_custom_property_values_are_kept_verbatim() -> None:
    css = ":root {\n  --ls-primary-background-color: var(--base, #ffffff);\n  --ls-font-family:  'Inter', sans-serif ;\n}\n"
    style = extract_style(css, "theme.css")
    assert [(p.name, p.value) for p in style.custom_properties] == [
        ("--ls-primary-background-color", "var(--base, #ffffff)"),
        ("--ls-font-family", "'Inter', sans-serif"),
    ]


def test_repeated_custom_properties_within_file_are_all_kept() -> None:
    style = extract_style(":root { --ls-color: #fff; }\n.dark { --ls-color: #000; }\n", "a.css")
    assert [p.value for p in style.custom_properties] == ["#fff", "#000"]


def test_component_prefixes() -> None:
    for name in ("ls-block", "cp__sidebar", "block-content", "page-title", "sidebar-item", "editor-inner"):
        assert is_component_class(name)
    assert not is_component_class("flex")
    assert not is_component_class("blocked")


def test_scanner_wraps_style_in_file_scan() -> None:
    result = StylesheetScanner().scan(".ls-x {}", "x.css")
    assert result.source_file == "x.css"
    assert result.style is not None
    assert result.style.class_names == ["ls-x"]
    assert result.definitions == []


def test_attribute_selectors_and_strings_do_not_produce_classes() -> None:
    css = 'a[href$=".pdf"] { color: red; }\n.file[data-ext=\'.md\'] .icon { margin: 0; }\n'
    style = extract_style(css, "links.css")
    assert style.class_names == ["file", "icon"]
