"""Scanner for CSS class selectors and custom properties."""

from __future__ import annotations

import re
from typing import List

from .base import Scanner
from ..models import CustomProperty, FileScan, StyleDefinition

COMPONENT_PREFIXES: tuple[str, ...] = ("ls-", "cp__", "block-", "page-", "sidebar-", "editor-")

_COMMENT_PATTERN = re.compile(r"/\*.*?\*/", re.S)
# A selector prelude is the text between the previous `{`, `}` or `;` and the next `{`.
_PRELUDE_PATTERN = re.compile(r"([^{};]*)\{")
_CLASS_PATTERN = re.compile(r"\.(-?[_a-zA-Z][\w-]*)")
# Quoted strings and attribute selectors can hold dots that are not classes.
_QUOTED_PATTERN = re.compile(r"\"[^\"]*\"|'[^']*'")
_ATTRIBUTE_PATTERN = re.compile(r"\[[^\]]*\]")
_CUSTOM_PROPERTY_PATTERN = re.compile(r"--([\w-]+)\s*:\s*([^;]+);")


class StylesheetScanner(Scanner):
    """Collects class names and custom property declarations from stylesheets."""

    name = "stylesheet"
    extensions = (".css",)

    def scan(self, text: str, source_file: str) -> FileScan:
        return FileScan(source_file=source_file, style=extract_style(text, source_file))


def extract_style(text: str, source_file: str) -> StyleDefinition:
    stripped = _COMMENT_PATTERN.sub("", text)

    class_names: List[str] = []
    seen: set[str] = set()
    for prelude in _PRELUDE_PATTERN.finditer(stripped):
        selector = _ATTRIBUTE_PATTERN.sub("", _QUOTED_PATTERN.sub("", prelude.group(1)))
        # Every class in a compound selector counts, so `.a.b {}` yields `a` and `b`.
        for match in _CLASS_PATTERN.finditer(selector):
            class_name = match.group(1)
            if class_name not in seen:
                seen.add(class_name)
                class_names.append(class_name)

    custom_properties = [
        CustomProperty(name=f"--{match.group(1)}", value=match.group(2).strip(), source_file=source_file)
        for match in _CUSTOM_PROPERTY_PATTERN.finditer(stripped)
    ]

    return StyleDefinition(
        source_file=source_file,
        class_names=class_names,
        custom_properties=custom_properties,
        component_class_names=[name for name in class_names if is_component_class(name)],
    )


def is_component_class(class_name: str) -> bool:
    return class_name.startswith(COMPONENT_PREFIXES)


__all__ = ["COMPONENT_PREFIXES", "StylesheetScanner", "extract_style", "is_component_class"]
