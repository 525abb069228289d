"""API reference document and machine-readable definitions dump."""

from __future__ import annotations

import json
from typing import Dict, List

from ..models import DefinitionCorpus, DefinitionKind, MemberKind, RawDefinition
from ..scanners.typescript import parse_members
from .markdown import TOC_PLACEHOLDER, cell, code, empty_state, fenced, join_lines, table

API_REFERENCE_FILENAME = "plugin-api-reference.md"
DEFINITIONS_FILENAME = "plugin-api-definitions.json"

_SECTIONS = (
    ("Interfaces", "interfaces"),
    ("Type Aliases", "types"),
    ("Enums", "enums"),
    ("Classes", "classes"),
)


def sort_definitions(definitions: List[RawDefinition]) -> List[RawDefinition]:
    """Alphabetical by name, case-insensitive, original casing as tie-breaker."""
    return sorted(definitions, key=lambda definition: (definition.name.lower(), definition.name))


def render_api_reference(corpus: DefinitionCorpus, *, project_name: str = "Logseq") -> str:
    lines: List[str] = [
        f"# {project_name} Plugin API Reference",
        "",
        "*Auto-generated from TypeScript definitions*",
        "",
        "## Table of Contents",
        "",
        TOC_PLACEHOLDER,
        "",
    ]
    for title, attribute in _SECTIONS:
        definitions = sort_definitions(getattr(corpus, attribute))
        lines.extend([f"## {title}", ""])
        if not definitions:
            lines.extend([empty_state(title.lower()), ""])
            continue
        for definition in definitions:
            lines.extend(_render_definition(definition))
    return join_lines(lines)


def _render_definition(definition: RawDefinition) -> List[str]:
    lines = [f"### {definition.name}", "", f"*Source: {code(definition.source_file)}*", ""]

    if definition.kind is DefinitionKind.INTERFACE:
        members = parse_members(definition.body)
        properties = [member for member in members if member.kind is MemberKind.PROPERTY]
        methods = [member for member in members if member.kind is MemberKind.METHOD]

        if properties:
            lines.extend(["#### Properties", ""])
            lines.extend(
                table(
                    ("Name", "Type", "Optional", "Description"),
                    (
                        (cell(prop.name), cell(prop.type), "Yes" if prop.optional else "No", "")
                        for prop in properties
                    ),
                )
            )
            lines.append("")

        if methods:
            lines.extend(["#### Methods", ""])
            for method in methods:
                optional = "?" if method.optional else ""
                generics = method.generics or ""
                signature = f"{method.name}{optional}{generics}({method.parameters or ''}): {method.type}"
                lines.extend([f"##### {method.name}", ""])
                lines.extend(fenced(signature, "typescript"))
                lines.append("")

        lines.extend(["#### Full Definition", ""])

    if definition.full_definition:
        lines.extend(fenced(definition.full_definition, "typescript"))
        lines.append("")

    lines.extend(["---", ""])
    return lines


def render_definitions_json(corpus: DefinitionCorpus) -> str:
    """Serialise all four definition collections, each sorted by name."""
    payload: Dict[str, List[Dict[str, str]]] = {
        "interfaces": [
            {
                "name": item.name,
                "body": item.body,
                "fullDefinition": item.full_definition,
                "file": item.source_file,
            }
            for item in sort_definitions(corpus.interfaces)
        ],
        "types": [
            {
                "name": item.name,
                "definition": item.body,
                "fullDefinition": item.full_definition,
                "file": item.source_file,
            }
            for item in sort_definitions(corpus.types)
        ],
        "enums": [
            {
                "name": item.name,
                "body": item.body,
                "fullDefinition": item.full_definition,
                "file": item.source_file,
            }
            for item in sort_definitions(corpus.enums)
        ],
        "classes": [
            {"name": item.name, "file": item.source_file} for item in sort_definitions(corpus.classes)
        ],
    }
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


__all__ = [
    "API_REFERENCE_FILENAME",
    "DEFINITIONS_FILENAME",
    "render_api_reference",
    "render_definitions_json",
    "sort_definitions",
]
