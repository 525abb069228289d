"""Functionality analysis, showcase and analysis data dump for ClojureScript APIs."""

from __future__ import annotations

import json
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from ..models import AnalysisStatistics, CategoryBucket, FunctionCorpus, FunctionRecord
from .markdown import TOC_PLACEHOLDER, cell, code, empty_state, join_lines, table
from .templating import TemplateRenderer

FUNCTIONALITY_FILENAME = "logseq-api-functionality-analysis.md"
SHOWCASE_FILENAME = "logseq-api-showcase.md"
ANALYSIS_DATA_FILENAME = "logseq-api-analysis-data.json"


@dataclass(frozen=True)
class ShowcaseCategory:
    summary: str
    capabilities: Tuple[str, ...]
    fallback: str


SHOWCASE_CATEGORIES: Dict[str, ShowcaseCategory] = {
    "Block Management": ShowcaseCategory(
        summary="The Block Management API provides comprehensive control over {project}'s block-based content system.",
        capabilities=(
            "Create, update, and delete blocks",
            "Navigate block hierarchies",
            "Manage block properties and metadata",
            "Handle block references and links",
        ),
        fallback="Manage block operations",
    ),
    "Page Operations": ShowcaseCategory(
        summary="The Page Operations API handles page creation, navigation, and management.",
        capabilities=(
            "Create and manage pages",
            "Handle journal pages",
            "Page metadata and properties",
            "Page navigation and linking",
        ),
        fallback="Page management operations",
    ),
    "Database Queries": ShowcaseCategory(
        summary="The Database API provides powerful query capabilities using DataScript.",
        capabilities=(
            "Execute DataScript queries",
            "Filter and search content",
            "Database transactions",
            "Data relationships and references",
        ),
        fallback="Database query operations",
    ),
    "UI Components": ShowcaseCategory(
        summary="The UI API allows plugins to create custom interface elements.",
        capabilities=(
            "Create custom UI components",
            "Display messages and notifications",
            "Handle user interactions",
            "Integrate with {project}'s interface",
        ),
        fallback="UI component operations",
    ),
    "Plugin System": ShowcaseCategory(
        summary="The Plugin System API manages plugin lifecycle and interactions.",
        capabilities=(
            "Plugin registration and management",
            "Hook system for extensibility",
            "Plugin communication",
            "Plugin configuration and settings",
        ),
        fallback="Plugin system operations",
    ),
}


def api_module_functions(records: Sequence[FunctionRecord]) -> List[FunctionRecord]:
    """Records defined in files whose path mentions ``api``."""
    return [record for record in records if "api" in record.source_file]


def build_statistics(functions: FunctionCorpus, buckets: CategoryBucket) -> AnalysisStatistics:
    return AnalysisStatistics(
        total_exported=functions.exported_count,
        total_analyzed=len(functions.records),
        namespaces=len({record.namespace for record in functions.records}),
        categories=sum(1 for records in buckets.values() if records),
    )


def namespace_frequencies(records: Sequence[FunctionRecord], limit: int) -> List[Tuple[str, int]]:
    """Namespaces by descending function count; ties keep first-seen order."""
    counts = Counter(record.namespace for record in records)
    first_seen: Dict[str, int] = {}
    for index, record in enumerate(records):
        first_seen.setdefault(record.namespace, index)
    ordered = sorted(counts.items(), key=lambda item: (-item[1], first_seen[item[0]]))
    return ordered[:limit]


def render_functionality_analysis(
    functions: FunctionCorpus,
    buckets: CategoryBucket,
    *,
    project_name: str = "Logseq",
    key_function_limit: int = 10,
    namespace_limit: int = 15,
) -> str:
    stats = build_statistics(functions, buckets)
    lines: List[str] = [
        f"# {project_name} Application API Functionality Analysis",
        "",
        f"*Deep analysis of {project_name}'s core API implementation*",
        "",
        TOC_PLACEHOLDER,
        "",
        "## Overview | 概要",
        "",
        (
            f"This document provides a comprehensive analysis of the {project_name} application's API "
            "functionality, extracted directly from the ClojureScript implementation. Unlike the "
            f"TypeScript SDK documentation, this analyzes the actual core functionality that powers {project_name}."
        ),
        "",
        (
            f"このドキュメントは、ClojureScript実装から直接抽出された{project_name}アプリケーションのAPI機能の"
            "包括的な分析を提供します。"
        ),
        "",
        "## API Statistics | API統計",
        "",
        f"- **Total Exported Functions**: {stats.total_exported}",
        f"- **API Module Functions**: {len(api_module_functions(functions.records))}",
        f"- **Total Functions Analyzed**: {stats.total_analyzed}",
        f"- **API Modules**: {stats.namespaces}",
        f"- **Function Categories**: {stats.categories}",
        "",
        "## Namespaces",
        "",
    ]

    frequencies = namespace_frequencies(functions.records, namespace_limit)
    if frequencies:
        lines.extend(
            table(
                ("Namespace", "Functions"),
                ((code(namespace) if namespace else "*(none)*", str(count)) for namespace, count in frequencies),
            )
        )
    else:
        lines.append(empty_state("namespaces"))
    lines.extend(["", "## Core API Categories | コアAPI カテゴリ", ""])

    for category, records in buckets.items():
        lines.extend([f"### {category}", ""])
        if not records:
            lines.extend([empty_state("functions in this category"), "", "---", ""])
            continue
        lines.extend([f"*{len(records)} functions available*", "", "#### Key Functions", ""])
        for record in records[:key_function_limit]:
            lines.extend(_render_key_function(record))
        remaining = len(records) - key_function_limit
        if remaining > 0:
            lines.extend([f"*...and {remaining} more functions*", ""])
        lines.extend(["---", ""])
    return join_lines(lines)


def _render_key_function(record: FunctionRecord) -> List[str]:
    lines = [f"**{code(record.name)}**"]
    if record.parameters:
        lines.append(f"- Parameters: {code(', '.join(record.parameters))}")
    if record.docstring:
        lines.append(f"- Description: {cell(record.docstring)}")
    lines.append(f"- Namespace: {code(record.namespace)}" if record.namespace else "- Namespace: *(none)*")
    lines.append(f"- Source: {code(record.source_file)}")
    lines.append("")
    return lines


def render_showcase(
    buckets: CategoryBucket,
    *,
    project_name: str = "Logseq",
    example_limit: int = 5,
    templates: TemplateRenderer | None = None,
) -> str:
    renderer = templates or TemplateRenderer()
    sections = []
    for category, details in SHOWCASE_CATEGORIES.items():
        fallback = details.fallback
        examples = [
            {"name": record.name, "description": record.docstring or fallback}
            for record in buckets.get(category, [])[:example_limit]
        ]
        sections.append(
            {
                "title": category,
                "summary": details.summary.format(project=project_name),
                "capabilities": [item.format(project=project_name) for item in details.capabilities],
                "examples": examples,
            }
        )
    return renderer.render("showcase.md.j2", project_name=project_name, sections=sections)


def render_analysis_data(
    functions: FunctionCorpus,
    buckets: CategoryBucket,
    *,
    generated_at: Optional[str] = None,
) -> str:
    payload: Dict[str, object] = {
        "exportedFunctions": [record.to_dict() for record in api_module_functions(functions.records)],
        "categorizedFunctions": {
            category: [record.to_dict() for record in records] for category, records in buckets.items()
        },
        "statistics": build_statistics(functions, buckets).to_dict(),
    }
    if generated_at is not None:
        payload["generatedAt"] = generated_at
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


__all__ = [
    "ANALYSIS_DATA_FILENAME",
    "FUNCTIONALITY_FILENAME",
    "SHOWCASE_CATEGORIES",
    "SHOWCASE_FILENAME",
    "api_module_functions",
    "build_statistics",
    "namespace_frequencies",
    "render_analysis_data",
    "render_functionality_analysis",
    "render_showcase",
]
