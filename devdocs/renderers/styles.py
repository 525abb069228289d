"""CSS variables, CSS classes, DOM structure and theme guide documents."""

from __future__ import annotations

import re
from typing import Dict, List

from ..classifier import categorize_variables
from ..models import DomCorpus, StyleCorpus
from .markdown import TOC_PLACEHOLDER, cell, code, empty_state, join_lines, table
from .templating import TemplateRenderer

VARIABLES_FILENAME = "css-variables-reference.md"
CLASSES_FILENAME = "css-classes-reference.md"
DOM_FILENAME = "dom-structure-reference.md"
THEME_GUIDE_FILENAME = "theme-development-guide.md"

# Prefixes excluded from the utility list even when a class is not a component.
_NON_UTILITY_PREFIXES = ("ls-", "cp__", "block-", "page-")
_PREFIX_PATTERN = re.compile(r"^([a-zA-Z]+)")


def render_variables_reference(styles: StyleCorpus) -> str:
    lines: List[str] = [
        "# CSS Variables Reference",
        "",
        "*Auto-generated from CSS files*",
        "",
        f"*{len(styles.custom_properties)} declarations*",
        "",
        TOC_PLACEHOLDER,
        "",
    ]
    for category, variables in categorize_variables(styles.custom_properties).items():
        lines.extend([f"## {category}", ""])
        if not variables:
            lines.extend([empty_state(f"{category.lower()} variables"), ""])
            continue
        lines.extend(
            table(
                ("Variable", "Default Value", "Source"),
                ((code(var.name), code(cell(var.value)), code(var.source_file)) for var in variables),
            )
        )
        lines.append("")
    return join_lines(lines)


def group_components_by_prefix(components: List[str]) -> Dict[str, List[str]]:
    """Group component classes by their leading alphabetic run, in first-seen order."""
    groups: Dict[str, List[str]] = {}
    for component in components:
        match = _PREFIX_PATTERN.match(component)
        prefix = match.group(1) if match else "other"
        groups.setdefault(prefix, []).append(component)
    return groups


def utility_classes(styles: StyleCorpus) -> List[str]:
    components = set(styles.component_class_names)
    return sorted(
        name
        for name in styles.class_names
        if name not in components and not name.startswith(_NON_UTILITY_PREFIXES)
    )


def render_classes_reference(styles: StyleCorpus, *, project_name: str = "Logseq") -> str:
    lines: List[str] = [
        "# CSS Classes Reference",
        "",
        "*Auto-generated from CSS files*",
        "",
        "## Component Classes",
        "",
    ]
    groups = group_components_by_prefix(styles.component_class_names)
    if groups:
        lines.extend([f"These classes are used for specific {project_name} UI components:", ""])
        for prefix, components in groups.items():
            lines.extend([f"### {prefix.upper()} Components", ""])
            lines.extend(f"- {code('.' + component)}" for component in sorted(components))
            lines.append("")
    else:
        lines.extend([empty_state("component classes"), ""])

    lines.extend(["## Utility Classes", ""])
    utilities = utility_classes(styles)
    if utilities:
        lines.extend(["General utility classes:", ""])
        lines.extend(f"- {code('.' + name)}" for name in utilities)
        lines.append("")
    else:
        lines.extend([empty_state("utility classes"), ""])
    return join_lines(lines)


def render_dom_reference(dom: DomCorpus, *, project_name: str = "Logseq") -> str:
    sections = (
        ("Data Attributes", f"Common data attributes used in {project_name}:", dom.data_attributes, ""),
        ("Element IDs", "Common element IDs:", dom.element_ids, "#"),
        ("UI Components", "ClojureScript component functions:", dom.component_names, ""),
    )
    lines: List[str] = ["# DOM Structure Reference", "", "*Auto-generated from ClojureScript files*", ""]
    for title, intro, values, marker in sections:
        lines.extend([f"## {title}", ""])
        if not values:
            lines.extend([empty_state(title.lower()), ""])
            continue
        lines.extend([intro, ""])
        lines.extend(f"- {code(marker + value)}" for value in sorted(values))
        lines.append("")
    return join_lines(lines)


def render_theme_guide(
    styles: StyleCorpus,
    *,
    project_name: str = "Logseq",
    templates: TemplateRenderer | None = None,
) -> str:
    renderer = templates or TemplateRenderer()
    variables = styles.custom_properties
    colors = [var for var in variables if "color" in var.name]
    typography = [var for var in variables if "font" in var.name or "text" in var.name]
    components = styles.component_class_names
    return renderer.render(
        "theme_guide.md.j2",
        project_name=project_name,
        color_variables=colors[:10],
        color_remaining=max(len(colors) - 10, 0),
        typography_variables=typography[:5],
        core_components=[name for name in components if name.startswith(("ls-", "cp__"))][:20],
        layout_components=[name for name in components if name.startswith(("block-", "page-"))][:15],
    )


__all__ = [
    "CLASSES_FILENAME",
    "DOM_FILENAME",
    "THEME_GUIDE_FILENAME",
    "VARIABLES_FILENAME",
    "group_components_by_prefix",
    "render_classes_reference",
    "render_dom_reference",
    "render_theme_guide",
    "render_variables_reference",
    "utility_classes",
]
