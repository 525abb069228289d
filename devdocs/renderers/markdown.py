"""Small Markdown building blocks shared by the renderers."""

from __future__ import annotations

from typing import Iterable, List, Sequence

TOC_PLACEHOLDER = "<!-- devdocs:toc -->"


def code(value: str) -> str:
    """Inline code span; backticks inside the value widen the fence."""
    if "`" in value:
        return f"`` {value} ``"
    return f"`{value}`"


def cell(value: str) -> str:
    """Escape a value for use inside a table cell."""
    return " ".join(value.replace("|", "\\|").split())


def _row(values: Sequence[str]) -> str:
    return "|" + "|".join(f" {value} " if value else " " for value in values) + "|"


def table(headers: Sequence[str], rows: Iterable[Sequence[str]]) -> List[str]:
    lines = [
        _row(headers),
        "|" + "|".join("-" * (len(header) + 2) for header in headers) + "|",
    ]
    for row in rows:
        lines.append(_row(row))
    return lines


def empty_state(what: str) -> str:
    return f"*No {what} found.*"


def fenced(body: str, language: str = "") -> List[str]:
    return [f"```{language}", body.rstrip("\n"), "```"]


def join_lines(lines: Iterable[str]) -> str:
    return "\n".join(lines).rstrip("\n") + "\n"


__all__ = ["TOC_PLACEHOLDER", "cell", "code", "empty_state", "fenced", "join_lines", "table"]
