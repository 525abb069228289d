"""Ordered keyword rules that bucket functions and CSS variables into categories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Tuple

from .models import CategoryBucket, CustomProperty, FunctionRecord

OTHER_CATEGORY = "Other"
GENERAL_VARIABLE_CATEGORY = "General"


@dataclass(frozen=True)
class _Subject:
    name: str
    namespace: str
    file: str

    @classmethod
    def of(cls, record: FunctionRecord) -> "_Subject":
        return cls(
            name=record.name.lower(),
            namespace=record.namespace.lower(),
            file=record.source_file.lower(),
        )


def _name_has(*keywords: str) -> Callable[[_Subject], bool]:
    return lambda subject: any(keyword in subject.name for keyword in keywords)


# First match wins. "Configuration" only ever receives "preference" names:
# "State Management" claims "config" and "setting" before it.
FUNCTION_CATEGORY_RULES: Tuple[Tuple[str, Callable[[_Subject], bool]], ...] = (
    ("Block Management", lambda s: "block" in s.name or "block" in s.file),
    ("Page Operations", _name_has("page", "journal")),
    ("Database Queries", _name_has("query", "db", "datascript")),
    ("File System", _name_has("file", "asset", "write", "read")),
    ("Plugin System", lambda s: _name_has("plugin", "hook")(s) or "plugin" in s.namespace),
    ("UI Components", lambda s: _name_has("ui", "show", "render")(s) or "ui" in s.file),
    ("State Management", _name_has("state", "config", "setting")),
    ("Search Functions", _name_has("search", "find")),
    ("Configuration", _name_has("config", "setting", "preference")),
    ("Utilities", lambda s: _name_has("util", "helper")(s) or "utils" in s.file),
)

FUNCTION_CATEGORIES: Tuple[str, ...] = tuple(label for label, _ in FUNCTION_CATEGORY_RULES) + (OTHER_CATEGORY,)


def classify(record: FunctionRecord) -> str:
    """Return the category label of the first rule matching ``record``."""
    subject = _Subject.of(record)
    for label, predicate in FUNCTION_CATEGORY_RULES:
        if predicate(subject):
            return label
    return OTHER_CATEGORY


def categorize(records: Iterable[FunctionRecord]) -> CategoryBucket:
    """Bucket records by category; every label is present, in rule order."""
    buckets: CategoryBucket = {label: [] for label in FUNCTION_CATEGORIES}
    for record in records:
        buckets[classify(record)].append(record)
    return buckets


VARIABLE_CATEGORY_RULES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("Colors", ("color",)),
    ("Typography", ("font", "text")),
    ("Dimensions", ("size", "width", "height")),
    ("Spacing", ("spacing", "margin", "padding")),
    ("Borders", ("border", "radius")),
    ("Shadows", ("shadow",)),
    ("Z-Index", ("z-index",)),
)

VARIABLE_CATEGORIES: Tuple[str, ...] = tuple(label for label, _ in VARIABLE_CATEGORY_RULES) + (
    GENERAL_VARIABLE_CATEGORY,
)


def classify_variable(name: str) -> str:
    for label, keywords in VARIABLE_CATEGORY_RULES:
        if any(keyword in name for keyword in keywords):
            return label
    return GENERAL_VARIABLE_CATEGORY


def categorize_variables(properties: Iterable[CustomProperty]) -> Dict[str, List[CustomProperty]]:
    buckets: Dict[str, List[CustomProperty]] = {label: [] for label in VARIABLE_CATEGORIES}
    for prop in properties:
        buckets[classify_variable(prop.name)].append(prop)
    return buckets


__all__ = [
    "FUNCTION_CATEGORIES",
    "FUNCTION_CATEGORY_RULES",
    "OTHER_CATEGORY",
    "VARIABLE_CATEGORIES",
    "categorize",
    "categorize_variables",
    "classify",
    "classify_variable",
]
