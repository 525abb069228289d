"""Scanner for exported TypeScript declarations."""

from __future__ import annotations

import re
from typing import List

from .base import Scanner
from .braces import find_body_open, find_top_level, match_angle, match_brace
from ..logging import get_logger
from ..models import DefinitionKind, FileScan, MemberDefinition, MemberKind, RawDefinition

_INTERFACE_PATTERN = re.compile(r"export\s+interface\s+(\w+)")
_TYPE_PATTERN = re.compile(r"export\s+type\s+(\w+)")
_TYPE_ASSIGNMENT = re.compile(r"\s*=(?!>)")
# Enums never nest, so the body ends at the first closing brace.
_ENUM_PATTERN = re.compile(r"export\s+(?:const\s+)?enum\s+(\w+)\s*\{([^}]+)\}")
_CLASS_PATTERN = re.compile(r"export\s+(?:default\s+)?(?:abstract\s+)?class\s+(\w+)")

_METHOD_PATTERN = re.compile(r"(\w+)(\??)\s*(<[^>]+>)?\s*\((.*?)\)\s*:\s*(.+)", re.S)
_PROPERTY_PATTERN = re.compile(r"(\w+)(\??):\s*(.+)", re.S)
_COMMENT_PREFIXES = ("//", "/*", "*")
_TRAILING_COMMENT = re.compile(r"(?:^|\s)//.*$")
_MEMBER_TERMINATORS = "\n;"
_OPENERS = "{[("
_CLOSERS = "}])"
_TRAILING_SEPARATOR = re.compile(r"[;,]$")
_WHITESPACE = re.compile(r"\s+")
_LEADING_SPACE = re.compile(r"\s*")


class TypeScriptScanner(Scanner):
    """Collects exported interfaces, type aliases, enums and classes."""

    name = "typescript"
    extensions = (".ts",)

    def __init__(self) -> None:
        self.logger = get_logger("scanners.typescript")

    def scan(self, text: str, source_file: str) -> FileScan:
        definitions: List[RawDefinition] = []
        definitions.extend(self._scan_interfaces(text, source_file))
        definitions.extend(self._scan_types(text, source_file))
        definitions.extend(self._scan_enums(text, source_file))
        definitions.extend(self._scan_classes(text, source_file))
        return FileScan(source_file=source_file, definitions=definitions)

    def _scan_interfaces(self, text: str, source_file: str) -> List[RawDefinition]:
        found: List[RawDefinition] = []
        for match in _INTERFACE_PATTERN.finditer(text):
            body_start = find_body_open(text, match.end())
            body_end = match_brace(text, body_start) if body_start is not None else None
            if body_end is None:
                self.logger.debug("Skipping unterminated interface %s in %s", match.group(1), source_file)
                continue
            found.append(
                RawDefinition(
                    kind=DefinitionKind.INTERFACE,
                    name=match.group(1),
                    body=text[body_start + 1 : body_end].strip(),
                    source_file=source_file,
                    full_definition=text[match.start() : body_end + 1],
                )
            )
        return found

    def _scan_types(self, text: str, source_file: str) -> List[RawDefinition]:
        found: List[RawDefinition] = []
        for match in _TYPE_PATTERN.finditer(text):
            parameters_end = _skip_type_parameters(text, match.end())
            assignment = _TYPE_ASSIGNMENT.match(text, parameters_end) if parameters_end is not None else None
            if assignment is None:
                continue
            terminator = find_top_level(text, assignment.end(), ";")
            if terminator is None:
                self.logger.debug("Skipping unterminated type alias %s in %s", match.group(1), source_file)
                continue
            found.append(
                RawDefinition(
                    kind=DefinitionKind.TYPE,
                    name=match.group(1),
                    body=text[assignment.end() : terminator].strip(),
                    source_file=source_file,
                    full_definition=text[match.start() : terminator + 1],
                )
            )
        return found

    def _scan_enums(self, text: str, source_file: str) -> List[RawDefinition]:
        return [
            RawDefinition(
                kind=DefinitionKind.ENUM,
                name=match.group(1),
                body=match.group(2).strip(),
                source_file=source_file,
                full_definition=match.group(0),
            )
            for match in _ENUM_PATTERN.finditer(text)
        ]

    def _scan_classes(self, text: str, source_file: str) -> List[RawDefinition]:
        # Classes are inventoried only; their bodies are not introspected.
        return [
            RawDefinition(kind=DefinitionKind.CLASS, name=match.group(1), body="", source_file=source_file)
            for match in _CLASS_PATTERN.finditer(text)
            if find_body_open(text, match.end()) is not None
        ]


def _skip_type_parameters(text: str, index: int) -> int | None:
    """Return the index just past an optional ``<...>`` list at ``index``."""
    position = _LEADING_SPACE.match(text, index).end()
    if position < len(text) and text[position] == "<":
        close = match_angle(text, position)
        return None if close is None else close + 1
    return index


def split_members(body: str) -> List[str]:
    """Split an interface body into member segments.

    Segments end at a newline or ``;`` that is not nested inside brackets, so
    ``bar: string; baz(): void`` yields two segments while a multi-line
    object type stays in one. Comment lines and trailing ``//`` comments are
    dropped first. A stretch whose brackets never close falls back to one
    segment per line.
    """
    lines: List[str] = []
    for line in body.split("\n"):
        line = _TRAILING_COMMENT.sub("", line)
        stripped = line.strip()
        if stripped and not stripped.startswith(_COMMENT_PREFIXES):
            lines.append(line)
    text = "\n".join(lines)

    segments: List[str] = []
    depth = 0
    start = 0
    for index, char in enumerate(text):
        if depth == 0 and char in _MEMBER_TERMINATORS:
            _append_segment(segments, text[start:index])
            start = index + 1
        elif char in _OPENERS:
            depth += 1
        elif char in _CLOSERS and depth > 0:
            depth -= 1

    if depth > 0:
        for line in text[start:].split("\n"):
            _append_segment(segments, line)
    else:
        _append_segment(segments, text[start:])
    return segments


def _append_segment(segments: List[str], segment: str) -> None:
    segment = segment.strip()
    if segment:
        segments.append(segment)


def parse_member(segment: str) -> MemberDefinition | None:
    """Classify one member segment as a method or a property, else ``None``."""
    method = _METHOD_PATTERN.search(segment)
    if method:
        name, optional, generics, params, return_type = method.groups()
        return MemberDefinition(
            kind=MemberKind.METHOD,
            name=name,
            type=_clean_type(return_type),
            parameters=_collapse(params),
            generics=generics.strip() if generics else None,
            optional=optional == "?",
        )
    prop = _PROPERTY_PATTERN.search(segment)
    if prop:
        name, optional, type_text = prop.groups()
        return MemberDefinition(
            kind=MemberKind.PROPERTY,
            name=name,
            type=_clean_type(type_text),
            optional=optional == "?",
        )
    return None


def parse_members(body: str) -> List[MemberDefinition]:
    """Parse every recognisable member of an interface body, in source order."""
    members: List[MemberDefinition] = []
    for segment in split_members(body):
        member = parse_member(segment)
        if member is not None:
            members.append(member)
    return members


def _collapse(value: str) -> str:
    return _WHITESPACE.sub(" ", value).strip()


def _clean_type(value: str) -> str:
    return _TRAILING_SEPARATOR.sub("", _collapse(value)).strip()


__all__ = ["TypeScriptScanner", "parse_member", "parse_members", "split_members"]
