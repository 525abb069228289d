"""Scanner for ClojureScript namespaces, function declarations and markup hints."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .base import Scanner
from .braces import match_brace
from ..logging import get_logger
from ..models import DomHint, FileScan, FunctionRecord, SourceFunctions

_NAMESPACE_PATTERN = re.compile(r"\(ns\s+(?:\^\S+\s+)*([^\s()\[\]{}\"]+)")
_EXPORTED_PATTERN = re.compile(r"\(defn\s+\^:export\s+([^\s\[\]()\"]+)")
_FUNCTION_PATTERN = re.compile(r"\(defn-?\s+([^\s\[\]()\"^]+)")
_STRING_PATTERN = re.compile(r'"((?:[^"\\]|\\.)*)"')
_WHITESPACE = re.compile(r"\s+")

_DATA_ATTRIBUTE_PATTERN = re.compile(r"data-([a-zA-Z0-9_-]+)")
_ELEMENT_ID_PATTERN = re.compile(r':id\s+"([^"]+)"')
_COMPONENT_PATTERN = re.compile(r"defn\s+([a-zA-Z0-9_-]+)(?:-component)?")


@dataclass
class _Signature:
    parameters: tuple[str, ...]
    docstring: str


class ClojureScriptScanner(Scanner):
    """Extracts function inventories and DOM hints from ``.cljs``/``.cljc`` files."""

    name = "clojurescript"
    extensions = (".cljs", ".cljc")

    def __init__(self) -> None:
        self.logger = get_logger("scanners.clojurescript")

    def scan(self, text: str, source_file: str) -> FileScan:
        return FileScan(
            source_file=source_file,
            dom=extract_dom_hints(text, source_file),
            functions=self.extract_functions(text, source_file),
        )

    def extract_functions(self, text: str, source_file: str) -> SourceFunctions:
        namespace_match = _NAMESPACE_PATTERN.search(text)
        namespace = namespace_match.group(1) if namespace_match else None
        functions = SourceFunctions(source_file=source_file, namespace=namespace)

        for match in _EXPORTED_PATTERN.finditer(text):
            record = self._build_record(text, match, namespace, source_file, exported=True)
            if record is not None:
                functions.exported.append(record)

        # The sweep below is not deduplicated against the exported list.
        for match in _FUNCTION_PATTERN.finditer(text):
            raw_name = match.group(1)
            if "^:export" in raw_name or len(raw_name) <= 2:
                continue
            record = self._build_record(text, match, namespace, source_file, exported=False)
            if record is not None:
                functions.internal.append(record)

        return functions

    def _build_record(
        self,
        text: str,
        match: re.Match[str],
        namespace: Optional[str],
        source_file: str,
        *,
        exported: bool,
    ) -> FunctionRecord | None:
        name = match.group(1)
        signature = _read_signature(text, match.end())
        if signature is None:
            self.logger.debug("Skipping %s: unbalanced parameter vector in %s", name, source_file)
            return None
        return FunctionRecord(
            name=name[1:] if name.startswith("-") else name,
            parameters=signature.parameters,
            docstring=signature.docstring,
            namespace=namespace or "",
            source_file=source_file,
            exported=exported,
        )


def _skip_whitespace(text: str, position: int) -> int:
    while position < len(text) and text[position] in " \t\r\n,":
        position += 1
    return position


def _read_string(text: str, position: int) -> tuple[str, int] | None:
    match = _STRING_PATTERN.match(text, position)
    if match is None:
        return None
    return _WHITESPACE.sub(" ", match.group(1)).strip(), match.end()


def _read_signature(text: str, position: int) -> _Signature | None:
    """Read an optional docstring and parameter vector following a function name.

    The docstring may precede the vector (idiomatic Clojure) or follow it on
    the same or the next line. Returns ``None`` when a vector is opened but
    never closed.
    """
    docstring = ""
    position = _skip_whitespace(text, position)
    leading = _read_string(text, position)
    if leading is not None:
        docstring, position = leading
        position = _skip_whitespace(text, position)

    if position < len(text) and text[position] == "{":
        attr_end = match_brace(text, position)
        if attr_end is None:
            return None
        position = _skip_whitespace(text, attr_end + 1)

    parameters: tuple[str, ...] = ()
    if position < len(text) and text[position] == "[":
        close = match_brace(text, position, "[", "]")
        if close is None:
            return None
        tokens = text[position + 1 : close].split()
        parameters = tuple(token for token in tokens if not token.startswith("^"))
        if not docstring:
            trailing = _read_string(text, _skip_whitespace(text, close + 1))
            if trailing is not None:
                docstring = trailing[0]

    return _Signature(parameters=parameters, docstring=docstring)


def extract_dom_hints(text: str, source_file: str) -> DomHint:
    """Collect data attributes, element ids and possible component names."""
    return DomHint(
        source_file=source_file,
        data_attributes=_unique(f"data-{match.group(1)}" for match in _DATA_ATTRIBUTE_PATTERN.finditer(text)),
        element_ids=_unique(match.group(1) for match in _ELEMENT_ID_PATTERN.finditer(text)),
        component_names=_unique(match.group(1) for match in _COMPONENT_PATTERN.finditer(text)),
    )


def _unique(values: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(values))


__all__ = ["ClojureScriptScanner", "extract_dom_hints"]
