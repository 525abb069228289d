"""Source scanners and the registry used to select them."""

from __future__ import annotations

from typing import Callable, Dict, List, Sequence, Set

from .base import Scanner
from .braces import match_brace
from .clojurescript import ClojureScriptScanner
from .stylesheet import StylesheetScanner
from .typescript import TypeScriptScanner, parse_members

_BUILTIN_FACTORIES: Dict[str, Callable[[], Scanner]] = {
    TypeScriptScanner.name: TypeScriptScanner,
    StylesheetScanner.name: StylesheetScanner,
    ClojureScriptScanner.name: ClojureScriptScanner,
}


def discover_scanners(enabled: Sequence[str] | None = None) -> List[Scanner]:
    """Return instantiated scanners in registry order, honoring optional enabled names.

    An empty or missing ``enabled`` list selects every built-in scanner.
    """
    if not enabled:
        return [factory() for factory in _BUILTIN_FACTORIES.values()]

    wanted: Set[str] = {name.lower() for name in enabled}
    missing = wanted - set(_BUILTIN_FACTORIES)
    if missing:
        raise ValueError(f"Unknown scanners requested: {', '.join(sorted(missing))}")
    return [factory() for name, factory in _BUILTIN_FACTORIES.items() if name in wanted]


__all__ = [
    "ClojureScriptScanner",
    "Scanner",
    "StylesheetScanner",
    "TypeScriptScanner",
    "discover_scanners",
    "match_brace",
    "parse_members",
]
