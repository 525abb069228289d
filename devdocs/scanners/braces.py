"""Balanced bracket matching over raw text."""

from __future__ import annotations


def match_brace(
    text: str,
    open_index: int,
    open_char: str = "{",
    close_char: str = "}",
) -> int | None:
    """Return the index of the bracket closing the one at ``open_index``.

    The scan is character level: brackets inside string literals or comments
    are counted like any other. ``None`` is returned when the text ends
    before the depth returns to zero, or when ``open_index`` does not point
    at ``open_char``.
    """
    if open_index < 0 or open_index >= len(text) or text[open_index] != open_char:
        return None

    depth = 0
    for index in range(open_index, len(text)):
        char = text[index]
        if char == open_char:
            depth += 1
        elif char == close_char:
            depth -= 1
            if depth == 0:
                return index
    return None


def find_top_level(text: str, start: int, target: str, pairs: str = "{}[]()") -> int | None:
    """Return the first index of ``target`` at bracket depth zero from ``start``."""
    openers = pairs[0::2]
    closers = pairs[1::2]
    depth = 0
    for index in range(start, len(text)):
        char = text[index]
        if char == target and depth == 0:
            return index
        if char in openers:
            depth += 1
        elif char in closers and depth > 0:
            depth -= 1
    return None


def match_angle(text: str, open_index: int) -> int | None:
    """Return the index of the ``>`` closing the ``<`` at ``open_index``.

    The ``>`` of an arrow (``=>``) does not close a bracket, so
    ``<F extends () => void>`` is matched as a whole.
    """
    if open_index < 0 or open_index >= len(text) or text[open_index] != "<":
        return None

    depth = 0
    for index in range(open_index, len(text)):
        char = text[index]
        if char == "<":
            depth += 1
        elif char == ">" and text[index - 1] != "=":
            depth -= 1
            if depth == 0:
                return index
    return None


def find_body_open(text: str, start: int) -> int | None:
    """Return the ``{`` that opens a declaration body, skipping type arguments.

    Braces inside ``<...>`` (``Foo<T = {}>``, ``extends Base<{ a: 1 }>``) do
    not open the body. A ``;`` outside angle brackets ends the search.
    """
    depth = 0
    for index in range(start, len(text)):
        char = text[index]
        if depth == 0 and char == "{":
            return index
        if depth == 0 and char == ";":
            return None
        if char == "<":
            depth += 1
        elif char == ">" and depth > 0 and text[index - 1] != "=":
            depth -= 1
    return None


__all__ = ["find_body_open", "find_top_level", "match_angle", "match_brace"]
