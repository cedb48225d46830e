"""Dot-or-bracket property paths over decoded document trees.

Supported forms::

    spec.refName
    spec.template.containers[0].image
    spec.resources.limits["nvidia.com/gpu"]
"""

import re
from typing import Any

_NAME_RE = re.compile(r"[^.\[\]]+")
_BRACKET_RE = re.compile(r"""\[(?:(\d+)|"([^"]*)"|'([^']*)')\]""")

_MISSING = object()


def parse_path(path: str) -> list[str | int]:
    """
    Split a property path into key and index segments.

    Args:
        path: Property path such as ``metadata.namespace`` or ``items[0].name``

    Returns:
        List of segments; ``str`` for mapping keys, ``int`` for sequence indexes

    Raises:
        ValueError: If the path is empty or malformed
    """
    if not path:
        raise ValueError("Property path must not be empty")

    segments: list[str | int] = []
    position = 0
    expect_name = True

    while position < len(path):
        char = path[position]

        if char == "[":
            match = _BRACKET_RE.match(path, position)
            if not match:
                raise ValueError(f"Malformed index in path {path!r} at position {position}")
            index, double_quoted, single_quoted = match.groups()
            if index is not None:
                segments.append(int(index))
            else:
                segments.append(double_quoted if double_quoted is not None else single_quoted)
            position = match.end()
            expect_name = False
            continue

        if char == ".":
            if expect_name:
                raise ValueError(f"Empty segment in path {path!r} at position {position}")
            position += 1
            expect_name = True
            continue

        match = _NAME_RE.match(path, position)
        if not expect_name or not match:
            raise ValueError(f"Unexpected {char!r} in path {path!r} at position {position}")
        segments.append(match.group())
        position = match.end()
        expect_name = False

    if expect_name:
        raise ValueError(f"Path {path!r} ends with an empty segment")

    return segments


def _resolve(tree: Any, path: str) -> Any:
    current = tree
    for segment in parse_path(path):
        if isinstance(segment, int):
            if isinstance(current, list) and segment < len(current):
                current = current[segment]
                continue
            return _MISSING
        if isinstance(current, dict) and segment in current:
            current = current[segment]
        else:
            return _MISSING
    return current


def get_field(tree: Any, path: str, default: Any = None) -> Any:
    """
    Get a nested field from a document tree.

    Args:
        tree: Decoded document tree
        path: Property path (e.g., "spec.refName")
        default: Value returned when the field is absent

    Returns:
        Field value if found, ``default`` otherwise
    """
    value = _resolve(tree, path)
    return default if value is _MISSING else value


def has_field(tree: Any, path: str) -> bool:
    """Return True if the path exists, even when its value is null."""
    return _resolve(tree, path) is not _MISSING
