"""Tree emitter: renders dicts, lists and scalars as YAML subset text."""

from collections.abc import Iterator
from typing import Any

from .errors import UnrepresentableValueError
from .lines import DEFAULT_INDENT_UNIT
from .scalars import EMPTY_SEQUENCE_TOKEN, format_scalar


def _check_key(key: Any) -> str:
    if not isinstance(key, str):
        raise UnrepresentableValueError(f"Mapping keys must be strings, got {type(key).__name__}")
    # The empty key is allowed: lenient decoding produces it from ": value"
    if key != key.strip():
        raise UnrepresentableValueError(f"Mapping key {key!r} has surrounding whitespace")
    if ":" in key or "\n" in key or key.startswith("#") or key.startswith("- "):
        raise UnrepresentableValueError(f"Mapping key {key!r} cannot be expressed")
    return key


def _emit(value: Any, depth: int, indent_unit: int) -> Iterator[str]:
    prefix = " " * (depth * indent_unit)

    if isinstance(value, dict):
        for key, item in value.items():
            key = _check_key(key)
            if isinstance(item, list) and not item:
                yield f"{prefix}{key}: {EMPTY_SEQUENCE_TOKEN}"
            elif isinstance(item, (dict, list)):
                yield f"{prefix}{key}:"
                yield from _emit(item, depth + 1, indent_unit)
            else:
                yield f"{prefix}{key}: {format_scalar(item)}"
    elif isinstance(value, list):
        for item in value:
            if isinstance(item, (dict, list)):
                # Nested collections inside sequences are outside the decodable subset
                yield f"{prefix}-"
                yield from _emit(item, depth + 1, indent_unit)
            else:
                yield f"{prefix}- {format_scalar(item)}"
    else:
        yield f"{prefix}{format_scalar(value)}"


def encode(tree: Any, indent_unit: int = DEFAULT_INDENT_UNIT) -> str:
    """
    Render a document tree as YAML subset text.

    The output is a best-effort inverse of ``decode``: decoding it yields the
    same tree, but quoting and spacing may differ from the original source.

    Args:
        tree: Mapping, sequence or scalar to render
        indent_unit: Number of spaces per nesting level

    Returns:
        Newline-joined text without a trailing newline

    Raises:
        UnrepresentableValueError: For keys or scalars the subset cannot express
    """
    if indent_unit < 1:
        raise ValueError(f"indent_unit must be positive, got {indent_unit}")
    return "\n".join(_emit(tree, 0, indent_unit))
