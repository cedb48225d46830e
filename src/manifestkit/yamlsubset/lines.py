"""Line classification for the YAML subset decoder."""

from dataclasses import dataclass
from enum import Enum

from .scalars import EMPTY_SEQUENCE_TOKEN

DEFAULT_INDENT_UNIT = 2


class LineKind(str, Enum):
    """Syntactic role of a single source line."""

    KEY_VALUE = "key_value"
    ARRAY_ITEM = "array_item"
    OBJECT_START = "object_start"
    ARRAY_START = "array_start"


@dataclass(frozen=True)
class ClassifiedLine:
    """Classification result for one line; lives for a single decode pass."""

    kind: LineKind
    key: str | None
    raw_value: str | None
    indent_level: int


def leading_spaces(line: str) -> int:
    """Count leading ASCII spaces. Tabs stop the count."""
    return len(line) - len(line.lstrip(" "))


def is_ignorable(line: str) -> bool:
    """Return True for blank lines and whole-line comments."""
    stripped = line.strip()
    return not stripped or stripped.startswith("#")


def classify(line: str, indent_unit: int = DEFAULT_INDENT_UNIT) -> ClassifiedLine | None:
    """
    Determine the syntactic role of one line.

    Inline comments after a value are not stripped; they stay part of the
    value.

    Args:
        line: Raw source line
        indent_unit: Number of spaces per indentation level

    Returns:
        ClassifiedLine, or None for blank, comment or unclassifiable lines
    """
    line = line.rstrip()
    if is_ignorable(line):
        return None

    indent_level = leading_spaces(line) // indent_unit
    content = line.lstrip()

    if content.startswith("- "):
        return ClassifiedLine(
            kind=LineKind.ARRAY_ITEM,
            key=None,
            raw_value=content[2:].strip(),
            indent_level=indent_level,
        )

    if ":" not in content:
        return None

    key, _, raw_right = content.partition(":")
    key = key.strip()
    raw_right = raw_right.strip()

    if not raw_right:
        kind = LineKind.OBJECT_START
        raw_value = None
    elif raw_right == EMPTY_SEQUENCE_TOKEN:
        kind = LineKind.ARRAY_START
        raw_value = None
    else:
        kind = LineKind.KEY_VALUE
        raw_value = raw_right

    return ClassifiedLine(kind=kind, key=key, raw_value=raw_value, indent_level=indent_level)
