"""Tree builder: assembles classified lines into nested dicts and lists.

The decoder keeps an explicit indentation context stack. Each frame records
the container that lines at a deeper indent write into, plus the parent and
key that own it, so that a ``key:`` header can turn into a sequence once its
first ``- item`` line shows up.

Lenient mode (the default) skips what it cannot place, logging each skip at
DEBUG. Strict mode raises instead, always with the 1-based line number.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Any, Union

from .errors import MalformedLineError, OrphanSequenceItemError, YAMLIndentationError
from .lines import DEFAULT_INDENT_UNIT, ClassifiedLine, LineKind, classify, is_ignorable, leading_spaces
from .scalars import coerce

logger = logging.getLogger(__name__)

Container = Union[dict[str, Any], list[Any]]


@dataclass(frozen=True)
class _Frame:
    """One entry of the indentation context stack."""

    container: Container
    indent_level: int
    parent: dict[str, Any]
    key: str

    @property
    def is_pending(self) -> bool:
        """An empty mapping opened by ``key:`` may still become a sequence."""
        return isinstance(self.container, dict) and not self.container

    @property
    def accepts_items(self) -> bool:
        return isinstance(self.container, list) or self.is_pending


def _check_indentation(line: str, line_number: int, indent_unit: int) -> None:
    content = line.lstrip()
    indentation = line[: len(line) - len(content)]
    if "\t" in indentation:
        raise YAMLIndentationError("Tab characters are not allowed in indentation", line_number)
    spaces = leading_spaces(line)
    if spaces % indent_unit:
        raise YAMLIndentationError(
            f"Indentation of {spaces} spaces is not a multiple of {indent_unit}",
            line_number,
        )


def _unwind(stack: list[_Frame], line: ClassifiedLine) -> None:
    """Pop frames that the line closes, keeping a same-indent sequence it extends."""
    while stack and stack[-1].indent_level >= line.indent_level:
        top = stack[-1]
        if (
            line.kind is LineKind.ARRAY_ITEM
            and top.indent_level == line.indent_level
            and top.accepts_items
        ):
            break
        stack.pop()


def _skip(strict: bool, error: Exception, reason: str) -> None:
    if strict:
        raise error
    logger.debug(f"Skipping {reason}")


def decode(
    lines: Iterable[str],
    strict: bool = False,
    indent_unit: int = DEFAULT_INDENT_UNIT,
) -> dict[str, Any]:
    """
    Build a document tree from the lines of a single YAML subset document.

    Args:
        lines: Source lines, in order (multi-document text must be split first)
        strict: If True, raise on malformed lines, bad indentation and orphan
            sequence items instead of skipping them
        indent_unit: Number of spaces per indentation level

    Returns:
        The root mapping

    Raises:
        MalformedLineError: Strict mode, unclassifiable line, mapping entry
            inside a sequence, or mapping entry with an empty key (``: 1``;
            lenient mode keeps it under the key ``""``)
        YAMLIndentationError: Strict mode, tab or off-unit indentation
        OrphanSequenceItemError: Strict mode, sequence item with nowhere to go
    """
    if indent_unit < 1:
        raise ValueError(f"indent_unit must be positive, got {indent_unit}")

    root: dict[str, Any] = {}
    stack: list[_Frame] = []

    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.rstrip()
        if is_ignorable(line):
            continue

        if strict:
            _check_indentation(line, line_number, indent_unit)

        classified = classify(line, indent_unit)
        if classified is None:
            _skip(
                strict,
                MalformedLineError(
                    f"Expected 'key: value' or '- item', got {line.strip()!r}", line_number
                ),
                f"unclassifiable line {line_number}: {line.strip()!r}",
            )
            continue

        _unwind(stack, classified)
        frame = stack[-1] if stack else None
        container = frame.container if frame else root

        if classified.kind is LineKind.ARRAY_ITEM:
            value = coerce(classified.raw_value)
            if frame is None or not frame.accepts_items:
                _skip(
                    strict,
                    OrphanSequenceItemError(
                        "Sequence item has no enclosing 'key:' header", line_number
                    ),
                    f"orphan sequence item on line {line_number}",
                )
                continue
            if frame.is_pending:
                sequence: list[Any] = []
                frame.parent[frame.key] = sequence
                stack[-1] = replace(frame, container=sequence)
                container = sequence
            container.append(value)
            continue

        if strict and not classified.key:
            raise MalformedLineError("Mapping entry has an empty key", line_number)

        if isinstance(container, list):
            _skip(
                strict,
                MalformedLineError(
                    f"Mapping entry {classified.key!r} inside a sequence", line_number
                ),
                f"mapping entry {classified.key!r} inside a sequence on line {line_number}",
            )
            continue

        if classified.kind is LineKind.KEY_VALUE:
            container[classified.key] = coerce(classified.raw_value)
        elif classified.kind is LineKind.OBJECT_START:
            child: dict[str, Any] = {}
            container[classified.key] = child
            stack.append(_Frame(child, classified.indent_level, container, classified.key))
        elif classified.kind is LineKind.ARRAY_START:
            items: list[Any] = []
            container[classified.key] = items
            stack.append(_Frame(items, classified.indent_level, container, classified.key))

    return root


def loads(
    text: str,
    strict: bool = False,
    indent_unit: int = DEFAULT_INDENT_UNIT,
) -> dict[str, Any]:
    """Decode a YAML subset document held in a string."""
    return decode(text.splitlines(), strict=strict, indent_unit=indent_unit)
