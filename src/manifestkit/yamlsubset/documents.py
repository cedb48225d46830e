"""File and multi-document helpers around the YAML subset engine.

The engine itself works on one in-memory document. Reading files, bounding
their size and splitting ``---`` separated streams happens here.
"""

import logging
import re
from pathlib import Path
from typing import Any

from ..config import get_settings
from .decoder import loads
from .encoder import encode
from .errors import DocumentTooLargeError
from .lines import is_ignorable

logger = logging.getLogger(__name__)

DOCUMENT_SEPARATOR = re.compile(r"^---[ \t\r]*$", re.MULTILINE)


def split_documents(text: str) -> list[str]:
    """
    Split a multi-document stream on ``---`` lines.

    Fragments holding only blank lines and comments are dropped.

    Args:
        text: Raw YAML text, possibly containing several documents

    Returns:
        List of single-document texts, in source order
    """
    fragments = DOCUMENT_SEPARATOR.split(text)
    return [
        fragment
        for fragment in fragments
        if not all(is_ignorable(line) for line in fragment.splitlines())
    ]


def loads_all(text: str, strict: bool = False, indent_unit: int = 2) -> list[dict[str, Any]]:
    """Decode every document of a multi-document stream."""
    return [
        loads(fragment, strict=strict, indent_unit=indent_unit)
        for fragment in split_documents(text)
    ]


def _read_text(path: Path, max_bytes: int | None) -> str:
    if max_bytes is not None:
        size = path.stat().st_size
        if size > max_bytes:
            raise DocumentTooLargeError(
                f"{path} is {size} bytes, larger than the {max_bytes} byte limit"
            )
    return path.read_text(encoding="utf-8")


def load_file(
    path: str | Path,
    strict: bool | None = None,
    max_bytes: int | None = None,
) -> dict[str, Any]:
    """
    Read and decode a single-document YAML file.

    Args:
        path: Path to YAML file
        strict: Strict decoding (defaults to settings)
        max_bytes: Size limit in bytes (defaults to settings)

    Returns:
        Decoded root mapping

    Raises:
        DocumentTooLargeError: If the file exceeds the size limit
        YAMLSubsetError: Strict mode, if the text is malformed
    """
    settings = get_settings()
    strict = settings.strict if strict is None else strict
    max_bytes = settings.max_document_bytes if max_bytes is None else max_bytes

    path = Path(path)
    tree = loads(_read_text(path, max_bytes), strict=strict, indent_unit=settings.indent_unit)
    logger.debug(f"Loaded {path} ({len(tree)} top-level keys)")
    return tree


def load_all_file(
    path: str | Path,
    strict: bool | None = None,
    max_bytes: int | None = None,
) -> list[dict[str, Any]]:
    """
    Read a YAML file that may contain several ``---`` separated documents.

    Args:
        path: Path to YAML file
        strict: Strict decoding (defaults to settings)
        max_bytes: Size limit in bytes (defaults to settings)

    Returns:
        One decoded mapping per document
    """
    settings = get_settings()
    strict = settings.strict if strict is None else strict
    max_bytes = settings.max_document_bytes if max_bytes is None else max_bytes

    path = Path(path)
    documents = loads_all(
        _read_text(path, max_bytes), strict=strict, indent_unit=settings.indent_unit
    )
    logger.debug(f"Loaded {path} ({len(documents)} document(s))")
    return documents


def dump_file(tree: Any, path: str | Path, indent_unit: int | None = None) -> Path:
    """
    Encode a tree and write it to disk with a trailing newline.

    Args:
        tree: Document tree to write
        path: Destination path; parent directories are created
        indent_unit: Spaces per level (defaults to settings)

    Returns:
        The path written
    """
    if indent_unit is None:
        indent_unit = get_settings().indent_unit

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(encode(tree, indent_unit=indent_unit) + "\n", encoding="utf-8")
    logger.info(f"Wrote {path}")
    return path
