"""Scalar coercion between raw YAML tokens and Python values.

Both directions share the same vocabulary: ``str``, ``int``, ``float``,
``bool`` and ``None``. Coercion is total and never raises; formatting
raises ``UnrepresentableValueError`` for values the subset cannot express.
"""

import math
import re
from decimal import Decimal
from typing import Union

from .errors import UnrepresentableValueError

Scalar = Union[str, int, float, bool, None]

_INT_RE = re.compile(r"-?[0-9]+")
_FLOAT_RE = re.compile(r"-?[0-9]+\.[0-9]+")

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

NULL_TOKENS = frozenset({"null", "Null", "NULL", "~"})
_RESERVED_WORDS = frozenset({"true", "false", "null"})

# Right-hand side token that opens an empty, growable sequence
EMPTY_SEQUENCE_TOKEN = "[]"


def _is_quoted(raw: str) -> bool:
    return len(raw) >= 2 and raw[0] == raw[-1] and raw[0] in ('"', "'")


def coerce(raw: str) -> Scalar:
    """
    Convert a raw scalar token into a typed value.

    Resolution order matters: quote stripping runs before numeric and
    boolean detection, so ``"true"`` (quoted) stays a string.

    Args:
        raw: Scalar token as it appears in the source text

    Returns:
        The typed value; unrecognised tokens come back unchanged as ``str``
    """
    if not raw.strip():
        return None

    if _is_quoted(raw):
        return raw[1:-1]

    if _INT_RE.fullmatch(raw):
        number = int(raw)
        if _INT64_MIN <= number <= _INT64_MAX:
            return number

    if _FLOAT_RE.fullmatch(raw):
        return float(raw)

    lowered = raw.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False

    if raw in NULL_TOKENS:
        return None

    return raw


def _format_float(value: float) -> str:
    if not math.isfinite(value):
        raise UnrepresentableValueError(f"Cannot represent non-finite float {value!r}")
    # repr() is the shortest round-tripping form; Decimal expands any exponent
    text = format(Decimal(repr(value)), "f")
    if "." not in text:
        text += ".0"
    return text


def needs_quoting(text: str) -> bool:
    """
    Decide whether a string must be quoted to survive a decode.

    Args:
        text: String value to emit

    Returns:
        True if the emitted token has to be wrapped in quotes
    """
    if not text:
        return True
    if ":" in text or '"' in text or "'" in text:
        return True
    if text != text.strip():
        return True
    if text[0].isdigit():
        return True
    if text.lower() in _RESERVED_WORDS:
        return True
    if text == EMPTY_SEQUENCE_TOKEN:
        return True
    # Anything else that would not come back as the same string
    coerced = coerce(text)
    return not (isinstance(coerced, str) and coerced == text)


def quote(text: str) -> str:
    """Wrap a string in quotes so that ``coerce`` strips them again."""
    # coerce strips only the outer pair, so the inner text needs no escaping
    if '"' in text:
        return f"'{text}'"
    return f'"{text}"'


def format_scalar(value: Scalar) -> str:
    """
    Render a scalar as a YAML subset token.

    Args:
        value: Scalar to render

    Returns:
        Token text such that ``coerce(token) == value`` for representable values

    Raises:
        UnrepresentableValueError: For non-finite floats, multi-line strings
            or values outside the scalar vocabulary
    """
    if value is None:
        return "null"
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, str):
        if "\n" in value or "\r" in value:
            raise UnrepresentableValueError("Multi-line strings are not supported")
        return quote(value) if needs_quoting(value) else value

    raise UnrepresentableValueError(
        f"Unsupported scalar type: {type(value).__name__}"
    )
