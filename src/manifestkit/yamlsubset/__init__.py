"""Self-contained YAML subset parser and serializer."""

from .decoder import decode, loads
from .documents import dump_file, load_all_file, load_file, loads_all, split_documents
from .encoder import encode
from .errors import (
    DocumentTooLargeError,
    MalformedLineError,
    OrphanSequenceItemError,
    UnrepresentableValueError,
    YAMLIndentationError,
    YAMLSubsetError,
)
from .lines import ClassifiedLine, LineKind, classify
from .scalars import Scalar, coerce, format_scalar

__all__ = [
    "decode",
    "loads",
    "encode",
    "loads_all",
    "split_documents",
    "load_file",
    "load_all_file",
    "dump_file",
    "classify",
    "ClassifiedLine",
    "LineKind",
    "coerce",
    "format_scalar",
    "Scalar",
    "YAMLSubsetError",
    "MalformedLineError",
    "YAMLIndentationError",
    "OrphanSequenceItemError",
    "UnrepresentableValueError",
    "DocumentTooLargeError",
]
