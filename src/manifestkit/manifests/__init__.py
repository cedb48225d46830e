"""Manifest consumers: field extraction and property-consistency validation."""

from .extractor import CARVEL_PACKAGING_GROUP, ManifestExtractionError, ManifestExtractor
from .paths import get_field, has_field, parse_path
from .validator import (
    PropertyValidator,
    ValidationError,
    equals,
    equals_ignore_case,
    version_prefix,
)

__all__ = [
    "ManifestExtractor",
    "ManifestExtractionError",
    "CARVEL_PACKAGING_GROUP",
    "PropertyValidator",
    "ValidationError",
    "equals",
    "equals_ignore_case",
    "version_prefix",
    "get_field",
    "has_field",
    "parse_path",
]
