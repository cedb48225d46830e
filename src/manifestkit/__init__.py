"""manifestkit: YAML subset engine and manifest consumers for supervisor deployments."""

from .config import Settings, get_settings
from .logging_config import setup_logging
from .manifests import ManifestExtractor, PropertyValidator, ValidationError, get_field
from .shared.schemas import PackageReference, PropertyCheck, PropertyMismatch
from .yamlsubset import YAMLSubsetError, decode, encode, loads, split_documents

__all__ = [
    "decode",
    "encode",
    "loads",
    "split_documents",
    "YAMLSubsetError",
    "ManifestExtractor",
    "PropertyValidator",
    "ValidationError",
    "get_field",
    "PackageReference",
    "PropertyCheck",
    "PropertyMismatch",
    "Settings",
    "get_settings",
    "setup_logging",
]
