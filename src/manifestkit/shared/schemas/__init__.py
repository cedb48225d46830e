"""Shared schemas used across manifestkit."""

from .manifests import PackageReference, PropertyCheck, PropertyMismatch

__all__ = [
    "PackageReference",
    "PropertyCheck",
    "PropertyMismatch",
]
