"""Property-consistency validation between deployment descriptors and manifests."""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from ..shared.schemas import PropertyCheck, PropertyMismatch
from ..yamlsubset import load_all_file
from .extractor import ManifestExtractor, ManifestSource
from .paths import get_field, has_field

logger = logging.getLogger(__name__)

Comparator = Callable[[Any, Any], bool]


class ValidationError(Exception):
    """Custom exception for manifest validation errors."""

    def __init__(self, message: str, mismatches: list[PropertyMismatch] | None = None):
        super().__init__(message)
        self.mismatches = mismatches or []


def equals(actual: Any, expected: Any) -> bool:
    """Equality that does not treat ``True`` and ``1`` as the same value."""
    if isinstance(actual, bool) or isinstance(expected, bool):
        return isinstance(actual, bool) and isinstance(expected, bool) and actual == expected
    return actual == expected


def equals_ignore_case(actual: Any, expected: Any) -> bool:
    """Case-insensitive comparison of the string forms."""
    if actual is None or expected is None:
        return actual is expected
    return str(actual).casefold() == str(expected).casefold()


def version_prefix(actual: Any, expected: Any) -> bool:
    """True if the actual version starts with the expected one (e.g., 1.0.0 vs 1.0.0-24815986)."""
    if actual is None or expected is None:
        return False
    return str(actual).startswith(str(expected))


class PropertyValidator:
    """Validate that properties in manifests hold their expected values."""

    def __init__(self, strict: bool | None = None):
        """
        Initialize the validator.

        Args:
            strict: Decode manifest text strictly (defaults to settings)
        """
        self.extractor = ManifestExtractor(strict=strict)

    def validate_required_fields(self, tree: dict[str, Any], required_fields: list[str]) -> bool:
        """
        Validate that required fields are present in a document.

        Args:
            tree: Decoded document
            required_fields: List of required field paths

        Returns:
            True if all required fields present

        Raises:
            ValidationError: If required fields are missing
        """
        missing_fields = [field for field in required_fields if get_field(tree, field) is None]

        if missing_fields:
            raise ValidationError(f"Missing required fields: {', '.join(missing_fields)}")

        logger.debug(f"All required fields present: {required_fields}")
        return True

    def check_property(
        self,
        documents: ManifestSource,
        path: str,
        expected: Any,
        compare: Comparator | None = None,
    ) -> list[PropertyMismatch]:
        """
        Compare a nested property against an expected value in every document.

        Args:
            documents: Manifest text or decoded document(s)
            path: Property path (e.g., "metadata.namespace")
            expected: Expected value
            compare: Predicate ``(actual, expected) -> bool`` (default: ``equals``)

        Returns:
            List of mismatches; empty when every document is consistent
        """
        compare = compare or equals
        mismatches = []

        for index, doc in enumerate(self.extractor.documents(documents)):
            if not has_field(doc, path):
                mismatches.append(
                    PropertyMismatch(path=path, expected=expected, present=False, document_index=index)
                )
                continue
            actual = get_field(doc, path)
            if not compare(actual, expected):
                mismatches.append(
                    PropertyMismatch(path=path, expected=expected, actual=actual, document_index=index)
                )

        return mismatches

    def validate_property(
        self,
        documents: ManifestSource,
        path: str,
        expected: Any,
        compare: Comparator | None = None,
    ) -> bool:
        """
        Validate a nested property against an expected value.

        Returns:
            True if every document holds the expected value

        Raises:
            ValidationError: Listing every mismatching document
        """
        mismatches = self.check_property(documents, path, expected, compare)
        if mismatches:
            details = "; ".join(m.describe() for m in mismatches)
            raise ValidationError(f"Property {path} is inconsistent: {details}", mismatches)

        logger.info(f"Property {path} matches expected value {expected!r}")
        return True

    def validate_checks(
        self,
        documents: ManifestSource,
        checks: list[PropertyCheck],
        compare: Comparator | None = None,
    ) -> bool:
        """
        Validate several property checks, reporting all failures together.

        Raises:
            ValidationError: If any check fails
        """
        docs = self.extractor.documents(documents)
        mismatches = []
        for check in checks:
            mismatches.extend(self.check_property(docs, check.path, check.expected, compare))

        if mismatches:
            details = "; ".join(m.describe() for m in mismatches)
            raise ValidationError(f"{len(mismatches)} property check(s) failed: {details}", mismatches)

        logger.info(f"All {len(checks)} property checks passed")
        return True

    def check_drift(
        self,
        descriptor: dict[str, Any],
        manifest: dict[str, Any],
        paths: list[str],
        compare: Comparator | None = None,
    ) -> list[PropertyMismatch]:
        """
        Find configuration drift between a deployment descriptor and an applied manifest.

        The descriptor supplies the expected value for each path; properties
        absent from the descriptor are not checked.

        Args:
            descriptor: Decoded deployment descriptor
            manifest: Decoded applied manifest
            paths: Property paths present in both documents
            compare: Predicate ``(actual, expected) -> bool`` (default: ``equals``)

        Returns:
            List of mismatches (empty if no drift)
        """
        mismatches = []
        for path in paths:
            if not has_field(descriptor, path):
                logger.debug(f"Descriptor has no {path}, skipping drift check")
                continue
            expected = get_field(descriptor, path)
            mismatches.extend(self.check_property(manifest, path, expected, compare))

        if mismatches:
            logger.warning(f"Detected drift in {len(mismatches)} property value(s): {[m.path for m in mismatches]}")
        return mismatches

    def validate_file(
        self,
        file_path: str | Path,
        property_path: str,
        expected: Any,
        compare: Comparator | None = None,
    ) -> bool:
        """
        Validate a property across every document of a YAML file.

        Raises:
            ValidationError: If any document is inconsistent or the file is empty
        """
        documents = load_all_file(file_path, strict=self.extractor.strict)
        if not documents:
            raise ValidationError(f"No YAML documents found in {file_path}")
        self.validate_property(documents, property_path, expected, compare)
        logger.info(f"{file_path}: {property_path} validated across {len(documents)} document(s)")
        return True

    def validate_all(self, files: dict[str, list[PropertyCheck]]) -> dict[str, bool]:
        """
        Validate property checks for a set of files.

        Args:
            files: Dictionary mapping file path to the checks it must pass

        Returns:
            Dictionary mapping file path to validation result

        Raises:
            ValidationError: If any validation fails
        """
        results = {}

        for file_path, checks in files.items():
            try:
                documents = load_all_file(file_path, strict=self.extractor.strict)
                self.validate_checks(documents, checks)
                results[file_path] = True
            except ValidationError as e:
                logger.error(f"Validation failed for {file_path}: {e}")
                raise

        logger.info(f"All manifests validated successfully: {list(files.keys())}")
        return results
