"""Field extraction from Kubernetes-style manifests and Carvel package documents."""

import logging
from pathlib import Path
from typing import Any, Union

from ..config import get_settings
from ..shared.schemas import PackageReference
from ..yamlsubset import load_all_file, loads_all
from .paths import get_field

logger = logging.getLogger(__name__)

CARVEL_PACKAGING_GROUP = "packaging.carvel.dev"

ManifestSource = Union[str, dict[str, Any], list[dict[str, Any]]]


class ManifestExtractionError(Exception):
    """Raised when a required field cannot be extracted from a manifest."""
    pass


class ManifestExtractor:
    """Extract named fields from decoded manifests."""

    def __init__(self, strict: bool | None = None):
        """
        Initialize the extractor.

        Args:
            strict: Decode manifest text strictly (defaults to settings)
        """
        settings = get_settings()
        self.strict = settings.strict if strict is None else strict
        self.indent_unit = settings.indent_unit

    def documents(self, source: ManifestSource) -> list[dict[str, Any]]:
        """
        Normalize a manifest source into a list of decoded documents.

        Args:
            source: Manifest text (may hold several documents), one decoded
                document, or a list of decoded documents

        Returns:
            List of decoded documents
        """
        if isinstance(source, str):
            return loads_all(source, strict=self.strict, indent_unit=self.indent_unit)
        if isinstance(source, dict):
            return [source]
        if isinstance(source, list):
            return [doc for doc in source if isinstance(doc, dict)]
        raise TypeError(f"Unsupported manifest source: {type(source).__name__}")

    @staticmethod
    def find_document(
        documents: list[dict[str, Any]],
        kind: str,
        api_group: str | None = None,
    ) -> dict[str, Any] | None:
        """
        Find the first document of a given kind.

        Args:
            documents: Decoded documents
            kind: Expected ``kind`` value (e.g., "Package")
            api_group: Optional API group the ``apiVersion`` must belong to

        Returns:
            Matching document, or None
        """
        for doc in documents:
            if doc.get("kind") != kind:
                continue
            if api_group is not None:
                api_version = doc.get("apiVersion")
                if not isinstance(api_version, str) or not api_version.startswith(f"{api_group}/"):
                    continue
            return doc
        return None

    def extract_package_reference(self, source: ManifestSource) -> PackageReference:
        """
        Extract ``spec.refName`` and ``spec.version`` from a Carvel Package.

        Args:
            source: Package manifest text or decoded document(s)

        Returns:
            PackageReference with the service reference name and version

        Raises:
            ManifestExtractionError: If no Package document holds both fields
        """
        documents = self.documents(source)
        package = self.find_document(documents, kind="Package", api_group=CARVEL_PACKAGING_GROUP)
        if package is None:
            # Package descriptors written without kind/apiVersion headers
            package = next((doc for doc in documents if get_field(doc, "spec.refName") is not None), None)

        if package is None:
            raise ManifestExtractionError("No Package document with spec.refName found")

        ref_name = get_field(package, "spec.refName")
        version = get_field(package, "spec.version")

        missing = [
            path for path, value in (("spec.refName", ref_name), ("spec.version", version))
            if value is None
        ]
        if missing:
            raise ManifestExtractionError(
                f"Missing required fields in Package: {', '.join(missing)}"
            )

        if not isinstance(version, str):
            logger.warning(
                f"Package version {version!r} was decoded as {type(version).__name__}; "
                "quote it in the manifest to keep it verbatim"
            )

        # metadata values such as `name: 42` decode as numbers
        name = get_field(package, "metadata.name")
        namespace = get_field(package, "metadata.namespace")

        reference = PackageReference(
            ref_name=str(ref_name),
            version=str(version),
            name=None if name is None else str(name),
            namespace=None if namespace is None else str(namespace),
        )
        logger.info(f"Extracted package reference {reference.ref_name} version {reference.version}")
        return reference

    def extract_package_reference_from_file(self, path: str | Path) -> PackageReference:
        """Extract the package reference from a package descriptor file."""
        documents = load_all_file(path, strict=self.strict)
        return self.extract_package_reference(documents)

    def extract_namespace(self, source: ManifestSource, kind: str | None = None) -> str | None:
        """
        Get ``metadata.namespace`` from the first document (or first of ``kind``).

        Args:
            source: Manifest text or decoded document(s)
            kind: Optional document kind to look for

        Returns:
            Namespace, or None if not set
        """
        documents = self.documents(source)
        if kind is not None:
            doc = self.find_document(documents, kind=kind)
        else:
            doc = documents[0] if documents else None

        if doc is None:
            return None
        namespace = get_field(doc, "metadata.namespace")
        return None if namespace is None else str(namespace)

    def extract_fields(
        self,
        source: ManifestSource,
        paths: list[str],
        document_index: int = 0,
    ) -> dict[str, Any]:
        """
        Extract several fields from one document.

        Args:
            source: Manifest text or decoded document(s)
            paths: Property paths to extract
            document_index: Which document to read from

        Returns:
            Dictionary mapping each path to its value (None if absent)

        Raises:
            ManifestExtractionError: If ``document_index`` is out of range
        """
        documents = self.documents(source)
        if not 0 <= document_index < len(documents):
            raise ManifestExtractionError(
                f"Document index {document_index} out of range ({len(documents)} document(s))"
            )
        doc = documents[document_index]
        return {path: get_field(doc, path) for path in paths}
