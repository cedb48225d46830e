"""Schemas for values extracted from manifests and consistency check results."""

from typing import Any

from pydantic import BaseModel, Field


class PackageReference(BaseModel):
    """Service reference pulled from a Carvel Package document."""

    ref_name: str = Field(..., description="spec.refName (e.g., argocd-service.vsphere.vmware.com)")
    version: str = Field(..., description="spec.version (e.g., 1.0.0-24815986)")
    name: str | None = Field(None, description="metadata.name of the Package")
    namespace: str | None = Field(None, description="metadata.namespace of the Package")


class PropertyCheck(BaseModel):
    """A nested property and the value it is expected to hold."""

    path: str = Field(..., description="Dot-or-bracket property path (e.g., metadata.namespace)")
    expected: Any = Field(None, description="Expected value")


class PropertyMismatch(BaseModel):
    """A property whose value differs from the expected one."""

    path: str = Field(..., description="Property path that was checked")
    expected: Any = Field(None, description="Expected value")
    actual: Any = Field(None, description="Value found in the document (None if missing)")
    present: bool = Field(True, description="False when the property is missing entirely")
    document_index: int = Field(0, description="Index of the document within the checked set")

    def describe(self) -> str:
        """Human-readable one-line description."""
        if not self.present:
            return f"document {self.document_index}: {self.path} is missing (expected {self.expected!r})"
        return (
            f"document {self.document_index}: {self.path} is {self.actual!r}, "
            f"expected {self.expected!r}"
        )
