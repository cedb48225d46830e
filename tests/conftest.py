"""Shared fixtures for manifestkit tests."""

import os

import pytest

from manifestkit.config import ENV_PREFIX, reset_settings

PACKAGE_MANIFEST = """\
apiVersion: packaging.carvel.dev/v1alpha1
kind: Package
metadata:
  name: argocd-service.vsphere.vmware.com.1.0.0
  namespace: vmware-system-supervisor-services
spec:
  refName: argocd-service.vsphere.vmware.com
  version: 1.0.0-24815986
  releasedAt: "2024-10-01T00:00:00Z"
"""


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Run every test against default settings."""
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def package_manifest() -> str:
    """Carvel Package document for the ArgoCD supervisor service."""
    return PACKAGE_MANIFEST
