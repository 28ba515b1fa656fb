"""Test configuration and fixtures."""

import base64
from unittest.mock import Mock
from typing import Dict, Any

import pytest

from src.helm.storage import encode_release
from src.k8s.client import K8sClient
from src.model.mapping import MappingCatalog, MappingEntry

INGRESS_MANIFEST = """---
# Source: web/templates/ingress.yaml
apiVersion: extensions/v1beta1
kind: Ingress
metadata:
  name: web
spec:
  backend:
    serviceName: web
    servicePort: 80
---
# Source: web/templates/deployment.yaml
apiVersion: apps/v1
kind: Deployment
metadata:
  name: web
"""


@pytest.fixture
def ingress_catalog() -> MappingCatalog:
    """Two chained Ingress mappings, as in the built-in catalog."""
    return MappingCatalog(
        mappings=(
            MappingEntry(
                deprecated_api="apiVersion: extensions/v1beta1\nkind: Ingress\n",
                new_api="apiVersion: networking.k8s.io/v1beta1\nkind: Ingress\n",
                deprecated_in_version="1.14",
            ),
            MappingEntry(
                deprecated_api="apiVersion: networking.k8s.io/v1beta1\nkind: Ingress\n",
                new_api="apiVersion: networking.k8s.io/v1\nkind: Ingress\n",
                removed_in_version="1.22",
            ),
        )
    )


@pytest.fixture
def ingress_manifest() -> str:
    return INGRESS_MANIFEST


@pytest.fixture
def release_data() -> Dict[str, Any]:
    """Decoded Helm release JSON."""
    return {
        "name": "web",
        "namespace": "apps",
        "version": 3,
        "info": {"status": "deployed", "description": "Upgrade complete"},
        "chart": {"metadata": {"name": "web", "version": "1.0.0"}},
        "config": {},
        "manifest": INGRESS_MANIFEST,
    }


@pytest.fixture
def release_secret(release_data):
    """Helm storage Secret holding ``release_data``."""

    def _make(data: Dict[str, Any] = None) -> Dict[str, Any]:
        data = data or release_data
        payload = encode_release(data)
        return {
            "apiVersion": "v1",
            "kind": "Secret",
            "metadata": {
                "name": f"sh.helm.release.v1.{data['name']}.v{data['version']}",
                "namespace": data["namespace"],
                "labels": {
                    "name": data["name"],
                    "owner": "helm",
                    "status": data["info"]["status"],
                    "version": str(data["version"]),
                },
            },
            "type": "helm.sh/release.v1",
            "data": {"release": base64.b64encode(payload.encode("ascii")).decode("ascii")},
        }

    return _make


@pytest.fixture
def mock_k8s_client():
    """Mock kubectl client for unit tests."""
    client = Mock(spec=K8sClient)
    client.get_json = Mock(return_value={"items": []})
    client.apply = Mock(return_value=(True, "applied"))
    client.get_server_version = Mock(return_value="1.23")
    return client
