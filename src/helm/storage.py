"""Helm 3 release storage backed by Secrets or ConfigMaps."""

import base64
import gzip
import json
import time
from typing import Any, Dict, List

from ..k8s import K8sClient
from ..mapping.errors import ReleaseNotFound, ReleaseStorageError
from ..model.cluster import StorageType
from ..model.release import HelmRelease
from ..utils.logger import get_logger

logger = get_logger(__name__)

GZIP_MAGIC = b"\x1f\x8b\x08"
SECRET_TYPE = "helm.sh/release.v1"


def decode_release(payload: str) -> Dict[str, Any]:
    """Decode Helm's base64 (optionally gzipped) release JSON."""
    try:
        raw = base64.b64decode(payload)
        if raw[:3] == GZIP_MAGIC:
            raw = gzip.decompress(raw)
        return json.loads(raw)
    except (ValueError, OSError) as e:
        raise ReleaseStorageError(f"Failed to decode Helm release: {e}") from e


def encode_release(data: Dict[str, Any]) -> str:
    """Encode release JSON the way Helm stores it."""
    compressed = gzip.compress(json.dumps(data).encode("utf-8"))
    return base64.b64encode(compressed).decode("ascii")


def storage_object_name(release_name: str, version: int) -> str:
    return f"sh.helm.release.v1.{release_name}.v{version}"


class ReleaseStorage:
    """Reads and writes Helm release revisions through kubectl."""

    def __init__(self, client: K8sClient, storage_type: StorageType = StorageType.SECRETS):
        self.client = client
        self.storage_type = storage_type

    @property
    def _resource_type(self) -> str:
        return "secrets" if self.storage_type == StorageType.SECRETS else "configmaps"

    def _payload(self, item: Dict[str, Any]) -> str:
        """Extract the Helm payload from a storage object."""
        payload = (item.get("data") or {}).get("release")
        if not payload:
            name = item.get("metadata", {}).get("name", "unknown")
            raise ReleaseStorageError(f"Storage object {name} has no release data")
        if self.storage_type == StorageType.SECRETS:
            # Secrets wrap Helm's payload in another base64 layer
            try:
                payload = base64.b64decode(payload).decode("ascii")
            except ValueError as e:
                raise ReleaseStorageError(f"Failed to decode Helm release: {e}") from e
        return payload

    def list_releases(self, name: str, namespace: str) -> List[HelmRelease]:
        """All stored revisions of a release, oldest first."""
        selector = f"owner=helm,name={name}"
        data = self.client.get_json(self._resource_type, selector=selector)
        if data is None:
            raise ReleaseStorageError(
                f"Failed to list {self._resource_type} for release '{name}' in '{namespace}'"
            )

        releases = []
        for item in data.get("items", []):
            release_data = decode_release(self._payload(item))
            release_data.setdefault("namespace", namespace)
            releases.append(HelmRelease.from_data(release_data))

        return sorted(releases, key=lambda r: r.version)

    def get_latest_release(self, name: str, namespace: str) -> HelmRelease:
        """Highest revision of a release."""
        releases = self.list_releases(name, namespace)
        if not releases:
            raise ReleaseNotFound(f"Release '{name}' not found in namespace '{namespace}'")
        latest = releases[-1]
        logger.info(f"Found release '{name}' revision {latest.version} ({latest.status})")
        return latest

    def to_storage_object(self, release: HelmRelease) -> Dict[str, Any]:
        """Build the Secret or ConfigMap holding a release revision."""
        payload = encode_release(release.to_data())
        metadata = {
            "name": storage_object_name(release.name, release.version),
            "namespace": release.namespace,
            "labels": {
                "name": release.name,
                "owner": "helm",
                "status": release.status,
                "version": str(release.version),
                "modifiedAt": str(int(time.time())),
            },
        }

        if self.storage_type == StorageType.SECRETS:
            return {
                "apiVersion": "v1",
                "kind": "Secret",
                "metadata": metadata,
                "type": SECRET_TYPE,
                "data": {"release": base64.b64encode(payload.encode("ascii")).decode("ascii")},
            }
        return {
            "apiVersion": "v1",
            "kind": "ConfigMap",
            "metadata": metadata,
            "data": {"release": payload},
        }

    def _write(self, release: HelmRelease) -> None:
        success, output = self.client.apply(self.to_storage_object(release))
        if not success:
            raise ReleaseStorageError(
                f"Failed to store release '{release.name}' revision {release.version}: {output}"
            )

    def update_release(self, release: HelmRelease) -> None:
        """Overwrite an existing revision."""
        logger.info(f"Updating release '{release.name}' revision {release.version}")
        self._write(release)

    def create_release(self, release: HelmRelease) -> None:
        """Store a new revision."""
        logger.info(f"Creating release '{release.name}' revision {release.version}")
        self._write(release)
