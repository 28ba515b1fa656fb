"""Helm release models."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from .result import RewriteResult

# Description stored on the release revision written by a mapping run
UPGRADE_DESCRIPTION = "Kubernetes deprecated API upgrade - DO NOT rollback from this version"


class HelmRelease(BaseModel):
    """A single Helm release revision read from cluster storage."""

    name: str
    namespace: str
    version: int
    status: str = "unknown"
    manifest: str = ""
    data: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_data(cls, data: Dict[str, Any]) -> "HelmRelease":
        """Build a release from Helm's decoded release JSON."""
        info = data.get("info") or {}
        return cls(
            name=data.get("name", ""),
            namespace=data.get("namespace", "default"),
            version=int(data.get("version", 1)),
            status=info.get("status", "unknown"),
            manifest=data.get("manifest", ""),
            data=data,
        )

    def to_data(self) -> Dict[str, Any]:
        """Release JSON with this model's fields written back into it."""
        data = dict(self.data)
        info = dict(data.get("info") or {})
        info["status"] = self.status
        data.update(
            {
                "name": self.name,
                "namespace": self.namespace,
                "version": self.version,
                "manifest": self.manifest,
                "info": info,
            }
        )
        return data


class MapReport(BaseModel):
    """Result of mapping the deprecated APIs of a Helm release."""

    release_name: str
    namespace: str
    original_revision: int
    new_revision: Optional[int] = None
    dry_run: bool = False
    result: RewriteResult

    @property
    def updated(self) -> bool:
        return self.new_revision is not None
