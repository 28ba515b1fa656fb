"""Cluster connection and version models."""

import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ClusterVersion(BaseModel):
    """Kubernetes version information as reported by ``kubectl version``."""

    major: str
    minor: str
    git_version: str = Field(default="", alias="gitVersion")
    platform: Optional[str] = None

    class Config:
        populate_by_name = True

    @property
    def short_version(self) -> str:
        """``<major>.<minor>`` with provider suffixes such as "22+" removed."""
        return f"{_leading_digits(self.major)}.{_leading_digits(self.minor)}"


def _leading_digits(component: str) -> str:
    match = re.match(r"\d+", component.strip())
    return match.group(0) if match else component


class KubeConfig(BaseModel):
    """Kubernetes configuration settings."""

    context: Optional[str] = None
    file: Optional[str] = None


class StorageType(str, Enum):
    """Helm release storage backends."""

    SECRETS = "secrets"
    CONFIGMAPS = "configmaps"


class MapOptions(BaseModel):
    """Options for mapping deprecated APIs in a Helm release."""

    release_name: str
    release_namespace: str = "default"
    map_file: Optional[str] = None
    dry_run: bool = False
    storage_type: StorageType = StorageType.SECRETS
    kube_config: KubeConfig = Field(default_factory=KubeConfig)
