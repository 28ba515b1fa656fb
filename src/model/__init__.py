"""Data models for k8s-api-mapper."""

from .cluster import ClusterVersion, KubeConfig, MapOptions, StorageType
from .mapping import MappingEntry, MappingCatalog
from .release import HelmRelease, MapReport, UPGRADE_DESCRIPTION
from .result import EntryOutcome, OutcomeStatus, RewriteResult

__all__ = [
    "ClusterVersion",
    "KubeConfig",
    "MapOptions",
    "StorageType",
    "MappingEntry",
    "MappingCatalog",
    "HelmRelease",
    "MapReport",
    "UPGRADE_DESCRIPTION",
    "EntryOutcome",
    "OutcomeStatus",
    "RewriteResult",
]
