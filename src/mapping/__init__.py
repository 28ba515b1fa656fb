"""Deprecated Kubernetes API mapping."""

from .catalog import load_catalog, default_catalog
from .errors import (
    MappingError,
    CatalogUnavailable,
    ClusterVersionUnreachable,
    VersionParseError,
    EntryVersionParseError,
    ReleaseNotFound,
    ReleaseStorageError,
)
from .rewriter import ManifestRewriter, rewrite_manifest
from .version import VersionComparator, VersionOrdering

__all__ = [
    "load_catalog",
    "default_catalog",
    "MappingError",
    "CatalogUnavailable",
    "ClusterVersionUnreachable",
    "VersionParseError",
    "EntryVersionParseError",
    "ReleaseNotFound",
    "ReleaseStorageError",
    "ManifestRewriter",
    "rewrite_manifest",
    "VersionComparator",
    "VersionOrdering",
]
