"""Kubernetes version comparison for mapping entries."""

import re
from enum import Enum

from .errors import EntryVersionParseError, VersionParseError

# "<major>" or "<major>.<minor>", the shapes a decimal float parse accepts here
_VERSION_PATTERN = re.compile(r"^\d+(\.\d+)?$")


class VersionOrdering(str, Enum):
    """Whether a mapping is already in effect on a cluster."""

    APPLICABLE_NOW = "applicable_now"
    NOT_YET_APPLICABLE = "not_yet_applicable"


class VersionComparator:
    """Compares versions encoded as ``major.minor`` decimal floats.

    The encoding is lossy: "1.9" parses to 1.9 and "1.10" to 1.1, so minor
    versions are not ordered numerically once they reach 10. Mapping catalogs
    are authored against this behaviour and it is kept as-is.
    """

    def parse(self, version_string: str) -> float:
        """Parse a version string such as "1.22" into 1.22."""
        if version_string is None:
            raise VersionParseError("", "Missing Kubernetes version")
        candidate = version_string.strip()
        if not _VERSION_PATTERN.match(candidate):
            raise VersionParseError(version_string)
        return float(candidate)

    def parse_entry_version(self, version_string: str, deprecated_api: str) -> float:
        """Parse the effective version of a mapping entry."""
        try:
            return self.parse(version_string)
        except VersionParseError as e:
            raise EntryVersionParseError(version_string or "", deprecated_api) from e

    def compare(self, effective_version: float, cluster_version: float) -> VersionOrdering:
        """NOT_YET_APPLICABLE only when the effective version is strictly greater."""
        if effective_version > cluster_version:
            return VersionOrdering.NOT_YET_APPLICABLE
        return VersionOrdering.APPLICABLE_NOW

    def is_applicable(self, effective_version: float, cluster_version: float) -> bool:
        """True when the cluster is at or past the effective version."""
        return self.compare(effective_version, cluster_version) == VersionOrdering.APPLICABLE_NOW
