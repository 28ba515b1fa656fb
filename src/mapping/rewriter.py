"""Version-aware rewriting of deprecated Kubernetes APIs in manifests."""

from typing import Iterable, Optional

from ..model.mapping import MappingEntry
from ..model.result import EntryOutcome, OutcomeStatus, RewriteResult
from ..utils.logger import get_logger
from .errors import EntryVersionParseError
from .version import VersionComparator

logger = get_logger(__name__)


class ManifestRewriter:
    """Replaces deprecated or removed APIs in a manifest with supported ones.

    The manifest is treated as plain text: every literal occurrence of an
    entry's deprecated API string is replaced, wherever it appears.
    """

    def __init__(self, comparator: Optional[VersionComparator] = None):
        self.comparator = comparator or VersionComparator()

    def rewrite(
        self, manifest: str, catalog: Iterable[MappingEntry], cluster_version: str
    ) -> RewriteResult:
        """Rewrite ``manifest`` for a cluster running ``cluster_version``.

        Entries are evaluated in catalog order against the manifest as modified
        by the entries before them. Raises VersionParseError when the cluster
        version cannot be parsed.
        """
        kube_version = self.comparator.parse(cluster_version)
        logger.info(
            f"Kubernetes server version: '{cluster_version}', parsed as {kube_version:f}"
        )

        current = manifest
        outcomes = []
        for entry in catalog:
            outcome, current = self._apply_entry(entry, current, cluster_version, kube_version)
            outcomes.append(outcome)

        return RewriteResult(
            manifest=current,
            cluster_version=cluster_version,
            parsed_cluster_version=kube_version,
            outcomes=outcomes,
        )

    def _apply_entry(
        self, entry: MappingEntry, manifest: str, cluster_version: str, kube_version: float
    ) -> tuple[EntryOutcome, str]:
        effective = entry.effective_version
        candidate = manifest.replace(entry.deprecated_api, entry.new_api)

        if candidate == manifest:
            logger.debug(f"No occurrences of API: {entry.deprecated_api!r}")
            outcome = EntryOutcome(
                entry=entry, status=OutcomeStatus.NO_MATCH, effective_version=effective
            )
            return outcome, manifest

        logger.info(
            f"Found deprecated or removed Kubernetes API: {entry.deprecated_api!r}, "
            f"supported API equivalent: {entry.new_api!r}"
        )

        try:
            api_version = self.comparator.parse_entry_version(effective, entry.deprecated_api)
        except EntryVersionParseError as e:
            logger.warning(f"Skipping mapping: {e}")
            outcome = EntryOutcome(
                entry=entry,
                status=OutcomeStatus.INVALID_VERSION,
                effective_version=effective,
                message=str(e),
            )
            return outcome, manifest

        if not self.comparator.is_applicable(api_version, kube_version):
            message = (
                f"API does not require mapping now as it is not valid till Kubernetes "
                f"'{effective}' (current: '{cluster_version}')"
            )
            logger.warning(f"{message}: {entry.deprecated_api!r}")
            outcome = EntryOutcome(
                entry=entry,
                status=OutcomeStatus.NOT_YET_APPLICABLE,
                effective_version=effective,
                message=message,
            )
            return outcome, manifest

        outcome = EntryOutcome(
            entry=entry,
            status=OutcomeStatus.APPLIED,
            effective_version=effective,
            message=f"Mapped to {entry.new_api!r}",
        )
        return outcome, candidate


def rewrite_manifest(
    manifest: str, catalog: Iterable[MappingEntry], cluster_version: str
) -> RewriteResult:
    """Rewrite a manifest with a default ManifestRewriter."""
    return ManifestRewriter().rewrite(manifest, catalog, cluster_version)
