"""Mapping API service tying the rewriter to its collaborators."""

from pathlib import Path
from typing import Callable, Optional, Union

from ..helm import ReleaseStorage
from ..k8s import K8sClient
from ..mapping import ManifestRewriter, load_catalog
from ..model.cluster import KubeConfig, MapOptions
from ..model.mapping import MappingCatalog
from ..model.release import HelmRelease, MapReport, UPGRADE_DESCRIPTION
from ..model.result import RewriteResult
from ..utils.logger import get_logger

logger = get_logger(__name__)

VersionProvider = Callable[[], str]


class MappingService:
    """High-level service for mapping deprecated APIs in manifests and releases."""

    def __init__(
        self,
        client: Optional[K8sClient] = None,
        version_provider: Optional[VersionProvider] = None,
        rewriter: Optional[ManifestRewriter] = None,
    ):
        """Initialize mapping service.

        ``client`` and ``version_provider`` are created from the command
        options when not supplied.
        """
        self.client = client
        self.version_provider = version_provider
        self.rewriter = rewriter or ManifestRewriter()

    def _get_client(self, kube_config: KubeConfig, namespace: Optional[str] = None) -> K8sClient:
        if self.client is None:
            self.client = K8sClient.from_kube_config(kube_config, namespace=namespace)
        return self.client

    def _cluster_version(self, kube_config: KubeConfig) -> str:
        if self.version_provider is not None:
            return self.version_provider()
        return self._get_client(kube_config).get_server_version()

    def rewrite(self, manifest: str, catalog: MappingCatalog, cluster_version: str) -> RewriteResult:
        return self.rewriter.rewrite(manifest, catalog, cluster_version)

    def rewrite_file(
        self,
        path: Union[str, Path],
        map_file: Optional[str] = None,
        kube_version: Optional[str] = None,
        kube_config: Optional[KubeConfig] = None,
    ) -> RewriteResult:
        """Rewrite a manifest file, returning the result without writing it."""
        catalog = load_catalog(map_file)
        manifest = Path(path).read_text()

        if kube_version is None:
            kube_version = self._cluster_version(kube_config or KubeConfig())

        logger.info(f"Mapping deprecated APIs in {path}")
        return self.rewrite(manifest, catalog, kube_version)

    def map_release(self, options: MapOptions) -> MapReport:
        """Map deprecated APIs in the latest revision of a Helm release.

        Unless running dry, a modified manifest is stored as a new revision and
        the current revision is marked superseded.
        """
        catalog = load_catalog(options.map_file)
        client = self._get_client(options.kube_config, namespace=options.release_namespace)
        storage = ReleaseStorage(client, options.storage_type)

        release = storage.get_latest_release(options.release_name, options.release_namespace)
        cluster_version = self._cluster_version(options.kube_config)
        result = self.rewrite(release.manifest, catalog, cluster_version)

        report = MapReport(
            release_name=release.name,
            namespace=release.namespace,
            original_revision=release.version,
            dry_run=options.dry_run,
            result=result,
        )

        if not result.modified:
            logger.info(
                f"Release '{release.name}' has no deprecated or removed APIs to map"
            )
            return report

        if options.dry_run:
            logger.info(f"Dry run: release '{release.name}' would be updated")
            return report

        report.new_revision = self._store_new_revision(storage, release, result.manifest)
        return report

    def _store_new_revision(
        self, storage: ReleaseStorage, release: HelmRelease, manifest: str
    ) -> int:
        new_release = release.model_copy(deep=True)
        new_release.version = release.version + 1
        new_release.status = "deployed"
        new_release.manifest = manifest
        new_release.data.setdefault("info", {})["description"] = UPGRADE_DESCRIPTION

        release.status = "superseded"
        storage.update_release(release)
        storage.create_release(new_release)

        logger.info(
            f"Release '{release.name}' upgraded to revision {new_release.version} "
            f"with supported APIs"
        )
        return new_release.version
