"""Exceptions raised while mapping deprecated Kubernetes APIs."""


class MappingError(Exception):
    """Base class for all mapping failures."""


class CatalogUnavailable(MappingError):
    """The mapping catalog could not be loaded."""


class ClusterVersionUnreachable(MappingError):
    """The Kubernetes server version could not be determined."""


class VersionParseError(MappingError):
    """A version string is not of the form <major>.<minor>."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        super().__init__(message or f"Invalid Kubernetes version: '{version}'")


class EntryVersionParseError(VersionParseError):
    """A mapping entry carries an unparseable effective version."""

    def __init__(self, version: str, deprecated_api: str):
        self.deprecated_api = deprecated_api
        super().__init__(
            version,
            f"Failed to get the deprecated or removed Kubernetes version "
            f"'{version}' for API: {deprecated_api!r}",
        )


class ReleaseNotFound(MappingError):
    """No Helm release with the given name exists in the namespace."""


class ReleaseStorageError(MappingError):
    """Reading or writing Helm release storage failed."""
