"""Loading of API mapping catalogs."""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import ValidationError

from ..model.mapping import MappingCatalog
from ..utils.logger import get_logger
from .defaults import DEFAULT_MAPPINGS
from .errors import CatalogUnavailable

logger = get_logger(__name__)


def build_catalog(mappings: List[Dict[str, Any]]) -> MappingCatalog:
    """Build a catalog from a list of raw mapping dictionaries."""
    try:
        return MappingCatalog(mappings=tuple(mappings))
    except ValidationError as e:
        raise CatalogUnavailable(f"Invalid mapping entries: {e}") from e


def default_catalog() -> MappingCatalog:
    """Catalog of the APIs shipped with the tool."""
    return build_catalog(DEFAULT_MAPPINGS)


def load_catalog(source: Optional[Union[str, Path]] = None) -> MappingCatalog:
    """Load a mapping catalog from a YAML map file.

    The file must contain a top-level ``mappings`` list. With no source the
    built-in catalog is returned.
    """
    if source is None:
        logger.debug("Using built-in API mapping catalog")
        return default_catalog()

    path = Path(source)
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise CatalogUnavailable(f"Failed to load mapping file: {path}: {e}") from e
    except yaml.YAMLError as e:
        raise CatalogUnavailable(f"Failed to parse mapping file: {path}: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("mappings"), list):
        raise CatalogUnavailable(f"Mapping file has no 'mappings' list: {path}")

    catalog = build_catalog(data["mappings"])
    logger.info(f"Loaded {len(catalog)} API mappings from {path}")
    return catalog
