"""API services for k8s-api-mapper."""

from .mapping_service import MappingService

__all__ = ["MappingService"]
