"""API mapping catalog models."""

from typing import Iterator, Optional, Tuple

from pydantic import BaseModel, Field, field_validator


class MappingEntry(BaseModel):
    """A deprecated API string and the supported API that replaces it."""

    deprecated_api: str = Field(alias="deprecatedAPI")
    new_api: str = Field(alias="newAPI")
    deprecated_in_version: Optional[str] = Field(default=None, alias="deprecatedInVersion")
    removed_in_version: Optional[str] = Field(default=None, alias="removedInVersion")

    class Config:
        populate_by_name = True
        frozen = True

    @field_validator("deprecated_in_version", "removed_in_version", mode="before")
    @classmethod
    def version_as_text(cls, value):
        # Unquoted YAML versions such as 1.25 load as numbers
        if isinstance(value, (int, float)):
            return str(value)
        return value

    @property
    def effective_version(self) -> str:
        """Version from which the substitution applies.

        The deprecation version wins over the removal version when both are set.
        """
        if self.deprecated_in_version:
            return self.deprecated_in_version
        return self.removed_in_version or ""


class MappingCatalog(BaseModel):
    """Ordered mapping entries. Order is also application order."""

    mappings: Tuple[MappingEntry, ...] = ()

    class Config:
        frozen = True

    def __iter__(self) -> Iterator[MappingEntry]:
        return iter(self.mappings)

    def __len__(self) -> int:
        return len(self.mappings)
