"""Rewrite outcome models."""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field

from .mapping import MappingEntry


class OutcomeStatus(str, Enum):
    """What happened to a single mapping entry during a rewrite."""

    APPLIED = "applied"
    NOT_YET_APPLICABLE = "not_yet_applicable"
    INVALID_VERSION = "invalid_version"
    NO_MATCH = "no_match"


class EntryOutcome(BaseModel):
    """Outcome of evaluating one mapping entry against a manifest."""

    entry: MappingEntry
    status: OutcomeStatus
    effective_version: str = ""
    message: str = ""


class RewriteResult(BaseModel):
    """Rewritten manifest plus the per-entry outcome log."""

    manifest: str
    cluster_version: str
    parsed_cluster_version: float
    outcomes: List[EntryOutcome] = Field(default_factory=list)

    def _with_status(self, *statuses: OutcomeStatus) -> List[EntryOutcome]:
        return [o for o in self.outcomes if o.status in statuses]

    @property
    def applied(self) -> List[EntryOutcome]:
        return self._with_status(OutcomeStatus.APPLIED)

    @property
    def skipped(self) -> List[EntryOutcome]:
        """Entries that matched but were held back."""
        return self._with_status(OutcomeStatus.NOT_YET_APPLICABLE, OutcomeStatus.INVALID_VERSION)

    @property
    def unmatched(self) -> List[EntryOutcome]:
        return self._with_status(OutcomeStatus.NO_MATCH)

    @property
    def errors(self) -> List[EntryOutcome]:
        return self._with_status(OutcomeStatus.INVALID_VERSION)

    @property
    def modified(self) -> bool:
        """True when at least one entry was applied."""
        return bool(self.applied)
