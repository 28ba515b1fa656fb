"""Test version-aware manifest rewriting."""

import pytest

from src.mapping.errors import VersionParseError
from src.mapping.rewriter import ManifestRewriter, rewrite_manifest
from src.model.mapping import MappingCatalog, MappingEntry
from src.model.result import OutcomeStatus


def _entry(deprecated, new, deprecated_in=None, removed_in=None):
    return MappingEntry(
        deprecated_api=deprecated,
        new_api=new,
        deprecated_in_version=deprecated_in,
        removed_in_version=removed_in,
    )


class TestManifestRewriter:
    def setup_method(self):
        """Set up test fixtures."""
        self.rewriter = ManifestRewriter()
        self.beta_entry = _entry("v1beta1", "v1", deprecated_in="1.22")

    def test_empty_catalog_returns_manifest_unchanged(self, ingress_manifest):
        result = self.rewriter.rewrite(ingress_manifest, MappingCatalog(), "1.25")

        assert result.manifest == ingress_manifest
        assert result.outcomes == []
        assert result.modified is False

    def test_empty_manifest_matches_nothing(self, ingress_catalog):
        result = self.rewriter.rewrite("", ingress_catalog, "1.25")

        assert result.manifest == ""
        assert len(result.outcomes) == 2
        assert all(o.status == OutcomeStatus.NO_MATCH for o in result.outcomes)

    def test_end_to_end_ingress(self):
        """Test the Ingress removal is applied on a 1.23 cluster."""
        catalog = MappingCatalog(
            mappings=(
                _entry("extensions/v1beta1", "networking.k8s.io/v1", removed_in="1.22"),
            )
        )
        manifest = "kind: Ingress\napiVersion: extensions/v1beta1"

        result = self.rewriter.rewrite(manifest, catalog, "1.23")

        assert result.manifest == "kind: Ingress\napiVersion: networking.k8s.io/v1"
        assert [o.status for o in result.outcomes] == [OutcomeStatus.APPLIED]
        assert result.outcomes[0].effective_version == "1.22"

    def test_not_yet_applicable_on_older_cluster(self):
        result = self.rewriter.rewrite("apiVersion: v1beta1", [self.beta_entry], "1.21")

        assert result.manifest == "apiVersion: v1beta1"
        assert result.outcomes[0].status == OutcomeStatus.NOT_YET_APPLICABLE
        assert result.skipped == result.outcomes
        assert "1.22" in result.outcomes[0].message

    @pytest.mark.parametrize("cluster_version", ["1.22", "1.25"])
    def test_applied_at_or_after_effective_version(self, cluster_version):
        result = self.rewriter.rewrite("apiVersion: v1beta1", [self.beta_entry], cluster_version)

        assert result.manifest == "apiVersion: v1"
        assert result.outcomes[0].status == OutcomeStatus.APPLIED

    def test_replaces_every_occurrence(self):
        manifest = "apiVersion: v1beta1\n---\napiVersion: v1beta1\n"

        result = self.rewriter.rewrite(manifest, [self.beta_entry], "1.22")

        assert result.manifest == "apiVersion: v1\n---\napiVersion: v1\n"
        assert len(result.applied) == 1

    def test_later_entries_see_earlier_substitutions(self, ingress_catalog, ingress_manifest):
        """Test chained mappings apply in catalog order."""
        result = self.rewriter.rewrite(ingress_manifest, ingress_catalog, "1.22")

        assert "apiVersion: networking.k8s.io/v1\nkind: Ingress\n" in result.manifest
        assert "v1beta1" not in result.manifest
        assert [o.status for o in result.outcomes] == [
            OutcomeStatus.APPLIED,
            OutcomeStatus.APPLIED,
        ]

    def test_chain_stops_at_cluster_version(self, ingress_catalog, ingress_manifest):
        result = self.rewriter.rewrite(ingress_manifest, ingress_catalog, "1.19")

        assert "apiVersion: networking.k8s.io/v1beta1\nkind: Ingress\n" in result.manifest
        assert [o.status for o in result.outcomes] == [
            OutcomeStatus.APPLIED,
            OutcomeStatus.NOT_YET_APPLICABLE,
        ]

    def test_reversed_order_does_not_chain(self, ingress_catalog, ingress_manifest):
        reversed_catalog = MappingCatalog(mappings=tuple(reversed(ingress_catalog.mappings)))

        result = self.rewriter.rewrite(ingress_manifest, reversed_catalog, "1.22")

        assert "apiVersion: networking.k8s.io/v1beta1\nkind: Ingress\n" in result.manifest
        assert [o.status for o in result.outcomes] == [
            OutcomeStatus.NO_MATCH,
            OutcomeStatus.APPLIED,
        ]

    def test_rewrite_is_idempotent(self, ingress_catalog, ingress_manifest):
        once = self.rewriter.rewrite(ingress_manifest, ingress_catalog, "1.25")
        twice = self.rewriter.rewrite(once.manifest, ingress_catalog, "1.25")

        assert twice.manifest == once.manifest
        assert twice.modified is False

    def test_only_matched_text_changes(self, ingress_catalog, ingress_manifest):
        result = self.rewriter.rewrite(ingress_manifest, ingress_catalog, "1.25")

        expected = ingress_manifest.replace(
            "apiVersion: extensions/v1beta1\nkind: Ingress\n",
            "apiVersion: networking.k8s.io/v1\nkind: Ingress\n",
        )
        assert result.manifest == expected

    def test_invalid_cluster_version_is_fatal(self, ingress_catalog, ingress_manifest):
        with pytest.raises(VersionParseError):
            self.rewriter.rewrite(ingress_manifest, ingress_catalog, "not-a-version")

    def test_invalid_entry_version_is_skipped(self):
        catalog = [
            _entry("batch/v1beta1", "batch/v1"),
            _entry("policy/v1beta1", "policy/v1", removed_in="1.25"),
        ]
        manifest = "apiVersion: batch/v1beta1\n---\napiVersion: policy/v1beta1\n"

        result = self.rewriter.rewrite(manifest, catalog, "1.25")

        assert result.manifest == "apiVersion: batch/v1beta1\n---\napiVersion: policy/v1\n"
        assert [o.status for o in result.outcomes] == [
            OutcomeStatus.INVALID_VERSION,
            OutcomeStatus.APPLIED,
        ]
        assert len(result.errors) == 1

    def test_unmatched_entry_with_invalid_version_is_no_match(self):
        result = self.rewriter.rewrite("kind: Pod", [_entry("batch/v1beta1", "batch/v1")], "1.25")

        assert result.outcomes[0].status == OutcomeStatus.NO_MATCH
        assert result.unmatched == result.outcomes

    def test_deprecated_version_takes_precedence(self):
        entry = _entry("v1beta1", "v1", deprecated_in="1.19", removed_in="1.22")

        result = self.rewriter.rewrite("v1beta1", [entry], "1.20")

        assert result.manifest == "v1"
        assert result.outcomes[0].effective_version == "1.19"

    def test_two_digit_minor_versions_compare_as_decimals(self):
        """A "1.10" entry counts as already in effect on a "1.9" cluster."""
        entry = _entry("v1beta1", "v1", removed_in="1.10")

        result = self.rewriter.rewrite("v1beta1", [entry], "1.9")

        assert result.manifest == "v1"
        assert result.parsed_cluster_version == 1.9

    def test_rewrite_manifest_helper(self):
        result = rewrite_manifest("v1beta1", [self.beta_entry], "1.22")

        assert result.manifest == "v1"
        assert result.cluster_version == "1.22"
