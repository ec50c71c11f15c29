"""Tests for the naming module."""

from controller_bootstrap.naming import (
    derive_resource_names,
    is_singular,
    pluralize,
    singularize,
    snake_case,
)


class TestDeriveResourceNames:
    """Test resource name derivation from the operation catalog."""

    def test_batch_plural_and_non_create_excluded(self):
        ops = ["CreateWidget", "CreateBatchWidgets", "CreateThings", "DescribeWidget"]
        assert derive_resource_names(ops) == ["Widget"]

    def test_catalog_order_preserved(self):
        ops = ["CreateTopic", "CreateBucket", "CreateAlias"]
        assert derive_resource_names(ops) == ["Topic", "Bucket", "Alias"]

    def test_batch_singular_excluded(self):
        """CreateBatch* is skipped even when the remainder is singular."""
        assert derive_resource_names(["CreateBatchPrediction"]) == []

    def test_bare_create_rejected(self):
        assert derive_resource_names(["Create"]) == []

    def test_duplicates_keep_first(self):
        assert derive_resource_names(["CreateQueue", "CreateTopic", "CreateQueue"]) == ["Queue", "Topic"]

    def test_compound_names(self):
        ops = ["CreateDBClusterSnapshot", "CreateDBSubnetGroup", "CreateTags"]
        assert derive_resource_names(ops) == ["DBClusterSnapshot", "DBSubnetGroup"]

    def test_singular_words_ending_in_s(self):
        ops = ["CreateAddress", "CreateStatus", "CreateAnalysis", "CreateAlias"]
        assert derive_resource_names(ops) == ["Address", "Status", "Analysis", "Alias"]

    def test_accepts_any_iterable(self):
        assert derive_resource_names(iter(("CreateUser",))) == ["User"]

    def test_empty_catalog(self):
        assert derive_resource_names([]) == []


class TestInflection:
    """Test the best-effort singular/plural heuristics."""

    def test_is_singular(self):
        assert is_singular("Widget")
        assert is_singular("Repository")
        assert is_singular("Person")
        assert is_singular("Metadata")

    def test_is_plural(self):
        assert not is_singular("Things")
        assert not is_singular("Repositories")
        assert not is_singular("People")
        assert not is_singular("Addresses")
        assert not is_singular("VPCs")

    def test_empty_is_not_singular(self):
        assert not is_singular("")

    def test_singularize(self):
        assert singularize("Policies") == "Policy"
        assert singularize("Boxes") == "Box"
        assert singularize("Statuses") == "Status"
        assert singularize("Children") == "Child"
        assert singularize("DBInstances") == "DBInstance"

    def test_pluralize(self):
        assert pluralize("Repository") == "Repositories"
        assert pluralize("Key") == "Keys"
        assert pluralize("Address") == "Addresses"
        assert pluralize("Person") == "People"
        assert pluralize("CachePolicy") == "CachePolicies"
        assert pluralize("Data") == "Data"

    def test_pluralize_changes_singular_spelling(self):
        for name in ("Widget", "Stage", "Function", "Branch"):
            assert pluralize(name) != name

    def test_snake_case(self):
        assert snake_case("DBClusterSnapshot") == "db_cluster_snapshot"
        assert snake_case("Repository") == "repository"
