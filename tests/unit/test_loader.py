"""
Unit tests for artifact loading and the coverage runner
"""

import json
import logging
from pathlib import Path

import pytest

from column_coverage.errors import (
    ArtifactNotFoundError,
    CoverageError,
    DuplicateTableError,
    MalformedArtifactError,
    NoTablesAfterFilterError,
)
from column_coverage.loader import (
    SUPPORTED_MANIFEST_SCHEMA_VERSIONS,
    check_manifest_version,
    load_files,
    load_manifest,
    manifest_from_document,
    read_artifact,
    resolve_artifact_path,
)
from column_coverage.runner import apply_path_filter, compute_coverage, run_coverage


@pytest.fixture
def users_target(factory, write_artifacts, users_manifest_nodes, users_catalog_nodes) -> Path:
    return write_artifacts(
        factory.manifest_document(*users_manifest_nodes),
        factory.catalog_document(*users_catalog_nodes),
    )


class TestResolveArtifactPath:
    """Test artifact location"""

    def test_default_is_project_target(self):
        assert resolve_artifact_path("proj", None, "manifest.json") == Path("proj/target/manifest.json")

    def test_run_artifacts_dir_overrides(self):
        assert resolve_artifact_path("proj", "ci/out", "catalog.json") == Path("ci/out/catalog.json")


class TestReadArtifact:
    """Test JSON reading"""

    def test_missing_file(self, tmp_path):
        with pytest.raises(ArtifactNotFoundError, match="manifest.json"):
            read_artifact(tmp_path / "manifest.json")

    def test_missing_file_is_a_file_not_found(self):
        assert issubclass(ArtifactNotFoundError, FileNotFoundError)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text("{not json")

        with pytest.raises(MalformedArtifactError, match="not valid JSON"):
            read_artifact(path)

    def test_top_level_must_be_object(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text("[]")

        with pytest.raises(MalformedArtifactError):
            read_artifact(path)

    def test_not_utf8(self, tmp_path):
        """Test undecodable bytes are reported as a malformed artifact"""
        path = tmp_path / "manifest.json"
        path.write_bytes(b"\xff\xfe{}")

        with pytest.raises(MalformedArtifactError, match="not valid JSON"):
            read_artifact(path)


class TestManifestVersion:
    """Test the advisory schema version check"""

    def test_supported(self):
        document = {"metadata": {"dbt_schema_version": SUPPORTED_MANIFEST_SCHEMA_VERSIONS[-1]}}

        assert check_manifest_version(document) is True

    def test_schema_version_key_fallback(self):
        document = {"metadata": {"schema_version": SUPPORTED_MANIFEST_SCHEMA_VERSIONS[0]}}

        assert check_manifest_version(document) is True

    def test_unsupported_only_warns(self, factory, caplog):
        """Test an unknown version is reported but the manifest still loads"""
        # Arrange
        caplog.set_level(logging.WARNING)
        document = factory.manifest_document(
            factory.table("model.shop.users"),
            version="https://schemas.getdbt.com/dbt/manifest/v99.json",
        )

        # Act
        manifest = manifest_from_document(document)

        # Assert
        assert len(manifest) == 1
        assert "v99.json is not supported" in caplog.text


class TestManifestFromDocument:
    """Test manifest document handling"""

    def test_same_id_in_sources_and_nodes_is_duplicate(self, factory):
        """Test sources and nodes are not merged by key"""
        # Arrange
        document = {
            "metadata": {},
            "sources": {"shared.id": factory.table("shared.id", resource_type="source")},
            "nodes": {"shared.id": factory.table("shared.id", resource_type="model")},
        }

        # Act
        manifest = manifest_from_document(document)

        # Assert
        with pytest.raises(DuplicateTableError):
            manifest.get_table("shared.id")

    def test_load_from_project_dir(self, users_target):
        manifest = load_manifest(users_target.parent)

        assert list(manifest.models) == ["model.shop.users"]


class TestLoadFiles:
    """Test loading and annotating both artifacts"""

    def test_annotated_catalog(self, users_target):
        catalog = load_files(run_artifacts_dir=users_target)

        columns = catalog.tables["model.shop.users"].columns
        assert columns["id"].doc is True
        assert columns["email"].test is True

    def test_missing_catalog(self, factory, write_artifacts, users_manifest_nodes):
        target = write_artifacts(factory.manifest_document(*users_manifest_nodes), None)

        with pytest.raises(ArtifactNotFoundError, match="catalog.json"):
            load_files(run_artifacts_dir=target)

    def test_undecodable_catalog(self, factory, write_artifacts, users_manifest_nodes):
        target = write_artifacts(factory.manifest_document(*users_manifest_nodes), None)
        (target / "catalog.json").write_bytes(b"\xff\xfe")

        with pytest.raises(CoverageError):
            load_files(run_artifacts_dir=target)


class TestRunner:
    """Test the end-to-end coverage run"""

    def test_doc_and_test_runs_cover_different_columns(self, users_target):
        """Test the users scenario: one documented column, one tested column"""
        doc = run_coverage(run_artifacts_dir=users_target, cov_type="doc")
        test = run_coverage(run_artifacts_dir=users_target, cov_type="test")

        assert (doc["covered"], doc["total"], doc["coverage"]) == (1, 2, 0.5)
        assert (test["covered"], test["total"], test["coverage"]) == (1, 2, 0.5)
        doc_columns = {column["name"]: column["covered"] for column in doc["tables"][0]["columns"]}
        test_columns = {column["name"]: column["covered"] for column in test["tables"][0]["columns"]}
        assert doc_columns == {"id": 1, "email": 0}
        assert test_columns == {"id": 0, "email": 1}

    def test_idempotent(self, users_target):
        first = run_coverage(run_artifacts_dir=users_target, cov_type="test")
        second = run_coverage(run_artifacts_dir=users_target, cov_type="test")

        assert json.dumps(first) == json.dumps(second)

    def test_filter_matching_nothing_is_an_error(self, users_target):
        """Test an empty filter result is distinguishable from no filtering"""
        with pytest.raises(NoTablesAfterFilterError):
            run_coverage(run_artifacts_dir=users_target, cov_type="doc", path_filters=["models/staging"])

    def test_filter_matching(self, users_target):
        report = run_coverage(run_artifacts_dir=users_target, cov_type="doc", path_filters=["models/marts"])

        assert [table["name"] for table in report["tables"]] == ["analytics.users"]

    def test_empty_project_without_filter_is_not_an_error(self, factory, write_artifacts):
        target = write_artifacts(factory.manifest_document(), factory.catalog_document())

        report = run_coverage(run_artifacts_dir=target, cov_type="doc")

        assert report["total"] == 0
        assert report["coverage"] == 0.0

    def test_apply_path_filter_without_filters_returns_input(self, users_target):
        catalog = load_files(run_artifacts_dir=users_target)

        assert apply_path_filter(catalog, None) is catalog
        assert apply_path_filter(catalog, []) is catalog

    def test_compute_coverage(self, users_target):
        catalog = load_files(run_artifacts_dir=users_target)

        assert compute_coverage(catalog, "doc", ["models"])["covered"] == 1
