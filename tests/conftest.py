"""
Pytest configuration and fixtures for column coverage tests.
Provides factories for manifest.json and catalog.json nodes and a helper
writing artifacts to a temporary target directory.
"""

import json
import logging
from pathlib import Path
from typing import Any

import pytest

MANIFEST_V12 = "https://schemas.getdbt.com/dbt/manifest/v12.json"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "e2e: mark test as end-to-end CLI test")
    config.addinivalue_line("markers", "property: mark test as property-based test")


class NodeFactory:
    """Builders for the raw JSON nodes found in dbt artifacts."""

    @staticmethod
    def table(
        unique_id: str,
        resource_type: str = "model",
        schema: str = "analytics",
        name: str | None = None,
        columns: dict[str, str | None] | None = None,
        original_file_path: str | None = "",
    ) -> dict[str, Any]:
        """Manifest table node; columns maps name -> description."""
        node: dict[str, Any] = {
            "unique_id": unique_id,
            "resource_type": resource_type,
            "schema": schema,
            "name": name or unique_id.split(".")[-1],
            "columns": {
                column: {"name": column, "description": description}
                for column, description in (columns or {}).items()
            },
        }
        if original_file_path is not None:
            node["original_file_path"] = original_file_path or f"models/{node['name']}.sql"
        return node

    @staticmethod
    def test(
        unique_id: str,
        depends_on: list[str],
        test_name: str = "not_null",
        column_name: str | None = None,
        kwargs: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Manifest generic test node."""
        node: dict[str, Any] = {
            "unique_id": unique_id,
            "resource_type": "test",
            "name": unique_id.split(".")[-1],
            "test_metadata": {"name": test_name, "kwargs": kwargs or {}},
            "depends_on": {"nodes": depends_on},
        }
        if column_name is not None:
            node["column_name"] = column_name
        return node

    @staticmethod
    def catalog_node(unique_id: str, columns: list[str]) -> dict[str, Any]:
        """catalog.json node."""
        return {
            "unique_id": unique_id,
            "metadata": {"type": "BASE TABLE"},
            "columns": {
                column: {"name": column, "type": "TEXT", "index": index}
                for index, column in enumerate(columns, 1)
            },
        }

    @staticmethod
    def manifest_document(*nodes: dict[str, Any], version: str = MANIFEST_V12) -> dict[str, Any]:
        """manifest.json document, sources split from other nodes."""
        return {
            "metadata": {"dbt_schema_version": version},
            "sources": {
                node["unique_id"]: node for node in nodes if node.get("resource_type") == "source"
            },
            "nodes": {
                node["unique_id"]: node for node in nodes if node.get("resource_type") != "source"
            },
        }

    @staticmethod
    def catalog_document(*nodes: dict[str, Any]) -> dict[str, Any]:
        """catalog.json document, source ids in "sources"."""
        return {
            "metadata": {},
            "sources": {
                node["unique_id"]: node for node in nodes if node["unique_id"].startswith("source.")
            },
            "nodes": {
                node["unique_id"]: node for node in nodes if not node["unique_id"].startswith("source.")
            },
        }


@pytest.fixture
def factory() -> type[NodeFactory]:
    """Node factory."""
    return NodeFactory


@pytest.fixture
def users_manifest_nodes(factory) -> list[dict[str, Any]]:
    """One model analytics.users: id documented, email tested."""
    return [
        factory.table(
            "model.shop.users",
            schema="Analytics",
            name="Users",
            columns={"id": "pk", "email": None},
            original_file_path="models/marts/users.sql",
        ),
        factory.test(
            "test.shop.not_null_users_email.1a2b",
            depends_on=["model.shop.users"],
            column_name="email",
        ),
    ]


@pytest.fixture
def users_catalog_nodes(factory) -> list[dict[str, Any]]:
    """Catalog counterpart of users_manifest_nodes."""
    return [factory.catalog_node("model.shop.users", ["ID", "EMAIL"])]


@pytest.fixture
def write_artifacts(tmp_path: Path):
    """Write manifest.json and catalog.json into <tmp_path>/target."""

    def _write(manifest: dict[str, Any] | None, catalog: dict[str, Any] | None) -> Path:
        target = tmp_path / "target"
        target.mkdir(exist_ok=True)
        if manifest is not None:
            (target / "manifest.json").write_text(json.dumps(manifest), encoding="utf-8")
        if catalog is not None:
            (target / "catalog.json").write_text(json.dumps(catalog), encoding="utf-8")
        return target

    return _write


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo root logger changes made by setup_logging()."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
