"""
Build the coverage catalog from catalog.json nodes.

Every catalog node is cross-referenced with the manifest, which provides
the canonical table name and the file the table is defined in. The
catalog defines which columns exist; the manifest only annotates them.
"""

import logging
from collections.abc import Iterable, Iterator
from typing import Any

from column_coverage.errors import (
    MalformedArtifactError,
    MissingFromManifestError,
    TableNotFoundError,
)
from column_coverage.identifiers import normalize_column_name
from column_coverage.manifest import Manifest

from .models import Catalog, Column, Table

logger = logging.getLogger(__name__)

# catalog.json entries describing test results rather than tables
TEST_NODE_PREFIX = "test."


def catalog_nodes(document: dict[str, Any]) -> Iterator[dict[str, Any]]:
    """
    Yield the table nodes of a catalog.json document

    Args:
        document: Parsed catalog.json

    Yields:
        Nodes of the "sources" and "nodes" collections, test entries excluded
    """
    for key in ("sources", "nodes"):
        group = document.get(key)
        if not isinstance(group, dict):
            continue
        for node_id, node in group.items():
            if node_id.startswith(TEST_NODE_PREFIX):
                continue
            yield node


def build_table(node: dict[str, Any], manifest: Manifest, log: Any = None) -> Table:
    """
    Build one catalog table from a catalog node

    Args:
        node: catalog.json node
        manifest: Manifest index used to resolve the table
        log: Logger (or ContextLogger) receiving advisory messages

    Returns:
        Table with name-only columns

    Raises:
        MalformedArtifactError: If the node has no unique_id
        MissingFromManifestError: If the unique_id is unknown to the manifest
        DuplicateTableError: If the unique_id is ambiguous in the manifest
    """
    log = log or logger
    unique_id = node.get("unique_id") if isinstance(node, dict) else None
    if not isinstance(unique_id, str) or not unique_id:
        raise MalformedArtifactError("Catalog node without unique_id")

    try:
        manifest_table = manifest.get_table(unique_id)
    except TableNotFoundError as e:
        raise MissingFromManifestError(f"unique_id {unique_id} not found in manifest") from e

    columns: dict[str, Column] = {}
    raw_columns = node.get("columns")
    if isinstance(raw_columns, dict):
        for key, raw_column in raw_columns.items():
            if not isinstance(raw_column, dict):
                continue
            raw_name = raw_column.get("name")
            name = normalize_column_name(raw_name if isinstance(raw_name, str) and raw_name else key)
            columns[name] = Column(name=name)

    original_file_path = manifest_table.original_file_path
    if original_file_path is None:
        log.warning(f"original_file_path not found for {unique_id}")
        original_file_path = ""

    return Table(
        unique_id=unique_id,
        name=manifest_table.name,
        original_file_path=original_file_path,
        columns=columns,
    )


def build_catalog(nodes: Iterable[dict[str, Any]], manifest: Manifest, log: Any = None) -> Catalog:
    """
    Build the catalog of all tables

    A single malformed node aborts the build.

    Args:
        nodes: catalog.json table nodes (see catalog_nodes)
        manifest: Manifest index
        log: Logger (or ContextLogger) receiving advisory messages

    Returns:
        Catalog instance
    """
    log = log or logger
    tables: dict[str, Table] = {}
    for node in nodes:
        table = build_table(node, manifest, log)
        tables[table.unique_id] = table

    catalog = Catalog(tables=tables)
    log.info(f"Catalog built: {len(catalog)} tables, {catalog.column_count()} columns")
    return catalog
