"""
Attribution of dbt test declarations to table columns.

A generic test is attached to the column it checks through its
dependency list and its kwargs. The rules below follow the layout of
manifest.json test nodes.
"""

import logging
from typing import Any

from column_coverage.identifiers import normalize_column_name

from .models import ColumnTestAttribution

logger = logging.getLogger(__name__)

RELATIONSHIPS_TEST = "relationships"


def resolve_test_table_id(test_name: str | None, depends_on_nodes: list[Any]) -> Any:
    """
    Pick the table a test is attributed to from its dependency list

    relationships tests list the referenced table last in depends_on.nodes,
    every other test lists the owning table first.

    Args:
        test_name: test_metadata.name of the test node
        depends_on_nodes: Non-empty depends_on.nodes list

    Returns:
        The selected dependency entry
    """
    if test_name == RELATIONSHIPS_TEST:
        return depends_on_nodes[-1]
    return depends_on_nodes[0]


def resolve_test_column_name(node: dict[str, Any], test_metadata: dict[str, Any]) -> str:
    """
    Find the column a test node checks

    Lookup order: column_name on the node, then test_metadata.kwargs.column_name,
    then test_metadata.kwargs.arg. The first non-empty string wins.

    Args:
        node: Raw test node
        test_metadata: The node's test_metadata mapping

    Returns:
        Lowercased column name, or "" if none could be resolved
    """
    kwargs = test_metadata.get("kwargs")
    if not isinstance(kwargs, dict):
        kwargs = {}

    for candidate in (node.get("column_name"), kwargs.get("column_name"), kwargs.get("arg")):
        if isinstance(candidate, str) and candidate:
            return normalize_column_name(candidate)
    return ""


def attribute_test(node: dict[str, Any], log: Any = None) -> ColumnTestAttribution | None:
    """
    Resolve a raw test node to its (table, column) attribution

    Args:
        node: Raw manifest node with resource_type "test"
        log: Logger (or ContextLogger) receiving advisory messages

    Returns:
        ColumnTestAttribution, or None if the node is not an attributable column test
    """
    log = log or logger
    test_metadata = node.get("test_metadata")
    if not isinstance(test_metadata, dict):
        return None

    depends_on = node.get("depends_on")
    depends_on_nodes = depends_on.get("nodes") if isinstance(depends_on, dict) else None
    if not isinstance(depends_on_nodes, list) or not depends_on_nodes:
        return None

    test_name = test_metadata.get("name")
    table_id = resolve_test_table_id(test_name, depends_on_nodes)
    if not isinstance(table_id, str) or not table_id:
        log.warning(f"Test {node.get('unique_id')} has an invalid dependency entry, ignored")
        return None

    column_name = resolve_test_column_name(node, test_metadata)
    if not column_name:
        log.debug(f"Test {node.get('unique_id')} targets no column, ignored")
        return None

    return ColumnTestAttribution(
        unique_id=node.get("unique_id"),
        test_name=test_name,
        table_id=table_id,
        column_name=column_name,
        node=node,
    )
