"""
Restrict a catalog to the tables defined under given paths.
"""

import logging
from collections.abc import Iterable
from typing import Any

from column_coverage.identifiers import normalize_path

from .models import Catalog

logger = logging.getLogger(__name__)


def parse_path_filters(values: Iterable[str] | str | None) -> list[str]:
    """
    Split comma-separated path filters

    Args:
        values: A comma-separated string or several of them

    Returns:
        Normalized, non-empty prefixes in their original order
    """
    if values is None:
        return []
    if isinstance(values, str):
        values = [values]
    prefixes = []
    for value in values:
        for part in value.split(","):
            part = part.strip()
            if part:
                prefixes.append(normalize_path(part))
    return prefixes


def matches_any_prefix(path: str, prefixes: Iterable[str]) -> bool:
    """Check whether a path starts with any of the prefixes"""
    normalized = normalize_path(path)
    return any(normalized.startswith(normalize_path(prefix)) for prefix in prefixes)


def filter_tables(catalog: Catalog, prefixes: Iterable[str], log: Any = None) -> Catalog:
    """
    Keep the tables whose original_file_path starts with one of the prefixes

    Args:
        catalog: Catalog to filter (left untouched)
        prefixes: Path prefixes, any separator convention
        log: Logger (or ContextLogger) receiving the result size

    Returns:
        New Catalog with the matching tables
    """
    log = log or logger
    prefixes = list(prefixes)
    tables = {
        unique_id: table
        for unique_id, table in catalog.tables.items()
        if matches_any_prefix(table.original_file_path, prefixes)
    }
    log.info(f"Tables after filtering: {len(tables)}")
    return Catalog(tables=tables)
