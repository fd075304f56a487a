"""
Coverage report generation.

This module folds an annotated catalog into per-column, per-table and
global coverage figures for one coverage type at a time.
"""

from enum import Enum
from typing import Any

from column_coverage.catalog import Catalog, Column, Table


class CoverageType(str, Enum):
    """Kinds of coverage a report can measure."""

    DOC = "doc"
    TEST = "test"


def coverage_ratio(covered: int, total: int) -> float:
    """
    Compute covered / total

    Args:
        covered: Number of covered units
        total: Number of units

    Returns:
        Ratio in [0, 1], 0.0 when total is 0
    """
    if total == 0:
        return 0.0
    return covered / total


def _is_covered(column: Column, cov_type: CoverageType) -> bool:
    if cov_type is CoverageType.DOC:
        return column.doc
    return column.test


def _column_report(column: Column, cov_type: CoverageType) -> dict[str, Any]:
    covered = 1 if _is_covered(column, cov_type) else 0
    return {
        "name": column.name,
        "covered": covered,
        "total": 1,
        "coverage": coverage_ratio(covered, 1),
    }


def _table_report(table: Table, cov_type: CoverageType) -> dict[str, Any]:
    columns = [
        _column_report(table.columns[name], cov_type)
        for name in sorted(table.columns)
    ]
    covered = sum(column["covered"] for column in columns)
    total = sum(column["total"] for column in columns)
    return {
        "name": table.name,
        "covered": covered,
        "total": total,
        "coverage": coverage_ratio(covered, total),
        "columns": columns,
    }


def generate_report(catalog: Catalog, cov_type: CoverageType | str) -> dict[str, Any]:
    """
    Generate a coverage report from an annotated catalog

    Tables are ordered by name (then unique_id) and columns by name so
    that the same inputs always serialize identically.

    Args:
        catalog: Catalog annotated with annotate_catalog()
        cov_type: "doc" or "test"

    Returns:
        Dictionary containing:
        - cov_type: Coverage type
        - covered: Covered columns over all tables
        - total: Columns over all tables
        - coverage: covered / total (0.0 when total is 0)
        - tables: Per-table reports with their per-column reports

    Raises:
        ValueError: If cov_type is not a known coverage type
    """
    cov_type = CoverageType(cov_type)

    ordered = sorted(catalog.tables.values(), key=lambda table: (table.name, table.unique_id))
    tables = [_table_report(table, cov_type) for table in ordered]

    covered = sum(table["covered"] for table in tables)
    total = sum(table["total"] for table in tables)

    return {
        "cov_type": cov_type.value,
        "covered": covered,
        "total": total,
        "coverage": coverage_ratio(covered, total),
        "tables": tables,
    }


def summarize_report(report: dict[str, Any]) -> str:
    """
    Generate a one-line human-readable summary

    Args:
        report: Report dictionary

    Returns:
        Summary string
    """
    return (
        f"{report['cov_type']} coverage: {report['covered']}/{report['total']} columns "
        f"({report['coverage'] * 100:.1f}%) across {len(report['tables'])} tables"
    )
