"""
Column coverage for dbt projects

This package computes documentation and test coverage for the tables and
columns of a dbt project from its build artifacts (manifest.json and
catalog.json).

Components:
- manifest: Metadata index built from manifest.json
- catalog: Physical schema catalog, reconciliation and path filtering
- report: Coverage report generation and formatting
- cli: Command-line interface

Usage:
    from column_coverage.loader import load_files
    from column_coverage.report import generate_report

    catalog = load_files("path/to/dbt/project")
    report = generate_report(catalog, "doc")
"""

__version__ = "1.0.0"
__all__ = ["manifest", "catalog", "report", "loader"]
