"""
End-to-end coverage computation for one coverage type.
"""

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from .catalog import Catalog, filter_tables
from .errors import NoTablesAfterFilterError
from .loader import load_files
from .report import CoverageType, generate_report

logger = logging.getLogger(__name__)


def apply_path_filter(catalog: Catalog, path_filters: Sequence[str] | None, log: Any = None) -> Catalog:
    """
    Apply the optional path filter to a catalog

    Args:
        catalog: Annotated catalog
        path_filters: Path prefixes; None or empty means no filtering
        log: Logger (or ContextLogger)

    Returns:
        The filtered catalog, or the input catalog when no filter is given

    Raises:
        NoTablesAfterFilterError: If the filter leaves no table
    """
    if not path_filters:
        return catalog
    filtered = filter_tables(catalog, path_filters, log)
    if len(filtered) == 0:
        raise NoTablesAfterFilterError(
            f"No table left after filtering on {', '.join(path_filters)}, check the path filter"
        )
    return filtered


def compute_coverage(
    catalog: Catalog,
    cov_type: CoverageType | str,
    path_filters: Sequence[str] | None = None,
    log: Any = None,
) -> dict[str, Any]:
    """
    Filter an annotated catalog and generate its coverage report

    Args:
        catalog: Annotated catalog
        cov_type: "doc" or "test"
        path_filters: Optional path prefixes
        log: Logger (or ContextLogger)

    Returns:
        Report dictionary (see generate_report)
    """
    return generate_report(apply_path_filter(catalog, path_filters, log), cov_type)


def run_coverage(
    project_dir: str | Path = ".",
    run_artifacts_dir: str | Path | None = None,
    cov_type: CoverageType | str = CoverageType.TEST,
    path_filters: Sequence[str] | None = None,
    log: Any = None,
) -> dict[str, Any]:
    """
    Load the artifacts of a project and compute one coverage report

    Args:
        project_dir: dbt project directory
        run_artifacts_dir: Directory holding the artifacts
        cov_type: "doc" or "test"
        path_filters: Optional path prefixes
        log: Logger (or ContextLogger)

    Returns:
        Report dictionary (see generate_report)
    """
    cov_type = CoverageType(cov_type)
    catalog = load_files(project_dir, run_artifacts_dir, log)
    return compute_coverage(catalog, cov_type, path_filters, log)
