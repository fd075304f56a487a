"""
Run settings and logging setup for the CLI.

Command-line options take precedence over environment variables, which
take precedence over defaults.
"""

import argparse
import logging
import os
from dataclasses import dataclass, field

from column_coverage.catalog import parse_path_filters
from column_coverage.utils.logging import setup_logging as configure_logging

logger = logging.getLogger(__name__)


@dataclass
class ComputeSettings:
    """Resolved options of the compute command."""

    dbt_dir: str = "."
    run_artifacts_dir: str | None = None
    cov_type: str = "test"
    path_filters: list[str] = field(default_factory=list)
    output: str = "coverage.json"
    console_format: str = "string"
    cov_fail_under: float | None = None
    metrics_file: str | None = None


def setup_logging(args: argparse.Namespace) -> None:
    """
    Setup logging from global CLI options

    Args:
        args: Parsed command-line arguments
    """
    level = "DEBUG" if getattr(args, "verbose", False) else args.log_level
    configure_logging(level=level, json_format=getattr(args, "log_json", False))


def get_compute_settings(args: argparse.Namespace) -> ComputeSettings:
    """
    Resolve compute settings from arguments and environment

    Environment variables:
        DBT_PROJECT_DIR: dbt project directory
        DBT_TARGET_DIR: Directory holding the artifacts
        COVERAGE_PATH_FILTER: Comma-separated path prefixes
        COVERAGE_OUTPUT: Output JSON report path

    Args:
        args: Parsed command-line arguments

    Returns:
        ComputeSettings instance

    Raises:
        ValueError: If cov_fail_under is outside [0, 1]
    """
    path_filters = parse_path_filters(args.path_filter or os.getenv("COVERAGE_PATH_FILTER"))

    if args.cov_fail_under is not None and not 0.0 <= args.cov_fail_under <= 1.0:
        raise ValueError(f"--cov-fail-under must be between 0 and 1, got {args.cov_fail_under}")

    settings = ComputeSettings(
        dbt_dir=args.dbt_dir or os.getenv("DBT_PROJECT_DIR", "."),
        run_artifacts_dir=args.run_artifacts_dir or os.getenv("DBT_TARGET_DIR") or None,
        cov_type=args.cov_type,
        path_filters=path_filters,
        output=args.output or os.getenv("COVERAGE_OUTPUT", "coverage.json"),
        console_format=args.format,
        cov_fail_under=args.cov_fail_under,
        metrics_file=args.metrics_file,
    )
    logger.debug(f"Compute settings: {settings}")
    return settings
