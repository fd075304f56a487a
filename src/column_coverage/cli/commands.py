"""
CLI command implementations.

This module contains the implementation of the CLI commands:
- compute: Coverage computation from dbt artifacts
- report: Rendering of a previously computed report
"""

import argparse
import logging
import sys
from pathlib import Path

from column_coverage.errors import CoverageError
from column_coverage.report import (
    export_report_csv,
    export_report_json,
    format_report_console,
    format_report_markdown,
    load_report_json,
    summarize_report,
)
from column_coverage.runner import run_coverage
from column_coverage.utils.logging import ContextLogger
from column_coverage.utils.metrics import CoverageMetrics

from .settings import get_compute_settings

logger = logging.getLogger(__name__)


def render_report(report: dict, console_format: str) -> str:
    """
    Render a report for stdout

    Args:
        report: Report dictionary
        console_format: "string" or "markdown"

    Returns:
        Rendered report
    """
    if console_format == "markdown":
        return format_report_markdown(report)
    return format_report_console(report)


def cmd_compute(args: argparse.Namespace) -> None:
    """
    Compute coverage and write the JSON report

    Args:
        args: Parsed command-line arguments
    """
    try:
        settings = get_compute_settings(args)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(2)

    log = ContextLogger("column_coverage", cov_type=settings.cov_type)
    metrics = CoverageMetrics() if settings.metrics_file else None

    try:
        report = run_coverage(
            project_dir=settings.dbt_dir,
            run_artifacts_dir=settings.run_artifacts_dir,
            cov_type=settings.cov_type,
            path_filters=settings.path_filters,
            log=log,
        )
    except CoverageError as e:
        logger.error(f"Coverage computation failed: {e}")
        if metrics:
            metrics.record_run(settings.cov_type, success=False)
            metrics.write_textfile(settings.metrics_file)
        sys.exit(1)

    print(render_report(report, settings.console_format))

    output_path = Path(settings.output)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        export_report_json(report, str(output_path))
    except OSError as e:
        logger.error(f"Failed to write report to {output_path}: {e}")
        if metrics:
            metrics.record_run(settings.cov_type, success=False)
            metrics.write_textfile(settings.metrics_file)
        sys.exit(1)
    log.info(f"Report saved to {output_path}")

    if metrics:
        metrics.record_report(report)
        metrics.record_run(settings.cov_type, success=True)
        metrics.write_textfile(settings.metrics_file)

    log.info(summarize_report(report))

    if settings.cov_fail_under is not None and report["coverage"] < settings.cov_fail_under:
        logger.warning(
            f"Coverage {report['coverage']:.3f} is below the required {settings.cov_fail_under:.3f}"
        )
        sys.exit(1)


def cmd_report(args: argparse.Namespace) -> None:
    """
    Render a report from a previous coverage JSON file

    Args:
        args: Parsed command-line arguments
    """
    logger.info(f"Loading coverage report from {args.input}")

    try:
        report = load_report_json(args.input)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load report: {e}")
        sys.exit(1)

    if args.format in ("string", "markdown"):
        rendered = render_report(report, args.format)
        if args.output:
            Path(args.output).write_text(rendered + "\n", encoding="utf-8")
            logger.info(f"Report exported to {args.output}")
        else:
            print(rendered)
        return

    if not args.output:
        logger.error(f"Output file required for {args.format.upper()} format")
        sys.exit(1)

    if args.format == "csv":
        export_report_csv(report, args.output)
    else:
        export_report_json(report, args.output)
    logger.info(f"Report exported to {args.output}")
