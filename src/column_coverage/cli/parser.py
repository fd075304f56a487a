"""
Command-line argument parser configuration.

This module sets up the argument parser for the column-coverage CLI tool,
defining all commands and their options.
"""

import argparse

from column_coverage.report import CoverageType

CONSOLE_FORMATS = ['string', 'markdown']
REPORT_FORMATS = ['string', 'markdown', 'csv', 'json']


def create_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="column-coverage",
        description="Documentation and test coverage of dbt project columns",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Test coverage of the project in the current directory
  column-coverage compute --type test

  # Documentation coverage of the marts only, artifacts in a custom directory
  column-coverage compute --type doc --run-artifacts-dir ci/target --path-filter models/marts

  # Fail the build below 80% documentation coverage
  column-coverage compute --type doc --cov-fail-under 0.8

  # Render a previous report as markdown
  column-coverage report --input coverage.json --format markdown
        """
    )

    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default='WARNING',
        help='Logging level (default: WARNING)'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable detailed logs (same as --log-level DEBUG)'
    )
    parser.add_argument(
        '--log-json',
        action='store_true',
        help='Emit logs as JSON lines'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # ========== Compute command ==========
    compute_parser = subparsers.add_parser('compute', help='Compute coverage from dbt artifacts')
    compute_parser.add_argument(
        '--dbt-dir',
        help='dbt project directory (default: $DBT_PROJECT_DIR or .)'
    )
    compute_parser.add_argument(
        '--run-artifacts-dir',
        help='Directory holding manifest.json and catalog.json '
             '(default: $DBT_TARGET_DIR or <dbt-dir>/target)'
    )
    compute_parser.add_argument(
        '--type',
        dest='cov_type',
        choices=[cov_type.value for cov_type in CoverageType],
        default=CoverageType.TEST.value,
        help='Coverage type to compute (default: test)'
    )
    compute_parser.add_argument(
        '--path-filter',
        action='append',
        help='Comma-separated model path prefixes, may be repeated '
             '(default: $COVERAGE_PATH_FILTER)'
    )
    compute_parser.add_argument(
        '--output',
        help='Output JSON report path (default: $COVERAGE_OUTPUT or coverage.json)'
    )
    compute_parser.add_argument(
        '--format',
        choices=CONSOLE_FORMATS,
        default='string',
        help='Console table format (default: string)'
    )
    compute_parser.add_argument(
        '--cov-fail-under',
        type=float,
        help='Exit with code 1 if global coverage is below this ratio (0-1)'
    )
    compute_parser.add_argument(
        '--metrics-file',
        help='Write coverage metrics to this Prometheus textfile'
    )

    # ========== Report command ==========
    report_parser = subparsers.add_parser('report', help='Render a previously computed report')
    report_parser.add_argument(
        '--input',
        required=True,
        help='Input JSON report file'
    )
    report_parser.add_argument(
        '--format',
        choices=REPORT_FORMATS,
        default='string',
        help='Output format (default: string)'
    )
    report_parser.add_argument(
        '--output',
        help='Output file path (required for json and csv formats)'
    )

    return parser
