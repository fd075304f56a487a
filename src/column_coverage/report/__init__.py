"""
Coverage report generation and formatting.

This submodule folds an annotated catalog into coverage reports and
renders them for the console, markdown, JSON and CSV.
"""

from .formatters import (
    export_report_csv,
    export_report_json,
    format_report_console,
    format_report_markdown,
    load_report_json,
)
from .generator import CoverageType, coverage_ratio, generate_report, summarize_report

__all__ = [
    'CoverageType',
    'coverage_ratio',
    'generate_report',
    'summarize_report',
    'export_report_json',
    'export_report_csv',
    'load_report_json',
    'format_report_console',
    'format_report_markdown',
]
