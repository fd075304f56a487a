"""
Report formatting and export utilities.

This module provides functions to export coverage reports in various
formats: JSON, CSV, and console or markdown tables.
"""

import csv
import json
from typing import Any

HEADERS = ("Model", "Columns Ratio", "Coverage")


def _ratio(covered: int, total: int) -> str:
    return f"({covered}/{total})"


def _percent(covered: int, total: int) -> str:
    if total == 0:
        return "0.0%"
    return f"{covered / total * 100:.1f}%"


def _table_rows(report: dict[str, Any]) -> list[tuple[str, str, str]]:
    return [
        (table["name"], _ratio(table["covered"], table["total"]), _percent(table["covered"], table["total"]))
        for table in report.get("tables", [])
    ]


def _footer(report: dict[str, Any]) -> tuple[str, str, str]:
    return ("TOTAL", _ratio(report["covered"], report["total"]), _percent(report["covered"], report["total"]))


def format_report_console(report: dict[str, Any]) -> str:
    """
    Format report for console output

    Args:
        report: Report dictionary

    Returns:
        Formatted string for console display
    """
    rows = _table_rows(report)
    footer = _footer(report)
    widths = [
        max(len(row[i]) for row in [HEADERS, footer, *rows])
        for i in range(len(HEADERS))
    ]

    def render(cells) -> str:
        return " │ ".join([
            cells[0].ljust(widths[0]),
            cells[1].center(widths[1]),
            cells[2].rjust(widths[2]),
        ]).rstrip()

    separator = "─┼─".join("─" * width for width in widths)

    lines = []
    lines.append(
        f"Analysis complete: {len(report.get('tables', []))} tables, "
        f"{report['total']} columns analysed."
    )
    lines.append("")
    lines.append(f"Coverage Report ({report['cov_type'].upper()})")
    lines.append("")
    lines.append(render(HEADERS))
    lines.append(separator)
    for row in rows:
        lines.append(render(row))
    lines.append(separator)
    lines.append(render(footer))

    return "\n".join(lines)


def format_report_markdown(report: dict[str, Any]) -> str:
    """
    Format report as a GitHub markdown table

    Args:
        report: Report dictionary

    Returns:
        Markdown string
    """
    lines = []
    lines.append(f"## Coverage Report ({report['cov_type'].upper()})")
    lines.append("")
    lines.append("| " + " | ".join(HEADERS) + " |")
    lines.append("|:---|:---:|---:|")
    for row in _table_rows(report):
        lines.append("| " + " | ".join(row) + " |")
    name, ratio, percent = _footer(report)
    lines.append(f"| **{name}** | **{ratio}** | **{percent}** |")
    return "\n".join(lines)


def export_report_json(report: dict[str, Any], output_path: str) -> None:
    """
    Export report to JSON file

    Args:
        report: Report dictionary
        output_path: Path to output file
    """
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(report, f, indent=2)


def load_report_json(input_path: str) -> dict[str, Any]:
    """
    Load a report previously written by export_report_json

    Args:
        input_path: Path to the JSON report

    Returns:
        Report dictionary
    """
    with open(input_path, encoding='utf-8') as f:
        return json.load(f)


def export_report_csv(report: dict[str, Any], output_path: str) -> None:
    """
    Export report to CSV file, one row per table

    Args:
        report: Report dictionary
        output_path: Path to output file
    """
    with open(output_path, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)

        writer.writerow([
            "Table",
            "Coverage Type",
            "Covered",
            "Total",
            "Coverage"
        ])

        for table in report.get("tables", []):
            writer.writerow([
                table.get("name", ""),
                report.get("cov_type", ""),
                table.get("covered", 0),
                table.get("total", 0),
                table.get("coverage", 0.0)
            ])
