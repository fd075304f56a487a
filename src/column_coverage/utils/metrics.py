"""
Coverage metrics in Prometheus format.

Coverage figures are exposed as gauges and written to a textfile that a
node_exporter textfile collector (or a CI artifact store) can pick up.
"""

import logging
from typing import Any, Optional

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Gauge,
    write_to_textfile,
)

logger = logging.getLogger(__name__)


class CoverageMetrics:
    """
    Metrics for coverage runs

    Each instance owns its own registry unless one is provided, so several
    instances can coexist in one process.
    """

    def __init__(self, registry: Optional[CollectorRegistry] = None):
        """
        Initialize coverage metrics

        Args:
            registry: Prometheus registry (default: a new private registry)
        """
        self.registry = registry or CollectorRegistry()

        self.coverage_ratio = Gauge(
            "column_coverage_ratio",
            "Share of covered columns over the project",
            ["cov_type"],
            registry=self.registry,
        )

        self.covered_columns = Gauge(
            "column_coverage_covered_columns",
            "Number of covered columns",
            ["cov_type"],
            registry=self.registry,
        )

        self.total_columns = Gauge(
            "column_coverage_total_columns",
            "Number of columns analysed",
            ["cov_type"],
            registry=self.registry,
        )

        self.table_coverage_ratio = Gauge(
            "column_coverage_table_ratio",
            "Share of covered columns per table",
            ["cov_type", "table_name"],
            registry=self.registry,
        )

        self.runs_total = Counter(
            "column_coverage_runs_total",
            "Total number of coverage runs",
            ["cov_type", "status"],
            registry=self.registry,
        )

    def record_report(self, report: dict[str, Any]) -> None:
        """
        Record the figures of a coverage report

        Args:
            report: Report dictionary (see generate_report)
        """
        cov_type = report["cov_type"]

        self.coverage_ratio.labels(cov_type=cov_type).set(report["coverage"])
        self.covered_columns.labels(cov_type=cov_type).set(report["covered"])
        self.total_columns.labels(cov_type=cov_type).set(report["total"])

        for table in report.get("tables", []):
            self.table_coverage_ratio.labels(
                cov_type=cov_type,
                table_name=table["name"],
            ).set(table["coverage"])

        logger.debug(
            f"Recorded coverage metrics: cov_type={cov_type}, "
            f"tables={len(report.get('tables', []))}"
        )

    def record_run(self, cov_type: str, success: bool) -> None:
        """
        Record a coverage run

        Args:
            cov_type: Coverage type of the run
            success: Whether the run produced a report
        """
        status = "success" if success else "failed"
        self.runs_total.labels(cov_type=cov_type, status=status).inc()

    def write_textfile(self, path: str) -> None:
        """
        Write every metric of the registry to a Prometheus textfile

        Args:
            path: Output file path
        """
        write_to_textfile(path, self.registry)
        logger.info(f"Metrics written to {path}")

    def get_sample_value(self, name: str, labels: dict[str, str] | None = None) -> float | None:
        """Return the current value of a sample (None if unset)"""
        return self.registry.get_sample_value(name, labels or {})
