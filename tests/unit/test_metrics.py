"""
Unit tests for column_coverage.utils.metrics
"""

import pytest
from prometheus_client import CollectorRegistry

from column_coverage.utils.metrics import CoverageMetrics


@pytest.fixture
def report():
    return {
        "cov_type": "doc",
        "covered": 3,
        "total": 4,
        "coverage": 0.75,
        "tables": [
            {"name": "analytics.users", "covered": 2, "total": 2, "coverage": 1.0, "columns": []},
            {"name": "analytics.orders", "covered": 1, "total": 2, "coverage": 0.5, "columns": []},
        ],
    }


class TestCoverageMetrics:
    """Test CoverageMetrics class"""

    def test_private_registry_by_default(self):
        """Test two instances do not clash on metric names"""
        first = CoverageMetrics()
        second = CoverageMetrics()

        assert first.registry is not second.registry

    def test_custom_registry(self):
        registry = CollectorRegistry()

        assert CoverageMetrics(registry=registry).registry is registry

    def test_record_report(self, report):
        # Arrange
        metrics = CoverageMetrics()

        # Act
        metrics.record_report(report)

        # Assert
        assert metrics.get_sample_value("column_coverage_ratio", {"cov_type": "doc"}) == 0.75
        assert metrics.get_sample_value("column_coverage_covered_columns", {"cov_type": "doc"}) == 3
        assert metrics.get_sample_value("column_coverage_total_columns", {"cov_type": "doc"}) == 4
        assert metrics.get_sample_value(
            "column_coverage_table_ratio", {"cov_type": "doc", "table_name": "analytics.orders"}
        ) == 0.5

    def test_record_run(self):
        metrics = CoverageMetrics()

        metrics.record_run("test", success=True)
        metrics.record_run("test", success=False)
        metrics.record_run("test", success=False)

        assert metrics.get_sample_value(
            "column_coverage_runs_total", {"cov_type": "test", "status": "failed"}
        ) == 2

    def test_unset_sample(self):
        assert CoverageMetrics().get_sample_value("column_coverage_ratio", {"cov_type": "doc"}) is None

    def test_write_textfile(self, report, tmp_path):
        metrics = CoverageMetrics()
        metrics.record_report(report)
        path = tmp_path / "coverage.prom"

        metrics.write_textfile(str(path))

        content = path.read_text()
        assert "# TYPE column_coverage_ratio gauge" in content
        assert 'column_coverage_table_ratio{cov_type="doc",table_name="analytics.users"} 1.0' in content
