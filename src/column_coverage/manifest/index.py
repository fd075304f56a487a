"""
In-memory index of a dbt manifest.

The manifest is split into four table partitions (sources, models, seeds,
snapshots) plus a test attribution index keyed by (table unique_id,
lowercased column name).
"""

import logging
from collections.abc import Iterable, Iterator
from typing import Any

from column_coverage.errors import DuplicateTableError, TableNotFoundError

from .attribution import attribute_test
from .models import ColumnTestAttribution, ManifestTable, ResourceType

logger = logging.getLogger(__name__)


class Manifest:
    """
    Partitioned view of manifest.json nodes

    Built once with Manifest.from_nodes() and read-only afterwards.
    """

    def __init__(
        self,
        partitions: dict[ResourceType, dict[str, ManifestTable]] | None = None,
        tests: dict[tuple[str, str], list[dict[str, Any]]] | None = None,
        unattributed_tests: int = 0,
    ):
        """
        Initialize manifest index

        Args:
            partitions: Table records by resource type and unique_id
            tests: Raw test nodes by (table unique_id, column name)
            unattributed_tests: Number of generic test nodes that could not be
                attributed to a column
        """
        self.partitions = {
            resource_type: dict((partitions or {}).get(resource_type, {}))
            for resource_type in ResourceType.table_types()
        }
        self.tests = tests or {}
        self.unattributed_tests = unattributed_tests

    @classmethod
    def from_nodes(cls, nodes: Iterable[dict[str, Any]], log: Any = None) -> "Manifest":
        """
        Index raw manifest nodes

        Args:
            nodes: Raw nodes from the "sources" and "nodes" collections
            log: Logger (or ContextLogger) receiving advisory messages

        Returns:
            Manifest instance

        Raises:
            MalformedArtifactError: If a table node has no unique_id
            DuplicateTableError: If a unique_id repeats inside a partition
        """
        log = log or logger
        partitions: dict[ResourceType, dict[str, ManifestTable]] = {
            resource_type: {} for resource_type in ResourceType.table_types()
        }
        tests: dict[tuple[str, str], list[dict[str, Any]]] = {}
        unattributed = 0

        for node in nodes:
            if not isinstance(node, dict):
                continue
            resource_type = ResourceType.from_node(node)
            if resource_type is None:
                continue

            if resource_type is ResourceType.TEST:
                # singular data tests carry no test_metadata and target no column
                if not isinstance(node.get("test_metadata"), dict):
                    continue
                attribution = attribute_test(node, log)
                if attribution is None:
                    unattributed += 1
                    continue
                tests.setdefault(attribution.key, []).append(attribution.node)
                continue

            table = ManifestTable.from_node(node, resource_type)
            partition = partitions[resource_type]
            if table.unique_id in partition:
                raise DuplicateTableError(f"unique_id {table.unique_id} is duplicated")
            partition[table.unique_id] = table

        manifest = cls(partitions=partitions, tests=tests, unattributed_tests=unattributed)
        log.info(
            f"Manifest indexed: {len(manifest.sources)} sources, {len(manifest.models)} models, "
            f"{len(manifest.seeds)} seeds, {len(manifest.snapshots)} snapshots, "
            f"{sum(len(found) for found in tests.values())} column tests"
        )
        if unattributed:
            log.warning(f"{unattributed} test node(s) could not be attributed to a column")
        return manifest

    @property
    def sources(self) -> dict[str, ManifestTable]:
        return self.partitions[ResourceType.SOURCE]

    @property
    def models(self) -> dict[str, ManifestTable]:
        return self.partitions[ResourceType.MODEL]

    @property
    def seeds(self) -> dict[str, ManifestTable]:
        return self.partitions[ResourceType.SEED]

    @property
    def snapshots(self) -> dict[str, ManifestTable]:
        return self.partitions[ResourceType.SNAPSHOT]

    def partition(self, resource_type: ResourceType | str) -> dict[str, ManifestTable]:
        """Return the tables of one resource type"""
        return self.partitions[ResourceType(resource_type)]

    def iter_tables(self) -> Iterator[ManifestTable]:
        """Iterate over the tables of every partition"""
        for resource_type in ResourceType.table_types():
            yield from self.partitions[resource_type].values()

    def get_table(self, unique_id: str) -> ManifestTable:
        """
        Look a table up across all partitions

        Args:
            unique_id: Table unique_id

        Returns:
            The matching ManifestTable

        Raises:
            TableNotFoundError: If no partition holds the unique_id
            DuplicateTableError: If more than one partition holds it
        """
        candidates = [
            partition[unique_id]
            for partition in self.partitions.values()
            if unique_id in partition
        ]
        if not candidates:
            raise TableNotFoundError(f"table {unique_id} not found")
        if len(candidates) > 1:
            kinds = ", ".join(candidate.resource_type.value for candidate in candidates)
            raise DuplicateTableError(f"unique_id {unique_id} is duplicated ({kinds})")
        return candidates[0]

    def get_tests(self, table_id: str, column_name: str) -> list[dict[str, Any]]:
        """
        Return the raw test nodes attributed to a column

        Args:
            table_id: Table unique_id
            column_name: Lowercased column name

        Returns:
            List of test nodes (empty when the column is untested)
        """
        return self.tests.get((table_id, column_name), [])

    def __len__(self) -> int:
        return sum(len(partition) for partition in self.partitions.values())


__all__ = ["Manifest", "ColumnTestAttribution"]
