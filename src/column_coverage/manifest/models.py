"""
Typed records for the nodes of a dbt manifest.

Raw manifest nodes are loosely typed dictionaries; they are converted once
into these records so the rest of the package never probes for fields.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from column_coverage.errors import MalformedArtifactError
from column_coverage.identifiers import canonicalize, normalize_column_name, normalize_path


class ResourceType(str, Enum):
    """
    Resource kinds of manifest nodes relevant to coverage.

    Inherits from str so values compare equal to the raw "resource_type"
    strings found in manifest.json.
    """

    SOURCE = "source"
    MODEL = "model"
    SEED = "seed"
    SNAPSHOT = "snapshot"
    TEST = "test"

    @classmethod
    def table_types(cls) -> tuple["ResourceType", ...]:
        """Resource types that describe a table-like entity."""
        return (cls.SOURCE, cls.MODEL, cls.SEED, cls.SNAPSHOT)

    @classmethod
    def from_node(cls, node: dict[str, Any]) -> "ResourceType | None":
        """Return the resource type of a raw node, or None for other kinds."""
        try:
            return cls(node.get("resource_type"))
        except ValueError:
            return None


@dataclass(frozen=True)
class ManifestColumn:
    """A documented column declared in the manifest."""

    name: str
    description: Any = None

    @property
    def has_doc(self) -> bool:
        """True when the description is a non-empty string."""
        return isinstance(self.description, str) and self.description != ""


@dataclass
class ManifestTable:
    """A source, model, seed or snapshot node with normalized names."""

    unique_id: str
    resource_type: ResourceType
    name: str
    original_file_path: str | None = None
    columns: dict[str, ManifestColumn] = field(default_factory=dict)

    @classmethod
    def from_node(cls, node: dict[str, Any], resource_type: ResourceType) -> "ManifestTable":
        """
        Build a table record from a raw manifest node

        Column keys are re-keyed by lowercased column name and the display
        name is replaced by the canonical "schema.name" form.

        Args:
            node: Raw manifest node
            resource_type: Partition the node belongs to

        Returns:
            ManifestTable instance

        Raises:
            MalformedArtifactError: If the node has no unique_id
        """
        unique_id = node.get("unique_id")
        if not isinstance(unique_id, str) or not unique_id:
            raise MalformedArtifactError(
                f"Manifest {resource_type.value} node without unique_id: {node.get('name')!r}"
            )

        columns: dict[str, ManifestColumn] = {}
        raw_columns = node.get("columns")
        if isinstance(raw_columns, dict):
            for key, raw_column in raw_columns.items():
                if not isinstance(raw_column, dict):
                    continue
                raw_name = raw_column.get("name")
                name = normalize_column_name(raw_name if isinstance(raw_name, str) and raw_name else key)
                columns[name] = ManifestColumn(
                    name=name,
                    description=raw_column.get("description"),
                )

        original_file_path = node.get("original_file_path")
        if isinstance(original_file_path, str):
            original_file_path = normalize_path(original_file_path)
        else:
            original_file_path = None

        return cls(
            unique_id=unique_id,
            resource_type=resource_type,
            name=canonicalize(node.get("schema"), node.get("name")),
            original_file_path=original_file_path,
            columns=columns,
        )


@dataclass(frozen=True)
class ColumnTestAttribution:
    """A test declaration resolved to the (table, column) it covers."""

    unique_id: str | None
    test_name: str | None
    table_id: str
    column_name: str
    node: dict[str, Any] = field(repr=False, compare=False, hash=False)

    @property
    def key(self) -> tuple[str, str]:
        return (self.table_id, self.column_name)
