"""
Catalog records: the tables and columns that exist in the warehouse.
"""

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class Column:
    """A physical column with its documentation and test flags."""

    name: str
    doc: bool = False
    test: bool = False


@dataclass
class Table:
    """A physical table, named and located through its manifest counterpart."""

    unique_id: str
    name: str
    original_file_path: str = ""
    columns: dict[str, Column] = field(default_factory=dict)

    def with_columns(self, columns: dict[str, Column]) -> "Table":
        """Return a copy of the table with another column mapping"""
        return replace(self, columns=columns)


@dataclass
class Catalog:
    """Tables of a project by unique_id."""

    tables: dict[str, Table] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.tables)

    def __contains__(self, unique_id: object) -> bool:
        return unique_id in self.tables

    def column_count(self) -> int:
        """Number of columns over all tables"""
        return sum(len(table.columns) for table in self.tables.values())
