"""
Metadata index built from dbt manifest.json.

This submodule partitions manifest nodes by resource type and attributes
test declarations to the columns they check.
"""

from .attribution import (
    RELATIONSHIPS_TEST,
    attribute_test,
    resolve_test_column_name,
    resolve_test_table_id,
)
from .index import Manifest
from .models import ColumnTestAttribution, ManifestColumn, ManifestTable, ResourceType

__all__ = [
    'Manifest',
    'ManifestColumn',
    'ManifestTable',
    'ResourceType',
    'ColumnTestAttribution',
    'RELATIONSHIPS_TEST',
    'attribute_test',
    'resolve_test_column_name',
    'resolve_test_table_id',
]
