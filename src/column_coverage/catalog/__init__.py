"""
Coverage catalog built from dbt catalog.json.

This submodule provides:
- Catalog construction cross-referenced with the manifest
- Documentation and test flag annotation
- Filtering by model path
"""

from .builder import TEST_NODE_PREFIX, build_catalog, build_table, catalog_nodes
from .filtering import filter_tables, matches_any_prefix, parse_path_filters
from .models import Catalog, Column, Table
from .reconcile import annotate_catalog

__all__ = [
    'Catalog',
    'Column',
    'Table',
    'TEST_NODE_PREFIX',
    'annotate_catalog',
    'build_catalog',
    'build_table',
    'catalog_nodes',
    'filter_tables',
    'matches_any_prefix',
    'parse_path_filters',
]
