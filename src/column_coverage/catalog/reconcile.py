"""
Annotate catalog columns with documentation and test flags from the manifest.
"""

from column_coverage.manifest import Manifest

from .models import Catalog, Column


def annotate_catalog(catalog: Catalog, manifest: Manifest) -> Catalog:
    """
    Set the doc and test flags of every catalog column

    The column set of each table is kept as is: columns only declared in
    the manifest are ignored.

    Args:
        catalog: Catalog built from catalog.json
        manifest: Manifest index

    Returns:
        New Catalog with annotated columns
    """
    tables = {}
    for unique_id, table in catalog.tables.items():
        manifest_columns = manifest.get_table(unique_id).columns
        columns = {}
        for name, column in table.columns.items():
            manifest_column = manifest_columns.get(name)
            columns[name] = Column(
                name=column.name,
                doc=manifest_column is not None and manifest_column.has_doc,
                test=len(manifest.get_tests(unique_id, name)) > 0,
            )
        tables[unique_id] = table.with_columns(columns)
    return Catalog(tables=tables)
