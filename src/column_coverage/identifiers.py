"""
Identifier normalization shared by the manifest and catalog ingestion paths.

Table names, column names and file paths must be normalized the same way on
both sides, otherwise lookups silently miss and coverage drops to zero.
"""


def normalize_column_name(name: str | None) -> str:
    """
    Normalize a column name for use as a lookup key

    Args:
        name: Raw column name as found in an artifact

    Returns:
        Lowercased column name ("" for None)
    """
    return (name or "").lower()


def canonicalize(schema: str | None, name: str | None) -> str:
    """
    Build the canonical "schema.name" identifier of a table

    Args:
        schema: Database schema of the table
        name: Table name

    Returns:
        Lowercased "schema.name" string
    """
    return f"{schema or ''}.{name or ''}".lower()


def normalize_path(path: str | None) -> str:
    """
    Rewrite path separators to "/" whatever the host convention

    Args:
        path: File path, possibly using backslashes

    Returns:
        Slash-separated path ("" for None)
    """
    return (path or "").replace("\\", "/")
