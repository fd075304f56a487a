"""
Exceptions raised while loading and reconciling dbt artifacts.

Every fatal condition derives from CoverageError so the CLI can report it
with a single handler. Advisory conditions are logged, not raised.
"""


class CoverageError(Exception):
    """Base class for coverage computation failures."""

    pass


class ArtifactNotFoundError(CoverageError, FileNotFoundError):
    """Raised when manifest.json or catalog.json cannot be found."""

    pass


class MalformedArtifactError(CoverageError, ValueError):
    """Raised when an artifact is not valid JSON or a node lacks required fields."""

    pass


class TableNotFoundError(CoverageError, KeyError):
    """Raised when a unique_id is not present in any manifest partition."""

    def __str__(self) -> str:
        # KeyError quotes its argument, keep the message readable
        return str(self.args[0]) if self.args else ""


class MissingFromManifestError(TableNotFoundError):
    """Raised when a catalog node has no manifest counterpart."""

    pass


class DuplicateTableError(CoverageError, ValueError):
    """Raised when a unique_id appears more than once across manifest partitions."""

    pass


class NoTablesAfterFilterError(CoverageError):
    """Raised when a path filter excludes every table of the catalog."""

    pass
