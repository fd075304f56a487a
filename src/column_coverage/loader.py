"""
Loading of dbt artifacts (manifest.json and catalog.json).

Artifacts are read from <project_dir>/target unless a run artifacts
directory is given.
"""

import json
import logging
from itertools import chain
from pathlib import Path
from typing import Any

from .catalog import Catalog, annotate_catalog, build_catalog, catalog_nodes
from .errors import ArtifactNotFoundError, MalformedArtifactError
from .manifest import Manifest

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "manifest.json"
CATALOG_FILENAME = "catalog.json"

SUPPORTED_MANIFEST_SCHEMA_VERSIONS = (
    "https://schemas.getdbt.com/dbt/manifest/v4.json",
    "https://schemas.getdbt.com/dbt/manifest/v5.json",
    "https://schemas.getdbt.com/dbt/manifest/v6.json",
    "https://schemas.getdbt.com/dbt/manifest/v7.json",
    "https://schemas.getdbt.com/dbt/manifest/v8.json",
    "https://schemas.getdbt.com/dbt/manifest/v9.json",
    "https://schemas.getdbt.com/dbt/manifest/v10.json",
    "https://schemas.getdbt.com/dbt/manifest/v11.json",
    "https://schemas.getdbt.com/dbt/manifest/v12.json",
)


def resolve_artifact_path(
    project_dir: str | Path,
    run_artifacts_dir: str | Path | None,
    filename: str,
) -> Path:
    """
    Locate an artifact file

    Args:
        project_dir: dbt project directory
        run_artifacts_dir: Directory holding the artifacts (default: <project_dir>/target)
        filename: Artifact file name

    Returns:
        Path to the artifact
    """
    if run_artifacts_dir:
        return Path(run_artifacts_dir) / filename
    return Path(project_dir) / "target" / filename


def read_artifact(path: str | Path) -> dict[str, Any]:
    """
    Read and parse a JSON artifact

    Args:
        path: Artifact path

    Returns:
        Parsed JSON object

    Raises:
        ArtifactNotFoundError: If the file does not exist
        MalformedArtifactError: If the file is not a UTF-8 JSON object
    """
    path = Path(path)
    if not path.is_file():
        raise ArtifactNotFoundError(f"{path.name} not found in {path}")

    try:
        with open(path, encoding="utf-8") as f:
            document = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedArtifactError(f"{path} is not valid JSON: {e}") from e

    if not isinstance(document, dict):
        raise MalformedArtifactError(f"{path} does not contain a JSON object")
    return document


def manifest_schema_version(document: dict[str, Any]) -> str | None:
    """Return the schema version declared in manifest metadata"""
    metadata = document.get("metadata")
    if not isinstance(metadata, dict):
        return None
    return metadata.get("dbt_schema_version") or metadata.get("schema_version")


def check_manifest_version(document: dict[str, Any], log: Any = None) -> bool:
    """
    Check the manifest schema version against the supported versions

    An unsupported version is only reported, loading continues.

    Args:
        document: Parsed manifest.json
        log: Logger (or ContextLogger) receiving the warning

    Returns:
        True if the version is supported
    """
    log = log or logger
    version = manifest_schema_version(document)
    if version in SUPPORTED_MANIFEST_SCHEMA_VERSIONS:
        return True
    log.warning(
        f"Manifest version {version} is not supported. "
        f"Supported versions: {', '.join(SUPPORTED_MANIFEST_SCHEMA_VERSIONS)}"
    )
    return False


def manifest_from_document(document: dict[str, Any], log: Any = None) -> Manifest:
    """
    Build the manifest index from a parsed manifest.json

    Sources and nodes are chained rather than merged so a unique_id
    declared in both collections is reported as a duplicate.

    Args:
        document: Parsed manifest.json
        log: Logger (or ContextLogger) receiving advisory messages

    Returns:
        Manifest instance
    """
    check_manifest_version(document, log)
    groups = []
    for key in ("sources", "nodes"):
        group = document.get(key)
        if isinstance(group, dict):
            groups.append(group.values())
    return Manifest.from_nodes(chain.from_iterable(groups), log)


def load_manifest(
    project_dir: str | Path = ".",
    run_artifacts_dir: str | Path | None = None,
    log: Any = None,
) -> Manifest:
    """
    Load and index manifest.json

    Args:
        project_dir: dbt project directory
        run_artifacts_dir: Directory holding the artifacts
        log: Logger (or ContextLogger) receiving advisory messages

    Returns:
        Manifest instance
    """
    path = resolve_artifact_path(project_dir, run_artifacts_dir, MANIFEST_FILENAME)
    (log or logger).debug(f"Loading manifest from {path}")
    return manifest_from_document(read_artifact(path), log)


def load_catalog(
    project_dir: str | Path,
    run_artifacts_dir: str | Path | None,
    manifest: Manifest,
    log: Any = None,
) -> Catalog:
    """
    Load catalog.json and build the (unannotated) catalog

    Args:
        project_dir: dbt project directory
        run_artifacts_dir: Directory holding the artifacts
        manifest: Manifest index
        log: Logger (or ContextLogger) receiving advisory messages

    Returns:
        Catalog instance
    """
    path = resolve_artifact_path(project_dir, run_artifacts_dir, CATALOG_FILENAME)
    (log or logger).debug(f"Loading catalog from {path}")
    return build_catalog(catalog_nodes(read_artifact(path)), manifest, log)


def load_files(
    project_dir: str | Path = ".",
    run_artifacts_dir: str | Path | None = None,
    log: Any = None,
) -> Catalog:
    """
    Load both artifacts and return the annotated catalog

    Args:
        project_dir: dbt project directory
        run_artifacts_dir: Directory holding the artifacts
        log: Logger (or ContextLogger) receiving advisory messages

    Returns:
        Catalog with doc and test flags set
    """
    log = log or logger
    if run_artifacts_dir:
        log.info(f"Loading artifacts from {run_artifacts_dir}")
    else:
        log.info(f"Loading artifacts from project {project_dir}")

    manifest = load_manifest(project_dir, run_artifacts_dir, log)
    catalog = load_catalog(project_dir, run_artifacts_dir, manifest, log)
    return annotate_catalog(catalog, manifest)
