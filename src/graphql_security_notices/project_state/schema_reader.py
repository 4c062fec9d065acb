"""GraphQL API resource reader."""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

from .project_models import ProjectConfiguration
from .state_store import ProjectStateError, read_utf8_text

SCHEMA_FILENAME = "schema.graphql"
SCHEMA_DIRNAME = "schema"
TRANSFORM_CONFIG_FILENAME = "transform.conf.json"


def read_project_configuration(resource_dir: Path | str) -> ProjectConfiguration:
    """Read schema SDL and transform settings for one API resource directory.

    A single `schema.graphql` wins over a `schema/` directory. Directory
    schemas are concatenated from every non-hidden file in sorted depth-first
    order. A resource without any schema yields empty SDL.
    """
    directory = Path(resource_dir)
    schema_file = directory / SCHEMA_FILENAME
    schema_directory = directory / SCHEMA_DIRNAME
    if schema_file.is_file():
        schema = read_utf8_text(schema_file)
    elif schema_directory.is_dir():
        schema = "\n".join(
            read_utf8_text(path) for path in iter_schema_files(schema_directory)
        )
    else:
        schema = ""
    return ProjectConfiguration(
        resource_dir=directory,
        schema=schema,
        transform_config=_read_transform_config(directory / TRANSFORM_CONFIG_FILENAME),
    )


def iter_schema_files(schema_directory: Path) -> Iterator[Path]:
    """Yield non-hidden plain files below `schema_directory` in sorted depth-first order."""
    for entry in sorted(schema_directory.iterdir(), key=lambda item: item.name):
        if entry.name.startswith(".") or entry.is_symlink():
            continue
        if entry.is_dir():
            yield from iter_schema_files(entry)
        elif entry.is_file():
            yield entry


def _read_transform_config(path: Path) -> Mapping[str, Any]:
    if not path.is_file():
        return {}
    try:
        parsed = json.loads(read_utf8_text(path))
    except json.JSONDecodeError as exc:
        raise ProjectStateError(f"Failed to parse {path}: {exc}") from exc
    if not isinstance(parsed, Mapping):
        raise ProjectStateError(f"{path} root must be an object.")
    return parsed
