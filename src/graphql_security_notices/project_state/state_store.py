"""Project state file access (cli.json, amplify-meta.json, resource directories)."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import commentjson

from .cli_json_editor import JsonEditError, set_json_value

AMPLIFY_DIRNAME = "amplify"
CLI_JSON_FILENAME = "cli.json"
META_FILENAME = "amplify-meta.json"
PROJECT_CONFIG_RELATIVE_PATH = Path(AMPLIFY_DIRNAME) / ".config" / "project-config.json"


class ProjectStateError(Exception):
    """Raised when a project state file exists but cannot be parsed."""


def find_project_root(start: Path | str | None = None) -> Path | None:
    """Return the closest directory at or above `start` that holds an initialized project."""
    current = Path(start) if start is not None else Path.cwd()
    current = current.resolve()
    for candidate in (current, *current.parents):
        if (candidate / PROJECT_CONFIG_RELATIVE_PATH).is_file():
            return candidate
    return None


def cli_json_path(project_path: Path | str) -> Path:
    return Path(project_path) / AMPLIFY_DIRNAME / CLI_JSON_FILENAME


def meta_path(project_path: Path | str) -> Path:
    return Path(project_path) / AMPLIFY_DIRNAME / "backend" / META_FILENAME


def resource_directory_path(project_path: Path | str, category: str, resource_name: str) -> Path:
    """Return the on-disk directory of one backend resource."""
    return Path(project_path) / AMPLIFY_DIRNAME / "backend" / category / resource_name


def read_utf8_text(path: Path) -> str:
    """Read a project file as UTF-8, reporting undecodable content as ProjectStateError."""
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ProjectStateError(f"Failed to decode {path} as UTF-8: {exc}") from exc


def read_cli_json(project_path: Path | str) -> dict[str, Any] | None:
    """Read the project CLI config; comments are allowed and a missing file yields None."""
    path = cli_json_path(project_path)
    if not path.is_file():
        return None
    text = read_utf8_text(path)
    if not text.strip():
        return {}
    try:
        parsed = commentjson.loads(text)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        # commentjson surfaces lark parse errors as well as ValueError.
        raise ProjectStateError(f"Failed to parse {path}: {exc}") from exc
    if not isinstance(parsed, Mapping):
        raise ProjectStateError(f"{path} root must be an object.")
    return dict(parsed)


def update_cli_json_value(
    project_path: Path | str, keys: Sequence[str], value: Any
) -> Path | None:
    """Set one value in the CLI config without disturbing its comments or layout.

    A missing file is left alone and yields None.
    """
    path = cli_json_path(project_path)
    if not path.is_file():
        return None
    text = read_utf8_text(path)
    if not text.strip():
        text = "{}\n"
    try:
        updated = set_json_value(text, keys, value)
    except JsonEditError as exc:
        raise ProjectStateError(f"Failed to update {path}: {exc}") from exc
    path.write_text(updated, encoding="utf-8")
    return path


def read_meta(project_path: Path | str) -> dict[str, Any]:
    """Read backend resource metadata; a missing file yields an empty mapping."""
    path = meta_path(project_path)
    if not path.is_file():
        return {}
    try:
        parsed = json.loads(read_utf8_text(path))
    except json.JSONDecodeError as exc:
        raise ProjectStateError(f"Failed to parse {path}: {exc}") from exc
    if not isinstance(parsed, Mapping):
        raise ProjectStateError(f"{path} root must be an object.")
    return dict(parsed)
