"""GraphQL API resource lookup over project metadata."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .state_store import read_meta, resource_directory_path

API_CATEGORY = "api"
APPSYNC_SERVICE = "AppSync"

_LOGGER = logging.getLogger(__name__)


def list_appsync_api_names(meta: Mapping[str, Any]) -> tuple[str, ...]:
    """Return names of AppSync-backed API resources in metadata order."""
    api_section = meta.get(API_CATEGORY) or {}
    if not isinstance(api_section, Mapping):
        return ()
    return tuple(
        name
        for name, resource in api_section.items()
        if isinstance(resource, Mapping) and resource.get("service") == APPSYNC_SERVICE
    )


def resolve_api_resource_dir(project_path: Path | str) -> Path | None:
    """Return the directory of the project's GraphQL API, or None when there is none on disk."""
    api_names = list_appsync_api_names(read_meta(project_path))
    if not api_names:
        _LOGGER.debug("no AppSync API found in project metadata")
        return None
    api_resource_dir = resource_directory_path(project_path, API_CATEGORY, api_names[0])
    if not api_resource_dir.is_dir():
        _LOGGER.debug("API resource directory missing: %s", api_resource_dir)
        return None
    return api_resource_dir
