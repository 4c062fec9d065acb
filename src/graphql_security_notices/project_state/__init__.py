"""Project state exports."""

from .api_resolution import list_appsync_api_names, resolve_api_resource_dir
from .project_models import ProjectConfiguration
from .schema_reader import read_project_configuration
from .state_store import (
    ProjectStateError,
    find_project_root,
    read_cli_json,
    read_meta,
    resource_directory_path,
    update_cli_json_value,
)

__all__ = [
    "ProjectConfiguration",
    "ProjectStateError",
    "find_project_root",
    "list_appsync_api_names",
    "read_cli_json",
    "read_meta",
    "read_project_configuration",
    "resolve_api_resource_dir",
    "resource_directory_path",
    "update_cli_json_value",
]
