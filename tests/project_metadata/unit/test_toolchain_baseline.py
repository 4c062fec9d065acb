"""Tests for repository toolchain baseline configuration."""

from __future__ import annotations

import tomllib
from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def _pyproject() -> dict:
    pyproject_path = _project_root() / "pyproject.toml"
    return tomllib.loads(pyproject_path.read_text(encoding="utf-8"))


def test_project_uses_python_311_baseline_in_pyproject() -> None:
    pyproject = _pyproject()

    assert pyproject["project"]["requires-python"] == ">=3.11"
    assert pyproject["tool"]["ruff"]["target-version"] == "py311"
    assert pyproject["tool"]["mypy"]["python_version"] == "3.11"


def test_project_uses_uv_style_metadata_without_poetry() -> None:
    pyproject = _pyproject()
    dev_dependencies = pyproject["dependency-groups"]["dev"]

    assert "black" not in dev_dependencies
    assert "black" not in pyproject["tool"]
    assert "poetry" not in pyproject["tool"]
    assert pyproject["build-system"]["build-backend"] != "poetry.core.masonry.api"


def test_runtime_dependencies_cover_cli_graphql_and_config_parsing() -> None:
    dependencies = " ".join(_pyproject()["project"]["dependencies"])

    for distribution in ("click", "graphql-core", "commentjson"):
        assert distribution in dependencies


def test_cli_documentation_does_not_mention_removed_commands() -> None:
    readme = (_project_root() / "README.md").read_text(encoding="utf-8")

    for command in ("predeploy", "field-auth", "list-query", "security-enhancement"):
        assert command in readme
    for removed in ("generate-template", "generate-config", "bootstrap"):
        assert removed not in readme
