"""CLI orchestration integration tests."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner
from graphql_security_notices.cli import cli
from graphql_security_notices.interaction import LoggingUsageData

FIELD_AUTH_SCHEMA = """type Post @model(subscriptions: null) @auth(rules: [{allow: owner}]) {
  id: ID!
  secret: String! @auth(rules: [{allow: owner}])
}
"""


def _write_project(project_root: Path, *, features: dict, schema: str = FIELD_AUTH_SCHEMA) -> Path:
    amplify_dir = project_root / "amplify"
    (amplify_dir / ".config").mkdir(parents=True)
    (amplify_dir / ".config" / "project-config.json").write_text("{}", encoding="utf-8")
    (amplify_dir / "cli.json").write_text(
        json.dumps({"features": {"graphqltransformer": features}}), encoding="utf-8"
    )
    api_dir = amplify_dir / "backend" / "api" / "blogApi"
    api_dir.mkdir(parents=True)
    (amplify_dir / "backend" / "amplify-meta.json").write_text(
        json.dumps({"api": {"blogApi": {"service": "AppSync"}}}), encoding="utf-8"
    )
    (api_dir / "schema.graphql").write_text(schema, encoding="utf-8")
    return api_dir


def test_field_auth_command_reports_modified_schema(tmp_path: Path) -> None:
    api_dir = _write_project(
        tmp_path, features={"showfieldauthnotification": True, "transformerversion": 2}
    )
    runner = CliRunner()

    result = runner.invoke(cli, ["field-auth", "--project-path", str(tmp_path)], input="y\n")

    assert result.exit_code == 0
    assert f"field-auth: schema modified: {api_dir / 'schema.graphql'}" in result.output


def test_predeploy_reports_each_policy_in_deployment_order(tmp_path: Path) -> None:
    _write_project(tmp_path, features={"transformerversion": 2})
    runner = CliRunner()

    result = runner.invoke(cli, ["predeploy", "--project-path", str(tmp_path)])

    assert result.exit_code == 0
    lines = [line for line in result.output.splitlines() if line]
    assert lines == [
        "security-enhancement: no security notice required",
        "field-auth: no security notice required",
        "list-query: no security notice required",
    ]


def test_predeploy_with_yes_accepts_without_prompting(tmp_path: Path) -> None:
    api_dir = _write_project(
        tmp_path, features={"showfieldauthnotification": True, "transformerversion": 2}
    )
    runner = CliRunner()

    result = runner.invoke(cli, ["predeploy", "--yes", "--project-path", str(tmp_path)])

    assert result.exit_code == 0
    assert "Continue?" not in result.output
    assert "field-auth: schema modified" in result.output
    assert (api_dir / "schema.graphql").read_text(encoding="utf-8") == FIELD_AUTH_SCHEMA + " "


def test_declined_notice_stops_deployment_with_success_exit(tmp_path: Path) -> None:
    api_dir = _write_project(
        tmp_path, features={"showfieldauthnotification": True, "transformerversion": 2}
    )
    usage_data = LoggingUsageData()
    runner = CliRunner()

    result = runner.invoke(
        cli,
        ["predeploy", "--project-path", str(tmp_path)],
        input="n\n",
        obj=usage_data,
    )

    assert result.exit_code == 0
    assert "Deployment cancelled." in result.output
    assert "list-query:" not in result.output
    assert len(usage_data.events) == 1
    assert (api_dir / "schema.graphql").read_text(encoding="utf-8") == FIELD_AUTH_SCHEMA


def test_project_path_defaults_to_enclosing_project(tmp_path: Path, monkeypatch) -> None:
    _write_project(tmp_path, features={"showfieldauthnotification": True, "transformerversion": 2})
    nested = tmp_path / "src"
    nested.mkdir()
    monkeypatch.chdir(nested)
    runner = CliRunner()

    result = runner.invoke(cli, ["field-auth", "--yes"])

    assert result.exit_code == 0
    assert "field-auth: schema modified" in result.output
