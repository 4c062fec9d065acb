"""Primary-key auth notice policy tests."""

from __future__ import annotations

import json
from pathlib import Path

from graphql_security_notices.feature_flags.flag_registry import FeatureFlagRegistry
from graphql_security_notices.notification_policies.policy_contracts import (
    NotificationContext,
    NotificationOutcome,
)
from graphql_security_notices.notification_policies.security_enhancement_policy import (
    notify_security_enhancement,
)

PRIMARY_KEY_SCHEMA = """type Todo @model @auth(rules: [{allow: owner}]) {
  id: ID! @primaryKey
  name: String!
}
"""


class _ScriptedPrompter:
    def __init__(self, answer: bool) -> None:
        self.answer = answer
        self.messages: list[str] = []

    def yes_or_no(self, message: str) -> bool:
        self.messages.append(message)
        return self.answer


def _write_project(
    project_root: Path,
    *,
    flag: bool = True,
    api_names: tuple[str, ...] = ("todoApi",),
    with_auth: bool = True,
    create_api_dirs: bool = True,
    schema: str = PRIMARY_KEY_SCHEMA,
) -> Path:
    amplify_dir = project_root / "amplify"
    (amplify_dir / "backend").mkdir(parents=True)
    (amplify_dir / "cli.json").write_text(
        json.dumps({"features": {"graphqltransformer": {"securityEnhancementNotification": flag}}}),
        encoding="utf-8",
    )
    meta: dict = {"api": {name: {"service": "AppSync"} for name in api_names}}
    if with_auth:
        meta["auth"] = {"todoAuth": {"service": "Cognito"}}
    (amplify_dir / "backend" / "amplify-meta.json").write_text(json.dumps(meta), encoding="utf-8")
    if create_api_dirs:
        for name in api_names:
            api_dir = amplify_dir / "backend" / "api" / name
            api_dir.mkdir(parents=True)
            (api_dir / "schema.graphql").write_text(schema, encoding="utf-8")
    return amplify_dir / "backend" / "api" / api_names[0]


def _context(project_root: Path, prompter: _ScriptedPrompter) -> NotificationContext:
    return NotificationContext(
        project_path=project_root,
        feature_flags=FeatureFlagRegistry(project_root),
        prompter=prompter,
    )


def _persisted_flag(project_root: Path) -> bool:
    config = json.loads((project_root / "amplify" / "cli.json").read_text(encoding="utf-8"))
    return config["features"]["graphqltransformer"]["securityEnhancementNotification"]


def test_disabled_flag_is_a_no_op(tmp_path: Path) -> None:
    _write_project(tmp_path, flag=False)
    prompter = _ScriptedPrompter(answer=True)

    result = notify_security_enhancement(_context(tmp_path, prompter))

    assert result.outcome is NotificationOutcome.NOT_SHOWN
    assert prompter.messages == []
    assert _persisted_flag(tmp_path) is False


def test_empty_auth_category_counts_as_no_auth_resource(tmp_path: Path) -> None:
    _write_project(tmp_path, with_auth=False)
    meta_file = tmp_path / "amplify" / "backend" / "amplify-meta.json"
    meta = json.loads(meta_file.read_text(encoding="utf-8"))
    meta["auth"] = {}
    meta_file.write_text(json.dumps(meta), encoding="utf-8")
    prompter = _ScriptedPrompter(answer=True)

    result = notify_security_enhancement(_context(tmp_path, prompter))

    assert result.outcome is NotificationOutcome.NOT_SHOWN
    assert prompter.messages == []
    assert _persisted_flag(tmp_path) is False


def test_two_graphql_apis_clear_flag_without_prompt(tmp_path: Path) -> None:
    _write_project(tmp_path, api_names=("todoApi", "adminApi"))
    prompter = _ScriptedPrompter(answer=True)

    result = notify_security_enhancement(_context(tmp_path, prompter))

    assert result.outcome is NotificationOutcome.NOT_SHOWN
    assert prompter.messages == []
    assert _persisted_flag(tmp_path) is False


def test_missing_api_directory_clears_flag(tmp_path: Path) -> None:
    _write_project(tmp_path, create_api_dirs=False)

    result = notify_security_enhancement(_context(tmp_path, _ScriptedPrompter(True)))

    assert result.outcome is NotificationOutcome.NOT_SHOWN
    assert _persisted_flag(tmp_path) is False


def test_auth_on_primary_key_type_prompts_touches_schema_and_clears_flag(tmp_path: Path) -> None:
    api_dir = _write_project(tmp_path)
    prompter = _ScriptedPrompter(answer=True)

    result = notify_security_enhancement(_context(tmp_path, prompter))

    assert result.schema_modified is True
    assert "primary keys" in prompter.messages[0]
    assert (api_dir / "schema.graphql").read_text(encoding="utf-8") == PRIMARY_KEY_SCHEMA + " "
    assert _persisted_flag(tmp_path) is False


def test_project_without_auth_resource_clears_flag_without_prompt(tmp_path: Path) -> None:
    _write_project(tmp_path, with_auth=False)
    prompter = _ScriptedPrompter(answer=True)

    result = notify_security_enhancement(_context(tmp_path, prompter))

    assert result.outcome is NotificationOutcome.NOT_SHOWN
    assert prompter.messages == []
    assert _persisted_flag(tmp_path) is False


def test_schema_without_primary_key_clears_flag_without_prompt(tmp_path: Path) -> None:
    _write_project(
        tmp_path,
        schema="type Todo @model @auth(rules: [{allow: owner}]) { id: ID! }",
    )
    prompter = _ScriptedPrompter(answer=True)

    result = notify_security_enhancement(_context(tmp_path, prompter))

    assert result.outcome is NotificationOutcome.NOT_SHOWN
    assert prompter.messages == []
    assert _persisted_flag(tmp_path) is False


def test_declined_notice_keeps_flag_set(tmp_path: Path) -> None:
    api_dir = _write_project(tmp_path)

    result = notify_security_enhancement(_context(tmp_path, _ScriptedPrompter(False)))

    assert result.outcome is NotificationOutcome.DECLINED
    assert _persisted_flag(tmp_path) is True
    assert (api_dir / "schema.graphql").read_text(encoding="utf-8") == PRIMARY_KEY_SCHEMA
