"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

import click
from graphql import GraphQLError

from graphql_security_notices.feature_flags import FeatureFlagError, FeatureFlagRegistry
from graphql_security_notices.interaction import ClickPrompter, LoggingUsageData, UsageData
from graphql_security_notices.notification_policies import (
    NotificationContext,
    NotificationPolicy,
    NotificationResult,
    notify_field_auth_security_change,
    notify_list_query_security_change,
    notify_security_enhancement,
)
from graphql_security_notices.project_state import ProjectStateError, find_project_root

PolicyRunner = Callable[[NotificationContext], NotificationResult]

POLICY_RUNNERS: dict[NotificationPolicy, PolicyRunner] = {
    NotificationPolicy.SECURITY_ENHANCEMENT: notify_security_enhancement,
    NotificationPolicy.FIELD_AUTH: notify_field_auth_security_change,
    NotificationPolicy.LIST_QUERY: notify_list_query_security_change,
}
PREDEPLOY_ORDER = (
    NotificationPolicy.SECURITY_ENHANCEMENT,
    NotificationPolicy.FIELD_AUTH,
    NotificationPolicy.LIST_QUERY,
)


class CliError(Exception):
    """Custom CLI error."""


def _policy_options(command: Callable) -> Callable:
    command = click.option(
        "--yes",
        "assume_yes",
        is_flag=True,
        default=False,
        help="Accept security notices without prompting.",
    )(command)
    return click.option(
        "--project-path",
        "project_path",
        required=False,
        type=click.Path(path_type=str, file_okay=False),
        help="Project root; defaults to the closest initialized project above the cwd",
    )(command)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="graphql-security-notices")
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Pre-deployment GraphQL security notices."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    if ctx.obj is None:
        ctx.obj = LoggingUsageData()


@cli.command(name="field-auth")
@_policy_options
@click.pass_obj
def field_auth(usage_data: UsageData, project_path: str | None, assume_yes: bool) -> None:
    """Show the field-level auth notice when it applies."""
    _run_policies((NotificationPolicy.FIELD_AUTH,), project_path, assume_yes, usage_data)


@cli.command(name="list-query")
@_policy_options
@click.pass_obj
def list_query(usage_data: UsageData, project_path: str | None, assume_yes: bool) -> None:
    """Show the list-query filter notice when generated resolvers need it."""
    _run_policies((NotificationPolicy.LIST_QUERY,), project_path, assume_yes, usage_data)


@cli.command(name="security-enhancement")
@_policy_options
@click.pass_obj
def security_enhancement(
    usage_data: UsageData, project_path: str | None, assume_yes: bool
) -> None:
    """Show the primary-key auth notice when it applies."""
    _run_policies(
        (NotificationPolicy.SECURITY_ENHANCEMENT,), project_path, assume_yes, usage_data
    )


@cli.command(name="predeploy")
@_policy_options
@click.pass_obj
def predeploy(usage_data: UsageData, project_path: str | None, assume_yes: bool) -> None:
    """Run every security notice in deployment order."""
    _run_policies(PREDEPLOY_ORDER, project_path, assume_yes, usage_data)


def _run_policies(
    policies: Sequence[NotificationPolicy],
    project_path: str | None,
    assume_yes: bool,
    usage_data: UsageData,
) -> None:
    for policy in policies:
        try:
            result = POLICY_RUNNERS[policy](_build_context(project_path, assume_yes))
        except (ProjectStateError, FeatureFlagError, GraphQLError, OSError) as exc:
            raise CliError(str(exc)) from exc
        if result.declined:
            click.echo("Deployment cancelled.", err=True)
            usage_data.emit_success()
            click.get_current_context().exit(0)
        click.echo(_describe(result))


def _build_context(project_path: str | None, assume_yes: bool) -> NotificationContext:
    if project_path:
        root = Path(project_path).resolve()
    else:
        root = find_project_root() or Path.cwd()
    return NotificationContext(
        project_path=root,
        feature_flags=FeatureFlagRegistry(root),
        prompter=ClickPrompter(assume_yes=assume_yes),
    )


def _describe(result: NotificationResult) -> str:
    if result.schema_modified:
        target = f": {result.touched_path}" if result.touched_path else ""
        return f"{result.policy.value}: schema modified{target}"
    return f"{result.policy.value}: no security notice required"


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
