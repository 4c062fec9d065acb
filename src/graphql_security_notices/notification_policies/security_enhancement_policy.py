"""Primary-key auth security notice."""

from __future__ import annotations

import logging

from graphql_security_notices.directive_indexing import (
    AUTH_DIRECTIVE,
    PRIMARY_KEY_DIRECTIVE,
    collect_directive_names_by_type,
    parse_schema_document,
)
from graphql_security_notices.feature_flags import (
    GRAPHQL_TRANSFORMER_SECTION,
    SECURITY_ENHANCEMENT_NOTIFICATION_FLAG,
    set_notification_flag,
)
from graphql_security_notices.project_state import (
    list_appsync_api_names,
    read_meta,
    read_project_configuration,
    resource_directory_path,
)
from graphql_security_notices.project_state.api_resolution import API_CATEGORY

from .policy_contracts import NotificationContext, NotificationPolicy, NotificationResult
from .security_prompt import PRIMARY_KEY_SECURITY_MESSAGE, confirm_and_touch_schema

AUTH_CATEGORY = "auth"

_LOGGER = logging.getLogger(__name__)


def notify_security_enhancement(context: NotificationContext) -> NotificationResult:
    """Show the primary-key notice once when auth rules sit on types with `@primaryKey`.

    Requires exactly one GraphQL API and an auth resource in the project.
    Every path except a decline clears the flag.
    """
    policy = NotificationPolicy.SECURITY_ENHANCEMENT
    flags = context.feature_flags
    if not flags.get_boolean(
        f"{GRAPHQL_TRANSFORMER_SECTION}.{SECURITY_ENHANCEMENT_NOTIFICATION_FLAG}"
    ):
        return NotificationResult.not_shown(policy)

    meta = read_meta(context.project_path)
    api_names = list_appsync_api_names(meta)
    if len(api_names) != 1:
        _LOGGER.debug("expected exactly one AppSync API, found %d", len(api_names))
        return _clear_flag(context, NotificationResult.not_shown(policy))

    api_resource_dir = resource_directory_path(context.project_path, API_CATEGORY, api_names[0])
    if not api_resource_dir.is_dir():
        return _clear_flag(context, NotificationResult.not_shown(policy))

    project = read_project_configuration(api_resource_dir)
    directive_names = collect_directive_names_by_type(parse_schema_document(project.schema))
    auth_with_primary_key = any(
        AUTH_DIRECTIVE in names and PRIMARY_KEY_DIRECTIVE in names
        for names in directive_names.values()
    )

    if meta.get(AUTH_CATEGORY) and auth_with_primary_key:
        result = confirm_and_touch_schema(
            context, policy, api_resource_dir, PRIMARY_KEY_SECURITY_MESSAGE
        )
        if result.declined:
            return result
        return _clear_flag(context, result)

    return _clear_flag(context, NotificationResult.not_shown(policy))


def _clear_flag(context: NotificationContext, result: NotificationResult) -> NotificationResult:
    set_notification_flag(context.feature_flags, SECURITY_ENHANCEMENT_NOTIFICATION_FLAG, False)
    return result
