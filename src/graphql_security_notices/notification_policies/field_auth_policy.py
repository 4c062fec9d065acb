"""Field-level auth security notice."""

from __future__ import annotations

import logging

from graphql_security_notices.directive_indexing import (
    collect_directives_by_type,
    has_field_auth_directives,
    parse_schema_document,
    should_display_field_auth_notification,
)
from graphql_security_notices.feature_flags import (
    FIELD_AUTH_NOTIFICATION_FLAG,
    GRAPHQL_TRANSFORMER_SECTION,
    TRANSFORMER_VERSION_FLAG,
    set_notification_flag,
)
from graphql_security_notices.project_state import (
    read_project_configuration,
    resolve_api_resource_dir,
)

from .policy_contracts import NotificationContext, NotificationPolicy, NotificationResult
from .security_prompt import confirm_and_touch_schema

_LOGGER = logging.getLogger(__name__)


def notify_field_auth_security_change(context: NotificationContext) -> NotificationResult:
    """Show the field-auth notice once for projects with subscriptions off on auth-protected types.

    The flag is cleared after every evaluation except a decline, so an
    accepted or irrelevant notice never shows again for the project.
    """
    policy = NotificationPolicy.FIELD_AUTH
    flags = context.feature_flags
    if not flags.get_boolean(f"{GRAPHQL_TRANSFORMER_SECTION}.{FIELD_AUTH_NOTIFICATION_FLAG}"):
        return NotificationResult.not_shown(policy)

    api_resource_dir = resolve_api_resource_dir(context.project_path)
    if api_resource_dir is None:
        set_notification_flag(flags, FIELD_AUTH_NOTIFICATION_FLAG, False)
        return NotificationResult.not_shown(policy)

    project = read_project_configuration(api_resource_dir)
    document = parse_schema_document(project.schema)
    directive_map = collect_directives_by_type(document)
    field_auth_types = has_field_auth_directives(document)
    transformer_version = flags.get_number(
        f"{GRAPHQL_TRANSFORMER_SECTION}.{TRANSFORMER_VERSION_FLAG}"
    )

    result = NotificationResult.not_shown(policy)
    if should_display_field_auth_notification(
        directive_map, field_auth_types, transformer_version
    ):
        _LOGGER.debug("field auth notice triggered for types %s", sorted(field_auth_types))
        result = confirm_and_touch_schema(context, policy, api_resource_dir)
        if result.declined:
            return result

    set_notification_flag(flags, FIELD_AUTH_NOTIFICATION_FLAG, False)
    return result
