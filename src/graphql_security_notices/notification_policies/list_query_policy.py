"""List-query filter security notice."""

from __future__ import annotations

import logging

from graphql_security_notices.directive_indexing import (
    has_v2_auth_directives,
    parse_schema_document,
)
from graphql_security_notices.feature_flags import (
    GRAPHQL_TRANSFORMER_SECTION,
    TRANSFORMER_VERSION_FLAG,
)
from graphql_security_notices.project_state import (
    read_project_configuration,
    resolve_api_resource_dir,
)
from graphql_security_notices.resolver_artifacts import (
    find_unsafe_list_query_resolvers,
    load_resolvers,
)

from .policy_contracts import NotificationContext, NotificationPolicy, NotificationResult
from .security_prompt import confirm_and_touch_schema

_LOGGER = logging.getLogger(__name__)


def notify_list_query_security_change(context: NotificationContext) -> NotificationResult:
    """Show the list-query notice while generated list resolvers lack a filter guard.

    No persisted flag gates this notice: it repeats on every deployment
    until regenerated resolvers carry the guard.
    """
    policy = NotificationPolicy.LIST_QUERY
    api_resource_dir = resolve_api_resource_dir(context.project_path)
    if api_resource_dir is None:
        return NotificationResult.not_shown(policy)

    unsafe_resolvers = find_unsafe_list_query_resolvers(load_resolvers(api_resource_dir))
    if not unsafe_resolvers:
        return NotificationResult.not_shown(policy)
    _LOGGER.debug("%d list query resolvers without filter guard", len(unsafe_resolvers))

    project = read_project_configuration(api_resource_dir)
    document = parse_schema_document(project.schema)
    transformer_version = context.feature_flags.get_number(
        f"{GRAPHQL_TRANSFORMER_SECTION}.{TRANSFORMER_VERSION_FLAG}"
    )
    if not has_v2_auth_directives(document, transformer_version):
        return NotificationResult.not_shown(policy)

    return confirm_and_touch_schema(context, policy, api_resource_dir)
