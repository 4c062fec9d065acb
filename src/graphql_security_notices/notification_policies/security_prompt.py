"""Prompt-then-touch step shared by all notification policies."""

from __future__ import annotations

import logging
from pathlib import Path

from graphql_security_notices.schema_touch import touch_graphql_schema

from .policy_contracts import NotificationContext, NotificationPolicy, NotificationResult

SECURITY_CHANGE_MESSAGE = (
    "This deployment introduces additional security enhancements for your GraphQL API. "
    "The changes are applied automatically with this deployment. "
    "This change won't impact your client code. Continue?"
)
PRIMARY_KEY_SECURITY_MESSAGE = (
    "This deployment introduces additional security enhancements for your GraphQL API. "
    "@auth authorization rules applied on primary keys and indexes are scoped down further. "
    "The changes are applied automatically with this deployment. "
    "This change won't impact your client code. Continue?"
)

_LOGGER = logging.getLogger(__name__)


def confirm_and_touch_schema(
    context: NotificationContext,
    policy: NotificationPolicy,
    api_resource_dir: Path,
    message: str = SECURITY_CHANGE_MESSAGE,
) -> NotificationResult:
    """Ask for consent; on yes mark the schema as changed, on no report the decline."""
    if not context.prompter.yes_or_no(message):
        _LOGGER.info("%s security notice declined", policy.value)
        return NotificationResult.user_declined(policy)
    touch = touch_graphql_schema(api_resource_dir)
    return NotificationResult.schema_modified_at(policy, touch.touched_path)
