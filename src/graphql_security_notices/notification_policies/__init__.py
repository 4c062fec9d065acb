"""Notification policy exports."""

from .field_auth_policy import notify_field_auth_security_change
from .list_query_policy import notify_list_query_security_change
from .policy_contracts import (
    NotificationContext,
    NotificationOutcome,
    NotificationPolicy,
    NotificationResult,
)
from .security_enhancement_policy import notify_security_enhancement
from .security_prompt import confirm_and_touch_schema

__all__ = [
    "NotificationContext",
    "NotificationOutcome",
    "NotificationPolicy",
    "NotificationResult",
    "confirm_and_touch_schema",
    "notify_field_auth_security_change",
    "notify_list_query_security_change",
    "notify_security_enhancement",
]
