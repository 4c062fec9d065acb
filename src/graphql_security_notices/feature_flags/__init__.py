"""Feature flag exports."""

from .flag_models import (
    DEFAULT_REGISTRATIONS,
    FIELD_AUTH_NOTIFICATION_FLAG,
    GRAPHQL_TRANSFORMER_SECTION,
    SECURITY_ENHANCEMENT_NOTIFICATION_FLAG,
    TRANSFORMER_V2,
    TRANSFORMER_VERSION_FLAG,
    FeatureFlagKind,
    FeatureFlagRegistration,
)
from .flag_registry import FeatureFlagError, FeatureFlagRegistry
from .flag_store import set_notification_flag

__all__ = [
    "DEFAULT_REGISTRATIONS",
    "FIELD_AUTH_NOTIFICATION_FLAG",
    "GRAPHQL_TRANSFORMER_SECTION",
    "SECURITY_ENHANCEMENT_NOTIFICATION_FLAG",
    "TRANSFORMER_V2",
    "TRANSFORMER_VERSION_FLAG",
    "FeatureFlagError",
    "FeatureFlagKind",
    "FeatureFlagRegistration",
    "FeatureFlagRegistry",
    "set_notification_flag",
]
