"""Feature flag entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

GRAPHQL_TRANSFORMER_SECTION = "graphqltransformer"
TRANSFORMER_VERSION_FLAG = "transformerversion"
FIELD_AUTH_NOTIFICATION_FLAG = "showfieldauthnotification"
SECURITY_ENHANCEMENT_NOTIFICATION_FLAG = "securityEnhancementNotification"
TRANSFORMER_V2 = 2


class FeatureFlagKind(str, Enum):
    """Supported feature flag value kinds."""

    BOOLEAN = "boolean"
    NUMBER = "number"


@dataclass(frozen=True)
class FeatureFlagRegistration:
    """One known feature flag and the value used when the project does not set it."""

    section: str
    name: str
    kind: FeatureFlagKind
    default_value: bool | int | float

    @property
    def key(self) -> tuple[str, str]:
        return (self.section.lower(), self.name.lower())


DEFAULT_REGISTRATIONS: tuple[FeatureFlagRegistration, ...] = (
    FeatureFlagRegistration(
        section=GRAPHQL_TRANSFORMER_SECTION,
        name=TRANSFORMER_VERSION_FLAG,
        kind=FeatureFlagKind.NUMBER,
        default_value=1,
    ),
    FeatureFlagRegistration(
        section=GRAPHQL_TRANSFORMER_SECTION,
        name=FIELD_AUTH_NOTIFICATION_FLAG,
        kind=FeatureFlagKind.BOOLEAN,
        default_value=False,
    ),
    FeatureFlagRegistration(
        section=GRAPHQL_TRANSFORMER_SECTION,
        name=SECURITY_ENHANCEMENT_NOTIFICATION_FLAG,
        kind=FeatureFlagKind.BOOLEAN,
        default_value=False,
    ),
)
