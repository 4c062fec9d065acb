"""Notification policy entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from graphql_security_notices.feature_flags.flag_registry import FeatureFlagRegistry
from graphql_security_notices.interaction.prompter import Prompter


class NotificationPolicy(str, Enum):
    """Known notification policies."""

    FIELD_AUTH = "field-auth"
    LIST_QUERY = "list-query"
    SECURITY_ENHANCEMENT = "security-enhancement"


class NotificationOutcome(str, Enum):
    """Outcome of evaluating one notification policy."""

    NOT_SHOWN = "not_shown"
    SCHEMA_MODIFIED = "schema_modified"
    DECLINED = "declined"


@dataclass(frozen=True)
class NotificationContext:
    """Explicit inputs shared by every policy call."""

    project_path: Path
    feature_flags: FeatureFlagRegistry
    prompter: Prompter


@dataclass(frozen=True)
class NotificationResult:
    """Result of one policy evaluation."""

    policy: NotificationPolicy
    outcome: NotificationOutcome
    touched_path: Path | None = None

    @property
    def schema_modified(self) -> bool:
        return self.outcome is NotificationOutcome.SCHEMA_MODIFIED

    @property
    def declined(self) -> bool:
        return self.outcome is NotificationOutcome.DECLINED

    @staticmethod
    def not_shown(policy: NotificationPolicy) -> NotificationResult:
        return NotificationResult(policy=policy, outcome=NotificationOutcome.NOT_SHOWN)

    @staticmethod
    def schema_modified_at(
        policy: NotificationPolicy, touched_path: Path | None
    ) -> NotificationResult:
        return NotificationResult(
            policy=policy,
            outcome=NotificationOutcome.SCHEMA_MODIFIED,
            touched_path=touched_path,
        )

    @staticmethod
    def user_declined(policy: NotificationPolicy) -> NotificationResult:
        return NotificationResult(policy=policy, outcome=NotificationOutcome.DECLINED)
