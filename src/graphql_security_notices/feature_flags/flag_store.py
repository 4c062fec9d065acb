"""Persisted one-shot notification flags."""

from __future__ import annotations

import logging

from graphql_security_notices.project_state.state_store import update_cli_json_value

from .flag_models import GRAPHQL_TRANSFORMER_SECTION
from .flag_registry import FEATURES_KEY, FeatureFlagRegistry

_LOGGER = logging.getLogger(__name__)


def set_notification_flag(registry: FeatureFlagRegistry, flag_name: str, value: bool) -> None:
    """Persist `features.graphqltransformer.<flag_name>` and reload registry values.

    Only the flag value changes on disk, so comments in the CLI config are
    kept. A project without a CLI config is left untouched.
    """
    registry.ensure_feature_flag(GRAPHQL_TRANSFORMER_SECTION, flag_name)

    written = update_cli_json_value(
        registry.project_path, (FEATURES_KEY, GRAPHQL_TRANSFORMER_SECTION, flag_name), value
    )
    if written is None:
        _LOGGER.debug("no CLI config at %s; %s not persisted", registry.project_path, flag_name)
        return
    registry.reload_values()
    _LOGGER.debug("set %s.%s=%s", GRAPHQL_TRANSFORMER_SECTION, flag_name, value)
