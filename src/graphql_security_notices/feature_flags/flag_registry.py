"""Feature flag registry backed by the project CLI config."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, MutableMapping
from pathlib import Path
from typing import Any

from graphql_security_notices.project_state.state_store import (
    read_cli_json,
    update_cli_json_value,
)

from .flag_models import DEFAULT_REGISTRATIONS, FeatureFlagKind, FeatureFlagRegistration

FEATURES_KEY = "features"

_LOGGER = logging.getLogger(__name__)


class FeatureFlagError(Exception):
    """Raised for unknown feature flags or values of the wrong type."""


class FeatureFlagRegistry:
    """Feature flag values for one project.

    Values come from `features.<section>.<name>` in the project's `cli.json`.
    Section and flag names are matched case-insensitively. An instance is
    owned by its caller and passed explicitly; there is no shared global copy.
    """

    def __init__(
        self,
        project_path: Path | str,
        registrations: Iterable[FeatureFlagRegistration] = DEFAULT_REGISTRATIONS,
    ) -> None:
        self._project_path = Path(project_path)
        self._registrations: dict[tuple[str, str], FeatureFlagRegistration] = {
            registration.key: registration for registration in registrations
        }
        self._values: dict[tuple[str, str], Any] = {}
        self.reload_values()

    @property
    def project_path(self) -> Path:
        return self._project_path

    def is_registered(self, section: str, name: str) -> bool:
        return (section.lower(), name.lower()) in self._registrations

    def ensure_feature_flag(self, section: str, name: str) -> None:
        """Register the flag if unknown and write its default into an existing config."""
        key = (section.lower(), name.lower())
        registration = self._registrations.get(key)
        if registration is None:
            registration = FeatureFlagRegistration(
                section=section,
                name=name,
                kind=FeatureFlagKind.BOOLEAN,
                default_value=False,
            )
            self._registrations[key] = registration
            _LOGGER.debug("registered feature flag %s.%s", section, name)

        config = read_cli_json(self._project_path)
        if config is None:
            return
        section_values = feature_section(config, section)
        if find_flag_key(section_values, name) is not None:
            return
        update_cli_json_value(
            self._project_path, (FEATURES_KEY, section, name), registration.default_value
        )
        self.reload_values()

    def get_boolean(self, path: str) -> bool:
        registration, value = self._lookup(path)
        if registration.kind is not FeatureFlagKind.BOOLEAN or not isinstance(value, bool):
            raise FeatureFlagError(f"Feature flag '{path}' must be a boolean.")
        return value

    def get_number(self, path: str) -> int | float:
        registration, value = self._lookup(path)
        if (
            registration.kind is not FeatureFlagKind.NUMBER
            or isinstance(value, bool)
            or not isinstance(value, (int, float))
        ):
            raise FeatureFlagError(f"Feature flag '{path}' must be a number.")
        return value

    def reload_values(self) -> None:
        """Re-read flag values from disk."""
        config = read_cli_json(self._project_path) or {}
        features = config.get(FEATURES_KEY) or {}
        values: dict[tuple[str, str], Any] = {}
        if isinstance(features, Mapping):
            for section, section_values in features.items():
                if not isinstance(section_values, Mapping):
                    continue
                for name, value in section_values.items():
                    values[(str(section).lower(), str(name).lower())] = value
        self._values = values

    def _lookup(self, path: str) -> tuple[FeatureFlagRegistration, Any]:
        section, separator, name = path.partition(".")
        if not separator or not name:
            raise FeatureFlagError(f"Feature flag path must be '<section>.<name>': {path}")
        key = (section.lower(), name.lower())
        registration = self._registrations.get(key)
        if registration is None:
            raise FeatureFlagError(f"Feature flag '{path}' is not registered.")
        return registration, self._values.get(key, registration.default_value)


def feature_section(config: MutableMapping[str, Any], section: str) -> MutableMapping[str, Any]:
    """Return the mutable `features.<section>` mapping, creating missing levels."""
    features = config.get(FEATURES_KEY)
    if not isinstance(features, MutableMapping):
        features = {}
        config[FEATURES_KEY] = features
    existing_section = find_flag_key(features, section)
    if existing_section is not None and isinstance(features[existing_section], MutableMapping):
        return features[existing_section]
    section_values: dict[str, Any] = {}
    features[existing_section or section] = section_values
    return section_values


def find_flag_key(values: Mapping[str, Any], name: str) -> str | None:
    """Return the stored spelling of `name` in `values`, ignoring case."""
    lowered = name.lower()
    for key in values:
        if str(key).lower() == lowered:
            return key
    return None
