"""Project state entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class ProjectConfiguration:
    """GraphQL API resource contents needed for notification decisions."""

    resource_dir: Path
    schema: str
    transform_config: Mapping[str, Any] = field(default_factory=dict)
