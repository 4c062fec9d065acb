"""Usage data (telemetry) sinks."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum
from typing import Protocol

_LOGGER = logging.getLogger(__name__)


class UsageEventState(str, Enum):
    """Usage event states."""

    SUCCEEDED = "SUCCEEDED"


@dataclass(frozen=True)
class UsageEvent:
    """One emitted usage event."""

    state: UsageEventState
    emitted_at: datetime


class UsageData(Protocol):  # pylint: disable=too-few-public-methods
    """Protocol for usage data sinks."""

    def emit_success(self) -> None: ...


class NoUsageData:  # pylint: disable=too-few-public-methods
    """Sink for projects that opted out of usage data."""

    def emit_success(self) -> None:
        return None


class LoggingUsageData:
    """Sink that keeps emitted events and reports them through logging."""

    def __init__(self) -> None:
        self._events: list[UsageEvent] = []

    @property
    def events(self) -> tuple[UsageEvent, ...]:
        return tuple(self._events)

    def emit_success(self) -> None:
        event = UsageEvent(state=UsageEventState.SUCCEEDED, emitted_at=datetime.now(UTC))
        self._events.append(event)
        _LOGGER.info("usage event %s", event.state.value)
