"""Interaction exports."""

from .prompter import ClickPrompter, Prompter
from .usage_data import LoggingUsageData, NoUsageData, UsageData, UsageEvent, UsageEventState

__all__ = [
    "ClickPrompter",
    "LoggingUsageData",
    "NoUsageData",
    "Prompter",
    "UsageData",
    "UsageEvent",
    "UsageEventState",
]
