"""Interactive yes/no prompting."""

from __future__ import annotations

from typing import Protocol

import click


class Prompter(Protocol):  # pylint: disable=too-few-public-methods
    """Protocol for yes/no prompts used by notification policies."""

    def yes_or_no(self, message: str) -> bool: ...


class ClickPrompter:  # pylint: disable=too-few-public-methods
    """Terminal prompter; `assume_yes` answers every question with yes (headless `--yes`)."""

    def __init__(self, *, assume_yes: bool = False) -> None:
        self._assume_yes = assume_yes

    def yes_or_no(self, message: str) -> bool:
        if self._assume_yes:
            return True
        click.echo("")
        return click.confirm(message, default=True)
