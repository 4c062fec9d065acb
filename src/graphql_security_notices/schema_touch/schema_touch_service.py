"""Semantically inert schema mutation used to invalidate downstream build caches."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from graphql_security_notices.project_state.schema_reader import SCHEMA_DIRNAME, SCHEMA_FILENAME

TOUCH_CONTENT = " "

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class SchemaTouchResult:
    """Outcome of one schema touch."""

    touched_path: Path | None

    @property
    def touched(self) -> bool:
        return self.touched_path is not None


def touch_graphql_schema(api_resource_dir: Path | str) -> SchemaTouchResult:
    """Append one space to the API schema so the next build sees it as changed.

    `schema.graphql` is preferred. Otherwise exactly one file in the `schema/`
    tree is touched: the first plain, non-hidden file in sorted depth-first
    order. Without either, nothing is written.
    """
    directory = Path(api_resource_dir)
    schema_file = directory / SCHEMA_FILENAME
    if schema_file.is_file():
        return SchemaTouchResult(touched_path=_append_whitespace(schema_file))

    schema_directory = directory / SCHEMA_DIRNAME
    if schema_directory.is_dir():
        return SchemaTouchResult(touched_path=_touch_first_schema_file(schema_directory))

    _LOGGER.debug("no schema found under %s; nothing touched", directory)
    return SchemaTouchResult(touched_path=None)


def _touch_first_schema_file(schema_directory: Path) -> Path | None:
    pending: list[Path] = [schema_directory]
    while pending:
        current = pending.pop()
        if current.is_file():
            return _append_whitespace(current)
        children = [
            child
            for child in sorted(current.iterdir(), key=lambda item: item.name)
            if not child.name.startswith(".") and not child.is_symlink()
        ]
        # reversed so the lowest name is popped first
        pending.extend(
            child for child in reversed(children) if child.is_dir() or child.is_file()
        )
    return None


def _append_whitespace(path: Path) -> Path:
    with path.open("a", encoding="utf-8") as handle:
        handle.write(TOUCH_CONTENT)
    _LOGGER.debug("touched schema file %s", path)
    return path
