"""In-place value edits for JSON documents that carry comments.

Only the bytes of the edited value (or the inserted member) change, so
`//`, `#` and `/* */` comments and the surrounding layout survive a write.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

_LITERAL_TERMINATORS = frozenset(",:]}/#") | frozenset(" \t\r\n")


class JsonEditError(ValueError):
    """Raised when a document cannot be scanned for an in-place edit."""


@dataclass(frozen=True)
class _ValueSpan:
    start: int
    end: int
    # None for anything that is not an object.
    members: tuple[tuple[str, _ValueSpan], ...] | None = None


class _Scanner:
    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def scan_document(self) -> _ValueSpan:
        value = self._scan_value()
        self._skip_ignored()
        if self._pos != len(self._text):
            raise JsonEditError(f"Unexpected content at offset {self._pos}.")
        return value

    def _peek(self) -> str:
        return self._text[self._pos : self._pos + 1]

    def _skip_ignored(self) -> None:
        text = self._text
        while self._pos < len(text):
            char = text[self._pos]
            if char.isspace():
                self._pos += 1
            elif char == "#" or text.startswith("//", self._pos):
                newline = text.find("\n", self._pos)
                self._pos = len(text) if newline == -1 else newline + 1
            elif text.startswith("/*", self._pos):
                closing = text.find("*/", self._pos + 2)
                if closing == -1:
                    raise JsonEditError("Unterminated block comment.")
                self._pos = closing + 2
            else:
                return

    def _scan_value(self) -> _ValueSpan:
        self._skip_ignored()
        char = self._peek()
        if char == "{":
            return self._scan_object()
        if char == "[":
            return self._scan_array()
        start = self._pos
        if char == '"':
            self._scan_string()
            return _ValueSpan(start, self._pos)
        while self._pos < len(self._text) and self._text[self._pos] not in _LITERAL_TERMINATORS:
            self._pos += 1
        if self._pos == start:
            raise JsonEditError(f"Expected a value at offset {start}.")
        return _ValueSpan(start, self._pos)

    def _scan_string(self) -> str:
        start = self._pos
        self._pos += 1
        while self._pos < len(self._text):
            char = self._text[self._pos]
            if char == "\\":
                self._pos += 2
                continue
            self._pos += 1
            if char == '"':
                try:
                    return json.loads(self._text[start : self._pos])
                except json.JSONDecodeError as exc:
                    raise JsonEditError(f"Invalid string at offset {start}: {exc}") from exc
        raise JsonEditError(f"Unterminated string at offset {start}.")

    def _scan_object(self) -> _ValueSpan:
        start = self._pos
        self._pos += 1
        members: list[tuple[str, _ValueSpan]] = []
        while True:
            self._skip_ignored()
            char = self._peek()
            if char == "}":
                self._pos += 1
                return _ValueSpan(start, self._pos, tuple(members))
            if char != '"':
                raise JsonEditError(f"Expected an object key at offset {self._pos}.")
            key = self._scan_string()
            self._skip_ignored()
            if self._peek() != ":":
                raise JsonEditError(f"Expected ':' at offset {self._pos}.")
            self._pos += 1
            members.append((key, self._scan_value()))
            self._skip_ignored()
            if self._peek() == ",":
                self._pos += 1

    def _scan_array(self) -> _ValueSpan:
        start = self._pos
        self._pos += 1
        while True:
            self._skip_ignored()
            if self._peek() == "]":
                self._pos += 1
                return _ValueSpan(start, self._pos)
            self._scan_value()
            self._skip_ignored()
            if self._peek() == ",":
                self._pos += 1
            elif self._peek() != "]":
                raise JsonEditError(f"Expected ',' or ']' at offset {self._pos}.")


def set_json_value(text: str, keys: Sequence[str], value: Any) -> str:
    """Return `text` with the member at `keys` set to `value`.

    Keys match case-insensitively and keep their stored spelling. Missing
    levels are inserted into the deepest existing object; a non-object on
    the way is replaced by the nested remainder.
    """
    if not keys:
        raise JsonEditError("At least one key is required.")
    node = _Scanner(text).scan_document()
    if node.members is None:
        raise JsonEditError("Document root must be an object.")

    *parents, leaf = keys
    for depth, key in enumerate(parents):
        remaining = keys[depth + 1 :]
        member = _find_member(node, key)
        if member is None:
            return _insert_member(text, node, key, _nest(remaining, value))
        if member.members is None:
            return _splice(text, member, _nest(remaining, value))
        node = member

    member = _find_member(node, leaf)
    if member is None:
        return _insert_member(text, node, leaf, value)
    return _splice(text, member, value)


def _find_member(node: _ValueSpan, key: str) -> _ValueSpan | None:
    # Last duplicate wins, as with json.loads.
    lowered = key.lower()
    found = None
    for name, span in node.members or ():
        if name.lower() == lowered:
            found = span
    return found


def _nest(keys: Sequence[str], value: Any) -> Any:
    for key in reversed(keys):
        value = {key: value}
    return value


def _splice(text: str, span: _ValueSpan, value: Any) -> str:
    return text[: span.start] + json.dumps(value) + text[span.end :]


def _insert_member(text: str, node: _ValueSpan, key: str, value: Any) -> str:
    member = f"{json.dumps(key)}: {json.dumps(value)}"
    if node.members:
        last_end = node.members[-1][1].end
        return text[:last_end] + ", " + member + text[last_end:]
    return text[: node.start + 1] + member + text[node.start + 1 :]
