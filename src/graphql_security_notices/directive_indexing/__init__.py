"""Directive indexing exports."""

from .directive_indexer import (
    AUTH_DIRECTIVE,
    MODEL_DIRECTIVE,
    PRIMARY_KEY_DIRECTIVE,
    DirectiveMap,
    DirectiveNameMap,
    collect_directive_names_by_type,
    collect_directives_by_type,
    has_field_auth_directives,
    has_v2_auth_directives,
    parse_schema_document,
    should_display_field_auth_notification,
    subscriptions_disabled,
)

__all__ = [
    "AUTH_DIRECTIVE",
    "MODEL_DIRECTIVE",
    "PRIMARY_KEY_DIRECTIVE",
    "DirectiveMap",
    "DirectiveNameMap",
    "collect_directive_names_by_type",
    "collect_directives_by_type",
    "has_field_auth_directives",
    "has_v2_auth_directives",
    "parse_schema_document",
    "should_display_field_auth_notification",
    "subscriptions_disabled",
]
