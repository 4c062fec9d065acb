"""Directive indexing over parsed GraphQL SDL."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence

from graphql import (
    DirectiveNode,
    DocumentNode,
    NonNullTypeNode,
    NullValueNode,
    ObjectValueNode,
    TypeDefinitionNode,
    TypeExtensionNode,
    parse,
)

from graphql_security_notices.feature_flags.flag_models import TRANSFORMER_V2

AUTH_DIRECTIVE = "auth"
MODEL_DIRECTIVE = "model"
PRIMARY_KEY_DIRECTIVE = "primaryKey"
SUBSCRIPTIONS_ARGUMENT = "subscriptions"
SUBSCRIPTION_LEVEL_FIELD = "level"
SUBSCRIPTION_LEVEL_OFF = "off"

DirectiveMap = dict[str, list[DirectiveNode]]
DirectiveNameMap = dict[str, frozenset[str]]


def parse_schema_document(sdl: str) -> DocumentNode:
    """Parse SDL text; blank text yields a document without definitions."""
    if not sdl.strip():
        return DocumentNode(definitions=())
    return parse(sdl)


def collect_directives_by_type(document: DocumentNode) -> DirectiveMap:
    """Group directives under the name of the type that carries them.

    Type-level directives come first, followed by the directives of the
    type's fields and field arguments. Extensions of a type accumulate into
    the same entry.
    """
    directives_by_type: DirectiveMap = {}
    for definition in _named_definitions(document):
        collected = directives_by_type.setdefault(definition.name.value, [])
        collected.extend(definition.directives or ())
        for field in getattr(definition, "fields", None) or ():
            collected.extend(field.directives or ())
            for argument in getattr(field, "arguments", None) or ():
                collected.extend(argument.directives or ())
    return directives_by_type


def collect_directive_names_by_type(document: DocumentNode) -> DirectiveNameMap:
    """Return the set of directive names present on each type."""
    return {
        type_name: frozenset(directive.name.value for directive in directives)
        for type_name, directives in collect_directives_by_type(document).items()
    }


def has_field_auth_directives(document: DocumentNode) -> set[str]:
    """Return names of types with at least one non-nullable field carrying `@auth`."""
    type_names: set[str] = set()
    for definition in _named_definitions(document):
        for field in getattr(definition, "fields", None) or ():
            if isinstance(field.type, NonNullTypeNode) and _has_directive(
                field.directives, AUTH_DIRECTIVE
            ):
                type_names.add(definition.name.value)
                break
    return type_names


def has_v2_auth_directives(document: DocumentNode, transformer_version: int | float) -> bool:
    """Return True when transformer v2 is active and some type carries a type-level `@auth`."""
    if transformer_version != TRANSFORMER_V2:
        return False
    return any(
        _has_directive(getattr(definition, "directives", None), AUTH_DIRECTIVE)
        for definition in document.definitions
    )


def subscriptions_disabled(model_directive: DirectiveNode | None) -> bool:
    """Return True when `@model(subscriptions: ...)` is null or has level `off`/null."""
    if model_directive is None:
        return False
    for argument in model_directive.arguments or ():
        if argument.name.value != SUBSCRIPTIONS_ARGUMENT:
            continue
        value = argument.value
        if isinstance(value, NullValueNode):
            return True
        if isinstance(value, ObjectValueNode):
            for field in value.fields:
                if field.name.value != SUBSCRIPTION_LEVEL_FIELD:
                    continue
                if isinstance(field.value, NullValueNode):
                    return True
                if getattr(field.value, "value", None) == SUBSCRIPTION_LEVEL_OFF:
                    return True
    return False


def should_display_field_auth_notification(
    directive_map: Mapping[str, Sequence[DirectiveNode]],
    field_auth_types: set[str],
    transformer_version: int | float,
) -> bool:
    """Trigger condition for the field-level auth notice."""
    if transformer_version != TRANSFORMER_V2:
        return False
    for type_name, directives in directive_map.items():
        model_directive = next(
            (directive for directive in directives if directive.name.value == MODEL_DIRECTIVE),
            None,
        )
        if subscriptions_disabled(model_directive) and type_name in field_auth_types:
            return True
    return False


def _named_definitions(
    document: DocumentNode,
) -> Iterator[TypeDefinitionNode | TypeExtensionNode]:
    for definition in document.definitions:
        if isinstance(definition, (TypeDefinitionNode, TypeExtensionNode)):
            yield definition


def _has_directive(directives: Sequence[DirectiveNode] | None, name: str) -> bool:
    return any(directive.name.value == name for directive in directives or ())
