"""Detection of list-query request templates without a filter guard."""

from __future__ import annotations

import re
from collections.abc import Mapping

LIST_QUERY_PREFIX = "Query.list"
REQUEST_TEMPLATE_SUFFIX = ".req.vtl"

_FILTER_ASSIGNMENT = (
    r"#set\( \$filterExpression = "
    r"\$util\.parseJson\(\$util\.transform\.toDynamoDBFilterExpression\(\$filter\)\) \)"
)
_FILTER_GUARD = r"#if\( \$util\.isNullOrEmpty\(\$filterExpression\) \)"
UNGUARDED_FILTER_PATTERN = re.compile(rf"{_FILTER_ASSIGNMENT}\s*(?!\s*{_FILTER_GUARD})")


def is_list_query_request_template(file_name: str) -> bool:
    return file_name.startswith(LIST_QUERY_PREFIX) and file_name.endswith(REQUEST_TEMPLATE_SUFFIX)


def is_unsafe_list_query_template(template: str) -> bool:
    """Return True when a filter expression is assigned without a null/empty guard after it."""
    return UNGUARDED_FILTER_PATTERN.search(template) is not None


def find_unsafe_list_query_resolvers(resolvers: Mapping[str, str]) -> list[str]:
    """Return bodies of list-query request templates that use an unguarded filter."""
    return [
        template
        for file_name, template in resolvers.items()
        if is_list_query_request_template(file_name) and is_unsafe_list_query_template(template)
    ]
