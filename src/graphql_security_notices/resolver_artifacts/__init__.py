"""Resolver artifact exports."""

from .resolver_loader import RESOLVER_BUILD_PATH, load_resolvers
from .unsafe_resolver_detector import (
    find_unsafe_list_query_resolvers,
    is_list_query_request_template,
    is_unsafe_list_query_template,
)

__all__ = [
    "RESOLVER_BUILD_PATH",
    "find_unsafe_list_query_resolvers",
    "is_list_query_request_template",
    "is_unsafe_list_query_template",
    "load_resolvers",
]
