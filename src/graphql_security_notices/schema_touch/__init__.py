"""Schema touch exports."""

from .schema_touch_service import SchemaTouchResult, touch_graphql_schema

__all__ = ["SchemaTouchResult", "touch_graphql_schema"]
