"""Schema resolution for sanctions data documents."""

from .schema_resolver import CONTENT_RULES, SchemaResolver, schema_resolver

__all__ = ["CONTENT_RULES", "SchemaResolver", "schema_resolver"]
