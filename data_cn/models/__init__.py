"""Schema types, schema loading and validation result models."""

from .schema_types import SchemaType, UNKNOWN_SCHEMA
from .schema_loader import SchemaRepository, SchemaInfo
from .validation_result import ValidationResult
from .validation_report import ValidationReport

__all__ = [
    "SchemaType",
    "UNKNOWN_SCHEMA",
    "SchemaRepository",
    "SchemaInfo",
    "ValidationResult",
    "ValidationReport",
]
