from __future__ import annotations

import datetime
import json
from dataclasses import dataclass
from typing import Any, List, Optional

import jsonschema
from jsonschema.validators import validator_for


JsonPointer = str


@dataclass(frozen=True)
class SchemaIssue:
    message: str
    yaml_path: Optional[JsonPointer] = None

    @property
    def pointer(self) -> str:
        """Fragment style pointer, ``#`` for the document root."""
        return f"#{self.yaml_path or ''}"


def _jp_escape(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json_compatible(data: Any) -> Any:
    """Convert parsed YAML into plain JSON values (dates become ISO-8601 strings)."""
    return json.loads(json.dumps(data, default=_json_default))


def validate_against_schema(data: Any, json_schema_dict: dict) -> List[SchemaIssue]:
    """Validate parsed document data against a JSON Schema.

    The schema itself is not checked against its meta-schema. Issues are
    ordered by instance path, then message.

    Args:
        data: Parsed document data
        json_schema_dict: JSON Schema dictionary to validate against

    Returns:
        List of SchemaIssue objects, empty when the data conforms
    """
    instance = to_json_compatible(data)
    validator_cls = validator_for(json_schema_dict, default=jsonschema.Draft7Validator)
    validator = validator_cls(json_schema_dict)

    errors = sorted(
        validator.iter_errors(instance),
        key=lambda e: ([str(p) for p in e.absolute_path], e.message),
    )
    return [
        SchemaIssue(
            message=e.message,
            yaml_path="".join(f"/{_jp_escape(str(p))}" for p in e.absolute_path),
        )
        for e in errors
    ]
