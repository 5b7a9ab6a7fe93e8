# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Validation outcome for a single document."""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple, Union

from .schema_types import SchemaType, UNKNOWN_SCHEMA


@dataclass(frozen=True, init=False)
class ValidationResult:
    """Container for the validation outcome of one file.

    A parse error and schema violations never occur together: a document that
    cannot be parsed is never checked against a schema.
    """
    file_path: str
    schema_type: Union[SchemaType, str]
    errors: Tuple[str, ...]
    parse_error: Optional[str]

    def __init__(
        self,
        file_path: Any,
        schema_type: Union[SchemaType, str] = UNKNOWN_SCHEMA,
        errors: Sequence[str] = (),
        parse_error: Optional[str] = None,
    ):
        errors = tuple(errors)
        if parse_error is not None and errors:
            raise ValueError("A result cannot carry both a parse error and schema errors")

        object.__setattr__(self, "file_path", str(file_path))
        object.__setattr__(self, "schema_type", schema_type)
        object.__setattr__(self, "errors", errors)
        object.__setattr__(self, "parse_error", parse_error)

    @property
    def valid(self) -> bool:
        return self.parse_error is None and not self.errors

    @property
    def has_parse_error(self) -> bool:
        return self.parse_error is not None

    @property
    def error_count(self) -> int:
        return len(self.errors)

    def __str__(self) -> str:
        if self.valid:
            return f"✓ {self.file_path} ({self.schema_type})"
        if self.has_parse_error:
            return f"✗ {self.file_path} - Parse Error: {self.parse_error}"

        lines = [f"✗ {self.file_path} ({self.schema_type})"]
        lines.extend(f"  - {error}" for error in self.errors)
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'file': self.file_path,
            'schema_type': str(self.schema_type),
            'valid': self.valid,
            'errors': list(self.errors),
            'parse_error': self.parse_error,
        }
