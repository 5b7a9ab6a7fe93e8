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

"""Decide which schema applies to a document.

Resolution order, first match wins:

1. the document location contains a legal-instrument directory name
2. the document location contains a modification directory name
3. the parsed content matches one of :data:`CONTENT_RULES`
4. fall back to :attr:`SchemaType.ANNOUNCEMENT`

Directory placement is a curation decision, so it outranks content shape.
"""

from typing import Any, Callable, Collection, Iterable, Optional, Tuple

from ..models.schema_types import SchemaType


ContentPredicate = Callable[[dict], bool]

LEGAL_INSTRUMENT_DIRECTORIES: Tuple[str, ...] = (
    "legal-instruments",
)

MODIFICATION_DIRECTORIES: Tuple[str, ...] = (
    "sanction-updates",
    "unreliable-entity-list-updates",
)


def has_measure_modifications(content: dict) -> bool:
    return "measure_modifications" in content


def has_sanction_details(content: dict) -> bool:
    return "sanction_details" in content


def has_title_and_content(content: dict) -> bool:
    return "title" in content and "content" in content


# Evaluated in order against mapping content
CONTENT_RULES: Tuple[Tuple[ContentPredicate, SchemaType], ...] = (
    (has_measure_modifications, SchemaType.MODIFICATION),
    (has_sanction_details, SchemaType.ANNOUNCEMENT),
    (has_title_and_content, SchemaType.LEGAL_INSTRUMENT),
)

DEFAULT_SCHEMA_TYPE = SchemaType.ANNOUNCEMENT


class SchemaResolver:
    """Maps a document location and optional content to a schema type.

    ``resolve`` returns ``None`` when the document should be skipped. The
    default configuration never skips; pass ``skip_types`` to exclude
    documents of particular schema types from validation.
    """

    def __init__(
        self,
        legal_instrument_directories: Iterable[str] = LEGAL_INSTRUMENT_DIRECTORIES,
        modification_directories: Iterable[str] = MODIFICATION_DIRECTORIES,
        content_rules: Iterable[Tuple[ContentPredicate, SchemaType]] = CONTENT_RULES,
        skip_types: Collection[SchemaType] = (),
    ):
        self.legal_instrument_directories = tuple(d.lower() for d in legal_instrument_directories)
        self.modification_directories = tuple(d.lower() for d in modification_directories)
        self.content_rules = tuple(content_rules)
        self.skip_types = frozenset(skip_types)

    def resolve(self, file_path: Any, content: Any = None) -> Optional[SchemaType]:
        """Determine the schema type for a document.

        Args:
            file_path: Document location (path or string)
            content: Parsed document content, or None when unavailable

        Returns:
            The schema type, or None if the document is skipped
        """
        schema_type = self._resolve(file_path, content)
        if schema_type in self.skip_types:
            return None
        return schema_type

    def _resolve(self, file_path: Any, content: Any) -> SchemaType:
        path_type = self.resolve_by_path(file_path)
        if path_type is not None:
            return path_type

        content_type = self.resolve_by_content(content)
        if content_type is not None:
            return content_type

        return DEFAULT_SCHEMA_TYPE

    def resolve_by_path(self, file_path: Any) -> Optional[SchemaType]:
        """Apply the directory rules only."""
        if self.is_legal_instrument_directory(file_path):
            return SchemaType.LEGAL_INSTRUMENT
        if self.is_modification_directory(file_path):
            return SchemaType.MODIFICATION
        return None

    def resolve_by_content(self, content: Any) -> Optional[SchemaType]:
        """Apply the content rules only. Non-mapping content matches nothing."""
        if not isinstance(content, dict):
            return None
        for predicate, schema_type in self.content_rules:
            if predicate(content):
                return schema_type
        return None

    def is_legal_instrument_directory(self, file_path: Any) -> bool:
        return _path_contains_any(file_path, self.legal_instrument_directories)

    def is_modification_directory(self, file_path: Any) -> bool:
        return _path_contains_any(file_path, self.modification_directories)


def _path_contains_any(file_path: Any, directories: Tuple[str, ...]) -> bool:
    normalized_path = str(file_path).lower()
    return any(directory in normalized_path for directory in directories)


# Global resolver instance
schema_resolver = SchemaResolver()
