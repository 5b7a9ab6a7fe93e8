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

"""Schema loader for sanctions data validation.

Schemas are JSON Schema documents stored as YAML resources. Each schema type
maps to one resource file; a repository instance reads every resource at most
once and serves later requests from its cache.
"""

import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional, Tuple, Union

import yaml

from ..exceptions import SchemaLoadError, SchemaNotFoundError, SchemaRepositoryNotFoundError
from .schema_types import SchemaType

logger = logging.getLogger(__name__)


DEFAULT_SCHEMAS_DIR = Path(__file__).parent.parent / "schema"

DEFAULT_SCHEMA_FILES: Dict[SchemaType, str] = {
    SchemaType.ANNOUNCEMENT: "cn-announcement.yml",
    SchemaType.MODIFICATION: "cn-measure-modification.yml",
    SchemaType.LEGAL_INSTRUMENT: "cn-legal-instrument.yml",
}


@dataclass(frozen=True)
class SchemaInfo:
    """Human-facing description of one schema resource."""
    schema_type: SchemaType
    path: Path
    title: str
    description: str
    required: Tuple[str, ...] = ()


class SchemaRepository:
    """Loads and caches schema documents by schema type."""

    def __init__(
        self,
        schemas_dir: Optional[Union[str, Path]] = None,
        schema_files: Optional[Mapping[SchemaType, str]] = None,
    ):
        """Initialize the repository.

        Args:
            schemas_dir: Directory holding the schema resources. Defaults to
                the schemas bundled with the package.
            schema_files: Override of the schema type to file name mapping.
        """
        self.schemas_dir = Path(schemas_dir) if schemas_dir is not None else DEFAULT_SCHEMAS_DIR
        self.schema_files: Dict[SchemaType, str] = dict(DEFAULT_SCHEMA_FILES)
        if schema_files:
            self.schema_files.update(schema_files)
        self._cache: Dict[SchemaType, dict] = {}
        self._lock = threading.Lock()
        self.load_count = 0

    def schema_path(self, schema_type: SchemaType) -> Path:
        """Get the path of the resource backing a schema type.

        Raises:
            SchemaNotFoundError: If no resource name is configured for the type
        """
        file_name = self.schema_files.get(schema_type)
        if file_name is None:
            raise SchemaNotFoundError(f"No schema resource configured for type: {schema_type}")
        return self.schemas_dir / file_name

    def load(self, schema_type: SchemaType) -> dict:
        """Load the schema for a schema type, reading the resource at most once.

        Args:
            schema_type: Schema type to load

        Returns:
            Schema dictionary

        Raises:
            SchemaRepositoryNotFoundError: If the schema directory does not exist
            SchemaNotFoundError: If the schema resource does not exist
            SchemaLoadError: If the schema resource cannot be read or is not a mapping
        """
        with self._lock:
            if schema_type in self._cache:
                return self._cache[schema_type]

            schema = self._read_schema(schema_type)
            self._cache[schema_type] = schema
            return schema

    def _read_schema(self, schema_type: SchemaType) -> dict:
        if not self.schemas_dir.is_dir():
            raise SchemaRepositoryNotFoundError(f"Schema directory not found: {self.schemas_dir}")

        schema_path = self.schema_path(schema_type)
        if not schema_path.is_file():
            raise SchemaNotFoundError(f"Schema not found: {schema_path}")

        logger.debug(f"Loading schema for {schema_type}: {schema_path}")
        try:
            with open(schema_path, "r", encoding="utf-8") as stream:
                schema = yaml.safe_load(stream)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
            raise SchemaLoadError(f"Failed to load schema {schema_path}: {exc}") from exc
        self.load_count += 1

        if not isinstance(schema, dict):
            raise SchemaLoadError(f"Schema file does not contain a mapping: {schema_path}")
        return schema

    def describe(self, schema_type: SchemaType) -> SchemaInfo:
        """Describe a schema resource.

        Unlike per-document validation, a missing schema is an error here.

        Raises:
            SchemaNotFoundError: If the schema resource does not exist
            SchemaLoadError: If the schema resource cannot be read or is not a mapping
        """
        schema = self.load(schema_type)
        required = schema.get("required") or []
        return SchemaInfo(
            schema_type=schema_type,
            path=self.schema_path(schema_type),
            title=str(schema.get("title", schema_type.value)),
            description=str(schema.get("description", "")).strip(),
            required=tuple(str(name) for name in required),
        )

    def clear_cache(self) -> None:
        """Clear the schema cache."""
        with self._lock:
            self._cache.clear()
        logger.debug("Schema cache cleared")
