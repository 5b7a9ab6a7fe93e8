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

"""Validation and loading tools for China sanctions data."""

__version__ = "0.1.0"

from .exceptions import (
    DataCnError,
    SchemaLoadError,
    SchemaNotFoundError,
    SchemaRepositoryNotFoundError,
    SourcesNotFoundError,
)
from .models.schema_types import SchemaType, UNKNOWN_SCHEMA
from .models.schema_loader import SchemaRepository, SchemaInfo
from .models.validation_result import ValidationResult
from .models.validation_report import ValidationReport
from .models.parsing.yaml_parser import DocumentContent, DocumentLoader
from .resolvers.schema_resolver import SchemaResolver, schema_resolver
from .file_io.file_finder import FileFinder
from .validator import Validator

__all__ = [
    "DataCnError",
    "SchemaLoadError",
    "SchemaNotFoundError",
    "SchemaRepositoryNotFoundError",
    "SourcesNotFoundError",
    "SchemaType",
    "UNKNOWN_SCHEMA",
    "SchemaRepository",
    "SchemaInfo",
    "ValidationResult",
    "ValidationReport",
    "DocumentContent",
    "DocumentLoader",
    "SchemaResolver",
    "schema_resolver",
    "FileFinder",
    "Validator",
]
