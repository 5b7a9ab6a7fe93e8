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

"""Validate sanctions data YAML files against their JSON schemas.

Every failure that belongs to a single file (unreadable file, invalid YAML,
missing schema resource, schema violations) is recorded in that file's
ValidationResult. Only failures of the run as a whole propagate: a missing
sources directory, a missing schema directory or a schema resource that
cannot be loaded.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .exceptions import SchemaNotFoundError, SourcesNotFoundError
from .file_io.file_finder import DEFAULT_SOURCES_DIR, FileFinder
from .file_io.source_location import format_source, lookup_source
from .models.document_schema import validate_against_schema
from .models.parsing.yaml_parser import DocumentContent, DocumentLoader
from .models.schema_loader import SchemaRepository
from .models.schema_types import UNKNOWN_SCHEMA
from .models.validation_report import ValidationReport
from .models.validation_result import ValidationResult
from .resolvers.schema_resolver import SchemaResolver, schema_resolver

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class Validator:
    """Validates YAML files against the schema resolved for each of them."""

    def __init__(
        self,
        schema_repository: Optional[SchemaRepository] = None,
        resolver: Optional[SchemaResolver] = None,
        document_loader: Optional[DocumentLoader] = None,
    ):
        """Initialize the validator.

        Schemas are cached by the repository for the lifetime of the validator.
        """
        self.schema_repository = schema_repository if schema_repository is not None else SchemaRepository()
        self.resolver = resolver if resolver is not None else schema_resolver
        self.document_loader = document_loader if document_loader is not None else DocumentLoader()

    def validate_file(self, file_path: PathLike) -> Optional[ValidationResult]:
        """Validate a single file.

        Args:
            file_path: Path to the YAML file

        Returns:
            ValidationResult, or None if the file is skipped
        """
        content = self.document_loader.load(file_path)
        schema_type = self.resolver.resolve(
            file_path, None if content.is_parse_failure else content.data
        )

        if schema_type is None:
            logger.debug(f"Skipping {file_path}: no schema applies")
            return None

        if content.is_parse_failure:
            return ValidationResult(
                file_path=file_path,
                schema_type=UNKNOWN_SCHEMA,
                parse_error=content.error,
            )

        try:
            schema = self.schema_repository.load(schema_type)
        except SchemaNotFoundError as e:
            logger.warning(f"{e} (needed by {file_path})")
            return ValidationResult(
                file_path=file_path,
                schema_type=schema_type,
                errors=[f"Schema not found for type: {schema_type}"],
            )

        errors = self._validate_content(content, schema)
        logger.debug(f"Validated {file_path} as {schema_type}: {len(errors)} error(s)")
        return ValidationResult(file_path=file_path, schema_type=schema_type, errors=errors)

    def validate_files(
        self,
        file_paths: Iterable[PathLike],
        max_workers: Optional[int] = None,
    ) -> ValidationReport:
        """Validate multiple files.

        Args:
            file_paths: Paths to validate, in report order
            max_workers: Validate on a thread pool of this size when greater than 1

        Returns:
            ValidationReport with one result per file that was not skipped
        """
        paths = list(file_paths)

        if max_workers is not None and max_workers > 1 and len(paths) > 1:
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                # map() yields in input order
                outcomes = list(executor.map(self.validate_file, paths))
        else:
            outcomes = [self.validate_file(path) for path in paths]

        report = ValidationReport()
        for result in outcomes:
            if result is not None:
                report.add_result(result)

        logger.info(
            f"Validated {report.total_count} of {len(paths)} file(s): "
            f"{report.valid_count} valid, {report.invalid_count} invalid"
        )
        return report

    def validate_directory(
        self,
        sources_dir: PathLike = DEFAULT_SOURCES_DIR,
        max_workers: Optional[int] = None,
    ) -> ValidationReport:
        """Validate all YAML files in a sources directory.

        Raises:
            SourcesNotFoundError: If the sources directory does not exist
        """
        finder = FileFinder(sources_dir)
        if not finder.sources_exist():
            raise SourcesNotFoundError(f"Sources directory not found: {sources_dir}")

        file_paths = finder.find_all()
        logger.info(f"Found {len(file_paths)} YAML file(s) in {sources_dir}")
        return self.validate_files(file_paths, max_workers=max_workers)

    validate_all = validate_directory

    def _validate_content(self, content: DocumentContent, schema: dict) -> List[str]:
        try:
            issues = validate_against_schema(content.data, schema)
        except Exception as e:
            return [f"Validation error: {e}"]

        messages = []
        for issue in issues:
            loc = lookup_source(content.source_map, issue.yaml_path)
            messages.append(f"{issue.pointer}: {issue.message}{format_source(loc)}")
        return messages
