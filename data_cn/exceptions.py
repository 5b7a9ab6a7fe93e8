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

"""Custom exceptions for the data_cn validation and loading tools."""


class DataCnError(Exception):
    """Base exception for data_cn related errors."""
    pass


class SchemaNotFoundError(DataCnError):
    """Exception raised when the schema resource for a schema type is missing."""
    pass


class SchemaRepositoryNotFoundError(DataCnError):
    """Exception raised when the schema directory itself does not exist."""
    pass


class SourcesNotFoundError(DataCnError):
    """Exception raised when the sources directory to validate does not exist."""
    pass


class DocumentParseError(DataCnError):
    """Exception raised for documents that cannot be read or parsed."""
    pass


class KnowledgeGraphLoadError(DataCnError):
    """Exception raised when a processed document cannot be loaded into the store."""
    pass


class SchemaLoadError(DataCnError):
    """Exception raised when a schema resource exists but cannot be read or parsed."""
    pass
