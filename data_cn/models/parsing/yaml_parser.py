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

"""YAML document loader that captures parse failures as values."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Set, Tuple, Union

import yaml
from yaml.constructor import ConstructorError

from ...exceptions import DocumentParseError
from ...file_io.source_location import SourceMap

logger = logging.getLogger(__name__)


class DocumentSafeLoader(yaml.SafeLoader):
    """Safe loader limited to plain scalars, dates and timestamps.

    Anchors and aliases are expanded as usual. Python object tags are already
    unknown to the safe loader; the remaining non-scalar standard tags are
    rejected here.
    """


def _reject_tag(loader: yaml.SafeLoader, node: yaml.Node) -> Any:
    raise ConstructorError(
        None, None, f"Tried to load unspecified class: {node.tag}", node.start_mark
    )


for _tag in (
    "tag:yaml.org,2002:binary",
    "tag:yaml.org,2002:set",
    "tag:yaml.org,2002:omap",
    "tag:yaml.org,2002:pairs",
):
    DocumentSafeLoader.add_constructor(_tag, _reject_tag)


@dataclass(frozen=True)
class DocumentContent:
    """Parsed document data or the message of the failure that prevented it.

    Exactly one of ``data`` and ``error`` is meaningful: ``error`` is None for
    a successfully parsed document.
    """
    location: str
    data: Any = None
    error: Optional[str] = None
    source_map: SourceMap = field(default_factory=dict, compare=False, repr=False)

    @property
    def is_parse_failure(self) -> bool:
        return self.error is not None

    @classmethod
    def parsed(cls, location: str, data: Any, source_map: Optional[SourceMap] = None) -> "DocumentContent":
        return cls(location=location, data=data, source_map=source_map or {})

    @classmethod
    def failure(cls, location: str, message: str) -> "DocumentContent":
        return cls(location=location, error=message)


def _single_line(text: str) -> str:
    return " ".join(str(text).split())


class DocumentLoader:
    """Reads and parses YAML documents one at a time."""

    @staticmethod
    def _json_pointer_escape(token: str) -> str:
        # JSON Pointer escaping: "~" -> "~0", "/" -> "~1"
        return token.replace("~", "~0").replace("/", "~1")

    @classmethod
    def build_source_map(cls, content: str) -> SourceMap:
        """Build a mapping from JSON-pointer paths to 1-based line/column.

        Uses the composed node tree so locations are tracked without changing
        the shape of the loaded data.
        """
        source_map: SourceMap = {}

        try:
            root = yaml.compose(content, Loader=DocumentSafeLoader)
        except yaml.YAMLError:
            return source_map

        if root is None:
            return source_map

        def _record(path: str, node: yaml.Node) -> None:
            mark = node.start_mark
            # PyYAML marks are 0-based
            source_map.setdefault(path, {"line": mark.line + 1, "column": mark.column + 1})

        # Aliases share node objects, so a self-referencing anchor is a cycle
        active: Set[int] = set()

        def _walk(node: yaml.Node, path: str) -> None:
            if id(node) in active:
                return
            _record(path, node)

            active.add(id(node))
            if isinstance(node, yaml.MappingNode):
                for key_node, value_node in node.value:
                    key = getattr(key_node, "value", None)
                    if not isinstance(key, str):
                        continue
                    _walk(value_node, f"{path}/{cls._json_pointer_escape(key)}")
            elif isinstance(node, yaml.SequenceNode):
                for idx, item_node in enumerate(node.value):
                    _walk(item_node, f"{path}/{idx}")
            active.discard(id(node))

        _walk(root, "")
        return source_map

    def parse_string(self, content: str) -> Tuple[Any, SourceMap]:
        """Parse YAML text and return (data, source_map).

        Raises:
            DocumentParseError: If the content cannot be parsed
        """
        try:
            data = yaml.load(content, Loader=DocumentSafeLoader)
        except yaml.YAMLError as exc:
            raise DocumentParseError(_single_line(exc)) from exc
        except Exception as exc:
            raise DocumentParseError(_single_line(f"{type(exc).__name__}: {exc}")) from exc

        if data is None:
            data = {}

        return data, self.build_source_map(content)

    def parse_file(self, file_path: Union[str, Path]) -> Tuple[Any, SourceMap]:
        """Read and parse a YAML file and return (data, source_map).

        Raises:
            DocumentParseError: If the file cannot be read or parsed
        """
        path = Path(file_path)

        if not path.exists():
            raise DocumentParseError(f"File not found: {path}")

        if not path.is_file():
            raise DocumentParseError(f"Path is not a file: {path}")

        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentParseError(_single_line(f"Failed to read file {path}: {exc}")) from exc

        return self.parse_string(content)

    def load(self, file_path: Union[str, Path]) -> DocumentContent:
        """Load a document, capturing any read or parse failure.

        Args:
            file_path: Path to the YAML document

        Returns:
            DocumentContent holding either the parsed data or the failure message
        """
        location = str(file_path)
        try:
            logger.debug(f"Loading document: {location}")
            data, source_map = self.parse_file(file_path)
        except DocumentParseError as exc:
            logger.debug(f"Parse failure for {location}: {exc}")
            return DocumentContent.failure(location, str(exc))
        return DocumentContent.parsed(location, data, source_map)

    def load_string(self, content: str, location: str = "<string>") -> DocumentContent:
        """Load a document from in-memory text, capturing any parse failure."""
        try:
            data, source_map = self.parse_string(content)
        except DocumentParseError as exc:
            return DocumentContent.failure(location, str(exc))
        return DocumentContent.parsed(location, data, source_map)


# Global loader instance
document_loader = DocumentLoader()
