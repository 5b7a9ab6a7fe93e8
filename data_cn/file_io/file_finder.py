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

"""Discovery of YAML documents below a sources directory."""

from pathlib import Path
from typing import List, Union

DEFAULT_SOURCES_DIR = "sources"
YAML_SUFFIXES = (".yml", ".yaml")


class FileFinder:
    """Finds YAML files in a sources directory."""

    def __init__(self, sources_dir: Union[str, Path] = DEFAULT_SOURCES_DIR):
        self.sources_dir = Path(sources_dir)

    def find_all(self) -> List[Path]:
        """Find all YAML files below the sources directory, sorted by path."""
        return self._find(self.sources_dir)

    def find_in(self, subdir: Union[str, Path]) -> List[Path]:
        """Find all YAML files below a subdirectory of the sources directory."""
        return self._find(self.sources_dir / subdir)

    def sources_exist(self) -> bool:
        return self.sources_dir.is_dir()

    @staticmethod
    def _find(root: Path) -> List[Path]:
        if not root.is_dir():
            return []
        yaml_files = []
        for suffix in YAML_SUFFIXES:
            yaml_files.extend(p for p in root.rglob(f"*{suffix}") if p.is_file())
        return sorted(set(yaml_files))
