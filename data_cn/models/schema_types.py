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

"""Schema type identifiers for sanctions data documents."""

from enum import Enum
from typing import List


# Recorded on results whose document could not be parsed
UNKNOWN_SCHEMA = "unknown"


class SchemaType(str, Enum):
    """Logical schema identifiers a document can be validated against."""

    ANNOUNCEMENT = "announcement"
    MODIFICATION = "modification"
    LEGAL_INSTRUMENT = "legal_instrument"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def get_all_types(cls) -> List[str]:
        return [member.value for member in cls]

    @classmethod
    def parse(cls, value: str) -> "SchemaType":
        """Map a user supplied schema name to a SchemaType.

        Raises:
            ValueError: If the name is not a known schema type
        """
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower().replace("-", "_")
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(
            f"Unknown schema type: {value}. Available types: {', '.join(cls.get_all_types())}"
        )
