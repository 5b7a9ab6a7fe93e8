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

"""Runtime configuration for the data_cn tools."""

import os
import sys
import logging
from dataclasses import dataclass
from typing import Optional


class _BelowLevelFilter(logging.Filter):
    """Pass only records strictly below a level."""

    def __init__(self, level: int) -> None:
        super().__init__()
        self._level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self._level


@dataclass
class ValidatorConfig:
    """Configuration for validation runs and knowledge-graph loading."""
    log_level: str = "WARNING"
    print_level: str = "WARNING"
    max_workers: int = 1

    # paths
    sources_dir: str = "sources"
    schemas_dir: Optional[str] = None
    db_path: str = "cn_sanctions.db"

    @classmethod
    def from_env(cls) -> 'ValidatorConfig':
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv('DATA_CN_LOG_LEVEL', 'WARNING'),
            print_level=os.getenv('DATA_CN_PRINT_LEVEL', 'WARNING'),
            max_workers=int(os.getenv('DATA_CN_MAX_WORKERS', '1')),
            sources_dir=os.getenv('DATA_CN_SOURCES_DIR', 'sources'),
            schemas_dir=os.getenv('DATA_CN_SCHEMAS_DIR') or None,
            db_path=os.getenv('DATA_CN_DB_PATH', 'cn_sanctions.db'),
        )

    def set_logging(self) -> logging.Logger:
        """Setup root logging based on configuration.

        Records below ``print_level`` go to stdout, the rest to stderr, so a
        report piped to a file still leaves warnings visible on the terminal.
        """
        level = getattr(logging, self.log_level.upper(), logging.INFO)
        stderr_level = max(getattr(logging, self.print_level.upper(), logging.WARNING), logging.DEBUG)
        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')

        root = logging.getLogger()
        root.handlers.clear()
        root.setLevel(level)

        stdout_handler = logging.StreamHandler(stream=sys.stdout)
        stdout_handler.addFilter(_BelowLevelFilter(stderr_level))
        stdout_handler.setFormatter(formatter)

        stderr_handler = logging.StreamHandler(stream=sys.stderr)
        stderr_handler.setLevel(stderr_level)
        stderr_handler.setFormatter(formatter)

        root.addHandler(stdout_handler)
        root.addHandler(stderr_handler)

        return logging.getLogger('data_cn')


# Global configuration instance
validator_config = ValidatorConfig.from_env()
