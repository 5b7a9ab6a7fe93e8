from __future__ import annotations

import logging
import textwrap
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from data_cn.models.schema_loader import SchemaRepository
from data_cn.validator import Validator
from tests.documents import VALID_ANNOUNCEMENT, VALID_LEGAL_INSTRUMENT, VALID_MODIFICATION

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    try:
        yield
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)


@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[[str, str], Path]:
    def write(relative_path: str, content: str) -> Path:
        path = tmp_path / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path

    return write


@pytest.fixture
def sources_dir(tmp_path: Path, write_yaml: Callable[[str, str], Path]) -> Path:
    write_yaml("sources/sanction-lists/anti-sanction-list/20221223.yml", VALID_ANNOUNCEMENT)
    write_yaml("sources/sanction-lists/unreliable-entity-list-updates/20230110.yml", VALID_MODIFICATION)
    write_yaml("sources/legal-instruments/afsl.yaml", VALID_LEGAL_INSTRUMENT)
    return tmp_path / "sources"


@pytest.fixture
def schema_repository() -> SchemaRepository:
    return SchemaRepository()


@pytest.fixture
def validator(schema_repository: SchemaRepository) -> Validator:
    return Validator(schema_repository=schema_repository)
