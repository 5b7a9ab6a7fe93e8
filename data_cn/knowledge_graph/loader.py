"""Load processed sanctions documents into a relational knowledge graph.

The processed directory holds one YAML file per record, grouped in the
subdirectories ``legal_instruments``, ``announcements``, ``entities`` and
``entries``. Records are inserted in that order so references point at rows
that already exist.
"""

from __future__ import annotations

import datetime
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml
from sqlalchemy import create_engine, func, select
from sqlalchemy.exc import SQLAlchemyError

from ..exceptions import KnowledgeGraphLoadError
from .tables import (
    announcement_measures_table,
    announcements_table,
    entities_table,
    entity_names_table,
    entry_legal_instruments_table,
    entry_measures_table,
    legal_instruments_table,
    metadata,
    sanction_entries_table,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from sqlalchemy.engine import Connection, Engine
    from sqlalchemy.sql.schema import Table

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadSummary:
    legal_instruments: int = 0
    announcements: int = 0
    entities: int = 0
    entries: int = 0


def create_engine_for(db_path: str | os.PathLike[str]) -> Engine:
    """Create an engine on a fresh SQLite file, removing any previous database."""
    path = Path(db_path)
    if path.exists():
        path.unlink()
    return create_engine(f"sqlite+pysqlite:///{path}", future=True)


def _text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    return str(value)


def _dig(data: dict[str, Any], *keys: str) -> Any:
    current: Any = data
    for key in keys:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current


def _as_list(value: Any) -> list[Any]:
    """A single scalar counts as a one-element list."""
    if value is None or value == "":
        return []
    if isinstance(value, list):
        return value
    return [value]


def _primary_name(names: list[dict[str, Any]]) -> dict[str, Any]:
    for name in names:
        if name.get("is_primary"):
            return name
    return names[0] if names else {}


class KnowledgeGraphLoader:
    """Creates the knowledge graph tables and fills them from YAML records."""

    def __init__(self, engine: Engine):
        self.engine = engine

    def create_schema(self) -> None:
        """Drop and recreate every knowledge graph table."""
        metadata.drop_all(self.engine)
        metadata.create_all(self.engine)

    def load_from_directory(self, processed_dir: str | os.PathLike[str]) -> LoadSummary:
        root = Path(processed_dir)
        log.info("Loading from: %s", root)

        with self.engine.begin() as connection:
            self._load_records(connection, root / "legal_instruments", self._insert_legal_instrument)
            self._load_records(connection, root / "announcements", self._insert_announcement)
            self._load_records(connection, root / "entities", self._insert_entity)
            self._load_records(connection, root / "entries", self._insert_entry)

        summary = LoadSummary(
            legal_instruments=self._count(legal_instruments_table),
            announcements=self._count(announcements_table),
            entities=self._count(entities_table),
            entries=self._count(sanction_entries_table),
        )
        log.info(
            "Loaded %d legal instruments, %d announcements, %d entities, %d sanction entries",
            summary.legal_instruments,
            summary.announcements,
            summary.entities,
            summary.entries,
        )
        return summary

    def _count(self, table: Table) -> int:
        with self.engine.connect() as connection:
            return connection.execute(select(func.count()).select_from(table)).scalar_one()

    def _load_records(
        self,
        connection: Connection,
        directory: Path,
        insert: Callable[[Connection, dict[str, Any]], None],
    ) -> None:
        if not directory.is_dir():
            log.debug("Skipping missing directory %s", directory)
            return

        for file_path in _record_files(directory):
            try:
                with file_path.open(encoding="utf-8") as handle:
                    data = yaml.safe_load(handle)
                if not isinstance(data, dict):
                    raise KnowledgeGraphLoadError(f"Record is not a mapping: {file_path}")
                insert(connection, data)
            except (OSError, yaml.YAMLError, SQLAlchemyError) as exc:
                raise KnowledgeGraphLoadError(f"Failed to load {file_path}: {exc}") from exc

    @staticmethod
    def _insert_legal_instrument(connection: Connection, data: dict[str, Any]) -> None:
        connection.execute(
            legal_instruments_table.insert().values(
                id=_text(data.get("id")),
                name_chinese=_text(data.get("name_chinese")),
                name_english=_text(data.get("name_english")),
                short_name=_text(data.get("short_name")),
                enacted_date=_text(data.get("enacted_date")),
                amended_date=_text(data.get("amended_date")),
                url=_text(data.get("url")),
            )
        )

    @staticmethod
    def _insert_announcement(connection: Connection, data: dict[str, Any]) -> None:
        connection.execute(
            announcements_table.insert().values(
                id=_text(data.get("id")),
                number=_text(data.get("number")),
                title=_text(data.get("title")),
                date=_text(data.get("date")),
                effective_date=_text(data.get("effective_date")),
                issuing_authority=_text(data.get("issuing_authority")),
                department=_text(data.get("department")),
                source_url=_text(data.get("source_url")),
                list_type=_text(data.get("list_type")),
                reason=_text(data.get("reason")),
            )
        )
        measures = _as_list(data.get("measures"))
        if measures:
            connection.execute(
                announcement_measures_table.insert(),
                [{"announcement_id": _text(data.get("id")), "measure": _text(m)} for m in measures],
            )

    @staticmethod
    def _insert_entity(connection: Connection, data: dict[str, Any]) -> None:
        names = [n for n in data.get("names") or [] if isinstance(n, dict)]
        primary = _primary_name(names)
        connection.execute(
            entities_table.insert().values(
                id=_text(data.get("id")),
                type=_text(data.get("type")),
                english_name=_text(primary.get("english")),
                chinese_name=_text(primary.get("chinese")),
                country_of_registration=_text(_dig(data, "organization_details", "country_of_registration")),
                nationality=_text(_dig(data, "person_details", "nationality")),
                date_of_birth=_text(_dig(data, "person_details", "date_of_birth")),
                gender=_text(_dig(data, "person_details", "gender")),
                title=_text(_dig(data, "person_details", "title")),
                remarks=_text(data.get("remarks")),
            )
        )
        if names:
            connection.execute(
                entity_names_table.insert(),
                [
                    {
                        "entity_id": _text(data.get("id")),
                        "english": _text(name.get("english")),
                        "chinese": _text(name.get("chinese")),
                        "is_primary": 1 if name.get("is_primary") else 0,
                    }
                    for name in names
                ],
            )

    @staticmethod
    def _insert_entry(connection: Connection, data: dict[str, Any]) -> None:
        entry_id = _text(data.get("id"))
        connection.execute(
            sanction_entries_table.insert().values(
                id=entry_id,
                entity_id=_text(data.get("entity_id")),
                announcement_id=_text(data.get("announcement_id")),
                status=_text(data.get("status")) or "active",
                listed_date=_text(data.get("listed_date")),
                delisted_date=_text(data.get("delisted_date")),
            )
        )
        legal_instrument_ids = _as_list(data.get("legal_instrument_ids"))
        if legal_instrument_ids:
            connection.execute(
                entry_legal_instruments_table.insert(),
                [{"entry_id": entry_id, "legal_instrument_id": _text(li_id)} for li_id in legal_instrument_ids],
            )
        measures = _as_list(data.get("measures"))
        if measures:
            connection.execute(
                entry_measures_table.insert(),
                [{"entry_id": entry_id, "measure": _text(m)} for m in measures],
            )


def _record_files(directory: Path) -> Iterator[Path]:
    yield from sorted(p for p in directory.glob("*.yaml") if p.is_file())
