"""Relational schema of the sanctions knowledge graph."""

from __future__ import annotations

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
    func,
)

ENTITY_TYPES = ("person", "organization", "vessel", "aircraft")
LIST_TYPES = ("anti_sanctions", "unreliable_entity", "export_control")
ENTRY_STATUSES = ("active", "suspended", "terminated", "delisted")


def _in_list(column: str, values: tuple[str, ...]) -> str:
    quoted = ", ".join(f"'{value}'" for value in values)
    return f"{column} IN ({quoted})"


metadata = MetaData()

entities_table = Table(
    "entities",
    metadata,
    Column("id", Text, primary_key=True),
    Column("type", Text, nullable=False),
    Column("english_name", Text),
    Column("chinese_name", Text),
    Column("country_of_registration", Text),
    Column("nationality", Text),
    Column("date_of_birth", Text),
    Column("gender", Text),
    Column("title", Text),
    Column("remarks", Text),
    Column("created_at", Text, server_default=func.current_timestamp()),
    CheckConstraint(_in_list("type", ENTITY_TYPES), name="ck_entities_type"),
    Index("idx_entities_type", "type"),
    Index("idx_entities_country", "country_of_registration"),
)

entity_names_table = Table(
    "entity_names",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("entity_id", Text, ForeignKey("entities.id"), nullable=False),
    Column("english", Text),
    Column("chinese", Text),
    Column("is_primary", Integer, server_default="0"),
)

announcements_table = Table(
    "announcements",
    metadata,
    Column("id", Text, primary_key=True),
    Column("number", Text, nullable=False),
    Column("title", Text),
    Column("date", Text),
    Column("effective_date", Text),
    Column("issuing_authority", Text),
    Column("department", Text),
    Column("source_url", Text),
    Column("list_type", Text),
    Column("reason", Text),
    Column("created_at", Text, server_default=func.current_timestamp()),
    CheckConstraint(_in_list("list_type", LIST_TYPES), name="ck_announcements_list_type"),
    Index("idx_announcements_list_type", "list_type"),
    Index("idx_announcements_date", "date"),
)

legal_instruments_table = Table(
    "legal_instruments",
    metadata,
    Column("id", Text, primary_key=True),
    Column("name_chinese", Text, nullable=False),
    Column("name_english", Text),
    Column("short_name", Text),
    Column("enacted_date", Text),
    Column("amended_date", Text),
    Column("url", Text),
    Column("created_at", Text, server_default=func.current_timestamp()),
)

sanction_entries_table = Table(
    "sanction_entries",
    metadata,
    Column("id", Text, primary_key=True),
    Column("entity_id", Text, ForeignKey("entities.id"), nullable=False),
    Column("announcement_id", Text, ForeignKey("announcements.id"), nullable=False),
    Column("status", Text, server_default="active"),
    Column("listed_date", Text),
    Column("delisted_date", Text),
    Column("created_at", Text, server_default=func.current_timestamp()),
    CheckConstraint(_in_list("status", ENTRY_STATUSES), name="ck_sanction_entries_status"),
    Index("idx_entries_entity", "entity_id"),
    Index("idx_entries_announcement", "announcement_id"),
    Index("idx_entries_status", "status"),
)

entry_legal_instruments_table = Table(
    "entry_legal_instruments",
    metadata,
    Column("entry_id", Text, ForeignKey("sanction_entries.id"), primary_key=True),
    Column("legal_instrument_id", Text, ForeignKey("legal_instruments.id"), primary_key=True),
)

entry_measures_table = Table(
    "entry_measures",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("entry_id", Text, ForeignKey("sanction_entries.id"), nullable=False),
    Column("measure", Text, nullable=False),
)

announcement_measures_table = Table(
    "announcement_measures",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("announcement_id", Text, ForeignKey("announcements.id"), nullable=False),
    Column("measure", Text, nullable=False),
)
