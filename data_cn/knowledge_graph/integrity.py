"""Integrity checks and sample queries over the loaded knowledge graph."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from sqlalchemy import func, select

from .tables import (
    announcements_table,
    entities_table,
    entry_legal_instruments_table,
    entry_measures_table,
    legal_instruments_table,
    sanction_entries_table,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine
    from sqlalchemy.sql import Select

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class IntegrityCheck:
    number: int
    name: str
    actual: int
    expected: int

    @property
    def passed(self) -> bool:
        return self.actual == self.expected

    def __str__(self) -> str:
        status = "PASS" if self.passed else "FAIL"
        return f"[{status}] Test {self.number} - {self.name}: {self.actual} (expected: {self.expected})"


@dataclass
class IntegrityReport:
    checks: list[IntegrityCheck] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(check.passed for check in self.checks)

    @property
    def passed_count(self) -> int:
        return sum(1 for check in self.checks if check.passed)

    @property
    def failed_count(self) -> int:
        return len(self.checks) - self.passed_count

    def render(self) -> str:
        lines = ["=== Knowledge Graph Integrity Tests ==="]
        lines.extend(str(check) for check in self.checks)
        lines.append("")
        lines.append("=== Summary ===")
        lines.append(f"Passed: {self.passed_count}, Failed: {self.failed_count}")
        return "\n".join(lines)


def _count(connection: Connection, query: Select[Any]) -> int:
    return connection.execute(query).scalar_one()


def _orphan_entity_entries() -> Select[Any]:
    entries = sanction_entries_table
    return (
        select(func.count())
        .select_from(entries.outerjoin(entities_table, entries.c.entity_id == entities_table.c.id))
        .where(entities_table.c.id.is_(None))
    )


def _orphan_announcement_entries() -> Select[Any]:
    entries = sanction_entries_table
    return (
        select(func.count())
        .select_from(
            entries.outerjoin(announcements_table, entries.c.announcement_id == announcements_table.c.id)
        )
        .where(announcements_table.c.id.is_(None))
    )


def _orphan_legal_instrument_refs() -> Select[Any]:
    refs = entry_legal_instruments_table
    return (
        select(func.count())
        .select_from(
            refs.outerjoin(
                legal_instruments_table, refs.c.legal_instrument_id == legal_instruments_table.c.id
            )
        )
        .where(legal_instruments_table.c.id.is_(None))
    )


def _entries_without_measures() -> Select[Any]:
    entries = sanction_entries_table
    return (
        select(func.count())
        .select_from(entries.outerjoin(entry_measures_table, entries.c.id == entry_measures_table.c.entry_id))
        .where(entry_measures_table.c.id.is_(None))
    )


def run_integrity_checks(
    engine: Engine,
    *,
    expected_entities: int | None = None,
    expected_entries: int | None = None,
) -> IntegrityReport:
    """Run the knowledge graph integrity checks.

    Count checks only run when an expected count is given; the reference
    checks always run and expect zero orphans.
    """
    report = IntegrityReport()
    number = 0

    def add(name: str, actual: int, expected: int) -> None:
        nonlocal number
        number += 1
        check = IntegrityCheck(number=number, name=name, actual=actual, expected=expected)
        log.debug("%s", check)
        report.checks.append(check)

    with engine.connect() as connection:
        if expected_entities is not None:
            add("Entity count", _count(connection, select(func.count()).select_from(entities_table)), expected_entities)
        if expected_entries is not None:
            add(
                "Entry count",
                _count(connection, select(func.count()).select_from(sanction_entries_table)),
                expected_entries,
            )
        add("Orphan entries (entity)", _count(connection, _orphan_entity_entries()), 0)
        add("Orphan entries (announcement)", _count(connection, _orphan_announcement_entries()), 0)
        add("Orphan legal instrument refs", _count(connection, _orphan_legal_instrument_refs()), 0)
        add("Entries without measures", _count(connection, _entries_without_measures()), 0)

    if not report.passed:
        log.warning("%d integrity check(s) failed", report.failed_count)
    return report


def entities_by_country(engine: Engine, country: str, limit: int = 5) -> list[dict[str, Any]]:
    query = (
        select(entities_table.c.id, entities_table.c.english_name)
        .where(entities_table.c.country_of_registration == country)
        .order_by(entities_table.c.id)
        .limit(limit)
    )
    with engine.connect() as connection:
        return [dict(row) for row in connection.execute(query).mappings()]


def announcement_details(engine: Engine) -> dict[str, Any] | None:
    query = (
        select(announcements_table.c.id, announcements_table.c.number, announcements_table.c.title)
        .order_by(announcements_table.c.id)
        .limit(1)
    )
    with engine.connect() as connection:
        row = connection.execute(query).mappings().first()
    return dict(row) if row is not None else None


def first_entry_details(engine: Engine) -> dict[str, Any] | None:
    """Return one sanction entry joined with its entity and announcement."""
    entries = sanction_entries_table
    query = (
        select(
            entries.c.id,
            entities_table.c.english_name,
            announcements_table.c.number,
            entries.c.status,
        )
        .join_from(entries, entities_table, entries.c.entity_id == entities_table.c.id)
        .join_from(entries, announcements_table, entries.c.announcement_id == announcements_table.c.id)
        .order_by(entries.c.id)
        .limit(1)
    )
    with engine.connect() as connection:
        row = connection.execute(query).mappings().first()
    return dict(row) if row is not None else None
