"""Relational knowledge graph built from processed sanctions records."""

from .integrity import (
    IntegrityCheck,
    IntegrityReport,
    announcement_details,
    entities_by_country,
    first_entry_details,
    run_integrity_checks,
)
from .loader import KnowledgeGraphLoader, LoadSummary, create_engine_for
from .tables import metadata

__all__ = [
    "IntegrityCheck",
    "IntegrityReport",
    "KnowledgeGraphLoader",
    "LoadSummary",
    "announcement_details",
    "create_engine_for",
    "entities_by_country",
    "first_entry_details",
    "metadata",
    "run_integrity_checks",
]
