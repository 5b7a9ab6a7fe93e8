from __future__ import annotations

import pytest

from data_cn.models.schema_types import SchemaType
from data_cn.resolvers.schema_resolver import (
    CONTENT_RULES,
    SchemaResolver,
    schema_resolver,
)


@pytest.mark.parametrize(
    "path",
    [
        "sources/sanction-lists/anti-sanction-list/test.yml",
        "sources/sanction-lists/import-export-control-list/test.yml",
        "sources/sanction-lists/unrealiable-entity-list/test.yml",
    ],
)
def test_standard_directories_resolve_to_announcement(path: str) -> None:
    assert schema_resolver.resolve(path) is SchemaType.ANNOUNCEMENT


@pytest.mark.parametrize(
    "path",
    [
        "sources/sanction-lists/unreliable-entity-list-updates/test.yml",
        "sources/sanction-updates/test.yml",
        "SOURCES/Sanction-Updates/test.yml",
    ],
)
def test_modification_directories_resolve_to_modification(path: str) -> None:
    assert schema_resolver.resolve(path) is SchemaType.MODIFICATION


def test_legal_instrument_directory_is_case_insensitive() -> None:
    assert schema_resolver.resolve("sources/Legal-Instruments/afsl.yml") is SchemaType.LEGAL_INSTRUMENT


def test_legal_instrument_path_wins_over_content() -> None:
    content = {"measure_modifications": [], "sanction_details": {}}

    assert schema_resolver.resolve("sources/legal-instruments/x.yml", content) is SchemaType.LEGAL_INSTRUMENT


def test_modification_path_wins_over_content() -> None:
    content = {"title": "t", "content": "c"}

    assert schema_resolver.resolve("sources/sanction-updates/x.yml", content) is SchemaType.MODIFICATION


def test_legal_instrument_path_wins_over_modification_path() -> None:
    path = "sources/sanction-updates/legal-instruments/x.yml"

    assert schema_resolver.resolve(path) is SchemaType.LEGAL_INSTRUMENT


@pytest.mark.parametrize(
    ("content", "expected"),
    [
        ({"measure_modifications": {}}, SchemaType.MODIFICATION),
        ({"sanction_details": {}}, SchemaType.ANNOUNCEMENT),
        ({"title": "t", "content": "c"}, SchemaType.LEGAL_INSTRUMENT),
        ({}, SchemaType.ANNOUNCEMENT),
        ({"title": "only a title"}, SchemaType.ANNOUNCEMENT),
    ],
)
def test_content_fallback(content: dict, expected: SchemaType) -> None:
    assert schema_resolver.resolve("x/y.ext", content) is expected


def test_content_rules_follow_priority_order() -> None:
    content = {"measure_modifications": {}, "sanction_details": {}, "title": "t", "content": "c"}

    assert schema_resolver.resolve("x/y.ext", content) is SchemaType.MODIFICATION
    assert [schema_type for _, schema_type in CONTENT_RULES] == [
        SchemaType.MODIFICATION,
        SchemaType.ANNOUNCEMENT,
        SchemaType.LEGAL_INSTRUMENT,
    ]


@pytest.mark.parametrize("content", [None, ["sanction_details"], "sanction_details", 42])
def test_non_mapping_content_defaults_to_announcement(content: object) -> None:
    assert schema_resolver.resolve("x/y.ext", content) is SchemaType.ANNOUNCEMENT


def test_skip_types_turn_resolution_into_skip() -> None:
    resolver = SchemaResolver(skip_types={SchemaType.LEGAL_INSTRUMENT})

    assert resolver.resolve("sources/legal-instruments/afsl.yml") is None
    assert resolver.resolve("sources/anti-sanction-list/a.yml") is SchemaType.ANNOUNCEMENT


def test_custom_directory_patterns() -> None:
    resolver = SchemaResolver(
        legal_instrument_directories=["Laws"],
        modification_directories=["changes"],
    )

    assert resolver.resolve("data/laws/a.yml") is SchemaType.LEGAL_INSTRUMENT
    assert resolver.resolve("data/changes/a.yml") is SchemaType.MODIFICATION
    assert resolver.resolve("data/legal-instruments/a.yml") is SchemaType.ANNOUNCEMENT


def test_resolve_is_deterministic() -> None:
    content = {"sanction_details": {}}

    first = schema_resolver.resolve("x/y.ext", content)
    second = schema_resolver.resolve("x/y.ext", content)

    assert first is second is SchemaType.ANNOUNCEMENT
    assert content == {"sanction_details": {}}
