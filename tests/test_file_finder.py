from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from data_cn.file_io.file_finder import FileFinder
from data_cn.file_io.source_location import SourceLocation, format_source, lookup_source

if TYPE_CHECKING:
    from collections.abc import Callable


def test_find_all_is_sorted_and_recursive(sources_dir: Path, write_yaml: Callable[[str, str], Path]) -> None:
    write_yaml("sources/notes.txt", "not yaml")
    finder = FileFinder(sources_dir)

    files = finder.find_all()

    assert files == sorted(files)
    assert [p.relative_to(sources_dir).as_posix() for p in files] == [
        "legal-instruments/afsl.yaml",
        "sanction-lists/anti-sanction-list/20221223.yml",
        "sanction-lists/unreliable-entity-list-updates/20230110.yml",
    ]


def test_find_in_subdirectory(sources_dir: Path) -> None:
    files = FileFinder(sources_dir).find_in("sanction-lists")

    assert len(files) == 2
    assert FileFinder(sources_dir).find_in("nonexistent") == []


def test_sources_exist(sources_dir: Path, tmp_path: Path) -> None:
    assert FileFinder(sources_dir).sources_exist()
    assert not FileFinder(tmp_path / "missing").sources_exist()
    assert FileFinder(tmp_path / "missing").find_all() == []


def test_lookup_and_format_source() -> None:
    source_map = {"/announcement": {"line": 2, "column": 3}}

    assert format_source(lookup_source(source_map, "/announcement")) == " (line 2, column 3)"
    assert format_source(lookup_source(source_map, "/missing")) == ""
    assert format_source(lookup_source(None, "/announcement")) == ""
    assert format_source(SourceLocation(line=7)) == " (line 7)"
