from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from data_cn.cli import build_parser, main
from data_cn.validator_config import validator_config
from tests.documents import INVALID_ANNOUNCEMENT, UNPARSABLE

if TYPE_CHECKING:
    from collections.abc import Callable


def _run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    return excinfo.value.code


def test_validate_valid_directory(sources_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = _run(["validate", "-s", str(sources_dir)])

    out = capsys.readouterr().out
    assert code == 0
    assert "Invalid files:" not in out
    assert "Total files: 3\nValid: 3\nInvalid: 0\n" in out


def test_validate_invalid_directory(
    sources_dir: Path,
    write_yaml: Callable[[str, str], Path],
    capsys: pytest.CaptureFixture[str],
) -> None:
    write_yaml("sources/sanction-lists/anti-sanction-list/20230407.yml", INVALID_ANNOUNCEMENT)
    write_yaml("sources/sanction-lists/anti-sanction-list/broken.yml", UNPARSABLE)

    code = _run(["validate", str(sources_dir)])

    out = capsys.readouterr().out
    assert code == 1
    assert "Invalid files:\n" in out
    assert "20230407.yml (announcement)\n  - #/announcement: 'issuing_authority' is a required property" in out
    assert "broken.yml - Parse Error: " in out
    assert out.endswith("Parse errors: 1\nSchema errors: 1\n")


def test_validate_single_file(write_yaml: Callable[[str, str], Path], capsys: pytest.CaptureFixture[str]) -> None:
    path = write_yaml("sources/anti-sanction-list/20230407.yml", INVALID_ANNOUNCEMENT)

    code = _run(["validate", str(path), "--verbose"])

    out = capsys.readouterr().out
    assert code == 1
    assert "Total files: 1\n" in out


def test_validate_json_format(sources_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = _run(["validate", "-s", str(sources_dir), "--format", "json", "-j", "2"])

    data = json.loads(capsys.readouterr().out)
    assert code == 0
    assert data["valid"] is True
    assert data["total"] == 3
    assert {r["schema_type"] for r in data["results"]} == {"announcement", "modification", "legal_instrument"}


def test_validate_missing_sources(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = _run(["validate", "-s", str(tmp_path / "nonexistent")])

    assert code == 2
    assert capsys.readouterr().out.startswith("Error: Sources directory not found")


def test_list(sources_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = _run(["list", "-s", str(sources_dir)])

    out = capsys.readouterr().out
    assert code == 0
    assert out.startswith(f"YAML files in {sources_dir}:\n")
    assert "afsl.yaml (legal_instrument)" in out
    assert "20230110.yml (modification)" in out
    assert out.endswith("\nTotal: 3 files\n")


def test_list_missing_sources(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = _run(["list", "-s", str(tmp_path / "nonexistent")])

    assert code == 2
    assert "Sources directory not found" in capsys.readouterr().out


def test_schema_info(capsys: pytest.CaptureFixture[str]) -> None:
    code = _run(["schema", "modification"])

    out = capsys.readouterr().out
    assert code == 0
    assert "(modification): " in out
    assert "cn-measure-modification.yml" in out
    assert "Required fields: announcement, measure_modifications" in out


def test_schema_defaults_to_announcement(capsys: pytest.CaptureFixture[str]) -> None:
    code = _run(["schema"])

    assert code == 0
    assert "(announcement): " in capsys.readouterr().out


def test_unknown_schema_type(capsys: pytest.CaptureFixture[str]) -> None:
    code = _run(["schema", "entity"])

    out = capsys.readouterr().out
    assert code == 1
    assert "Unknown schema type: entity" in out
    assert "Available types: announcement, modification, legal_instrument" in out


def test_command_is_required() -> None:
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args([])

    assert excinfo.value.code == 2


def test_validate_missing_named_document(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    missing = tmp_path / "missing.yml"

    code = _run(["validate", str(missing)])

    out = capsys.readouterr().out
    assert code == 1
    assert f"✗ {missing} - Parse Error: File not found" in out
    assert "Parse errors: 1\n" in out


def test_validate_missing_schema_directory(
    sources_dir: Path,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(validator_config, "schemas_dir", str(tmp_path / "no-schemas"))

    code = _run(["validate", "-s", str(sources_dir)])

    assert code == 2
    assert capsys.readouterr().out.startswith("Error: Schema directory not found")


@pytest.mark.parametrize("text", ["- just\n- a list\n", "type: [object\n"])
def test_validate_malformed_schema(
    sources_dir: Path,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    text: str,
) -> None:
    schemas = tmp_path / "schemas"
    schemas.mkdir()
    (schemas / "cn-announcement.yml").write_text(text, encoding="utf-8")
    monkeypatch.setattr(validator_config, "schemas_dir", str(schemas))

    code = _run(["validate", "-s", str(sources_dir / "sanction-lists" / "anti-sanction-list")])

    assert code == 2
    assert capsys.readouterr().out.startswith("Error: ")


def test_schema_missing_resource(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(validator_config, "schemas_dir", str(tmp_path))

    code = _run(["schema", "legal-instrument"])

    assert code == 2
    assert capsys.readouterr().out.startswith("Schema error: Schema not found")


def test_schema_malformed_resource(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    (tmp_path / "cn-announcement.yml").write_text("type: [object\n", encoding="utf-8")
    monkeypatch.setattr(validator_config, "schemas_dir", str(tmp_path))

    code = _run(["schema"])

    assert code == 2
    assert capsys.readouterr().out.startswith("Schema error: Failed to load schema")
