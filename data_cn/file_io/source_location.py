from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional


SourceMap = Dict[str, Dict[str, int]]


@dataclass(frozen=True)
class SourceLocation:
    yaml_path: Optional[str] = None
    line: Optional[int] = None  # 1-based
    column: Optional[int] = None  # 1-based


def lookup_source(source_map: Optional[SourceMap], yaml_path: Optional[str]) -> SourceLocation:
    if not source_map or yaml_path is None:
        return SourceLocation(yaml_path=yaml_path)

    entry = source_map.get(yaml_path)
    if not entry:
        return SourceLocation(yaml_path=yaml_path)

    return SourceLocation(
        yaml_path=yaml_path,
        line=entry.get("line"),
        column=entry.get("column"),
    )


def format_source(loc: Optional[SourceLocation]) -> str:
    if not loc or loc.line is None:
        return ""

    if loc.column is not None:
        return f" (line {loc.line}, column {loc.column})"
    return f" (line {loc.line})"
