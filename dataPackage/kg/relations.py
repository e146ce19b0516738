"""Load relation tables from CSV or JSON Lines files."""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import List

from dataPackage.errors import InvalidRelationError

from .triples import Relation

RELATION_COLUMNS = ("subject", "predicate", "object", "subjectType", "objectType", "dataTypeURI")


def _load_csv(path: Path) -> List[Relation]:
    with path.open("r", encoding="utf-8", newline="") as fh:
        reader = csv.DictReader(fh)
        missing = {"subject", "predicate", "object"} - set(reader.fieldnames or [])
        if missing:
            raise InvalidRelationError(f"{path}: missing columns {sorted(missing)}")
        return [Relation.from_mapping(row) for row in reader]


def _coerce_row(row: object, where: str) -> Relation:
    if isinstance(row, list):
        return Relation.coerce(row)
    if isinstance(row, dict):
        return Relation.from_mapping(row)
    raise InvalidRelationError(f"{where}: expected an object or array")


def _load_json(path: Path) -> List[Relation]:
    try:
        rows = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise InvalidRelationError(f"{path}: {exc.msg}") from exc
    if not isinstance(rows, list):
        raise InvalidRelationError(f"{path}: expected a JSON array of relations")
    return [_coerce_row(row, f"{path}[{i}]") for i, row in enumerate(rows)]


def _load_jsonl(path: Path) -> List[Relation]:
    relations: List[Relation] = []
    with path.open("r", encoding="utf-8") as fh:
        for lineno, line in enumerate(fh, start=1):
            if not line.strip():
                continue
            try:
                row = json.loads(line)
            except json.JSONDecodeError as exc:
                raise InvalidRelationError(f"{path}:{lineno}: {exc.msg}") from exc
            relations.append(_coerce_row(row, f"{path}:{lineno}"))
    return relations


def load_relations(path: Path) -> List[Relation]:
    """Read a relation table; the format follows the file suffix."""

    suffix = path.suffix.lower()
    if suffix == ".csv":
        return _load_csv(path)
    if suffix == ".json":
        return _load_json(path)
    if suffix in {".jsonl", ".ndjson"}:
        return _load_jsonl(path)
    raise InvalidRelationError(f"unsupported relation file type: {path.name}")


__all__ = ["RELATION_COLUMNS", "load_relations"]
