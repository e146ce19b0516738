from __future__ import annotations

import json
from pathlib import Path

import pytest

from dataPackage.errors import InvalidRelationError
from dataPackage.kg.relations import load_relations
from dataPackage.kg.triples import NodeKind

TITLE = "http://purl.org/dc/terms/title"


def test_load_csv(tmp_path: Path) -> None:
    path = tmp_path / "relations.csv"
    path.write_text(
        "subject,predicate,object,subjectType,objectType,dataTypeURI\n"
        f"a,{TITLE},Dataset A,resource,literal,NA\n"
        "meta,http://purl.org/spar/cito/documents,a,resource,resource,\n",
        encoding="utf-8",
    )
    relations = load_relations(path)
    assert [r.subject for r in relations] == ["a", "meta"]
    assert relations[0].object_type is NodeKind.LITERAL
    assert relations[0].datatype_uri is None


def test_load_csv_requires_core_columns(tmp_path: Path) -> None:
    path = tmp_path / "relations.csv"
    path.write_text("subject,object\na,b\n", encoding="utf-8")
    with pytest.raises(InvalidRelationError):
        load_relations(path)


def test_load_jsonl_objects_and_arrays(tmp_path: Path) -> None:
    path = tmp_path / "relations.jsonl"
    rows = [
        {"subject": "a", "predicate": TITLE, "object": "Dataset A", "objectType": "literal"},
        ["meta", "http://purl.org/spar/cito/documents", "a"],
    ]
    path.write_text("\n".join(json.dumps(r) for r in rows) + "\n\n", encoding="utf-8")
    relations = load_relations(path)
    assert len(relations) == 2
    assert relations[1].object == "a"


def test_load_json_array(tmp_path: Path) -> None:
    path = tmp_path / "relations.json"
    path.write_text(json.dumps([["a", TITLE, "A", "resource", "literal"]]), encoding="utf-8")
    assert load_relations(path)[0].object_type is NodeKind.LITERAL


def test_bad_jsonl_line_reports_position(tmp_path: Path) -> None:
    path = tmp_path / "relations.jsonl"
    path.write_text('{"subject": "a"\n', encoding="utf-8")
    with pytest.raises(InvalidRelationError, match=":1:"):
        load_relations(path)


def test_unknown_suffix(tmp_path: Path) -> None:
    path = tmp_path / "relations.txt"
    path.write_text("", encoding="utf-8")
    with pytest.raises(InvalidRelationError):
        load_relations(path)
