from __future__ import annotations

import json
from pathlib import Path

import rdflib
from click.testing import CliRunner

from dataPackage.cli.__main__ import cli

TITLE = "http://purl.org/dc/terms/title"


def _relations(tmp_path: Path) -> Path:
    path = tmp_path / "relations.jsonl"
    rows = [{"subject": "a", "predicate": TITLE, "object": "Dataset A", "objectType": "literal"}]
    path.write_text("\n".join(json.dumps(r) for r in rows) + "\n", encoding="utf-8")
    return path


def test_build_to_stdout(tmp_path: Path, base: str) -> None:
    runner = CliRunner()
    result = runner.invoke(
        cli,
        [
            "resmap",
            "build",
            "--relations",
            str(_relations(tmp_path)),
            "-m",
            "a",
            "-m",
            "b",
            "--id",
            "rm1",
            "--syntax",
            "ntriples",
        ],
    )
    assert result.exit_code == 0, result.output
    graph = rdflib.Graph()
    graph.parse(data=result.stdout_bytes, format="nt")
    assert len(graph) == 1 + 6 + 5
    assert (rdflib.URIRef(f"{base}a"), rdflib.URIRef(TITLE), rdflib.Literal("Dataset A")) in graph


def test_build_to_file_with_namespace(tmp_path: Path) -> None:
    out = tmp_path / "rm1.rdf"
    runner = CliRunner()
    result = runner.invoke(
        cli,
        [
            "resmap",
            "build",
            "-m",
            "a",
            "--id",
            "rm1",
            "--namespace",
            "ex=http://example.org/terms#",
            "--out",
            str(out),
        ],
    )
    assert result.exit_code == 0, result.output
    text = out.read_text(encoding="utf-8")
    assert 'xmlns:ex="http://example.org/terms#"' in text
    assert "<ore:isAggregatedBy" in text


def test_build_rejects_conflicting_namespace(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        cli, ["resmap", "build", "-m", "a", "--namespace", "ore=http://example.org/ore#"]
    )
    assert result.exit_code != 0


def test_build_rejects_unknown_syntax() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["resmap", "build", "-m", "a", "--syntax", "rdfa"])
    assert result.exit_code == 2


def test_build_reports_unwritable_destination(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        cli, ["resmap", "build", "-m", "a", "--out", str(tmp_path / "missing" / "rm.rdf")]
    )
    assert result.exit_code == 1
    assert "rm.rdf" in result.output


def test_show_prints_table(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        cli, ["resmap", "show", "--relations", str(_relations(tmp_path)), "-m", "a", "--id", "rm1"]
    )
    assert result.exit_code == 0, result.output
    assert "Predicate" in result.output
    assert "Dataset A" in result.output
    assert "9 statements" in result.output


def test_diagnose_lists_settings() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["diagnose"])
    assert result.exit_code == 0
    info = json.loads(result.output)
    assert info["default_syntax"] == "rdfxml"
    assert info["namespaces"]["ore"] == "http://www.openarchives.org/ore/terms/"
