from __future__ import annotations

from pathlib import Path

import pytest

from dataPackage.config import CONFIG_ENV, RESOLVE_BASE_ENV, PackageConfig, load_config
from dataPackage.kg.iri import DEFAULT_RESOLVE_BASE


def test_defaults_without_file() -> None:
    cfg = load_config()
    assert cfg == PackageConfig()
    assert cfg.resolve_base == DEFAULT_RESOLVE_BASE
    assert cfg.default_syntax == "rdfxml"


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    assert load_config(tmp_path / "absent.yml") == PackageConfig()


def test_yaml_settings(tmp_path: Path) -> None:
    path = tmp_path / "datapackage.yml"
    path.write_text(
        """
resolve_base: https://example.org/resolve/
default_syntax: Turtle
namespaces:
  ex: http://example.org/terms#
logging:
  enabled: false
  max_details_bytes: 128
""",
        encoding="utf-8",
    )
    cfg = load_config(path)
    assert cfg.resolve_base == "https://example.org/resolve/"
    assert cfg.default_syntax == "turtle"
    assert cfg.namespaces == {"http://example.org/terms#": "ex"}
    assert cfg.logging_enabled is False
    assert cfg.max_details_bytes == 128


def test_env_selects_file_and_overrides_base(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "datapackage.yml"
    path.write_text("default_syntax: ntriples\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV, str(path))
    monkeypatch.setenv(RESOLVE_BASE_ENV, "https://mirror.example.org/resolve/")
    cfg = load_config()
    assert cfg.default_syntax == "ntriples"
    assert cfg.resolve_base == "https://mirror.example.org/resolve/"


def test_unknown_syntax_rejected(tmp_path: Path) -> None:
    path = tmp_path / "datapackage.yml"
    path.write_text("default_syntax: rdfa\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)
